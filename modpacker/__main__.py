from modpacker.cli import main

raise SystemExit(main())
