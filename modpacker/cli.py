from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from modpacker.config import APP_NAME, APP_VERSION
from modpacker.core.advisory import report_game_config
from modpacker.core.archiver import Archiver, ArchiverError
from modpacker.core.environment import validate_environment
from modpacker.core.normalize import normalize_category_names
from modpacker.core.outputs import build_outputs
from modpacker.core.settings import ToolSettings, default_settings, load_settings, save_settings
from modpacker.core.shortcut import write_shortcut
from modpacker.core.staging import remove_staging, reset_staging, stage_mods
from modpacker.models import ToolPaths, ValidationResult
from modpacker.ui import dialogs

logger = logging.getLogger("modpacker")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modpacker",
        description="Pack loose mod folders and mod archives into two game archives.",
    )
    parser.add_argument("-a", "--archiver", help="Folder containing the archiver executable.")
    parser.add_argument("-m", "--mods", help="Folder with mod archives and loose mod folders.")
    parser.add_argument("-g", "--game", help="Game install folder.")
    parser.add_argument(
        "--save-shortcut",
        action="store_true",
        help="Write a launcher in the current folder that re-runs with these paths.",
    )
    parser.add_argument("--cleanup", action="store_true", help="Delete the staging folder when done.")
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Always ask for the folders with a picker dialog.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Require all three folders on the command line; never show pickers.",
    )
    parser.add_argument(
        "--open-config",
        action="store_true",
        help="Open the game config in a text editor when settings are missing.",
    )
    parser.add_argument(
        "--no-clipboard",
        action="store_true",
        help="Do not copy the missing config block to the clipboard.",
    )
    parser.add_argument("--settings", help="Settings JSON file (default: ~/.modpacker/settings.json).")
    parser.add_argument(
        "--write-settings",
        action="store_true",
        help="Write the effective settings file and exit.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return parser


def resolve_paths(args: argparse.Namespace) -> ToolPaths:
    """
    Fill missing folders from picker dialogs (or all of them with --interactive).
    A cancelled picker leaves the value empty; validation reports it.
    """
    values = {
        "archiver": args.archiver or "",
        "mods": args.mods or "",
        "game": args.game or "",
    }
    titles = {
        "archiver": "Select the archiver folder",
        "mods": "Select the mods folder",
        "game": "Select the game folder",
    }

    if not args.strict:
        for key in ("archiver", "mods", "game"):
            if values[key] and not args.interactive:
                continue
            picked = dialogs.pick_folder(titles[key], values[key])
            if picked:
                values[key] = picked
            else:
                logger.warning("No folder chosen for %s.", key)

    return ToolPaths(
        archiver_dir=os.path.normpath(values["archiver"]) if values["archiver"] else "",
        mods_dir=os.path.normpath(values["mods"]) if values["mods"] else "",
        game_dir=os.path.normpath(values["game"]) if values["game"] else "",
    )


def _print_results(results: List[ValidationResult]) -> None:
    for r in results:
        line = f"[{r.level}] {r.code}: {r.message}"
        if r.level.upper() == "ERROR":
            print(line, file=sys.stderr)
        else:
            print(line)


def run(paths: ToolPaths, settings: ToolSettings, archiver: Archiver, cleanup: bool = False):
    """
    Stage, normalize and pack. Returns (staging summary, pack result).
    """
    logger.info("Preparing staging folder: %s", settings.staging_dir)
    reset_staging(settings.staging_dir)

    summary = stage_mods(paths.mods_dir, settings.staging_dir, archiver, settings.archive_ext)
    normalize_category_names(settings.staging_dir)

    data_dir = str(Path(paths.game_dir) / settings.data_dirname)
    result = build_outputs(settings.staging_dir, data_dir, archiver, settings)

    if cleanup:
        remove_staging(settings.staging_dir)

    return summary, result


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.strict and args.interactive:
        parser.error("--strict and --interactive cannot be combined")
    if args.strict:
        missing = [f"--{name}" for name in ("archiver", "mods", "game") if not getattr(args, name)]
        if missing:
            parser.error(f"--strict requires {', '.join(missing)}")

    try:
        settings = load_settings(args.settings)
    except FileNotFoundError:
        if not args.write_settings:
            logger.error("Settings file not found: %s", args.settings)
            return 1
        settings = default_settings()
    except (OSError, ValueError) as e:
        logger.error("Could not read settings file %s: %s", args.settings or "(default)", e)
        return 1
    if args.write_settings:
        path = save_settings(args.settings, settings)
        print(f"Settings written: {path}")
        return 0

    paths = resolve_paths(args)
    exe_path = str(Path(paths.archiver_dir) / settings.archiver_exe) if paths.archiver_dir else ""
    archiver = Archiver(exe_path, probe_token=settings.probe_token)

    results = validate_environment(paths, archiver)
    _print_results(results)
    if any(r.level.upper() == "ERROR" for r in results):
        return 1

    try:
        _, result = run(paths, settings, archiver, cleanup=args.cleanup)

        if args.save_shortcut:
            shortcut = write_shortcut(os.getcwd(), paths, cleanup=args.cleanup)
            logger.info("Shortcut written: %s", shortcut)

        report_game_config(
            settings.game_ini_path,
            settings,
            copy_cb=None if args.no_clipboard else dialogs.copy_to_clipboard,
            open_cb=dialogs.open_in_editor,
            open_editor=args.open_config,
        )
    except (ArchiverError, OSError) as e:
        logger.error("Run aborted: %s", e)
        if isinstance(e, ArchiverError) and e.output:
            logger.error(e.output.strip())
        return 2

    logger.info(
        "Done. General archive: %s | Texture archive: %s | Strings copied: %s",
        result.general_archive or "-",
        result.texture_archive or "-",
        "yes" if result.strings_copied else "no",
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
