from __future__ import annotations

from pathlib import Path

def main():
    root = Path("demo_mods")
    (root / "_Disabled" / "meshes").mkdir(parents=True, exist_ok=True)
    (root / "ModB" / "meshes" / "armor").mkdir(parents=True, exist_ok=True)
    (root / "Textures" / "armor").mkdir(parents=True, exist_ok=True)
    (root / "Strings").mkdir(parents=True, exist_ok=True)
    (root / "SubPack").mkdir(parents=True, exist_ok=True)

    (root / "_Disabled" / "meshes" / "old.nif").write_bytes(b"dummy_nif")
    (root / "ModB" / "meshes" / "armor" / "helmet.nif").write_bytes(b"dummy_nif")
    (root / "Textures" / "armor" / "helmet_d.dds").write_bytes(b"dummy_dds")
    (root / "Strings" / "ModB_en.strings").write_bytes(b"dummy_strings")
    # archives are placeholders; replace with real .ba2 files to pack them
    (root / "ModA.ba2").write_bytes(b"BTDX")
    (root / "SubPack" / "ModC.ba2").write_bytes(b"BTDX")
    (root / "readme.txt").write_text("Not a mod file; reported as unrecognized.\n", encoding="utf-8")

    print(f"Created demo mods folder at: {root.resolve()}")

if __name__ == "__main__":
    main()
