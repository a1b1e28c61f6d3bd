from __future__ import annotations

from pathlib import Path
from typing import List

from modpacker.core.archiver import Archiver
from modpacker.models import ToolPaths, ValidationResult


def _is_dir(path: str) -> bool:
    return bool(path and path.strip()) and Path(path).is_dir()


def validate_environment(paths: ToolPaths, archiver: Archiver) -> List[ValidationResult]:
    results: List[ValidationResult] = []

    # -------------------------
    # Rule: the three input folders exist
    # -------------------------
    checks = [
        ("ARCHIVER_DIR_MISSING", "Archiver folder", paths.archiver_dir),
        ("MODS_DIR_MISSING", "Mods folder", paths.mods_dir),
        ("GAME_DIR_MISSING", "Game folder", paths.game_dir),
    ]
    for code, label, path in checks:
        if not _is_dir(path):
            results.append(
                ValidationResult(
                    level="ERROR",
                    code=code,
                    message=f"{label} does not exist or is not a directory: '{path}'",
                    relpath=path or None,
                )
            )

    # -------------------------
    # Rule: archiver binary present and answers the probe
    # -------------------------
    if _is_dir(paths.archiver_dir):
        if not archiver.exists():
            results.append(
                ValidationResult(
                    level="ERROR",
                    code="ARCHIVER_EXE_MISSING",
                    message=f"Archiver executable not found: '{archiver.exe_path}'",
                    relpath=archiver.exe_path,
                )
            )
        elif not archiver.probe():
            results.append(
                ValidationResult(
                    level="ERROR",
                    code="ARCHIVER_PROBE_FAILED",
                    message=(
                        f"'{archiver.exe_path}' did not identify itself as the archiver "
                        f"(expected '{archiver.probe_token}' in its help output)."
                    ),
                    relpath=archiver.exe_path,
                )
            )

    if not any(r.level.upper() == "ERROR" for r in results):
        results.append(
            ValidationResult(
                level="INFO",
                code="ENV_OK",
                message="Archiver, mods and game folders look good.",
                relpath=None,
            )
        )

    return results
