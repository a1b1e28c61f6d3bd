from __future__ import annotations

import json
import tempfile
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional

from modpacker.config import (
    ARCHIVE_EXT_DEFAULT,
    ARCHIVER_EXE_DEFAULT,
    ARCHIVER_PROBE_TOKEN,
    FORMAT_GENERAL,
    FORMAT_TEXTURES,
    SETTINGS_DIRNAME,
    SETTINGS_FILENAME,
)


@dataclass(frozen=True)
class ToolSettings:
    archiver_exe: str
    probe_token: str
    archive_ext: str  # lower, no dot
    general_format: str
    texture_format: str
    general_archive_name: str
    texture_archive_name: str
    data_dirname: str
    staging_dir: str
    game_ini_path: str


def default_settings() -> ToolSettings:
    return ToolSettings(
        archiver_exe=ARCHIVER_EXE_DEFAULT,
        probe_token=ARCHIVER_PROBE_TOKEN,
        archive_ext=ARCHIVE_EXT_DEFAULT,
        general_format=FORMAT_GENERAL,
        texture_format=FORMAT_TEXTURES,
        general_archive_name="ModPacker - Main.ba2",
        texture_archive_name="ModPacker - Textures.ba2",
        data_dirname="Data",
        staging_dir=str(Path(tempfile.gettempdir()) / "modpacker_staging"),
        game_ini_path=str(
            Path.home() / "Documents" / "My Games" / "Fallout 76" / "Fallout76Custom.ini"
        ),
    )


def default_settings_path() -> Path:
    return Path.home() / SETTINGS_DIRNAME / SETTINGS_FILENAME


def to_json_dict(settings: ToolSettings) -> Dict[str, Any]:
    return asdict(settings)


def from_json_dict(d: Dict[str, Any]) -> ToolSettings:
    """
    Build settings from a (possibly partial) JSON dict.
    Missing or blank keys fall back to defaults; unknown keys are ignored.
    """
    base = to_json_dict(default_settings())
    for f in fields(ToolSettings):
        value = d.get(f.name)
        if value is None or not str(value).strip():
            continue
        base[f.name] = str(value).strip()

    base["archive_ext"] = base["archive_ext"].lower().lstrip(".")
    return ToolSettings(**base)


def load_settings(path: Optional[str] = None) -> ToolSettings:
    """
    Read settings from `path` (or the default location).
    A missing default file yields the built-in defaults; a missing explicit file is an error.
    """
    if path:
        p = Path(path)
        d = json.loads(p.read_text(encoding="utf-8"))
        return from_json_dict(d)

    p = default_settings_path()
    if not p.exists():
        return default_settings()
    d = json.loads(p.read_text(encoding="utf-8"))
    return from_json_dict(d)


def save_settings(path: Optional[str], settings: ToolSettings) -> Path:
    p = Path(path) if path else default_settings_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(to_json_dict(settings), indent=2), encoding="utf-8")
    return p
