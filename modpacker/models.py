from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

EntryKind = Literal["ignored", "loose", "archive", "subfolder", "unrecognized"]


@dataclass(frozen=True)
class ValidationResult:
    level: str  # INFO | WARNING | ERROR
    code: str   # stable short identifier (e.g. MODS_DIR_MISSING)
    message: str
    relpath: Optional[str] = None  # offending path when applicable


@dataclass(frozen=True)
class SourceEntry:
    path: str
    name: str
    kind: EntryKind
    depth: int  # 0 = direct child of the mods root


@dataclass(frozen=True)
class ToolPaths:
    archiver_dir: str
    mods_dir: str
    game_dir: str


@dataclass
class StagingSummary:
    copied: List[str] = field(default_factory=list)
    extracted: List[str] = field(default_factory=list)
    ignored: List[str] = field(default_factory=list)
    unrecognized: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PackResult:
    strings_copied: bool
    textures_packed: bool
    general_archive: Optional[str]
    texture_archive: Optional[str]
    general_sources: List[str]
