from __future__ import annotations

from pathlib import Path
from typing import List

from modpacker.config import ARCHIVE_EXT_DEFAULT, LOOSE_CATEGORIES
from modpacker.models import EntryKind, SourceEntry

IGNORED_PREFIXES = (".", "_")


def _normalize_ext(name: str) -> str:
    # suffix includes dot; normalize to lower without dot. "" means no extension
    return Path(name).suffix.lower().lstrip(".")


def is_loose_category(name: str) -> bool:
    return name.lower() in LOOSE_CATEGORIES


def classify_entry(
    name: str,
    is_dir: bool,
    depth: int = 0,
    archive_ext: str = ARCHIVE_EXT_DEFAULT,
) -> EntryKind:
    """
    Decide what the staging pass does with one entry of the mods tree.

    The ignore prefix wins over every other rule. `depth` does not change the
    result; callers decide whether a "subfolder" is descended into.
    """
    if name.startswith(IGNORED_PREFIXES):
        return "ignored"

    if is_dir:
        if is_loose_category(name):
            return "loose"
        return "subfolder"

    if _normalize_ext(name) == archive_ext.lower().lstrip("."):
        return "archive"

    return "unrecognized"


def list_entries(
    folder: str,
    depth: int = 0,
    archive_ext: str = ARCHIVE_EXT_DEFAULT,
) -> List[SourceEntry]:
    """
    Classified children of `folder`, sorted by name (plain string order).
    """
    root = Path(folder)
    if not root.is_dir():
        raise ValueError(f"Not a directory: {folder}")

    entries: List[SourceEntry] = []
    for p in sorted(root.iterdir(), key=lambda x: x.name):
        kind = classify_entry(p.name, p.is_dir(), depth=depth, archive_ext=archive_ext)
        entries.append(SourceEntry(path=str(p), name=p.name, kind=kind, depth=depth))
    return entries
