from __future__ import annotations

import logging
import shutil
from pathlib import Path

from modpacker.config import ARCHIVE_EXT_DEFAULT
from modpacker.core.archiver import Archiver
from modpacker.core.classify import list_entries
from modpacker.core.normalize import normalize_category_names
from modpacker.models import SourceEntry, StagingSummary

logger = logging.getLogger(__name__)


def reset_staging(staging_dir: str) -> Path:
    """
    Remove the staging folder (if any) and create it empty.
    """
    path = Path(staging_dir)
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        pass
    path.mkdir(parents=True, exist_ok=True)
    return path


def remove_staging(staging_dir: str) -> None:
    try:
        shutil.rmtree(staging_dir)
    except FileNotFoundError:
        return
    logger.info("Removed staging folder: %s", staging_dir)


def _relname(entry: SourceEntry, mods_root: Path) -> str:
    return str(Path(entry.path).relative_to(mods_root)).replace("\\", "/")


def _stage_entry(
    entry: SourceEntry,
    mods_root: Path,
    staging: Path,
    archiver: Archiver,
    archive_ext: str,
    summary: StagingSummary,
) -> None:
    rel = _relname(entry, mods_root)

    if entry.kind == "ignored":
        logger.debug("Skipping ignored entry: %s", rel)
        summary.ignored.append(rel)
        return

    if entry.kind == "loose":
        logger.info("Copying loose folder: %s", rel)
        shutil.copytree(entry.path, staging / entry.name.lower(), dirs_exist_ok=True)
        summary.copied.append(rel)
        return

    if entry.kind == "archive":
        logger.info("Extracting archive: %s", rel)
        archiver.extract(entry.path, str(staging))
        # merge extracted category folders in traversal order
        normalize_category_names(str(staging))
        summary.extracted.append(rel)
        return

    if entry.kind == "subfolder":
        if entry.depth > 0:
            # only one level of plain subfolders is walked
            return
        for child in list_entries(entry.path, depth=entry.depth + 1, archive_ext=archive_ext):
            _stage_entry(child, mods_root, staging, archiver, archive_ext, summary)
        return

    logger.warning("Unrecognized entry skipped: %s", rel)
    summary.unrecognized.append(rel)


def stage_mods(
    mods_dir: str,
    staging_dir: str,
    archiver: Archiver,
    archive_ext: str = ARCHIVE_EXT_DEFAULT,
) -> StagingSummary:
    """
    Copy loose category folders and extract archives from the mods folder
    into staging, in name order. Later entries overwrite earlier ones.

    Archiver failures propagate and stop the run.
    """
    mods_root = Path(mods_dir).resolve()
    staging = Path(staging_dir)
    staging.mkdir(parents=True, exist_ok=True)

    summary = StagingSummary()
    for entry in list_entries(str(mods_root), depth=0, archive_ext=archive_ext):
        _stage_entry(entry, mods_root, staging, archiver, archive_ext, summary)

    logger.info(
        "Staging complete: %d folder(s) copied, %d archive(s) extracted, %d skipped.",
        len(summary.copied),
        len(summary.extracted),
        len(summary.ignored) + len(summary.unrecognized),
    )
    return summary
