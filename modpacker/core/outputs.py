from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List

from modpacker.config import STRINGS_FOLDER, TEXTURES_FOLDER
from modpacker.core.archiver import Archiver
from modpacker.core.settings import ToolSettings
from modpacker.models import PackResult

logger = logging.getLogger(__name__)


def _remove_file(path: Path) -> None:
    try:
        path.unlink()
        logger.info("Removed previous archive: %s", path)
    except FileNotFoundError:
        pass


def general_sources(staging_dir: str) -> List[str]:
    """
    Top-level staged folders that go into the general archive, sorted by name.
    """
    excluded = {STRINGS_FOLDER, TEXTURES_FOLDER}
    return [
        str(p)
        for p in sorted(Path(staging_dir).iterdir(), key=lambda x: x.name)
        if p.is_dir() and p.name not in excluded
    ]


def build_outputs(
    staging_dir: str,
    data_dir: str,
    archiver: Archiver,
    settings: ToolSettings,
) -> PackResult:
    """
    Produce the game-facing outputs from a normalized staging folder:
      - strings/ copied loose into the data folder
      - textures/ packed into the texture archive
      - every other top-level folder packed into the general archive
    """
    staging = Path(staging_dir)
    data = Path(data_dir)
    data.mkdir(parents=True, exist_ok=True)

    # -------------------------
    # Strings stay loose
    # -------------------------
    strings_copied = False
    strings_src = staging / STRINGS_FOLDER
    if strings_src.is_dir():
        logger.info("Copying strings to: %s", data / STRINGS_FOLDER)
        shutil.copytree(strings_src, data / STRINGS_FOLDER, dirs_exist_ok=True)
        strings_copied = True

    # -------------------------
    # Texture archive
    # -------------------------
    texture_archive = None
    textures_src = staging / TEXTURES_FOLDER
    if textures_src.is_dir():
        texture_path = data / settings.texture_archive_name
        _remove_file(texture_path)
        logger.info("Building texture archive: %s", texture_path)
        archiver.create([str(textures_src)], str(texture_path), str(staging), settings.texture_format)
        texture_archive = str(texture_path)

    # -------------------------
    # General archive
    # -------------------------
    general_path = data / settings.general_archive_name
    _remove_file(general_path)

    sources = general_sources(staging_dir)
    general_archive = None
    if sources:
        logger.info("Building general archive from %d folder(s): %s", len(sources), general_path)
        archiver.create(sources, str(general_path), str(staging), settings.general_format)
        general_archive = str(general_path)
    else:
        logger.warning("Nothing left to pack into the general archive.")

    return PackResult(
        strings_copied=strings_copied,
        textures_packed=texture_archive is not None,
        general_archive=general_archive,
        texture_archive=texture_archive,
        general_sources=[Path(s).name for s in sources],
    )
