from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional

from modpacker.core.settings import ToolSettings

logger = logging.getLogger(__name__)

DATA_DIRS_KEY = "sResourceDataDirsFinal"


def required_config_lines(settings: ToolSettings) -> List[str]:
    """
    Substrings the game's custom ini must contain for the outputs to load.
    """
    return [
        settings.general_archive_name,
        settings.texture_archive_name,
        DATA_DIRS_KEY,
    ]


def build_config_block(settings: ToolSettings) -> str:
    return "\n".join(
        [
            "[Archive]",
            f"sResourceArchive2List = {settings.general_archive_name}, {settings.texture_archive_name}",
            f"{DATA_DIRS_KEY} = STRINGS\\",
            "bInvalidateOlderFiles = 1",
        ]
    ) + "\n"


def find_missing_settings(ini_path: str, settings: ToolSettings) -> List[str]:
    required = required_config_lines(settings)
    path = Path(ini_path)
    if not path.is_file():
        return required

    text = path.read_text(encoding="utf-8", errors="replace").lower()
    return [r for r in required if r.lower() not in text]


def report_game_config(
    ini_path: str,
    settings: ToolSettings,
    copy_cb: Optional[Callable[[str], None]] = None,
    open_cb: Optional[Callable[[str], bool]] = None,
    open_editor: bool = False,
) -> List[str]:
    """
    Tell the user which ini settings are missing, hand the block to the
    clipboard and optionally open the ini in an editor.
    """
    missing = find_missing_settings(ini_path, settings)
    if not missing:
        logger.info("Game config already lists the packed archives: %s", ini_path)
        return missing

    block = build_config_block(settings)
    logger.warning("Game config is missing %d setting(s): %s", len(missing), ", ".join(missing))
    print(f"Add the following to {ini_path}:\n")
    print(block)

    if copy_cb:
        copy_cb(block)
        logger.info("Config block copied to the clipboard.")

    if open_editor and open_cb:
        path = Path(ini_path)
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
        if not open_cb(str(path)):
            logger.warning("Could not open an editor for: %s", path)

    return missing
