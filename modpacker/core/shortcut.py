from __future__ import annotations

import os
import shlex
import stat
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from modpacker.models import ToolPaths


def default_program() -> List[str]:
    return [sys.executable, "-m", "modpacker"]


def build_shortcut_command(
    paths: ToolPaths,
    cleanup: bool = False,
    program: Optional[List[str]] = None,
) -> List[str]:
    cmd = list(program or default_program())
    cmd += [
        "--archiver", paths.archiver_dir,
        "--mods", paths.mods_dir,
        "--game", paths.game_dir,
    ]
    if cleanup:
        cmd.append("--cleanup")
    return cmd


def write_shortcut(
    target_dir: str,
    paths: ToolPaths,
    cleanup: bool = False,
    program: Optional[List[str]] = None,
) -> Path:
    """
    Write a launcher that re-runs the tool with the given paths.
    ModPacker.cmd on Windows, an executable modpacker.sh elsewhere.
    """
    cmd = build_shortcut_command(paths, cleanup=cleanup, program=program)
    target = Path(target_dir)
    target.mkdir(parents=True, exist_ok=True)

    if os.name == "nt":
        path = target / "ModPacker.cmd"
        text = "@echo off\r\n" + subprocess.list2cmdline(cmd) + "\r\npause\r\n"
        path.write_text(text, encoding="utf-8")
        return path

    path = target / "modpacker.sh"
    path.write_text("#!/bin/sh\n" + shlex.join(cmd) + "\n", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path
