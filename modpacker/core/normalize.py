from __future__ import annotations

import logging
import shutil
import uuid
from pathlib import Path
from typing import List

from modpacker.core.classify import is_loose_category

logger = logging.getLogger(__name__)


def normalize_category_names(staging_dir: str) -> List[str]:
    """
    Lower-case the top-level loose category folders in staging.

    Renames go through a temporary name so case-only renames also work on
    case-insensitive filesystems. Returns the new names.
    """
    staging = Path(staging_dir)
    renamed: List[str] = []

    for p in sorted(staging.iterdir(), key=lambda x: x.name):
        if not p.is_dir() or not is_loose_category(p.name):
            continue
        target_name = p.name.lower()
        if p.name == target_name:
            continue

        tmp = staging / f"{target_name}.{uuid.uuid4().hex[:8]}.tmp"
        p.rename(tmp)

        target = staging / target_name
        if target.exists():
            # target holds earlier entries; the renamed tree overwrites it
            logger.info("Merging '%s' into '%s'", p.name, target_name)
            shutil.copytree(tmp, target, dirs_exist_ok=True)
            shutil.rmtree(tmp)
        else:
            tmp.rename(target)
            logger.info("Renamed '%s' -> '%s'", p.name, target_name)

        renamed.append(target_name)

    return renamed
