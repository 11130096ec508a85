from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

DEFAULT_FILENAME = "blocks.json"
DEFAULT_MAX_DEPTH = 5

logger = logging.getLogger(__name__)

# Directory holding this package; the default place to start looking.
PACKAGE_DIR = Path(__file__).resolve().parent


def candidate_dirs(start: Union[str, Path], max_depth: int = DEFAULT_MAX_DEPTH) -> List[Path]:
    """
    Directories probed for the catalog file, nearest first:
    `start` itself, then up to `max_depth` ancestors, stopping at the filesystem root.
    """
    if max_depth < 0:
        raise ValueError("max_depth must be >= 0")
    cur = Path(start).resolve()
    dirs = [cur]
    depth = 0
    while depth < max_depth:
        parent = cur.parent
        if parent == cur:  # filesystem root reached
            break
        cur = parent
        depth += 1
        dirs.append(cur)
    return dirs


def find_catalog_file(
    start: Optional[Union[str, Path]] = None,
    filename: str = DEFAULT_FILENAME,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Optional[Path]:
    """
    Return the first `filename` found walking up from `start` (default: the package
    directory), or None if no probed directory contains it.
    """
    for d in candidate_dirs(start if start is not None else PACKAGE_DIR, max_depth):
        p = d / filename
        try:
            if p.is_file():
                return p
        except OSError as e:  # e.g. an ancestor we may not search
            logger.debug("Skipping %s: %s", d, e)
    return None
