"""
Display paths shared by the scanner, reporter and repair prompts.
"""

import os
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


def relative_path(path: PathLike, start: Optional[PathLike] = None) -> str:
    """
    Path relative to the working directory, for display.

    Falls back to the path as given when no relative form exists
    (e.g., a different drive on Windows).
    """
    try:
        return os.path.relpath(path, start or os.getcwd())
    except ValueError:
        return str(path)
