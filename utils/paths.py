import os
from pathlib import Path

from utils.errors import PathEscapeError


def is_within_root(root: Path, candidate: Path) -> bool:
    """Return True if candidate is root itself or lies beneath it, compared segment by segment."""
    root_parts = Path(os.path.normpath(root)).parts
    candidate_parts = Path(os.path.normpath(candidate)).parts
    return candidate_parts[:len(root_parts)] == root_parts


def resolve_within_root(root: Path, sub_path: str) -> Path:
    """
    Join a request sub-path onto the audio root and return the normalized absolute path.
    Raises PathEscapeError if the result is not the root or one of its descendants.
    """
    if "\x00" in sub_path:
        raise PathEscapeError("Invalid path: contains NUL byte")

    # ".." is collapsed lexically, so a symlinked file that is listed under
    # the root stays playable
    full_path = Path(os.path.normpath(os.path.join(root, sub_path)))

    if not is_within_root(root, full_path):
        raise PathEscapeError(f"Invalid path: {sub_path}")

    return full_path
