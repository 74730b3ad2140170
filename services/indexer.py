import logging
import os
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict

from utils.constants import is_supported_audio_extension
from utils.errors import ScanError

logger = logging.getLogger(__name__)


class AudioEntry(BaseModel):
    """One discovered audio file, serialized as {name, path, folder}."""
    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    folder: str


def _entry_for(relative: Path) -> AudioEntry:
    # Only the immediate parent folder name; root-level files get ""
    folder = relative.parent.name
    return AudioEntry(
        name=relative.name,
        path=relative.as_posix(),
        folder=folder,
    )


def _is_utf8(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def index_audio_files(root: Path) -> List[AudioEntry]:
    """
    Walk the tree under root once and collect every supported audio file.
    Hidden directories are included; symlinked directories are not followed.
    Unreadable subdirectories and files whose names are not valid UTF-8 are
    skipped, an unreadable root raises ScanError.
    """
    root = Path(root)
    root_error: List[OSError] = []

    def on_error(error: OSError):
        if error.filename is not None and Path(error.filename) == root:
            root_error.append(error)
            return
        logger.debug(f"Skipping unreadable directory {error.filename}: {error}")

    entries: List[AudioEntry] = []
    for dirpath, _, filenames in os.walk(root, onerror=on_error):
        current = Path(dirpath)
        for name in filenames:
            if not is_supported_audio_extension(name):
                continue
            relative = (current / name).relative_to(root)
            # Names that are not valid UTF-8 cannot be sent as JSON or mapped back to the file
            if not _is_utf8(relative.as_posix()):
                logger.debug(f"Skipping file with undecodable name: {relative.as_posix()!r}")
                continue
            entries.append(_entry_for(relative))

    if root_error:
        error = root_error[0]
        logger.error(f"Failed to scan audio directory {root}: {error}")
        raise ScanError(str(error)) from error

    return entries
