import logging
import mimetypes
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from utils.config import get_audio_dir
from utils.errors import PathEscapeError
from utils.paths import resolve_within_root

logger = logging.getLogger(__name__)

router = APIRouter()

# mimetypes tables disagree across platforms for these
_AUDIO_MEDIA_TYPES = {
    ".flac": "audio/flac",
    ".m4a": "audio/mp4",
    ".aac": "audio/aac",
    ".ogg": "audio/ogg",
}


def _media_type_for(path: Path) -> str:
    media_type = _AUDIO_MEDIA_TYPES.get(path.suffix.lower())
    if media_type is None:
        media_type, _ = mimetypes.guess_type(path.name)
    return media_type or "application/octet-stream"


def _validate_file_exists(file_path: Path):
    if not file_path.is_file():
        raise HTTPException(status_code=404, detail="File not found")


@router.get("/{file_path:path}")
def stream_audio(file_path: str, audio_dir: Path = Depends(get_audio_dir)):
    """Stream an audio file under the root. Range requests are answered with 206."""
    try:
        full_path = resolve_within_root(audio_dir, file_path)
    except PathEscapeError as e:
        logger.warning(f"Rejected audio path {file_path!r}: {e}")
        raise HTTPException(status_code=400, detail="Invalid path")

    _validate_file_exists(full_path)

    return FileResponse(
        full_path,
        media_type=_media_type_for(full_path),
        headers={"Accept-Ranges": "bytes"},
    )
