"""Project-wide constants and simple predicates."""
from __future__ import annotations

# Supported audio file extensions (lowercase, with leading dot)
AUDIO_EXTENSIONS: set[str] = {".mp3", ".wav", ".flac", ".m4a", ".aac", ".ogg"}

# Listing pagination
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 200
MAX_PER_PAGE = 1000

DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"

def is_supported_audio_extension(path: str) -> bool:
    """Return True if path has a supported audio extension."""
    idx = path.rfind('.')
    if idx == -1:
        return False
    return path[idx:].lower() in AUDIO_EXTENSIONS

__all__ = [
    "AUDIO_EXTENSIONS",
    "DEFAULT_PAGE",
    "DEFAULT_PER_PAGE",
    "MAX_PER_PAGE",
    "DEFAULT_PORT",
    "DEFAULT_HOST",
    "is_supported_audio_extension",
]
