import os
from pathlib import Path
from typing import Optional

from fastapi import Request
from pydantic import BaseModel, ConfigDict

from utils.constants import DEFAULT_HOST, DEFAULT_PORT
from utils.errors import ConfigurationError


class Settings(BaseModel):
    """Process configuration, resolved once at startup."""
    model_config = ConfigDict(frozen=True)

    audio_dir: Path
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST


def resolve_audio_dir(raw_path: Optional[str] = None) -> Path:
    """Validate the audio directory and return it as an absolute path.

    An empty value means the current working directory.
    """
    if not raw_path:
        try:
            return Path.cwd()
        except OSError as e:
            raise ConfigurationError(f"Error getting current directory: {e}") from e

    path = Path(raw_path).expanduser()

    if not path.exists():
        raise ConfigurationError(f"Directory does not exist: {raw_path}")

    try:
        path = path.absolute()
    except OSError as e:
        raise ConfigurationError(f"Error resolving directory path: {e}") from e

    if not path.is_dir():
        raise ConfigurationError(f"Not a directory: {path}")

    return path


def _parse_port(raw_port) -> int:
    try:
        port = int(raw_port)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid port: {raw_port!r}")
    if not 0 < port < 65536:
        raise ConfigurationError(f"Port out of range: {port}")
    return port


def load_settings(
    audio_dir: Optional[str] = None,
    port: Optional[str] = None,
    host: Optional[str] = None,
) -> Settings:
    """Build Settings from explicit values, then BEATGRAZE_* environment variables, then defaults."""
    raw_dir = audio_dir or os.environ.get('BEATGRAZE_AUDIO_DIR', '')
    raw_port = port if port is not None else os.environ.get('BEATGRAZE_PORT', DEFAULT_PORT)
    raw_host = host or os.environ.get('BEATGRAZE_HOST', DEFAULT_HOST)

    return Settings(
        audio_dir=resolve_audio_dir(raw_dir),
        port=_parse_port(raw_port),
        host=raw_host,
    )


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_audio_dir(request: Request) -> Path:
    """Dependency: the audio root the running app was created with."""
    return get_settings(request).audio_dir
