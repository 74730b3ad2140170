"""Error kinds raised by the indexing and serving code."""


class BeatgrazeError(Exception):
    """Base class for all application errors."""


class ConfigurationError(BeatgrazeError):
    """The audio directory or another startup setting is unusable."""


class ScanError(BeatgrazeError):
    """The audio root could not be read during a listing request."""


class PathEscapeError(BeatgrazeError):
    """A requested path resolves outside the audio root."""
