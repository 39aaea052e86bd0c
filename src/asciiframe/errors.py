"""Domain-specific exceptions for asciiframe jobs."""

from pathlib import Path


class AsciiFrameError(Exception):
    """Base class for every error raised by asciiframe."""


class InvalidArgument(AsciiFrameError, ValueError):
    """Raised when command-line usage is wrong."""


class PathNotFound(AsciiFrameError, FileNotFoundError):
    """Raised when an input path does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"File not found: {path}")
        self.path = path


class DecodeError(AsciiFrameError, ValueError):
    """Raised when an image or extracted frame cannot be decoded."""

    def __init__(self, path: Path, reason: str | None = None):
        message = f"Could not decode image: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path


class InvalidScale(AsciiFrameError, ValueError):
    """Raised when the sampling stride is not a positive integer."""

    def __init__(self, scale):
        super().__init__(f"Scale must be a positive integer, got {scale!r}")
        self.scale = scale


class FontLoadError(AsciiFrameError, OSError):
    """Raised when the monospace font cannot be resolved or opened."""


class MediaToolError(AsciiFrameError, RuntimeError):
    """Raised when an external media tool fails.

    Carries the tool name, its exit status (``None`` when the tool could not
    be started at all) and whatever it wrote to stderr.
    """

    action = "media tool call"

    def __init__(self, tool: str, returncode: int | None, stderr: str = "", reason: str | None = None):
        if reason is None:
            reason = "not found on PATH" if returncode is None else f"exited with status {returncode}"
        message = f"{self.action} failed: {tool} {reason}"
        detail = stderr.strip().splitlines()[-1] if stderr and stderr.strip() else ""
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.tool = tool
        self.returncode = returncode
        self.stderr = stderr


class ProbeError(MediaToolError):
    action = "Framerate probe"


class ExtractionError(MediaToolError):
    action = "Frame extraction"


class EncodingError(MediaToolError):
    action = "Video encoding"
