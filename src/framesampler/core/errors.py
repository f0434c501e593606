"""Exception hierarchy for frame sampling."""

from __future__ import annotations


class FrameSamplerError(Exception):
    """Base class for all framesampler errors."""


class VideoOpenError(FrameSamplerError):
    """The video source could not be opened. Fatal for the whole run."""


class FrameReadError(FrameSamplerError):
    """A single frame could not be decoded. Recovered by skipping it."""

    def __init__(self, index: int, message: str | None = None):
        self.index = index
        super().__init__(message or f"Cannot read frame {index}")


class FrameWriteError(FrameSamplerError):
    """An extracted frame could not be written to disk."""


class ConfigurationError(FrameSamplerError, ValueError):
    """Sampling parameters or step inputs are unusable."""
