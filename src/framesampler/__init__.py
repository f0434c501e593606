"""framesampler: evenly-spaced frame extraction from video files."""

from framesampler.steps.s01_extract_frames import Direction, extract_frames

__version__ = "0.1.0"

__all__ = ["Direction", "extract_frames", "__version__"]
