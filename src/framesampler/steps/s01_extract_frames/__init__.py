"""Step 01: evenly-spaced frame extraction."""

from ._sampling import Direction, SamplingPlan, Traversal, sample_frames
from .config import ExtractFramesConfig
from .contracts import ExtractFramesInput, ExtractFramesOutput
from .step import ExtractFramesStep, extract_frames

__all__ = [
    "Direction",
    "SamplingPlan",
    "Traversal",
    "sample_frames",
    "ExtractFramesConfig",
    "ExtractFramesInput",
    "ExtractFramesOutput",
    "ExtractFramesStep",
    "extract_frames",
]
