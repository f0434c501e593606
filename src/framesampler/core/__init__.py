"""framesampler core: pipeline runner, base step, shared contracts, errors."""

from .step_base import BaseStep
from .contracts import PipelineConfig, StepEntry, StepMeta
from .errors import (
    ConfigurationError,
    FrameReadError,
    FrameSamplerError,
    FrameWriteError,
    VideoOpenError,
)
from .pipeline_runner import run_pipeline, load_pipeline_config
from .logging import setup_logging

__all__ = [
    "BaseStep",
    "PipelineConfig",
    "StepEntry",
    "StepMeta",
    "ConfigurationError",
    "FrameReadError",
    "FrameSamplerError",
    "FrameWriteError",
    "VideoOpenError",
    "run_pipeline",
    "load_pipeline_config",
    "setup_logging",
]
