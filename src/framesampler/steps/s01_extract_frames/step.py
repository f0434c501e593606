"""Step 01: Extract a fixed number of evenly-spaced frames from a video."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

import numpy as np

from framesampler.core.step_base import BaseStep
from framesampler.utils.io import empty_folder, save_frame
from ._sampling import Direction, SamplingPlan, Traversal, sample_frames
from ._video_source import VideoSource
from .config import ExtractFramesConfig
from .contracts import ExtractFramesInput, ExtractFramesOutput

logger = logging.getLogger(__name__)


class ExtractFramesStep(BaseStep[ExtractFramesInput, ExtractFramesOutput, ExtractFramesConfig]):
    name: ClassVar[str] = "extract_frames"
    input_type: ClassVar = ExtractFramesInput
    output_type: ClassVar = ExtractFramesOutput
    config_type: ClassVar = ExtractFramesConfig

    def output_dir_for(self, inputs: ExtractFramesInput) -> Path:
        if inputs.output_dir is not None:
            return inputs.output_dir
        return self.data_root / "interim" / "s01_frames"

    def validate_inputs(self, inputs: ExtractFramesInput) -> bool:
        output_dir = self.output_dir_for(inputs).resolve()
        video_path = inputs.video_path.resolve()
        if video_path == output_dir or output_dir in video_path.parents:
            logger.error(f"Output folder {output_dir} contains the input video and would be cleared")
            return False
        return True

    def _resize(self, frame: np.ndarray) -> np.ndarray:
        import cv2

        h, w = frame.shape[:2]
        new_w = self.config.resize_width
        new_h = max(1, int(h * new_w / w))
        return cv2.resize(frame, (new_w, new_h))

    def run(self, inputs: ExtractFramesInput) -> ExtractFramesOutput:
        cfg = self.config
        # Cleared before the video is opened: an unopenable input leaves it empty.
        output_dir = empty_folder(self.output_dir_for(inputs))

        def save(frame: np.ndarray, counter: int) -> str:
            if cfg.resize_width:
                frame = self._resize(frame)
            return save_frame(
                output_dir,
                frame,
                counter,
                ext=cfg.output_format,
                digits=cfg.filename_digits,
                jpeg_quality=cfg.jpeg_quality,
            )

        with VideoSource(inputs.video_path) as source:
            plan = SamplingPlan.build(source.frame_count, cfg.frames_to_extract)
            traversal = Traversal.for_direction(cfg.direction, plan.frame_count)
            logger.info(
                f"Sampling every {plan.interval} frames ({cfg.direction.value}), "
                f"target {plan.frames_to_extract}"
            )
            result = sample_frames(source, plan, traversal, save)

        if result.skipped_reads:
            logger.warning(f"{result.skipped_reads} frames could not be read")
        logger.info(
            f"Extracted {len(result.frame_list)} frames from {plan.frame_count} total "
            f"(interval={plan.interval})"
        )
        return ExtractFramesOutput(
            frames_dir=output_dir,
            frame_count=len(result.frame_list),
            source_frame_count=plan.frame_count,
            interval=plan.interval,
            direction=cfg.direction,
            frame_list=result.frame_list,
            source_indices=result.source_indices,
            skipped_reads=result.skipped_reads,
        )


def extract_frames(
    frames_to_extract: int,
    direction: Direction | str,
    input_path: str | Path,
    output_folder: str | Path,
    **config_overrides,
) -> ExtractFramesOutput:
    """Extract ``frames_to_extract`` evenly-spaced frames into ``output_folder``.

    The folder is emptied first. Raises VideoOpenError when the input cannot
    be opened and ConfigurationError when the video has fewer frames than
    requested.
    """
    cfg = ExtractFramesConfig(
        frames_to_extract=frames_to_extract, direction=direction, **config_overrides
    )
    output_folder = Path(output_folder)
    step = ExtractFramesStep(config=cfg, data_root=output_folder.parent)
    return step.execute(ExtractFramesInput(video_path=Path(input_path), output_dir=output_folder))
