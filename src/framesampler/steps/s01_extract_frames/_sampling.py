"""Sampling plan, traversal order and the frame selection loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Protocol

import numpy as np

from framesampler.core.errors import ConfigurationError, FrameReadError

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    FORWARD = "forward"
    REVERSE = "reverse"


class FrameSource(Protocol):
    frame_count: int

    def read(self) -> np.ndarray: ...


@dataclass(frozen=True)
class SamplingPlan:
    frame_count: int
    frames_to_extract: int
    interval: int

    @classmethod
    def build(cls, frame_count: int, frames_to_extract: int) -> SamplingPlan:
        """Derive the sampling stride; rejects plans whose stride would be zero."""
        if frames_to_extract <= 0:
            raise ConfigurationError(
                f"frames_to_extract must be positive, got {frames_to_extract}"
            )
        if frame_count <= 0:
            raise ConfigurationError(f"Video reports no frames (frame_count={frame_count})")
        interval = frame_count // frames_to_extract
        if interval == 0:
            raise ConfigurationError(
                f"Cannot extract {frames_to_extract} frames from a video with "
                f"only {frame_count} frames"
            )
        return cls(frame_count=frame_count, frames_to_extract=frames_to_extract, interval=interval)

    def selects(self, index: int) -> bool:
        return index != 0 and index % self.interval == 0


@dataclass(frozen=True)
class Traversal:
    """Index walk over ``[0, frame_count]``.

    The index is advanced before each frame is processed, so FORWARD visits
    1..N and REVERSE visits N-1..0.
    """

    start: int
    stop: int
    step: int
    flip: bool

    @classmethod
    def for_direction(cls, direction: Direction, frame_count: int) -> Traversal:
        if Direction(direction) is Direction.FORWARD:
            return cls(start=0, stop=frame_count, step=1, flip=False)
        return cls(start=frame_count, stop=0, step=-1, flip=True)

    def indices(self) -> Iterator[int]:
        i = self.start
        while (i < self.stop) if self.step > 0 else (i > self.stop):
            i += self.step
            yield i


@dataclass
class SamplingResult:
    frame_list: list[str]
    source_indices: list[int]
    skipped_reads: int = 0


def flip_horizontal(frame: np.ndarray) -> np.ndarray:
    """Mirror a frame about its vertical axis."""
    import cv2

    return cv2.flip(frame, 1)


def sample_frames(
    source: FrameSource,
    plan: SamplingPlan,
    traversal: Traversal,
    save: Callable[[np.ndarray, int], str],
) -> SamplingResult:
    """Read ``source`` sequentially and save the frames selected by ``plan``.

    ``save(frame, counter)`` receives a dense counter starting at 1 and
    returns the written filename. Unreadable frames are logged and skipped.
    """
    result = SamplingResult(frame_list=[], source_indices=[])

    for i in traversal.indices():
        # Decoding is always sequential; direction only changes numbering and flip.
        try:
            frame = source.read()
        except FrameReadError:
            logger.warning(f"Cannot read frame {i}, skipping")
            result.skipped_reads += 1
            continue

        if not plan.selects(i):
            continue

        if traversal.flip:
            frame = flip_horizontal(frame)

        fname = save(frame, len(result.frame_list) + 1)
        result.frame_list.append(fname)
        result.source_indices.append(i)

    return result
