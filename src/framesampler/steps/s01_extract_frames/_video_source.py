"""Sequential OpenCV video reader."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from framesampler.core.errors import FrameReadError, VideoOpenError

logger = logging.getLogger(__name__)


class VideoSource:
    """Owns a ``cv2.VideoCapture`` for the duration of one extraction.

    Use as a context manager so the capture is released on every exit path.
    """

    def __init__(self, path: Path):
        import cv2

        self.path = Path(path)
        self._cap = cv2.VideoCapture(str(self.path))
        if not self._cap.isOpened():
            self._cap.release()
            raise VideoOpenError(f"Cannot open the video file: {self.path}")

        self.frame_count = int(self._cap.get(cv2.CAP_PROP_FRAME_COUNT))
        self.fps = float(self._cap.get(cv2.CAP_PROP_FPS))
        self._position = 0
        logger.info(f"Opened {self.path.name}: {self.frame_count} frames @ {self.fps:.2f} fps")

    def read(self) -> np.ndarray:
        """Decode the next frame in file order."""
        self._position += 1
        ok, frame = self._cap.read()
        if not ok or frame is None:
            raise FrameReadError(self._position)
        return frame

    def release(self) -> None:
        self._cap.release()

    def __enter__(self) -> VideoSource:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
