"""Shared pytest fixtures for framesampler tests."""

from pathlib import Path

import numpy as np
import pytest

VIDEO_SIZE = (64, 48)  # (width, height)


def write_gradient_video(path: Path, num_frames: int, fps: float = 25.0) -> Path:
    """Write an MJPG AVI whose frames are dark on the left and bright on the right."""
    import cv2

    width, height = VIDEO_SIZE
    path.parent.mkdir(parents=True, exist_ok=True)
    fourcc = cv2.VideoWriter_fourcc(*"MJPG")
    writer = cv2.VideoWriter(str(path), fourcc, fps, (width, height))
    gradient = np.tile(np.linspace(0, 255, width).astype(np.uint8), (height, 1))
    for _ in range(num_frames):
        writer.write(np.dstack([gradient, gradient, gradient]))
    writer.release()
    return path


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Create a temporary data root with standard directory structure."""
    for subdir in ["raw", "interim/s01_frames"]:
        (tmp_path / subdir).mkdir(parents=True, exist_ok=True)
    return tmp_path


@pytest.fixture
def sample_video(data_root: Path) -> Path:
    """A 30-frame synthetic video under data_root/raw."""
    return write_gradient_video(data_root / "raw" / "sample.avi", num_frames=30)
