"""I/O utilities: output folder management and frame image writing."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import numpy as np

from framesampler.core.errors import FrameWriteError

logger = logging.getLogger(__name__)


def empty_folder(folder: Path) -> Path:
    """Remove everything under ``folder`` and recreate it empty."""
    folder = Path(folder)
    if folder.exists():
        if folder.is_dir():
            shutil.rmtree(folder)
        else:
            folder.unlink()
        logger.debug(f"Cleared {folder}")
    folder.mkdir(parents=True, exist_ok=True)
    return folder


def frame_filename(index: int, ext: str = "png", digits: int = 4) -> str:
    """Sequential frame name, e.g. ``frame_filename(7) == "0007.png"``."""
    return f"{index:0{digits}d}.{ext.lstrip('.')}"


def save_frame(
    folder: Path,
    frame: np.ndarray,
    index: int,
    ext: str = "png",
    digits: int = 4,
    jpeg_quality: int = 95,
) -> str:
    """Write one frame as ``<folder>/<index>.<ext>`` and return the filename."""
    import cv2

    folder = Path(folder)
    fname = frame_filename(index, ext, digits)
    params: list[int] = []
    if ext.lower() in ("jpg", "jpeg"):
        params = [cv2.IMWRITE_JPEG_QUALITY, int(jpeg_quality)]

    if not cv2.imwrite(str(folder / fname), frame, params):
        raise FrameWriteError(f"Failed to write frame {index} to {folder / fname}")
    return fname
