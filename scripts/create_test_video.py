"""Create a synthetic MP4 video for trying out frame extraction.

Each frame carries a left-to-right gradient (so horizontal flips are visible)
and its frame number drawn in the corner.

Usage:
    python scripts/create_test_video.py data/raw/train.mp4 --frames 300
"""

from __future__ import annotations

from pathlib import Path

import cv2
import numpy as np
import typer
from rich.console import Console

app = typer.Typer(name="create_test_video")
console = Console()


def create_video(
    output_path: Path,
    num_frames: int = 300,
    resolution: tuple[int, int] = (320, 240),
    fps: float = 30.0,
) -> int:
    """Write a synthetic video. Returns number of frames written."""
    width, height = resolution
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fourcc = cv2.VideoWriter_fourcc(*"mp4v")
    writer = cv2.VideoWriter(str(output_path), fourcc, fps, (width, height))

    gradient = np.tile(np.linspace(0, 255, width, dtype=np.uint8), (height, 1))
    for i in range(num_frames):
        frame = np.dstack([gradient, np.full_like(gradient, (i * 7) % 256), 255 - gradient])
        cv2.putText(frame, str(i + 1), (8, 32), cv2.FONT_HERSHEY_SIMPLEX, 1.0, (255, 255, 255), 2)
        writer.write(frame)

    writer.release()
    return num_frames


@app.command()
def main(
    output: Path = typer.Argument(Path("data/raw/train.mp4"), help="Output video path"),
    frames: int = typer.Option(300, "--frames", "-n", help="Number of frames"),
    fps: float = typer.Option(30.0, help="Frames per second"),
) -> None:
    written = create_video(output, num_frames=frames, fps=fps)
    console.print(f"[green]Created {output}: {written} frames @ {fps}fps[/green]")


if __name__ == "__main__":
    app()
