"""I/O contracts for Step 01: Video to Frames extraction."""

from pathlib import Path

from pydantic import BaseModel, Field

from framesampler.core.contracts import StepMeta

from ._sampling import Direction


class ExtractFramesInput(BaseModel):
    video_path: Path = Field(..., description="Path to input video file")
    output_dir: Path | None = Field(
        None, description="Folder to (re)create for frames (default: <data_root>/interim/s01_frames)"
    )


class ExtractFramesOutput(BaseModel):
    frames_dir: Path = Field(..., description="Directory containing extracted frames")
    frame_count: int = Field(..., description="Number of frames extracted")
    source_frame_count: int = Field(..., description="Frame count reported by the video")
    interval: int = Field(..., description="Sampling stride in source frame indices")
    direction: Direction = Field(..., description="Traversal direction used")
    frame_list: list[str] = Field(default_factory=list, description="List of frame filenames")
    source_indices: list[int] = Field(
        default_factory=list, description="Source index of each saved frame, in save order"
    )
    skipped_reads: int = Field(0, description="Frames that could not be decoded")
    meta: StepMeta | None = None
