"""Configuration for Step 01: Video to Frames."""

from typing import Literal

from pydantic import BaseModel, Field

from ._sampling import Direction


class ExtractFramesConfig(BaseModel):
    frames_to_extract: int = Field(100, gt=0, description="Target number of frames to extract")
    direction: Direction = Field(
        Direction.FORWARD, description="forward, or reverse to mirror frames and invert numbering"
    )
    output_format: Literal["png", "jpg", "bmp"] = Field("png", description="Frame image format")
    filename_digits: int = Field(4, ge=1, description="Zero padding of the frame counter")
    jpeg_quality: int = Field(95, ge=1, le=100, description="JPEG quality when output_format is jpg")
    resize_width: int | None = Field(None, gt=0, description="Resize width (None = keep original)")
