"""
Pydantic Models and Schemas
===========================

Data models for the render pipeline and API responses.
"""

from typing import Dict, Literal
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field


class IconSlot(BaseModel):
    """A template slot element to be replaced by an icon document."""
    slot_id: str = Field(..., min_length=1, description="id of the slot rect in the template")
    icon_path: Path = Field(..., description="Path of the icon SVG")


class PixelBuffer(BaseModel):
    """Rasterized image as RGBA8 samples, row-major, top row first."""
    width: int = Field(..., description="Width in pixels")
    height: int = Field(..., description="Height in pixels")
    data: bytes = Field(..., description="RGBA8 samples", exclude=True, repr=False)
    premultiplied: bool = Field(True, description="Color channels are scaled by alpha")

    @property
    def stride(self) -> int:
        return self.width * 4


class HealthStatus(BaseModel):
    """Health check status."""
    status: Literal["healthy", "unhealthy"] = Field(..., description="Overall status")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Check timestamp"
    )
    version: str = Field(..., description="Application version")

    # Component statuses
    template: bool = Field(..., description="Template document is readable")
    icons: Dict[str, bool] = Field(default_factory=dict, description="Icon readability by slot id")
