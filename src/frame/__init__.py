"""Per-frame contour computation."""
from frame.pipeline import (
    ContourLevel,
    FrameContours,
    compute_frame_contours,
    contour_level,
)

__all__ = [
    'ContourLevel',
    'FrameContours',
    'compute_frame_contours',
    'contour_level',
]
