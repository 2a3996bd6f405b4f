"""
Geometry Adapter - World-space bounds and overlap tests.

Converts a rectangular node's four world-space corners into an
axis-aligned rectangle using only the bottom-left and top-right corners.
Rotation and skew are ignored.
"""

import numpy as np

from .models import BOTTOM_LEFT, TOP_RIGHT, AxisAlignedRect, CornerBuffer, RectNode

# Shared scratch buffer for callers that do not bring their own.
# Not safe to use from more than one thread at a time.
_CORNER_CACHE = CornerBuffer()


def get_world_rect(node: RectNode, corners: CornerBuffer | None = None) -> AxisAlignedRect:
    """
    Get the world-space axis-aligned rectangle of a node.

    Args:
        node: Node providing world corners. Must not be None.
        corners: Scratch buffer to fill. Defaults to the shared module buffer.

    Returns:
        AxisAlignedRect with origin at the bottom-left corner
    """
    if corners is None:
        corners = _CORNER_CACHE

    node.get_world_corners(corners)
    return AxisAlignedRect.from_corners(corners[BOTTOM_LEFT], corners[TOP_RIGHT])


def rects_overlap(a: AxisAlignedRect, b: AxisAlignedRect) -> bool:
    """Strict overlap: shared edges or corners do not count."""
    return a.overlaps(b)


def overlaps_many(rects, viewport: AxisAlignedRect) -> np.ndarray:
    """
    Vectorized overlap test of many rectangles against one viewport.

    Args:
        rects: Array-like of shape (N, 4) holding (x, y, width, height) rows
        viewport: Rectangle to test against

    Returns:
        Boolean array of shape (N,), same results as rects_overlap per row
    """
    arr = np.asarray(rects, dtype=float).reshape(-1, 4)
    x0 = arr[:, 0]
    y0 = arr[:, 1]
    x1 = x0 + arr[:, 2]
    y1 = y0 + arr[:, 3]

    x_min = np.minimum(x0, x1)
    x_max = np.maximum(x0, x1)
    y_min = np.minimum(y0, y1)
    y_max = np.maximum(y0, y1)

    return (
        (x_min < viewport.x_max)
        & (viewport.x_min < x_max)
        & (y_min < viewport.y_max)
        & (viewport.y_min < y_max)
    )


__all__ = [
    "get_world_rect",
    "overlaps_many",
    "rects_overlap",
]
