"""
Consolidated data models for UI culling.

This package contains the geometry and state types shared across the
tracker, scheduler and scene builder.
"""

from .geometry import (
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    TOP_LEFT,
    TOP_RIGHT,
    AxisAlignedRect,
    Corner,
    CornerBuffer,
    RectNode,
)
from .layout import LayoutNode
from .state import MessageMode, VisibilityState

__all__ = [
    # Geometry
    "AxisAlignedRect",
    "BOTTOM_LEFT",
    "BOTTOM_RIGHT",
    "Corner",
    "CornerBuffer",
    "RectNode",
    "TOP_LEFT",
    "TOP_RIGHT",
    # Layout
    "LayoutNode",
    # State
    "MessageMode",
    "VisibilityState",
]
