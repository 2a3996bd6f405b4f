"""
UI Culling

Per-frame visibility detection for UI elements. A tracker tests whether
an element's world-space rectangle overlaps a viewport and notifies
listeners exactly once per visible/invisible transition, so hidden
scroll-view items can skip expensive work.

Package structure:
  models/     - Geometry, layout node and state types
  geometry    - World-space bounds and overlap tests
  tracker     - Visibility state machine and notification dispatch
  scheduler   - Late-update tick loop, batch evaluation
  config/     - Scene loading, validation and building
  utils/      - Constants
"""

__version__ = "1.0.0"

from .events import BoolEvent, Event, VoidEvent
from .geometry import get_world_rect, overlaps_many, rects_overlap
from .messages import Entity, VisibilityMessageReceiver
from .models import (
    AxisAlignedRect,
    CornerBuffer,
    LayoutNode,
    MessageMode,
    RectNode,
    VisibilityState,
)
from .scheduler import FrameScheduler
from .tracker import VisibilityTracker

__all__ = [
    # Geometry
    "AxisAlignedRect",
    "CornerBuffer",
    "LayoutNode",
    "RectNode",
    "get_world_rect",
    "overlaps_many",
    "rects_overlap",
    # Notifications
    "BoolEvent",
    "Entity",
    "Event",
    "VisibilityMessageReceiver",
    "VoidEvent",
    # Tracking
    "FrameScheduler",
    "MessageMode",
    "VisibilityState",
    "VisibilityTracker",
]
