"""
VisibilityTracker - Edge-triggered visibility detection for one UI element.

Each tick the tracker computes the world-space bounds of its rect and of
the viewport, tests them for overlap, and raises its notifications only
when the result differs from the previous tick. The first evaluation
after activation always notifies.

Dispatch order on a transition:
  1. Visibility message to the owning entity (per message_mode)
  2. on_visible_changed(bool)
  3. on_became_visible() or on_became_invisible()
"""

import logging

from .events import BoolEvent, VoidEvent
from .geometry import get_world_rect
from .messages import Entity
from .models import AxisAlignedRect, CornerBuffer, MessageMode, RectNode, VisibilityState

logger = logging.getLogger(__name__)


class VisibilityTracker:
    """
    Tracks whether a rect overlaps a viewport and notifies on change.

    Args:
        rect: Node of the tracked element
        viewport: Node of the viewport
        message_mode: How visibility messages reach the owning entity
        entity: Owning entity for visibility messages
        name: Label used in logs (defaults to the entity name)
        enabled: Activate immediately. Defaults to False so listeners can
                 be attached before the first notification.
    """

    def __init__(
        self,
        rect: RectNode | None = None,
        viewport: RectNode | None = None,
        message_mode: MessageMode | str = MessageMode.SEND,
        entity: Entity | None = None,
        name: str | None = None,
        enabled: bool = False,
    ):
        self._rect = rect
        self._viewport = viewport
        self._message_mode = MessageMode(message_mode)
        self.entity = entity
        self.name = name or (entity.name if entity is not None else "tracker")

        self._on_visible_changed: BoolEvent | None = None
        self._on_became_visible: VoidEvent | None = None
        self._on_became_invisible: VoidEvent | None = None

        self._state = VisibilityState.UNINITIALIZED
        self._enabled = False
        self._warned_missing = False
        self.transition_count = 0

        # Per-instance scratch so trackers can be evaluated from different threads
        self._corners = CornerBuffer()

        if enabled:
            self.enable()

    def __repr__(self) -> str:
        return f"VisibilityTracker({self.name!r}, state={self._state.value})"

    # -- configuration ------------------------------------------------------

    @property
    def rect(self) -> RectNode | None:
        return self._rect

    @rect.setter
    def rect(self, value: RectNode | None) -> None:
        self._rect = value

    @property
    def viewport(self) -> RectNode | None:
        return self._viewport

    @viewport.setter
    def viewport(self, value: RectNode | None) -> None:
        self._viewport = value

    @property
    def message_mode(self) -> MessageMode:
        return self._message_mode

    @message_mode.setter
    def message_mode(self, value: MessageMode | str) -> None:
        self._message_mode = MessageMode(value)

    # -- state --------------------------------------------------------------

    @property
    def state(self) -> VisibilityState:
        return self._state

    @property
    def is_visible(self) -> bool:
        """True only when the rect overlapped the viewport on the last evaluation."""
        return self._state is VisibilityState.VISIBLE

    @property
    def enabled(self) -> bool:
        return self._enabled

    # -- subscription points ------------------------------------------------

    @property
    def on_visible_changed(self) -> BoolEvent:
        """Raised with the new visibility on every transition."""
        if self._on_visible_changed is None:
            self._on_visible_changed = BoolEvent("on_visible_changed")
        return self._on_visible_changed

    @on_visible_changed.setter
    def on_visible_changed(self, value: BoolEvent | None) -> None:
        self._on_visible_changed = value

    @property
    def on_became_visible(self) -> VoidEvent:
        """Raised when the rect became visible."""
        if self._on_became_visible is None:
            self._on_became_visible = VoidEvent("on_became_visible")
        return self._on_became_visible

    @on_became_visible.setter
    def on_became_visible(self, value: VoidEvent | None) -> None:
        self._on_became_visible = value

    @property
    def on_became_invisible(self) -> VoidEvent:
        """Raised when the rect became invisible."""
        if self._on_became_invisible is None:
            self._on_became_invisible = VoidEvent("on_became_invisible")
        return self._on_became_invisible

    @on_became_invisible.setter
    def on_became_invisible(self, value: VoidEvent | None) -> None:
        self._on_became_invisible = value

    # -- lifecycle ----------------------------------------------------------

    def enable(self) -> None:
        """Activate: forget the previous state and evaluate right away."""
        self._enabled = True
        self._state = VisibilityState.UNINITIALIZED
        self.evaluate()

    def disable(self) -> None:
        self._enabled = False

    def late_update(self) -> None:
        """Per-frame hook. Call after layout has settled for the frame."""
        if self._enabled:
            self.evaluate()

    # -- evaluation ---------------------------------------------------------

    def evaluate(self) -> VisibilityState:
        """Recompute visibility and notify if it changed."""
        return self.apply_visibility(self.calculate_visibility())

    def apply_visibility(self, visible: bool) -> VisibilityState:
        """
        Feed an overlap result through the state machine.

        Used directly by batch evaluation, which computes overlap for many
        trackers at once.
        """
        new_state = VisibilityState.from_overlap(visible)
        if new_state is self._state:
            return self._state

        previous = self._state
        self._state = new_state
        self.transition_count += 1
        logger.debug(f"{self.name}: {previous.value} -> {new_state.value}")

        self.raise_events()
        return self._state

    def calculate_visibility(self) -> bool:
        """
        Check whether the rect overlaps the viewport, without changing state.

        A missing rect or viewport counts as not overlapping.
        """
        if self._rect is None or self._viewport is None:
            self._warn_missing_reference()
            return False

        self._warned_missing = False
        rect = self.get_world_rect(self._rect)
        viewport = self.get_world_rect(self._viewport)
        return rect.overlaps(viewport)

    def get_world_rect(self, node: RectNode) -> AxisAlignedRect:
        """World-space rect of node, read through this tracker's scratch buffer."""
        return get_world_rect(node, self._corners)

    def has_references(self) -> bool:
        return self._rect is not None and self._viewport is not None

    def raise_events(self) -> None:
        """Dispatch all notification channels for the current state."""
        visible = self.is_visible

        if self.entity is not None:
            if self._message_mode is MessageMode.SEND:
                self.entity.send_visibility(visible)
            elif self._message_mode is MessageMode.BROADCAST:
                self.entity.broadcast_visibility(visible)

        if self._on_visible_changed is not None:
            self._on_visible_changed.invoke(visible)

        if self._on_became_visible is not None and visible:
            self._on_became_visible.invoke()

        if self._on_became_invisible is not None and not visible:
            self._on_became_invisible.invoke()

    def _warn_missing_reference(self) -> None:
        if self._warned_missing:
            return
        missing = [
            label
            for label, ref in (("rect", self._rect), ("viewport", self._viewport))
            if ref is None
        ]
        logger.warning(f"{self.name}: no {' or '.join(missing)} assigned, treating as invisible")
        self._warned_missing = True
