"""
Visibility state and legacy message mode enums.
"""

from enum import Enum


class VisibilityState(Enum):
    """Tri-state visibility owned by a tracker."""

    UNINITIALIZED = "uninitialized"  # Before first evaluation after activation
    VISIBLE = "visible"
    INVISIBLE = "invisible"

    @classmethod
    def from_overlap(cls, overlaps: bool) -> "VisibilityState":
        return cls.VISIBLE if overlaps else cls.INVISIBLE


class MessageMode(Enum):
    """
    How visibility messages reach receivers on the owning entity.

    NONE: No message is sent.
    SEND: Receivers on the owning entity only.
    BROADCAST: Receivers on the owning entity and all its descendants.
        More expensive than SEND.
    """

    NONE = "none"
    SEND = "send"
    BROADCAST = "broadcast"
