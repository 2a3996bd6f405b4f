"""
Geometry data models - world-space corners and axis-aligned rectangles.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

# Corner slots filled by RectNode.get_world_corners
BOTTOM_LEFT = 0
TOP_LEFT = 1
TOP_RIGHT = 2
BOTTOM_RIGHT = 3


@dataclass
class Corner:
    """Mutable world-space point. Reused across frames, never kept."""

    x: float = 0.0
    y: float = 0.0

    def set(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


class CornerBuffer:
    """
    Fixed four-slot scratch buffer for world-space corners.

    Slots are overwritten in place on every read, so a buffer holds
    nothing meaningful between calls. A single buffer must not be
    filled from two threads at once.
    """

    __slots__ = ("_corners",)

    def __init__(self):
        self._corners = (Corner(), Corner(), Corner(), Corner())

    def __getitem__(self, index: int) -> Corner:
        return self._corners[index]

    def __len__(self) -> int:
        return 4

    def __iter__(self):
        return iter(self._corners)


@runtime_checkable
class RectNode(Protocol):
    """Anything that can report four world-space corners."""

    def get_world_corners(self, out: CornerBuffer) -> None:
        """
        Write world-space corners into out.

        Order: bottom-left, top-left, top-right, bottom-right.
        """
        ...


@dataclass(frozen=True)
class AxisAlignedRect:
    """
    Axis-aligned rectangle in world space.

    Attributes:
        x: Origin x (bottom-left corner of the source node)
        y: Origin y
        width: top-right.x - bottom-left.x, negative if mirrored
        height: top-right.y - bottom-left.y, negative if mirrored
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_corners(cls, bottom_left: Corner, top_right: Corner) -> "AxisAlignedRect":
        return cls(
            bottom_left.x,
            bottom_left.y,
            top_right.x - bottom_left.x,
            top_right.y - bottom_left.y,
        )

    @property
    def x_min(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def x_max(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def y_min(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def y_max(self) -> float:
        return max(self.y, self.y + self.height)

    def overlaps(self, other: "AxisAlignedRect") -> bool:
        """True if both rectangles share a region of non-zero area."""
        return (
            self.x_min < other.x_max
            and other.x_min < self.x_max
            and self.y_min < other.y_max
            and other.y_min < self.y_max
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)
