"""
LayoutNode - Minimal in-process rectangular node with a parent chain.

Stands in for a host transform/layout system. Each node has a local
position, size and scale relative to its parent; world-space corners
are resolved through the parent chain on every read.
"""

from dataclasses import dataclass, field

from .geometry import BOTTOM_LEFT, BOTTOM_RIGHT, TOP_LEFT, TOP_RIGHT, CornerBuffer


@dataclass(eq=False)
class LayoutNode:
    """
    A rectangle positioned relative to an optional parent node.

    Attributes:
        name: Node name (unique within a scene)
        x: Local x of the bottom-left corner, in parent units
        y: Local y of the bottom-left corner, in parent units
        width: Local width
        height: Local height
        scale_x: Horizontal scale applied to this node and its children
        scale_y: Vertical scale applied to this node and its children
    """

    name: str
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    parent: "LayoutNode | None" = None
    children: list["LayoutNode"] = field(default_factory=list, repr=False)

    def __post_init__(self):
        if self.parent is not None:
            parent, self.parent = self.parent, None
            self.set_parent(parent)

    def set_parent(self, parent: "LayoutNode | None") -> None:
        """Reparent, keeping local coordinates."""
        node = parent
        while node is not None:
            if node is self:
                raise ValueError(f"Cannot parent '{self.name}' under its own descendant")
            node = node.parent

        if self.parent is not None:
            self.parent.children.remove(self)
        self.parent = parent
        if parent is not None:
            parent.children.append(self)

    def move_by(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def world_transform(self) -> tuple[float, float, float, float]:
        """Return (origin_x, origin_y, scale_x, scale_y) in world space."""
        if self.parent is None:
            return self.x, self.y, self.scale_x, self.scale_y

        px, py, psx, psy = self.parent.world_transform()
        return (
            px + self.x * psx,
            py + self.y * psy,
            psx * self.scale_x,
            psy * self.scale_y,
        )

    def get_world_corners(self, out: CornerBuffer) -> None:
        ox, oy, sx, sy = self.world_transform()
        right = ox + self.width * sx
        top = oy + self.height * sy

        out[BOTTOM_LEFT].set(ox, oy)
        out[TOP_LEFT].set(ox, top)
        out[TOP_RIGHT].set(right, top)
        out[BOTTOM_RIGHT].set(right, oy)
