"""
Visibility messages - Explicit receiver interface and entity fan-out.

Components that want to hear about visibility implement
VisibilityMessageReceiver and are attached to an Entity. A tracker then
delivers "became visible" / "became invisible" either to the receivers
on its own entity (send) or to the entity and all descendants
(broadcast). Entities without receivers are fine.
"""

import logging
from typing import Iterator, Protocol, runtime_checkable

from .models import RectNode

logger = logging.getLogger(__name__)


@runtime_checkable
class VisibilityMessageReceiver(Protocol):
    """Protocol for components that react to visibility messages."""

    def on_became_visible(self) -> None:
        ...

    def on_became_invisible(self) -> None:
        ...


class Entity:
    """
    A node in the entity hierarchy that hosts components.

    Args:
        name: Entity name
        rect: Optional rectangular node owned by this entity. Used as the
              default tracked rect when a tracker is wired without one.
    """

    def __init__(self, name: str, rect: RectNode | None = None):
        self.name = name
        self.rect = rect
        self.parent: Entity | None = None
        self.children: list[Entity] = []
        self.components: list[object] = []

    def __repr__(self) -> str:
        return f"Entity({self.name!r})"

    def add_component(self, component: object) -> object:
        self.components.append(component)
        return component

    def remove_component(self, component: object) -> None:
        if component in self.components:
            self.components.remove(component)

    def add_child(self, child: "Entity") -> "Entity":
        """Attach child, detaching it from any previous parent."""
        node = self
        while node is not None:
            if node is child:
                raise ValueError(f"Cannot attach '{child.name}' under itself")
            node = node.parent

        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def iter_descendants(self) -> Iterator["Entity"]:
        """Depth-first walk of all descendants, excluding self."""
        for child in tuple(self.children):
            yield child
            yield from child.iter_descendants()

    def receivers(self) -> list[VisibilityMessageReceiver]:
        """Components on this entity that implement the receiver protocol."""
        return [c for c in self.components if isinstance(c, VisibilityMessageReceiver)]

    def send_visibility(self, visible: bool) -> int:
        """
        Deliver the visibility message to receivers on this entity only.

        Returns:
            Number of receivers reached
        """
        count = 0
        for receiver in self.receivers():
            _deliver(receiver, visible)
            count += 1
        return count

    def broadcast_visibility(self, visible: bool) -> int:
        """
        Deliver the visibility message to this entity and all descendants.

        Returns:
            Number of receivers reached
        """
        count = self.send_visibility(visible)
        for entity in self.iter_descendants():
            count += entity.send_visibility(visible)
        return count


def _deliver(receiver: VisibilityMessageReceiver, visible: bool) -> None:
    try:
        if visible:
            receiver.on_became_visible()
        else:
            receiver.on_became_invisible()
    except Exception as e:
        logger.error(f"Visibility receiver {receiver!r} failed: {e}", exc_info=True)


__all__ = ["Entity", "VisibilityMessageReceiver"]
