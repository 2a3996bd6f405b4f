"""
Scene Builder - Turns a validated SceneConfig into live objects.

Creates one LayoutNode and one Entity per configured node (entities
mirror the node hierarchy), wires trackers, and registers everything
with a FrameScheduler. Trackers are created disabled; call
Scene.activate() once listeners are attached.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable

from ..messages import Entity
from ..models import LayoutNode, RectNode
from ..scheduler import FrameScheduler
from ..tracker import VisibilityTracker
from .schemas import ScrollConfig, SceneConfig

logger = logging.getLogger(__name__)

# Resolves a tracker's rect when the config leaves it unset
RectResolver = Callable[[Entity], RectNode | None]


def auto_wire_rect(entity: Entity) -> RectNode | None:
    """Default resolver: track the entity's own node."""
    return entity.rect


@dataclass
class Scene:
    """Live scene objects built from config."""

    nodes: dict[str, LayoutNode]
    entities: dict[str, Entity]
    trackers: list[VisibilityTracker]
    scheduler: FrameScheduler
    config: SceneConfig
    roots: list[Entity] = field(default_factory=list)

    def activate(self) -> None:
        """Enable all trackers. Each evaluates and notifies once."""
        for tracker in self.trackers:
            tracker.enable()

    def run(self, frames: int | None = None, batch: bool | None = None) -> int:
        if frames is None:
            frames = self.config.runtime.frames
        if batch is None:
            batch = self.config.runtime.batch
        return self.scheduler.run(frames, batch=batch)


def _make_scroll_pass(node: LayoutNode, scroll: ScrollConfig):
    def scroll_pass(frame: int) -> None:
        if frame % scroll.every == 0:
            node.move_by(scroll.dx, scroll.dy)

    return scroll_pass


def build_scene(
    config: SceneConfig,
    rect_resolver: RectResolver | None = auto_wire_rect,
) -> Scene:
    """
    Build nodes, entities and trackers from config.

    Args:
        config: Validated scene configuration
        rect_resolver: Hook called for trackers without an explicit rect.
                       None leaves such trackers without a rect.

    Returns:
        Scene with trackers registered but not yet enabled
    """
    nodes: dict[str, LayoutNode] = {}
    entities: dict[str, Entity] = {}

    for node_config in config.nodes:
        node = LayoutNode(
            name=node_config.name,
            x=node_config.x,
            y=node_config.y,
            width=node_config.width,
            height=node_config.height,
            scale_x=node_config.scale_x,
            scale_y=node_config.scale_y,
        )
        nodes[node.name] = node
        entities[node.name] = Entity(node.name, rect=node)

    roots = []
    for node_config in config.nodes:
        if node_config.parent is None:
            roots.append(entities[node_config.name])
            continue
        nodes[node_config.name].set_parent(nodes[node_config.parent])
        entities[node_config.parent].add_child(entities[node_config.name])

    scheduler = FrameScheduler()
    if config.scroll is not None:
        scheduler.add_layout_pass(_make_scroll_pass(nodes[config.scroll.node], config.scroll))

    trackers = []
    for tracker_config in config.trackers:
        entity = entities[tracker_config.entity]

        if tracker_config.rect is not None:
            rect = nodes[tracker_config.rect]
        elif rect_resolver is not None:
            rect = rect_resolver(entity)
        else:
            rect = None

        viewport = nodes[tracker_config.viewport or config.viewport]
        tracker = VisibilityTracker(
            rect=rect,
            viewport=viewport,
            message_mode=tracker_config.message_mode,
            entity=entity,
        )
        trackers.append(tracker)
        scheduler.register(tracker)

    logger.info(f"Built scene: {len(nodes)} nodes, {len(trackers)} trackers")
    return Scene(
        nodes=nodes,
        entities=entities,
        trackers=trackers,
        scheduler=scheduler,
        config=config,
        roots=roots,
    )
