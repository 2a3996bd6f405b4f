"""
Pydantic schemas for scene configuration validation.

Provides type-safe, declarative validation with clear error messages.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..utils.constants import DEFAULT_FRAMES, DEFAULT_MESSAGE_MODE


class StrictModel(BaseModel):
    """Base model that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


class NodeConfig(StrictModel):
    """Rectangular layout node."""

    name: str = Field(..., min_length=1)
    parent: str | None = None
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0


class TrackerConfig(StrictModel):
    """Visibility tracker attached to an entity."""

    entity: str = Field(..., min_length=1, description="Owning entity (node name)")
    rect: str | None = Field(
        default=None, description="Tracked node. Defaults to the entity's own node"
    )
    viewport: str | None = Field(
        default=None, description="Viewport node. Defaults to the scene viewport"
    )
    message_mode: Literal["none", "send", "broadcast"] = DEFAULT_MESSAGE_MODE


class ScrollConfig(StrictModel):
    """Per-frame motion applied to one node before trackers run."""

    node: str = Field(..., min_length=1)
    dx: float = 0.0
    dy: float = 0.0
    every: int = Field(default=1, gt=0, description="Move every N frames")


class RuntimeConfig(StrictModel):
    """Runtime configuration."""

    frames: int = Field(default=DEFAULT_FRAMES, gt=0)
    batch: bool = False


class SceneConfig(StrictModel):
    """Complete scene schema."""

    viewport: str = Field(..., min_length=1)
    nodes: list[NodeConfig] = Field(default_factory=list)
    trackers: list[TrackerConfig] = Field(default_factory=list)
    scroll: ScrollConfig | None = None
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)

    @model_validator(mode="after")
    def validate_references(self):
        """Validate that every name reference points at a declared node."""
        names: set[str] = set()
        for node in self.nodes:
            if node.name in names:
                raise ValueError(f"Duplicate node name: '{node.name}'")
            names.add(node.name)

        parents = {node.name: node.parent for node in self.nodes}
        for node in self.nodes:
            if node.parent is not None and node.parent not in names:
                raise ValueError(
                    f"Node '{node.name}' references non-existent parent: '{node.parent}'"
                )
            seen = {node.name}
            current = node.parent
            while current is not None:
                if current in seen:
                    raise ValueError(f"Node '{node.name}' is part of a parent cycle")
                seen.add(current)
                current = parents.get(current)

        if self.viewport not in names:
            raise ValueError(f"Viewport references non-existent node: '{self.viewport}'")

        for i, tracker in enumerate(self.trackers, 1):
            for label in ("entity", "rect", "viewport"):
                ref = getattr(tracker, label)
                if ref is not None and ref not in names:
                    raise ValueError(
                        f"Tracker {i} references non-existent {label}: '{ref}'"
                    )

        if self.scroll is not None and self.scroll.node not in names:
            raise ValueError(f"Scroll references non-existent node: '{self.scroll.node}'")

        return self


def validate_scene_pydantic(config: dict) -> SceneConfig:
    """
    Validate scene configuration using Pydantic.

    Args:
        config: Raw configuration dictionary

    Returns:
        Validated SceneConfig object

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return SceneConfig(**config)
