"""
Scene configuration loading, validation, and building.

- load_scene: Read YAML, apply environment overrides, validate
- build_scene: Create nodes, entities and trackers from a validated scene

Pydantic schemas available for type-safe validation:
- SceneConfig: Complete scene schema
- validate_scene_pydantic: Validate and parse config to Pydantic model
"""

from .builder import Scene, auto_wire_rect, build_scene
from .loader import (
    ConfigValidationError,
    load_config_with_env,
    load_scene,
    validate_scene,
)
from .schemas import (
    NodeConfig,
    RuntimeConfig,
    SceneConfig,
    ScrollConfig,
    TrackerConfig,
    validate_scene_pydantic,
)

__all__ = [
    # Exception
    "ConfigValidationError",
    # Schemas
    "NodeConfig",
    "RuntimeConfig",
    "SceneConfig",
    "ScrollConfig",
    "TrackerConfig",
    # Building
    "Scene",
    "auto_wire_rect",
    "build_scene",
    # Loading
    "load_config_with_env",
    "load_scene",
    "validate_scene",
    "validate_scene_pydantic",
]
