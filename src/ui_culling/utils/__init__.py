"""
Utility modules for constants.
"""

from .constants import (
    DEFAULT_FRAMES,
    DEFAULT_MESSAGE_MODE,
    DEFAULT_SCENE_FILE,
    ENV_FRAMES,
    ENV_MESSAGE_MODE,
)

__all__ = [
    "DEFAULT_FRAMES",
    "DEFAULT_MESSAGE_MODE",
    "DEFAULT_SCENE_FILE",
    "ENV_FRAMES",
    "ENV_MESSAGE_MODE",
]
