"""
Scene Loader - Reads scene YAML, applies environment overrides, validates.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..utils.constants import ENV_FRAMES, ENV_MESSAGE_MODE
from .schemas import SceneConfig, validate_scene_pydantic

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Raised when a scene file cannot be loaded or is invalid."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []


def load_config_with_env(config: dict) -> dict:
    """
    Apply environment variable overrides to config.

    Args:
        config: Raw configuration dictionary (not modified)

    Returns:
        Configuration with environment variables applied
    """
    config = dict(config)

    if ENV_MESSAGE_MODE in os.environ:
        mode = os.environ[ENV_MESSAGE_MODE].strip().lower()
        logger.info(f"Using message mode from environment: {ENV_MESSAGE_MODE}={mode}")
        trackers = config.get("trackers") or []
        if isinstance(trackers, list):
            # Non-mapping entries are left for schema validation to report
            config["trackers"] = [
                {**tracker, "message_mode": mode} if isinstance(tracker, dict) else tracker
                for tracker in trackers
            ]

    if ENV_FRAMES in os.environ:
        raw = os.environ[ENV_FRAMES]
        try:
            frames = int(raw)
        except ValueError:
            raise ConfigValidationError(f"{ENV_FRAMES} must be an integer, got '{raw}'")
        logger.info(f"Using frame count from environment: {ENV_FRAMES}={frames}")
        runtime = config.get("runtime") or {}
        if isinstance(runtime, dict):
            config["runtime"] = {**runtime, "frames": frames}

    return config


def validate_scene(config: dict) -> SceneConfig:
    """
    Validate a raw scene dict.

    Raises:
        ConfigValidationError: With one readable line per problem
    """
    try:
        return validate_scene_pydantic(config)
    except ValidationError as e:
        errors = []
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"])
            message = err["msg"]
            errors.append(f"{location}: {message}" if location else message)
        raise ConfigValidationError("Invalid scene configuration", errors) from e


def load_scene(path: str | Path) -> SceneConfig:
    """
    Load, override and validate a scene file.

    Args:
        path: Path to scene YAML

    Returns:
        Validated SceneConfig

    Raises:
        ConfigValidationError: If the file is missing, not YAML, or invalid
    """
    path = Path(path)
    if not path.exists():
        raise ConfigValidationError(f"Scene file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigValidationError(f"Scene file {path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigValidationError(f"Cannot read scene file {path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigValidationError(f"Scene file {path} must contain a mapping")

    logger.info(f"Scene loaded from {path}")
    return validate_scene(load_config_with_env(config))
