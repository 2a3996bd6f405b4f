"""
Constants used throughout the UI culling package
"""

# Tracker defaults
DEFAULT_MESSAGE_MODE = "send"

# Scene runner
DEFAULT_FRAMES = 60
DEFAULT_SCENE_FILE = "scene.yaml"

# Environment variables
ENV_MESSAGE_MODE = "UI_CULLING_MESSAGE_MODE"
ENV_FRAMES = "UI_CULLING_FRAMES"
