"""
UI Culling CLI
Runs a scene file through the frame scheduler and reports visibility.

  --validate  Check scene validity and exit
  --batch     Evaluate trackers with vectorized overlap tests
"""

import argparse
import logging
import sys

from .config import ConfigValidationError, Scene, build_scene, load_scene
from .utils import DEFAULT_SCENE_FILE

logger = logging.getLogger(__name__)


class LoggingReceiver:
    """
    Visibility receiver that counts messages delivered to its entity.

    A broadcast from an ancestor reaches this receiver too, so messages are
    logged under the receiving entity at debug level only. Transitions are
    logged per tracker by attach_logging.
    """

    def __init__(self, entity_name: str):
        self.entity_name = entity_name
        self.messages = 0

    def on_became_visible(self) -> None:
        self.messages += 1
        logger.debug(f"{self.entity_name}: received became-visible message")

    def on_became_invisible(self) -> None:
        self.messages += 1
        logger.debug(f"{self.entity_name}: received became-invisible message")


def attach_logging(scene: Scene) -> dict[str, LoggingReceiver]:
    """
    Log every tracker transition under the tracker's own name, and add one
    LoggingReceiver to each entity that owns a tracker.

    Returns:
        Receivers keyed by entity name
    """
    receivers: dict[str, LoggingReceiver] = {}
    for tracker in scene.trackers:
        tracker.on_visible_changed.add_listener(
            lambda visible, name=tracker.name: logger.info(
                f"{name}: {'inside' if visible else 'outside'} viewport"
            )
        )

        entity = tracker.entity
        if entity is not None and entity.name not in receivers:
            receivers[entity.name] = entity.add_component(LoggingReceiver(entity.name))

    return receivers


def setup_logging(quiet: bool = False, verbose: bool = False) -> None:
    """
    Setup logging configuration.

    Args:
        quiet: If True, only show warnings and errors
        verbose: If True, include per-transition debug output
    """
    level = logging.INFO
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG

    # Custom formatter with shorter module names
    class ShortNameFormatter(logging.Formatter):
        def format(self, record):
            record.name = record.name.replace("ui_culling.", "uc.")
            return super().format(record)

    handler = logging.StreamHandler()
    handler.setFormatter(
        ShortNameFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s", datefmt="%H:%M:%S"
        )
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(level)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="UI Culling - Detect when UI elements enter or leave a viewport",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m ui_culling scene.yaml              # Run for runtime.frames frames
  python -m ui_culling scene.yaml --frames 10  # Run for 10 frames
  python -m ui_culling scene.yaml --validate   # Check scene validity

Environment Variables:
  UI_CULLING_MESSAGE_MODE - Override message_mode for every tracker
  UI_CULLING_FRAMES       - Override runtime.frames
        """,
    )

    parser.add_argument(
        "scene",
        nargs="?",
        default=DEFAULT_SCENE_FILE,
        help=f"Path to scene file (default: {DEFAULT_SCENE_FILE})",
    )
    parser.add_argument("--frames", type=int, help="Number of frames to run")
    parser.add_argument(
        "--batch", action="store_true", help="Use vectorized batch evaluation"
    )
    parser.add_argument(
        "--validate", action="store_true", help="Validate scene file and exit"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only show warnings and errors"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every state transition"
    )

    return parser.parse_args(argv)


def print_summary(scene: Scene) -> None:
    """Print final state and transition count per tracker."""
    print(f"\nFrames run: {scene.scheduler.frame}")
    print(f"{'TRACKER':<24} {'STATE':<12} TRANSITIONS")
    for tracker in scene.trackers:
        print(f"{tracker.name:<24} {tracker.state.value:<12} {tracker.transition_count}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(quiet=args.quiet, verbose=args.verbose)

    try:
        config = load_scene(args.scene)
    except ConfigValidationError as e:
        logger.error(str(e))
        for error in e.errors:
            logger.error(f"  - {error}")
        return 1

    if args.validate:
        print(f"Scene valid: {len(config.nodes)} nodes, {len(config.trackers)} trackers")
        return 0

    if args.frames is not None and args.frames <= 0:
        logger.error(f"Invalid frame count '{args.frames}' - must be positive")
        return 1

    scene = build_scene(config)
    attach_logging(scene)

    scene.activate()
    scene.run(frames=args.frames, batch=args.batch or None)
    print_summary(scene)
    return 0


if __name__ == "__main__":
    sys.exit(main())
