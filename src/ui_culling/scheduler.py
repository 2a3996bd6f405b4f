"""
FrameScheduler - Late-update tick loop for visibility trackers.

Each tick runs the registered layout passes first, so world positions
are final, and then evaluates every enabled tracker in registration
order. Single-threaded: trackers are never evaluated concurrently.
"""

import logging
from typing import Callable

from .geometry import overlaps_many
from .tracker import VisibilityTracker

logger = logging.getLogger(__name__)


class FrameScheduler:
    """Drives layout passes and tracker evaluation once per frame."""

    def __init__(self):
        self.frame = 0
        self._layout_passes: list[Callable[[int], None]] = []
        self._trackers: list[VisibilityTracker] = []

    @property
    def trackers(self) -> list[VisibilityTracker]:
        return list(self._trackers)

    def add_layout_pass(self, layout_pass: Callable[[int], None]) -> None:
        """Register a callback run before trackers each tick. Receives the frame number."""
        self._layout_passes.append(layout_pass)

    def register(self, tracker: VisibilityTracker) -> None:
        if tracker not in self._trackers:
            self._trackers.append(tracker)

    def unregister(self, tracker: VisibilityTracker) -> None:
        if tracker in self._trackers:
            self._trackers.remove(tracker)

    def tick(self, batch: bool = False) -> int:
        """
        Advance one frame.

        Args:
            batch: Compute overlaps for all trackers with vectorized math
                   instead of one tracker at a time. All geometry for the
                   tick is read before any tracker notifies, so a handler
                   that moves nodes only affects the next tick.

        Returns:
            The frame number just completed
        """
        self.frame += 1

        for layout_pass in self._layout_passes:
            layout_pass(self.frame)

        active = [t for t in self._trackers if t.enabled]
        if batch:
            self._evaluate_batch(active)
        else:
            for tracker in active:
                tracker.late_update()

        return self.frame

    def run(self, frames: int, batch: bool = False) -> int:
        """Run frames ticks. Returns the last frame number."""
        for _ in range(frames):
            self.tick(batch=batch)
        logger.debug(f"Ran {frames} frames, now at frame {self.frame}")
        return self.frame

    def _evaluate_batch(self, trackers: list[VisibilityTracker]) -> None:
        # Every overlap is computed before any tracker notifies
        results: dict[int, bool] = {}

        # Group by viewport so each viewport rect is read once
        groups: dict[int, list[VisibilityTracker]] = {}
        for tracker in trackers:
            if not tracker.has_references():
                results[id(tracker)] = tracker.calculate_visibility()
                continue
            groups.setdefault(id(tracker.viewport), []).append(tracker)

        for members in groups.values():
            first = members[0]
            viewport = first.get_world_rect(first.viewport)
            rects = [t.get_world_rect(t.rect).as_tuple() for t in members]
            for tracker, visible in zip(members, overlaps_many(rects, viewport)):
                results[id(tracker)] = bool(visible)

        # Apply in registration order, same as sequential ticks
        for tracker in trackers:
            if tracker.enabled:
                tracker.apply_visibility(results[id(tracker)])
