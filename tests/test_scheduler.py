"""
Tests for the frame scheduler and batch evaluation
"""

import unittest

from src.ui_culling.models import LayoutNode
from src.ui_culling.scheduler import FrameScheduler
from src.ui_culling.tracker import VisibilityTracker


def build_list(count: int, item_height: float = 20.0):
    """Vertical list of items inside a 100x100 viewport with a scrollable content node."""
    viewport = LayoutNode("viewport", width=100, height=100)
    content = LayoutNode("content")
    items = [
        LayoutNode(f"item-{i}", y=i * item_height, width=100, height=item_height, parent=content)
        for i in range(count)
    ]
    return viewport, content, items


class TestFrameScheduler(unittest.TestCase):
    """Test tick ordering and evaluation."""

    def test_layout_runs_before_trackers(self):
        order = []
        viewport = LayoutNode("viewport", width=100, height=100)
        item = LayoutNode("item", width=10, height=10)
        tracker = VisibilityTracker(rect=item, viewport=viewport)
        tracker.enable()
        tracker.on_visible_changed.add_listener(lambda v: order.append(("tracker", v)))

        scheduler = FrameScheduler()

        def layout(frame):
            order.append(("layout", frame))
            item.move_by(0, 500)

        scheduler.add_layout_pass(layout)
        scheduler.register(tracker)
        scheduler.tick()

        self.assertEqual(order, [("layout", 1), ("tracker", False)])

    def test_disabled_trackers_skipped(self):
        viewport, content, items = build_list(1)
        tracker = VisibilityTracker(rect=items[0], viewport=viewport)
        scheduler = FrameScheduler()
        scheduler.register(tracker)

        scheduler.tick()

        self.assertEqual(tracker.transition_count, 0)

    def test_register_twice_and_unregister(self):
        viewport, content, items = build_list(1)
        tracker = VisibilityTracker(rect=items[0], viewport=viewport)
        scheduler = FrameScheduler()

        scheduler.register(tracker)
        scheduler.register(tracker)
        self.assertEqual(len(scheduler.trackers), 1)

        scheduler.unregister(tracker)
        scheduler.unregister(tracker)
        self.assertEqual(scheduler.trackers, [])

    def test_scrolling_list(self):
        """Scrolling content up by one item per frame hides items past the top edge."""
        viewport, content, items = build_list(10)
        scheduler = FrameScheduler()
        hidden = []
        trackers = []
        for item in items:
            tracker = VisibilityTracker(rect=item, viewport=viewport, name=item.name)
            tracker.on_became_invisible.add_listener(lambda name=item.name: hidden.append(name))
            tracker.enable()
            scheduler.register(tracker)
            trackers.append(tracker)

        self.assertEqual([t.is_visible for t in trackers], [True] * 5 + [False] * 5)
        hidden.clear()

        scheduler.add_layout_pass(lambda frame: content.move_by(0, 20))
        scheduler.run(3)

        self.assertEqual(scheduler.frame, 3)
        self.assertEqual(hidden, ["item-4", "item-3", "item-2"])
        self.assertEqual([t.is_visible for t in trackers], [True] * 2 + [False] * 8)


class TestBatchEvaluation(unittest.TestCase):
    """Batch ticks must produce the same notifications as sequential ticks."""

    def _run(self, batch: bool):
        viewport, content, items = build_list(30, item_height=7.5)
        scheduler = FrameScheduler()
        log = []
        for item in items:
            tracker = VisibilityTracker(rect=item, viewport=viewport, name=item.name)
            tracker.on_visible_changed.add_listener(
                lambda v, name=item.name: log.append((scheduler.frame, name, v))
            )
            tracker.enable()
            scheduler.register(tracker)

        scheduler.add_layout_pass(lambda frame: content.move_by(0, -13 if frame < 10 else 21))
        scheduler.run(20, batch=batch)
        return log

    def test_batch_matches_sequential(self):
        self.assertEqual(self._run(batch=True), self._run(batch=False))

    def test_batch_with_missing_reference(self):
        viewport, content, items = build_list(2)
        missing = VisibilityTracker(rect=None, viewport=viewport, name="missing")
        present = VisibilityTracker(rect=items[0], viewport=viewport, name="present")
        scheduler = FrameScheduler()
        for tracker in (missing, present):
            scheduler.register(tracker)

        with self.assertLogs("src.ui_culling.tracker", level="WARNING"):
            missing.enable()
        present.enable()
        scheduler.tick(batch=True)

        self.assertFalse(missing.is_visible)
        self.assertTrue(present.is_visible)

    def test_batch_reads_all_geometry_before_notifying(self):
        """A handler moving a node in another viewport group is seen next tick."""
        left = LayoutNode("left", width=50, height=50)
        right = LayoutNode("right", x=100, width=50, height=50)
        item_a = LayoutNode("a", x=10, y=10, width=5, height=5)
        item_b = LayoutNode("b", x=300, y=10, width=5, height=5)
        tracker_a = VisibilityTracker(rect=item_a, viewport=left)
        tracker_b = VisibilityTracker(rect=item_b, viewport=right)
        scheduler = FrameScheduler()
        for tracker in (tracker_a, tracker_b):
            tracker.enable()
            scheduler.register(tracker)

        def pull_b_into_view(visible):
            if not visible:
                item_b.move_by(-190, 0)

        tracker_a.on_visible_changed.add_listener(pull_b_into_view)
        item_a.move_by(500, 0)

        scheduler.tick(batch=True)
        self.assertFalse(tracker_a.is_visible)
        self.assertFalse(tracker_b.is_visible)

        scheduler.tick(batch=True)
        self.assertTrue(tracker_b.is_visible)

    def test_batch_groups_by_viewport(self):
        left = LayoutNode("left", width=50, height=50)
        right = LayoutNode("right", x=100, width=50, height=50)
        item = LayoutNode("item", x=10, y=10, width=5, height=5)
        in_left = VisibilityTracker(rect=item, viewport=left)
        in_right = VisibilityTracker(rect=item, viewport=right)
        scheduler = FrameScheduler()
        for tracker in (in_left, in_right):
            tracker.enable()
            scheduler.register(tracker)

        item.move_by(100, 0)
        scheduler.tick(batch=True)

        self.assertFalse(in_left.is_visible)
        self.assertTrue(in_right.is_visible)


if __name__ == "__main__":
    unittest.main()
