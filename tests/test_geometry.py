"""
Tests for world-space bounds and overlap detection
"""

import unittest

import numpy as np

from src.ui_culling.geometry import get_world_rect, overlaps_many, rects_overlap
from src.ui_culling.models import (
    BOTTOM_LEFT,
    TOP_RIGHT,
    AxisAlignedRect,
    CornerBuffer,
    LayoutNode,
)


class TestAxisAlignedRect(unittest.TestCase):
    """Test AxisAlignedRect bounds and overlap."""

    def test_partial_overlap(self):
        """Element (0,0,10,10) and viewport (5,5,10,10) overlap."""
        element = AxisAlignedRect(0, 0, 10, 10)
        viewport = AxisAlignedRect(5, 5, 10, 10)

        self.assertTrue(rects_overlap(element, viewport))

    def test_touching_edge_does_not_overlap(self):
        """Element (0,0,10,10) and viewport (10,0,10,10) only touch."""
        element = AxisAlignedRect(0, 0, 10, 10)
        viewport = AxisAlignedRect(10, 0, 10, 10)

        self.assertFalse(rects_overlap(element, viewport))

    def test_touching_corner_does_not_overlap(self):
        element = AxisAlignedRect(0, 0, 10, 10)
        viewport = AxisAlignedRect(10, 10, 10, 10)

        self.assertFalse(rects_overlap(element, viewport))

    def test_contained_overlaps(self):
        element = AxisAlignedRect(2, 2, 1, 1)
        viewport = AxisAlignedRect(0, 0, 10, 10)

        self.assertTrue(rects_overlap(element, viewport))
        self.assertTrue(rects_overlap(viewport, element))

    def test_separated(self):
        element = AxisAlignedRect(0, 50, 10, 10)
        viewport = AxisAlignedRect(0, 0, 10, 10)

        self.assertFalse(rects_overlap(element, viewport))

    def test_symmetry(self):
        """overlap(a, b) == overlap(b, a) for a spread of pairs."""
        rects = [
            AxisAlignedRect(0, 0, 10, 10),
            AxisAlignedRect(5, 5, 10, 10),
            AxisAlignedRect(10, 0, 10, 10),
            AxisAlignedRect(-5, -5, 3, 3),
            AxisAlignedRect(20, 20, -15, -15),
            AxisAlignedRect(3, 3, 0, 0),
        ]
        for a in rects:
            for b in rects:
                self.assertEqual(rects_overlap(a, b), rects_overlap(b, a), (a, b))

    def test_negative_extents_are_normalized(self):
        """Mirrored rect (10,10,-10,-10) covers the same area as (0,0,10,10)."""
        mirrored = AxisAlignedRect(10, 10, -10, -10)

        self.assertEqual(mirrored.x_min, 0)
        self.assertEqual(mirrored.x_max, 10)
        self.assertEqual(mirrored.y_min, 0)
        self.assertEqual(mirrored.y_max, 10)
        self.assertTrue(rects_overlap(mirrored, AxisAlignedRect(5, 5, 10, 10)))
        self.assertFalse(rects_overlap(mirrored, AxisAlignedRect(10, 0, 10, 10)))

    def test_zero_area_never_overlaps(self):
        point = AxisAlignedRect(5, 5, 0, 0)
        line = AxisAlignedRect(0, 5, 10, 0)
        viewport = AxisAlignedRect(0, 0, 10, 10)

        self.assertFalse(rects_overlap(point, viewport))
        self.assertFalse(rects_overlap(line, viewport))


class TestGetWorldRect(unittest.TestCase):
    """Test conversion from node corners to world rect."""

    def test_root_node(self):
        node = LayoutNode("item", x=3, y=4, width=10, height=20)

        rect = get_world_rect(node)

        self.assertEqual(rect, AxisAlignedRect(3, 4, 10, 20))

    def test_parent_offset_and_scale(self):
        """Child corners resolve through parent position and scale."""
        content = LayoutNode("content", x=100, y=50, scale_x=2.0, scale_y=0.5)
        item = LayoutNode("item", x=10, y=10, width=5, height=8, parent=content)

        rect = get_world_rect(item)

        self.assertEqual(rect, AxisAlignedRect(120, 55, 10, 4))

    def test_parent_move_is_seen_on_next_read(self):
        content = LayoutNode("content")
        item = LayoutNode("item", width=10, height=10, parent=content)

        self.assertEqual(get_world_rect(item).y, 0)
        content.move_by(0, 25)
        self.assertEqual(get_world_rect(item).y, 25)

    def test_negative_scale_gives_negative_size(self):
        node = LayoutNode("mirrored", x=10, y=0, width=10, height=10, scale_x=-1.0)

        rect = get_world_rect(node)

        self.assertEqual(rect.width, -10)
        self.assertEqual(rect.x_min, 0)
        self.assertEqual(rect.x_max, 10)

    def test_uses_provided_buffer(self):
        """Corners are written into the caller's buffer in place."""
        buffer = CornerBuffer()
        bottom_left = buffer[BOTTOM_LEFT]
        node = LayoutNode("item", x=1, y=2, width=3, height=4)

        get_world_rect(node, buffer)

        self.assertIs(buffer[BOTTOM_LEFT], bottom_left)
        self.assertEqual((bottom_left.x, bottom_left.y), (1, 2))
        self.assertEqual((buffer[TOP_RIGHT].x, buffer[TOP_RIGHT].y), (4, 6))

    def test_reparent_cycle_rejected(self):
        parent = LayoutNode("parent")
        child = LayoutNode("child", parent=parent)

        with self.assertRaises(ValueError):
            parent.set_parent(child)

    def test_reparent_moves_child(self):
        a = LayoutNode("a", x=0)
        b = LayoutNode("b", x=100)
        child = LayoutNode("child", width=1, height=1, parent=a)

        child.set_parent(b)

        self.assertNotIn(child, a.children)
        self.assertIn(child, b.children)
        self.assertEqual(get_world_rect(child).x, 100)


class TestOverlapsMany(unittest.TestCase):
    """Test vectorized overlap against the scalar predicate."""

    def test_matches_scalar_predicate(self):
        viewport = AxisAlignedRect(0, 0, 10, 10)
        rects = [
            AxisAlignedRect(5, 5, 10, 10),
            AxisAlignedRect(10, 0, 10, 10),
            AxisAlignedRect(-10, -10, 10, 10),
            AxisAlignedRect(12, 3, -4, 2),
            AxisAlignedRect(3, 3, 0, 5),
            AxisAlignedRect(0, -20, 10, 10),
        ]

        result = overlaps_many([r.as_tuple() for r in rects], viewport)

        self.assertEqual(result.dtype, np.bool_)
        self.assertEqual(list(result), [rects_overlap(r, viewport) for r in rects])

    def test_empty_input(self):
        result = overlaps_many([], AxisAlignedRect(0, 0, 10, 10))

        self.assertEqual(result.shape, (0,))


if __name__ == "__main__":
    unittest.main()
