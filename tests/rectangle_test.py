import copy
import logging
import unittest

import numpy as np
import pytest

from physys.geombase import Point2D, Vector2D
from physys.shapes import Rectangle, Shape


class TestRectangleScenarios(unittest.TestCase):
    def setUp(self):
        self.rect = Rectangle(Point2D(3, 4), 2.0, 1.0)

    def test_point_inside(self):
        self.assertTrue(self.rect.contains_point(Point2D(2, 3.5)))

    def test_point_on_border_of_copy(self):
        rect2 = self.rect.copy()
        self.assertTrue(rect2.contains_point(Point2D(1, 5)))

    def test_point_outside_after_assignment(self):
        rect3 = Rectangle(Point2D(6, 5), 100, 100)
        self.assertTrue(rect3.contains_point(Point2D(6, 5)))
        rect3.assign(self.rect)
        self.assertFalse(rect3.contains_point(Point2D(6, 5)))
        self.assertFalse(self.rect.contains_point(Point2D(6, 5)))

    def test_from_corners(self):
        rect = Rectangle.from_corners(Point2D(1, 3), Point2D(5, 5))
        self.assertTrue(rect.contains_point(Point2D(2, 3.5)))
        self.assertEqual(rect, self.rect)

    def test_rotated(self):
        rect = Rectangle(Point2D(3, 4), 2, 1, 90)
        self.assertTrue(rect.contains_point(Point2D(4, 6)))
        # Inside the unrotated rectangle, outside the rotated one.
        self.assertFalse(rect.contains_point(Point2D(4.5, 4)))


class TestRectangleConstruction(unittest.TestCase):
    def test_default_axes(self):
        rect = Rectangle(Point2D(0, 0), 1, 1)
        self.assertEqual(rect.axis_major, Vector2D(1, 0))
        self.assertEqual(rect.axis_minor, Vector2D(0, 1))

    def test_corner_form_sets_world_axes(self):
        rect = Rectangle.from_corners(Point2D(-1, -1), Point2D(1, 3))
        self.assertEqual(rect.center, Point2D(0, 1))
        self.assertEqual(rect.half_extents_major, 1.0)
        self.assertEqual(rect.half_extents_minor, 2.0)
        self.assertEqual(rect.axis_major, Vector2D(1, 0))
        self.assertEqual(rect.axis_minor, Vector2D(0, 1))

    def test_corner_form_with_swapped_corners(self):
        a = Rectangle.from_corners(Point2D(1, 3), Point2D(5, 5))
        b = Rectangle.from_corners(Point2D(5, 5), Point2D(1, 3))
        self.assertEqual(a, b)

    def test_negative_extents_are_made_absolute(self):
        self.assertEqual(
            Rectangle(Point2D(0, 0), -2, -1),
            Rectangle(Point2D(0, 0), 2, 1))

    def test_rotation_axes(self):
        rect = Rectangle(Point2D(0, 0), 2, 1, 90)
        self.assertAlmostEqual(rect.axis_major.x, 0.0)
        self.assertAlmostEqual(rect.axis_major.y, 1.0)
        self.assertAlmostEqual(rect.axis_minor.x, -1.0)
        self.assertAlmostEqual(rect.axis_minor.y, 0.0)

    def test_zero_rotation_matches_unrotated(self):
        self.assertEqual(
            Rectangle(Point2D(3, 4), 2, 1, 0),
            Rectangle(Point2D(3, 4), 2, 1))

    def test_center_cannot_move_in_place(self):
        rect = Rectangle(Point2D(3, 4), 2, 1)
        with self.assertRaises(AttributeError):
            rect.center.x = 100.0
        self.assertEqual(rect.center, Point2D(3, 4))
        self.assertTrue(rect.contains_point(Point2D(3, 4)))

    def test_shape_is_abstract(self):
        self.assertIsInstance(Rectangle(Point2D(), 1, 1), Shape)
        with self.assertRaises(TypeError):
            Shape(Point2D())


class TestRectangleCopy(unittest.TestCase):
    def setUp(self):
        self.rect = Rectangle(Point2D(3, 4), 2, 1, 30)

    def test_copy_is_equal(self):
        dup = self.rect.copy()
        self.assertEqual(dup, self.rect)
        self.assertIsNot(dup, self.rect)
        self.assertEqual(copy.copy(self.rect), self.rect)

    def test_copy_keeps_axes(self):
        dup = self.rect.copy()
        self.assertEqual(dup.axis_major, self.rect.axis_major)
        self.assertEqual(dup.axis_minor, self.rect.axis_minor)

    def test_copy_keeps_subclass(self):
        class Tile(Rectangle):
            __slots__ = ()

        tile = Tile(Point2D(1, 1), 0.5, 0.5)
        dup = tile.copy()
        self.assertIs(type(dup), Tile)
        self.assertEqual(dup, tile)

    def test_assign_copies_all_fields(self):
        other = Rectangle(Point2D(6, 5), 100, 100)
        other.assign(self.rect)
        self.assertEqual(other, self.rect)

    def test_assign_rejects_other_types(self):
        with self.assertRaises(TypeError):
            self.rect.assign(Point2D(1, 1))

    def test_inequality_per_field(self):
        base = Rectangle(Point2D(3, 4), 2, 1)
        self.assertNotEqual(base, Rectangle(Point2D(3, 4.5), 2, 1))
        self.assertNotEqual(base, Rectangle(Point2D(3, 4), 2.5, 1))
        self.assertNotEqual(base, Rectangle(Point2D(3, 4), 2, 1.5))
        self.assertNotEqual(base, Rectangle(Point2D(3, 4), 2, 1, 45))

    def test_not_hashable(self):
        with self.assertRaises(TypeError):
            hash(self.rect)


class TestBorderTolerance(unittest.TestCase):
    def setUp(self):
        self.rect = Rectangle(Point2D(0, 0), 2, 1)

    def test_corner_within_tolerance(self):
        self.assertTrue(self.rect.contains_point(Point2D(2 + 5e-6, 1 + 5e-6)))
        self.assertTrue(self.rect.contains_point(Point2D(-2 - 5e-6, -1 - 5e-6)))

    def test_major_border_within_tolerance(self):
        self.assertTrue(self.rect.contains_point(Point2D(2 + 5e-6, 0.5)))

    def test_minor_border_within_tolerance(self):
        self.assertTrue(self.rect.contains_point(Point2D(0.5, -1 - 5e-6)))

    def test_beyond_tolerance(self):
        self.assertFalse(self.rect.contains_point(Point2D(2 + 2e-5, 0.5)))
        self.assertFalse(self.rect.contains_point(Point2D(0.5, 1 + 2e-5)))

    def test_one_axis_within_tolerance_other_outside(self):
        self.assertFalse(self.rect.contains_point(Point2D(2 + 5e-6, 1 + 2e-5)))
        self.assertFalse(self.rect.contains_point(Point2D(3, 1 + 5e-6)))

    def test_degenerate_rectangle(self):
        rect = Rectangle(Point2D(1, 1), 0, 0)
        self.assertTrue(rect.contains_point(Point2D(1, 1)))
        self.assertTrue(rect.contains_point(Point2D(1 + 5e-6, 1)))
        self.assertFalse(rect.contains_point(Point2D(1.1, 1)))


class TestRectangleGeometry(unittest.TestCase):
    def test_corners_unrotated(self):
        rect = Rectangle(Point2D(3, 4), 2, 1)
        np.testing.assert_array_equal(
            rect.corners(), [[1, 3], [5, 3], [5, 5], [1, 5]])

    def test_corners_rotated(self):
        rect = Rectangle(Point2D(3, 4), 2, 1, 90)
        np.testing.assert_array_almost_equal(
            rect.corners(), [[4, 2], [4, 6], [2, 6], [2, 2]])

    def test_corners_are_contained(self):
        for rotation in (None, 0, 30, 90, 135, 270):
            rect = Rectangle(Point2D(-1, 2), 3, 0.5, rotation)
            self.assertTrue(rect.contains_points(rect.corners()).all())

    def test_pose(self):
        rect = Rectangle(Point2D(3, 4), 2, 1, 90)
        tip = rect.pose().transform_point(Point2D(2, 0))
        self.assertIsInstance(tip, Point2D)
        self.assertAlmostEqual(tip.x, 3.0)
        self.assertAlmostEqual(tip.y, 6.0)


def test_normalization_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="physys"):
        Rectangle(Point2D(0, 0), -2, 1)
        Rectangle(Point2D(0, 0), 0, 1)
    messages = [r.getMessage() for r in caplog.records if r.name == "physys"]
    assert any("negative half-extents" in m for m in messages)
    assert any("degenerate" in m for m in messages)


def test_regular_rectangle_is_not_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="physys"):
        Rectangle(Point2D(0, 0), 2, 1, 45)
    assert not [r for r in caplog.records if r.name == "physys"]


def test_contains_points_rejects_bad_shape():
    rect = Rectangle(Point2D(0, 0), 1, 1)
    with pytest.raises(ValueError):
        rect.contains_points([1.0, 2.0])
    with pytest.raises(ValueError):
        rect.contains_points(np.zeros((3, 3)))
