"""
Unit tests for parsing viewer output.
"""

import unittest
from decimal import Decimal

import numpy as np

from arsandbox.calibration.output_parser import (
    CornerSlot, CalibrationValues, match_plane_equation, match_corner,
    parse_calibration_output
)
from tests.sample_output import (
    COMPLETE_OUTPUT, EXPECTED_LAYOUT, PLANE_LINE, LOWER_LEFT, UPPER_RIGHT
)

SAND_OFFSET = Decimal("8.7")


class TestPlaneMatcher(unittest.TestCase):

    def test_marker_line(self):
        plane = match_plane_equation(PLANE_LINE, SAND_OFFSET)
        self.assertIsNotNone(plane)
        self.assertEqual(plane.normal, ("0.0076185", "0.0271708", "0.999602"))
        self.assertEqual(plane.base_offset, Decimal("-98.0295"))
        self.assertEqual(plane.offset, Decimal("-106.7295"))

    def test_offset_arithmetic_is_exact(self):
        plane = match_plane_equation(
            "Camera-space plane equation: x * (0, 0, 1) = 10.0", Decimal("8.7"))
        self.assertEqual(plane.offset, Decimal("1.3"))
        self.assertEqual(str(plane.offset), "1.3")

    def test_sand_offset_given_as_text(self):
        plane = match_plane_equation(
            "Camera-space plane equation: x * (0, 0, 1) = 10.0", "2.5")
        self.assertEqual(plane.offset, Decimal("7.5"))

    def test_layout_line(self):
        plane = match_plane_equation(PLANE_LINE, SAND_OFFSET)
        self.assertEqual(plane.layout_line(), EXPECTED_LAYOUT[0])

    def test_non_marker_lines(self):
        self.assertIsNone(match_plane_equation(LOWER_LEFT, SAND_OFFSET))
        self.assertIsNone(match_plane_equation("Camera-space plane equation: pending", SAND_OFFSET))
        self.assertIsNone(match_plane_equation(
            "Camera-space plane equation: x * (1, 2) = 3", SAND_OFFSET))

    def test_normal_vector(self):
        plane = match_plane_equation(PLANE_LINE, SAND_OFFSET)
        np.testing.assert_allclose(plane.as_vector(), [0.0076185, 0.0271708, 0.999602])

    def test_distance_to_plane(self):
        plane = match_plane_equation(
            "Camera-space plane equation: x * (0, 0, 2) = -200", SAND_OFFSET)
        self.assertAlmostEqual(plane.distance_to(np.array([5.0, 5.0, -100.0])), 0.0)
        self.assertAlmostEqual(plane.distance_to(np.array([0.0, 0.0, -90.0])), 10.0)


class TestCornerMatcher(unittest.TestCase):

    def test_lone_triple(self):
        corner = match_corner("  " + LOWER_LEFT + "  ")
        self.assertEqual(corner.components, ("-48.2164", "-36.7041", "-97.1038"))
        self.assertEqual(corner.text, LOWER_LEFT)

    def test_triple_must_fill_the_line(self):
        self.assertIsNone(match_corner("point " + LOWER_LEFT))
        self.assertIsNone(match_corner(LOWER_LEFT + " " + UPPER_RIGHT))
        self.assertIsNone(match_corner("(1, 2)"))
        self.assertIsNone(match_corner("(a, b, c)"))

    def test_signature_classification(self):
        cases = {
            "(-1, -1, -1)": CornerSlot.LOWER_LEFT,
            "(1, -1, -1)": CornerSlot.LOWER_RIGHT,
            "(-1, 1, -1)": CornerSlot.UPPER_LEFT,
            "(1, 1, -1)": CornerSlot.UPPER_RIGHT,
        }
        for line, slot in cases.items():
            with self.subTest(line=line):
                corner = match_corner(line)
                self.assertEqual(CornerSlot.from_signature(corner.signature), slot)

    def test_unmapped_octants(self):
        for line in ["(1, 1, 1)", "(-1, -1, 1)", "(1, -1, 1)", "(-1, 1, 1)"]:
            with self.subTest(line=line):
                self.assertIsNone(CornerSlot.from_signature(match_corner(line).signature))


class TestParseCalibrationOutput(unittest.TestCase):

    def test_complete_output(self):
        values = parse_calibration_output(COMPLETE_OUTPUT, SAND_OFFSET)
        self.assertIsNotNone(values.plane)
        for slot in CornerSlot:
            self.assertIsNotNone(values.corner(slot))
        self.assertEqual(values.layout_lines(), EXPECTED_LAYOUT)

    def test_accepts_line_iterable(self):
        values = parse_calibration_output(COMPLETE_OUTPUT.splitlines(), SAND_OFFSET)
        self.assertEqual(values.layout_lines(), EXPECTED_LAYOUT)

    def test_later_duplicate_corner_wins(self):
        output = COMPLETE_OUTPUT + "\n(-10.5, -20.25, -99.0)\n"
        values = parse_calibration_output(output, SAND_OFFSET)
        self.assertEqual(values.lower_left.text, "(-10.5, -20.25, -99.0)")

    def test_later_plane_wins(self):
        output = COMPLETE_OUTPUT + "\nCamera-space plane equation: x * (0, 0, 1) = 10.0\n"
        values = parse_calibration_output(output, SAND_OFFSET)
        self.assertEqual(values.plane.offset, Decimal("1.3"))

    def test_points_outside_corner_octants_are_dropped(self):
        values = parse_calibration_output("(1.0, 2.0, 3.0)\n", SAND_OFFSET)
        self.assertEqual(values, CalibrationValues(dropped_corners=values.dropped_corners))
        self.assertEqual(len(values.dropped_corners), 1)

    def test_empty_output(self):
        values = parse_calibration_output("", SAND_OFFSET)
        self.assertIsNone(values.plane)
        self.assertIsNone(values.upper_right)

    def test_incomplete_values_cannot_render(self):
        values = parse_calibration_output(PLANE_LINE, SAND_OFFSET)
        with self.assertRaises(ValueError):
            values.layout_lines()


if __name__ == "__main__":
    unittest.main()
