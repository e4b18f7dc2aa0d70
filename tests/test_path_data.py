"""
Tests for flattening path data into absolute points.
"""

import unittest
import numpy as np

from svg2level.core.path_data import flatten, tokenize, command_of, PathCommand
from svg2level.core.errors import UnsupportedCommandError, MalformedPathDataError


class TestTokens(unittest.TestCase):

    def test_tokenize_spaces_and_commas(self):
        self.assertEqual(tokenize("M 0,0  L\n10,5"), ['M', '0', '0', 'L', '10', '5'])

    def test_command_lookup(self):
        self.assertIs(command_of('M'), PathCommand.MOVETO)
        self.assertIs(command_of('m'), PathCommand.MOVETO_REL)
        self.assertIs(command_of('z'), PathCommand.CLOSE_REL)
        self.assertIsNone(command_of('10'))
        self.assertIsNone(command_of('-1e5'))


class TestFlatten(unittest.TestCase):

    def test_absolute_path_with_close(self):
        pts = flatten("M 0,0 L 10,0 L 10,10 Z")
        np.testing.assert_array_equal(pts, [[0, 0], [10, 0], [10, 10]])

    def test_moveto_takes_implicit_pairs(self):
        pts = flatten("M 1,2 3,4 5,6")
        np.testing.assert_array_equal(pts, [[1, 2], [3, 4], [5, 6]])

    def test_relative_moveto(self):
        pts = flatten("m 10,10 5,5")
        np.testing.assert_array_equal(pts, [[10, 10], [15, 15]])

    def test_relative_moveto_restarts_at_origin(self):
        pts = flatten("M 100,100 m 1,1 1,1")
        np.testing.assert_array_equal(pts, [[100, 100], [1, 1], [2, 2]])

    def test_strict_variant_rejects_relative_moveto(self):
        with self.assertRaises(UnsupportedCommandError) as ctx:
            flatten("m 10,10 5,5", relative_moveto=False)
        self.assertEqual(ctx.exception.token, 'm')

    def test_close_discards_remaining_tokens(self):
        pts = flatten("M 0,0 L 1,1 z M 50,50 C 1 2 3 4 5 6")
        np.testing.assert_array_equal(pts, [[0, 0], [1, 1]])

    def test_revisited_points_are_kept(self):
        pts = flatten("M 0,0 L 1,0 L 0,0 L 1,0")
        self.assertEqual(len(pts), 4)

    def test_unsupported_command(self):
        with self.assertRaises(UnsupportedCommandError) as ctx:
            flatten("M 0,0 C 1,1 2,2 3,3")
        self.assertEqual(ctx.exception.token, 'C')
        self.assertIn("'C'", str(ctx.exception))

    def test_relative_lineto_is_unsupported(self):
        with self.assertRaises(UnsupportedCommandError):
            flatten("M 0,0 l 1,1")

    def test_horizontal_and_arc_are_unsupported(self):
        for d in ("M 0,0 H 10", "M 0,0 V 10", "M 0,0 A 1 1 0 0 1 5 5", "M 0,0 Q 1 1 2 2"):
            with self.assertRaises(UnsupportedCommandError):
                flatten(d)

    def test_bad_number(self):
        with self.assertRaises(MalformedPathDataError) as ctx:
            flatten("M 0,abc")
        self.assertEqual(ctx.exception.token, 'abc')

    def test_non_finite_and_separated_numbers_rejected(self):
        for d, bad in (("M nan,0", 'nan'), ("M 0,inf", 'inf'), ("M -Infinity,0", '-Infinity'),
                       ("M 1_0,0", '1_0'), ("M 0,1e999", '1e999')):
            with self.assertRaises(MalformedPathDataError) as ctx:
                flatten(d)
            self.assertEqual(ctx.exception.token, bad)

    def test_svg_number_forms_accepted(self):
        pts = flatten("M +1.5,.5 L -2.,1E2")
        np.testing.assert_array_equal(pts, [[1.5, 0.5], [-2.0, 100.0]])

    def test_odd_coordinate_count_at_end(self):
        with self.assertRaises(MalformedPathDataError):
            flatten("M 0,0 10")

    def test_odd_coordinate_count_before_command(self):
        with self.assertRaises(MalformedPathDataError):
            flatten("M 0,0 10 L 5,5")

    def test_coordinate_before_command(self):
        with self.assertRaises(MalformedPathDataError):
            flatten("0,0 L 5,5")

    def test_empty_path(self):
        pts = flatten("")
        self.assertEqual(pts.shape, (0, 2))

    def test_single_point(self):
        np.testing.assert_array_equal(flatten("M 5,5"), [[5, 5]])


if __name__ == '__main__':
    unittest.main()
