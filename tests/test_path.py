from __future__ import annotations

import sys
import unittest
from pathlib import Path as FsPath

TESTS_DIR = FsPath(__file__).resolve().parent
PROJECT_ROOT = TESTS_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from svgtree import Line, Path


class PathTests(unittest.TestCase):
    def test_close_path_returns_to_start(self) -> None:
        path = Path()
        path.move_to(0, 0)
        path.line_to(10, 10)
        path.close_path()
        self.assertEqual(path.get_attribute("d"), "M 0 0 L 10 10 L 0 0")

    def test_line_to_on_empty_path_starts_it(self) -> None:
        path = Path().line_to(2, 3).line_to(4, 5).close_path()
        self.assertEqual(path.get_attribute("d"), "M 2 3 L 4 5 L 2 3")

    def test_line_to_accepts_a_point(self) -> None:
        line = Line(0, 0, 10, 0)
        path = Path().move_to(0, 5).line_to(line.along(0.5))
        self.assertEqual(path.get_attribute("d"), "M 0 5 L 5 0")

    def test_move_to_appends_subpath(self) -> None:
        path = Path().move_to(0, 0).line_to(1, 0)
        path.move_to(5, 5).line_to(6, 6).close_path()
        self.assertEqual(path.get_attribute("d"), "M 0 0 L 1 0 M 5 5 L 6 6 L 5 5")

    def test_coordinates_use_decimal_form(self) -> None:
        path = Path().move_to(0.5, 1.0).line_to(2 / 3, -0.25)
        self.assertEqual(path.get_attribute("d"), "M 0.5 1 L 0.666667 -0.25")

    def test_close_path_on_empty_path_is_noop(self) -> None:
        path = Path()
        path.close_path()
        self.assertNotIn("d", path.attributes)
        self.assertEqual(path.serialize(), "<path />")

    def test_non_numeric_coordinates_raise(self) -> None:
        path = Path()
        with self.assertRaises(TypeError):
            path.move_to(True, 0)
        with self.assertRaises(TypeError):
            path.line_to((0, None))
        self.assertNotIn("d", path.attributes)
        path.move_to(1, 1)
        with self.assertRaises(TypeError):
            path.line_to(2, False)
        self.assertEqual(path.get_attribute("d"), "M 1 1")

    def test_seeded_d_sets_start_point(self) -> None:
        path = Path({"d": "M 1 1 L 4 1"})
        path.line_to(4, 4).close_path()
        self.assertEqual(path.get_attribute("d"), "M 1 1 L 4 1 L 4 4 L 1 1")

    def test_assigned_d_uses_last_move(self) -> None:
        path = Path().move_to(9, 9)
        path.set_attribute("d", "M0,0 L5,0 M-2.5 1e1 L3 3")
        path.close_path()
        self.assertTrue(path.get_attribute("d").endswith("L 3 3 L -2.5 10"))

    def test_assigned_d_without_move_clears_start(self) -> None:
        path = Path().move_to(9, 9)
        path.set_attribute("d", "L 3 3")
        path.close_path()
        self.assertEqual(path.get_attribute("d"), "L 3 3")

    def test_path_serializes_with_other_attributes(self) -> None:
        path = Path({"stroke": "black", "fill": "none"}).move_to(0, 0).line_to(1, 1)
        self.assertEqual(
            path.serialize(),
            '<path d="M 0 0 L 1 1" fill="none" stroke="black" />',
        )


if __name__ == "__main__":
    unittest.main()
