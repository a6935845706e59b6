# standard libraries
import logging
import unittest

# third party libraries
import numpy

# local libraries
from nion.flex import CellSurface
from nion.utils import Geometry


class TestCellSurfaceClass(unittest.TestCase):

    def setUp(self) -> None:
        pass

    def tearDown(self) -> None:
        pass

    def test_new_surface_is_filled(self) -> None:
        surface = CellSurface.CellSurface(Geometry.IntSize(width=3, height=2), fill_char="-", background_color="#111")
        self.assertEqual(surface.size, Geometry.IntSize(width=3, height=2))
        self.assertEqual(surface.to_text(), "---\n---")
        self.assertEqual(surface.background_at(2, 1), "#111")

    def test_fill_rect_is_clipped_to_surface(self) -> None:
        surface = CellSurface.CellSurface(Geometry.IntSize(width=4, height=3), fill_char=".")
        rect = Geometry.IntRect(origin=Geometry.IntPoint(x=-2, y=1), size=Geometry.IntSize(width=4, height=5))
        surface.fill_rect(rect, "#", "#F00")
        self.assertEqual(surface.to_text(), "....\n##..\n##..")
        self.assertEqual(surface.background_at(1, 2), "#F00")
        self.assertIsNone(surface.background_at(2, 2))

    def test_fill_rect_with_negative_size_does_nothing(self) -> None:
        surface = CellSurface.CellSurface(Geometry.IntSize(width=3, height=1), fill_char=".")
        rect = Geometry.IntRect(origin=Geometry.IntPoint(x=1, y=0), size=Geometry.IntSize(width=-2, height=1))
        surface.fill_rect(rect, "#")
        self.assertEqual(surface.to_text(), "...")

    def test_set_content_outside_surface_is_ignored(self) -> None:
        surface = CellSurface.CellSurface(Geometry.IntSize(width=2, height=2), fill_char=".")
        surface.set_content(5, 0, "x")
        surface.set_content(-1, 1, "x")
        surface.set_content(1, 1, "x")
        self.assertEqual(surface.to_text(), "..\n.x")
        self.assertEqual(surface.char_at(1, 1), "x")

    def test_draw_text_honors_max_width(self) -> None:
        surface = CellSurface.CellSurface(Geometry.IntSize(width=6, height=1), fill_char=".")
        surface.draw_text(1, 0, "flexible", max_width=3)
        self.assertEqual(surface.to_text(), ".fle..")
        surface.draw_text(4, 0, "xyz")
        self.assertEqual(surface.to_text(), ".flexy")

    def test_chars_returns_copy(self) -> None:
        surface = CellSurface.CellSurface(Geometry.IntSize(width=2, height=1), fill_char="a")
        chars = surface.chars
        chars[0, 0] = "b"
        self.assertTrue(numpy.array_equal(surface.chars, numpy.array([["a", "a"]])))


if __name__ == '__main__':
    logging.getLogger().setLevel(logging.DEBUG)
    unittest.main()
