"""
    CellSurface module contains a character cell drawing surface.

    A cell surface is a grid of characters, each with an optional background color. Flex containers and their
    content draw into a cell surface; the host is responsible for presenting it.
"""
from __future__ import annotations

# standard libraries
import typing

# third party libraries
import numpy

# local libraries
from nion.utils import Geometry


class CellSurface:
    """A grid of character cells. Writes outside the grid are ignored."""

    def __init__(self, size: Geometry.IntSize, fill_char: str = " ", background_color: typing.Optional[str] = None) -> None:
        height, width = max(size.height, 0), max(size.width, 0)
        self.__size = Geometry.IntSize(width=width, height=height)
        self.__chars = numpy.full((height, width), fill_char, dtype="<U1")
        self.__background_colors = numpy.full((height, width), background_color, dtype=object)

    @property
    def size(self) -> Geometry.IntSize:
        return self.__size

    @property
    def chars(self) -> numpy.typing.NDArray[typing.Any]:
        return self.__chars.copy()

    @property
    def background_colors(self) -> numpy.typing.NDArray[typing.Any]:
        return self.__background_colors.copy()

    def char_at(self, x: int, y: int) -> str:
        return str(self.__chars[y, x])

    def background_at(self, x: int, y: int) -> typing.Optional[str]:
        return typing.cast(typing.Optional[str], self.__background_colors[y, x])

    def set_content(self, x: int, y: int, char: str, background_color: typing.Optional[str] = None) -> None:
        if 0 <= x < self.__size.width and 0 <= y < self.__size.height:
            self.__chars[y, x] = char
            self.__background_colors[y, x] = background_color

    def fill_rect(self, rect: Geometry.IntRect, char: str = " ", background_color: typing.Optional[str] = None) -> None:
        left = max(rect.left, 0)
        top = max(rect.top, 0)
        right = min(rect.left + rect.width, self.__size.width)
        bottom = min(rect.top + rect.height, self.__size.height)
        if left < right and top < bottom:
            self.__chars[top:bottom, left:right] = char
            self.__background_colors[top:bottom, left:right] = background_color

    def draw_text(self, x: int, y: int, text: str, max_width: typing.Optional[int] = None,
                  background_color: typing.Optional[str] = None) -> None:
        if max_width is not None:
            text = text[:max(max_width, 0)]
        for offset, char in enumerate(text):
            self.set_content(x + offset, y, char, background_color)

    def to_text(self) -> str:
        return "\n".join("".join(row) for row in self.__chars)
