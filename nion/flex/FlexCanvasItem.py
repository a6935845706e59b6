"""
FlexCanvasItem module contains the flex container and the content it arranges.

OVERVIEW

A FlexContainer arranges content items along a row or a column using a FlexLayout. Content items are any objects
implementing the FlexContent protocol: they report visibility and focus, accept a rectangle, draw into a cell surface,
and handle keys and mouse events. FlexContainer implements the protocol too, so containers nest.

Visibility is supplied by a visibility function per content item and per container. The function is evaluated each
time the container lays out, after the content has received its provisional rectangle, so it may depend on size.

CONTENT ITEMS

- BackgroundCellItem
- FlexContainer
"""
from __future__ import annotations

# standard libraries
import enum
import logging
import typing

# third party libraries
# None

# local libraries
from nion.flex import CellSurface
from nion.flex import FlexLayout
from nion.utils import Event
from nion.utils import Geometry


class MouseAction(enum.Enum):
    Pressed = 0
    Released = 1
    Moved = 2
    Clicked = 3
    Wheel = 4


class FlexContent(typing.Protocol):

    @property
    def is_visible(self) -> bool: raise NotImplementedError()

    @property
    def has_focus(self) -> bool: raise NotImplementedError()

    def update_layout(self, canvas_rect: Geometry.IntRect) -> None: ...

    def draw(self, surface: CellSurface.CellSurface) -> None: ...

    def key_pressed(self, key: str) -> bool: ...

    def mouse_event(self, action: MouseAction, p: Geometry.IntPoint) -> bool: ...


VisibilityFunc = typing.Callable[[typing.Any], bool]


def always_visible(content: typing.Any) -> bool:
    return True


def never_visible(content: typing.Any) -> bool:
    return False


def minimum_size_visibility(width: int = 0, height: int = 0) -> VisibilityFunc:
    """Return a visibility function which hides content whose canvas rect is smaller than width x height."""

    def is_visible(content: typing.Any) -> bool:
        canvas_rect = content.canvas_rect
        return canvas_rect.width >= width and canvas_rect.height >= height

    return is_visible


def _empty_rect() -> Geometry.IntRect:
    return Geometry.IntRect(origin=Geometry.IntPoint(x=0, y=0), size=Geometry.IntSize(width=0, height=0))


class BackgroundCellItem:
    """ Content item to fill its rect with a fill character and background color, with an optional text label.

    Key and mouse events are passed to on_key_pressed and on_mouse_event if they are set.
    """

    def __init__(self, background_color: typing.Optional[str] = None, fill_char: str = " ",
                 text: typing.Optional[str] = None, visibility: VisibilityFunc = always_visible) -> None:
        self.background_color = background_color
        self.fill_char = fill_char
        self.text = text
        self.visibility = visibility
        self.focused = False
        self.canvas_rect = _empty_rect()
        self.on_key_pressed: typing.Optional[typing.Callable[[str], bool]] = None
        self.on_mouse_event: typing.Optional[typing.Callable[[MouseAction, Geometry.IntPoint], bool]] = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__} ({self.text or self.fill_char!r}) {self.canvas_rect}"

    @property
    def is_visible(self) -> bool:
        return self.visibility(self)

    @property
    def has_focus(self) -> bool:
        return self.focused

    def update_layout(self, canvas_rect: Geometry.IntRect) -> None:
        self.canvas_rect = canvas_rect

    def draw(self, surface: CellSurface.CellSurface) -> None:
        surface.fill_rect(self.canvas_rect, self.fill_char, self.background_color)
        if self.text and self.canvas_rect.height > 0:
            surface.draw_text(self.canvas_rect.left, self.canvas_rect.top, self.text, self.canvas_rect.width, self.background_color)

    def key_pressed(self, key: str) -> bool:
        if callable(self.on_key_pressed):
            return self.on_key_pressed(key)
        return False

    def mouse_event(self, action: MouseAction, p: Geometry.IntPoint) -> bool:
        if callable(self.on_mouse_event) and self.canvas_rect.contains_point(p):
            return self.on_mouse_event(action, p)
        return False


class FlexContainer:
    """A container arranging content items in a row or a column.

    Items with a fixed size keep it; other items share the remaining space according to their proportions. When an
    item is hidden, its space goes to its consumers (see set_consumers) or is left empty.

    The container fills its rect with its background color on each draw, even when hidden, so that content from a
    previous draw does not remain on the surface.

    items_changed_event is fired whenever items are added, removed, resized or given consumers.
    """

    def __init__(self, direction: FlexLayout.FlexDirection = FlexLayout.FlexDirection.Row,
                 background_color: typing.Optional[str] = None, visibility: VisibilityFunc = always_visible) -> None:
        self.__flex_layout = FlexLayout.FlexLayout(direction)
        self.background_color = background_color
        self.visibility = visibility
        self.canvas_rect = _empty_rect()
        self.items_changed_event = Event.Event()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__} ({self.direction.name}) [{self.__flex_layout.item_count}] {self.canvas_rect}"

    @property
    def direction(self) -> FlexLayout.FlexDirection:
        return self.__flex_layout.direction

    @direction.setter
    def direction(self, direction: FlexLayout.FlexDirection) -> None:
        self.__flex_layout.direction = direction

    @property
    def items(self) -> typing.List[FlexLayout.FlexItem]:
        return self.__flex_layout.items

    def add_item(self, content: typing.Optional[FlexContent], fixed_size: int = 0, proportion: int = 0, focus: bool = False) -> FlexLayout.FlexItem:
        item = self.__flex_layout.add_item(content, fixed_size, proportion, focus)
        self.items_changed_event.fire()
        return item

    def remove_item(self, content: typing.Optional[FlexContent]) -> None:
        self.__flex_layout.remove_item(content)
        self.items_changed_event.fire()

    def clear(self) -> None:
        self.__flex_layout.clear()
        self.items_changed_event.fire()

    def resize_item(self, content: typing.Optional[FlexContent], fixed_size: int, proportion: int) -> None:
        self.__flex_layout.resize_item(content, fixed_size, proportion)
        self.items_changed_event.fire()

    def set_consumers(self, content: typing.Optional[FlexContent], consumers: typing.Sequence[int]) -> None:
        self.__flex_layout.set_consumers(content, consumers)
        self.items_changed_event.fire()

    @property
    def is_visible(self) -> bool:
        return self.visibility(self)

    @property
    def has_focus(self) -> bool:
        return any(item.content is not None and item.content.has_focus for item in self.__flex_layout.items)

    def focus(self, delegate: typing.Callable[[FlexContent], None]) -> None:
        """Pass the first visible content which attracts focus to delegate. Hidden content never receives focus."""
        for item in self.__flex_layout.items:
            if item.content is not None and item.focus and item.content.is_visible:
                delegate(item.content)
                return

    def update_layout(self, canvas_rect: Geometry.IntRect) -> None:
        self.canvas_rect = canvas_rect

    def layout(self) -> typing.List[FlexLayout.FlexPlacement]:
        """Return the placements of the visible content within the canvas rect."""

        def is_visible(item: FlexLayout.FlexItem, provisional_rect: Geometry.IntRect) -> bool:
            # content sees its provisional rect before being asked for visibility
            item.content.update_layout(provisional_rect)
            return bool(item.content.is_visible)

        return self.__flex_layout.layout(self.canvas_rect, is_visible)

    def draw(self, surface: CellSurface.CellSurface) -> None:
        surface.fill_rect(self.canvas_rect, " ", self.background_color)
        if not self.is_visible:
            return
        placements = self.layout()
        logging.debug("Flex container %s placements %s", self, [(placement.index, placement.rect) for placement in placements])
        focused_contents: typing.List[FlexContent] = list()
        for placement in placements:
            content = placement.content
            if content is not None:
                content.update_layout(placement.rect)
                if content.has_focus:
                    focused_contents.append(content)
                else:
                    content.draw(surface)
        # focused content is drawn last so that it ends up on top
        for content in reversed(focused_contents):
            content.draw(surface)

    def key_pressed(self, key: str) -> bool:
        for item in self.__flex_layout.items:
            if item.content is not None and item.content.has_focus:
                return item.content.key_pressed(key)
        return False

    def mouse_event(self, action: MouseAction, p: Geometry.IntPoint) -> bool:
        if not self.canvas_rect.contains_point(p):
            return False
        # pass the event to the first visible content which takes it
        for item in self.__flex_layout.items:
            if item.content is not None and item.content.is_visible:
                if item.content.mouse_event(action, p):
                    return True
        return False
