"""
FlexLayout module contains the single axis flex layout and its solver.

OVERVIEW

A flex layout arranges an ordered list of items along one axis of a rectangle. Each item either has a fixed size or
competes for the remaining space using an integer proportion. Any item may be hidden when the layout is computed.

A hidden item can name consumers, sibling items which absorb its space. The fixed size and the proportion of the
hidden item are split evenly among its consumers. To keep the proportion split exact, every proportion is scaled by the
least common multiple of the consumer group sizes before any division happens.

The solver runs in two passes:

- the redistribution pass assigns provisional sizes, asks each item whether it is visible at its provisional size, and
  collects the fixed and proportion deltas donated by hidden items.
- the allocation pass assigns the final sizes to the visible items, applying the deltas.

Both passes hand out proportional space using a running remainder so that the sizes always add up to the space being
distributed. The solver keeps no state between layouts.

GLOSSARY

"primary axis" is the axis along which space is distributed (width for rows, height for columns).

"consumer" is an item designated to receive the space of a hidden item.

"scale" is the least common multiple of all consumer group sizes.

"placement" is the final rectangle of a visible item.
"""
from __future__ import annotations

# standard libraries
import dataclasses
import enum
import functools
import logging
import math
import typing

# third party libraries
# None

# local libraries
from nion.utils import Geometry


class FlexDirection(enum.Enum):
    Row = 0
    Column = 1


@dataclasses.dataclass
class FlexItem:
    """An item in a flex layout.

    The content may be None for an empty spacer. A fixed size greater than zero takes precedence over the proportion.
    """
    content: typing.Any
    fixed_size: int = 0
    proportion: int = 0
    focus: bool = False
    consumers: typing.List[int] = dataclasses.field(default_factory=list)

    @property
    def reserved_size(self) -> int:
        return self.fixed_size if self.fixed_size > 0 else 0

    def scaled_proportion(self, scale: int) -> int:
        """Return the proportion multiplied by scale. Items with a fixed size have no base weight; their proportion is ignored."""
        return self.proportion * scale if self.fixed_size <= 0 else 0


@dataclasses.dataclass(frozen=True)
class FlexPlacement:
    index: int
    content: typing.Any
    rect: Geometry.IntRect


@dataclasses.dataclass
class RedistributionResultType:
    scale: int
    distributable: int
    proportion_sum: int
    visible: typing.List[bool]
    fixed_deltas: typing.List[int]
    proportion_deltas: typing.List[int]


@dataclasses.dataclass
class FlexResultType:
    origins: typing.List[int]
    sizes: typing.List[int]
    visible: typing.List[bool]


# called with the item index, provisional origin and provisional size along the primary axis
SolverVisibilityFunc = typing.Callable[[int, int, int], bool]


def consumption_scale(group_sizes: typing.Iterable[int]) -> int:
    """Return the least common multiple of the non-zero group sizes, or 1 if there are none."""
    return functools.reduce(math.lcm, (group_size for group_size in group_sizes if group_size > 0), 1)


def split_evenly(value: int, count: int) -> typing.List[int]:
    """Split value into count integer parts. The first value % count parts get one extra unit."""
    quotient, remainder = divmod(value, count)
    return [quotient + 1 if index < remainder else quotient for index in range(count)]


def _proportional_share(dist_left: int, weight: int, proportion_left: int) -> int:
    # truncate toward zero; dist_left may be negative when the canvas is too small
    numerator = dist_left * weight
    share = abs(numerator) // proportion_left
    return share if numerator >= 0 else -share


def redistribute(canvas_origin: int, canvas_size: int, items: typing.Sequence[FlexItem],
                 is_visible: SolverVisibilityFunc) -> RedistributionResultType:
    """
        Assign provisional sizes, determine visibility, and collect the space donated by hidden items.

        Visibility is determined once per item after its provisional origin and size are known. Spacers (items without
        content) are always visible.
    """
    item_count = len(items)
    scale = consumption_scale(len(item.consumers) for item in items)
    distributable = canvas_size - sum(item.reserved_size for item in items)
    proportion_sum = sum(item.scaled_proportion(scale) for item in items)

    visible: typing.List[bool] = list()
    fixed_deltas = [0] * item_count
    proportion_deltas = [0] * item_count

    position = canvas_origin
    dist_left = distributable
    proportion_left = proportion_sum
    for index, item in enumerate(items):
        size = item.reserved_size
        if size <= 0:
            weight = item.scaled_proportion(scale)
            if proportion_left > 0:
                size = _proportional_share(dist_left, weight, proportion_left)
                dist_left -= size
                proportion_left -= weight
            else:
                size = 0
        item_visible = item.content is None or is_visible(index, position, size)
        visible.append(item_visible)
        if not item_visible and item.consumers:
            consumer_count = len(item.consumers)
            proportion_parts = split_evenly(item.scaled_proportion(scale), consumer_count)
            fixed_parts = split_evenly(item.reserved_size, consumer_count)
            for consumer_index, proportion_part, fixed_part in zip(item.consumers, proportion_parts, fixed_parts):
                if 0 <= consumer_index < item_count:
                    proportion_deltas[consumer_index] += proportion_part
                    fixed_deltas[consumer_index] += fixed_part
                else:
                    logging.debug("Flex item %s names missing consumer %s", index, consumer_index)
        position += size

    logging.debug("Flex redistribution: scale=%s distributable=%s fixed_deltas=%s proportion_deltas=%s",
                  scale, distributable, fixed_deltas, proportion_deltas)

    return RedistributionResultType(scale, distributable, proportion_sum, visible, fixed_deltas, proportion_deltas)


def allocate(canvas_origin: int, items: typing.Sequence[FlexItem], redistribution: RedistributionResultType) -> FlexResultType:
    """
        Assign final sizes and origins, applying the deltas from the redistribution pass.

        Hidden items are given the current position as origin but do not advance it.
    """
    origins: typing.List[int] = list()
    sizes: typing.List[int] = list()
    position = canvas_origin
    dist_left = redistribution.distributable
    proportion_left = redistribution.proportion_sum
    for index, item in enumerate(items):
        item_visible = redistribution.visible[index]
        size = item.reserved_size + redistribution.fixed_deltas[index]
        weight = item.scaled_proportion(redistribution.scale) + redistribution.proportion_deltas[index]
        if item_visible and proportion_left > 0:
            share = _proportional_share(dist_left, weight, proportion_left)
            dist_left -= share
            proportion_left -= weight
            size += share
        origins.append(position)
        sizes.append(size)
        if item_visible:
            position += size
    return FlexResultType(origins, sizes, list(redistribution.visible))


def flex_solve(canvas_origin: int, canvas_size: int, items: typing.Sequence[FlexItem],
               is_visible: SolverVisibilityFunc) -> FlexResultType:
    """
        Solve the layout along a single axis.

        Returns origins, sizes and visibility for every item. Only visible items should be placed.
    """
    redistribution = redistribute(canvas_origin, canvas_size, items, is_visible)
    return allocate(canvas_origin, items, redistribution)


def _make_item_rect(direction: FlexDirection, canvas_rect: Geometry.IntRect, origin: int, size: int) -> Geometry.IntRect:
    if direction == FlexDirection.Row:
        return Geometry.IntRect(origin=Geometry.IntPoint(x=origin, y=canvas_rect.top),
                                size=Geometry.IntSize(width=size, height=canvas_rect.height))
    return Geometry.IntRect(origin=Geometry.IntPoint(x=canvas_rect.left, y=origin),
                            size=Geometry.IntSize(width=canvas_rect.width, height=size))


class FlexLayout:
    """
        Hold the ordered flex items and lay them out along a single axis.

        Items are matched by content identity in the mutating methods. Consumers are referenced by item index.
    """

    def __init__(self, direction: FlexDirection = FlexDirection.Row) -> None:
        self.direction = direction
        self.__items: typing.List[FlexItem] = list()

    @property
    def items(self) -> typing.List[FlexItem]:
        return list(self.__items)

    @property
    def item_count(self) -> int:
        return len(self.__items)

    def add_item(self, content: typing.Any, fixed_size: int = 0, proportion: int = 0, focus: bool = False) -> FlexItem:
        item = FlexItem(content, fixed_size, proportion, focus)
        self.__items.append(item)
        return item

    def remove_item(self, content: typing.Any) -> None:
        """Remove all items for content, keeping the order of the remaining items."""
        self.__items = [item for item in self.__items if item.content is not content]

    def clear(self) -> None:
        self.__items = list()

    def resize_item(self, content: typing.Any, fixed_size: int, proportion: int) -> None:
        for item in self.__items:
            if item.content is content:
                item.fixed_size = fixed_size
                item.proportion = proportion

    def set_consumers(self, content: typing.Any, consumers: typing.Sequence[int]) -> None:
        """
            Set the indexes of the items which consume the space of content when it is hidden.

            Raises ValueError if an index does not exist or names the item itself.
        """
        matching_indexes = [index for index, item in enumerate(self.__items) if item.content is content]
        # validate against every match before changing any of them
        for consumer_index in consumers:
            if not 0 <= consumer_index < len(self.__items):
                raise ValueError(f"Consumer index {consumer_index} out of range for {len(self.__items)} items")
            if consumer_index in matching_indexes:
                raise ValueError(f"Item {consumer_index} cannot consume its own space")
        for index in matching_indexes:
            self.__items[index].consumers = list(consumers)

    def layout(self, canvas_rect: Geometry.IntRect,
               is_visible: typing.Optional[typing.Callable[[FlexItem, Geometry.IntRect], bool]] = None) -> typing.List[FlexPlacement]:
        """
            Return the placements of the visible items within canvas_rect.

            is_visible is passed each item with content along with its provisional rect. If it is None, all items are
            visible. The cross axis always spans canvas_rect.
        """
        items = self.items
        direction = self.direction
        if direction == FlexDirection.Row:
            canvas_origin, canvas_size = canvas_rect.left, canvas_rect.width
        else:
            canvas_origin, canvas_size = canvas_rect.top, canvas_rect.height

        def is_item_visible(index: int, origin: int, size: int) -> bool:
            if is_visible is None:
                return True
            return is_visible(items[index], _make_item_rect(direction, canvas_rect, origin, size))

        result = flex_solve(canvas_origin, canvas_size, items, is_item_visible)

        placements: typing.List[FlexPlacement] = list()
        for index, item in enumerate(items):
            if result.visible[index]:
                rect = _make_item_rect(direction, canvas_rect, result.origins[index], result.sizes[index])
                placements.append(FlexPlacement(index, item.content, rect))
        return placements
