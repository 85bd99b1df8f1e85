"""Screen geometry: sizes, paddings and the positions of every pile."""

from __future__ import annotations

SCREEN_WIDTH = 900
SCREEN_HEIGHT = 600

VIRTUAL_SCREEN_WIDTH = 300
VIRTUAL_SCREEN_HEIGHT = 200

VIRTUAL_RATIO = SCREEN_WIDTH / VIRTUAL_SCREEN_WIDTH

CARD_WIDTH = 37
CARD_HEIGHT = 52

VERTICAL_NESTING_PADDING = 10
HORIZONTAL_NESTING_PADDING = 8

HORIZONTAL_GAP = 4

SCREEN_HORIZONTAL_PADDING = 8
SCREEN_VERTICAL_PADDING = 5

Point = tuple[float, float]


def to_virtual(screen_pos: Point) -> tuple[float, float]:
    """Scale a position on the real window to the virtual screen."""
    x, y = screen_pos
    return (x / VIRTUAL_RATIO, y / VIRTUAL_RATIO)


def stock_pile_pos() -> tuple[int, int]:
    """Top-left corner of the stock pile."""
    x = VIRTUAL_SCREEN_WIDTH - CARD_WIDTH - HORIZONTAL_NESTING_PADDING - 1
    return (x, SCREEN_VERTICAL_PADDING)


def waste_pile_pos(card_index: int) -> tuple[int, int]:
    """Top-left corner of one of the (up to three) visible waste-pile cards."""
    stock_x, _ = stock_pile_pos()
    step = CARD_WIDTH - HORIZONTAL_NESTING_PADDING - 20
    x = stock_x - step * (3 - card_index + 1) - 23
    return (x, SCREEN_VERTICAL_PADDING)


def foundation_pos(foundation_index: int) -> tuple[int, int]:
    """Top-left corner of a foundation pile."""
    x = (CARD_WIDTH + HORIZONTAL_GAP) * foundation_index + SCREEN_HORIZONTAL_PADDING
    return (x, SCREEN_VERTICAL_PADDING)


def column_pos(column_index: int, index: int) -> tuple[int, int]:
    """Top-left corner of the card at ``index`` within a tableau column."""
    x = (CARD_WIDTH + HORIZONTAL_GAP) * column_index + SCREEN_HORIZONTAL_PADDING
    y = VERTICAL_NESTING_PADDING * index + CARD_HEIGHT + SCREEN_VERTICAL_PADDING * 2
    return (x, y)


def card_contains(origin: Point, point: Point, height: float = CARD_HEIGHT) -> bool:
    """Whether ``point`` lies strictly inside a card area at ``origin``."""
    ox, oy = origin
    px, py = point
    return ox < px < ox + CARD_WIDTH and oy < py < oy + height