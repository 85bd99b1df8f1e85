"""Game state and the per-frame handling of mouse input."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from saltytaire.card import Card, CardLocation, CardState
from saltytaire.deck import COLUMNS_N, Deck
from saltytaire.layout import (
    CARD_HEIGHT,
    CARD_WIDTH,
    HORIZONTAL_GAP,
    SCREEN_HORIZONTAL_PADDING,
    VERTICAL_NESTING_PADDING,
    Point,
    card_contains,
    column_pos,
    foundation_pos,
    stock_pile_pos,
    waste_pile_pos,
)
from saltytaire.rules import is_allowed_to_drop_into

DrawCommand = tuple[Card, tuple[float, float]]


@dataclass
class Cursor:
    """Cards held by the mouse and where they were taken from."""

    cards: list[Card] = field(default_factory=list)
    dragged_card: Card | None = None
    dragging_offset: Point = (0.0, 0.0)
    location: CardLocation = CardLocation.COLUMN
    location_index: int = 0

    def is_dragging(self) -> bool:
        """Whether cards are being dragged."""
        return self.dragged_card is not None

    def _grab(
        self,
        cards: list[Card],
        mouse_pos: Point,
        origin: Point,
        location: CardLocation,
        index: int,
    ) -> None:
        self.dragged_card = cards[0]
        self.dragging_offset = (mouse_pos[0] - origin[0], mouse_pos[1] - origin[1])
        self.location = location
        self.location_index = index
        self.cards.extend(cards)


@dataclass
class Game:
    """A running game of solitaire."""

    deck: Deck = field(default_factory=Deck.deal)
    cursor: Cursor = field(default_factory=Cursor)

    def tick(self, mouse_pos: Point, pressed: bool, button_up: bool) -> None:
        """Advance one frame.

        ``mouse_pos`` is in virtual-screen coordinates, ``pressed`` tells whether
        the left button went down during this frame and ``button_up`` whether it
        is currently released.
        """
        self._tick_foundation(mouse_pos, pressed)
        self._tick_stock_pile(mouse_pos, pressed)
        self._tick_waste_pile(mouse_pos, pressed)
        self._tick_columns(mouse_pos, pressed)
        self._tick_cursor(mouse_pos, button_up)

    def draw_commands(self, mouse_pos: Point) -> list[DrawCommand]:
        """Cards to render, in drawing order, with their top-left positions."""
        commands: list[DrawCommand] = []

        for index, foundation in enumerate(self.deck.foundation):
            card = foundation[-1] if foundation else Card(state=CardState.EMPTY)
            commands.append((card, foundation_pos(index)))

        stock_state = CardState.CLOSED if self.deck.stock_pile else CardState.REPEAT
        commands.append((Card(state=stock_state), stock_pile_pos()))

        for index, card in enumerate(self.deck.waste_pile[-3:]):
            commands.append((card, waste_pile_pos(index)))

        for column_index, column in enumerate(self.deck.columns):
            for index, card in enumerate(column):
                commands.append((card, column_pos(column_index, index)))

        mx, my = mouse_pos
        ox, oy = self.cursor.dragging_offset
        for index, card in enumerate(self.cursor.cards):
            pos = (
                math.floor(mx - ox),
                math.floor(my + index * VERTICAL_NESTING_PADDING - oy),
            )
            commands.append((card, pos))

        return commands

    def _tick_foundation(self, mouse_pos: Point, pressed: bool) -> None:
        if not pressed or self.cursor.is_dragging():
            return
        for index, foundation in enumerate(self.deck.foundation):
            origin = foundation_pos(index)
            if foundation and card_contains(origin, mouse_pos):
                self.cursor._grab(
                    [foundation.pop()],
                    mouse_pos,
                    origin,
                    CardLocation.FOUNDATION,
                    index,
                )
                return

    def _tick_stock_pile(self, mouse_pos: Point, pressed: bool) -> None:
        if not pressed or not card_contains(stock_pile_pos(), mouse_pos):
            return
        if self.deck.stock_pile:
            self.deck.take_from_stock()
        else:
            self.deck.restock_pile()

    def _tick_waste_pile(self, mouse_pos: Point, pressed: bool) -> None:
        if not pressed or self.cursor.is_dragging():
            return
        waste_pile = self.deck.waste_pile
        if not waste_pile:
            return
        last_card_index = 2 if len(waste_pile) > 3 else len(waste_pile) - 1
        origin = waste_pile_pos(last_card_index)
        if card_contains(origin, mouse_pos):
            self.cursor._grab(
                [waste_pile.pop()],
                mouse_pos,
                origin,
                CardLocation.WASTE_PILE,
                len(waste_pile),
            )

    def _tick_columns(self, mouse_pos: Point, pressed: bool) -> None:
        if not pressed or self.cursor.is_dragging():
            return
        for column_index, column in enumerate(self.deck.columns):
            for index, card in enumerate(column):
                if card.state is not CardState.OPENED:
                    continue
                origin = column_pos(column_index, index)
                is_last = index == len(column) - 1
                height = CARD_HEIGHT if is_last else VERTICAL_NESTING_PADDING
                if card_contains(origin, mouse_pos, height):
                    taken = column[index:]
                    del column[index:]
                    self.cursor._grab(
                        taken, mouse_pos, origin, CardLocation.COLUMN, column_index
                    )
                    return

    def _drop_into_columns(self, mouse_pos: Point) -> bool:
        cursor = self.cursor
        for column_index in range(COLUMNS_N):
            if (
                cursor.location is CardLocation.COLUMN
                and cursor.location_index == column_index
            ):
                continue
            column_x = (
                CARD_WIDTH + HORIZONTAL_GAP
            ) * column_index + SCREEN_HORIZONTAL_PADDING
            if column_x < mouse_pos[0] < column_x + CARD_WIDTH:
                if not is_allowed_to_drop_into(
                    self.deck, cursor.cards, CardLocation.COLUMN, column_index
                ):
                    return False
                cursor.dragged_card = None
                self.deck.open_last(cursor.location, cursor.location_index)
                self.deck.move_into(cursor.cards, CardLocation.COLUMN, column_index)
                return True
        return False

    def _drop_into_foundation(self, mouse_pos: Point) -> bool:
        cursor = self.cursor
        if len(cursor.cards) != 1:
            return False
        for index in range(len(self.deck.foundation)):
            if (
                cursor.location is CardLocation.FOUNDATION
                and cursor.location_index == index
            ):
                continue
            if card_contains(foundation_pos(index), mouse_pos) and (
                is_allowed_to_drop_into(
                    self.deck, cursor.cards, CardLocation.FOUNDATION, index
                )
            ):
                cursor.dragged_card = None
                self.deck.open_last(cursor.location, cursor.location_index)
                self.deck.pile(CardLocation.FOUNDATION, index).append(cursor.cards[0])
                cursor.cards.clear()
                return True
        return False

    def _tick_cursor(self, mouse_pos: Point, button_up: bool) -> None:
        cursor = self.cursor
        if not cursor.is_dragging() or not button_up:
            return
        if mouse_pos[1] > CARD_HEIGHT + VERTICAL_NESTING_PADDING:
            if self._drop_into_columns(mouse_pos):
                return
        elif self._drop_into_foundation(mouse_pos):
            return
        cursor.dragged_card = None
        self.deck.move_into(cursor.cards, cursor.location, cursor.location_index)