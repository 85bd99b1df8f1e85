"""The table: tableau columns, foundations, stock and waste piles."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from saltytaire.card import Card, CardLocation, CardRank, CardState, CardSuit

COLUMNS_N = 7
FOUNDATION_N = 4
TOTAL_CARDS_COUNT = 52


def _empty_piles(n: int) -> list[list[Card]]:
    return [[] for _ in range(n)]


@dataclass
class Deck:
    """All piles of cards on the table."""

    columns: list[list[Card]] = field(default_factory=lambda: _empty_piles(COLUMNS_N))
    foundation: list[list[Card]] = field(
        default_factory=lambda: _empty_piles(FOUNDATION_N)
    )
    stock_pile: list[Card] = field(default_factory=list)
    waste_pile: list[Card] = field(default_factory=list)

    @classmethod
    def deal(cls, rng: random.Random | None = None) -> Deck:
        """Shuffle a full pack and lay it out for a new game."""
        rng = rng if rng is not None else random.Random()
        cards = [
            Card(state=CardState.CLOSED, suit=suit, rank=rank)
            for suit in CardSuit
            for rank in CardRank
        ]

        for i in range(len(cards)):
            j = rng.randint(0, len(cards) - 1)
            cards[i], cards[j] = cards[j], cards[i]

        deck = cls()
        for column_index, column in enumerate(deck.columns):
            for _ in range(column_index + 1):
                column.append(cards.pop())
            column[-1].state = CardState.OPENED

        for card in cards:
            card.state = CardState.OPENED
        deck.stock_pile.extend(cards)
        return deck

    def pile(self, location: CardLocation, index: int = 0) -> list[Card]:
        """Return the pile at a location; the index is ignored for the waste pile."""
        if location is CardLocation.COLUMN:
            return self.columns[index]
        if location is CardLocation.FOUNDATION:
            return self.foundation[index]
        if location is CardLocation.WASTE_PILE:
            return self.waste_pile
        raise ValueError(f"unknown card location: {location!r}")

    def open_last(self, location: CardLocation, index: int = 0) -> None:
        """Turn face up the last card of a pile, if there is one."""
        cards = self.pile(location, index)
        if cards:
            cards[-1].state = CardState.OPENED

    def move_into(self, source: list[Card], location: CardLocation, index: int = 0) -> None:
        """Append all cards of ``source`` to a pile and empty ``source``."""
        self.pile(location, index).extend(source)
        source.clear()

    def take_from_stock(self) -> None:
        """Move the first stock card onto the waste pile."""
        if not self.stock_pile:
            return
        self.waste_pile.append(self.stock_pile.pop(0))

    def restock_pile(self) -> None:
        """Put the waste pile back into the stock, keeping its order."""
        self.stock_pile[:] = self.waste_pile
        self.waste_pile.clear()