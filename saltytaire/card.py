"""Playing cards: their suits, ranks and states, and where they sit on the sprite sheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from saltytaire.layout import CARD_HEIGHT, CARD_WIDTH


class CardState(IntEnum):
    """How a card is shown."""

    CLOSED = 0
    OPENED = 1
    EMPTY = 2
    REPEAT = 3


class CardSuit(IntEnum):
    """Card suits; even values are black, odd values are red."""

    CLUBS = 0
    DIAMONDS = 1
    SPADES = 2
    HEARTS = 3

    @property
    def is_red(self) -> bool:
        return self % 2 == 1


class CardRank(IntEnum):
    """Card ranks in sprite-sheet order, from two up to ace."""

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


class CardLocation(IntEnum):
    """The kind of pile a card lies in."""

    COLUMN = 0
    FOUNDATION = 1
    WASTE_PILE = 2


@dataclass
class Card:
    """A single card; its state changes as it is turned over."""

    state: CardState = CardState.CLOSED
    suit: CardSuit = CardSuit.CLUBS
    rank: CardRank = CardRank.TWO


_SPECIAL_COLUMNS = {
    CardState.EMPTY: 0,
    CardState.REPEAT: 1,
    CardState.CLOSED: 2,
}


def sprite_rect(card: Card) -> tuple[int, int, int, int]:
    """Return the (x, y, width, height) of the card's image on the sprite sheet."""
    if card.state is CardState.OPENED:
        x = int(card.rank) * CARD_WIDTH
        y = int(card.suit) * CARD_HEIGHT
    else:
        x = _SPECIAL_COLUMNS[CardState(card.state)] * CARD_WIDTH
        y = 4 * CARD_HEIGHT
    return (x, y, CARD_WIDTH, CARD_HEIGHT)