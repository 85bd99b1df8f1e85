"""Klondike rules for dropping cards onto piles."""

from __future__ import annotations

from collections.abc import Sequence

from saltytaire.card import Card, CardLocation, CardRank
from saltytaire.deck import Deck


def is_allowed_to_drop_into(
    deck: Deck, cursor_cards: Sequence[Card], location: CardLocation, index: int
) -> bool:
    """Whether the dragged cards may be dropped onto the given pile."""
    if not cursor_cards:
        return False

    dest = deck.pile(location, index)
    moving = cursor_cards[0]

    if location is CardLocation.COLUMN:
        if not dest:
            return moving.rank is CardRank.KING
        top = dest[-1]
        if top.rank is CardRank.TWO:
            return False
        if top.rank - 1 != moving.rank:
            return False
        return top.suit % 2 != moving.suit % 2

    if location is CardLocation.FOUNDATION:
        if not dest:
            return moving.rank is CardRank.ACE
        top = dest[-1]
        if top.suit != moving.suit:
            return False
        if top.rank is CardRank.ACE:
            return moving.rank is CardRank.TWO
        if top.rank is CardRank.KING:
            return False
        return top.rank + 1 == moving.rank

    return False