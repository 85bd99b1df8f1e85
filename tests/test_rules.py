import pytest

from saltytaire.card import Card, CardLocation, CardRank, CardState, CardSuit
from saltytaire.deck import Deck
from saltytaire.rules import is_allowed_to_drop_into

R = CardRank
S = CardSuit


def card(suit, rank):
    return Card(state=CardState.OPENED, suit=suit, rank=rank)


def deck_with(location, pile):
    deck = Deck()
    deck.pile(location, 0).extend(pile)
    return deck


def test_empty_cursor_is_never_allowed():
    assert is_allowed_to_drop_into(Deck(), [], CardLocation.COLUMN, 0) is False


@pytest.mark.parametrize("rank, allowed", [(R.KING, True), (R.QUEEN, False), (R.ACE, False)])
def test_empty_column_takes_only_king(rank, allowed):
    assert is_allowed_to_drop_into(Deck(), [card(S.HEARTS, rank)], CardLocation.COLUMN, 0) is allowed


@pytest.mark.parametrize(
    "top, moving, allowed",
    [
        (card(S.SPADES, R.KING), card(S.HEARTS, R.QUEEN), True),
        (card(S.SPADES, R.KING), card(S.CLUBS, R.QUEEN), False),
        (card(S.DIAMONDS, R.TEN), card(S.CLUBS, R.NINE), True),
        (card(S.DIAMONDS, R.TEN), card(S.CLUBS, R.EIGHT), False),
        (card(S.DIAMONDS, R.TEN), card(S.CLUBS, R.JACK), False),
        (card(S.HEARTS, R.TWO), card(S.SPADES, R.ACE), False),
        (card(S.HEARTS, R.THREE), card(S.SPADES, R.TWO), True),
    ],
)
def test_column_alternating_descending(top, moving, allowed):
    deck = deck_with(CardLocation.COLUMN, [top])
    assert is_allowed_to_drop_into(deck, [moving], CardLocation.COLUMN, 0) is allowed


def test_column_checks_first_card_of_stack():
    deck = deck_with(CardLocation.COLUMN, [card(S.CLUBS, R.EIGHT)])
    stack = [card(S.HEARTS, R.SEVEN), card(S.SPADES, R.SIX)]
    assert is_allowed_to_drop_into(deck, stack, CardLocation.COLUMN, 0) is True
    assert is_allowed_to_drop_into(deck, stack[1:], CardLocation.COLUMN, 0) is False


@pytest.mark.parametrize("rank, allowed", [(R.ACE, True), (R.TWO, False), (R.KING, False)])
def test_empty_foundation_takes_only_ace(rank, allowed):
    assert (
        is_allowed_to_drop_into(Deck(), [card(S.CLUBS, rank)], CardLocation.FOUNDATION, 0)
        is allowed
    )


@pytest.mark.parametrize(
    "top, moving, allowed",
    [
        (card(S.HEARTS, R.ACE), card(S.HEARTS, R.TWO), True),
        (card(S.HEARTS, R.ACE), card(S.DIAMONDS, R.TWO), False),
        (card(S.HEARTS, R.ACE), card(S.HEARTS, R.THREE), False),
        (card(S.CLUBS, R.FIVE), card(S.CLUBS, R.SIX), True),
        (card(S.CLUBS, R.FIVE), card(S.CLUBS, R.FOUR), False),
        (card(S.CLUBS, R.QUEEN), card(S.CLUBS, R.KING), True),
        (card(S.CLUBS, R.KING), card(S.CLUBS, R.ACE), False),
    ],
)
def test_foundation_same_suit_ascending(top, moving, allowed):
    deck = deck_with(CardLocation.FOUNDATION, [top])
    assert is_allowed_to_drop_into(deck, [moving], CardLocation.FOUNDATION, 0) is allowed


def test_waste_pile_never_accepts():
    assert (
        is_allowed_to_drop_into(Deck(), [card(S.CLUBS, R.KING)], CardLocation.WASTE_PILE, 0)
        is False
    )


def test_other_piles_do_not_matter():
    deck = Deck()
    deck.columns[1].append(card(S.SPADES, R.KING))
    assert is_allowed_to_drop_into(deck, [card(S.HEARTS, R.QUEEN)], CardLocation.COLUMN, 0) is False
    assert is_allowed_to_drop_into(deck, [card(S.HEARTS, R.QUEEN)], CardLocation.COLUMN, 1) is True