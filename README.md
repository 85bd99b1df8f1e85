# saltytaire

A small Klondike solitaire game. The table is drawn at a low virtual
resolution (300×200) and scaled up three times into a 900×600 window, so the
cards keep their pixel-art look.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
saltytaire
```

The game loads its card sheet and background from `cards.png` and
`background.png` in the `assets` directory under the current directory. Another
directory can be given with `--assets`:

```
saltytaire --assets path/to/assets
```

- Click the stock pile (top right) to turn its first card onto the waste pile.
  When the stock is empty, clicking it turns the waste pile back into the
  stock, in the same order.
- The last three cards of the waste pile are shown. Drag the top one, any
  face-up card in a column (the cards below it come along), or the top card of
  a foundation.
- A column takes a card one rank lower and of the other colour; an empty
  column takes only a king.
- Foundations (top left) take one card at a time and are built up by suit,
  starting with an ace, then two, three and so on up to king.
- When a card leaves a column, the card it uncovers is turned face up.
- A card dropped where it is not allowed goes back where it came from.

## Using it as a library

The game logic does not depend on a window and can be driven directly:

```python
import random

from saltytaire.card import CardLocation
from saltytaire.deck import Deck
from saltytaire.rules import is_allowed_to_drop_into

deck = Deck.deal(random.Random(1))
deck.take_from_stock()
waste = deck.pile(CardLocation.WASTE_PILE)
print(is_allowed_to_drop_into(deck, waste[-1:], CardLocation.FOUNDATION, 0))
```

- `saltytaire.card` holds `Card`, the enums `CardState`, `CardSuit`,
  `CardRank` and `CardLocation`, and `sprite_rect`, which gives a card's
  rectangle on the sprite sheet.
- `saltytaire.deck.Deck` holds the columns, foundations, stock and waste
  piles; `Deck.deal` shuffles and lays out a new game, and `pile`,
  `open_last`, `move_into`, `take_from_stock` and `restock_pile` change it.
- `saltytaire.rules.is_allowed_to_drop_into` tells whether cards may be
  dropped onto a pile.
- `saltytaire.game.Game` holds a deck and a `Cursor`. `Game.tick` takes the
  mouse position in virtual coordinates, whether the left button went down
  this frame and whether it is released; `Game.draw_commands` lists each card
  to draw with its position.
- `saltytaire.layout` holds the screen sizes and the positions of every pile
  (`stock_pile_pos`, `waste_pile_pos`, `foundation_pos`, `column_pos`), plus
  `to_virtual` and `card_contains`.
- `saltytaire.app` loads the images (`Sprites.load`), draws a game onto a
  pygame surface (`render_card`, `render_game`) and runs the window (`main`).

## What it does not do

The game does not notice when it has been won, keeps no score, has no undo and
does not save a game in progress. It needs the two images in its assets
directory; none are included in the package.