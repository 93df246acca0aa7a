# holdem-table

Texas Hold'em played in a text console against computer opponents. Each
opponent bets from a Monte Carlo estimate of its hand's equity. Under the
game sits a small library that you can use on its own: cards and decks, a
seven-card hand evaluator, and a few fast pseudo random generators.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
holdem-table --name Ann --players 4 --money 1000
```

Options:

- `--name` is your name at the table. If you leave it out, the game asks for
  it. An empty name is refused.
- `--players` is the number of seats, from 2 to 6. The default is 4. You
  always sit in seat 0, and computer players fill the other seats.
- `--money` is the starting money of every player. The default is 1000, and
  the value must be positive.
- `--seed` seeds the random generator, so a game can be repeated.

At the start of a hand the blinds are posted. If you are first to act, you
type the small blind yourself. It must be between 2% and 10% of the starting
money. The big blind is then twice the previous bet, and the hole cards are
dealt.

When it is your turn, the table is printed and you choose a move:

- `c` checks, or calls when a check is not possible.
- `b` bets, or raises when there is already a bet. The amount must be more
  than the previous bet, and you must be able to cover it.
- `f` folds.
- `a` goes all in.

When the hand is over, the winners are printed and you are asked
`Next round? [y/N]`. Computer players without money are removed from the
table. If you are the only player left, or you are out of money, or you
folded, the next round starts a fresh table with the original settings.
Ctrl-D or Ctrl-C ends the game.

## Using the library

```python
from holdem_table.cards import Card, Suit, Value, Deck
from holdem_table.hand import CardSet

ace = Card(Suit.SPADES, Value.ACE)
str(ace)         # "As"
ace.index        # 51  (4 * value + suit)
ace.file_path    # ":/resources/Deck/spades_ace.png"

deck = Deck(True)            # 52 shuffled cards
first = deck.remove_card()   # dealt from the front

hand = CardSet.empty()
for card in (ace, Card(Suit.SPADES, Value.KING)):
    hand = hand + CardSet.from_card(card.index)
strength = hand.evaluate()   # larger is better; strength // 4096 is the category
```

The categories run from 1 (high card) to 9 (straight flush).

Other modules:

- `holdem_table.bot.estimate_equity(hand, board, num_players, trials, rng)`
  returns the share of the pot that a hand wins on average against random
  opponent hands. `BotPlayer` makes its decisions from this estimate.
- `holdem_table.player.Player` holds a player's money, bet, status flags and
  cards.
- `holdem_table.game.Game` holds the betting rules, phases, winner finding
  and pot sharing. Moves are values of the `Decision` enum.
- `holdem_table.handler.GameHandler` drives a `Game` for a front end. Create
  its settings with `make_game_info(name, player_count, initial_money)`.
- `holdem_table.rng` provides `XoroShiro128Plus`, `UniqueRng64`,
  `FastUniformIntDistribution` and `FastUniformIntDistribution2`.
- `holdem_table.app.ConsoleTable` is the console front end. You can give it
  your own `read_line` and `write` functions.

## What it does not do

There is no graphical window. The game is played in the text console only,
and card images are named only by the resource paths that `Card.file_path`
returns. Nothing is saved between games.