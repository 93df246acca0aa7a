"""Playing cards, card collections and the 52-card deck."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

RESOURCE_DIR = ":/resources/Deck/"


class Suit(IntEnum):
    """Card suit; its number is the low part of a card index."""

    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        return self.name[0].lower()


class Value(IntEnum):
    """Card rank from deuce (0) to ace (12)."""

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

    @property
    def symbol(self) -> str:
        if self <= Value.TEN:
            return str(int(self) + 2)
        return self.name[0]


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    suit: Suit
    value: Value

    def __post_init__(self) -> None:
        object.__setattr__(self, "suit", Suit(self.suit))
        object.__setattr__(self, "value", Value(self.value))

    @property
    def index(self) -> int:
        """Index in 0..51, equal to 4 * value + suit."""
        return 4 * int(self.value) + int(self.suit)

    @property
    def file_path(self) -> str:
        """Resource path of the card's face image."""
        return f"{RESOURCE_DIR}{self.suit.name.lower()}_{self.value.name.lower()}.png"

    def __str__(self) -> str:
        return self.value.symbol + self.suit.symbol


class CardCollection(deque):
    """An ordered pile of cards, dealt from the front."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        super().__init__(cards)

    def add_card(self, card: Card) -> None:
        self.append(card)

    def add_cards(self, cards: Iterable[Card]) -> None:
        self.extend(cards)

    def remove_card(self) -> Card:
        """Take the card at the front of the pile."""
        if not self:
            raise IndexError("cannot remove a card from an empty collection")
        return self.popleft()

    def __str__(self) -> str:
        return "".join(str(card) for card in self)


class Deck(CardCollection):
    """A deck of cards, optionally filled with all 52 cards and shuffled."""

    def __init__(self, populate: bool = False, rng: random.Random | None = None) -> None:
        super().__init__()
        self._rng = rng if rng is not None else random.Random()
        if populate:
            self.extend(Card(suit, value) for value in Value for suit in Suit)
            self.shuffle()

    def shuffle(self) -> None:
        self._rng.shuffle(self)