"""Combinable card sets and poker hand evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache
from itertools import combinations

CARD_COUNT = 52
RANK_COUNT = 13
SUIT_COUNT = 4
CATEGORY_SIZE = 4096


class _Category(IntEnum):
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9


def _straight_top(ranks: set[int]) -> int | None:
    """Highest rank ending a five-card straight, the ace playing low for the wheel."""
    for top in range(RANK_COUNT - 1, 2, -1):
        if all((top - i) % RANK_COUNT in ranks for i in range(5)):
            return top
    return None


def _kickers(exclude: set[int], most: int):
    others = [r for r in range(RANK_COUNT) if r not in exclude]
    for k in range(most + 1):
        for combo in combinations(others, k):
            yield tuple(sorted(combo, reverse=True))


def _no_straight(shape: tuple[int, ...]) -> bool:
    return len(shape) < 5 or _straight_top(set(shape)) is None


@lru_cache(maxsize=None)
def _shape_index(category: _Category) -> dict[tuple[int, ...], int]:
    ranks = range(RANK_COUNT)
    if category in (_Category.STRAIGHT, _Category.STRAIGHT_FLUSH):
        shapes = [(top,) for top in range(3, RANK_COUNT)]
    elif category is _Category.HIGH_CARD:
        shapes = [k for k in _kickers(set(), 5) if _no_straight(k)]
    elif category is _Category.FLUSH:
        shapes = [k for k in _kickers(set(), 5) if len(k) == 5 and _no_straight(k)]
    elif category is _Category.PAIR:
        shapes = [(p, *k) for p in ranks for k in _kickers({p}, 3)]
    elif category is _Category.TWO_PAIR:
        shapes = [(h, lo, *k) for h in ranks for lo in range(h) for k in _kickers({h, lo}, 1)]
    elif category is _Category.THREE_OF_A_KIND:
        shapes = [(t, *k) for t in ranks for k in _kickers({t}, 2)]
    elif category is _Category.FULL_HOUSE:
        shapes = [(t, p) for t in ranks for p in ranks if p != t]
    else:
        shapes = [(q, *k) for q in ranks for k in _kickers({q}, 1)]
    width = max(len(s) for s in shapes)
    ordered = sorted(shapes, key=lambda s: s + (-1,) * (width - len(s)))
    return {shape: i for i, shape in enumerate(ordered)}


def _score(category: _Category, shape: tuple[int, ...]) -> int:
    return int(category) * CATEGORY_SIZE + _shape_index(category)[shape]


@dataclass(frozen=True, eq=False)
class CardSet:
    """A multiset of cards, by index 4 * rank + suit, that can be combined and evaluated."""

    counts: tuple[int, ...] = (0,) * CARD_COUNT

    @classmethod
    def empty(cls) -> CardSet:
        return cls()

    @classmethod
    def from_card(cls, card_index: int) -> CardSet:
        if not 0 <= card_index < CARD_COUNT:
            raise ValueError(f"card index out of range: {card_index}")
        counts = [0] * CARD_COUNT
        counts[card_index] = 1
        return cls(tuple(counts))

    def __add__(self, other: object) -> CardSet:
        if not isinstance(other, CardSet):
            return NotImplemented
        return CardSet(tuple(a + b for a, b in zip(self.counts, other.counts)))

    def __sub__(self, other: object) -> CardSet:
        if not isinstance(other, CardSet):
            return NotImplemented
        if any(b > a for a, b in zip(self.counts, other.counts)):
            raise ValueError("cannot remove cards that are not in the set")
        return CardSet(tuple(a - b for a, b in zip(self.counts, other.counts)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CardSet):
            return NotImplemented
        return self.counts == other.counts

    def __hash__(self) -> int:
        return hash(self.counts)

    def suit_count(self, suit: int) -> int:
        if not 0 <= suit < SUIT_COUNT:
            raise ValueError(f"suit out of range: {suit}")
        return sum(self.counts[suit::SUIT_COUNT])

    def count(self) -> int:
        return sum(self.counts)

    def has_flush(self) -> bool:
        return any(self.suit_count(s) >= 5 for s in range(SUIT_COUNT))

    def _rank_counts(self) -> list[int]:
        return [sum(self.counts[4 * r:4 * r + 4]) for r in range(RANK_COUNT)]

    def rank_key(self) -> int:
        """Key that depends only on how many cards of each rank the set holds."""
        return sum(c * 5 ** r for r, c in enumerate(self._rank_counts()))

    def flush_key(self) -> int:
        """Rank bit mask of the suit holding five or more cards, or 0 without a flush."""
        for suit in reversed(range(SUIT_COUNT)):
            if self.suit_count(suit) >= 5:
                return sum(1 << r for r in range(RANK_COUNT) if self.counts[4 * r + suit])
        return 0

    def _suited_ranks(self, suit: int) -> set[int]:
        return {r for r in range(RANK_COUNT) if self.counts[4 * r + suit]}

    def evaluate(self) -> int:
        """Strength of the best hand: category * 4096 plus its rank within the category."""
        best = self._evaluate_ranks()
        for suit in range(SUIT_COUNT):
            suited = self._suited_ranks(suit)
            if len(suited) < 5:
                continue
            top = _straight_top(suited)
            if top is not None:
                best = max(best, _score(_Category.STRAIGHT_FLUSH, (top,)))
            else:
                flush = tuple(sorted(suited, reverse=True)[:5])
                best = max(best, _score(_Category.FLUSH, flush))
        return best

    def _evaluate_ranks(self) -> int:
        counts = self._rank_counts()
        present = sorted((r for r, c in enumerate(counts) if c), reverse=True)

        def others(*used: int, limit: int) -> tuple[int, ...]:
            return tuple(r for r in present if r not in used)[:limit]

        quads = [r for r in present if counts[r] >= 4]
        if quads:
            q = quads[0]
            return _score(_Category.FOUR_OF_A_KIND, (q, *others(q, limit=1)))
        trips = [r for r in present if counts[r] >= 3]
        if trips:
            t = trips[0]
            pairs = [r for r in present if r != t and counts[r] >= 2]
            if pairs:
                return _score(_Category.FULL_HOUSE, (t, pairs[0]))
        top = _straight_top(set(present))
        if top is not None:
            return _score(_Category.STRAIGHT, (top,))
        if trips:
            t = trips[0]
            return _score(_Category.THREE_OF_A_KIND, (t, *others(t, limit=2)))
        pairs = [r for r in present if counts[r] >= 2]
        if len(pairs) >= 2:
            high, low = pairs[:2]
            return _score(_Category.TWO_PAIR, (high, low, *others(high, low, limit=1)))
        if pairs:
            p = pairs[0]
            return _score(_Category.PAIR, (p, *others(p, limit=3)))
        return _score(_Category.HIGH_CARD, tuple(present[:5]))