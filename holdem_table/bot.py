"""Computer opponent that bets according to a Monte Carlo equity estimate."""

from __future__ import annotations

import random
import re
from collections.abc import Iterable

from .cards import Card, Suit, Value
from .hand import CARD_COUNT, CardSet
from .player import Player

DEFAULT_TRIALS = 4000
MAX_SEATS = 6

_RANKS = "23456789TJQKA"
_SUITS = {suit.symbol: suit for suit in Suit}
_CARD_PATTERN = r"(10|[2-9TJQKA])([hdcs])"
_BOARD_RE = re.compile(f"(?:{_CARD_PATTERN})*")


def _parse_cards(text: str) -> list[Card]:
    if not _BOARD_RE.fullmatch(text):
        raise ValueError(f"cannot read cards from {text!r}")
    cards = []
    for rank, suit in re.findall(_CARD_PATTERN, text):
        value = Value.TEN if rank == "10" else Value(_RANKS.index(rank))
        cards.append(Card(_SUITS[suit], value))
    return cards


def _strength(*groups: Iterable[int]) -> int:
    counts = [0] * CARD_COUNT
    for group in groups:
        for index in group:
            counts[index] += 1
    return CardSet(tuple(counts)).evaluate()


def estimate_equity(
    hand: Iterable[Card],
    board: Iterable[Card] = (),
    num_players: int = 2,
    trials: int = DEFAULT_TRIALS,
    rng: random.Random | None = None,
) -> float:
    """Share of the pot the hand wins on average against random opponent hands."""
    hand_idx = [card.index for card in hand]
    board_idx = [card.index for card in board]
    used = hand_idx + board_idx
    if len(set(used)) != len(used):
        raise ValueError("the same card appears more than once")
    if len(board_idx) > 5:
        raise ValueError("the board holds at most five cards")
    if num_players <= 1:
        return 1.0
    if trials <= 0:
        raise ValueError("trials must be positive")
    rng = rng if rng is not None else random.Random()
    taken = set(used)
    deck = [i for i in range(CARD_COUNT) if i not in taken]
    missing = 5 - len(board_idx)
    needed = missing + 2 * (num_players - 1)
    if needed > len(deck):
        raise ValueError("not enough cards left for that many players")

    total = 0.0
    for _ in range(trials):
        drawn = rng.sample(deck, needed)
        full_board = board_idx + drawn[:missing]
        others = drawn[missing:]
        hero = _strength(hand_idx, full_board)
        rivals = [_strength(others[k:k + 2], full_board) for k in range(0, len(others), 2)]
        best = max(rivals)
        if hero > best:
            total += 1.0
        elif hero == best:
            total += 1.0 / (1 + rivals.count(best))
    return total / trials


class BotPlayer(Player):
    """A computer-controlled player."""

    def __init__(
        self,
        name: str,
        money: int,
        bet: int = 0,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(name, money, bet)
        self.equity = 0.0
        self._rng = rng if rng is not None else random.Random()

    def _roll(self) -> int:
        return self._rng.randint(0, 1000)

    def _can_cover(self, money_to_bet: int) -> bool:
        needed = money_to_bet - self.bet
        return needed >= 0 and self.money >= needed

    def bot_hand(self, num_players: int) -> list[str]:
        """The bot's cards followed by a random range for each opponent."""
        cards = "".join(str(card) for card in self._hand)
        if 2 <= num_players <= MAX_SEATS:
            return [cards] + ["random"] * (num_players - 1)
        return [cards]

    def calc_equity(self, board_cards: str, num_players: int) -> None:
        """Estimate and store equity; board "0" means no table cards yet."""
        board = [] if board_cards == "0" else _parse_cards(board_cards)
        players = len(self.bot_hand(num_players))
        self.equity = estimate_equity(self._hand, board, players, rng=self._rng)

    def make_decision(
        self,
        money_to_bet: int,
        num_players: int,
        board_cards: str,
        can_check: bool,
        is_bluffing: bool = True,
    ) -> int:
        """Amount to put in: 0 to check, -1 to fold, otherwise the bet."""
        if self.small_blind:
            return self.money // 20
        if self.big_blind:
            return money_to_bet * 2
        self.calc_equity(board_cards, num_players)

        if money_to_bet == 0 and can_check:
            if self._roll() % 2 == 0:
                return 0
            divisor = self._roll() % 10 + 4
            return (self.money // divisor) // 10 * 10
        if self.equity < 0.5 / num_players:
            return -1
        if self.equity <= 1.0 / num_players or self._roll() % 4 != 0:
            return money_to_bet if self._can_cover(money_to_bet) else self.money

        if self._can_cover(money_to_bet):
            result = money_to_bet + int((self.money - money_to_bet) * self.equity)
        else:
            result = self.money
        if money_to_bet < result < self.money:
            percent_of_money = (self.money - money_to_bet) // 100
            factor = self._roll() % 30 + 5
            if self._can_cover(money_to_bet):
                result = (money_to_bet + percent_of_money * factor) // 10 * 10
            else:
                result = self.money
        else:
            result = min(result, self.money)
        return result

    def make_bluff(self, money_to_bet: int, num_players: int, board_cards: str) -> int:
        """A bet halfway between the amount to call and all the bot's money."""
        return money_to_bet + int((self.money - money_to_bet) * 0.5)