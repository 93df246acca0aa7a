"""Table participants: money, bets, status flags and the cards they hold."""

from __future__ import annotations

from .cards import Card, CardCollection
from .hand import CardSet


class _StatusFlag:
    """A boolean flag that also sets the player's status label when switched on."""

    def __init__(self, label: str) -> None:
        self.label = label
        self._attr = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self._attr = "_" + name

    def __get__(self, obj: object, objtype: type | None = None):
        if obj is None:
            return self
        return getattr(obj, self._attr, False)

    def __set__(self, obj: object, value: bool) -> None:
        setattr(obj, self._attr, bool(value))
        if value:
            obj.status = self.label


class Player:
    """A seat at the table with money, the current bet and the cards it holds."""

    folded = _StatusFlag("FOLD")
    all_in = _StatusFlag("ALL IN")
    big_blind = _StatusFlag("BIG B")
    small_blind = _StatusFlag("SMALL B")
    dealer = _StatusFlag("DEALER")
    called = _StatusFlag("CALL")
    raised = _StatusFlag("RAISE")
    checked = _StatusFlag("CHECK")

    def __init__(self, name: str, money: int, bet: int = 0) -> None:
        self.name = name
        self.money = money
        self.bet = bet
        self.sum_bet = 0
        self.status = ""
        self._hand = CardCollection()
        self._card_set = CardSet.empty()

    def set_bet(self, bet: int) -> None:
        """Set the current bet and add it to the running total."""
        self.bet = bet
        self.sum_bet += bet

    def evaluate(self) -> int:
        """Strength of the best hand from the held and table cards."""
        return self._card_set.evaluate()

    def hand_card(self, index: int) -> Card:
        return self._hand[index]

    def hand_size(self) -> int:
        return len(self._hand)

    def add_card(self, card: Card) -> None:
        self._card_set = self._card_set + CardSet.from_card(card.index)
        self._hand.add_card(card)

    def add_table_card(self, index: int) -> None:
        """Count a shared table card, given by index, toward this player's hand."""
        self._card_set = self._card_set + CardSet.from_card(index)

    def _commit(self, amount: int) -> None:
        self.money -= amount
        self.bet += amount
        self.sum_bet += amount

    def make_bet(self, bet: int) -> None:
        self._commit(bet)

    def make_raise(self, raise_to: int) -> None:
        self.raised = True
        self._commit(raise_to - self.bet)

    def make_call(self, previous_bet: int) -> None:
        self.called = True
        self._commit(previous_bet - self.bet)

    def make_fold(self) -> None:
        self.folded = True

    def make_all_in(self) -> None:
        self.all_in = True
        self._commit(self.money)

    def make_check(self) -> None:
        self.checked = True

    def remove_bet(self) -> int:
        """Take the current bet off the player and return it."""
        bet, self.bet = self.bet, 0
        return bet

    def reset_after_round(self) -> None:
        self.called = False
        self.raised = False
        self.checked = False
        self.status = ""

    def reset_after_phase(self) -> None:
        self.reset_after_round()
        self.bet = 0

    def clear_hand(self) -> CardCollection:
        """Give up the held cards, returning them, and forget the counted table cards."""
        hand = self._hand
        self._hand = CardCollection()
        self._card_set = CardSet.empty()
        return hand


class HumanPlayer(Player):
    """The player seated at the keyboard."""