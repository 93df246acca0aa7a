"""Texas hold'em round logic: betting, phases, winners and pot sharing."""

from __future__ import annotations

import random
from collections.abc import Iterator
from enum import IntEnum

from .bot import BotPlayer
from .cards import CardCollection, Deck
from .player import HumanPlayer, Player

_BOT_NAMES = (
    "Alice",
    "Bruno",
    "Celine",
    "Dmitri",
    "Elena",
    "Felix",
    "Greta",
    "Hugo",
    "Ingrid",
    "Jonas",
    "Klara",
    "Leon",
)

MAX_PLAYERS = len(_BOT_NAMES) + 1


class Decision(IntEnum):
    """What the player to act does; BOT lets a computer player decide."""

    BOT = 0
    RAISE = 1
    CHECK = 2
    FOLD = 3
    CALL = 4
    ALL_IN = 5
    BET = 6


class Phase(IntEnum):
    """Stage of a hand."""

    PRE_FLOP = 0
    FLOP = 1
    TURN = 2
    RIVER = 3
    SHOWDOWN = 4


# Cards dealt to the table when leaving a phase, and the phase that follows.
_PHASE_STEP = {
    Phase.PRE_FLOP: (3, Phase.FLOP),
    Phase.FLOP: (1, Phase.TURN),
    Phase.TURN: (1, Phase.RIVER),
    Phase.RIVER: (0, Phase.SHOWDOWN),
    Phase.SHOWDOWN: (0, Phase.SHOWDOWN),
}


def _inactive(player: Player | None) -> bool:
    return player is None or player.folded


class Game:
    """One table: the human in seat 0 and computer players in the other seats."""

    def __init__(
        self,
        name: str,
        player_count: int,
        initial_money: int,
        rng: random.Random | None = None,
    ) -> None:
        if not 1 <= player_count <= MAX_PLAYERS:
            raise ValueError(f"player count must be between 1 and {MAX_PLAYERS}")
        self._rng = rng if rng is not None else random.Random()
        self.player_count = player_count
        self.currently_playing = player_count
        self.pot = 0
        self.smallest_allin = 0
        self.can_check = False
        self.anyone_all_in = False
        self.winners: list[int] = []
        self.phase = Phase.PRE_FLOP
        self.table = CardCollection()
        self.discarded = CardCollection()
        self.deck = Deck(True, self._rng)

        bot_names = self._rng.sample(_BOT_NAMES, player_count - 1)
        self.players: list[Player | None] = [HumanPlayer(name, initial_money, 0)]
        self.players.extend(
            BotPlayer(bot_name, initial_money, 0, self._rng) for bot_name in bot_names
        )

        self.dealer = self._rng.randint(0, player_count - 1)
        self.current_player = (self.dealer + 1) % player_count
        self.players[self.dealer].dealer = True
        self.players[(self.dealer + 1) % player_count].small_blind = True
        self.players[(self.dealer + 2) % player_count].big_blind = True

    def _seated(self) -> Iterator[Player]:
        return (player for player in self.players if player is not None)

    def _find_active_player(self, index: int) -> int:
        """The next seat after index whose player has not folded."""
        for step in range(1, self.player_count + 1):
            candidate = (index + step) % self.player_count
            if not _inactive(self.players[candidate]):
                return candidate
        raise RuntimeError("no active player left at the table")

    def add_table_card(self, num_of_cards: int) -> None:
        """Deal cards from the deck to the table, counting them for every player."""
        for _ in range(num_of_cards):
            card = self.deck.remove_card()
            for player in self._seated():
                player.add_table_card(card.index)
            self.table.add_card(card)

    def deal(self) -> None:
        """Give every player two cards, one at a time around the table."""
        for _ in range(2):
            for player in self._seated():
                player.add_card(self.deck.remove_card())

    def next_phase(self) -> None:
        self.can_check = True
        cards, following = _PHASE_STEP[self.phase]
        self.add_table_card(cards)
        self.phase = following
        self.collect_bets()

    def collect_bets(self) -> None:
        """Move every player's current bet into the pot."""
        for player in self._seated():
            self.pot += player.remove_bet()

    def next_player(self) -> None:
        """Pass the turn on, ending the betting round when everyone has acted."""
        player = self.players[self.current_player]
        if player.folded:
            self.currently_playing -= 1
            self.discarded.add_cards(player.clear_hand())

        if self.check_round_end():
            self.next_phase()
            self.current_player = self._find_active_player(self.dealer)
            for seated in self._seated():
                seated.reset_after_phase()
            return
        self.current_player = self._find_active_player(self.current_player)

    def previous_bet(self) -> int:
        """Bet of the nearest player before the current one who has not folded."""
        n = self.player_count
        idx = (self.current_player - 1) % n
        for _ in range(n):
            player = self.players[idx]
            if not _inactive(player):
                return player.bet
            idx = (idx - 1) % n
        raise RuntimeError("no active player left at the table")

    def bot_play(self) -> int:
        """Ask the computer player to act for the amount it wants to put in."""
        player = self.players[self.current_player]
        if not isinstance(player, BotPlayer):
            raise TypeError("the player to act is not a computer player")
        return player.make_decision(
            self.previous_bet(), self.player_count, str(self.table), self.can_check, False
        )

    def make_move(self, decision: Decision, bet: int = 0) -> None:
        """Apply the current player's decision and pass the turn on."""
        player = self.players[self.current_player]
        # Blinds keep their status label until their next play.
        if not player.big_blind and not player.small_blind:
            player.reset_after_round()
        decision = Decision(decision)
        if decision is Decision.BOT:
            bet = self.bot_play()
            decision = self.convert_bot_decision(bet)

        if decision in (Decision.BET, Decision.RAISE):
            self.can_check = False
            if self.anyone_all_in:
                player.make_call(self.previous_bet())
            elif decision is Decision.BET:
                player.make_bet(bet)
            else:
                player.make_raise(bet)
        elif decision is Decision.CALL:
            if player.money == bet:
                player.make_all_in()
            else:
                player.make_call(bet)
        elif decision is Decision.FOLD:
            player.make_fold()
        elif decision is Decision.ALL_IN:
            if player.all_in:
                player.make_call(player.bet)
            else:
                player.make_all_in()
                self.anyone_all_in = True
        elif decision is Decision.CHECK:
            if self.anyone_all_in:
                player.make_call(bet)
            else:
                player.make_check()
        self.next_player()

    def convert_bot_decision(self, bet: int) -> Decision:
        """Read an amount chosen by a computer player as a decision."""
        previous_bet = self.previous_bet()
        player = self.players[self.current_player]
        current_money = player.money
        if bet == 0:
            return Decision.CHECK
        if player.small_blind or player.big_blind:
            return Decision.BET
        if previous_bet < bet < current_money:
            return Decision.RAISE
        if bet >= current_money:
            return Decision.ALL_IN
        if bet == previous_bet:
            return Decision.CALL
        return Decision.FOLD

    def find_winner(self) -> None:
        """Add the seats holding the strongest unfolded hand to the winners."""
        best = 0
        for i in range(self.player_count):
            player = self.players[i]
            if _inactive(player):
                continue
            strength = player.evaluate()
            if strength > best:
                self.winners.clear()
                best = strength
                self.winners.append(i)
            elif strength == best:
                self.winners.append(i)

    def check_round_end(self) -> bool:
        """True when every player still in has called or checked."""
        return all(p.folded or p.called or p.checked for p in self._seated())

    def delete_broke_players(self) -> None:
        """Remove computer players without money; an empty seat 0 becomes None."""
        human, *others = self.players
        survivors = [player for player in others if player.money != 0]
        self.player_count -= len(others) - len(survivors)
        self.players = [human, *survivors]
        if human is not None and human.money == 0:
            self.players[0] = None
        self.currently_playing = self.player_count

    def _pay_winners(self, amount: int) -> None:
        if not self.winners:
            return
        share = amount // len(self.winners)
        for winner in self.winners:
            self.players[winner].money += share

    def share_pot(self) -> None:
        """Pay the pot out to the winners, settling all-in side pots first."""
        all_in = [i for i, p in enumerate(self.players) if p is not None and p.all_in]
        if not all_in:
            self._pay_winners(self.pot)
            self.pot = 0
            return
        all_in.sort(key=lambda i: self.players[i].sum_bet)
        self.smallest_allin = 0
        for seat in all_in:
            contribution = self.players[seat].sum_bet
            allin_pot = (contribution - self.smallest_allin) * self.currently_playing
            self._pay_winners(allin_pot)
            self.pot -= allin_pot
            self.winners = [
                w for w in self.winners if self.players[w].sum_bet != self.smallest_allin
            ]
            self.smallest_allin = contribution
        self._pay_winners(self.pot)

    def collect_cards(self) -> None:
        """Gather hands and table cards, shuffle them and put them under the deck."""
        for player in self._seated():
            if player.hand_size() == 2:
                self.discarded.add_cards(player.clear_hand())
        self.discarded.add_cards(self.table)
        self.table.clear()
        self._rng.shuffle(self.discarded)
        self.deck.add_cards(self.discarded)
        self.discarded.clear()

    def set_new_dealer(self) -> None:
        self.dealer = self._find_active_player(self.dealer)
        self.current_player = self._find_active_player(self.dealer)
        self.players[self.dealer].dealer = True
        self.players[self.current_player].small_blind = True
        self.players[self._find_active_player(self.current_player)].big_blind = True

    def reset_phase(self) -> None:
        self.phase = Phase.PRE_FLOP

    def reset_winners(self) -> None:
        self.winners.clear()

    def reset_players_status(self) -> None:
        for player in self._seated():
            player.reset_after_phase()
            player.all_in = False
            player.sum_bet = 0
            player.folded = False

    def reset_initial_status(self) -> None:
        """Clear the dealer and blind marks set when the table was created."""
        n = self.player_count
        self.players[self.dealer].dealer = False
        self.players[(self.dealer + 1) % n].small_blind = False
        self.players[(self.dealer + 2) % n].big_blind = False

    def restart_game(self) -> None:
        """Prepare the table for the next hand."""
        self.reset_players_status()
        self.collect_cards()
        self.set_new_dealer()
        self.reset_winners()
        self.pot = 0
        self.reset_phase()
        self.smallest_allin = 0