"""Game setup data and the front-end facing controller around a table."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .cards import Card
from .game import Decision, Game, Phase
from .player import Player


@dataclass
class GameInfo:
    """Settings chosen before a game: the human's name, seats and starting money."""

    player_name: str = ""
    player_count: int = 0
    initial_money: int = 0


def make_game_info(player_name: str, player_count: int, initial_money: int) -> GameInfo:
    """Build game settings from user input; the player name must not be empty."""
    if not player_name:
        raise ValueError("Player name cannot be empty.")
    return GameInfo(player_name, player_count, initial_money)


def format_cash(cash: int) -> str:
    """Money as shown on the table, e.g. ``120$``."""
    return f"{cash}$"


class GameHandler:
    """Drives a game for a front end and reports its state."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng
        self._game: Game | None = None
        self.game_info = GameInfo()
        self.finished = False
        self.one_player = False

    @property
    def game(self) -> Game:
        if self._game is None:
            raise RuntimeError("the game has not been initialized")
        return self._game

    @property
    def player_count(self) -> int:
        return self.game.player_count

    @property
    def currently_playing(self) -> int:
        return self.game.currently_playing

    @property
    def current_player(self) -> int:
        return self.game.current_player

    @property
    def pot(self) -> int:
        return self.game.pot

    @property
    def winners(self) -> list[int]:
        return list(self.game.winners)

    @property
    def initial_money(self) -> int:
        return self.game_info.initial_money

    @property
    def player_name(self) -> str:
        return self.game_info.player_name

    @property
    def can_check(self) -> bool:
        return self.game.can_check

    @property
    def dealer(self) -> int:
        return self.game.dealer

    def initialize_game(self, game_info: GameInfo) -> None:
        """Seat a fresh table from the given settings."""
        self._game = Game(
            game_info.player_name,
            game_info.player_count,
            game_info.initial_money,
            self._rng,
        )
        self.game_info = game_info

    def start_game(self) -> None:
        """Deal the hole cards."""
        self.game.deal()

    def finish_game(self) -> None:
        """Pay out the pot and prepare the next hand."""
        self.game.share_pot()
        self.game.restart_game()

    def play_turn(self, decision: Decision, bet: int = 0) -> None:
        """Apply a move and settle the hand when it has come to an end."""
        game = self.game
        game.make_move(decision, bet)
        human = game.players[0]
        human_broke = human is not None and human.money == 0 and not human.all_in
        if game.phase is Phase.SHOWDOWN or game.currently_playing == 1 or human_broke:
            game.collect_bets()
            game.delete_broke_players()
            game.find_winner()
            self.finished = True
            human = game.players[0]
            if game.player_count == 1 or human is None or human.folded:
                self.one_player = True

    def make_big_blind(self) -> None:
        """Post the big blind at twice the previous bet and clear the opening marks."""
        self.play_turn(Decision.BET, 2 * self.previous_bet())
        self.game.reset_initial_status()

    def player(self, index: int) -> Player | None:
        return self.game.players[index]

    def table_card(self, index: int) -> Card:
        return self.game.table[index]

    def player_hand_card(self, player_index: int, card_index: int) -> Card:
        player = self.player(player_index)
        if player is None:
            raise LookupError(f"seat {player_index} is empty")
        return player.hand_card(card_index)

    def previous_bet(self) -> int:
        return self.game.previous_bet()

    def phase_number(self) -> int:
        return int(self.game.phase)

    def current_player_name(self) -> str:
        return self.name_of(self.current_player)

    def _seat(self, index: int) -> Player:
        player = self.player(index)
        if player is None:
            raise LookupError(f"seat {index} is empty")
        return player

    def name_of(self, index: int) -> str:
        return self._seat(index).name

    def status_of(self, index: int) -> str:
        return self._seat(index).status