"""Console front end: the table view, input checks and the game loop."""

from __future__ import annotations

import argparse
import random
import re
import sys
from collections.abc import Callable, Sequence

from .game import Decision, Phase
from .handler import GameHandler, format_cash, make_game_info
from .player import Player

NOT_ENOUGH_MONEY = "You don't have enough money!"
BET_TOO_LOW = "You must bet more than previous bet!"
SMALL_BLIND_RANGE = "It must be between 2% and 10% of initial money"

SMALL_BLIND_PROMPT = "Small blind amount (2%-10% of initial money): "
BET_PROMPT = "Bet amount: "
CONTINUE_PROMPT = "Next round? [y/N]: "

_PHASE_LABELS = {
    Phase.PRE_FLOP: "Pre-flop",
    Phase.FLOP: "Flop",
    Phase.TURN: "Turn",
    Phase.RIVER: "River",
    Phase.SHOWDOWN: "Showdown",
}

_INT_RE = re.compile(r"\s*[+-]?\d+\s*")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_int(text: str) -> int | None:
    """A 32-bit integer read from text, or None when the text is not one."""
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def validate_bet(text: str, previous_bet: int, money: int) -> int:
    """The amount typed for a bet or raise; raises ValueError when it cannot be played."""
    value = _parse_int(text)
    ok = value is not None
    value = value if ok else 0
    if value - previous_bet >= money or not ok:
        raise ValueError(NOT_ENOUGH_MONEY)
    if value <= previous_bet:
        raise ValueError(BET_TOO_LOW)
    return value


def validate_small_blind(text: str, initial_money: int) -> int:
    """The small blind typed; it must lie between 2% and 10% of the initial money."""
    value = _parse_int(text)
    if value is None:
        raise ValueError(SMALL_BLIND_RANGE)
    if value < 0.02 * initial_money or value > 0.1 * initial_money:
        raise ValueError(SMALL_BLIND_RANGE)
    return value


def winners_text(names: Sequence[str]) -> tuple[str, str]:
    """Heading and name list shown on the end-of-hand screen."""
    if len(names) == 1:
        return "Winner:", names[0]
    return "Winners:", ", ".join(names)


def button_labels(can_check: bool) -> tuple[str, str]:
    """Labels of the bet and check buttons: (Bet, Check) or (Raise, Call)."""
    if can_check:
        return "Bet", "Check"
    return "Raise", "Call"


class ConsoleTable:
    """Plays hands at a table in a text console, the human sitting in seat 0."""

    def __init__(
        self,
        handler: GameHandler,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.handler = handler
        self._read_line = read_line
        self._write = write

    def start_round(self) -> None:
        """Post the blinds and deal the hole cards for a new hand."""
        h = self.handler
        h.finished = False
        h.one_player = False
        self.render()
        if h.current_player == 0:
            h.play_turn(Decision.BET, self._ask_small_blind())
        else:
            h.play_turn(Decision.BOT, 0)
        h.make_big_blind()
        h.start_game()

    def _ask_small_blind(self) -> int:
        while True:
            text = self._read_line(SMALL_BLIND_PROMPT)
            try:
                return validate_small_blind(text, self.handler.initial_money)
            except ValueError as exc:
                self._write(f"Input Error: {exc}")

    def play(self) -> list[int]:
        """Play moves until the hand is over; returns the winning seats."""
        h = self.handler
        while True:
            self.render()
            if h.finished:
                description, names = winners_text([h.name_of(w) for w in h.winners])
                self._write(f"{description} {names}")
                return list(h.winners)
            if h.current_player == 0:
                self.human_turn()
            else:
                self._write(f"{h.current_player_name()} is thinking...")
                h.play_turn(Decision.BOT, 0)

    def _cards_shown(self, seat: int, player: Player) -> str:
        if player.folded or player.hand_size() < 2:
            return ""
        if seat == 0 or self.handler.finished:
            return " ".join(str(player.hand_card(i)) for i in range(player.hand_size()))
        return "[?? ??]"

    def render(self) -> None:
        """Write the table: phase, pot, board and every seated player."""
        h = self.handler
        game = h.game
        self._write(f"=== {_PHASE_LABELS[game.phase]} | Pot: {format_cash(h.pot)} ===")
        board = " ".join(str(card) for card in game.table) or "-"
        self._write(f"Table: {board}")
        for seat in range(h.player_count):
            player = h.player(seat)
            if player is None:
                continue
            marker = ">" if seat == h.current_player and not h.finished else " "
            self._write(
                f"{marker} {player.name:<12} {format_cash(player.money):>8}"
                f"  bet {format_cash(player.bet):>7}  {player.status:<8}"
                f" {self._cards_shown(seat, player)}".rstrip()
            )

    def human_turn(self) -> None:
        """Ask the human for a move and play it."""
        h = self.handler
        bet_label, check_label = button_labels(h.can_check)
        prompt = f"[c] {check_label}  [b] {bet_label}  [f] Fold  [a] All in > "
        while True:
            choice = self._read_line(prompt).strip().lower()
            if choice == "c":
                if h.can_check:
                    decision, amount = Decision.CHECK, 0
                else:
                    decision, amount = Decision.CALL, h.previous_bet()
            elif choice == "b":
                previous = h.previous_bet()
                text = self._read_line(BET_PROMPT)
                try:
                    amount = validate_bet(text, previous, h.player(0).money)
                except ValueError as exc:
                    self._write(f"Input Error: {exc}")
                    continue
                decision = Decision.BET if previous == 0 else Decision.RAISE
            elif choice == "f":
                decision, amount = Decision.FOLD, 0
            elif choice == "a":
                decision, amount = Decision.ALL_IN, 0
            else:
                self._write("Choose c, b, f or a.")
                continue
            h.play_turn(decision, amount)
            return

    def next_round(self) -> None:
        """Settle the finished hand and start the next one."""
        h = self.handler
        if h.one_player:
            h.initialize_game(h.game_info)
        h.finish_game()
        # Restarting settles the table once more before the new hand begins.
        h.finish_game()
        self.start_round()

    def run(self) -> None:
        """Play hands until the human declines another one."""
        self.start_round()
        while True:
            self.play()
            answer = self._read_line(CONTINUE_PROMPT).strip().lower()
            if answer not in ("y", "yes"):
                return
            self.next_round()


def main(argv: Sequence[str] | None = None) -> int:
    """Start a game of hold'em against computer players in the console."""
    parser = argparse.ArgumentParser(
        prog="holdem-table", description="Texas hold'em against computer players."
    )
    parser.add_argument("--name", help="your name at the table")
    parser.add_argument(
        "--players", type=int, default=4, choices=range(2, 7), help="seats, 2 to 6"
    )
    parser.add_argument("--money", type=int, default=1000, help="starting money")
    parser.add_argument("--seed", type=int, help="seed for a repeatable game")
    args = parser.parse_args(argv)
    if args.money <= 0:
        parser.error("--money must be positive")

    try:
        name = args.name if args.name is not None else input("Player name: ").strip()
        info = make_game_info(name, args.players, args.money)
    except ValueError as exc:
        print(f"Input Error: {exc}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print()
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    handler = GameHandler(rng)
    handler.initialize_game(info)
    table = ConsoleTable(handler, input, print)
    try:
        table.run()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0