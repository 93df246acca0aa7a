import random

import pytest

from holdem_table.bot import BotPlayer
from holdem_table.cards import Card, Suit, Value
from holdem_table.game import Decision, Game, Phase
from holdem_table.player import HumanPlayer


def _game(players=6, seed=1):
    return Game("Herkules", players, 1000, rng=random.Random(seed))


def _game_with_bot_to_act(players=3):
    for seed in range(200):
        game = _game(players, seed)
        if game.current_player != 0:
            return game
    raise AssertionError("no seed gives a computer player the first turn")


def _chips(game):
    players = [p for p in game.players if p is not None]
    return sum(p.money for p in players) + sum(p.bet for p in players) + game.pot


def test_decision_and_phase_numbers():
    assert Decision(0) is Decision.BOT
    assert Decision(1) is Decision.RAISE
    assert Decision(6) is Decision.BET
    assert int(Phase.SHOWDOWN) == 4


def test_create():
    game = _game()
    assert game.player_count == 6
    assert game.currently_playing == 6
    assert game.current_player == (game.dealer + 1) % 6
    assert game.players[game.dealer].dealer
    assert game.players[(game.dealer + 1) % 6].small_blind
    assert game.players[(game.dealer + 2) % 6].big_blind
    assert isinstance(game.players[0], HumanPlayer)
    assert game.players[0].name == "Herkules"
    assert all(isinstance(p, BotPlayer) for p in game.players[1:])
    assert len({p.name for p in game.players}) == 6
    assert len(game.deck) == 52
    assert game.phase is Phase.PRE_FLOP


@pytest.mark.parametrize("count", [0, 100])
def test_create_rejects_bad_player_count(count):
    with pytest.raises(ValueError):
        Game("Herkules", count, 1000)


def test_make_move_all_in():
    game = _game()
    first = game.current_player
    game.make_move(Decision.ALL_IN)
    player = game.players[first]
    assert player.money == 0
    assert player.bet == 1000
    assert player.all_in
    assert game.anyone_all_in
    assert game.current_player == (first + 1) % 6


def test_delete_broke_players_after_all_ins():
    game = _game(seed=3)
    broke = {(game.dealer + 1 + k) % 6 for k in range(4)}
    for _ in range(4):
        game.make_move(Decision.ALL_IN)
    game.delete_broke_players()
    assert game.player_count == 6 - len(broke - {0})
    assert len(game.players) == game.player_count
    assert game.currently_playing == game.player_count
    assert (game.players[0] is None) == (0 in broke)
    assert all(p.money > 0 for p in game.players[1:])


def test_delete_broke_players_removes_empty_bots():
    game = _game()
    removed = {game.players[2].name, game.players[4].name}
    game.players[2].money = 0
    game.players[4].money = 0
    game.delete_broke_players()
    assert game.player_count == 4
    assert game.currently_playing == 4
    assert not removed & {p.name for p in game.players}
    assert game.players[0].name == "Herkules"


def test_find_winner_after_full_board():
    game = _game()
    game.deal()
    for _ in range(4):
        game.next_phase()
    game.find_winner()
    assert game.phase is Phase.SHOWDOWN
    assert len(game.table) == 5
    best = max(p.evaluate() for p in game.players)
    assert game.winners
    assert all(game.players[w].evaluate() == best for w in game.winners)


def test_find_winner_picks_strongest_and_ties():
    game = _game(players=3)
    board = [Card(Suit.HEARTS, Value.NINE), Card(Suit.CLUBS, Value.FOUR), Card(Suit.SPADES, Value.TWO)]
    for card in board:
        for player in game.players:
            player.add_table_card(card.index)
    game.players[0].add_card(Card(Suit.SPADES, Value.ACE))
    game.players[0].add_card(Card(Suit.DIAMONDS, Value.ACE))
    game.players[1].add_card(Card(Suit.HEARTS, Value.ACE))
    game.players[1].add_card(Card(Suit.CLUBS, Value.ACE))
    game.players[2].add_card(Card(Suit.HEARTS, Value.KING))
    game.players[2].add_card(Card(Suit.CLUBS, Value.KING))
    game.find_winner()
    assert game.winners == [0, 1]


def test_find_winner_ignores_folded():
    game = _game(players=2)
    game.players[0].add_card(Card(Suit.SPADES, Value.ACE))
    game.players[0].add_card(Card(Suit.DIAMONDS, Value.ACE))
    game.players[1].add_card(Card(Suit.HEARTS, Value.TWO))
    game.players[1].add_card(Card(Suit.CLUBS, Value.SEVEN))
    game.players[0].folded = True
    game.find_winner()
    assert game.winners == [1]


def test_share_pot_after_everyone_all_in():
    game = _game()
    game.deal()
    for _ in range(6):
        game.make_move(Decision.ALL_IN)
    for _ in range(4):
        game.next_phase()
    assert game.pot == 6000
    game.find_winner()
    winners = list(game.winners)
    game.share_pot()
    assert sum(p.money for p in game.players) == 6000
    for i, player in enumerate(game.players):
        expected = 6000 // len(winners) if i in winners else 0
        assert player.money == expected


def test_share_pot_without_all_in_splits_and_empties_pot():
    game = _game(players=3)
    game.pot = 101
    game.winners = [1, 2]
    game.share_pot()
    assert game.players[0].money == 1000
    assert game.players[1].money == 1050
    assert game.players[2].money == 1050
    assert game.pot == 0


def test_convert_decision():
    game = _game()
    assert game.convert_bot_decision(0) is Decision.CHECK
    game.make_move(Decision.BET, 100)
    game.make_move(Decision.BET, 200)
    assert game.convert_bot_decision(200) is Decision.CALL
    assert game.convert_bot_decision(400) is Decision.RAISE
    assert game.convert_bot_decision(-1) is Decision.FOLD
    assert game.convert_bot_decision(1000) is Decision.ALL_IN


def test_convert_decision_for_blind_is_bet():
    game = _game()
    assert game.players[game.current_player].small_blind
    assert game.convert_bot_decision(30) is Decision.BET


def test_phases_advance_with_raise_and_calls():
    game = _game(players=2)
    game.deal()
    expected_table = [3, 4, 5, 5]
    for phase, size in zip([Phase.FLOP, Phase.TURN, Phase.RIVER, Phase.SHOWDOWN], expected_table):
        game.make_move(Decision.RAISE, 10)
        game.make_move(Decision.CALL, 10)
        game.make_move(Decision.CALL, 0)
        assert game.phase is phase
        assert len(game.table) == size
        assert _chips(game) == 2000
        assert game.can_check
    assert len(game.deck) == 52 - 4 - 5


def test_fold_discards_hand_and_previous_bet_skips_folded():
    game = _game(players=3, seed=5)
    game.deal()
    first = game.current_player
    game.make_move(Decision.BET, 20)
    second = game.current_player
    game.make_move(Decision.FOLD)
    assert game.players[second].folded
    assert game.players[second].hand_size() == 0
    assert len(game.discarded) == 2
    assert game.currently_playing == 2
    assert game.current_player == (first + 2) % 3
    assert game.previous_bet() == 20


def test_call_with_all_money_goes_all_in():
    game = _game(players=3)
    first = game.current_player
    game.make_move(Decision.CALL, 1000)
    player = game.players[first]
    assert player.all_in
    assert player.money == 0
    assert player.bet == 1000
    assert not game.anyone_all_in


def test_check_after_all_in_calls():
    game = _game(players=3)
    game.make_move(Decision.ALL_IN)
    second = game.current_player
    game.make_move(Decision.CHECK, 1000)
    player = game.players[second]
    assert player.called
    assert player.money == 0
    assert player.bet == 1000
    assert player.status == "CALL"


def test_bet_after_all_in_becomes_call():
    game = _game(players=3)
    game.make_move(Decision.ALL_IN)
    second = game.current_player
    game.make_move(Decision.BET, 50)
    player = game.players[second]
    assert player.bet == 1000
    assert player.money == 0
    assert player.called
    assert not game.can_check


def test_check_round_end():
    game = _game(players=3)
    assert not game.check_round_end()
    for player in game.players:
        player.make_check()
    assert game.check_round_end()


def test_bot_move_as_small_blind_bets():
    game = _game_with_bot_to_act()
    bot = game.players[game.current_player]
    assert bot.small_blind
    game.make_move(Decision.BOT)
    assert bot.bet == 50
    assert bot.money == 950
    assert not game.can_check


def test_bot_play_rejects_human_turn():
    game = _game(players=3)
    game.current_player = 0
    with pytest.raises(TypeError):
        game.bot_play()


def test_reset_initial_status_clears_marks():
    game = _game()
    game.reset_initial_status()
    assert not game.players[game.dealer].dealer
    assert not game.players[(game.dealer + 1) % 6].small_blind
    assert not game.players[(game.dealer + 2) % 6].big_blind


def test_collect_cards_restores_deck():
    game = _game(players=4)
    game.deal()
    game.add_table_card(3)
    assert len(game.deck) == 52 - 8 - 3
    game.collect_cards()
    assert len(game.deck) == 52
    assert len(game.table) == 0
    assert len(game.discarded) == 0
    assert all(p.hand_size() == 0 for p in game.players)
    assert len({card.index for card in game.deck}) == 52


def test_restart_game():
    game = _game(players=3, seed=7)
    old_dealer = game.dealer
    game.deal()
    game.make_move(Decision.BET, 20)
    game.add_table_card(3)
    game.pot = 40
    game.winners = [1]
    game.restart_game()
    assert game.dealer == (old_dealer + 1) % 3
    assert game.current_player == (old_dealer + 2) % 3
    assert game.players[game.dealer].dealer
    assert game.players[game.current_player].small_blind
    assert game.players[old_dealer].big_blind
    assert game.pot == 0
    assert game.winners == []
    assert game.phase is Phase.PRE_FLOP
    assert len(game.deck) == 52
    assert len(game.table) == 0
    assert all(p.sum_bet == 0 and not p.folded and not p.all_in for p in game.players)