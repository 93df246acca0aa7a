import random

import pytest

from holdem_table.cards import Card, CardCollection, Deck, Suit, Value


def test_card_create():
    card1 = Card(Suit.SPADES, Value.ACE)
    card2 = Card(Suit.HEARTS, Value.ACE)
    card3 = Card(Suit.DIAMONDS, Value.ACE)
    card4 = Card(Suit.CLUBS, Value.ACE)
    assert card1.suit == Suit.SPADES and card1.value == Value.ACE
    assert card2.suit == Suit.HEARTS and card2.value == Value.ACE
    assert card3.suit == Suit.DIAMONDS and card3.value == Value.ACE
    assert card4.suit == Suit.CLUBS and card4.value == Value.ACE


def test_card_index():
    for i in range(13):
        for j in range(4):
            card = Card(Suit(j), Value(i))
            assert card.index == 4 * i + j


def test_card_to_string():
    assert str(Card(Suit.SPADES, Value.ACE)) == "As"
    assert str(Card(Suit.HEARTS, Value.THREE)) == "3h"
    assert str(Card(Suit.DIAMONDS, Value.QUEEN)) == "Qd"
    assert str(Card(Suit.CLUBS, Value.TEN)) == "10c"


def test_card_file_path():
    assert Card(Suit.SPADES, Value.ACE).file_path == ":/resources/Deck/spades_ace.png"
    assert Card(Suit.HEARTS, Value.THREE).file_path == ":/resources/Deck/hearts_three.png"
    assert Card(Suit.DIAMONDS, Value.QUEEN).file_path == ":/resources/Deck/diamonds_queen.png"
    assert Card(Suit.CLUBS, Value.TEN).file_path == ":/resources/Deck/clubs_ten.png"


def test_card_rejects_invalid_value():
    with pytest.raises(ValueError):
        Card(Suit.HEARTS, 13)


def test_move_cards_between_collections():
    hand = CardCollection([Card(Suit.HEARTS, Value.ACE)])
    table = CardCollection()
    table.add_cards(hand)
    assert len(table) == 1
    assert table[0] == Card(Suit.HEARTS, Value.ACE)


def test_collection_to_string():
    pile = CardCollection([Card(Suit.SPADES, Value.ACE), Card(Suit.HEARTS, Value.THREE)])
    assert str(pile) == "As3h"


def test_deck_create_empty():
    assert len(Deck()) == 0


def test_deck_create_populate():
    deck = Deck(True)
    assert len(deck) == 52
    assert {card.index for card in deck} == set(range(52))


def test_deck_add_card():
    deck = Deck()
    deck.add_card(Card(Suit.HEARTS, Value.ACE))
    assert len(deck) == 1


def test_deck_remove_card():
    deck = Deck()
    deck.add_card(Card(Suit.HEARTS, Value.ACE))
    card = deck.remove_card()
    assert len(deck) == 0
    assert card.value == Value.ACE


def test_remove_from_empty_raises():
    with pytest.raises(IndexError):
        Deck().remove_card()


def test_deck_size():
    deck = Deck()
    assert len(deck) == 0
    deck.add_card(Card(Suit.HEARTS, Value.ACE))
    deck.add_card(Card(Suit.HEARTS, Value.TWO))
    deck.add_card(Card(Suit.HEARTS, Value.THREE))
    assert len(deck) == 3


def test_deck_remove_takes_front():
    deck = Deck()
    deck.add_card(Card(Suit.HEARTS, Value.ACE))
    deck.add_card(Card(Suit.HEARTS, Value.TWO))
    assert deck.remove_card() == Card(Suit.HEARTS, Value.ACE)
    assert list(deck) == [Card(Suit.HEARTS, Value.TWO)]


def test_deck_shuffle_keeps_cards():
    deck = Deck()
    for value in Value:
        deck.add_card(Card(Suit.HEARTS, value))
    before = sorted(card.index for card in deck)
    deck.shuffle()
    assert len(deck) == 13
    assert sorted(card.index for card in deck) == before


def test_seeded_decks_are_equal():
    first = Deck(True, random.Random(7))
    second = Deck(True, random.Random(7))
    assert list(first) == list(second)