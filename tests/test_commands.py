import pytest

from machikoro.card import Card
from machikoro.commands import (
    CommandFactory,
    GainCoinsCommand,
    GameController,
    register_all_commands,
)
from machikoro.enums import CardState, CardType, Color, CommandType
from machikoro.gamecommand import GameCommand
from machikoro.player import Player


class _StubCard(Card):
    def buy_weight(self, ai_player, game_state):
        return 0.0

    def create_commands(self, owner, active_player, controller):
        return []

    def description(self):
        return ""


class _EndTurn(GameCommand):
    def __init__(self):
        super().__init__(CommandType.END_TURN)

    def execute(self, state, controller):
        self._log = "end"


def _card(name="field", value=3, state=CardState.OPENING):
    return _StubCard(name, 1, Color.BLUE, CardType.AGRICULTURE, value, 1, 1, state)


def test_default_command_has_none_type():
    cmd = GainCoinsCommand()
    assert cmd.type is CommandType.NONE
    assert cmd.coins == 0


def test_command_with_card_has_gain_coins_type():
    cmd = GainCoinsCommand(Player(1, "a"), _card())
    assert cmd.type is CommandType.GAIN_COINS
    assert cmd.priority == int(CommandType.GAIN_COINS) * 10000


def test_execute_single_card():
    owner = Player(1, "Ann")
    card = _card(name="麦田", value=1)
    owner.add_card(card)
    cmd = GainCoinsCommand(owner, card)
    cmd.execute(None, GameController())
    assert owner.coins == card.value
    assert cmd.coins == card.value
    assert cmd.log == "【麦田】Ann获得1金币"


def test_execute_counts_every_open_copy():
    owner = Player(1, "Ann")
    cards = [_card(), _card()]
    for card in cards:
        owner.add_card(card)
    cmd = GainCoinsCommand(owner, cards[0])
    cmd.execute(None, None)
    assert owner.coins == 2 * cards[0].value
    assert "*2" in cmd.log


def test_execute_ignores_closed_copies():
    owner = Player(1, "Ann")
    open_card = _card()
    owner.add_card(open_card)
    owner.add_card(_card(state=CardState.CLOSING))
    GainCoinsCommand(owner, open_card).execute(None, None)
    assert owner.coins == open_card.value


def test_failed_command_pays_nothing_and_logs_reason():
    owner = Player(1, "Ann")
    card = _card()
    owner.add_card(card)
    cmd = GainCoinsCommand(owner, card, is_failed=True, failure_message="closed")
    cmd.execute(None, None)
    assert owner.coins == 0
    assert cmd.log == "closed"


def test_execute_without_card_raises():
    with pytest.raises(ValueError):
        GainCoinsCommand().execute(None, None)


def test_factory_is_singleton():
    CommandFactory.instance().register_command(CommandType.END_TURN, _EndTurn)
    cmd = CommandFactory.instance().create_for_deserialization(CommandType.END_TURN)
    assert isinstance(cmd, _EndTurn)
    assert cmd.type is CommandType.END_TURN


def test_factory_builds_gain_coins_command():
    owner, card = Player(2, "b"), _card()
    cmd = CommandFactory.instance().create_gain_coins_command(owner, card)
    assert isinstance(cmd, GainCoinsCommand)
    assert cmd.source_player is owner
    assert cmd.card is card
    assert cmd.is_failed is False


def test_register_all_commands_enables_deserialization():
    register_all_commands()
    cmd = CommandFactory.instance().create_for_deserialization(CommandType.GAIN_COINS)
    assert isinstance(cmd, GainCoinsCommand)
    owner = Player(7, "c")
    source = GainCoinsCommand(owner, _card())

    class _State:
        players = [owner]

    cmd.deserialize(source.serialize(), _State())
    assert cmd.type is CommandType.GAIN_COINS
    assert cmd.source_player is owner


def test_unregistered_type_raises():
    factory = CommandFactory()
    with pytest.raises(KeyError):
        factory.create_for_deserialization(CommandType.END_TURN)


def test_custom_registration_is_used():
    factory = CommandFactory()
    factory.register_command(CommandType.END_TURN, _EndTurn)
    cmd = factory.create_for_deserialization(CommandType.END_TURN)
    assert cmd.type is CommandType.END_TURN