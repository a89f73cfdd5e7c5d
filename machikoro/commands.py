"""Concrete commands, the command factory and the game controller."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .enums import CardState, CommandType
from .gamecommand import GameCommand


class GameController:
    """Drives a game by running commands against the game state."""


class GainCoinsCommand(GameCommand):
    """The owner of a card earns its value once for every open copy held."""

    def __init__(
        self,
        source_player: Any = None,
        card: Any = None,
        is_failed: bool = False,
        failure_message: str = "",
    ) -> None:
        command_type = (
            CommandType.NONE
            if source_player is None and card is None
            else CommandType.GAIN_COINS
        )
        super().__init__(command_type, source_player, card, None, is_failed, failure_message)
        self.card = card
        self.coins = 0

    def execute(self, state: Any, controller: Any) -> None:
        """Pay the owner and record what happened in the log."""
        owner = self.source_player
        if owner is None or self.card is None:
            raise ValueError("gain-coins command has no owner or card")
        if self.is_failed:
            self.coins = 0
            self._log = self.failure_message
            return
        count = owner.card_count(self.card.name, CardState.OPENING)
        self.coins = count * self.card.value
        owner.add_coins(self.coins)
        multiplier = "" if count == 1 else f"*{count}"
        self._log = f"【{self.card.name}】{multiplier}{owner.name}获得{self.coins}金币"


class CommandFactory:
    """Process-wide registry that builds commands by type."""

    _instance: Optional[CommandFactory] = None

    def __init__(self) -> None:
        self._creators: dict[CommandType, Callable[[], GameCommand]] = {}

    @classmethod
    def instance(cls) -> CommandFactory:
        """The shared factory."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_command(
        self, command_type: CommandType, creator: Callable[[], GameCommand]
    ) -> None:
        """Associate a type with a callable building an empty command."""
        self._creators[CommandType(command_type)] = creator

    def create_for_deserialization(self, command_type: CommandType) -> GameCommand:
        """An empty command of the given type, ready to be deserialized into."""
        try:
            creator = self._creators[CommandType(command_type)]
        except KeyError:
            raise KeyError(f"no command registered for {command_type!r}") from None
        return creator()

    def create_gain_coins_command(
        self,
        source_player: Any,
        card: Any,
        is_failed: bool = False,
        failure_message: str = "",
    ) -> GainCoinsCommand:
        return GainCoinsCommand(source_player, card, is_failed, failure_message)


def register_all_commands() -> None:
    """Register every command type with the shared factory."""
    CommandFactory.instance().register_command(CommandType.GAIN_COINS, GainCoinsCommand)