"""Base class for the commands that make up a turn."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .enums import MAX_PLAYER_NUM, Color, CommandType


class GameCommand(ABC):
    """One step of a turn, ordered by priority and recordable for replay.

    The card and active player passed in are used only to work out the
    priority: red cards are ordered by seat relative to the active player.
    """

    def __init__(
        self,
        command_type: CommandType,
        source_player: Any = None,
        card: Any = None,
        active_player: Any = None,
        is_failed: bool = False,
        failure_message: str = "",
    ) -> None:
        self._type = CommandType(command_type)
        self._source_player = source_player
        self._user_choice: Any = None
        self._log = ""
        self.is_failed = is_failed
        self.failure_message = failure_message
        self._priority = int(self._type) * 10000
        if card is not None and card.color is Color.RED:
            if source_player is None or active_player is None:
                raise ValueError("a red card command needs a source and an active player")
            seat_offset = (source_player.id - active_player.id + MAX_PLAYER_NUM) % MAX_PLAYER_NUM
            self._priority += seat_offset * 100

    @property
    def type(self) -> CommandType:
        return self._type

    @property
    def priority(self) -> int:
        return self._priority

    @property
    def source_player(self) -> Any:
        return self._source_player

    @property
    def user_choice(self) -> Any:
        return self._user_choice

    @property
    def log(self) -> str:
        return self._log

    def requires_user_input(self) -> bool:
        """Whether the command waits for a choice; none do by default."""
        return False

    def set_choice(self, choice: Any) -> None:
        """Record the choice made by the user or a computer player."""
        self._user_choice = choice

    def prompt(self, controller: Any) -> bool:
        """Ask the user interface for a choice.

        Returns whether a choice is awaited; by default there is nothing to ask.
        """
        return self.requires_user_input()

    @abstractmethod
    def execute(self, state: Any, controller: Any) -> None:
        """Carry out the command, assuming any choice has been set."""

    def serialize(self) -> dict[str, Any]:
        """Type, priority, source player id and, when relevant, the choice."""
        data: dict[str, Any] = {
            "type": int(self._type),
            "priority": self._priority,
        }
        if self._source_player is not None:
            data["sourcePlayerId"] = self._source_player.id
        if self.requires_user_input():
            data["userChoice"] = self._user_choice
        return data

    def deserialize(self, data: dict[str, Any], state: Any) -> None:
        """Restore what serialize() wrote; the source player is looked up in state."""
        self._type = CommandType(int(data["type"]))
        self._priority = int(data["priority"])
        if "sourcePlayerId" in data and state is not None:
            player_id = data["sourcePlayerId"]
            self._source_player = next(
                (player for player in state.players if player.id == player_id), None
            )
        if self.requires_user_input() and "userChoice" in data:
            self._user_choice = data["userChoice"]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self._type.name}, priority={self._priority})"