"""Base class for all establishment and landmark cards."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from typing import Any

from .enums import CardState, CardType, Color

_next_id = itertools.count(1)


class Card(ABC):
    """A single physical card; every instance gets a unique id."""

    def __init__(
        self,
        name: str,
        cost: int,
        color: Color,
        card_type: CardType,
        value: int,
        act_low: int = 0,
        act_high: int = 0,
        state: CardState = CardState.OPENING,
    ) -> None:
        self._id = next(_next_id)
        self.name = name
        self.cost = cost
        self.color = color
        self.card_type = card_type
        self.value = value
        self.act_low = act_low
        self.act_high = act_high
        self.state = state

    @property
    def id(self) -> int:
        return self._id

    def is_activated(self, owner: Any, active_player: Any, roll_sum: int) -> bool:
        """True when the roll falls inside the card's activation range."""
        return self.act_low <= roll_sum <= self.act_high

    @abstractmethod
    def buy_weight(self, ai_player: Any, game_state: Any) -> float:
        """How desirable buying this card is for a computer player."""

    @abstractmethod
    def create_commands(self, owner: Any, active_player: Any, controller: Any) -> list:
        """Commands to run when the card activates."""

    @abstractmethod
    def description(self) -> str:
        """Text shown to the user."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id}, name={self.name!r}, "
            f"state={self.state.name})"
        )