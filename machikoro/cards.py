"""The establishment cards and the factory that builds them by id."""

from __future__ import annotations

from typing import Any

from .card import Card
from .commands import CommandFactory
from .enums import CardState, CardType, Color

HARBOR_NAME = "港口"


class _IncomeCard(Card):
    """A card whose owner earns its value when it activates."""

    base_buy_weight: float = 0.0

    def description(self) -> str:
        return f"获得 {self.value} 金币。"

    def buy_weight(self, ai_player: Any, game_state: Any) -> float:
        return float(self.base_buy_weight)

    def create_commands(self, owner: Any, active_player: Any, controller: Any) -> list:
        return [CommandFactory.instance().create_gain_coins_command(owner, self)]


class AppleOrchard(Card):
    base_buy_weight: float = 0.0

    def __init__(self) -> None:
        super().__init__("果园", 3, Color.BLUE, CardType.AGRICULTURE, 3, 10, 10)

    def description(self) -> str:
        return f"获得 {self.value} 金币。"

    def buy_weight(self, ai_player: Any, game_state: Any) -> float:
        return float(self.base_buy_weight)

    def create_commands(self, owner: Any, active_player: Any, controller: Any) -> list:
        return [CommandFactory.instance().create_gain_coins_command(owner, self)]


class FlowerOrchard(_IncomeCard):
    def __init__(self) -> None:
        super().__init__("花田", 2, Color.BLUE, CardType.AGRICULTURE, 1, 4, 4)


class Forest(_IncomeCard):
    def __init__(self) -> None:
        super().__init__("林场", 3, Color.BLUE, CardType.INDUSTRY, 1, 5, 5)


class MackerelBoat(_IncomeCard):
    """Pays only owners who have an open harbour."""

    def __init__(self) -> None:
        super().__init__("鲭鱼船", 2, Color.BLUE, CardType.FISHERY, 3, 8, 8)

    def description(self) -> str:
        return f"如果你建造了【{HARBOR_NAME}】，获得 {self.value} 金币。"

    def is_activated(self, owner: Any, active_player: Any, roll_sum: int) -> bool:
        if owner.card_count(HARBOR_NAME, CardState.OPENING):
            return super().is_activated(owner, active_player, roll_sum)
        return False


class Ranch(_IncomeCard):
    def __init__(self) -> None:
        super().__init__("农场", 1, Color.BLUE, CardType.HUSBANDRY, 1, 2, 2)


class WheatField(_IncomeCard):
    def __init__(self) -> None:
        super().__init__("麦田", 1, Color.BLUE, CardType.AGRICULTURE, 1, 1, 1)


_CARDS_BY_ID: dict[int, type[Card]] = {
    101: WheatField,
}


def create_card(card_id: int) -> Card:
    """A new instance of the card with this catalogue id."""
    try:
        card_class = _CARDS_BY_ID[card_id]
    except KeyError:
        raise ValueError(f"unknown card id: {card_id}") from None
    return card_class()