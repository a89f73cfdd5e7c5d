"""A player with coins and piles of cards."""

from __future__ import annotations

from .card import Card
from .enums import AIRank, CardState, CardType


def _matches(card: Card, state: CardState) -> bool:
    return state is CardState.NONE or card.state is state


class Player:
    """A seat at the table.

    Cards are kept in piles of the same name; index 0 of each pile is its top.
    """

    def __init__(self, player_id: int, name: str, ai_rank: AIRank = AIRank.NONE) -> None:
        self.id = player_id
        self.name = name
        self.ai_rank = ai_rank
        self.coins = 0
        self._cards: list[list[Card]] = []

    @property
    def cards(self) -> list[list[Card]]:
        """A copy of the card piles."""
        return [list(pile) for pile in self._cards]

    def add_coins(self, amount: int) -> None:
        self.coins += amount

    def del_coins(self, amount: int) -> None:
        """Take coins away; the balance may go negative."""
        self.coins -= amount

    def steal_coins(self, other: Player, amount: int) -> None:
        """Move coins from another player to this one."""
        other.del_coins(amount)
        self.add_coins(amount)

    def add_card(self, card: Card) -> None:
        """Put a card on top of the pile with the same name, or start a new pile."""
        for pile in self._cards:
            if pile[0].name == card.name:
                pile.insert(0, card)
                return
        self._cards.append([card])

    def del_card(self, card: Card) -> Card:
        """Remove the top card of the pile sharing the card's name and return it."""
        for index, pile in enumerate(self._cards):
            if pile[0].name == card.name:
                removed = pile.pop(0)
                if not pile:
                    del self._cards[index]
                return removed
        raise ValueError(f"player {self.id} holds no card named {card.name!r}")

    def set_card_state(self, card: Card, state: CardState) -> None:
        """Set the state of the held card with the same id, if any."""
        for pile in self._cards:
            for held in pile:
                if held.id == card.id:
                    held.state = state
                    return

    def card_count(self, name: str, state: CardState) -> int:
        """Number of held cards with this name in this state (NONE for any)."""
        return sum(
            1 for pile in self._cards for card in pile
            if card.name == name and _matches(card, state)
        )

    def type_card_count(self, card_type: CardType, state: CardState) -> int:
        """Number of held cards of this type in this state (NONE for any)."""
        return sum(
            1 for pile in self._cards for card in pile
            if card.card_type is card_type and _matches(card, state)
        )

    def __repr__(self) -> str:
        return f"Player(id={self.id}, name={self.name!r}, coins={self.coins})"