"""A market of card slots refilled from a supply pile."""

from __future__ import annotations

import random

from .card import Card


class CardStoreError(Exception):
    """Raised when the market cannot carry out a request."""


class CardStore:
    """A supply pile feeding a fixed number of slots.

    Each slot is a pile of identical cards; only the top one can be bought.
    The last element of every list is its top.
    """

    def __init__(self, store_id: int, slot_num: int) -> None:
        self.id = store_id
        self.slot_num = slot_num
        self._supply: list[Card] = []
        self._slots: list[list[Card]] = [[] for _ in range(slot_num)]

    def add_card(self, card: Card) -> None:
        """Put a card on top of the supply pile."""
        self._supply.append(card)

    def shuffle(self) -> None:
        """Shuffle the supply pile."""
        random.SystemRandom().shuffle(self._supply)

    def has_empty_slot(self) -> bool:
        return any(not slot for slot in self._slots)

    def supply_card(self) -> Card:
        """Move the top supply card into a slot and return it.

        A slot already holding the same card name is preferred, otherwise the
        first empty slot is used.
        """
        if not self._supply:
            raise CardStoreError("supply pile is empty")
        card = self._supply[-1]
        target = next(
            (slot for slot in self._slots if slot and slot[-1].name == card.name),
            None,
        )
        if target is None:
            target = next((slot for slot in self._slots if not slot), None)
        if target is None:
            raise CardStoreError("no slot can take the supplied card")
        self._supply.pop()
        target.append(card)
        return card

    def top_cards(self) -> list[Card]:
        """The top card of every non-empty slot, in slot order."""
        return [slot[-1] for slot in self._slots if slot]

    def remove_card(self, card: Card) -> None:
        """Take a bought card off the top of its slot."""
        for slot in self._slots:
            if slot and slot[-1] is card:
                slot.pop()
                return
        raise CardStoreError(f"card {card.id} is not on top of any slot")

    @property
    def supply_size(self) -> int:
        return len(self._supply)