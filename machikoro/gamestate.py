"""The whole state of a game: players, markets, dice and per-turn data."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from .card import Card
from .cardstore import CardStore
from .dice import Dice
from .player import Player

_STATE_FORMAT = 1


class _Signal:
    """A list of callbacks invoked together."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        self._slots.remove(slot)

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)


class GameState:
    """Everything needed to describe a game in progress.

    Listeners connected to ``game_state_changed`` are called after any change;
    those on ``current_player_changed`` receive the new current player.
    """

    def __init__(self) -> None:
        self._players: list[Player] = []
        self._current_player: Optional[Player] = None
        self._current_index = -1
        self._card_stores: list[CardStore] = []
        self._dice: Optional[Dice] = Dice()
        self._cards: dict[int, Card] = {}
        self._last_dice_rolls: list[int] = []
        self._landmark_used: dict[str, bool] = {}
        self.game_state_changed = _Signal()
        self.current_player_changed = _Signal()

    # Players

    @property
    def players(self) -> list[Player]:
        return list(self._players)

    @property
    def current_player(self) -> Optional[Player]:
        return self._current_player

    def add_player(self, player: Player) -> None:
        """Seat a player after those already present; a seated player is ignored."""
        if player is None or player in self._players:
            return
        self._players.append(player)
        self.game_state_changed.emit()

    def remove_player(self, player: Player) -> None:
        """Take a player out of the game."""
        if player not in self._players:
            raise ValueError(f"player {player!r} is not in the game")
        self._players.remove(player)
        if player is self._current_player:
            self._current_player = None
            self._current_index = -1
            self.current_player_changed.emit(None)
        elif self._current_player is not None:
            self._current_index = self._players.index(self._current_player)
        self.game_state_changed.emit()

    def set_current_player(self, player: Optional[Player]) -> None:
        """Make this player the one whose turn it is."""
        if self._current_player is player:
            return
        self._current_player = player
        self._current_index = (
            self._players.index(player) if player in self._players else -1
        )
        self.current_player_changed.emit(player)
        self.game_state_changed.emit()

    def next_player(self) -> None:
        """Pass the turn to the next seat, wrapping round; no-op without players."""
        if not self._players:
            return
        self._current_index = (self._current_index + 1) % len(self._players)
        self.set_current_player(self._players[self._current_index])

    # Markets

    @property
    def card_stores(self) -> list[CardStore]:
        return list(self._card_stores)

    def add_card_store(self, store: CardStore) -> None:
        """Add a market unless it is already present."""
        if store is None or store in self._card_stores:
            return
        self._card_stores.append(store)
        self.game_state_changed.emit()

    # Dice

    @property
    def dice(self) -> Optional[Dice]:
        return self._dice

    def set_dice(self, dice: Optional[Dice]) -> None:
        """Replace the dice in use."""
        if self._dice is dice:
            return
        self._dice = dice
        self.game_state_changed.emit()

    # Card instances

    def register_card(self, card: Card) -> None:
        """Make a card findable by its id; an id already known is kept."""
        if card is not None and card.id not in self._cards:
            self._cards[card.id] = card

    def unregister_card(self, card: Card) -> None:
        """Forget a card; unknown cards are ignored."""
        if card is not None:
            self._cards.pop(card.id, None)

    def card_by_id(self, card_id: int) -> Optional[Card]:
        """The registered card with this id, or None."""
        return self._cards.get(card_id)

    # Per-turn data

    @property
    def last_dice_rolls(self) -> list[int]:
        return list(self._last_dice_rolls)

    def set_last_dice_rolls(self, rolls: Iterable[int]) -> None:
        self._last_dice_rolls = list(rolls)
        self.game_state_changed.emit()

    def total_dice_roll(self) -> int:
        return sum(self._last_dice_rolls)

    @property
    def landmark_used_this_turn(self) -> dict[str, bool]:
        return dict(self._landmark_used)

    def set_landmark_used(self, landmark_name: str, used: bool) -> None:
        self._landmark_used[landmark_name] = used
        self.game_state_changed.emit()

    def reset_landmark_usage(self) -> None:
        """Forget which landmarks were used; called at the start of each turn."""
        self._landmark_used.clear()
        self.game_state_changed.emit()

    # Saving and loading

    def serialize(self) -> dict[str, Any]:
        return {"type": _STATE_FORMAT}

    def deserialize(self, data: dict[str, Any]) -> None:
        """Load a saved state, checking that it is in the expected format."""
        if data.get("type") != _STATE_FORMAT:
            raise ValueError(f"unsupported game state format: {data.get('type')!r}")