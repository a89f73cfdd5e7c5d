"""Game logic for the Machi Koro board game: cards, players, card stores, dice, commands and game state."""

__version__ = "1.0.0"