"""The pair of dice thrown each turn."""

from dataclasses import dataclass

from .randomutils import get_int


@dataclass
class Dice:
    """Two dice plus an optional harbour bonus."""

    first: int = 0
    second: int = 0
    bonus: int = 0

    def roll(self, dice_num: int) -> None:
        """Throw one die, or two when dice_num is greater than one."""
        self.first = get_int(1, 6)
        if dice_num > 1:
            self.second = get_int(1, 6)

    def clear(self) -> None:
        """Reset both dice and the bonus to zero."""
        self.first = 0
        self.second = 0
        self.bonus = 0

    def add_two(self) -> None:
        """Apply the harbour bonus of two to the total."""
        self.bonus = 2

    def total(self) -> int:
        """Sum of both dice and the bonus."""
        return self.first + self.second + self.bonus