"""Enumerations and constants shared across the game."""

from enum import Enum, IntEnum

MAX_PLAYER_NUM = 5


class Color(IntEnum):
    """Card colour, which decides when and for whom a card activates."""

    LANDMARK = 0
    RED = 1
    BLUE = 2
    GREEN = 3
    PURPLE = 4


class CardType(Enum):
    """Industry category printed on a card."""

    AGRICULTURE = "agriculture"
    HUSBANDRY = "husbandry"
    INDUSTRY = "industry"
    FISHERY = "fishery"
    STORE = "store"
    FACTORY = "factory"
    COMPANY = "company"
    RESTAURANT = "restaurant"
    OFFICE = "office"
    LANDMARK = "landmark"


class CardState(Enum):
    """Whether a card is open for business; NONE matches any state in queries."""

    NONE = "none"
    OPENING = "opening"
    CLOSING = "closing"


class AIRank(Enum):
    """Skill level of a computer player; NONE marks a human."""

    NONE = "none"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class CommandStatus(Enum):
    """Lifecycle of a game command."""

    PENDING = "pending"
    EXECUTING = "executing"
    COMPLETED = "completed"
    SKIPPED = "skipped"


class CommandType(IntEnum):
    """Kind of game command; the value orders commands within a turn."""

    NONE = -1
    START_TURN = 0
    ROLL_DICE = 100
    REROLL_DICE = 110
    ADD_DICE_NUM = 120
    CREATE_CARD = 200
    STEAL_COINS = 210
    GAIN_COINS = 230
    BUY_CARD = 300
    END_TURN = 400