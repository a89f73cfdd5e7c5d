# machikoro

Game logic for the Machi Koro board game, with no user interface attached.
It provides the pieces a game is built from. A front end has to drive them.

## Modules

- `machikoro.enums`
  - `Color`: the card colours, as an `IntEnum`.
  - `CardType`: the card categories.
  - `CardState`: `NONE`, `OPENING` and `CLOSING`. In count queries, `NONE`
    matches any state.
  - `AIRank`: `NONE` marks a human player.
  - `CommandStatus`: the status of a command.
  - `CommandType`: an `IntEnum` whose value orders commands within a turn.
  - `MAX_PLAYER_NUM`: the maximum number of players, which is 5.
- `machikoro.randomutils`
  - `get_int(low, high)` returns an integer in the closed range.
  - `get_double(low, high)` returns a float in `[low, high)`.
- `machikoro.dice`
  - `Dice` is a dataclass with `first`, `second` and `bonus`.
  - `roll(dice_num)` throws one die, or two when `dice_num > 1`.
  - `add_two()` sets the harbour bonus to 2.
  - `clear()` resets all three values to zero.
  - `total()` returns the sum.
- `machikoro.card`
  - `Card` is the abstract base for all cards.
  - Every instance gets a unique, increasing `id`.
  - A card has `name`, `cost`, `color`, `card_type`, `value`, an activation
    range (`act_low`, `act_high`) and a `state`. The state defaults to
    `OPENING`.
  - `is_activated(owner, active_player, roll_sum)` checks whether the roll
    falls in the activation range.
  - Subclasses implement `buy_weight`, `create_commands` and `description`.
- `machikoro.cards`
  - The blue cards: `WheatField`, `Ranch`, `FlowerOrchard`, `Forest`,
    `MackerelBoat` and `AppleOrchard`.
  - Each card's `create_commands` returns a single `GainCoinsCommand`.
  - `MackerelBoat` activates only for an owner who holds an open `港口`
    (harbour).
  - `create_card(card_id)` builds a card from its catalogue id. Only id
    `101` (`WheatField`) is known. Any other id raises `ValueError`.
- `machikoro.player`
  - `Player` holds coins and piles of same-named cards.
  - Coins: `add_coins`, `del_coins` and `steal_coins`. The balance may go
    negative.
  - Cards: `add_card`, plus `del_card`, which raises `ValueError` when the
    player holds no card of that name.
  - `set_card_state` changes the state of a held card.
  - `card_count(name, state)` and `type_card_count(card_type, state)` count
    held cards.
  - `cards` returns a copy of the piles.
- `machikoro.cardstore`
  - `CardStore(store_id, slot_num)` is a market. A supply pile feeds
    `slot_num` slots.
  - `add_card` and `shuffle` work on the supply pile.
  - `supply_card()` moves the top supply card onto a slot that already holds
    the same name. If there is none, it uses the first empty slot.
  - `top_cards()` lists what can be bought.
  - `remove_card(card)` takes a bought card off its slot.
  - `has_empty_slot()` and `supply_size` report the market's state.
  - Failures raise `CardStoreError`.
- `machikoro.gamecommand`
  - `GameCommand` is the abstract base for turn steps.
  - The priority is the command type times 10000. Red cards add an offset
    from the source player's seat relative to the active player.
  - `serialize()` and `deserialize(data, state)` write and read a dict with
    `type`, `priority`, `sourcePlayerId` and, when a choice is required,
    `userChoice`.
- `machikoro.commands`
  - `GainCoinsCommand.execute(state, controller)` pays the owner the card's
    value once for each open copy held, and writes a log line. A command
    created with `is_failed=True` pays nothing and logs its
    `failure_message`.
  - `CommandFactory.instance()` is the shared factory.
  - `register_command(command_type, creator)` associates a type with a
    creator. `create_for_deserialization(command_type)` builds an empty
    command of that type.
  - `create_gain_coins_command(...)` builds a `GainCoinsCommand`.
  - `register_all_commands()` registers `GainCoinsCommand` under
    `CommandType.GAIN_COINS`.
  - `GameController` is an empty class that is passed to commands.
- `machikoro.gamestate`
  - `GameState` holds players, card stores and dice, plus a registry of card
    instances by id.
  - It also holds the last dice rolls and which landmarks were used this
    turn.
  - It has two signals, `game_state_changed` and `current_player_changed`.
    Each offers `connect`, `disconnect` and `emit`.
  - `next_player()` passes the turn round the table.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Example

```python
from machikoro.player import Player
from machikoro.cardstore import CardStore
from machikoro.cards import WheatField, Ranch
from machikoro.dice import Dice
from machikoro.enums import AIRank

alice = Player(1, "Alice")
bot = Player(2, "Bot", AIRank.EASY)

store = CardStore(1, slot_num=2)
for _ in range(3):
    store.add_card(WheatField())
    store.add_card(Ranch())
store.shuffle()
while store.has_empty_slot():
    store.supply_card()

card = store.top_cards()[0]
store.remove_card(card)
alice.add_card(card)

dice = Dice()
dice.roll(1)
if card.is_activated(alice, alice, dice.total()):
    for command in card.create_commands(alice, alice, None):
        command.execute(None, None)
        print(command.log, alice.coins)
```

## What the package does not do

- There is no user interface, command-line program or turn loop.
  `GameController` holds no logic, so a caller has to roll, collect commands
  and execute them in priority order.
- There is no computer-player strategy. Every card's `buy_weight` returns
  `0.0`.
- There are no red, green or purple cards, and no landmarks. `create_card`
  knows only `WheatField`.
- There is no save and load of a whole game. `GameState.serialize()` writes
  only a format marker. `deserialize()` only checks that marker and raises
  `ValueError` on any other.

## Running the tests

```
pytest
```