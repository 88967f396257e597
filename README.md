# lldkit

lldkit is a set of small, self-contained low-level design examples. Each module
models one classic design problem with plain Python classes. You can import a
module as a library. Most modules can also run a short demo from the command
line. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module                 | What it holds                                                                 |
|------------------------|-------------------------------------------------------------------------------|
| `lldkit.adapter`       | `MediaPlayer`, `DefaultMediaPlayer`, `AdvancedFormat`, `AviPlayer` and `MediaPlayerAdapter`, which plays through an `AviPlayer` |
| `lldkit.decorator`     | `Espresso` and `Cappuccino` wrapped in `Milk` or `Caramel`; each has a `name` and a `price` |
| `lldkit.facade`        | `LaptopSwitch.switch_on()` runs `SoftwareChecks` and `HardwareChecks` and returns whether the laptop starts |
| `lldkit.logmanager`    | `LogManager.get_instance()` sends each message to `ConsoleLogger`, `FileLogger` and `DbLogger` observers |
| `lldkit.chess`         | `Position`, `Board`, `Piece`, `King` and `Chess.setup()`, which places the two kings |
| `lldkit.tictactoe`     | An n×n `TicTacToe`; `move()` returns the winner's id, or 0, and raises `ValueError` on a bad move |
| `lldkit.catalog`       | `Product`, a `Trie` name index, `Inventory`, `Admin`, `Cart` and `User.checkout()` |
| `lldkit.elevator`      | `ElevatorSystem`, which dispatches floor calls and steps its `Elevator`s, plus a `ButtonController` |
| `lldkit.parking`       | `ParkingLot`, `ParkingFloor`, `ParkingSlot` and `Ticket`; fees are charged per whole second by slot type |
| `lldkit.rate_limiter`  | `LeakyBucket`, `TokenBucket`, their per-user front ends and a `ProcessingLeakyBucket` |
| `lldkit.snake_ladder`  | `Dice`, `Jumper` (a snake or a ladder) and a `GameBoard` that plays until a player wins |

## Command-line demos

Each of these commands runs a short scripted scenario and prints what happens:

```
lldkit-adapter
lldkit-decorator
lldkit-facade
lldkit-logging
lldkit-tictactoe
lldkit-catalog
lldkit-elevator
lldkit-parking
lldkit-rate-limiter
lldkit-snake-ladder
```

Some commands need a note:

- `lldkit-logging` appends its messages to `log.txt` in the current directory.
- `lldkit-parking --wait SECONDS` sets how long the vehicles stay parked before
  they pay. The default is 2 seconds.
- `lldkit-rate-limiter` runs the leaky-bucket and token-bucket users side by side
  for about three seconds. With `--processing` it runs a one-slot bucket instead.
  That bucket is drained by a background thread, and the run takes about twenty
  seconds.
- `lldkit-snake-ladder --seed N` seeds the dice so that a game can be replayed.

## Library use

```python
from lldkit.decorator import Caramel, Espresso, Milk

drink = Caramel(Milk(Espresso()))
print(drink.name, drink.price)   # Expresso With Milk With Caramel 15
```

```python
from lldkit.tictactoe import Player, TicTacToe

game = TicTacToe(3)
alice = Player(1, 1)
game.move(alice, 0, 0)           # 0: no winner yet
```

```python
from lldkit.catalog import Admin, Inventory, Product, User

inventory = Inventory()
admin = Admin(inventory)
phone = Product(1, "phone", "Electronics", 1000, 5)
admin.add_product(phone)
inventory.search_product("phone")   # True

user = User(1)
user.add_to_cart(phone)
user.checkout()                     # prints and returns 1000
```

```python
from lldkit.rate_limiter import TokenBucket

bucket = TokenBucket(capacity=10, refresh_rate=1)
bucket.grant_access()               # True while tokens remain
```

`TokenBucket` and `UserTokenCreator` accept a `clock` callable, so you can drive
them with a fake clock. `Dice` accepts a `random.Random`.

## What it does not do

- Chess has only the king. Moves are checked one piece at a time. There is no
  turn order, no game loop and no command to play.
- `DbLogger` prints its messages. It does not write to any database.
- Tic-tac-toe, snakes and ladders and the elevators run only the scripted demos
  above. None of them takes moves from a user.
- `ParkingLot.get_instance()` builds the shared lot on its first call only.
  Later calls return that lot and ignore their arguments.