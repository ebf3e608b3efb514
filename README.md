# zoork

A small text adventure played in the terminal. You start in the foyer of an
old house and explore its rooms: a library, a kitchen, a garden, a cellar, an
observatory, a ballroom, a bedroom, an attic and a secret room whose door is
locked unless you carry the key lying in the library.

## Installing

```
pip install .
```

## Playing

```
zoork
```

Type a command at the `>` prompt. Command words are lower-cased before they
are read, so `GO North` works the same as `go north`.

| Command | What it does |
| --- | --- |
| `go <direction>` | Move `north`, `south`, `east`, `west`, `up` or `down` (or `n`, `s`, `e`, `w`, `u`, `d`). Other words are tried as directions as they are. |
| `look` / `inspect` | Describe the current room. |
| `look <item>` / `inspect <item>` | Describe an item in the room or in your inventory. |
| `take <item>` / `get <item>` | Pick up an item from the room. |
| `drop <item>` | Put an item from your inventory down in the room. |
| `use <item>` | Use an item you are carrying; an item with nothing to do says "Nothing happens." |
| `inventory` / `inv` | List what you are carrying. |
| `quit` | Leave the game after confirming with `y` or `yes`. |

Going a direction with no passage prints "It is impossible to go ..." and you
stay where you are. The game also ends when standard input runs out.

If you walk into the secret room carrying the key, the door unlocks for good.
Without it, the game asks whether you want to use an item (`yes` or `y`) and
which one; naming the key you carry unlocks it, anything else leaves it shut.

## Using it as a library

- `zoork.objects` holds `GameObject`, `Character`, `Item` and the `Command`
  base class with `NullCommand`. `Item.use()` runs the item's `use_command`.
- `zoork.world` holds `Location`, `Room`, `Passage`, `NullRoom`,
  `NullPassage`, the default enter commands and `opposite_direction()`.
  `Passage.create_basic_passage(from_room, to_room, direction, bidirectional)`
  joins two rooms, and when `bidirectional` is true also joins them back the
  opposite way. A room's behaviour on entry is its `enter_command`.
- `zoork.player.Player` carries items and knows its `current_room`;
  `Player.instance()` returns one shared player.
- `zoork.commands.KeyRequiredCommand` locks a room until the player shows a
  named item. It accepts an `input_func` to read answers from somewhere other
  than standard input.
- `zoork.engine.ZOOrkEngine` runs the command loop with `run()`, or acts on a
  single line with `handle_line(line)`. It also accepts a `player` and an
  `input_func`. `tokenize_string()` splits input into lower-case words.
- `zoork.game.build_world(player)` sets up the standard house and returns the
  foyer; `zoork.game.main()` is what the `zoork` command runs.

## What it does not do

There is one player at a time, playing on standard input and output. There is
no network play, and a game cannot be saved or loaded.

## Running the tests

```
pip install .[test]
pytest
```