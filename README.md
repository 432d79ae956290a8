# termshmup

A shoot-'em-up for the terminal. You move a hero through a hand-drawn ASCII
map. You shoot mobs and a boss that takes up two cells, and you pick up
collectibles for points. The game draws with curses and aims for 60 frames
per second.

## Installing

```
pip install .
```

The game needs the standard `curses` module, which is available on POSIX
systems.

## Playing

Run the command with the path to a map file:

```
termshmup maps/00
```

The terminal window has to be exactly 100 columns by 42 rows. If it is not,
the game asks you to resize it and waits until the size is right. A countdown
from 3 runs before play starts.

### Controls

| Key              | Action                          |
|------------------|---------------------------------|
| `w` `a` `s` `d`  | move the hero                   |
| arrow keys       | choose the firing direction     |
| space            | fire                            |
| Esc              | pause and ask whether to quit   |

When the quit prompt appears, press `o` to quit or `p` to go on playing. The
prompt ignores any other key.

When the hero dies, the game shows the final score and waits for a key.

The camera scrolls on its own when the hero comes within 20 cells of an edge
of the screen.

The status bar shows the following:

- the firing direction: `U`, `B`, `L` or `R`
- the hero's health, out of five
- the score
- the shots left, out of eight
- the frame rate
- the time played

### Scoring and timers

| Event                     | Effect                                |
|---------------------------|---------------------------------------|
| picking up a collectible  | +300 points                           |
| killing a mob             | +250 points                           |
| killing the boss          | +500 points                           |
| 30 seconds of play        | +2 points                             |
| 60 seconds of play        | +5 points                             |
| 750 points earned         | one hit point back, up to five        |

- The hero starts with 3 hit points.
- A hit from an enemy projectile costs the hero one hit point.
- Once per second, an enemy standing next to the hero also costs one hit point.
- Collectibles come back every 20 seconds.
- Mobs come back every 20 seconds.
- The boss comes back every 60 seconds.

The command exits with status 1 on SIGTERM, SIGQUIT or Ctrl-C.

## Map format

A map file starts with a 17-byte info line. It holds the height and then the
width as decimal numbers. Spaces pad the line so that `$` is its 16th byte,
and the line ends with a newline.

After the info line come exactly `height` rows. Each row is `width`
characters long and ends in a newline.

- The height must be between 42 and 999.
- The width must be between 100 and 999.

Every cell on the outer edge of the map must be `)`. The map may use these
characters:

| Char                             | Meaning                                  |
|----------------------------------|------------------------------------------|
| `+`                              | the hero (exactly one)                   |
| `(~`                             | the boss, left and right half (exactly one) |
| `B`                              | a mob that fires in all eight directions |
| `_`                              | a mob that chases the hero and fires diagonally |
| `*`                              | a mob that chases the hero and fires straight |
| `{`                              | a collectible (none, or exactly eight)   |
| `!` `"` `#` `,` `-` `;` `<` `=`  | walls                                    |
| space                            | open ground                              |
| `)`                              | empty space                              |

A map needs at least one mob and holds at most 27.

The command exits with a status that shows what went wrong:

| Status | Cause                                      |
|--------|--------------------------------------------|
| 2      | the map path is missing                    |
| 3      | the path cannot be opened                  |
| 4      | the map is rejected; the reason is printed |

## Using the modules

The game logic does not need a terminal:

- `termshmup.parser.parse(data)` builds a `termshmup.state.Game` from the bytes of a map.
- `termshmup.parser.parse_file(path)` does the same from a file.
- Both raise `termshmup.parser.MapError` if the map is invalid. Its `kind` is a `MapErrorKind`.
- `termshmup.engine.Engine(game)` advances the game one frame at a time with `Engine.update(key)`.
- `Engine.update(key)` returns a `termshmup.state.QuitReason` when play should stop, and `None` otherwise.
- The engine takes an optional `rng` (a `random.Random`) for reproducible enemy movement.
- It also takes an `on_hero_hit` callback, which is called when the hero takes damage.

```python
from termshmup.engine import Engine
from termshmup.parser import parse_file

game = parse_file("maps/00")
engine = Engine(game)
for _ in range(60):
    engine.update("d")
print(game.score, game.entities[0].hp)
```

`termshmup.clock.PlayClock` keeps the frame rate and play time. The drawing
functions are in `termshmup.rendering`.

## What it does not do

- No maps come with the package; you supply your own map files.
- Scores are not saved between games.
- There are no levels or campaign; one run plays one map.