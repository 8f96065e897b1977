# askit

A small, dependency-free toolkit of building blocks for simple 2D games.

## What is inside

- `askit.counter`: `Counter` tracks a button or key over frames. It records the
  frame it went down, the frame it came up and how many frames it has been held.
  The `take_down`, `take_up` and `take_count` methods read a value and clear it.
- `askit.color`: `ColorRGB` and `Color` (with alpha) are immutable colours.
  They support saturating `+`, `*` scaled by 256, `brighten()`, and packing to
  and from a `0xRRGGBB` integer (`from_uint`, `to_uint`). Channels outside
  0–255 raise `ValueError`.
- `askit.effect`: `Effect` holds a fade-in and fade-out level. Integers are read
  on a 0–255 scale and floats are taken as they are. `in_byte()` and
  `out_byte()` give the levels back as 0–255 values.
- `askit.base64codec`: `encode`, `encode_url` and `decode`. There is a standard
  alphabet and a URL-safe alphabet, and the URL-safe one writes no padding.
  `decode` is lenient: characters outside the alphabet count as zero, and the
  result ends at the first zero byte.
- `askit.storage`: reading and writing files of several kinds:
  - raw bytes: `read_bytes`, `write_bytes`
  - text: `write_text`, `append_text`, `read_all`
  - Base64 text: `write_base64`, `append_base64`, `read_all_base64`
  - little-endian floats: `read_float`, `write_float`
  - 8-byte timestamps: `read_time`, `write_time`
  - colours: `read_rgb`, `write_rgb`, `read_rgba`, `write_rgba`

  It also reads big-endian 8-byte word arrays with `bytes_to_words`,
  `read_word_array` and `read_base64_word_array`. `parse_array_header` reads a
  12-byte header into an `ArrayHeader`.
- `askit.inventory`:
  - `Item` describes a kind of item.
  - `UniqueItem` is the content of one slot: an item id (0 means empty) and a
    stack.
  - `ShareItem` is a resizable list of slots. It has `put`, `add` (which returns
    what did not fit), `clear`, `resize`, `grow`, `sort_up` and `sort_down`.
  - `Inventory` is a hot-bar with a wrapping selection.
- `askit.maze`:
  - `make_maze` generates a perfect maze and `solve_maze` marks its route.
    `render_maze` draws it as text. `default_maze` does all three, opens an
    entrance and an exit, and prints the result.
  - `make_world` builds a tiling height map from 16×16 chunks, and
    `paint_world` turns it into tile layers.
  - `flood_fill` is a scan-line fill over a row-major list.
  - `flatten` joins a grid's columns into one list.
- `askit.geometry`:
  - `distance` gives the distance between two points, and `nearest` finds the
    closest point to a target.
  - `is_area` and `in_area` check rectangles.
  - `to_pixels`, `to_pixels_x` and `to_pixels_y` convert a rectangle given in
    window ratios to pixels.
- `askit.drawstate`: `DrawState` keeps one-shot slots for a rectangle, a number
  and an alpha. A `take_*` method returns the value and resets the slot to its
  default. `is_empty_rect` checks whether all four coordinates are zero.
- `askit.language`: `Phrase` is a piece of text with one entry per language
  slot, indexed by `LanguageId` (`ENGLISH`, `JAPANESE`).
- `askit.app`: `BaseApp` has the lifecycle hooks `start`, `init`, `setup`,
  `update_start`, `update`, `draw`, `update_end`, `exit`, `quit` and `end`.
  `run_app(app, keep_running)` calls the per-frame hooks while
  `keep_running()` is true and returns the number of frames run.

## What it does not do

askit keeps state and does computation only. It opens no window and draws
nothing. It reads no keyboard, mouse or touch input and plays no sound:
`Counter` is fed by whatever input code you write. `BaseApp.draw` is a hook
for you to fill in, and `Inventory` tracks the selection but does not display
anything. There is no command-line program.

## Installation

```
pip install .
```

## Examples

```python
from askit.counter import Counter

button = Counter()
for pressed in (False, True, True, False):
    button.update(pressed)
    if button.up():
        print("released after being held")
```

```python
from askit.inventory import ShareItem

slots = ShareItem(8)
slots.put(0, 1, 5)
leftover = slots.add(2, 25, 10)   # add 25 of item 2, stacks hold 10
print(leftover.stack)             # how many did not fit
```

```python
import random
from askit.maze import make_maze, solve_maze, render_maze

grid = solve_maze(make_maze(21, 11, 1, 0, random.Random(7)))
print(render_maze(grid, 1, 0, 2))
```

```python
from askit.base64codec import encode, decode

encoded = encode(b"hello")
assert decode(encoded) == b"hello"
```

```python
from askit.app import BaseApp, run_app

class Game(BaseApp):
    def update(self):
        print("tick")

frames = iter([True, True, False])
print(run_app(Game(), lambda: next(frames)))   # 2
```

## Running the tests

```
pip install .[test]
pytest
```