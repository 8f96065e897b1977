"""Maze generation and solving, height-map worlds, and flood fill.

Grids are lists of columns: ``grid[x][y]``.
"""

from __future__ import annotations

import random
from typing import Sequence

Grid = list[list[int]]

PATH = 2
_DIG_STEPS = ((0, -1), (-1, 0), (0, 1), (1, 0))
_SEARCH_STEPS = ((0, -1), (0, 1), (-1, 0), (1, 0))

_CHUNK = 16
_SEED_Y = 0x3220
_SEED_XOR = 0x292
_HEIGHT_MAX = 255


def flatten(grid: Sequence[Sequence[int]]) -> list[int]:
    """Concatenate the grid's columns into one list."""
    return [cell for column in grid for cell in column]


def _odd(n: int) -> int:
    return n if n % 2 == 1 else n - 1


def _dig(grid: Grid, x: int, y: int, wall: int, empty: int, rng: random.Random) -> None:
    width, height = len(grid), len(grid[0])
    turn = rng.getrandbits(32)
    tried = 0
    while tried < 4:
        dx, dy = _DIG_STEPS[(turn + tried) % 4]
        tx, ty = x + 2 * dx, y + 2 * dy
        if tx <= 0 or ty <= 0 or tx >= width - 1 or ty >= height - 1 or grid[tx][ty] == empty:
            tried += 1
        elif grid[tx][ty] == wall:
            grid[x + dx][y + dy] = empty
            grid[tx][ty] = empty
            x, y = tx, ty
            tried = 0
            turn = rng.getrandbits(32)
        else:
            tried += 1


def _dig_starts(grid: Grid, wall: int, empty: int) -> list[tuple[int, int]]:
    width, height = len(grid), len(grid[0])
    starts = []
    for y in range(1, height - 1, 2):
        for x in range(1, width - 1, 2):
            if grid[x][y] != empty:
                continue
            if (
                (x >= 2 and grid[x - 2][y] == wall)
                or (y >= 2 and grid[x][y - 2] == wall)
                or (x + 2 < width and grid[x + 2][y] == wall)
                or (y + 2 < height and grid[x][y + 2] == wall)
            ):
                starts.append((x, y))
    return starts


def make_maze(
    width: int,
    height: int,
    wall: int = 1,
    empty: int = 0,
    rng: random.Random | None = None,
) -> Grid:
    """Generate a perfect maze; even sizes are reduced by one."""
    if wall == empty:
        raise ValueError("wall and empty values must differ")
    width, height = _odd(width), _odd(height)
    if width < 3 or height < 3:
        raise ValueError(f"maze too small: {width}x{height}")
    if rng is None:
        rng = random.Random()
    grid = [[wall] * height for _ in range(width)]
    grid[1][1] = empty
    while starts := _dig_starts(grid, wall, empty):
        x, y = starts[rng.randrange(len(starts))]
        _dig(grid, x, y, wall, empty, rng)
    return grid


def solve_maze(grid: Sequence[Sequence[int]], empty: int = 0, path: int = PATH) -> Grid:
    """Return a copy with the route from (1, 1) to the far corner marked ``path``.

    If the corner cannot be reached, no cell is marked.
    """
    result = [list(column) for column in grid]
    width = len(result)
    height = len(result[0]) if width else 0
    if width < 3 or height < 3:
        raise ValueError(f"maze too small: {width}x{height}")
    goal = (width - 2, height - 2)
    result[1][1] = path
    stack = [(1, 1, 0)]
    while stack:
        x, y, step = stack[-1]
        if (x, y) == goal:
            break
        moved = False
        while step < 4:
            dx, dy = _SEARCH_STEPS[step]
            step += 1
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height and result[nx][ny] == empty:
                stack[-1] = (x, y, step)
                result[nx][ny] = path
                stack.append((nx, ny, 0))
                moved = True
                break
        if not moved:
            stack.pop()
            result[x][y] = empty
    return result


def render_maze(
    grid: Sequence[Sequence[int]], wall: int = 1, empty: int = 0, path: int = PATH
) -> str:
    """Draw the grid one column per line; other values are left out."""
    symbols = {path: "・", wall: "■", empty: "　"}
    return "".join(
        "".join(symbols.get(cell, "") for cell in column) + "\n" for column in grid
    )


def default_maze(
    width: int,
    height: int,
    wall: int = 1,
    empty: int = 0,
    rng: random.Random | None = None,
) -> Grid:
    """Generate, solve and print a maze with an entrance and an exit opened."""
    grid = solve_maze(make_maze(width, height, wall, empty, rng), empty)
    w, h = len(grid), len(grid[0])
    grid[1][0] = PATH
    grid[w - 2][h - 1] = PATH
    print(render_maze(grid, wall, empty), end="")
    return grid


def _chunk_seed(seed: int, i: int, j: int) -> int:
    return (seed + i + j * _SEED_Y + (i ^ j) * _SEED_XOR) & 0xFFFFFFFF


def _subdivide(
    cells: Grid, x: int, y: int, size: int,
    t1: int, t2: int, t3: int, t4: int, rng: random.Random,
) -> None:
    if size == 0:
        return
    cells[x][y] = min(((t1 + t2 + t3 + t4) >> 2) + rng.randint(0, size), _HEIGHT_MAX)
    s1 = (t1 + t2) >> 1
    s2 = (t1 + t3) >> 1
    s3 = (t2 + t4) >> 1
    s4 = (t3 + t4) >> 1
    cells[x + size][y] = s3
    cells[x - size][y] = s2
    cells[x][y + size] = s4
    cells[x][y - size] = s1
    half = size >> 1
    _subdivide(cells, x - half, y - half, half, t1, s1, s2, cells[x][y], rng)
    _subdivide(cells, x + half, y - half, half, s1, t2, cells[x][y], s3, rng)
    _subdivide(cells, x - half, y + half, half, s2, cells[x][y], t3, s4, rng)
    _subdivide(cells, x + half, y + half, half, cells[x][y], s3, s4, t4, rng)


def make_world(width: int, height: int, seed: int = 0) -> Grid:
    """Build a tiling height map of 16x16 chunks; a zero seed picks one at random.

    Cells outside whole chunks keep the height 255.
    """
    if width < 0 or height < 0:
        raise ValueError(f"world size must not be negative: {width}x{height}")
    if seed == 0:
        seed = random.randint(0, 65535)
    world = [[_HEIGHT_MAX] * height for _ in range(width)]
    chunks_x, chunks_y = width >> 4, height >> 4
    chunk = [[0] * (_CHUNK + 1) for _ in range(_CHUNK + 1)]
    for i in range(chunks_x):
        for j in range(chunks_y):
            ni, nj = (i + 1) % chunks_x, (j + 1) % chunks_y
            chunk[0][0] = random.Random(_chunk_seed(seed, i, j)).randint(0, _HEIGHT_MAX)
            chunk[_CHUNK][0] = random.Random(_chunk_seed(seed, ni, j)).randint(0, _HEIGHT_MAX)
            chunk[0][_CHUNK] = random.Random(_chunk_seed(seed, i, nj)).randint(0, _HEIGHT_MAX)
            rng = random.Random(_chunk_seed(seed, ni, nj))
            chunk[_CHUNK][_CHUNK] = rng.randint(0, _HEIGHT_MAX)
            half = _CHUNK // 2
            _subdivide(
                chunk, half, half, half,
                chunk[0][0], chunk[_CHUNK][0], chunk[0][_CHUNK], chunk[_CHUNK][_CHUNK], rng,
            )
            for i2 in range(_CHUNK):
                world[(i << 4) + i2][j << 4:(j << 4) + _CHUNK] = chunk[i2][:_CHUNK]
    return world


def paint_world(
    width: int, height: int, under: int, sea: int, green: int, snow: int, seed: int = 0
) -> list[int]:
    """Turn a height map into two row-major tile layers.

    The first layer is all ``under``. In the second, low heights become snow,
    then green, high heights sea; the band in between is left as 0.
    """
    world = make_world(width, height, seed)
    area = width * height
    cells = [under] * area + [0] * area
    for y in range(height):
        for x in range(width):
            level = world[x][y]
            if 50 < level <= 110:
                continue
            if level < 15:
                tile = snow
            elif level <= 50:
                tile = green
            else:
                tile = sea
            cells[area + y * width + x] = tile
    return cells


def flood_fill(cells: list[int], width: int, x: int, y: int, value: int) -> list[tuple[int, int]]:
    """Fill the 4-connected region around (x, y) of a row-major grid in place.

    Returns the painted positions in the order they were painted.
    """
    if width <= 0:
        raise ValueError(f"width must be positive: {width}")
    height = len(cells) // width
    if not (0 <= x < width and 0 <= y < height):
        raise ValueError(f"start ({x}, {y}) outside {width}x{height} grid")
    target = cells[y * width + x]
    if target == value:
        return []
    painted: list[tuple[int, int]] = []
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        row = cy * width
        if cells[row + cx] != target:
            continue
        left = cx
        while left > 0 and cells[row + left - 1] == target:
            left -= 1
        right = cx
        while right < width - 1 and cells[row + right + 1] == target:
            right += 1
        for i in range(left, right + 1):
            cells[row + i] = value
            painted.append((i, cy))
        for ny in (cy - 1, cy + 1):
            if not 0 <= ny < height:
                continue
            other = ny * width
            inside = False
            for i in range(left, right + 1):
                if cells[other + i] == target:
                    if not inside:
                        stack.append((i, ny))
                        inside = True
                else:
                    inside = False
    return painted