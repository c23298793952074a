"""Path and cutting problems on rectangular grids."""

from __future__ import annotations

from collections.abc import Sequence

MOD = 1_000_000_007
OPEN = "."


def _rows(grid: Sequence[str]) -> list[str]:
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def count_grid_paths(grid: Sequence[str]) -> int:
    """Number of right/down paths through open ('.') cells, modulo ``MOD``.

    Any other character marks a trap that a path may not enter.
    """
    rows = _rows(grid)
    height, width = len(rows), len(rows[0])
    if rows[0][0] != OPEN or rows[-1][-1] != OPEN:
        return 0

    below = [0] * (width + 1)
    for i, row in zip(reversed(range(height)), reversed(rows)):
        current = [0] * (width + 1)
        for j in reversed(range(width)):
            if row[j] != OPEN:
                continue
            if i == height - 1 and j == width - 1:
                current[j] = 1
            else:
                current[j] = (below[j] + current[j + 1]) % MOD
        below = current
    return below[0]


def minimal_grid_path(grid: Sequence[str]) -> str:
    """Lexicographically smallest string read along a right/down path."""
    rows = _rows(grid)
    height, width = len(rows), len(rows[0])
    frontier = {(0, 0)}
    path = [rows[0][0]]
    for _ in range(height + width - 2):
        steps = {
            (i + di, j + dj)
            for i, j in frontier
            for di, dj in ((1, 0), (0, 1))
            if i + di < height and j + dj < width
        }
        best = min(rows[i][j] for i, j in steps)
        path.append(best)
        frontier = {(i, j) for i, j in steps if rows[i][j] == best}
    return "".join(path)


def rectangle_cuts(a: int, b: int) -> int:
    """Fewest straight cuts splitting an ``a`` by ``b`` rectangle into squares."""
    if a < 1 or b < 1:
        raise ValueError(f"rectangle sides must be positive, got {a} and {b}")
    cuts = [[0] * (b + 1) for _ in range(a + 1)]
    for height in range(1, a + 1):
        for width in range(1, b + 1):
            if height == width:
                continue
            horizontal = min(
                (cuts[h][width] + cuts[height - h][width] for h in range(1, height // 2 + 1)),
                default=float("inf"),
            )
            vertical = min(
                (cuts[height][w] + cuts[height][width - w] for w in range(1, width // 2 + 1)),
                default=float("inf"),
            )
            cuts[height][width] = 1 + int(min(horizontal, vertical))
    return cuts[a][b]