import re
from typing import Self, Sequence

from tileboggle.neighbors import init_neighbors


class Grid:
    """A rectangular board of tiles.

    A tile is one or more letters that must be used together, e.g. "a" or "qu".
    Tiles are stored lowercased. Cells are numbered row-major.
    """

    _tiles: list[str]
    _neighbors: tuple[tuple[int, ...], ...]

    def __init__(self, tiles: Sequence[Sequence[str]]):
        rows = len(tiles)
        cols = len(tiles[0]) if rows else 0
        for r, row in enumerate(tiles):
            if len(row) != cols:
                raise ValueError(
                    f"Ragged grid: row {r} has {len(row)} tiles, expected {cols}"
                )
            for c, tile in enumerate(row):
                if not isinstance(tile, str) or not tile:
                    raise ValueError(f"Invalid tile at ({r}, {c}): {tile!r}")
        if cols == 0:
            # [[]] is an empty grid, same as [].
            rows = 0
        self.rows = rows
        self.cols = cols
        self._tiles = [tile.lower() for row in tiles for tile in row]
        self._neighbors = init_neighbors(rows, cols)

    @classmethod
    def parse(cls, board: str) -> Self:
        """Parse "a qu / c st" (space-separated tiles) or "abc/def" (one letter per tile).

        Rows are separated by "/" or newlines. If there's a space anywhere inside
        the board, every row is split on whitespace, so "qu / a" is a 2x1 grid.
        """
        spaced = re.search(r"[ \t]", board.strip()) is not None
        rows = []
        for line in re.split(r"[/\n]", board):
            line = line.strip()
            if not line:
                continue
            rows.append(line.split() if spaced else list(line))
        return cls(rows)

    def dimensions(self) -> tuple[int, int]:
        return self.rows, self.cols

    def num_cells(self) -> int:
        return len(self._tiles)

    def tile(self, i: int) -> str:
        return self._tiles[i]

    def neighbor_ids(self, i: int) -> tuple[int, ...]:
        return self._neighbors[i]

    def _idx(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"({row}, {col}) is outside a {self.rows}x{self.cols} grid")
        return row * self.cols + col

    def pos(self, i: int) -> tuple[int, int]:
        return divmod(i, self.cols)

    def tile_at(self, row: int, col: int) -> str:
        return self._tiles[self._idx(row, col)]

    def neighbors(self, row: int, col: int) -> list[tuple[int, int]]:
        return [self.pos(n) for n in self._neighbors[self._idx(row, col)]]

    def max_word_length(self) -> int:
        """No word longer than this can be spelled on the grid."""
        return sum(len(tile) for tile in self._tiles)

    def rows_of_tiles(self) -> list[list[str]]:
        return [self._tiles[r * self.cols : (r + 1) * self.cols] for r in range(self.rows)]

    def __str__(self):
        out = " / ".join(" ".join(row) for row in self.rows_of_tiles())
        if " " not in out and len(out) > 1:
            # A lone multi-letter tile needs a space to parse as one tile.
            out += " /"
        return out

    def __repr__(self):
        return f"Grid.parse({str(self)!r})"

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.dimensions() == other.dimensions() and self._tiles == other._tiles
