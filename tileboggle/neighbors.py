import functools


@functools.cache
def init_neighbors(rows: int, cols: int) -> tuple[tuple[int, ...], ...]:
    """Adjacency lists for a rows x cols grid, indexed row-major.

    Each cell's neighbors are sorted. The result is shared between grids of
    the same shape, so it's immutable.
    """

    def idx(r: int, c: int):
        return cols * r + c

    def pos(idx: int):
        return (idx // cols, idx % cols)

    ns: list[tuple[int, ...]] = []
    for i in range(0, rows * cols):
        r, c = pos(i)
        n = []
        for dr in range(-1, 2):
            nr = r + dr
            if nr < 0 or nr >= rows:
                continue
            for dc in range(-1, 2):
                nc = c + dc
                if nc < 0 or nc >= cols:
                    continue
                if dr == 0 and dc == 0:
                    continue
                n.append(idx(nr, nc))
        n.sort()
        ns.append(tuple(n))
    return tuple(ns)
