"""Square periodic lattices with optional random long-range links."""

from __future__ import annotations

from .rng import MT19937, UniformInt


def lattice(side):
    """Return the 0/1 adjacency matrix of a periodic ``side`` x ``side`` grid.

    Every node is linked to its right, left, upper and lower neighbours.
    """
    if side < 1:
        raise ValueError(f"side must be positive, got {side}")
    n = side * side
    matrix = [[0] * n for _ in range(n)]
    for i in range(side):
        for j in range(side):
            row = matrix[i * side + j]
            row[i * side + (j + 1) % side] = 1
            row[i * side + (j - 1) % side] = 1
            row[((i + 1) % side) * side + j] = 1
            row[((i - 1) % side) * side + j] = 1
    return matrix


def _free_cells(matrix):
    return sum(
        1
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if i != j and value != 1
    )


def _add_random(matrix, side, links, symmetric):
    n = side * side
    if len(matrix) != n or any(len(row) != n for row in matrix):
        raise ValueError(f"matrix must be {n}x{n} for side {side}")
    if links < 0:
        raise ValueError("number of links must not be negative")
    free = _free_cells(matrix)
    if links > free:
        raise ValueError(f"cannot place {links} links, only {free} free slots")
    gen = MT19937(1)
    pick = UniformInt(0, n - 1)
    added = 0
    while added < links:
        if free == 0:
            raise ValueError(f"ran out of free slots after {added} links")
        source = pick(gen)
        target = pick(gen)
        if source == target or matrix[source][target] == 1:
            continue
        cells = ((source, target), (target, source)) if symmetric else ((source, target),)
        for row, col in cells:
            if matrix[row][col] != 1:
                matrix[row][col] = 1
                free -= 1
        added += 1


def add_random_directed(matrix, side, q):
    """Add ``q * side**2`` random directed links to ``matrix`` in place."""
    _add_random(matrix, side, q * side * side, symmetric=False)


def add_random_symmetric(matrix, side, q):
    """Add ``q * q`` random undirected links to ``matrix`` in place."""
    _add_random(matrix, side, q * q, symmetric=True)