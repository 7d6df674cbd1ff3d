"""Signed connectivity matrices for excitable networks.

Every generator returns an ``n`` x ``n`` list of lists with ``n = side**2``.
An entry of ``1`` marks an excitatory link and ``-1`` an inhibitory one;
``0`` means no link.  All generators are seeded, so the same arguments
always give the same matrix.
"""

from __future__ import annotations

from enum import IntEnum

from .rng import MT19937, UniformInt, UniformReal


class MatrixType(IntEnum):
    """Kinds of connectivity matrix, numbered as on the command line."""

    REGULAR = 0
    SMALL_WORLD_UNI = 1
    SMALL_WORLD_BI = 2
    RANDOM_BI = 3
    RANDOM_UNI = 4


_BY_NAME = {
    "regular": MatrixType.REGULAR,
    "small_word_uni": MatrixType.SMALL_WORLD_UNI,
    "small_word_Bi": MatrixType.SMALL_WORLD_BI,
    "random_bi": MatrixType.RANDOM_BI,
    "random_uni": MatrixType.RANDOM_UNI,
}

# Rewired links are first written shifted by 3 so they are not rewired twice.
_UNSHIFT = {4: 1, 2: -1}


def _check_side(side):
    if side < 1:
        raise ValueError(f"side must be positive, got {side}")
    return side * side


def _sign_drawer(inhibitory):
    """Return a callable giving -1 with probability ``inhibitory``, else 1."""
    gen = MT19937(1)
    draw = UniformReal(0.0, 1.0)

    def sign():
        return -1 if draw(gen) < inhibitory else 1

    return sign


def regular(side, inhibitory):
    """Return the periodic square lattice with randomly signed links.

    Each node links to its right, left, upper and lower neighbours.  The
    right link carries the drawn sign, the other three its opposite.
    """
    n = _check_side(side)
    matrix = [[0] * n for _ in range(n)]
    sign = _sign_drawer(inhibitory)
    for i in range(side):
        up = ((i + 1) % side) * side
        down = ((i - 1) % side) * side
        for j in range(side):
            row = matrix[i * side + j]
            row[i * side + (j + 1) % side] = sign()
            row[i * side + (j - 1) % side] = -sign()
            row[up + j] = -sign()
            row[down + j] = -sign()
    return matrix


def _normalize(matrix):
    for row in matrix:
        for j, value in enumerate(row):
            if value in _UNSHIFT:
                row[j] = _UNSHIFT[value]
    return matrix


def small_world_uni(side, p, inhibitory):
    """Rewire each off-diagonal lattice link to a random target with probability ``p``."""
    matrix = regular(side, inhibitory)
    n = side * side
    gen = MT19937(1)
    chance = UniformReal(0.0, 1.0)
    target = UniformInt(0, n - 1)
    for i, row in enumerate(matrix):
        for j in range(n):
            value = row[j]
            if i != j and value in (1, -1) and chance(gen) < p:
                row[j] = 0
                row[target(gen)] = value + 3
    return _normalize(matrix)


def small_world_bi(side, p, inhibitory):
    """Rewire lattice links in both directions with probability ``p``."""
    matrix = regular(side, inhibitory)
    n = side * side
    gen = MT19937(1)
    chance = UniformReal(0.0, 1.0)
    target = UniformInt(0, n - 1)
    for i in range(n):
        for j in range(n):
            forward = matrix[i][j]
            if forward in (1, -1) and chance(gen) < p:
                backward = matrix[j][i]
                matrix[i][j] = 0
                matrix[j][i] = 0
                jj = target(gen)
                matrix[jj][i] = 3 + forward
                matrix[i][jj] = 3 + backward
    return _normalize(matrix)


def _random(side, p, inhibitory, symmetric):
    n = _check_side(side)
    matrix = [[0] * n for _ in range(n)]
    gen = MT19937(1)
    draw = UniformReal(0.0, 1.0)
    for i in range(n):
        for j in range(n):
            value = 1 if draw(gen) < inhibitory else -1
            if draw(gen) < p:
                matrix[i][j] = value
                if symmetric:
                    matrix[j][i] = value
    return matrix


def random_bi(side, p, inhibitory):
    """Return a random undirected signed graph with link probability ``p``."""
    return _random(side, p, inhibitory, symmetric=True)


def random_uni(side, p, inhibitory):
    """Return a random directed signed graph with link probability ``p``."""
    return _random(side, p, inhibitory, symmetric=False)


_BUILDERS = {
    MatrixType.REGULAR: lambda side, p, inhibitory: regular(side, inhibitory),
    MatrixType.SMALL_WORLD_UNI: small_world_uni,
    MatrixType.SMALL_WORLD_BI: small_world_bi,
    MatrixType.RANDOM_BI: random_bi,
    MatrixType.RANDOM_UNI: random_uni,
}


def _resolve(kind):
    if isinstance(kind, MatrixType):
        return kind
    if isinstance(kind, str):
        try:
            return _BY_NAME[kind]
        except KeyError:
            raise ValueError(f"unknown matrix type: {kind}") from None
    if isinstance(kind, int):
        try:
            return MatrixType(kind)
        except ValueError:
            return MatrixType.REGULAR
    raise TypeError(f"matrix type must be a MatrixType, str or int, got {kind!r}")


def build_matrix(kind, side, p, inhibitory):
    """Build a matrix of the given kind.

    ``kind`` is a :class:`MatrixType`, one of the names ``regular``,
    ``small_word_uni``, ``small_word_Bi``, ``random_bi``, ``random_uni``, or
    an integer code; unknown codes fall back to the regular lattice, while
    unknown names raise :class:`ValueError`.
    """
    return _BUILDERS[_resolve(kind)](side, p, inhibitory)


def format_matrix(matrix):
    """Render a matrix as text, each value followed by a space, one row per line."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)