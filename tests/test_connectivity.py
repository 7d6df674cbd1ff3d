import pytest

from excitable_net.connectivity import (
    MatrixType,
    build_matrix,
    format_matrix,
    random_bi,
    random_uni,
    regular,
    small_world_bi,
    small_world_uni,
)
from excitable_net.lattice import lattice


def _pattern(matrix):
    return [[1 if value != 0 else 0 for value in row] for row in matrix]


def _values(matrix):
    return {value for row in matrix for value in row}


def _flipped_positions(matrix, reference):
    return {
        (i, j)
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if value != reference[i][j]
    }


@pytest.mark.parametrize("side", [3, 4, 5])
def test_regular_has_lattice_pattern(side):
    matrix = regular(side, 0.4)
    assert _pattern(matrix) == lattice(side)
    assert _values(matrix) <= {-1, 0, 1}


def test_regular_without_inhibition_signs():
    matrix = regular(3, 0.0)
    row = matrix[0]
    assert row[1] == 1
    assert row[2] == -1
    assert row[3] == -1
    assert row[6] == -1


def test_regular_full_inhibition_flips_signs():
    plain = regular(4, 0.0)
    flipped = regular(4, 1.0)
    assert flipped == [[-value for value in row] for row in plain]


def test_regular_flips_grow_with_inhibition():
    plain = regular(5, 0.0)
    low = _flipped_positions(regular(5, 0.3), plain)
    high = _flipped_positions(regular(5, 0.6), plain)
    assert low <= high
    assert len(high) <= 4 * 25


def test_regular_rejects_non_positive_side():
    with pytest.raises(ValueError):
        regular(0, 0.5)


@pytest.mark.parametrize("side", [3, 4])
def test_small_world_uni_without_rewiring_is_regular(side):
    assert small_world_uni(side, 0.0, 0.3) == regular(side, 0.3)


def test_small_world_uni_full_rewiring_keeps_signs_and_degree():
    matrix = small_world_uni(4, 1.0, 0.3)
    assert _values(matrix) <= {-1, 0, 1}
    assert all(sum(1 for value in row if value) <= 4 for row in matrix)
    assert matrix != regular(4, 0.3)


@pytest.mark.parametrize("inhibitory", [0.0, 0.2, 0.7])
def test_small_world_uni_partial_rewiring_bounds(inhibitory):
    matrix = small_world_uni(4, 0.5, inhibitory)
    assert len(matrix) == 16
    assert all(len(row) == 16 for row in matrix)
    assert _values(matrix) <= {-1, 0, 1}
    assert all(sum(1 for value in row if value) <= 4 for row in matrix)


@pytest.mark.parametrize("side", [3, 4])
def test_small_world_bi_without_rewiring_is_regular(side):
    assert small_world_bi(side, 0.0, 0.3) == regular(side, 0.3)


def test_small_world_bi_is_deterministic_and_changes_lattice():
    first = small_world_bi(4, 0.5, 0.2)
    assert first == small_world_bi(4, 0.5, 0.2)
    assert first != regular(4, 0.2)


@pytest.mark.parametrize("builder", [random_bi, random_uni])
def test_random_without_links_is_empty(builder):
    assert _values(builder(3, 0.0, 0.5)) == {0}


@pytest.mark.parametrize("builder", [random_bi, random_uni])
def test_random_full_links_sign_follows_inhibition(builder):
    assert _values(builder(3, 1.0, 0.0)) == {-1}
    assert _values(builder(3, 1.0, 1.0)) == {1}


@pytest.mark.parametrize("p", [0.1, 0.3, 0.7])
def test_random_bi_is_symmetric(p):
    matrix = random_bi(4, p, 0.4)
    n = len(matrix)
    assert all(matrix[i][j] == matrix[j][i] for i in range(n) for j in range(n))


@pytest.mark.parametrize("p", [0.1, 0.3])
def test_random_bi_pattern_is_union_of_uni_and_transpose(p):
    uni = _pattern(random_uni(4, p, 0.4))
    bi = _pattern(random_bi(4, p, 0.4))
    n = len(uni)
    expected = [[uni[i][j] | uni[j][i] for j in range(n)] for i in range(n)]
    assert bi == expected


def test_random_uni_shape_and_values():
    matrix = random_uni(3, 0.5, 0.5)
    assert len(matrix) == 9
    assert all(len(row) == 9 for row in matrix)
    assert _values(matrix) <= {-1, 0, 1}


@pytest.mark.parametrize(
    "kind, expected",
    [
        (MatrixType.REGULAR, lambda: regular(3, 0.3)),
        ("small_word_uni", lambda: small_world_uni(3, 0.4, 0.3)),
        ("small_word_Bi", lambda: small_world_bi(3, 0.4, 0.3)),
        (3, lambda: random_bi(3, 0.4, 0.3)),
        ("random_uni", lambda: random_uni(3, 0.4, 0.3)),
    ],
)
def test_build_matrix_dispatch(kind, expected):
    assert build_matrix(kind, 3, 0.4, 0.3) == expected()


def test_build_matrix_unknown_code_falls_back_to_regular():
    assert build_matrix(9, 3, 0.4, 0.3) == regular(3, 0.3)


def test_build_matrix_unknown_name_raises():
    with pytest.raises(ValueError):
        build_matrix("hexagonal", 3, 0.4, 0.3)


def test_format_matrix_layout():
    assert format_matrix([[1, -1], [0, 2]]) == "1 -1 \n0 2 \n"


def test_format_matrix_line_count_matches_rows():
    matrix = regular(3, 0.5)
    lines = format_matrix(matrix).splitlines()
    assert len(lines) == 9
    assert [[int(v) for v in line.split()] for line in lines] == matrix