import random

import pytest

from gf2bits.lu import BitLU


def identity(n):
    return [[i == k for k in range(n)] for i in range(n)]


def random_matrix(rows, cols, rng):
    return [[rng.random() < 0.5 for _ in range(cols)] for _ in range(rows)]


def matmul(a, b):
    cols = len(b[0]) if b else 0
    return [
        [bool(sum(bool(a[i][k]) and bool(b[k][j]) for k in range(len(b))) % 2) for j in range(cols)]
        for i in range(len(a))
    ]


def matvec(a, x):
    return [bool(sum(bool(r) and bool(v) for r, v in zip(row, x)) % 2) for row in a]


def rotation(n, shift):
    return [[k == (i + shift) % n for k in range(n)] for i in range(n)]


def transpose(a):
    return [list(col) for col in zip(*a)]


@pytest.mark.parametrize("seed", range(10))
def test_pa_equals_lu(seed):
    rng = random.Random(seed)
    a = random_matrix(12, 12, rng)
    lu = BitLU(a)
    pa = [list(row) for row in a]
    lu.permute_matrix(pa)
    assert matmul(lu.lower(), lu.upper()) == pa


@pytest.mark.parametrize("seed", range(5))
def test_permutation_matrix_times_a(seed):
    rng = random.Random(100 + seed)
    a = random_matrix(9, 9, rng)
    lu = BitLU(a)
    assert matmul(lu.permutation_matrix(), a) == matmul(lu.lower(), lu.upper())


def test_factor_shapes():
    rng = random.Random(7)
    lu = BitLU(random_matrix(8, 8, rng))
    low, up = lu.lower(), lu.upper()
    for i in range(8):
        assert low[i][i] is True
        assert not any(low[i][k] for k in range(i + 1, 8))
        assert not any(up[i][k] for k in range(i))


def test_identity_decomposition():
    lu = BitLU(identity(6))
    assert lu.rank() == 6
    assert lu.determinant() is True
    assert lu.lower() == identity(6)
    assert lu.upper() == identity(6)
    assert lu.swaps() == list(range(6))
    assert lu.permutation_vector() == list(range(6))


def test_zero_matrix_is_singular():
    lu = BitLU([[False] * 4 for _ in range(4)])
    assert lu.rank() == 0
    assert lu.is_singular() is True
    assert lu.determinant() is False
    assert lu.solve([True, False, True, False]) is None
    assert lu.solve_matrix(identity(4)) is None
    assert lu.inverse() is None


def test_rank_of_repeated_rows():
    row = [True, False, True, True]
    lu = BitLU([row, row, row, row])
    assert lu.rank() == 1
    assert lu.is_singular()


def test_rotation_is_full_rank_and_inverse_is_transpose():
    n = 20
    r = rotation(n, 1)
    lu = BitLU(r)
    assert lu.rank() == n
    assert lu.inverse() == transpose(r)


@pytest.mark.parametrize("seed", range(5))
def test_solve_rotation(seed):
    rng = random.Random(seed)
    n = 30
    a = rotation(n, 3)
    lu = BitLU(a)
    b = [rng.random() < 0.5 for _ in range(n)]
    x = lu.solve(b)
    assert matvec(a, x) == b


def test_solve_matrix_rotation():
    rng = random.Random(11)
    a = rotation(25, 5)
    b = random_matrix(25, 7, rng)
    x = BitLU(a).solve_matrix(b)
    assert matmul(a, x) == b


def test_random_nonsingular_solutions():
    rng = random.Random(42)
    checked = 0
    while checked < 5:
        a = random_matrix(10, 10, rng)
        lu = BitLU(a)
        if lu.is_singular():
            assert lu.inverse() is None
            continue
        checked += 1
        inv = lu.inverse()
        assert matmul(a, inv) == identity(10)
        b = [rng.random() < 0.5 for _ in range(10)]
        assert matvec(a, lu.solve(b)) == b


def test_swap_for_antidiagonal():
    lu = BitLU([[False, True], [True, False]])
    assert lu.swaps() == [1, 1]
    assert lu.rank() == 2
    v = [True, False]
    lu.permute_vector(v)
    assert v == [False, True]


def test_permutation_vector_is_permutation():
    rng = random.Random(3)
    lu = BitLU(random_matrix(15, 15, rng))
    assert sorted(lu.permutation_vector()) == list(range(15))


def test_swaps_returns_copy():
    lu = BitLU(identity(3))
    s = lu.swaps()
    s[0] = 2
    assert lu.swaps() == [0, 1, 2]


def test_non_square_raises():
    with pytest.raises(ValueError):
        BitLU([[True, False, True], [False, True, False]])


def test_size_mismatch_raises():
    lu = BitLU(identity(3))
    with pytest.raises(ValueError):
        lu.solve([True, False])
    with pytest.raises(ValueError):
        lu.solve_matrix(identity(4))
    with pytest.raises(ValueError):
        lu.permute_vector([True])
    with pytest.raises(ValueError):
        lu.permute_matrix(identity(2))


def test_empty_matrix():
    lu = BitLU([])
    assert lu.rank() == 0
    assert lu.is_singular() is False
    assert lu.inverse() == []