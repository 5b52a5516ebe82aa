import pytest

from dskit.matrices import (
    DiagonalMatrix,
    LowerTriangularColumnMajor,
    LowerTriangularRowMajor,
    SparseMatrix,
    SquareMatrix,
    SymmetricMatrix,
    ToeplitzMatrix,
    TriDiagonalMatrix,
    UpperTriangularColumnMajor,
    UpperTriangularRowMajor,
    diagonal_of,
    lower_triangle,
)

LOWER = [[1, 0, 0, 0], [2, 3, 0, 0], [4, 5, 6, 0], [7, 8, 9, 10]]
UPPER = [[1, 2, 3, 4], [0, 5, 6, 7], [0, 0, 8, 9], [0, 0, 0, 10]]
SYMMETRIC = [[1, 2, 3], [2, 4, 5], [3, 5, 6]]
TRIDIAGONAL = [[1, 2, 0, 0], [3, 4, 5, 0], [0, 6, 7, 8], [0, 0, 9, 10]]
TOEPLITZ = [[1, 2, 3, 4], [5, 1, 2, 3], [6, 5, 1, 2], [7, 6, 5, 1]]
DIAGONAL = [[5, 0, 0, 0], [0, 7, 0, 0], [0, 0, 9, 0], [0, 0, 0, 11]]


@pytest.mark.parametrize(
    "cls, rows",
    [
        (SquareMatrix, [[1, 2], [3, 4]]),
        (DiagonalMatrix, DIAGONAL),
        (LowerTriangularRowMajor, LOWER),
        (LowerTriangularColumnMajor, LOWER),
        (UpperTriangularRowMajor, UPPER),
        (UpperTriangularColumnMajor, UPPER),
        (SymmetricMatrix, SYMMETRIC),
        (TriDiagonalMatrix, TRIDIAGONAL),
        (ToeplitzMatrix, TOEPLITZ),
    ],
)
def test_round_trip(cls, rows):
    assert cls.from_rows(rows).rows() == rows


@pytest.mark.parametrize(
    "cls, i, j",
    [
        (DiagonalMatrix, 1, 2),
        (LowerTriangularRowMajor, 1, 3),
        (LowerTriangularColumnMajor, 2, 4),
        (UpperTriangularRowMajor, 3, 1),
        (UpperTriangularColumnMajor, 4, 2),
        (TriDiagonalMatrix, 1, 3),
    ],
)
def test_zero_region_ignores_set(cls, i, j):
    m = cls(4)
    m.set(i, j, 42)
    assert m.get(i, j) == 0


def test_diagonal_render_from_sets():
    m = DiagonalMatrix(4)
    m.set(1, 1, 5)
    m.set(2, 2, 7)
    m.set(3, 3, 9)
    m.set(4, 4, 11)
    assert m.get(2, 2) == 7
    assert m.render() == "5 0 0 0\n0 7 0 0\n0 0 9 0\n0 0 0 11"


def test_triangular_drops_other_half():
    full = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert LowerTriangularRowMajor.from_rows(full).rows() == lower_triangle(full)
    assert LowerTriangularColumnMajor.from_rows(full).rows() == lower_triangle(full)


def test_symmetric_mirrors_writes():
    m = SymmetricMatrix(3)
    m.set(3, 1, 8)
    assert m.get(1, 3) == 8
    assert m.get(3, 1) == 8


def test_symmetric_is_symmetric():
    m = SymmetricMatrix.from_rows(SYMMETRIC)
    rows = m.rows()
    assert rows == [list(col) for col in zip(*rows)]


def test_tridiagonal_diagonals():
    m = TriDiagonalMatrix.from_rows(TRIDIAGONAL)
    assert m.main_diagonal() == [1, 4, 7, 10]
    assert m.upper_diagonal() == [2, 5, 8]
    assert m.lower_diagonal() == [3, 6, 9]


def test_toeplitz_distinct_values():
    m = ToeplitzMatrix.from_rows(TOEPLITZ)
    assert m.distinct_values() == [1, 2, 3, 4, 5, 6, 7]


def test_toeplitz_diagonals_constant():
    m = ToeplitzMatrix(3)
    m.set(1, 2, 4)
    assert m.get(2, 3) == 4


def test_index_out_of_range():
    m = SymmetricMatrix(3)
    with pytest.raises(IndexError):
        m.get(0, 1)
    with pytest.raises(IndexError):
        m.set(4, 1, 1)


def test_non_square_rejected():
    with pytest.raises(ValueError):
        DiagonalMatrix.from_rows([[1, 2], [3]])


def test_negative_dimension_rejected():
    with pytest.raises(ValueError):
        SquareMatrix(-1)


def test_render_matches_rows():
    m = UpperTriangularRowMajor.from_rows(UPPER)
    lines = m.render().splitlines()
    assert [[int(x) for x in line.split()] for line in lines] == UPPER


def test_sparse_matrix():
    m = SparseMatrix(3, 4, [(1, 2, 5), (3, 4, 8)])
    assert m.get(1, 2) == 5
    assert m.get(2, 2) == 0
    assert m.rows() == [[0, 5, 0, 0], [0, 0, 0, 0], [0, 0, 0, 8]]
    assert m.render() == "0 5 0 0\n0 0 0 0\n0 0 0 8"


def test_sparse_order_independent():
    a = SparseMatrix(2, 2, [(2, 1, 3), (1, 1, 4)])
    b = SparseMatrix(2, 2, [(1, 1, 4), (2, 1, 3)])
    assert a.rows() == b.rows()


def test_sparse_errors():
    with pytest.raises(IndexError):
        SparseMatrix(2, 2, [(3, 1, 1)])
    with pytest.raises(ValueError):
        SparseMatrix(2, 2, [(1, 1, 1), (1, 1, 2)])
    with pytest.raises(IndexError):
        SparseMatrix(2, 2, []).get(1, 3)


def test_diagonal_of():
    rows = [[1, 0, 0], [1, 2, 0], [1, 2, 3]]
    assert diagonal_of(rows) == [1, 2, 3]


def test_lower_triangle():
    rows = [[1, 9, 9], [1, 2, 9], [1, 2, 3]]
    assert lower_triangle(rows) == [[1, 0, 0], [1, 2, 0], [1, 2, 3]]
    with pytest.raises(ValueError):
        lower_triangle([[1, 2]])