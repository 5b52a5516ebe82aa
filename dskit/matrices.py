"""Square matrices that keep only their meaningful elements in a flat list.

Indices passed to ``get`` and ``set`` are 1-based, as in the usual
mathematical notation. Elements that a matrix shape fixes at zero are
not stored: setting them is ignored and reading them gives 0.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _render(rows: Iterable[Iterable[int]]) -> str:
    return "\n".join(" ".join(str(value) for value in row) for row in rows)


class SquareMatrix:
    """A dense n x n matrix stored row by row in a flat list."""

    def __init__(self, n):
        if n < 0:
            raise ValueError(f"dimension must not be negative, got {n}")
        self.n = n
        self._values = [0] * max(0, self._storage_size(n))

    @classmethod
    def from_rows(cls, rows):
        """Build a matrix from a square list of rows."""
        grid = [list(row) for row in rows]
        n = len(grid)
        if any(len(row) != n for row in grid):
            raise ValueError("rows must form a square matrix")
        matrix = cls(n)
        for i, row in enumerate(grid, start=1):
            for j, value in enumerate(row, start=1):
                matrix.set(i, j, value)
        return matrix

    @staticmethod
    def _storage_size(n: int) -> int:
        return n * n

    def _slot(self, i: int, j: int) -> int | None:
        """Position of element (i, j) in storage, or None if it is always zero."""
        return (i - 1) * self.n + (j - 1)

    def _check(self, i: int, j: int) -> None:
        if not (1 <= i <= self.n and 1 <= j <= self.n):
            raise IndexError(f"index ({i}, {j}) outside a {self.n}x{self.n} matrix")

    def set(self, i, j, value):
        """Store ``value`` at (i, j); ignored where the shape forces a zero."""
        self._check(i, j)
        slot = self._slot(i, j)
        if slot is not None:
            self._values[slot] = value

    def get(self, i, j):
        """Return the element at (i, j)."""
        self._check(i, j)
        slot = self._slot(i, j)
        return 0 if slot is None else self._values[slot]

    def rows(self):
        """Return the full matrix as a list of rows."""
        span = range(1, self.n + 1)
        return [[self.get(i, j) for j in span] for i in span]

    def render(self):
        """Return the matrix as space-separated rows, one per line."""
        return _render(self.rows())

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_rows({self.rows()!r})"


class DiagonalMatrix(SquareMatrix):
    """Only the main diagonal is stored."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return n

    def _slot(self, i: int, j: int) -> int | None:
        return i - 1 if i == j else None


class LowerTriangularRowMajor(SquareMatrix):
    """Lower triangle (i >= j) stored row by row."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return n * (n + 1) // 2

    def _slot(self, i: int, j: int) -> int | None:
        if i < j:
            return None
        return i * (i - 1) // 2 + j - 1


class LowerTriangularColumnMajor(SquareMatrix):
    """Lower triangle (i >= j) stored column by column."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return n * (n + 1) // 2

    def _slot(self, i: int, j: int) -> int | None:
        if i < j:
            return None
        return self.n * (j - 1) - (j - 1) * (j - 2) // 2 + (i - j)


class UpperTriangularRowMajor(SquareMatrix):
    """Upper triangle (i <= j) stored row by row."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return n * (n + 1) // 2

    def _slot(self, i: int, j: int) -> int | None:
        if i > j:
            return None
        return self.n * (i - 1) - (i - 1) * (i - 2) // 2 + (j - i)


class UpperTriangularColumnMajor(SquareMatrix):
    """Upper triangle (i <= j) stored column by column."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return n * (n + 1) // 2

    def _slot(self, i: int, j: int) -> int | None:
        if i > j:
            return None
        return j * (j - 1) // 2 + (i - 1)


class SymmetricMatrix(SquareMatrix):
    """Symmetric matrix: only the upper triangle is stored, mirrored on read."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return n * (n + 1) // 2

    def _slot(self, i: int, j: int) -> int | None:
        if i > j:
            i, j = j, i
        return self.n * (i - 1) - (i - 1) * (i - 2) // 2 + (j - i)


class TriDiagonalMatrix(SquareMatrix):
    """Lower, main and upper diagonals stored one after another."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return 3 * n - 2

    def _slot(self, i: int, j: int) -> int | None:
        offset = i - j
        if offset == 0:
            return self.n - 1 + i - 1
        if offset == 1:
            return i - 2
        if offset == -1:
            return 2 * self.n - 1 + i - 1
        return None

    def main_diagonal(self):
        """Elements (i, i) from top to bottom."""
        return [self.get(i, i) for i in range(1, self.n + 1)]

    def upper_diagonal(self):
        """Elements (i, i + 1) from top to bottom."""
        return [self.get(i, i + 1) for i in range(1, self.n)]

    def lower_diagonal(self):
        """Elements (i + 1, i) from top to bottom."""
        return [self.get(i + 1, i) for i in range(1, self.n)]


class ToeplitzMatrix(SquareMatrix):
    """Matrix with constant diagonals: first row, then the rest of the first column."""

    @staticmethod
    def _storage_size(n: int) -> int:
        return 2 * n - 1

    def _slot(self, i: int, j: int) -> int | None:
        if i <= j:
            return j - i
        return self.n + (i - j) - 1

    def distinct_values(self):
        """The first row followed by the first column below it."""
        first_row = [self.get(1, j) for j in range(1, self.n + 1)]
        first_column = [self.get(i, 1) for i in range(2, self.n + 1)]
        return first_row + first_column


class SparseMatrix:
    """An m x n matrix holding only its non-zero entries as (row, column, value)."""

    def __init__(self, rows, cols, entries):
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must not be negative")
        self.row_count = rows
        self.col_count = cols
        self._entries: dict[tuple[int, int], int] = {}
        for i, j, value in entries:
            self._check(i, j)
            if (i, j) in self._entries:
                raise ValueError(f"duplicate entry at ({i}, {j})")
            self._entries[(i, j)] = value

    def _check(self, i: int, j: int) -> None:
        if not (1 <= i <= self.row_count and 1 <= j <= self.col_count):
            raise IndexError(
                f"index ({i}, {j}) outside a {self.row_count}x{self.col_count} matrix"
            )

    def get(self, i, j):
        """Return the element at (i, j), 1-based."""
        self._check(i, j)
        return self._entries.get((i, j), 0)

    def rows(self):
        """Return the full matrix as a list of rows."""
        return [
            [self._entries.get((i, j), 0) for j in range(1, self.col_count + 1)]
            for i in range(1, self.row_count + 1)
        ]

    def render(self):
        """Return the matrix as space-separated rows, one per line."""
        return _render(self.rows())


def _square(rows: Sequence[Sequence[int]]) -> list[list[int]]:
    grid = [list(row) for row in rows]
    if any(len(row) != len(grid) for row in grid):
        raise ValueError("rows must form a square matrix")
    return grid


def diagonal_of(rows):
    """Return the main diagonal of a square list of rows."""
    grid = _square(rows)
    return [row[k] for k, row in enumerate(grid)]


def lower_triangle(rows):
    """Return a copy of a square matrix with everything above the diagonal zeroed."""
    grid = _square(rows)
    return [
        [value if i >= j else 0 for j, value in enumerate(row)]
        for i, row in enumerate(grid)
    ]