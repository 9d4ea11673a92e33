"""Fixed-size square matrices of floats with arithmetic operators."""

from __future__ import annotations

import math
from functools import reduce
from numbers import Real
from operator import add
from operator import index as _as_index
from typing import Callable, Iterable, Iterator

MAX_SIZE = 100


def _check_position(index: int, size: int) -> int:
    position = _as_index(index)
    if position < 0 or position >= size:
        raise IndexError("Index out of bounds")
    return position


def _plain_sum(values: Iterable[float]) -> float:
    """Add values left to right with ordinary float addition."""
    return reduce(add, values, 0.0)


def _fmod(value: float, divisor: float) -> float:
    """C-style remainder that yields NaN where the result is undefined."""
    try:
        return math.fmod(value, divisor)
    except ValueError:
        return math.nan


def _determinant(rows: list[list[float]]) -> float:
    size = len(rows)
    if size == 1:
        return rows[0][0]
    if size == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    det = 0.0
    for column, pivot in enumerate(rows[0]):
        minor = [row[:column] + row[column + 1:] for row in rows[1:]]
        sign = 1 if column % 2 == 0 else -1
        det += sign * pivot * _determinant(minor)
    return det


class Row:
    """A bounds-checked view of one matrix row; writes go to the matrix."""

    __slots__ = ("_values",)

    def __init__(self, values: list[float]) -> None:
        self._values = values

    def __getitem__(self, index: int) -> float:
        return self._values[_check_position(index, len(self._values))]

    def __setitem__(self, index: int, value: float) -> None:
        self._values[_check_position(index, len(self._values))] = float(value)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"Row({self._values!r})"


class SquareMat:
    """An n-by-n matrix of floats, 1 <= n <= 100, initialised to zeros.

    Comparisons between matrices compare the sums of their elements.
    ``a % b`` for two matrices is the element-wise product, while
    ``a %= b`` takes the element-wise remainder.
    """

    __slots__ = ("_rows",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int) -> None:
        size = _as_index(size)
        if size <= 0:
            raise ValueError("size of matrix must be positive")
        if size > MAX_SIZE:
            raise ValueError(f"size of matrix must be at most {MAX_SIZE}")
        self._rows = [[0.0] * size for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> "SquareMat":
        """Build a matrix from an iterable of equally long rows."""
        data = [[float(value) for value in row] for row in rows]
        result = cls(len(data))
        if any(len(row) != len(data) for row in data):
            raise ValueError("rows must form a square matrix")
        result._rows = data
        return result

    @classmethod
    def _wrap(cls, data: list[list[float]]) -> "SquareMat":
        result = cls.__new__(cls)
        result._rows = data
        return result

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return len(self._rows)

    def copy(self) -> "SquareMat":
        """Return an independent copy."""
        return self._wrap([row[:] for row in self._rows])

    def __copy__(self) -> "SquareMat":
        return self.copy()

    def __getitem__(self, index: int) -> Row:
        return Row(self._rows[_check_position(index, self.size)])

    def __iter__(self) -> Iterator[Row]:
        return (Row(row) for row in self._rows)

    def _require_same_size(self, other: "SquareMat") -> None:
        if self.size != other.size:
            raise ValueError("both matrices must be of the same size")

    def _map(self, func: Callable[[float], float]) -> "SquareMat":
        return self._wrap([[func(value) for value in row] for row in self._rows])

    def _combine(
        self, other: "SquareMat", func: Callable[[float, float], float]
    ) -> "SquareMat":
        self._require_same_size(other)
        return self._wrap(
            [
                [func(a, b) for a, b in zip(mine, theirs)]
                for mine, theirs in zip(self._rows, other._rows)
            ]
        )

    def _matmul_rows(self, other: "SquareMat") -> list[list[float]]:
        self._require_same_size(other)
        columns = list(zip(*other._rows))
        return [
            [_plain_sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._rows
        ]

    def __add__(self, other: object) -> "SquareMat":
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: object) -> "SquareMat":
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._combine(other, lambda a, b: a - b)

    def __neg__(self) -> "SquareMat":
        return self._map(lambda value: -value)

    def __mul__(self, other: object) -> "SquareMat":
        if isinstance(other, SquareMat):
            return self._wrap(self._matmul_rows(other))
        if isinstance(other, Real):
            scalar = float(other)
            return self._map(lambda value: value * scalar)
        return NotImplemented

    def __rmul__(self, scalar: object) -> "SquareMat":
        if not isinstance(scalar, Real):
            return NotImplemented
        factor = float(scalar)
        return self._map(lambda value: factor * value)

    def __mod__(self, other: object) -> "SquareMat":
        if isinstance(other, SquareMat):
            return self._combine(other, lambda a, b: a * b)
        if isinstance(other, Real):
            divisor = float(other)
            if divisor == 0:
                raise ZeroDivisionError("Modulo by zero is not allowed")
            return self._map(lambda value: _fmod(value, divisor))
        return NotImplemented

    def __truediv__(self, scalar: object) -> "SquareMat":
        if not isinstance(scalar, Real):
            return NotImplemented
        divisor = float(scalar)
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        return self._map(lambda value: value / divisor)

    def __pow__(self, exponent: int) -> "SquareMat":
        exponent = _as_index(exponent)
        if exponent < 0:
            raise ValueError("Power must be non-negative")
        if exponent == 0:
            size = self.size
            return self._wrap(
                [[1.0 if i == j else 0.0 for j in range(size)] for i in range(size)]
            )
        result = self.copy()
        for _ in range(exponent - 1):
            result = result * self
        return result

    def __xor__(self, exponent: int) -> "SquareMat":
        return self.__pow__(exponent)

    def _shift(self, amount: float) -> None:
        self._rows = [[value + amount for value in row] for row in self._rows]

    def increment(self) -> "SquareMat":
        """Add one to every element in place and return this matrix."""
        self._shift(1.0)
        return self

    def decrement(self) -> "SquareMat":
        """Subtract one from every element in place and return this matrix."""
        self._shift(-1.0)
        return self

    def post_increment(self) -> "SquareMat":
        """Add one to every element in place and return the previous value."""
        previous = self.copy()
        self._shift(1.0)
        return previous

    def post_decrement(self) -> "SquareMat":
        """Subtract one from every element in place and return the previous value."""
        previous = self.copy()
        self._shift(-1.0)
        return previous

    def transpose(self) -> "SquareMat":
        """Return the transposed matrix."""
        return self._wrap([list(column) for column in zip(*self._rows)])

    def __invert__(self) -> "SquareMat":
        return self.transpose()

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return _determinant(self._rows)

    def total(self) -> float:
        """Sum of all elements."""
        return _plain_sum(value for row in self._rows for value in row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() == other.total()

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return not self == other

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() < other.total()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() <= other.total()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() > other.total()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() >= other.total()

    def __iadd__(self, other: object) -> "SquareMat":
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._rows = (self + other)._rows
        return self

    def __isub__(self, other: object) -> "SquareMat":
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._rows = (self - other)._rows
        return self

    def __imul__(self, other: object) -> "SquareMat":
        if isinstance(other, SquareMat):
            self._rows = self._matmul_rows(other)
            return self
        if isinstance(other, Real):
            self._rows = (self * other)._rows
            return self
        return NotImplemented

    def __itruediv__(self, other: object) -> "SquareMat":
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._require_same_size(other)
        if any(value == 0 for row in other._rows for value in row):
            raise ZeroDivisionError("Can not divide by zero")
        self._rows = self._combine(other, lambda a, b: a / b)._rows
        return self

    def __imod__(self, other: object) -> "SquareMat":
        if isinstance(other, SquareMat):
            self._rows = self._combine(other, _fmod)._rows
            return self
        if isinstance(other, Real):
            self._rows = (self % other)._rows
            return self
        return NotImplemented

    def __str__(self) -> str:
        return "".join(
            "".join(f"{value:g} " for value in row) + "\n" for row in self._rows
        )

    def __repr__(self) -> str:
        return f"SquareMat.from_rows({self._rows!r})"