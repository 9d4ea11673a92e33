"""Command-line demonstration of the square matrix operators."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Sequence

from squaremat.matrix import SquareMat


def _flag(value: bool) -> str:
    return "1" if value else "0"


def _demo() -> Iterator[str]:
    """Yield the demonstration text piece by piece."""
    a = SquareMat.from_rows([[1, 2], [3, 4]])
    b = SquareMat.from_rows([[5, 6], [7, 8]])

    yield f"Matrix a:\n{a}"
    yield f"Matrix b:\n{b}"

    yield f"\nAddition (a + b):\n{a + b}"
    yield f"Subtraction (a - b):\n{a - b}"
    yield f"Negation (-a):\n{-a}"
    yield f"Multiplication (a * b):\n{a * b}"
    yield f"Scalar multiplication (a * 2):\n{a * 2}"
    yield f"Scalar multiplication (2 * a):\n{2 * a}"
    yield f"Modulo by matrix (a % b):\n{a % b}"
    yield f"Modulo by scalar (a % 3):\n{a % 3}"
    yield f"Division by scalar (a / 2):\n{a / 2}"
    yield f"Power (a ^ 2):\n{a ^ 2}"
    yield f"Transpose (~a):\n{~a}"
    yield f"Determinant (!a): {a.determinant():g}\n"

    yield f"\nPrefix ++a:\n{a.increment()}"
    yield f"Postfix a++:\n{a.post_increment()}"
    yield f"After postfix a:\n{a}"

    yield f"\nPrefix --a:\n{a.decrement()}"
    yield f"Postfix a--:\n{a.post_decrement()}"
    yield f"After postfix a:\n{a}"

    yield f"\nComparison a == b: {_flag(a == b)}\n"
    yield f"Comparison a != b: {_flag(a != b)}\n"
    yield f"Comparison a < b:  {_flag(a < b)}\n"
    yield f"Comparison a <= b: {_flag(a <= b)}\n"
    yield f"Comparison a > b:  {_flag(a > b)}\n"
    yield f"Comparison a >= b: {_flag(a >= b)}\n"

    yield "\nAssignment operators:\n"
    c = a.copy()
    c += b
    yield f"c += b:\n{c}"
    c -= b
    yield f"c -= b:\n{c}"
    c *= 2
    yield f"c *= 2:\n{c}"
    c *= b
    yield f"c *= b:\n{c}"
    c %= 3
    yield f"c %= 3:\n{c}"
    c %= b
    yield f"c %= b:\n{c}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print a walk through every matrix operator on two 2x2 matrices."""
    parser = argparse.ArgumentParser(
        prog="squaremat",
        description="Demonstrate the square matrix operators on two 2x2 matrices.",
    )
    parser.parse_args(argv)
    sys.stdout.write("".join(_demo()))
    return 0


if __name__ == "__main__":
    sys.exit(main())