# squaremat

Square matrices of floating-point numbers, sized 1 to 100 (`MAX_SIZE` in
`squaremat.matrix`), with the usual arithmetic written as Python operators.
It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using it

```python
from squaremat.matrix import SquareMat

a = SquareMat.from_rows([[1, 2], [3, 4]])
b = SquareMat(2)          # a 2x2 matrix of zeros
b[0][0] = 5
b[1][1] = 8

print(a + b)              # element-wise sum
print(a - b)              # element-wise difference
print(-a)                 # negation
print(a * b)              # matrix product
print(a * 2, 2 * a)       # scalar product
print(a % b)              # element-wise product
print(a % 3)              # element-wise remainder (fmod)
print(a / 2)              # division by a scalar
print(a ** 3)             # power; a ^ 3 does the same
print(~a)                 # transpose, also a.transpose()
print(a.determinant())    # -2.0
print(a.size)             # 2
```

`SquareMat(n)` makes an `n`-by-`n` matrix of zeros.
`SquareMat.from_rows(rows)` builds one from an iterable of equally long rows
and raises `ValueError` if they do not form a square. `a.copy()` (or
`copy.copy(a)`) returns an independent copy.

Rows are reached with `a[i]`, which gives a `Row` view: reading or writing
`a[i][j]` reads or writes the matrix itself. A `Row` has a length and can be
iterated, and iterating a matrix yields its rows. An index outside the
matrix, negative ones included, raises `IndexError`.

Powers use repeated multiplication; a power of 0 gives the identity matrix.
The determinant is found by cofactor expansion along the first row.

### Errors

- `ValueError`: a size outside 1 to 100, matrices of different sizes in a
  binary or in-place operation, or a negative power.
- `ZeroDivisionError`: `a / 0`, `a % 0`, `a %= 0`, or `a /= b` when `b` has
  a zero entry.
- `IndexError`: a row or column index outside the matrix.

Where `fmod` has no defined result, as in `a %= b` with a zero entry in
`b`, the entry becomes NaN.

### Increment and decrement

`a.increment()` and `a.decrement()` add or subtract 1 from every entry in
place and return the matrix. `a.post_increment()` and `a.post_decrement()`
do the same but return a copy of the matrix as it was before.

### In-place operators

`+=`, `-=` and `*=` (by a matrix or a scalar) work as expected. `/=` divides
element by element by another matrix, and `%=` takes the remainder by a
matrix or a scalar. Note that `a % b` between two matrices is the
element-wise product, while `a %= b` is the element-wise remainder.

### Comparison

Matrices compare by the sum of their entries: two matrices are equal when
their totals are equal, and `<`, `<=`, `>`, `>=` order them by total.
`a.total()` gives that sum. Because equality is not element-wise, matrices
are not hashable.

### Printing

`str(a)` lays the matrix out one row per line, each entry in `%g` form
followed by a space. `repr(a)` gives a `SquareMat.from_rows(...)` expression.

## Demonstration

```
squaremat-demo
```

prints a walk through every operation on two example 2x2 matrices
(`python -m squaremat.cli` does the same). It takes no options besides
`--help`.

## What it does not do

This is a small pure-Python matrix type for square matrices only. It does
not invert matrices, solve linear systems, or handle non-square shapes, and
it makes no attempt at speed for large matrices.