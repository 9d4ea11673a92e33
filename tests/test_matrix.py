import copy
import math

import pytest

from squaremat.matrix import Row, SquareMat


def mat(*rows):
    return SquareMat.from_rows(rows)


def as_lists(matrix):
    return [list(row) for row in matrix]


def test_constructor_limits():
    for bad in (0, -5, 101):
        with pytest.raises(ValueError):
            SquareMat(bad)
    assert SquareMat(100).size == 100


def test_constructor_and_indexing():
    matrix = SquareMat(4)
    assert matrix.size == 4
    matrix[0][1] = 1
    matrix[2][0] = 5
    assert matrix[0][1] == 1
    assert matrix[2][0] == 5
    with pytest.raises(IndexError):
        matrix[4][1] = 2
    with pytest.raises(IndexError):
        matrix[-1][0] = 1
    with pytest.raises(IndexError):
        matrix[2][15] = 1


def test_new_matrix_is_zero():
    assert SquareMat(3).total() == 0


def test_row_view_and_bounds():
    values = [1.0, 2.0]
    row = Row(values)
    row[1] = 7
    assert values == [1.0, 7.0]
    assert len(row) == 2
    assert list(row) == [1.0, 7.0]
    with pytest.raises(IndexError):
        row[-1]
    with pytest.raises(IndexError):
        row[2]


def test_from_rows_rejects_non_square():
    with pytest.raises(ValueError):
        SquareMat.from_rows([[1, 2], [3]])
    with pytest.raises(ValueError):
        SquareMat.from_rows([])


def test_add_and_sub():
    m1 = mat([5, 6], [7, 8])
    m2 = mat([1, 2], [3, 4])
    total = m1 + m2
    assert total[0][0] == 6
    assert total[1][0] == 10
    diff = m1 - m2
    assert diff[0][1] == 4
    assert diff[1][0] == 4
    with pytest.raises(ValueError):
        m1 + SquareMat(3)
    with pytest.raises(ValueError):
        m2 - SquareMat(10)


def test_negation_and_transpose():
    matrix = mat([1, 2], [3, 4])
    neg = -matrix
    assert neg[0][0] == -1
    assert neg[0][1] == -2
    transposed = ~matrix
    assert transposed[0][1] == 3
    assert transposed[1][0] == 2
    assert transposed[1][1] == 4
    assert as_lists(matrix.transpose().transpose()) == as_lists(matrix)


def test_matrix_product():
    m1 = mat([1, 1, 2], [0, 1, 3], [1, 0, 5])
    m2 = mat([1, 2, 3], [1, 2, 3], [1, 2, 3])
    product = m1 * m2
    assert product[0][0] == 4
    assert product[0][1] == 8
    with pytest.raises(ValueError):
        m1 * SquareMat(4)
    with pytest.raises(ValueError):
        m2 * SquareMat(10)


def test_scalar_product_both_sides():
    matrix = mat([1, 2], [3, 4])
    left = 2.0 * matrix
    right = matrix * 2.0
    assert left[0][0] == 2.0
    assert left[0][1] == 4.0
    assert as_lists(left) == as_lists(right)


def test_elementwise_product_via_mod():
    m1 = mat([1, 1, 2], [0, 1, 3], [1, 0, 5])
    m2 = mat([1, 2, 3], [1, 2, 3], [1, 2, 3])
    result = m1 % m2
    assert result[0][0] == 1
    assert result[0][1] == 2
    assert result[1][0] == 0
    with pytest.raises(ValueError):
        m1 % SquareMat(4)


def test_modulo_by_scalar():
    matrix = mat([4, 6], [8, 9])
    result = matrix % 2.0
    assert result[0][0] == 0.0
    assert result[0][1] == 0.0
    assert result[1][1] == 1.0
    with pytest.raises(ZeroDivisionError):
        matrix % 0.0


def test_division_by_scalar():
    matrix = mat([1, 2], [3, 4])
    result = matrix / 2.0
    assert result[0][0] == 0.5
    assert result[0][1] == 1.0
    with pytest.raises(ZeroDivisionError):
        matrix / 0.0


def test_power():
    matrix = mat([1, 1], [1, 0])
    result = matrix ** 3
    assert result[0][0] == 3
    assert result[1][0] == 2
    assert result[1][1] == 1
    assert as_lists(matrix ^ 3) == as_lists(result)
    with pytest.raises(ValueError):
        matrix ** -2
    with pytest.raises(ValueError):
        matrix ^ -2


def test_power_zero_is_identity():
    matrix = mat([1, 2], [3, 4])
    identity = matrix ** 0
    assert as_lists(identity * matrix) == as_lists(matrix)
    assert identity.determinant() == 1


def test_increment_prefix():
    matrix = mat([1, 2], [3, 4])
    result = matrix.increment()
    assert result[0][0] == 2
    assert result[0][1] == 3
    assert matrix[0][1] == 3
    assert result is matrix


def test_increment_postfix():
    matrix = mat([1, 2], [3, 4])
    previous = matrix.post_increment()
    assert previous[0][0] == 1
    assert previous[0][1] == 2
    assert matrix[0][1] == 3


def test_decrement_prefix():
    matrix = mat([1, 2], [3, 4])
    result = matrix.decrement()
    assert result[0][0] == 0
    assert result[0][1] == 1
    assert matrix[0][1] == 1


def test_decrement_postfix():
    matrix = mat([1, 2], [3, 4])
    previous = matrix.post_decrement()
    assert previous[0][0] == 1
    assert matrix[0][0] == 0
    assert previous[0][1] == 2


def test_comparisons_use_sums():
    m1 = mat([1, 2], [3, 4])
    m2 = mat([1, 2], [3, 4])
    assert m1 == m2
    m1[0][1] = 3
    assert m1 != m2
    assert m1 > m2
    assert m2 < m1
    assert m1 >= m2
    assert m2 <= m1
    assert mat([4, 3], [2, 1]) == mat([1, 2], [3, 4])


def test_determinant():
    matrix = mat([6, 1, 1], [4, -2, 5], [2, 8, 7])
    assert matrix.determinant() == -306.0
    assert matrix.transpose().determinant() == -306.0
    assert mat([7]).determinant() == 7


def test_compound_assignments():
    m1 = mat([1, 1], [1, 1])
    m2 = mat([2, 2], [2, 2])
    m1 += m2
    assert m1[0][0] == 3
    m1 -= m2
    assert m1[0][0] == 1
    m1 *= m2
    assert m1[0][0] == 4
    m1 /= m2
    assert m1[0][0] == 2
    m1 %= 3
    assert m1[0][0] == 2


def test_compound_errors():
    matrix = mat([1, 2], [3, 4])
    with pytest.raises(ValueError):
        matrix += SquareMat(3)
    with pytest.raises(ZeroDivisionError):
        matrix /= mat([1, 0], [1, 1])
    assert as_lists(matrix) == [[1, 2], [3, 4]]
    with pytest.raises(ZeroDivisionError):
        matrix %= 0


def test_imod_by_matrix_with_zero_gives_nan():
    matrix = mat([5, 7], [1, 1])
    matrix %= mat([2, 0], [1, 1])
    assert matrix[0][0] == 1
    assert math.isnan(matrix[0][1])


def test_imul_scalar_keeps_identity():
    matrix = mat([1, 2], [3, 4])
    same = matrix
    matrix *= 2
    assert matrix is same
    assert as_lists(matrix) == as_lists(mat([1, 2], [3, 4]) * 2)


def test_copy_is_independent():
    original = mat([1, 2], [3, 4])
    for duplicate in (original.copy(), copy.copy(original)):
        duplicate[0][0] = 9
        assert original[0][0] == 1


def test_str_format():
    assert str(mat([1, 2], [3, 4])) == "1 2 \n3 4 \n"
    assert str(mat([0.5])) == "0.5 \n"