import pytest

from tinkerworks.algebra import Marker, Mat, Trans, Vector, mat
from tinkerworks.attribute import Order
from tinkerworks.matrix import Matrix

T = Marker.T
H = Marker.H


def test_index():
    a = mat([1.0, 2.0])
    assert a[0][0] == 1.0
    assert a[0][1] == 2.0

    b = mat([1.0], [2.0])
    assert b[0][0] == 1.0
    assert b[1][0] == 2.0

    m = mat([1.0, 2.0], [3.0, 4.0])
    assert m[0][0] == 1.0
    assert m[0][1] == 2.0
    assert m[1][0] == 3.0
    assert m[1][1] == 4.0


def test_index_out_of_range():
    with pytest.raises(IndexError):
        mat([1, 2])[1]


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        mat([1, 2], [3])


def test_empty_mat():
    m = mat()
    assert (m.rows, m.cols, m.data) == (0, 0, [])


def test_display():
    assert str(mat([1, 2], [3, 4])) == "12\n34\n"


def test_fill():
    m = Mat.fill(7, 2, 3)
    assert (m.rows, m.cols) == (2, 3)
    assert m.data == [7] * 6


def test_from_matrix_col_major():
    src = Matrix(2, 2, [1, 3, 2, 4], Order.COL_MAJOR)
    assert Mat.from_matrix(src) == mat([1, 2], [3, 4])


def test_from_matrix_is_a_copy():
    a = mat([1, 2])
    b = Mat.from_matrix(a)
    b.data[0] = 9
    assert a[0] == [1, 2]


def test_matrix_add():
    a = mat([1.0, 2.0], [3.0, 4.0])
    b = mat([-1.0, 3.0], [1.0, 1.0])
    assert a + b == mat([0.0, 5.0], [4.0, 5.0])


def test_matrix_add_mismatch():
    with pytest.raises(ValueError):
        mat([1.0, 2.0]) + mat([1.0], [2.0])


def test_matrix_scale():
    x = mat([1.0, 2.0], [3.0, 4.0])
    y = x * 3.0
    z = 3.0 * x
    assert y == mat([3.0, 6.0], [9.0, 12.0])
    assert z == y
    assert x == mat([1.0, 2.0], [3.0, 4.0])


def test_matrix_mul():
    a = mat([1.0, 2.0], [3.0, 4.0])
    b = mat([-1.0, 3.0], [1.0, 1.0])
    assert a * b == mat([1.0, 5.0], [1.0, 13.0])


def test_matrix_mul_mismatch():
    with pytest.raises(ValueError):
        mat([1.0, 2.0]) * mat([1.0, 2.0])


def test_left_mul_trans():
    a = mat([1.0, 3.0], [2.0, 4.0])
    b = mat([-1.0, 3.0], [1.0, 1.0])
    assert (a ^ T) * b == mat([1.0, 5.0], [1.0, 13.0])


def test_right_mul_trans():
    a = mat([1.0, 2.0], [3.0, 4.0])
    b = mat([-1.0, 1.0], [3.0, 1.0])
    assert a * (b ^ T) == mat([1.0, 5.0], [1.0, 13.0])


def test_mul_trans():
    a = mat([1.0, 3.0], [2.0, 4.0])
    b = mat([-1.0, 1.0], [3.0, 1.0])
    assert (a ^ T) * (b ^ T) == mat([1.0, 5.0], [1.0, 13.0])


def test_hermitian_trans_matrix():
    a = mat([1j, 2], [3, 4])
    identity = mat([1, 0], [0, 1])
    assert (a ^ H) * identity == mat([-1j, 3], [2, 4])


def test_trans_marker_kind():
    a = mat([1.0])
    t = a ^ T
    assert isinstance(t, Trans)
    assert t.operand is a
    assert t.marker is Marker.T


def test_vector_add():
    x = Vector([1.0, 2.0])
    y = [3.0, 4.0]
    assert x + y == [4.0, 6.0]
    assert x == [1.0, 2.0]


def test_vector_iadd_updates_in_place():
    x = Vector([1.0, 2.0])
    x += [1.0, 1.0]
    assert x == [2.0, 3.0]


def test_herm_dot():
    x = Vector([complex(1, -1), complex(1, -3)])
    y = [complex(1, 2), complex(1, 3)]
    assert (x ^ H) * y == complex(-9, 9)


def test_plain_dot_via_trans():
    x = Vector([1.0, -2.0, 3.0, 4.0])
    assert (x ^ T) * [1.0, 1.0, 1.0, 1.0] == 6.0


def test_vector_scale():
    x = Vector([1.0, 2.0])
    y = x * 3.0
    z = 3.0 * x
    assert y == [3.0, 6.0]
    assert z == y
    assert x == [1.0, 2.0]


def test_matrix_vector_mul():
    a = mat([2.0, -2.0], [2.0, -4.0])
    x = Vector([2.0, 1.0])
    assert a * x == [2.0, 0.0]


def test_outer():
    x = Vector([2.0, 1.0, 4.0])
    y = Vector([3.0, 6.0, -1.0])
    expected = mat([6.0, 12.0, -2.0], [3.0, 6.0, -1.0], [12.0, 24.0, -4.0])
    assert x * (y ^ T) == expected


def test_outer_hermitian_conjugates():
    x = Vector([1j])
    y = Vector([1j])
    assert x * (y ^ H) == mat([1 + 0j])
    assert x * (y ^ T) == mat([-1 + 0j])


def test_vector_update_and_scale_chain():
    v = Vector([1.0, 2.0])
    result = v.update(2.0, [1.0, 1.0]).scale(0.5)
    assert result is v
    assert v == [1.5, 2.0]


def test_vector_reductions():
    v = Vector([1.0, -2.0, 3.0, 4.0])
    assert v.dot([1.0, 1.0, 1.0, 1.0]) == 6.0
    assert v.abs_sum() == 10.0
    assert v.max_index() == 3
    assert Vector([3.0, -4.0]).norm() == 5.0