import pytest

from tinkerworks.attribute import Order
from tinkerworks.matrix import BandMatrix, Matrix


def test_row_major_lead_dim_is_cols():
    m = Matrix(2, 3, [0.0] * 6)
    assert m.lead_dim() == m.cols


def test_col_major_lead_dim_is_rows():
    m = Matrix(2, 3, [0.0] * 6, order=Order.COL_MAJOR)
    assert m.lead_dim() == m.rows


def test_default_order_is_row_major():
    m = Matrix(1, 1, [5.0])
    assert m.order is Order.ROW_MAJOR


def test_data_is_kept_in_place():
    data = [1.0, 2.0, 3.0, 4.0]
    m = Matrix(2, 2, data)
    assert m.data is data


def test_tuple_data_becomes_list():
    m = Matrix(1, 2, (1.0, 2.0))
    assert m.data == [1.0, 2.0]


def test_wrong_storage_length_raises():
    with pytest.raises(ValueError):
        Matrix(2, 2, [1.0, 2.0, 3.0])


def test_negative_dimension_raises():
    with pytest.raises(ValueError):
        Matrix(-1, 2, [])


def test_band_lead_dim_counts_diagonals():
    band = BandMatrix(4, 4, [0.0] * 12, sub_diagonals=1, sup_diagonals=1)
    assert band.lead_dim() == 3


def test_band_storage_length_checked():
    with pytest.raises(ValueError):
        BandMatrix(4, 4, [0.0] * 16, sub_diagonals=1, sup_diagonals=1)


def test_band_negative_width_raises():
    with pytest.raises(ValueError):
        BandMatrix(2, 2, [0.0] * 2, sub_diagonals=-1)