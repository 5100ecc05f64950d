"""Operator-level linear algebra on top of the BLAS-style routines.

:class:`Mat` is a row-major dense matrix and :class:`Vector` a list of
numbers; both support ``+`` and ``*`` with each other and with scalars.
Writing ``a ^ Marker.T`` (or ``^ Marker.H``) marks an operand as
transposed (or conjugate-transposed) for the following product.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence, Union

from . import vector_ops
from .attribute import Order, Transpose
from .matrix import BandMatrix, Matrix
from .matrix_ops import gemm
from .matrix_vector_ops import gemv, ger, gerc


class Marker(Enum):
    """Tag applied with ``^``: plain transpose or Hermitian transpose."""

    T = "T"
    H = "H"


@dataclass(frozen=True)
class Trans:
    """An operand marked as transposed (``T``) or conjugate-transposed (``H``)."""

    operand: Union["Mat", Matrix, "Vector", Sequence]
    marker: Marker

    @property
    def transpose(self) -> Transpose:
        return Transpose.TRANS if self.marker is Marker.T else Transpose.CONJ_TRANS

    def __mul__(self, other):
        if isinstance(self.operand, Matrix):
            if isinstance(other, Trans) and isinstance(other.operand, Matrix):
                return _product(self.operand, self.transpose, other.operand, other.transpose)
            if isinstance(other, Matrix):
                return _product(self.operand, self.transpose, other, Transpose.NO_TRANS)
            return NotImplemented
        if isinstance(other, (Matrix, Trans)) or isinstance(other, numbers.Number):
            return NotImplemented
        if self.marker is Marker.T:
            return vector_ops.dot(self.operand, other)
        return vector_ops.dotc(self.operand, other)


def _product(a: Matrix, at: Transpose, b: Matrix, bt: Transpose) -> "Mat":
    m, k = (a.rows, a.cols) if at == Transpose.NO_TRANS else (a.cols, a.rows)
    kb, n = (b.cols, b.rows) if bt != Transpose.NO_TRANS else (b.rows, b.cols)
    if k != kb:
        raise ValueError(f"dimension mismatch: {m}x{k} times {kb}x{n}")
    result = Mat.fill(0, m, n)
    gemm(1, at, a, bt, b, 0, result)
    return result


class Mat(Matrix):
    """A dense row-major matrix with arithmetic operators."""

    def __post_init__(self) -> None:
        if self.order != Order.ROW_MAJOR:
            raise ValueError("Mat is always stored in row-major order")
        super().__post_init__()

    @staticmethod
    def fill(value, n: int, m: int) -> "Mat":
        """An ``n`` x ``m`` matrix with every element set to ``value``."""
        return Mat(n, m, [value] * (n * m))

    @staticmethod
    def from_matrix(a: Matrix) -> "Mat":
        """A row-major copy of any dense matrix."""
        if isinstance(a, BandMatrix):
            raise TypeError("band matrices cannot be copied into a dense Mat")
        lead = a.lead_dim()
        if a.order == Order.ROW_MAJOR:
            data = [a.data[i * lead + j] for i in range(a.rows) for j in range(a.cols)]
        else:
            data = [a.data[j * lead + i] for i in range(a.rows) for j in range(a.cols)]
        return Mat(a.rows, a.cols, data)

    def __getitem__(self, row: int) -> list:
        if not 0 <= row < self.rows:
            raise IndexError(f"row {row} out of range for {self.rows} rows")
        start = row * self.cols
        return self.data[start:start + self.cols]

    def __iter__(self) -> Iterator[list]:
        return (self[i] for i in range(self.rows))

    def __str__(self) -> str:
        return "".join("".join(str(v) for v in row) + "\n" for row in self)

    def __xor__(self, marker: Marker) -> Trans:
        if not isinstance(marker, Marker):
            return NotImplemented
        return Trans(self, marker)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.rows != other.rows or self.cols != other.cols:
            raise ValueError(
                f"dimension mismatch: {self.rows}x{self.cols} plus {other.rows}x{other.cols}"
            )
        result = Mat.from_matrix(self)
        vector_ops.axpy_mat(1, Mat.from_matrix(other), result)
        return result

    def __mul__(self, other):
        if isinstance(other, Trans):
            if isinstance(other.operand, Matrix):
                return _product(self, Transpose.NO_TRANS, other.operand, other.transpose)
            return NotImplemented
        if isinstance(other, Matrix):
            return _product(self, Transpose.NO_TRANS, other, Transpose.NO_TRANS)
        if isinstance(other, numbers.Number):
            result = Mat.from_matrix(self)
            vector_ops.scal_mat(other, result)
            return result
        if isinstance(other, Sequence) and not isinstance(other, str):
            result = Vector([0] * self.rows)
            gemv(Transpose.NO_TRANS, 1, self, other, 0, result)
            return result
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return self * other
        return NotImplemented


class Vector(list):
    """A list of numbers with vector arithmetic and level-1 operations."""

    def update(self, alpha, x: Sequence) -> "Vector":
        """``self = alpha * x + self``; returns ``self``."""
        vector_ops.axpy(alpha, x, self)
        return self

    def scale(self, alpha) -> "Vector":
        """``self = alpha * self``; returns ``self``."""
        vector_ops.scal(alpha, self)
        return self

    def dot(self, x: Sequence):
        return vector_ops.dot(self, x)

    def abs_sum(self):
        return vector_ops.asum(self)

    def norm(self):
        return vector_ops.nrm2(self)

    def max_index(self) -> int:
        return vector_ops.iamax(self)

    def __xor__(self, marker: Marker) -> Trans:
        if not isinstance(marker, Marker):
            return NotImplemented
        return Trans(self, marker)

    def __add__(self, other):
        if isinstance(other, (Matrix, Trans)) or not isinstance(other, Sequence):
            return NotImplemented
        return Vector(self).update(1, other)

    def __iadd__(self, other):
        if isinstance(other, (Matrix, Trans)) or not isinstance(other, Sequence):
            return NotImplemented
        return self.update(1, other)

    def __mul__(self, other):
        if isinstance(other, Trans):
            if isinstance(other.operand, Matrix):
                return NotImplemented
            result = Mat.fill(0, len(self), len(other.operand))
            if other.marker is Marker.T:
                ger(1, self, other.operand, result)
            else:
                gerc(1, self, other.operand, result)
            return result
        if isinstance(other, numbers.Number):
            return Vector(self).scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return Vector(self).scale(other)
        return NotImplemented

    def __imul__(self, other):
        if isinstance(other, numbers.Number):
            return self.scale(other)
        return NotImplemented


def mat(*rows: Sequence) -> Mat:
    """Build a :class:`Mat` from rows: ``mat([1, 2], [3, 4])``."""
    if not rows:
        return Mat(0, 0, [])
    cols = len(rows[0])
    if any(len(row) != cols for row in rows):
        raise ValueError("all rows must have the same number of elements")
    return Mat(len(rows), cols, [v for row in rows for v in row])