"""Level-1 BLAS operations on vectors, plus their flat-matrix variants.

Vectors are any mutable sequence of numbers (lists, array slices seen
through a memoryview, ...). Routines that take two vectors work on the
shorter length, as the underlying BLAS calls do.
"""

from __future__ import annotations

import math
from itertools import chain, islice
from typing import MutableSequence, Sequence

from .matrix import Matrix


def _is_complex(x: Sequence) -> bool:
    return any(isinstance(v, complex) for v in x)


def _abs1(value) -> float:
    if isinstance(value, complex):
        return abs(value.real) + abs(value.imag)
    return abs(value)


def copy(src: Sequence, dst: MutableSequence) -> None:
    """Copy ``len(dst)`` elements of ``src`` into ``dst``."""
    n = len(dst)
    if len(src) < n:
        raise ValueError(f"source holds {len(src)} elements, {n} are needed")
    for i, value in enumerate(islice(src, n)):
        dst[i] = value


def copy_mat(src: Matrix, dst: Matrix) -> None:
    """Copy the elements of ``src`` into ``dst`` (``dst.rows * dst.cols`` of them)."""
    n = dst.rows * dst.cols
    if len(src.data) < n:
        raise ValueError(f"source matrix holds {len(src.data)} elements, {n} are needed")
    for i, value in enumerate(islice(src.data, n)):
        dst.data[i] = value


def axpy(alpha, x: Sequence, y: MutableSequence) -> None:
    """Compute ``y = alpha * x + y`` in place."""
    for i, (a, b) in enumerate(zip(x, y)):
        y[i] = b + alpha * a


def axpy_mat(alpha, x: Matrix, y: Matrix) -> None:
    """Compute ``y = alpha * x + y`` element-wise over matrix storage."""
    n = min(x.rows * x.cols, y.rows * y.cols)
    axpy(alpha, x.data[:n], y.data)


def scal(alpha, x: MutableSequence) -> None:
    """Compute ``x = alpha * x`` in place."""
    for i, value in enumerate(x):
        x[i] = alpha * value


def scal_mat(alpha, x: Matrix) -> None:
    """Scale every element of a matrix in place."""
    n = x.rows * x.cols
    for i, value in enumerate(islice(x.data, n)):
        x.data[i] = alpha * value


def swap(x: MutableSequence, y: MutableSequence) -> None:
    """Exchange the contents of ``x`` and ``y`` over their common length."""
    for i, (a, b) in enumerate(list(zip(x, y))):
        x[i] = b
        y[i] = a


def dot(x: Sequence, y: Sequence):
    """Unconjugated dot product ``x^T y``."""
    return sum((a * b for a, b in zip(x, y)), 0.0)


def dotc(x: Sequence, y: Sequence):
    """Conjugated dot product ``x^H y``; equal to :func:`dot` for real data."""
    return sum((a.conjugate() * b for a, b in zip(x, y)), 0.0)


def asum(x: Sequence):
    """Sum of magnitudes; complex vectors use ``|Re| + |Im|`` and yield a complex."""
    total = sum((_abs1(v) for v in x), 0.0)
    if _is_complex(x):
        return complex(total, 0.0)
    return total


def nrm2(x: Sequence):
    """Euclidean norm; complex vectors yield a complex with zero imaginary part."""
    if _is_complex(x):
        parts = chain.from_iterable((complex(v).real, complex(v).imag) for v in x)
        return complex(math.hypot(*parts), 0.0)
    return math.hypot(*x)


def iamax(x: Sequence) -> int:
    """Index of the first element with the largest magnitude (0 for an empty vector)."""
    if len(x) == 0:
        return 0
    return max(enumerate(x), key=lambda pair: _abs1(pair[1]))[0]


def rot(x: MutableSequence, y: MutableSequence, cos, sin) -> None:
    """Apply a Givens plane rotation to the pair of vectors in place."""
    for i, (a, b) in enumerate(list(zip(x, y))):
        x[i] = cos * a + sin * b
        y[i] = cos * b - sin * a