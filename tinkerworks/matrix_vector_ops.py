"""Level-2 BLAS operations: matrix-vector products, solves and rank updates.

Dense operands are :class:`~tinkerworks.matrix.Matrix` objects, band operands
are :class:`~tinkerworks.matrix.BandMatrix` objects. For the packed routines
(``spmv``, ``tpmv``, ``spr`` and friends) ``a.rows`` gives the order ``n`` and
the first ``n * (n + 1) // 2`` elements of ``a.data`` hold the packed triangle.
Vectors are mutable sequences; results are written into ``y`` (or ``x``) in
place.
"""

from __future__ import annotations

from itertools import islice
from typing import Callable, MutableSequence, Optional, Sequence

from .attribute import Diagonal, Order, Symmetry, Transpose
from .matrix import BandMatrix, Matrix

_Locator = Callable[[int, int], Optional[int]]


def _take(v: Sequence, n: int, name: str) -> list:
    if len(v) < n:
        raise ValueError(f"{name} holds {len(v)} elements, {n} are needed")
    return list(islice(v, n))


def _scaled(beta, value):
    # With beta == 0 the output is overwritten, never read, as in BLAS.
    return 0 if beta == 0 else beta * value


def _row_major(a: Matrix) -> bool:
    return a.order == Order.ROW_MAJOR


def _dense_index(a: Matrix, i: int, j: int) -> int:
    if _row_major(a):
        return i * a.lead_dim() + j
    return j * a.lead_dim() + i


def _dense_triangle(a: Matrix, symmetry: Symmetry) -> _Locator:
    upper = symmetry == Symmetry.UPPER

    def locate(i: int, j: int) -> Optional[int]:
        inside = i <= j if upper else i >= j
        return _dense_index(a, i, j) if inside else None

    return locate


def _band_triangle(a: BandMatrix, symmetry: Symmetry) -> _Locator:
    k = a.sub_diagonals
    lda = a.lead_dim()
    upper = symmetry == Symmetry.UPPER
    row_major = _row_major(a)

    def locate(i: int, j: int) -> Optional[int]:
        if upper:
            if not i <= j <= i + k:
                return None
            return i * lda + j - i if row_major else j * lda + k + i - j
        if not i - k <= j <= i:
            return None
        return i * lda + k + j - i if row_major else j * lda + i - j

    return locate


def _packed_triangle(a: Matrix, symmetry: Symmetry) -> _Locator:
    n = a.rows
    needed = n * (n + 1) // 2
    if len(a.data) < needed:
        raise ValueError(
            f"packed storage holds {len(a.data)} elements, {needed} are needed"
        )
    upper = symmetry == Symmetry.UPPER
    row_major = _row_major(a)

    def locate(i: int, j: int) -> Optional[int]:
        if upper:
            if i > j:
                return None
            if row_major:
                return i * (2 * n - i + 1) // 2 + j - i
            return i + j * (j + 1) // 2
        if i < j:
            return None
        if row_major:
            return i * (i + 1) // 2 + j
        return i - j + j * (2 * n - j + 1) // 2

    return locate


def _stored(data: Sequence, locate: _Locator) -> Callable[[int, int], object]:
    def entry(i: int, j: int):
        idx = locate(i, j)
        return 0 if idx is None else data[idx]

    return entry


def _symmetric(data: Sequence, locate: _Locator, hermitian: bool):
    def entry(i: int, j: int):
        idx = locate(i, j)
        if idx is not None:
            value = data[idx]
            return value.real if hermitian and i == j else value
        idx = locate(j, i)
        if idx is None:
            return 0
        value = data[idx]
        return value.conjugate() if hermitian else value

    return entry


def _general_mv(m, n, entry, trans, alpha, x, beta, y) -> None:
    if trans == Transpose.NO_TRANS:
        xs = _take(x, n, "x")
        _take(y, m, "y")
        for i in range(m):
            acc = sum((entry(i, j) * xs[j] for j in range(n)), 0)
            y[i] = alpha * acc + _scaled(beta, y[i])
        return
    conjugate = trans == Transpose.CONJ_TRANS
    xs = _take(x, m, "x")
    _take(y, n, "y")
    for j in range(n):
        acc = 0
        for i in range(m):
            value = entry(i, j)
            acc += (value.conjugate() if conjugate else value) * xs[i]
        y[j] = alpha * acc + _scaled(beta, y[j])


def _square_mv(n, entry, alpha, x, beta, y) -> None:
    _general_mv(n, n, entry, Transpose.NO_TRANS, alpha, x, beta, y)


def _rank_update(n, data: MutableSequence, locate: _Locator, term, hermitian) -> None:
    for i in range(n):
        for j in range(n):
            idx = locate(i, j)
            if idx is None:
                continue
            value = data[idx] + term(i, j)
            if hermitian and i == j:
                value = complex(value.real, 0.0)
            data[idx] = value


def _triangular(stored, symmetry, trans, diagonal):
    unit = diagonal == Diagonal.UNIT

    def entry(i: int, j: int):
        if unit and i == j:
            return 1
        if trans == Transpose.NO_TRANS:
            return stored(i, j)
        value = stored(j, i)
        return value.conjugate() if trans == Transpose.CONJ_TRANS else value

    lower = (symmetry == Symmetry.LOWER) == (trans == Transpose.NO_TRANS)
    return entry, lower


def _triangular_apply(n, stored, symmetry, trans, diagonal, x) -> None:
    entry, _ = _triangular(stored, symmetry, trans, diagonal)
    xs = _take(x, n, "x")
    result = [sum((entry(i, j) * xs[j] for j in range(n)), 0) for i in range(n)]
    for i, value in enumerate(result):
        x[i] = value


def _triangular_solve(n, stored, symmetry, trans, diagonal, x) -> None:
    entry, lower = _triangular(stored, symmetry, trans, diagonal)
    rhs = _take(x, n, "x")
    solved = [0] * n
    for i in range(n) if lower else reversed(range(n)):
        known = range(i) if lower else range(i + 1, n)
        acc = rhs[i] - sum((entry(i, j) * solved[j] for j in known), 0)
        pivot = entry(i, i)
        if pivot == 0:
            raise ZeroDivisionError("triangular matrix is singular")
        solved[i] = acc / pivot
    for i, value in enumerate(solved):
        x[i] = value


def gemv(trans: Transpose, alpha, a: Matrix, x: Sequence, beta, y: MutableSequence) -> None:
    """General multiply with vector: ``y = alpha * op(A) x + beta * y``."""
    _general_mv(
        a.rows, a.cols, lambda i, j: a.data[_dense_index(a, i, j)], trans, alpha, x, beta, y
    )


def symv(symmetry: Symmetry, alpha, a: Matrix, x: Sequence, beta, y: MutableSequence) -> None:
    """Symmetric multiply with vector, reading only one triangle of ``a``."""
    entry = _symmetric(a.data, _dense_triangle(a, symmetry), hermitian=False)
    _square_mv(a.rows, entry, alpha, x, beta, y)


def hemv(symmetry: Symmetry, alpha, a: Matrix, x: Sequence, beta, y: MutableSequence) -> None:
    """Hermitian multiply with vector, reading only one triangle of ``a``."""
    entry = _symmetric(a.data, _dense_triangle(a, symmetry), hermitian=True)
    _square_mv(a.rows, entry, alpha, x, beta, y)


def ger(alpha, x: Sequence, y: Sequence, a: Matrix) -> None:
    """General rank-1 update: ``A = A + alpha * x y^T``."""
    xs = _take(x, a.rows, "x")
    ys = _take(y, a.cols, "y")
    for i, xi in enumerate(xs):
        for j, yj in enumerate(ys):
            idx = _dense_index(a, i, j)
            a.data[idx] = a.data[idx] + alpha * xi * yj


def gerc(alpha, x: Sequence, y: Sequence, a: Matrix) -> None:
    """General rank-1 update with conjugation: ``A = A + alpha * x y^H``."""
    ger(alpha, x, [v.conjugate() for v in _take(y, a.cols, "y")], a)


def syr(symmetry: Symmetry, alpha, x: Sequence, a: Matrix) -> None:
    """Symmetric rank-1 update of one triangle: ``A = A + alpha * x x^T``."""
    xs = _take(x, a.rows, "x")
    _rank_update(
        a.rows, a.data, _dense_triangle(a, symmetry),
        lambda i, j: alpha * xs[i] * xs[j], hermitian=False,
    )


def her(symmetry: Symmetry, alpha, x: Sequence, a: Matrix) -> None:
    """Hermitian rank-1 update of one triangle: ``A = A + alpha * x x^H``."""
    xs = _take(x, a.rows, "x")
    _rank_update(
        a.rows, a.data, _dense_triangle(a, symmetry),
        lambda i, j: alpha * xs[i] * xs[j].conjugate(), hermitian=True,
    )


def syr2(symmetry: Symmetry, alpha, x: Sequence, y: Sequence, a: Matrix) -> None:
    """Symmetric rank-2 update: ``A = A + alpha * x y^T + alpha * y x^T``."""
    xs = _take(x, a.rows, "x")
    ys = _take(y, a.rows, "y")
    _rank_update(
        a.rows, a.data, _dense_triangle(a, symmetry),
        lambda i, j: alpha * (xs[i] * ys[j] + ys[i] * xs[j]), hermitian=False,
    )


def her2(symmetry: Symmetry, alpha, x: Sequence, y: Sequence, a: Matrix) -> None:
    """Hermitian rank-2 update: ``A = A + alpha * x y^H + conj(alpha) * y x^H``."""
    xs = _take(x, a.rows, "x")
    ys = _take(y, a.rows, "y")
    alpha_c = alpha.conjugate()
    _rank_update(
        a.rows, a.data, _dense_triangle(a, symmetry),
        lambda i, j: alpha * xs[i] * ys[j].conjugate() + alpha_c * ys[i] * xs[j].conjugate(),
        hermitian=True,
    )


def _band_entry(a: BandMatrix):
    kl, ku, lda = a.sub_diagonals, a.sup_diagonals, a.lead_dim()
    row_major = _row_major(a)

    def entry(i: int, j: int):
        if not i - kl <= j <= i + ku:
            return 0
        idx = i * lda + kl + j - i if row_major else j * lda + ku + i - j
        return a.data[idx]

    return entry


def gbmv(trans: Transpose, alpha, a: BandMatrix, x: Sequence, beta, y: MutableSequence) -> None:
    """General band matrix multiply with vector: ``y = alpha * op(A) x + beta * y``."""
    _general_mv(a.rows, a.cols, _band_entry(a), trans, alpha, x, beta, y)


def sbmv(symmetry: Symmetry, alpha, a: BandMatrix, x: Sequence, beta, y: MutableSequence) -> None:
    """Symmetric band multiply with vector; ``a.sub_diagonals`` is the band width."""
    entry = _symmetric(a.data, _band_triangle(a, symmetry), hermitian=False)
    _square_mv(a.rows, entry, alpha, x, beta, y)


def hbmv(symmetry: Symmetry, alpha, a: BandMatrix, x: Sequence, beta, y: MutableSequence) -> None:
    """Hermitian band multiply with vector; ``a.sub_diagonals`` is the band width."""
    entry = _symmetric(a.data, _band_triangle(a, symmetry), hermitian=True)
    _square_mv(a.rows, entry, alpha, x, beta, y)


def tbmv(symmetry: Symmetry, trans: Transpose, diagonal: Diagonal,
         a: BandMatrix, x: MutableSequence) -> None:
    """Triangular band multiply with vector: ``x = op(A) x``."""
    stored = _stored(a.data, _band_triangle(a, symmetry))
    _triangular_apply(a.rows, stored, symmetry, trans, diagonal, x)


def tbsv(symmetry: Symmetry, trans: Transpose, diagonal: Diagonal,
         a: BandMatrix, x: MutableSequence) -> None:
    """Solve a triangular band system: ``x = op(A)^-1 x``."""
    stored = _stored(a.data, _band_triangle(a, symmetry))
    _triangular_solve(a.rows, stored, symmetry, trans, diagonal, x)


def spmv(symmetry: Symmetry, alpha, a: Matrix, x: Sequence, beta, y: MutableSequence) -> None:
    """Symmetric packed multiply with vector."""
    entry = _symmetric(a.data, _packed_triangle(a, symmetry), hermitian=False)
    _square_mv(a.rows, entry, alpha, x, beta, y)


def hpmv(symmetry: Symmetry, alpha, a: Matrix, x: Sequence, beta, y: MutableSequence) -> None:
    """Hermitian packed multiply with vector."""
    entry = _symmetric(a.data, _packed_triangle(a, symmetry), hermitian=True)
    _square_mv(a.rows, entry, alpha, x, beta, y)


def tpmv(symmetry: Symmetry, trans: Transpose, diagonal: Diagonal,
         a: Matrix, x: MutableSequence) -> None:
    """Triangular packed multiply with vector: ``x = op(A) x``."""
    stored = _stored(a.data, _packed_triangle(a, symmetry))
    _triangular_apply(a.rows, stored, symmetry, trans, diagonal, x)


def tpsv(symmetry: Symmetry, trans: Transpose, diagonal: Diagonal,
         a: Matrix, x: MutableSequence) -> None:
    """Solve a triangular packed system: ``x = op(A)^-1 x``."""
    stored = _stored(a.data, _packed_triangle(a, symmetry))
    _triangular_solve(a.rows, stored, symmetry, trans, diagonal, x)


def spr(symmetry: Symmetry, alpha, x: Sequence, a: Matrix) -> None:
    """Symmetric packed rank-1 update: ``A = A + alpha * x x^T``."""
    xs = _take(x, a.rows, "x")
    _rank_update(
        a.rows, a.data, _packed_triangle(a, symmetry),
        lambda i, j: alpha * xs[i] * xs[j], hermitian=False,
    )


def hpr(symmetry: Symmetry, alpha, x: Sequence, a: Matrix) -> None:
    """Hermitian packed rank-1 update: ``A = A + alpha * x x^H``."""
    xs = _take(x, a.rows, "x")
    _rank_update(
        a.rows, a.data, _packed_triangle(a, symmetry),
        lambda i, j: alpha * xs[i] * xs[j].conjugate(), hermitian=True,
    )


def spr2(symmetry: Symmetry, alpha, x: Sequence, y: Sequence, a: Matrix) -> None:
    """Symmetric packed rank-2 update: ``A = A + alpha * x y^T + alpha * y x^T``."""
    xs = _take(x, a.rows, "x")
    ys = _take(y, a.rows, "y")
    _rank_update(
        a.rows, a.data, _packed_triangle(a, symmetry),
        lambda i, j: alpha * (xs[i] * ys[j] + ys[i] * xs[j]), hermitian=False,
    )


def hpr2(symmetry: Symmetry, alpha, x: Sequence, y: Sequence, a: Matrix) -> None:
    """Hermitian packed rank-2 update: ``A = A + alpha * x y^H + conj(alpha) * y x^H``."""
    xs = _take(x, a.rows, "x")
    ys = _take(y, a.rows, "y")
    alpha_c = alpha.conjugate()
    _rank_update(
        a.rows, a.data, _packed_triangle(a, symmetry),
        lambda i, j: alpha * xs[i] * ys[j].conjugate() + alpha_c * ys[i] * xs[j].conjugate(),
        hermitian=True,
    )