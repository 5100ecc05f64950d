"""Level-3 BLAS operations: matrix-matrix products, solves and rank-k updates.

All operands are dense :class:`~tinkerworks.matrix.Matrix` objects; each one
is read in its own storage order. Results are written into ``c`` (or ``b``
for the triangular routines) in place. A ``beta`` of zero overwrites the
output without reading it, as BLAS does.
"""

from __future__ import annotations

from itertools import product
from typing import Callable, Iterable, List, Tuple

from .attribute import Diagonal, Order, Side, Symmetry, Transpose
from .matrix import Matrix

_Entry = Callable[[int, int], object]


def _index(a: Matrix, i: int, j: int) -> int:
    if a.order == Order.ROW_MAJOR:
        return i * a.lead_dim() + j
    return j * a.lead_dim() + i


def _getter(a: Matrix) -> _Entry:
    return lambda i, j: a.data[_index(a, i, j)]


def _op(a: Matrix, trans: Transpose) -> Tuple[int, int, _Entry]:
    """Shape and element accessor of ``op(a)``."""
    get = _getter(a)
    if trans == Transpose.NO_TRANS:
        return a.rows, a.cols, get
    if trans == Transpose.TRANS:
        return a.cols, a.rows, lambda i, j: get(j, i)
    return a.cols, a.rows, lambda i, j: get(j, i).conjugate()


def _scaled(beta, value):
    return 0 if beta == 0 else beta * value


def _require_shape(a: Matrix, rows: int, cols: int, name: str) -> None:
    if a.rows != rows or a.cols != cols:
        raise ValueError(
            f"dimension mismatch: {name} is {a.rows}x{a.cols}, expected {rows}x{cols}"
        )


def _require_square(a: Matrix, name: str) -> None:
    if a.rows != a.cols:
        raise ValueError(f"{name} must be square, got {a.rows}x{a.cols}")


def _assign(
    c: Matrix,
    cells: Iterable[Tuple[int, int]],
    value: _Entry,
    alpha,
    beta,
    hermitian: bool = False,
) -> None:
    updates = []
    for i, j in cells:
        idx = _index(c, i, j)
        result = alpha * value(i, j) + _scaled(beta, c.data[idx])
        if hermitian and i == j and isinstance(result, complex):
            result = complex(result.real, 0.0)
        updates.append((idx, result))
    for idx, result in updates:
        c.data[idx] = result


def _triangle_cells(n: int, symmetry: Symmetry) -> List[Tuple[int, int]]:
    upper = symmetry == Symmetry.UPPER
    return [(i, j) for i, j in product(range(n), repeat=2) if (i <= j if upper else i >= j)]


def _symmetric(a: Matrix, symmetry: Symmetry, hermitian: bool) -> _Entry:
    get = _getter(a)
    upper = symmetry == Symmetry.UPPER

    def entry(i: int, j: int):
        if (i <= j) if upper else (i >= j):
            value = get(i, j)
            return value.real if hermitian and i == j else value
        value = get(j, i)
        return value.conjugate() if hermitian else value

    return entry


def _triangular(a: Matrix, symmetry: Symmetry, trans: Transpose, diag: Diagonal):
    """Accessor of ``op(A)`` for a triangular ``A`` and whether it is lower."""
    get = _getter(a)
    upper = symmetry == Symmetry.UPPER
    unit = diag == Diagonal.UNIT

    def stored(i: int, j: int):
        inside = i <= j if upper else i >= j
        return get(i, j) if inside else 0

    def entry(i: int, j: int):
        if unit and i == j:
            return 1
        if trans == Transpose.NO_TRANS:
            return stored(i, j)
        value = stored(j, i)
        return value.conjugate() if trans == Transpose.CONJ_TRANS else value

    lower = (symmetry == Symmetry.LOWER) == (trans == Transpose.NO_TRANS)
    return entry, lower


def _solve(n: int, entry: _Entry, lower: bool, rhs: list) -> list:
    solved = [0] * n
    for i in range(n) if lower else reversed(range(n)):
        known = range(i) if lower else range(i + 1, n)
        acc = rhs[i] - sum((entry(i, j) * solved[j] for j in known), 0)
        pivot = entry(i, i)
        if pivot == 0:
            raise ZeroDivisionError("triangular matrix is singular")
        solved[i] = acc / pivot
    return solved


def gemm(alpha, at: Transpose, a: Matrix, bt: Transpose, b: Matrix, beta, c: Matrix) -> None:
    """General multiply: ``C = alpha * op(A) op(B) + beta * C``."""
    m, k, op_a = _op(a, at)
    kb, n, op_b = _op(b, bt)
    if k != kb:
        raise ValueError(f"dimension mismatch: op(a) has {k} columns, op(b) has {kb} rows")
    _require_shape(c, m, n, "c")
    _assign(
        c,
        product(range(m), range(n)),
        lambda i, j: sum((op_a(i, l) * op_b(l, j) for l in range(k)), 0),
        alpha,
        beta,
    )


def _symm_like(side, symmetry, alpha, a, b, beta, c, hermitian) -> None:
    _require_square(a, "a")
    m, n = b.rows, b.cols
    _require_shape(c, m, n, "c")
    s = _symmetric(a, symmetry, hermitian)
    get_b = _getter(b)
    if side == Side.LEFT:
        _require_shape(a, m, m, "a")
        value = lambda i, j: sum((s(i, l) * get_b(l, j) for l in range(m)), 0)  # noqa: E731
    else:
        _require_shape(a, n, n, "a")
        value = lambda i, j: sum((get_b(i, l) * s(l, j) for l in range(n)), 0)  # noqa: E731
    _assign(c, product(range(m), range(n)), value, alpha, beta)


def symm(side: Side, symmetry: Symmetry, alpha, a: Matrix, b: Matrix, beta, c: Matrix) -> None:
    """Symmetric multiply: ``C = alpha * A B + beta * C`` (left) or ``alpha * B A`` (right)."""
    _symm_like(side, symmetry, alpha, a, b, beta, c, hermitian=False)


def hemm(side: Side, symmetry: Symmetry, alpha, a: Matrix, b: Matrix, beta, c: Matrix) -> None:
    """Hermitian multiply: ``C = alpha * A B + beta * C`` (left) or ``alpha * B A`` (right)."""
    _symm_like(side, symmetry, alpha, a, b, beta, c, hermitian=True)


def trmm(side: Side, symmetry: Symmetry, trans: Transpose, diag: Diagonal,
         alpha, a: Matrix, b: Matrix) -> None:
    """Triangular multiply: ``B = alpha * op(A) B`` (left) or ``alpha * B op(A)`` (right)."""
    _require_square(a, "a")
    m, n = b.rows, b.cols
    entry, _ = _triangular(a, symmetry, trans, diag)
    get_b = _getter(b)
    if side == Side.LEFT:
        _require_shape(a, m, m, "a")
        value = lambda i, j: sum((entry(i, l) * get_b(l, j) for l in range(m)), 0)  # noqa: E731
    else:
        _require_shape(a, n, n, "a")
        value = lambda i, j: sum((get_b(i, l) * entry(l, j) for l in range(n)), 0)  # noqa: E731
    _assign(b, product(range(m), range(n)), value, alpha, 0)


def trsm(side: Side, symmetry: Symmetry, trans: Transpose, diag: Diagonal,
         alpha, a: Matrix, b: Matrix) -> None:
    """Triangular solve: ``op(A) X = alpha * B`` (left) or ``X op(A) = alpha * B`` (right).

    The solution ``X`` overwrites ``B``.
    """
    _require_square(a, "a")
    m, n = b.rows, b.cols
    entry, lower = _triangular(a, symmetry, trans, diag)
    get_b = _getter(b)
    if side == Side.LEFT:
        _require_shape(a, m, m, "a")
        for j in range(n):
            column = _solve(m, entry, lower, [alpha * get_b(i, j) for i in range(m)])
            for i, value in enumerate(column):
                b.data[_index(b, i, j)] = value
    else:
        _require_shape(a, n, n, "a")
        transposed = lambda i, j: entry(j, i)  # noqa: E731
        for i in range(m):
            row = _solve(n, transposed, not lower, [alpha * get_b(i, j) for j in range(n)])
            for j, value in enumerate(row):
                b.data[_index(b, i, j)] = value


def herk(symmetry: Symmetry, trans: Transpose, alpha, a: Matrix, beta, c: Matrix) -> None:
    """Hermitian rank-k update of one triangle: ``C = alpha * op(A) op(A)^H + beta * C``."""
    if trans == Transpose.TRANS:
        raise ValueError("herk takes NO_TRANS or CONJ_TRANS")
    n, k, op_a = _op(a, trans)
    _require_shape(c, n, n, "c")
    _assign(
        c,
        _triangle_cells(n, symmetry),
        lambda i, j: sum((op_a(i, l) * op_a(j, l).conjugate() for l in range(k)), 0),
        alpha,
        beta,
        hermitian=True,
    )


def her2k(symmetry: Symmetry, trans: Transpose, alpha, a: Matrix, b: Matrix, beta, c: Matrix) -> None:
    """Hermitian rank-2k update of one triangle.

    ``C = alpha * op(A) op(B)^H + conj(alpha) * op(B) op(A)^H + beta * C``.
    """
    if trans == Transpose.TRANS:
        raise ValueError("her2k takes NO_TRANS or CONJ_TRANS")
    _require_shape(b, a.rows, a.cols, "b")
    n, k, op_a = _op(a, trans)
    _, _, op_b = _op(b, trans)
    _require_shape(c, n, n, "c")
    alpha_c = alpha.conjugate()

    def value(i: int, j: int):
        return sum(
            (
                alpha * op_a(i, l) * op_b(j, l).conjugate()
                + alpha_c * op_b(i, l) * op_a(j, l).conjugate()
                for l in range(k)
            ),
            0,
        )

    _assign(c, _triangle_cells(n, symmetry), value, 1, beta, hermitian=True)


def _plain(trans: Transpose) -> Transpose:
    return Transpose.NO_TRANS if trans == Transpose.NO_TRANS else Transpose.TRANS


def syrk(symmetry: Symmetry, trans: Transpose, alpha, a: Matrix, beta, c: Matrix) -> None:
    """Symmetric rank-k update of one triangle: ``C = alpha * op(A) op(A)^T + beta * C``."""
    n, k, op_a = _op(a, _plain(trans))
    _require_shape(c, n, n, "c")
    _assign(
        c,
        _triangle_cells(n, symmetry),
        lambda i, j: sum((op_a(i, l) * op_a(j, l) for l in range(k)), 0),
        alpha,
        beta,
    )


def syr2k(symmetry: Symmetry, trans: Transpose, alpha, a: Matrix, b: Matrix, beta, c: Matrix) -> None:
    """Symmetric rank-2k update: ``C = alpha * (op(A) op(B)^T + op(B) op(A)^T) + beta * C``."""
    _require_shape(b, a.rows, a.cols, "b")
    n, k, op_a = _op(a, _plain(trans))
    _, _, op_b = _op(b, _plain(trans))
    _require_shape(c, n, n, "c")
    _assign(
        c,
        _triangle_cells(n, symmetry),
        lambda i, j: sum((op_a(i, l) * op_b(j, l) + op_b(i, l) * op_a(j, l) for l in range(k)), 0),
        alpha,
        beta,
    )