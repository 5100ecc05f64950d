"""Dense and band matrix containers used by the BLAS-style routines."""

from __future__ import annotations

from dataclasses import dataclass

from .attribute import Order


@dataclass
class Matrix:
    """A matrix stored as one flat list in the given order."""

    rows: int
    cols: int
    data: list
    order: Order = Order.ROW_MAJOR

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError(
                f"matrix dimensions must be non-negative, got {self.rows}x{self.cols}"
            )
        if not isinstance(self.data, list):
            self.data = list(self.data)
        expected = self._storage_size()
        if len(self.data) != expected:
            raise ValueError(
                f"matrix storage holds {len(self.data)} elements, expected {expected}"
            )

    def _storage_size(self) -> int:
        return self.rows * self.cols

    def lead_dim(self) -> int:
        """Leading dimension: columns for row-major, rows for column-major."""
        if self.order is Order.ROW_MAJOR:
            return self.cols
        return self.rows


@dataclass
class BandMatrix(Matrix):
    """A band matrix in packed band storage.

    Each stored row (row-major) or column (column-major) holds
    ``sub_diagonals + sup_diagonals + 1`` elements.
    """

    sub_diagonals: int = 0
    sup_diagonals: int = 0

    def __post_init__(self) -> None:
        if self.sub_diagonals < 0 or self.sup_diagonals < 0:
            raise ValueError("band widths must be non-negative")
        super().__post_init__()

    def _storage_size(self) -> int:
        major = self.rows if self.order is Order.ROW_MAJOR else self.cols
        return major * self.lead_dim()

    def lead_dim(self) -> int:
        """Width of one stored band line."""
        return self.sub_diagonals + self.sup_diagonals + 1