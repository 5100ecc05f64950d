"""Enumerations describing how BLAS routines interpret their operands."""

from enum import IntEnum


class Order(IntEnum):
    """Memory layout of a matrix."""

    ROW_MAJOR = 101
    COL_MAJOR = 102


class Transpose(IntEnum):
    """Operation applied to a matrix operand before use."""

    NO_TRANS = 111
    TRANS = 112
    CONJ_TRANS = 113


class Symmetry(IntEnum):
    """Which triangle of a symmetric or Hermitian matrix is referenced."""

    UPPER = 121
    LOWER = 122


class Diagonal(IntEnum):
    """Whether a triangular matrix has an implicit unit diagonal."""

    NON_UNIT = 131
    UNIT = 132


class Side(IntEnum):
    """Side on which a special matrix multiplies another matrix."""

    LEFT = 141
    RIGHT = 142