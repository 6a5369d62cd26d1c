"""Matrix-vector products and text formatting of complex values."""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence

__all__ = ["matvec_mul", "format_complex", "format_vector"]


def matvec_mul(
    matrix: Sequence[Sequence[complex]], vector: Sequence[complex]
) -> list[complex]:
    """Multiply a square matrix, given as rows, by a column vector."""
    dim = len(vector)
    if len(matrix) != dim:
        raise ValueError(f"matrix has {len(matrix)} rows, vector has {dim} entries")
    result = []
    for row in matrix:
        if len(row) != dim:
            raise ValueError(f"matrix row has {len(row)} entries, expected {dim}")
        result.append(sum((a * b for a, b in zip(row, vector)), 0j))
    return result


def _single_abs(value: float) -> float:
    """Absolute value after rounding to single precision."""
    try:
        (single,) = struct.unpack("f", struct.pack("f", value))
    except OverflowError:
        single = math.copysign(math.inf, value)
    return abs(single)


def _g(value: float) -> str:
    return "%.10g" % value


def format_complex(value: complex) -> str:
    """Render a complex number as ``0``, ``a``, ``ib``, ``-ib`` or ``a+ib``."""
    value = complex(value)
    re_part, im_part = value.real, value.imag

    if re_part == 0.0 and im_part == 0.0:
        return "0"
    if re_part != 0.0 and im_part == 0.0:
        return _g(re_part)

    magnitude = _single_abs(im_part)
    coefficient = "" if magnitude == 1.0 else _g(magnitude)
    if re_part == 0.0:
        prefix = "i" if im_part >= 0.0 else "-i"
        return prefix + coefficient
    separator = "+" if im_part >= 0.0 else "-"
    return f"{_g(re_part)}{separator}i{coefficient}"


def format_vector(values: Sequence[complex]) -> str:
    """Render a vector as ``[c0, c1, ...]``."""
    return "[" + ", ".join(format_complex(v) for v in values) + "]"