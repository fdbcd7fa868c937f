"""
Scalars - What a Vector Is Made Of

A Vec3 does not care what kind of number it holds. Anything that can be
added, subtracted, multiplied, divided and negated will do:

- Python: int, float, Fraction, Decimal
- NumPy: float32, float64, int32, int64, ...

The only thing we need beyond the arithmetic is a way to spell the
additive identity for a given scalar type. Every numeric type above
can be built from a plain int, so scalar_type(0) works.
"""

from __future__ import annotations
from typing import Any, Callable, Optional, Protocol, TypeVar
import numpy as np


class Scalar(Protocol):
    """Arithmetic a component type must support. Checked statically only."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...


T = TypeVar("T", bound=Scalar)

ScalarType = Callable[[int], Any]


def resolve_scalar_type(scalar_type: Optional[ScalarType] = None) -> ScalarType:
    """Return scalar_type, or 32-bit float when none is given."""
    if scalar_type is None:
        return np.float32
    return scalar_type


def zero_of(scalar_type: Optional[ScalarType] = None) -> Any:
    """Additive identity of scalar_type."""
    return resolve_scalar_type(scalar_type)(0)
