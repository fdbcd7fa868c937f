"""
lamar: a small generic 3D vector value type.

This package provides:
- Vec3: immutable 3D vector over any numeric scalar
- Scalar: the arithmetic a component type must support
- zero_of: additive identity for a scalar type
"""

from .scalar import Scalar, zero_of
from .vector import Vec3

__all__ = [
    "Vec3",
    "Scalar",
    "zero_of",
]
