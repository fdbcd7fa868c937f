"""
3D Vector Math - Generic Over the Scalar

A Vec3 is three numbers of the same kind:
- Position: where is it? (x, y, z)
- Direction: which way is it pointing?
- Any other triple you want to add, scale and cross

The component type is up to the caller. Integers give exact results,
float32 keeps memory low, Fraction never rounds. Every operation simply
uses the scalar's own arithmetic, so overflow, rounding and division by
zero behave exactly like they do for the scalar itself.

The one exception is integer division: int / int truncates toward zero,
so an integer vector divided by an integer stays an exact integer vector.

Watch out: vector * vector is the CROSS product, not a componentwise
product and not the dot product. Use dot() for the scalar product.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, Sequence, Union
import logging
import numbers
import numpy as np

from .scalar import T, ScalarType, zero_of

logger = logging.getLogger(__name__)


def _divide(value: Any, scalar: Any) -> Any:
    """Scalar division, truncating toward zero when both sides are integers."""
    if isinstance(value, numbers.Integral) and isinstance(scalar, numbers.Integral):
        quotient = value // scalar
        # floor division rounds negative quotients down, step back toward zero
        if quotient < 0 and quotient * scalar != value:
            quotient += 1
        return quotient
    return value / scalar


@dataclass(frozen=True, eq=False)
class Vec3(Generic[T]):
    """
    A 3D vector. Immutable: every operation returns a new Vec3.

    Operators:
    - v + w, v - w: componentwise
    - v + s, v - s, v * s, s * v, v / s, v // s: the scalar applied to each component
    - v * w: cross product (same as v.cross(w))
    - -v: componentwise negation

    Anything that is not a Vec3 is treated as a scalar; if the component
    type can't combine with it, its own TypeError comes through.

    Equality is exact and componentwise, no tolerance.
    """
    x: T
    y: T
    z: T

    # Makes numpy scalars return NotImplemented, so np.float32(2) * v reaches __rmul__
    __array_ufunc__ = None

    @classmethod
    def zero(cls, scalar_type: Optional[ScalarType] = None) -> "Vec3":
        """Origin. float32 components unless another scalar type is given."""
        zero = zero_of(scalar_type)
        return cls(zero, zero, zero)

    @classmethod
    def from_array(cls, arr: Union[np.ndarray, Sequence[Any]]) -> "Vec3":
        """Create from a numpy array or sequence of exactly three elements."""
        shape = np.shape(arr)
        if shape != (3,):
            logger.error(f"Cannot build Vec3 from input of shape {shape}")
            raise ValueError(f"expected shape (3,), got {shape}")
        x, y, z = arr
        return cls(x, y, z)

    def to_array(self, dtype: Any = None) -> np.ndarray:
        """Convert to a new numpy array [x, y, z]."""
        return np.array([self.x, self.y, self.z], dtype=dtype)

    def dot(self, other: Vec3[T]) -> T:
        """Dot product: x*x' + y*y' + z*z'."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3[T]) -> Vec3[T]:
        """
        Cross product: a vector perpendicular to both inputs.

        Anticommutative, a.cross(b) == -b.cross(a).
        """
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __add__(self, other: Union[Vec3[T], T]) -> Vec3[T]:
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return Vec3(self.x + other, self.y + other, self.z + other)

    def __sub__(self, other: Union[Vec3[T], T]) -> Vec3[T]:
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return Vec3(self.x - other, self.y - other, self.z - other)

    def __mul__(self, other: Union[Vec3[T], T]) -> Vec3[T]:
        if isinstance(other, Vec3):
            return self.cross(other)
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: T) -> Vec3[T]:
        return Vec3(other * self.x, other * self.y, other * self.z)

    def __truediv__(self, scalar: T) -> Vec3[T]:
        # No zero check: the scalar type decides what x / 0 means
        if isinstance(scalar, Vec3):
            return NotImplemented
        return Vec3(
            _divide(self.x, scalar),
            _divide(self.y, scalar),
            _divide(self.z, scalar)
        )

    def __floordiv__(self, scalar: T) -> Vec3[T]:
        if isinstance(scalar, Vec3):
            return NotImplemented
        return Vec3(self.x // scalar, self.y // scalar, self.z // scalar)

    def __neg__(self) -> Vec3[T]:
        return Vec3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"x: {self.x}\ny: {self.y}\nz: {self.z}"
