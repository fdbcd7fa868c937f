"""Tests for scalar identities and the float32 default."""

from fractions import Fraction

import numpy as np
import pytest

from lamar import Vec3, scalar
from lamar.scalar import resolve_scalar_type, zero_of


class TestIdentities:
    def test_default_scalar_is_float32(self) -> None:
        assert resolve_scalar_type() is np.float32

    def test_explicit_scalar_type_wins(self) -> None:
        assert resolve_scalar_type(int) is int

    def test_zero_of_default(self) -> None:
        zero = zero_of()
        assert zero == 0.0
        assert isinstance(zero, np.float32)

    @pytest.mark.parametrize("scalar_type", [int, float, Fraction, np.int32, np.float64])
    def test_zero_for_scalar_types(self, scalar_type) -> None:
        assert zero_of(scalar_type) == 0
        assert type(zero_of(scalar_type)) is scalar_type

    def test_no_module_level_default_to_rebind(self) -> None:
        assert not hasattr(scalar, "DEFAULT_SCALAR")

    def test_zero_vector_always_float32(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(scalar, "DEFAULT_SCALAR", int, raising=False)
        z = Vec3.zero()
        assert all(isinstance(c, np.float32) for c in z)
        assert z == Vec3(0.0, 0.0, 0.0)
