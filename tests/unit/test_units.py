"""
Unit tests for unit conversion helpers.
"""

import math
import pytest
from aeroweight.core.units import (
    UnitConverter,
    UnitConversionError,
    deg_to_rad,
    in_to_ft,
)


class TestUnitConverter:
    """Tests for UnitConverter."""

    def test_same_unit(self):
        assert UnitConverter.normalize(12.0, "lb", "lb") == 12.0

    def test_mass(self):
        assert UnitConverter.normalize(1000.0, "lb", "kg") == pytest.approx(453.592)
        assert UnitConverter.normalize(1.0, "kg", "lb") == pytest.approx(2.20462)

    def test_case_insensitive(self):
        assert UnitConverter.normalize(12.0, "IN", "Ft") == pytest.approx(1.0)

    def test_unknown_conversion(self):
        with pytest.raises(UnitConversionError, match="Unknown conversion"):
            UnitConverter.normalize(1.0, "lb", "ft")


class TestHelpers:
    """Tests for conversion shortcuts."""

    def test_deg_to_rad(self):
        assert deg_to_rad(90.0) == pytest.approx(math.pi / 2)
        assert deg_to_rad(30.0) == math.radians(30.0)
        assert deg_to_rad(0.0) == 0.0

    def test_in_to_ft(self):
        assert in_to_ft(36.0) == pytest.approx(3.0)
        assert in_to_ft(32.0) * 15 == pytest.approx(40.0)
