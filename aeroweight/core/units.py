"""
Unit conversion helpers.

Parameter tables are in imperial units (lb, ft) with angles in degrees;
formulas work in radians. Reports may be converted to kg. All
conversions are explicit.
"""

import math


class UnitConversionError(Exception):
    """Raised when a unit conversion is not supported."""
    pass


# Conversion factors: (from_unit, to_unit) -> multiplier
# value_in_to_unit = value_in_from_unit * multiplier
UNIT_CONVERSIONS = {
    # Mass
    ("kg", "lb"): 2.20462,
    ("lb", "kg"): 0.453592,

    # Length
    ("ft", "in"): 12.0,
    ("in", "ft"): 1/12.0,
}


class UnitConverter:
    """
    Deterministic unit converter.

    All conversions use explicit factors. No implicit conversions.
    """

    @staticmethod
    def normalize(value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert value from one unit to another.

        Raises:
            UnitConversionError: If conversion not supported
        """
        if from_unit == to_unit:
            return value

        key = (from_unit.strip().lower(), to_unit.strip().lower())
        if key not in UNIT_CONVERSIONS:
            raise UnitConversionError(
                f"Unknown conversion: {from_unit} -> {to_unit}. "
                f"Supported conversions: {list(UNIT_CONVERSIONS.keys())}"
            )

        return value * UNIT_CONVERSIONS[key]


def deg_to_rad(deg: float) -> float:
    return math.radians(deg)


def in_to_ft(inches: float) -> float:
    return UnitConverter.normalize(inches, "in", "ft")

