"""
Core value types: points, results, units and the parameter source.
"""

from .point import Point
from .result import Result
from .parameters import ParameterRecord, ParameterSet, load_parameters, parse_parameter_file
from .units import UnitConverter, UnitConversionError, deg_to_rad, in_to_ft

__all__ = [
    "Point",
    "Result",
    "ParameterRecord",
    "ParameterSet",
    "load_parameters",
    "parse_parameter_file",
    "UnitConverter",
    "UnitConversionError",
    "deg_to_rad",
    "in_to_ft",
]
