"""
aeroweight - Aircraft class II weight & balance estimation

Estimates empty weight and center of gravity from a table of named design
parameters using empirical component weight equations, aggregated with the
moment method.
"""

__version__ = "1.0.0"

from aeroweight.core import Point, Result, ParameterSet, load_parameters
from aeroweight.weight import Aircraft, WeightBalanceSummary, WeightPolicy

__all__ = [
    "__version__",
    "Point",
    "Result",
    "ParameterSet",
    "load_parameters",
    "Aircraft",
    "WeightBalanceSummary",
    "WeightPolicy",
]
