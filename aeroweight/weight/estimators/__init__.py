"""
estimators/ - Leaf component weight & balance estimators

One frozen dataclass per physical subsystem, each implementing the
Component contract with a class II empirical formula.
"""

from .wings import (
    WingStructure,
    Nacelle,
    EngineControls,
    PneumaticStarter,
    FuelSystem,
)
from .fuselage import FuselageStructure
from .landing_gear import MainLandingGear, NoseLandingGear
from .systems import (
    Hydraulics,
    Furnishings,
    AirConditioning,
    Electrical,
    Instruments,
    Avionics,
    FlightControls,
    InstalledAPU,
    AntiIcing,
    HandlingGear,
)
from .tailplane import HorizontalTailplane, VerticalTailplane

__all__ = [
    # Wing group
    "WingStructure",
    "Nacelle",
    "EngineControls",
    "PneumaticStarter",
    "FuelSystem",
    # Fuselage group
    "FuselageStructure",
    "MainLandingGear",
    "NoseLandingGear",
    "Hydraulics",
    "Furnishings",
    "AirConditioning",
    "Electrical",
    "Instruments",
    "Avionics",
    "FlightControls",
    "InstalledAPU",
    "AntiIcing",
    "HandlingGear",
    # Empennage
    "HorizontalTailplane",
    "VerticalTailplane",
]
