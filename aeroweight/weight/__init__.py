"""
Weight & Balance Estimation Framework

Class II component weight estimation with moment-method CG aggregation.
Leaf estimators live in estimators/; assemblies group them into the
aircraft tree; loading adds useful load for loading conditions.
"""

from .items import (
    WeightGroup,
    ComponentEstimate,
    GroupSummary,
    GROUP_NAMES,
)

from .components import (
    Component,
    LeafComponent,
    PointMassComponent,
    WeightPolicy,
    DEFAULT_POLICY,
)

from .formulas import Formula, DENOMINATOR_EPSILON

from .assemblies import (
    Assembly,
    build_wings,
    build_fuselage,
    build_landing_gear,
    build_systems,
    build_tailplane,
)

from .aggregator import Aircraft, WeightBalanceSummary

from .loading import (
    LoadCase,
    UsefulLoadItem,
    Pilots,
    Crew,
    Passengers,
    Payload,
    Fuel,
    LoadingCondition,
    LoadedAircraft,
)

from .utils import determinize_dict, moment_center

__all__ = [
    # Items
    "WeightGroup",
    "ComponentEstimate",
    "GroupSummary",
    "GROUP_NAMES",
    # Contract
    "Component",
    "LeafComponent",
    "PointMassComponent",
    "WeightPolicy",
    "DEFAULT_POLICY",
    "Formula",
    "DENOMINATOR_EPSILON",
    # Assemblies
    "Assembly",
    "build_wings",
    "build_fuselage",
    "build_landing_gear",
    "build_systems",
    "build_tailplane",
    # Aggregator
    "Aircraft",
    "WeightBalanceSummary",
    # Loading
    "LoadCase",
    "UsefulLoadItem",
    "Pilots",
    "Crew",
    "Passengers",
    "Payload",
    "Fuel",
    "LoadingCondition",
    "LoadedAircraft",
    # Utils
    "determinize_dict",
    "moment_center",
]
