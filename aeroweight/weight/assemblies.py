"""
Component assemblies

An Assembly is a named group of components (leaves or other assemblies)
that is itself a Component:

    weight = sum of child weights
    cg     = sum(child weight * child cg) / weight

Failures short-circuit on the first failing child, in child order, and the
assembly name is prepended to the failure path, so an absent wing parameter
is reported as "aircraft/wings/wing_structure".

The fixed aircraft tree is built by the build_* functions below.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from aeroweight.core.parameters import ParameterSet
from aeroweight.core.point import Point
from aeroweight.core.result import Result
from .components import Component, LeafComponent, WeightPolicy
from .estimators import (
    AirConditioning,
    AntiIcing,
    Avionics,
    Electrical,
    EngineControls,
    FlightControls,
    FuelSystem,
    Furnishings,
    FuselageStructure,
    HandlingGear,
    HorizontalTailplane,
    Hydraulics,
    InstalledAPU,
    Instruments,
    MainLandingGear,
    Nacelle,
    NoseLandingGear,
    PneumaticStarter,
    VerticalTailplane,
    WingStructure,
)
from .items import ComponentEstimate
from .utils import moment_center


@dataclass(frozen=True)
class Assembly(Component):
    """Generic composite of components."""

    label: str
    children: Tuple[Component, ...]

    @property
    def name(self) -> str:
        return self.label

    def weight(self, w_dg: float, n_z: float) -> Result[float]:
        total = 0.0
        for child in self.children:
            result = child.weight(w_dg, n_z)
            if result.is_failure:
                return result.within(self.name)
            total += result.value
        return Result.ok(total)

    def center_of_gravity(
        self,
        w_dg: Optional[float] = None,
        n_z: Optional[float] = None,
    ) -> Result[Point]:
        if w_dg is None or n_z is None:
            raise ValueError(
                f"{self.name}: an assembly CG needs the design point (w_dg, n_z)"
            )
        return self.estimate(w_dg, n_z).map(lambda e: e.cg)

    def estimate(self, w_dg: float, n_z: float) -> Result[ComponentEstimate]:
        """Weight, CG and per-child breakdown in one pass over the children."""
        estimates: List[ComponentEstimate] = []
        for child in self.children:
            result = child.estimate(w_dg, n_z)
            if result.is_failure:
                return Result.fail(result.error).within(self.name)
            estimates.append(result.value)

        center = moment_center(
            ((e.weight_lb, e.cg) for e in estimates),
            source=self.name,
        )
        if center.is_failure:
            return center
        return Result.ok(ComponentEstimate(
            name=self.name,
            weight_lb=sum(e.weight_lb for e in estimates),
            cg=center.value,
            children=estimates,
        ))

    def breakdown(self, w_dg: float, n_z: float) -> Result[List[ComponentEstimate]]:
        """Per-child estimates (one level down)."""
        return self.estimate(w_dg, n_z).map(lambda e: e.children)

    def required_symbols(self) -> List[str]:
        seen: List[str] = []
        for child in self.children:
            for symbol in child.required_symbols():
                if symbol not in seen:
                    seen.append(symbol)
        return seen

    def iter_leaves(self, prefix: str = "") -> Iterator[Tuple[str, LeafComponent]]:
        """Yield (path, leaf) for every leaf below this assembly."""
        path = f"{prefix}/{self.name}" if prefix else self.name
        for child in self.children:
            if isinstance(child, Assembly):
                yield from child.iter_leaves(path)
            elif isinstance(child, LeafComponent):
                yield path, child


# =============================================================================
# AIRCRAFT TREE
# =============================================================================

def build_wings(parameters: ParameterSet, policy: Optional[WeightPolicy] = None) -> Assembly:
    """Wing structure plus wing-mounted propulsion items."""
    return Assembly("wings", (
        WingStructure.from_parameters(parameters, policy),
        Nacelle.from_parameters(parameters, policy),
        EngineControls.from_parameters(parameters, policy),
        FuelSystem.from_parameters(parameters, policy),
        PneumaticStarter.from_parameters(parameters, policy),
    ))


def build_landing_gear(parameters: ParameterSet, policy: Optional[WeightPolicy] = None) -> Assembly:
    return Assembly("landing_gear", (
        MainLandingGear.from_parameters(parameters, policy),
        NoseLandingGear.from_parameters(parameters, policy),
    ))


def build_systems(parameters: ParameterSet, policy: Optional[WeightPolicy] = None) -> Assembly:
    return Assembly("systems", (
        Hydraulics.from_parameters(parameters, policy),
        Furnishings.from_parameters(parameters, policy),
        AirConditioning.from_parameters(parameters, policy),
        Electrical.from_parameters(parameters, policy),
        Instruments.from_parameters(parameters, policy),
        Avionics.from_parameters(parameters, policy),
        FlightControls.from_parameters(parameters, policy),
        InstalledAPU.from_parameters(parameters, policy),
        AntiIcing.from_parameters(parameters, policy),
        HandlingGear.from_parameters(parameters, policy),
    ))


def build_fuselage(parameters: ParameterSet, policy: Optional[WeightPolicy] = None) -> Assembly:
    """Fuselage structure, landing gear and fixed equipment."""
    return Assembly("fuselage", (
        FuselageStructure.from_parameters(parameters, policy),
        build_landing_gear(parameters, policy),
        build_systems(parameters, policy),
    ))


def build_tailplane(parameters: ParameterSet, policy: Optional[WeightPolicy] = None) -> Assembly:
    return Assembly("tailplane", (
        HorizontalTailplane.from_parameters(parameters, policy),
        VerticalTailplane.from_parameters(parameters, policy),
    ))
