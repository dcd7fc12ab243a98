"""
Aircraft weight & balance aggregator

Builds the fixed component tree (wings, fuselage, tailplane) from a
ParameterSet, computes total empty weight and overall CG with the moment
method, and reports the result with a per-component and per-group
breakdown.

Usage:
    aircraft = Aircraft.from_parameters(load_parameters("jet.csv"))
    result = aircraft.compute(w_dg=84350.0, n_z=3.75)
    if result.is_ok:
        print(result.value.total_weight_lb, result.value.cg)
    else:
        print(result.error.describe())
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import logging

from aeroweight.core.parameters import ParameterSet
from aeroweight.core.point import Point
from aeroweight.core.result import Result
from aeroweight.errors import ErrorAggregator, ErrorReport
from .assemblies import Assembly, build_fuselage, build_tailplane, build_wings
from .components import WeightPolicy
from .items import ComponentEstimate, GroupSummary, WeightGroup
from .utils import determinize_dict

logger = logging.getLogger(__name__)

AIRCRAFT_NAME = "aircraft"


# =============================================================================
# WEIGHT & BALANCE SUMMARY
# =============================================================================

@dataclass
class WeightBalanceSummary:
    """
    Empty weight and CG of the aircraft at one design point.

    Weights in lb, positions in ft in the aircraft frame
    (x aft from the nose, y starboard, z up).
    """
    # Design point
    design_gross_weight_lb: float
    ultimate_load_factor: float

    # Totals
    total_weight_lb: float
    cg: Point

    # Top-level assemblies, each with its own breakdown
    components: List[ComponentEstimate] = field(default_factory=list)

    # Leaf estimates grouped by weight group
    group_summaries: Dict[WeightGroup, GroupSummary] = field(default_factory=dict)

    @property
    def empty_weight_fraction(self) -> float:
        """Empty weight as a fraction of design gross weight."""
        if self.design_gross_weight_lb <= 0:
            return 0.0
        return self.total_weight_lb / self.design_gross_weight_lb

    def leaves(self) -> List[ComponentEstimate]:
        result: List[ComponentEstimate] = []
        for component in self.components:
            result.extend(component.leaves())
        return result

    def cg_x_range(self) -> Tuple[float, float]:
        """Most forward and most aft leaf CG x."""
        xs = [leaf.cg.x for leaf in self.leaves()]
        return min(xs), max(xs)

    def get_group_weight_lb(self, group: WeightGroup) -> float:
        if group in self.group_summaries:
            return self.group_summaries[group].total_weight_lb
        return 0.0

    def get_group_percentage(self, group: WeightGroup) -> float:
        """Percentage contribution of a group to the empty weight."""
        if self.total_weight_lb <= 0:
            return 0.0
        return self.get_group_weight_lb(group) / self.total_weight_lb * 100

    def to_dict(self) -> Dict[str, Any]:
        """Deterministic dictionary for JSON output and comparison."""
        result = {
            "design_point": {
                "design_gross_weight_lb": self.design_gross_weight_lb,
                "ultimate_load_factor": self.ultimate_load_factor,
            },
            "empty_weight": {
                "weight_lb": self.total_weight_lb,
                "fraction_of_gross": self.empty_weight_fraction,
                "cg": self.cg.to_dict(),
            },
            "components": [c.to_dict() for c in self.components],
            "groups": {
                group.value: summary.to_dict()
                for group, summary in self.group_summaries.items()
            },
        }
        return determinize_dict(result)


# =============================================================================
# AIRCRAFT
# =============================================================================

@dataclass(frozen=True)
class Aircraft:
    """
    Top of the component tree.

    Construction never fails; absent parameters surface when compute() or
    diagnose() evaluates the formulas that need them.
    """
    wings: Assembly
    fuselage: Assembly
    tailplane: Assembly

    @classmethod
    def from_parameters(
        cls,
        parameters: ParameterSet,
        policy: Optional[WeightPolicy] = None,
    ) -> "Aircraft":
        return cls(
            wings=build_wings(parameters, policy),
            fuselage=build_fuselage(parameters, policy),
            tailplane=build_tailplane(parameters, policy),
        )

    @property
    def root(self) -> Assembly:
        return Assembly(AIRCRAFT_NAME, (self.wings, self.fuselage, self.tailplane))

    def weight(self, w_dg: float, n_z: float) -> Result[float]:
        return self.root.weight(w_dg, n_z)

    def center_of_gravity(self, w_dg: float, n_z: float) -> Result[Point]:
        return self.root.center_of_gravity(w_dg, n_z)

    def required_symbols(self) -> List[str]:
        return self.root.required_symbols()

    def compute(self, w_dg: float, n_z: float) -> Result[WeightBalanceSummary]:
        """
        Empty weight and CG at the design point.

        Fails fast on the first failing component, with the failure path
        naming the component (e.g. "aircraft/fuselage/systems/avionics").
        """
        estimate = self.root.estimate(w_dg, n_z)
        if estimate.is_failure:
            logger.warning(f"Weight & balance failed: {estimate.error.describe()}")
            return Result.fail(estimate.error)

        root = estimate.value
        groups: Dict[WeightGroup, GroupSummary] = {}
        for group in WeightGroup:
            members = [leaf for leaf in root.leaves() if leaf.group == group]
            if not members:
                continue
            summary = GroupSummary.from_estimates(group, members)
            if summary.is_failure:
                logger.warning(f"Group summary failed: {summary.error.describe()}")
                return Result.fail(summary.error)
            groups[group] = summary.value

        result = WeightBalanceSummary(
            design_gross_weight_lb=w_dg,
            ultimate_load_factor=n_z,
            total_weight_lb=root.weight_lb,
            cg=root.cg,
            components=root.children,
            group_summaries=groups,
        )

        logger.info(
            f"Empty weight calculated: {result.total_weight_lb:.1f} lb "
            f"({result.empty_weight_fraction * 100:.1f}% of {w_dg:.0f} lb gross)"
        )
        logger.debug(
            f"CG: x={result.cg.x:.3f} ft, y={result.cg.y:.3f} ft, z={result.cg.z:.3f} ft"
        )
        return Result.ok(result)

    def diagnose(self, w_dg: float, n_z: float) -> ErrorReport:
        """
        Evaluate every leaf independently and report all failures.

        Unlike compute(), nothing short-circuits: weight and CG of each leaf
        are checked separately, so one pass lists every absent symbol.
        """
        aggregator = ErrorAggregator()
        leaf_count = 0
        for path, leaf in self.root.iter_leaves():
            leaf_count += 1
            for result in (leaf.weight(w_dg, n_z), leaf.center_of_gravity()):
                if result.is_failure:
                    aggregator.add(result.error.within(path))

        if not aggregator.errors:
            # Every leaf is fine; only the assembly level can still fail
            computed = self.compute(w_dg, n_z)
            if computed.is_failure:
                aggregator.add(computed.error)

        report = aggregator.generate_report()
        logger.info(f"Diagnosed {leaf_count} components: {report.summary}")
        return report
