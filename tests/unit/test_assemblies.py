"""
Unit tests for component assemblies (moment-method composition).
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

import pytest

from aeroweight.core.parameters import ParameterSet
from aeroweight.core.point import Point
from aeroweight.core.result import Result
from aeroweight.errors import ErrorCode
from aeroweight.weight.assemblies import (
    Assembly,
    build_fuselage,
    build_landing_gear,
    build_systems,
    build_tailplane,
    build_wings,
)
from aeroweight.weight.components import PointMassComponent, parameter

W_DG = 84350.0
N_Z = 3.75


@dataclass(frozen=True)
class Block(PointMassComponent):
    """Fixed-mass leaf for composition tests."""
    KEY: ClassVar[str] = "block"
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ("mass",)

    mass: Optional[float] = parameter()
    label: str = "block"

    @property
    def name(self) -> str:
        return self.label

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        return Result.ok(self.mass)


def block(label, mass, x, y=0.0, z=0.0):
    return Block(mass=mass, x_cg=x, y_cg=y, z_cg=z, label=label)


class TestAssemblyWeight:
    """Tests for weight summation."""

    def test_sum_of_children(self):
        assembly = Assembly("group", (block("a", 100.0, 10.0), block("b", 300.0, 20.0)))
        assert assembly.weight(W_DG, N_Z).unwrap() == 400.0

    def test_nested(self):
        inner = Assembly("inner", (block("a", 100.0, 10.0), block("b", 50.0, 30.0)))
        outer = Assembly("outer", (inner, block("c", 250.0, 5.0)))
        assert outer.weight(W_DG, N_Z).unwrap() == 400.0

    def test_failure_short_circuits_with_path(self):
        inner = Assembly("inner", (block("a", 100.0, 10.0), Block(label="broken")))
        outer = Assembly("outer", (inner, block("c", 250.0, 5.0)))
        result = outer.weight(W_DG, N_Z)
        assert result.is_failure
        assert result.error.code == ErrorCode.PAR_MISSING
        assert result.error.path == "outer/inner/broken"
        assert result.error.symbols == ("mass",)

    def test_first_failing_child_reported(self):
        assembly = Assembly("group", (
            Block(label="first"),
            Block(mass=-5.0, label="second"),
        ))
        assert assembly.weight(W_DG, N_Z).error.source == "first"


class TestAssemblyCenterOfGravity:
    """Tests for moment-method CG."""

    def test_weighted_average(self):
        assembly = Assembly("group", (
            block("a", 100.0, 10.0, 0.0, 2.0),
            block("b", 300.0, 20.0, 0.0, -2.0),
        ))
        cg = assembly.center_of_gravity(W_DG, N_Z).unwrap()
        assert cg.x == pytest.approx(17.5)
        assert cg.y == 0.0
        assert cg.z == pytest.approx(-1.0)

    def test_cg_within_children_hull(self):
        children = (
            block("a", 120.0, 4.0),
            block("b", 75.0, 31.0),
            block("c", 900.0, 18.5),
            block("d", 3.0, 99.0),
        )
        cg = Assembly("group", children).center_of_gravity(W_DG, N_Z).unwrap()
        assert 4.0 <= cg.x <= 99.0

    def test_zero_total_weight_fails(self):
        assembly = Assembly("group", (block("a", 0.0, 10.0), block("b", 0.0, 20.0)))
        result = assembly.center_of_gravity(W_DG, N_Z)
        assert result.is_failure
        assert result.error.code == ErrorCode.GEO_INVALID
        assert result.error.path == "group"

    def test_zero_weight_nested_path(self):
        inner = Assembly("inner", (block("a", 0.0, 10.0),))
        outer = Assembly("outer", (inner, block("b", 10.0, 1.0)))
        assert outer.estimate(W_DG, N_Z).error.path == "outer/inner"

    def test_child_cg_failure_propagates(self):
        assembly = Assembly("group", (
            block("a", 100.0, 10.0),
            Block(mass=10.0, x_cg=1.0, label="no_y"),
        ))
        result = assembly.center_of_gravity(W_DG, N_Z)
        assert result.error.path == "group/no_y"
        assert result.error.symbols == ("y_cg_block", "z_cg_block")

    def test_requires_design_point(self):
        assembly = Assembly("group", (block("a", 100.0, 10.0),))
        with pytest.raises(ValueError, match="design point"):
            assembly.center_of_gravity()

    def test_empty_assembly_fails(self):
        assert Assembly("empty", ()).estimate(W_DG, N_Z).is_failure


class TestAssemblyBreakdown:
    """Tests for estimate and breakdown."""

    def test_estimate_tree(self):
        inner = Assembly("inner", (block("a", 100.0, 10.0), block("b", 100.0, 30.0)))
        outer = Assembly("outer", (inner, block("c", 200.0, 0.0)))
        estimate = outer.estimate(W_DG, N_Z).unwrap()

        assert estimate.name == "outer"
        assert estimate.weight_lb == 400.0
        assert estimate.cg == Point(10.0, 0.0, 0.0)
        assert [c.name for c in estimate.children] == ["inner", "c"]
        assert estimate.children[0].cg == Point(20.0, 0.0, 0.0)
        assert [leaf.name for leaf in estimate.leaves()] == ["a", "b", "c"]

    def test_breakdown(self):
        assembly = Assembly("group", (block("a", 1.0, 1.0), block("b", 2.0, 2.0)))
        names = [e.name for e in assembly.breakdown(W_DG, N_Z).unwrap()]
        assert names == ["a", "b"]

    def test_required_symbols_deduplicated(self):
        assembly = Assembly("group", (block("a", 1.0, 1.0), block("b", 2.0, 2.0)))
        assert assembly.required_symbols() == ["x_cg_block", "y_cg_block", "z_cg_block", "mass"]

    def test_iter_leaves(self):
        inner = Assembly("inner", (block("a", 1.0, 1.0),))
        outer = Assembly("outer", (inner, block("b", 1.0, 1.0)))
        assert [(path, leaf.name) for path, leaf in outer.iter_leaves()] == [
            ("outer/inner", "a"),
            ("outer", "b"),
        ]


class TestAircraftTree:
    """Tests for the fixed aircraft assemblies."""

    def test_wings_children(self):
        wings = build_wings(ParameterSet())
        assert [c.name for c in wings.children] == [
            "wing_structure", "nacelle", "engine_controls", "fuel_system", "pneumatic_starter",
        ]

    def test_fuselage_children(self):
        fuselage = build_fuselage(ParameterSet())
        assert [c.name for c in fuselage.children] == ["fuselage_structure", "landing_gear", "systems"]

    def test_landing_gear_and_tailplane(self):
        assert [c.name for c in build_landing_gear(ParameterSet()).children] == [
            "main_landing_gear", "nose_landing_gear",
        ]
        assert [c.name for c in build_tailplane(ParameterSet()).children] == [
            "horizontal_tailplane", "vertical_tailplane",
        ]

    def test_systems_has_ten_items(self):
        assert len(build_systems(ParameterSet()).children) == 10

    def test_weight_equals_sum_of_children(self, jet_parameters):
        for assembly in (build_wings(jet_parameters), build_fuselage(jet_parameters)):
            total = assembly.weight(W_DG, N_Z).unwrap()
            parts = sum(c.weight(W_DG, N_Z).unwrap() for c in assembly.children)
            assert total == pytest.approx(parts, rel=1e-9)

    def test_missing_parameter_fails_every_ancestor(self, jet_parameters):
        params = jet_parameters.without("w_uav")
        fuselage = build_fuselage(params)
        result = fuselage.weight(W_DG, N_Z)
        assert result.error.path == "fuselage/systems/air_conditioning"
        assert result.error.symbols == ("w_uav",)
        assert build_wings(params).weight(W_DG, N_Z).is_ok
