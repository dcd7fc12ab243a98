"""
Wing group estimators

Wing structure plus the wing-mounted propulsion items: nacelle group,
engine controls, pneumatic starter and fuel system.

Reference: Raymer, "Aircraft Design: A Conceptual Approach", ch. 15
(cargo/transport weight equations). Imperial units throughout: lb, ft,
ft^2, gal; angles in degrees.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple
import math

from aeroweight.core.point import Point
from aeroweight.core.result import Result
from aeroweight.core.units import deg_to_rad
from ..components import LeafComponent, PointMassComponent, parameter
from ..formulas import Formula
from ..items import WeightGroup


# =============================================================================
# CONSTANTS
# =============================================================================

WING_COEFFICIENT = 0.0051
NACELLE_COEFFICIENT = 0.6724
ENGINE_CONTROLS_PER_ENGINE = 5.0       # lb per engine
ENGINE_CONTROLS_PER_FOOT = 0.8         # lb per ft of routing
STARTER_COEFFICIENT = 49.19
FUEL_SYSTEM_COEFFICIENT = 2.405

# Wing CG: 35% of the semi-span, 70% of the way from front to rear spar
WING_CG_SPAN_FRACTION = 0.35
WING_CG_SPAR_FRACTION = 0.70


# =============================================================================
# WING STRUCTURE
# =============================================================================

@dataclass(frozen=True)
class WingStructure(LeafComponent):
    """
    Wing box, skins and control surfaces.

        W = 0.0051 (W_dg N_z)^0.557 S_w^0.649 A^0.5 (1 + lambda)^0.1 S_csw^0.1
            / (cos(sweep) (t/c)^0.4)

    The CG is derived from spar geometry, measured from the root
    quarter-chord point (x_rc_w, y_rc_w, z_rc_w):

        station = 0.35 * b_w / 2
        x = x_rc + x_fs + station tan(sweep_fs)
            + 0.70 (delta_fs_as + station (tan(sweep_as) - tan(sweep_fs)))
        z = z_rc + station tan(dihedral)

    Left and right halves are mirror images, so y stays at y_rc.
    """
    KEY: ClassVar[str] = "wing_structure"
    GROUP: ClassVar[WeightGroup] = WeightGroup.STRUCTURE
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = (
        "s_w", "ar_w", "taper_w", "s_csw", "sweep_w", "t_c_w",
    )
    CG_FIELDS: ClassVar[Tuple[str, ...]] = (
        "x_rc_w", "y_rc_w", "z_rc_w", "b_w", "dihedral_w",
        "sweep_fs_w", "sweep_as_w", "delta_fs_as_w", "x_fs_w",
    )

    # weight
    s_w: Optional[float] = parameter()        # reference wing area (ft^2)
    ar_w: Optional[float] = parameter()       # aspect ratio
    taper_w: Optional[float] = parameter()    # taper ratio
    s_csw: Optional[float] = parameter()      # wing-mounted control surface area (ft^2)
    sweep_w: Optional[float] = parameter()    # quarter-chord sweep (deg)
    t_c_w: Optional[float] = parameter()      # root thickness to chord ratio
    # balance
    x_rc_w: Optional[float] = parameter()     # root quarter-chord point (ft)
    y_rc_w: Optional[float] = parameter()
    z_rc_w: Optional[float] = parameter()
    b_w: Optional[float] = parameter()        # wing span (ft)
    dihedral_w: Optional[float] = parameter() # dihedral (deg)
    sweep_fs_w: Optional[float] = parameter() # front spar sweep (deg)
    sweep_as_w: Optional[float] = parameter() # aft spar sweep (deg)
    delta_fs_as_w: Optional[float] = parameter()  # front to aft spar distance at root (ft)
    x_fs_w: Optional[float] = parameter()     # front spar aft of the root quarter-chord (ft)

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        numerator = (
            WING_COEFFICIENT *
            f.power(w_dg * n_z, 0.557, "w_dg * n_z") *
            f.power(self.s_w, 0.649, "s_w") *
            f.power(self.ar_w, 0.5, "ar_w") *
            f.power(1.0 + self.taper_w, 0.1, "1 + taper_w") *
            f.power(self.s_csw, 0.1, "s_csw")
        )
        denominator = (
            f.cos(deg_to_rad(self.sweep_w), "sweep_w") *
            f.power(self.t_c_w, 0.4, "t_c_w")
        )
        return f.result(f.ratio(numerator, denominator, "cos(sweep_w) * t_c_w^0.4"))

    def _locate(self) -> Result[Point]:
        f = Formula(self.name)
        semi_span = f.positive(self.b_w / 2.0, "b_w / 2")
        station = WING_CG_SPAN_FRACTION * semi_span

        tan_fs = math.tan(deg_to_rad(self.sweep_fs_w))
        tan_as = math.tan(deg_to_rad(self.sweep_as_w))
        spar_gap = f.positive(
            self.delta_fs_as_w + station * (tan_as - tan_fs),
            "front to aft spar distance at the CG station",
        )

        x = self.x_rc_w + self.x_fs_w + station * tan_fs + WING_CG_SPAR_FRACTION * spar_gap
        z = self.z_rc_w + station * math.tan(deg_to_rad(self.dihedral_w))
        if f.failed:
            return Result.fail(f.error)
        return Result.ok(Point(x, self.y_rc_w, z))


# =============================================================================
# NACELLE GROUP
# =============================================================================

@dataclass(frozen=True)
class Nacelle(PointMassComponent):
    """
    Nacelle group, all engines.

        W = 0.6724 K_ng N_Lt^0.1 N_w^0.294 N_z^0.119 W_ec^0.611 N_en^0.984 S_n^0.224
    """
    KEY: ClassVar[str] = "nacelle"
    GROUP: ClassVar[WeightGroup] = WeightGroup.STRUCTURE
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ("k_ng", "n_lt", "n_w", "w_ec", "n_en", "s_n")

    k_ng: Optional[float] = parameter()  # 1.017 for pylon-mounted nacelle, 1.0 otherwise
    n_lt: Optional[float] = parameter()  # nacelle length (ft)
    n_w: Optional[float] = parameter()   # nacelle width (ft)
    w_ec: Optional[float] = parameter()  # weight of engine and contents, per nacelle (lb)
    n_en: Optional[float] = parameter()  # number of engines
    s_n: Optional[float] = parameter()   # nacelle wetted area (ft^2)

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        weight = (
            NACELLE_COEFFICIENT *
            self.k_ng *
            f.power(self.n_lt, 0.1, "n_lt") *
            f.power(self.n_w, 0.294, "n_w") *
            f.power(n_z, 0.119, "n_z") *
            f.power(self.w_ec, 0.611, "w_ec") *
            f.power(self.n_en, 0.984, "n_en") *
            f.power(self.s_n, 0.224, "s_n")
        )
        return f.result(weight)


# =============================================================================
# ENGINE CONTROLS
# =============================================================================

@dataclass(frozen=True)
class EngineControls(PointMassComponent):
    """W = 5 N_en + 0.8 L_ec"""
    KEY: ClassVar[str] = "engine_controls"
    GROUP: ClassVar[WeightGroup] = WeightGroup.PROPULSION
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ("n_en", "l_ec")

    n_en: Optional[float] = parameter()  # number of engines
    l_ec: Optional[float] = parameter()  # routing distance engine to cockpit, all engines (ft)

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        return Result.ok(
            ENGINE_CONTROLS_PER_ENGINE * self.n_en + ENGINE_CONTROLS_PER_FOOT * self.l_ec
        )


# =============================================================================
# PNEUMATIC STARTER
# =============================================================================

@dataclass(frozen=True)
class PneumaticStarter(PointMassComponent):
    """W = 49.19 (N_en W_en / 1000)^0.541"""
    KEY: ClassVar[str] = "pneumatic_starter"
    GROUP: ClassVar[WeightGroup] = WeightGroup.PROPULSION
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ("n_en", "w_en")

    n_en: Optional[float] = parameter()  # number of engines
    w_en: Optional[float] = parameter()  # weight of one engine (lb)

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        weight = STARTER_COEFFICIENT * f.power(self.n_en * self.w_en * 1e-3, 0.541, "n_en * w_en")
        return f.result(weight)


# =============================================================================
# FUEL SYSTEM
# =============================================================================

@dataclass(frozen=True)
class FuelSystem(PointMassComponent):
    """
    Fuel system and tanks.

        W = 2.405 V_t^0.606 N_t^0.5 (1 + V_p/V_t) / (1 + V_i/V_t)
    """
    KEY: ClassVar[str] = "fuel_system"
    GROUP: ClassVar[WeightGroup] = WeightGroup.PROPULSION
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ("v_t", "n_t", "v_p", "v_i")

    v_t: Optional[float] = parameter()  # total fuel volume (gal)
    n_t: Optional[float] = parameter()  # number of fuel tanks
    v_p: Optional[float] = parameter()  # self-sealing tank volume (gal)
    v_i: Optional[float] = parameter()  # integral tank volume (gal)

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        self_sealing = 1.0 + f.ratio(self.v_p, self.v_t, "v_t")
        integral = 1.0 + f.ratio(self.v_i, self.v_t, "v_t")
        weight = (
            FUEL_SYSTEM_COEFFICIENT *
            f.power(self.v_t, 0.606, "v_t") *
            f.power(self.n_t, 0.5, "n_t") *
            self_sealing
        )
        return f.result(f.ratio(weight, integral, "1 + v_i / v_t"))
