"""
Empennage estimators

Horizontal and vertical tailplane weights, with CGs derived from the root
leading-edge attachment point of each surface.

Reference: Raymer, "Aircraft Design: A Conceptual Approach", ch. 15.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple
import math

from aeroweight.core.point import Point
from aeroweight.core.result import Result
from aeroweight.core.units import deg_to_rad
from ..components import LeafComponent, parameter
from ..formulas import Formula
from ..items import WeightGroup


# =============================================================================
# CONSTANTS
# =============================================================================

HORIZONTAL_TAIL_COEFFICIENT = 0.0379
VERTICAL_TAIL_COEFFICIENT = 0.0026

# Chordwise CG position as a fraction of the local chord
TAIL_CG_CHORD_FRACTION = 0.42
# Spanwise CG station of the fin as a fraction of its height
FIN_CG_HEIGHT_FRACTION = 0.55


@dataclass(frozen=True)
class HorizontalTailplane(LeafComponent):
    """
    Horizontal tailplane.

        W = 0.0379 K_uht W_dg^0.639 N_z^0.1 S_ht^0.75 K_y^0.704 A_h^0.166
            (1 + S_e/S_ht)^0.1 / ((1 + F_w/B_h)^0.25 L_ht cos(sweep_ht))

    CG at 42% of the root chord behind the root leading edge, rotated by the
    tail incidence i_ht (positive nose up):

        x = x_le + 0.42 c_root cos(i_ht)
        z = z_le - 0.42 c_root sin(i_ht)
    """
    KEY: ClassVar[str] = "horizontal_tailplane"
    GROUP: ClassVar[WeightGroup] = WeightGroup.STRUCTURE
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = (
        "k_uht", "s_ht", "k_y", "ar_h", "s_e", "f_w", "b_h", "l_ht", "sweep_ht",
    )
    CG_FIELDS: ClassVar[Tuple[str, ...]] = (
        "x_le_ht", "y_le_ht", "z_le_ht", "root_chord_ht", "i_ht",
    )

    # weight
    k_uht: Optional[float] = parameter()     # 1.143 for all-moving tail, 1.0 otherwise
    s_ht: Optional[float] = parameter()      # horizontal tail area (ft^2)
    k_y: Optional[float] = parameter()       # pitching radius of gyration, ~0.3 L_ht (ft)
    ar_h: Optional[float] = parameter()      # aspect ratio
    s_e: Optional[float] = parameter()       # elevator area (ft^2)
    f_w: Optional[float] = parameter()       # fuselage width at the tail intersection (ft)
    b_h: Optional[float] = parameter()       # horizontal tail span (ft)
    l_ht: Optional[float] = parameter()      # wing to tail quarter-chord distance (ft)
    sweep_ht: Optional[float] = parameter()  # quarter-chord sweep (deg)
    # balance
    x_le_ht: Optional[float] = parameter()
    y_le_ht: Optional[float] = parameter()
    z_le_ht: Optional[float] = parameter()
    root_chord_ht: Optional[float] = parameter()  # (ft)
    i_ht: Optional[float] = parameter()           # incidence (deg)

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        numerator = (
            HORIZONTAL_TAIL_COEFFICIENT *
            self.k_uht *
            f.power(w_dg, 0.639, "w_dg") *
            f.power(n_z, 0.1, "n_z") *
            f.power(self.s_ht, 0.75, "s_ht") *
            f.power(self.k_y, 0.704, "k_y") *
            f.power(self.ar_h, 0.166, "ar_h") *
            f.power(1.0 + f.ratio(self.s_e, self.s_ht, "s_ht"), 0.1, "1 + s_e / s_ht")
        )
        denominator = (
            f.power(1.0 + f.ratio(self.f_w, self.b_h, "b_h"), 0.25, "1 + f_w / b_h") *
            f.denominator(self.l_ht, "l_ht") *
            f.cos(deg_to_rad(self.sweep_ht), "sweep_ht")
        )
        return f.result(f.ratio(numerator, denominator, "horizontal tail denominator"))

    def _locate(self) -> Result[Point]:
        f = Formula(self.name)
        offset = TAIL_CG_CHORD_FRACTION * f.positive(self.root_chord_ht, "root_chord_ht")
        incidence = deg_to_rad(self.i_ht)
        if f.failed:
            return Result.fail(f.error)
        return Result.ok(Point(
            self.x_le_ht + offset * math.cos(incidence),
            self.y_le_ht,
            self.z_le_ht - offset * math.sin(incidence),
        ))


@dataclass(frozen=True)
class VerticalTailplane(LeafComponent):
    """
    Vertical tailplane.

        W = 0.0026 (1 + H_t/H_v)^0.225 W_dg^0.556 N_z^0.536 S_vt^0.5 K_z^0.875
            A_v^0.35 / (L_vt^0.5 cos(sweep_vt) (t/c)^0.5)

    H_t/H_v is 0 for a conventional tail and 1 for a T-tail.

    CG at 55% of the fin height, 42% of the local chord behind the swept
    leading edge:

        h = 0.55 fin_height
        c = c_root (1 - (1 - taper) 0.55)
        x = x_le + h tan(sweep_le) + 0.42 c
        z = z_le + h
    """
    KEY: ClassVar[str] = "vertical_tailplane"
    GROUP: ClassVar[WeightGroup] = WeightGroup.STRUCTURE
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = (
        "h_t", "h_v", "s_vt", "k_z", "ar_v", "l_vt", "sweep_vt", "t_c_vt",
    )
    CG_FIELDS: ClassVar[Tuple[str, ...]] = (
        "x_le_vt", "y_le_vt", "z_le_vt", "root_chord_vt",
        "fin_height_vt", "taper_vt", "sweep_le_vt",
    )

    # weight
    h_t: Optional[float] = parameter()       # horizontal tail height above fuselage (ft)
    h_v: Optional[float] = parameter()       # vertical tail height above fuselage (ft)
    s_vt: Optional[float] = parameter()      # vertical tail area (ft^2)
    k_z: Optional[float] = parameter()       # yawing radius of gyration, ~L_vt (ft)
    ar_v: Optional[float] = parameter()      # aspect ratio
    l_vt: Optional[float] = parameter()      # wing to tail quarter-chord distance (ft)
    sweep_vt: Optional[float] = parameter()  # quarter-chord sweep (deg)
    t_c_vt: Optional[float] = parameter()    # root thickness to chord ratio
    # balance
    x_le_vt: Optional[float] = parameter()
    y_le_vt: Optional[float] = parameter()
    z_le_vt: Optional[float] = parameter()
    root_chord_vt: Optional[float] = parameter()  # (ft)
    fin_height_vt: Optional[float] = parameter()  # (ft)
    taper_vt: Optional[float] = parameter()
    sweep_le_vt: Optional[float] = parameter()    # leading edge sweep (deg)

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        numerator = (
            VERTICAL_TAIL_COEFFICIENT *
            f.power(1.0 + f.ratio(self.h_t, self.h_v, "h_v"), 0.225, "1 + h_t / h_v") *
            f.power(w_dg, 0.556, "w_dg") *
            f.power(n_z, 0.536, "n_z") *
            f.power(self.s_vt, 0.5, "s_vt") *
            f.power(self.k_z, 0.875, "k_z") *
            f.power(self.ar_v, 0.35, "ar_v")
        )
        denominator = (
            f.power(self.l_vt, 0.5, "l_vt") *
            f.cos(deg_to_rad(self.sweep_vt), "sweep_vt") *
            f.power(self.t_c_vt, 0.5, "t_c_vt")
        )
        return f.result(f.ratio(numerator, denominator, "vertical tail denominator"))

    def _locate(self) -> Result[Point]:
        f = Formula(self.name)
        height = FIN_CG_HEIGHT_FRACTION * f.positive(self.fin_height_vt, "fin_height_vt")
        chord = f.positive(self.root_chord_vt, "root_chord_vt") * (
            1.0 - (1.0 - self.taper_vt) * FIN_CG_HEIGHT_FRACTION
        )
        if f.failed:
            return Result.fail(f.error)
        return Result.ok(Point(
            self.x_le_vt + height * math.tan(deg_to_rad(self.sweep_le_vt)) + TAIL_CG_CHORD_FRACTION * chord,
            self.y_le_vt,
            self.z_le_vt + height,
        ))
