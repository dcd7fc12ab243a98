"""
Fixed equipment estimators

Hydraulics, furnishings, environmental control, electrical, instruments,
avionics, flight controls, APU, anti-icing and handling gear. All are point
masses whose CG comes from x_cg_<key>, y_cg_<key>, z_cg_<key>.

Reference: Raymer, "Aircraft Design: A Conceptual Approach", ch. 15.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from aeroweight.core.result import Result
from ..components import PointMassComponent, parameter
from ..formulas import Formula
from ..items import WeightGroup


# =============================================================================
# CONSTANTS
# =============================================================================

HYDRAULICS_COEFFICIENT = 0.2673
FURNISHINGS_COEFFICIENT = 0.0577
AIR_CONDITIONING_COEFFICIENT = 62.36
ELECTRICAL_COEFFICIENT = 7.291
INSTRUMENTS_COEFFICIENT = 4.509
AVIONICS_COEFFICIENT = 1.73
FLIGHT_CONTROLS_COEFFICIENT = 145.9
APU_INSTALLATION_FACTOR = 2.2
ANTI_ICING_FRACTION = 0.002
HANDLING_GEAR_FRACTION = 0.0003


@dataclass(frozen=True)
class Hydraulics(PointMassComponent):
    """W = 0.2673 N_f (L_f + B_w)^0.937"""
    KEY: ClassVar[str] = "hydraulics"
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ("n_f", "l_f", "b_w")

    n_f: Optional[float] = parameter()  # number of functions performed by controls (4-7)
    l_f: Optional[float] = parameter()  # total fuselage length (ft)
    b_w: Optional[float] = parameter()  # wing span (ft)

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        weight = HYDRAULICS_COEFFICIENT * self.n_f * f.power(self.l_f + self.b_w, 0.937, "l_f + b_w")
        return f.result(weight)


@dataclass(frozen=True)
class Furnishings(PointMassComponent):
    """
    Seats, lavatories, galleys and cargo handling.

        W = 0.0577 N_c^0.1 W_c^0.393 S_f^0.75 + N_seat W_seat
            + K_lav N_p^1.33 + K_buf N_p^1.12
    """
    KEY: ClassVar[str] = "furnishings"
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = (
        "n_c", "w_c", "s_f", "n_seat", "w_seat", "k_lav", "n_p", "k_buf",
    )

    n_c: Optional[float] = parameter()     # number of crew
    w_c: Optional[float] = parameter()     # maximum cargo weight (lb)
    s_f: Optional[float] = parameter()     # fuselage wetted area (ft^2)
    n_seat: Optional[float] = parameter()  # number of seats
    w_seat: Optional[float] = parameter()  # weight of one seat (lb)
    k_lav: Optional[float] = parameter()   # 3.9 long range, 1.11 short range, 0.31 business jet
    n_p: Optional[float] = parameter()     # number of personnel on board
    k_buf: Optional[float] = parameter()   # 5.68 long range, 1.02 short range

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        cabin = (
            FURNISHINGS_COEFFICIENT *
            f.power(self.n_c, 0.1, "n_c") *
            f.power(self.w_c, 0.393, "w_c") *
            f.power(self.s_f, 0.75, "s_f")
        )
        seats = self.n_seat * self.w_seat
        lavatories = self.k_lav * f.power(self.n_p, 1.33, "n_p")
        buffet = self.k_buf * f.power(self.n_p, 1.12, "n_p")
        return f.result(cabin + seats + lavatories + buffet)


@dataclass(frozen=True)
class AirConditioning(PointMassComponent):
    """W = 62.36 N_p^0.25 (V_pr / 1000)^0.604 W_uav^0.1"""
    KEY: ClassVar[str] = "air_conditioning"
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ("n_p", "v_pr", "w_uav")

    n_p: Optional[float] = parameter()    # number of personnel on board
    v_pr: Optional[float] = parameter()   # pressurized volume (ft^3)
    w_uav: Optional[float] = parameter()  # uninstalled avionics weight (lb)

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        weight = (
            AIR_CONDITIONING_COEFFICIENT *
            f.power(self.n_p, 0.25, "n_p") *
            f.power(self.v_pr * 1e-3, 0.604, "v_pr") *
            f.power(self.w_uav, 0.1, "w_uav")
        )
        return f.result(weight)


@dataclass(frozen=True)
class Electrical(PointMassComponent):
    """W = 7.291 R_kva^0.782 L_a^0.346 N_gen^0.1"""
    KEY: ClassVar[str] = "electrical"
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ("r_kva", "l_a", "n_gen")

    r_kva: Optional[float] = parameter()  # system electrical rating (kVA)
    l_a: Optional[float] = parameter()    # electrical routing distance (ft)
    n_gen: Optional[float] = parameter()  # number of generators

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        weight = (
            ELECTRICAL_COEFFICIENT *
            f.power(self.r_kva, 0.782, "r_kva") *
            f.power(self.l_a, 0.346, "l_a") *
            f.power(self.n_gen, 0.1, "n_gen")
        )
        return f.result(weight)


@dataclass(frozen=True)
class Instruments(PointMassComponent):
    """W = 4.509 K_r N_c^0.541 N_en (L_f + B_w)^0.5"""
    KEY: ClassVar[str] = "instruments"
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ("k_r", "n_c", "n_en", "l_f", "b_w")

    k_r: Optional[float] = parameter()   # 1.133 for reciprocating engines, 1.0 otherwise
    n_c: Optional[float] = parameter()   # number of crew
    n_en: Optional[float] = parameter()  # number of engines
    l_f: Optional[float] = parameter()   # total fuselage length (ft)
    b_w: Optional[float] = parameter()   # wing span (ft)

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        weight = (
            INSTRUMENTS_COEFFICIENT *
            self.k_r *
            f.power(self.n_c, 0.541, "n_c") *
            self.n_en *
            f.power(self.l_f + self.b_w, 0.5, "l_f + b_w")
        )
        return f.result(weight)


@dataclass(frozen=True)
class Avionics(PointMassComponent):
    """W = 1.73 W_uav^0.983"""
    KEY: ClassVar[str] = "avionics"
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ("w_uav",)

    w_uav: Optional[float] = parameter()  # uninstalled avionics weight (lb)

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        return f.result(AVIONICS_COEFFICIENT * f.power(self.w_uav, 0.983, "w_uav"))


@dataclass(frozen=True)
class FlightControls(PointMassComponent):
    """W = 145.9 N_f^0.554 S_cs^0.2 (I_y 1e-6)^0.07 / (1 + N_m / N_f)"""
    KEY: ClassVar[str] = "flight_controls"
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ("n_f", "s_cs", "i_y", "n_m")

    n_f: Optional[float] = parameter()   # number of functions performed by controls
    s_cs: Optional[float] = parameter()  # total control surface area (ft^2)
    i_y: Optional[float] = parameter()   # pitching moment of inertia (lb ft^2)
    n_m: Optional[float] = parameter()   # number of mechanical functions

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        numerator = (
            FLIGHT_CONTROLS_COEFFICIENT *
            f.power(self.n_f, 0.554, "n_f") *
            f.power(self.s_cs, 0.2, "s_cs") *
            f.power(self.i_y * 1e-6, 0.07, "i_y")
        )
        mechanical = 1.0 + f.ratio(self.n_m, self.n_f, "n_f")
        return f.result(f.ratio(numerator, mechanical, "1 + n_m / n_f"))


@dataclass(frozen=True)
class InstalledAPU(PointMassComponent):
    """W = 2.2 W_apu"""
    KEY: ClassVar[str] = "apu"
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ("w_apu",)

    w_apu: Optional[float] = parameter()  # uninstalled APU weight (lb)

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        return Result.ok(APU_INSTALLATION_FACTOR * self.w_apu)


@dataclass(frozen=True)
class AntiIcing(PointMassComponent):
    """W = 0.002 W_dg"""
    KEY: ClassVar[str] = "anti_icing"

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        return Result.ok(ANTI_ICING_FRACTION * w_dg)


@dataclass(frozen=True)
class HandlingGear(PointMassComponent):
    """W = 0.0003 W_dg"""
    KEY: ClassVar[str] = "handling_gear"

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        return Result.ok(HANDLING_GEAR_FRACTION * w_dg)
