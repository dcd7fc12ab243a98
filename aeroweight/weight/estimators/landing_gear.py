"""
Landing gear estimators (main and nose)

Reference: Raymer, "Aircraft Design: A Conceptual Approach", ch. 15.
Strut lengths are in inches, as in the source equations.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from aeroweight.core.result import Result
from ..components import PointMassComponent, parameter
from ..formulas import Formula
from ..items import WeightGroup


MAIN_GEAR_COEFFICIENT = 0.0106
NOSE_GEAR_COEFFICIENT = 0.032


@dataclass(frozen=True)
class MainLandingGear(PointMassComponent):
    """
    W = 0.0106 K_mp W_l^0.888 N_l^0.25 L_m^0.4 N_mw^0.321 V_stall^0.1 / N_mss^0.5
    """
    KEY: ClassVar[str] = "main_landing_gear"
    GROUP: ClassVar[WeightGroup] = WeightGroup.STRUCTURE
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = (
        "k_mp", "w_l", "n_l", "l_m", "n_mw", "v_stall", "n_mss",
    )

    k_mp: Optional[float] = parameter()     # 1.126 for kneeling gear, 1.0 otherwise
    w_l: Optional[float] = parameter()      # landing design gross weight (lb)
    n_l: Optional[float] = parameter()      # ultimate landing load factor, 1.5 x N_gear
    l_m: Optional[float] = parameter()      # main gear length (in)
    n_mw: Optional[float] = parameter()     # number of main wheels
    v_stall: Optional[float] = parameter()  # landing stall speed (ft/s)
    n_mss: Optional[float] = parameter()    # number of main gear shock struts

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        numerator = (
            MAIN_GEAR_COEFFICIENT *
            self.k_mp *
            f.power(self.w_l, 0.888, "w_l") *
            f.power(self.n_l, 0.25, "n_l") *
            f.power(self.l_m, 0.4, "l_m") *
            f.power(self.n_mw, 0.321, "n_mw") *
            f.power(self.v_stall, 0.1, "v_stall")
        )
        denominator = f.power(self.n_mss, 0.5, "n_mss")
        return f.result(f.ratio(numerator, denominator, "n_mss^0.5"))


@dataclass(frozen=True)
class NoseLandingGear(PointMassComponent):
    """W = 0.032 K_np W_l^0.646 N_l^0.2 L_n^0.5 N_nw^0.45"""
    KEY: ClassVar[str] = "nose_landing_gear"
    GROUP: ClassVar[WeightGroup] = WeightGroup.STRUCTURE
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ("k_np", "w_l", "n_l", "l_n", "n_nw")

    k_np: Optional[float] = parameter()  # 1.15 for kneeling nose gear, 1.0 otherwise
    w_l: Optional[float] = parameter()   # landing design gross weight (lb)
    n_l: Optional[float] = parameter()   # ultimate landing load factor
    l_n: Optional[float] = parameter()   # nose gear length (in)
    n_nw: Optional[float] = parameter()  # number of nose wheels

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        weight = (
            NOSE_GEAR_COEFFICIENT *
            self.k_np *
            f.power(self.w_l, 0.646, "w_l") *
            f.power(self.n_l, 0.2, "n_l") *
            f.power(self.l_n, 0.5, "l_n") *
            f.power(self.n_nw, 0.45, "n_nw")
        )
        return f.result(weight)
