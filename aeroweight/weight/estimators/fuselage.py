"""
Fuselage structure estimator

Reference: Raymer, "Aircraft Design: A Conceptual Approach", ch. 15.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from aeroweight.core.point import Point
from aeroweight.core.result import Result
from ..components import LeafComponent, parameter
from ..formulas import Formula
from ..items import WeightGroup


FUSELAGE_COEFFICIENT = 0.3280


@dataclass(frozen=True)
class FuselageStructure(LeafComponent):
    """
    Fuselage shell, frames and floors.

        W = 0.3280 K_door K_lg (W_dg N_z)^0.5 L^0.25 S_f^0.302 (1 + K_ws)^0.04 (L/D)^0.1

    The CG sits on the fuselage axis at a fraction of the structural length
    measured from the nose (typically 0.42 - 0.45 with wing-mounted engines).
    """
    KEY: ClassVar[str] = "fuselage_structure"
    GROUP: ClassVar[WeightGroup] = WeightGroup.STRUCTURE
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ("k_door", "k_lg", "l_fs", "s_f", "k_ws", "d_f")
    CG_FIELDS: ClassVar[Tuple[str, ...]] = ("l_fs", "x_cg_frac", "y_cg", "z_cg")

    # 1.0 no cargo door; 1.06 one side door; 1.12 two side doors or aft
    # clamshell; 1.25 two side doors and aft clamshell
    k_door: Optional[float] = parameter()
    k_lg: Optional[float] = parameter()  # 1.12 for fuselage-mounted main gear, 1.0 otherwise
    l_fs: Optional[float] = parameter()  # fuselage structural length (ft)
    s_f: Optional[float] = parameter()   # fuselage wetted area (ft^2)
    k_ws: Optional[float] = parameter()  # 0.75 [(1 + 2 lambda)/(1 + lambda)] B_w tan(sweep) / L
    d_f: Optional[float] = parameter()   # maximum fuselage depth (ft)

    x_cg_frac: Optional[float] = parameter("x_cg_frac_{key}")
    y_cg: Optional[float] = parameter("y_cg_{key}")
    z_cg: Optional[float] = parameter("z_cg_{key}")

    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        f = Formula(self.name)
        weight = (
            FUSELAGE_COEFFICIENT *
            self.k_door *
            self.k_lg *
            f.power(w_dg * n_z, 0.5, "w_dg * n_z") *
            f.power(self.l_fs, 0.25, "l_fs") *
            f.power(self.s_f, 0.302, "s_f") *
            f.power(1.0 + self.k_ws, 0.04, "1 + k_ws") *
            f.power(f.ratio(self.l_fs, self.d_f, "d_f"), 0.1, "l_fs / d_f")
        )
        return f.result(weight)

    def _locate(self) -> Result[Point]:
        return Result.ok(Point(self.x_cg_frac * self.l_fs, self.y_cg, self.z_cg))
