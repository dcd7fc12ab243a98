"""
Loading conditions

Useful load (pilots, cabin crew, passengers, payload, fuel) added to the
empty aircraft to get the weight and CG of one loading condition.

Items are positioned directly, except passengers, whose CG depends on how
the cabin is filled:
- FRONT:  rows filled from the front of the cabin
- REAR:   rows filled from the back of the cabin
- CENTER: passengers spread evenly, CG at the cabin centre
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Sequence
import logging

from aeroweight.core.point import Point
from aeroweight.core.result import Result
from aeroweight.core.units import in_to_ft
from aeroweight.errors import create_geometry_error, create_negative_weight_error
from .aggregator import WeightBalanceSummary
from .items import ComponentEstimate, WeightGroup
from .utils import determinize_dict, moment_center

logger = logging.getLogger(__name__)


class LoadCase(Enum):
    FRONT = "front"
    REAR = "rear"
    CENTER = "center"


# =============================================================================
# USEFUL LOAD ITEMS
# =============================================================================

class UsefulLoadItem:
    """Base for items added on top of the empty aircraft."""

    name: str = "useful_load"

    def weight(self) -> float:
        raise NotImplementedError

    def position(self) -> Result[Point]:
        raise NotImplementedError

    def _check(self) -> Result[float]:
        weight = self.weight()
        if weight < 0:
            return Result.fail(create_negative_weight_error(self.name, weight))
        return Result.ok(weight)

    def estimate(self) -> Result[ComponentEstimate]:
        weight = self._check()
        if weight.is_failure:
            return Result.fail(weight.error)
        return self.position().map(lambda cg: ComponentEstimate(
            name=self.name,
            weight_lb=weight.value,
            cg=cg,
            group=WeightGroup.USEFUL_LOAD,
        ))


@dataclass(frozen=True)
class Pilots(UsefulLoadItem):
    count: float
    weight_each: float
    cg: Point
    name: str = "pilots"

    def weight(self) -> float:
        return self.count * self.weight_each

    def _check(self) -> Result[float]:
        if self.count < 0:
            return Result.fail(create_negative_weight_error(self.name, self.weight()))
        return super()._check()

    def position(self) -> Result[Point]:
        return Result.ok(self.cg)


@dataclass(frozen=True)
class Crew(Pilots):
    """Cabin crew."""
    name: str = "crew"


@dataclass(frozen=True)
class Payload(UsefulLoadItem):
    """Cargo and baggage."""
    load_lb: float
    cg: Point
    name: str = "payload"

    def weight(self) -> float:
        return self.load_lb

    def position(self) -> Result[Point]:
        return Result.ok(self.cg)


@dataclass(frozen=True)
class Fuel(Payload):
    name: str = "fuel"


@dataclass(frozen=True)
class Passengers(UsefulLoadItem):
    """
    Passengers seated in a cabin of equal-pitch rows.

    The occupied length is count / seats_per_row rows; the CG sits at the
    middle of the occupied block for FRONT and REAR, and at the middle of
    the cabin for CENTER.
    """
    count: float
    weight_each: float
    seat_start_x: float      # first row (ft)
    cabin_length: float      # first to last row (ft)
    rows: int
    seats_per_row: int = 6
    load_case: LoadCase = LoadCase.CENTER
    y: float = 0.0
    z: float = 0.0
    name: str = "passengers"

    @classmethod
    def from_layout(
        cls,
        count: float,
        weight_each: float,
        seat_start_x: float,
        rows: int,
        seat_pitch_in: float,
        seats_per_row: int = 6,
        load_case: LoadCase = LoadCase.CENTER,
    ) -> "Passengers":
        """Cabin length from the seat pitch in inches."""
        return cls(
            count=count,
            weight_each=weight_each,
            seat_start_x=seat_start_x,
            cabin_length=rows * in_to_ft(seat_pitch_in),
            rows=rows,
            seats_per_row=seats_per_row,
            load_case=load_case,
        )

    @property
    def capacity(self) -> int:
        return self.rows * self.seats_per_row

    def weight(self) -> float:
        return self.count * self.weight_each

    def _check(self) -> Result[float]:
        if self.count < 0:
            return Result.fail(create_negative_weight_error(self.name, self.weight()))
        return super()._check()

    def position(self) -> Result[Point]:
        if self.rows <= 0 or self.seats_per_row <= 0 or not self.cabin_length > 0:
            return Result.fail(create_geometry_error(
                f"cabin needs positive rows, seats per row and length "
                f"(rows={self.rows}, seats_per_row={self.seats_per_row}, "
                f"cabin_length={self.cabin_length})",
                self.name,
            ))
        if self.count > self.capacity:
            return Result.fail(create_geometry_error(
                f"{self.count:g} passengers exceed {self.capacity} seats",
                self.name,
                self.count,
            ))

        row_length = self.cabin_length / self.rows
        occupied = self.count / self.seats_per_row * row_length
        if self.load_case == LoadCase.FRONT:
            x = self.seat_start_x + occupied / 2.0
        elif self.load_case == LoadCase.REAR:
            x = self.seat_start_x + self.cabin_length - occupied / 2.0
        else:
            x = self.seat_start_x + self.cabin_length / 2.0
        return Result.ok(Point(x, self.y, self.z))


# =============================================================================
# LOADING CONDITION
# =============================================================================

@dataclass
class LoadedAircraft:
    """Empty aircraft plus useful load for one loading condition."""
    condition: str
    empty: WeightBalanceSummary
    items: List[ComponentEstimate]
    total_weight_lb: float
    cg: Point

    @property
    def useful_load_lb(self) -> float:
        return sum(item.weight_lb for item in self.items)

    def to_dict(self) -> Dict[str, Any]:
        return determinize_dict({
            "condition": self.condition,
            "empty_weight_lb": self.empty.total_weight_lb,
            "useful_load_lb": self.useful_load_lb,
            "total_weight_lb": self.total_weight_lb,
            "cg": self.cg.to_dict(),
            "items": [item.to_dict() for item in self.items],
        })


@dataclass
class LoadingCondition:
    """
    A named set of useful load items.

    Usage:
        condition = LoadingCondition("max pax, front", [
            Pilots(2, 190.0, Point(5.3, 0.0, 0.0)),
            Passengers(100, 200.0, 14.0, 41.5, 17, load_case=LoadCase.FRONT),
            Fuel(20000.0, Point(46.0, 0.0, 0.5)),
        ])
        loaded = condition.evaluate(summary).unwrap()
    """
    name: str
    items: Sequence[UsefulLoadItem] = field(default_factory=list)

    def evaluate(self, empty: WeightBalanceSummary) -> Result[LoadedAircraft]:
        estimates: List[ComponentEstimate] = []
        for item in self.items:
            result = item.estimate()
            if result.is_failure:
                logger.warning(f"Loading condition {self.name!r}: {result.error.describe()}")
                return Result.fail(result.error.within(self.name))
            estimates.append(result.value)

        pairs = [(empty.total_weight_lb, empty.cg)]
        pairs.extend((e.weight_lb, e.cg) for e in estimates)
        center = moment_center(pairs, source=self.name)
        if center.is_failure:
            return Result.fail(center.error)

        loaded = LoadedAircraft(
            condition=self.name,
            empty=empty,
            items=estimates,
            total_weight_lb=sum(w for w, _ in pairs),
            cg=center.value,
        )
        logger.info(
            f"Loading condition {self.name!r}: {loaded.total_weight_lb:.1f} lb, "
            f"CG x={loaded.cg.x:.3f} ft"
        )
        return Result.ok(loaded)
