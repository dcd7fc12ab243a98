"""
Component contract

Every weight & balance contributor, leaf or assembly, implements Component:

    from_parameters(parameters) -> component     (never fails)
    weight(w_dg, n_z)           -> Result[float]  (lb)
    center_of_gravity(w_dg, n_z) -> Result[Point]  (ft; leaves ignore the design point)

Leaf components are frozen dataclasses whose fields are parameter values
(None when the Parameter Source does not have the symbol). Absence is only
reported when a formula actually needs the field, and then every absent
symbol of that formula is named at once.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Optional, Tuple
import logging
import math

from aeroweight.core.parameters import ParameterSet
from aeroweight.core.point import Point
from aeroweight.core.result import Result
from aeroweight.errors import (
    create_missing_parameter_error,
    create_negative_weight_error,
    create_non_finite_error,
)
from .items import ComponentEstimate, WeightGroup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeightPolicy:
    """
    How leaf weights are checked.

    allow_negative_weight: when True a negative weight is logged as a
        warning and passed through instead of failing the computation.
    """
    allow_negative_weight: bool = False


DEFAULT_POLICY = WeightPolicy()


def parameter(symbol: Optional[str] = None) -> Any:
    """
    Dataclass field holding one optional parameter value.

    ``symbol`` is the name looked up in the Parameter Source; it defaults to
    the field name and may contain ``{key}``, which is replaced by the
    component's KEY (e.g. "x_cg_{key}" -> "x_cg_nacelle").
    """
    return field(default=None, metadata={"symbol": symbol})


class Component(ABC):
    """Uniform weight & balance capability set."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Component name used in failure paths and reports."""

    @abstractmethod
    def weight(self, w_dg: float, n_z: float) -> Result[float]:
        """
        Component weight in lb.

        Args:
            w_dg: design gross weight (lb)
            n_z: ultimate load factor (1.5 x limit load factor)
        """

    @abstractmethod
    def center_of_gravity(
        self,
        w_dg: Optional[float] = None,
        n_z: Optional[float] = None,
    ) -> Result[Point]:
        """
        Component CG in the aircraft frame (ft).

        Leaves locate themselves from their own fields and ignore the design
        point. Assemblies weight their children, so they need w_dg and n_z.
        """

    @abstractmethod
    def required_symbols(self) -> List[str]:
        """Every parameter symbol this component reads."""

    @abstractmethod
    def estimate(self, w_dg: float, n_z: float) -> Result[ComponentEstimate]:
        """Weight and CG together, with the breakdown below this component."""


@dataclass(frozen=True)
class LeafComponent(Component):
    """
    Base for components that evaluate one empirical formula.

    Subclasses set KEY, GROUP, WEIGHT_FIELDS and CG_FIELDS and implement
    _estimate_weight() and _locate(). The base class checks that every
    field a computation needs is present before calling them, and checks the
    resulting weight.
    """
    KEY: ClassVar[str] = ""
    GROUP: ClassVar[WeightGroup] = WeightGroup.EQUIPMENT
    WEIGHT_FIELDS: ClassVar[Tuple[str, ...]] = ()
    CG_FIELDS: ClassVar[Tuple[str, ...]] = ()

    policy: WeightPolicy = field(default=DEFAULT_POLICY, repr=False, compare=False)

    @classmethod
    def symbol_map(cls) -> Dict[str, str]:
        """Field name -> parameter symbol."""
        mapping = {}
        for f in fields(cls):
            if "symbol" not in f.metadata:
                continue
            symbol = f.metadata["symbol"] or f.name
            mapping[f.name] = symbol.format(key=cls.KEY)
        return mapping

    @classmethod
    def from_parameters(
        cls,
        parameters: ParameterSet,
        policy: Optional[WeightPolicy] = None,
    ) -> "LeafComponent":
        values = {
            name: parameters.lookup(symbol)
            for name, symbol in cls.symbol_map().items()
        }
        return cls(policy=policy or DEFAULT_POLICY, **values)

    @property
    def name(self) -> str:
        return self.KEY

    def required_symbols(self) -> List[str]:
        return list(self.symbol_map().values())

    def _missing(self, field_names: Tuple[str, ...]) -> List[str]:
        symbols = self.symbol_map()
        return [symbols[n] for n in field_names if getattr(self, n) is None]

    def _require(self, field_names: Tuple[str, ...]) -> Optional[Result[Any]]:
        missing = self._missing(field_names)
        if not missing:
            return None
        error = create_missing_parameter_error(self.name, missing)
        logger.debug(error.describe())
        return Result.fail(error)

    def weight(self, w_dg: float, n_z: float) -> Result[float]:
        failure = self._require(self.WEIGHT_FIELDS)
        if failure is not None:
            return failure
        return self._estimate_weight(w_dg, n_z).and_then(self._check_weight)

    def center_of_gravity(
        self,
        w_dg: Optional[float] = None,
        n_z: Optional[float] = None,
    ) -> Result[Point]:
        failure = self._require(self.CG_FIELDS)
        if failure is not None:
            return failure
        return self._locate()

    def estimate(self, w_dg: float, n_z: float) -> Result[ComponentEstimate]:
        weight = self.weight(w_dg, n_z)
        if weight.is_failure:
            return Result.fail(weight.error)
        cg = self.center_of_gravity()
        if cg.is_failure:
            return Result.fail(cg.error)
        return Result.ok(ComponentEstimate(
            name=self.name,
            weight_lb=weight.value,
            cg=cg.value,
            group=self.GROUP,
        ))

    def _check_weight(self, value: float) -> Result[float]:
        if isinstance(value, complex) or not math.isfinite(value):
            error = create_non_finite_error(self.name, value)
            logger.error(error.describe())
            return Result.fail(error)
        if value < 0:
            if self.policy.allow_negative_weight:
                logger.warning(f"{self.name}: negative weight {value:.3f} lb accepted by policy")
                return Result.ok(value)
            error = create_negative_weight_error(self.name, value)
            logger.error(error.describe())
            return Result.fail(error)
        return Result.ok(value)

    @abstractmethod
    def _estimate_weight(self, w_dg: float, n_z: float) -> Result[float]:
        """Evaluate the weight formula; all WEIGHT_FIELDS are present."""

    @abstractmethod
    def _locate(self) -> Result[Point]:
        """Evaluate the CG; all CG_FIELDS are present."""


@dataclass(frozen=True)
class PointMassComponent(LeafComponent):
    """Leaf whose CG is supplied directly as x_cg_<key>, y_cg_<key>, z_cg_<key>."""
    CG_FIELDS: ClassVar[Tuple[str, ...]] = ("x_cg", "y_cg", "z_cg")

    x_cg: Optional[float] = parameter("x_cg_{key}")
    y_cg: Optional[float] = parameter("y_cg_{key}")
    z_cg: Optional[float] = parameter("z_cg_{key}")

    def _locate(self) -> Result[Point]:
        return Result.ok(Point(self.x_cg, self.y_cg, self.z_cg))
