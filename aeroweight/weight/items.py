"""
Weight Item Data Structures

Core data structures for class II weight & balance reporting:
- WeightGroup: breakdown group (structure, propulsion, equipment, useful load)
- ComponentEstimate: one component's computed weight and CG
- GroupSummary: weight and CG of all leaf estimates in one group

All weights in pounds, positions in feet from the nose:
- x: positive aft
- y: positive to starboard
- z: positive up
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from aeroweight.core.point import Point
from aeroweight.core.result import Result
from .utils import moment_center


class WeightGroup(Enum):
    """
    Weight breakdown groups.

    Follows the usual class II split of the empty weight into structure,
    propulsion and fixed equipment.
    """
    STRUCTURE = "structure"
    PROPULSION = "propulsion"
    EQUIPMENT = "equipment"
    USEFUL_LOAD = "useful_load"


GROUP_NAMES: Dict[WeightGroup, str] = {
    WeightGroup.STRUCTURE: "Structure",
    WeightGroup.PROPULSION: "Propulsion",
    WeightGroup.EQUIPMENT: "Fixed Equipment",
    WeightGroup.USEFUL_LOAD: "Useful Load",
}


@dataclass
class ComponentEstimate:
    """
    Computed weight and CG of one component.

    Leaves have a group and no children; assemblies have children and no
    group.
    """
    name: str
    weight_lb: float
    cg: Point
    group: Optional[WeightGroup] = None
    children: List["ComponentEstimate"] = field(default_factory=list)

    @property
    def moment(self) -> Point:
        """Weight moment (weight x CG) in lb-ft."""
        return self.cg * self.weight_lb

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def leaves(self) -> List["ComponentEstimate"]:
        """All leaf estimates below (or equal to) this one, depth first."""
        if self.is_leaf:
            return [self]
        result: List[ComponentEstimate] = []
        for child in self.children:
            result.extend(child.leaves())
        return result

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "weight_lb": self.weight_lb,
            "cg": self.cg.to_dict(),
        }
        if self.group is not None:
            data["group"] = self.group.value
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass
class GroupSummary:
    """
    Summary for one weight group.

    Aggregates all leaf estimates in a group into total weight and CG.
    """
    group: WeightGroup
    name: str
    total_weight_lb: float
    cg: Point
    item_count: int

    @classmethod
    def from_estimates(
        cls,
        group: WeightGroup,
        estimates: List[ComponentEstimate],
    ) -> Result["GroupSummary"]:
        """
        Create a GroupSummary from leaf estimates belonging to ``group``.

        Fails when the group's total weight is not positive.
        """
        name = GROUP_NAMES.get(group, group.value)
        center = moment_center(
            ((e.weight_lb, e.cg) for e in estimates),
            source=f"group:{group.value}",
        )
        return center.map(lambda cg: cls(
            group=group,
            name=name,
            total_weight_lb=sum(e.weight_lb for e in estimates),
            cg=cg,
            item_count=len(estimates),
        ))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "group": self.group.value,
            "name": self.name,
            "total_weight_lb": self.total_weight_lb,
            "cg": self.cg.to_dict(),
            "item_count": self.item_count,
        }
