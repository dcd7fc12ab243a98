"""
Weight Utilities

Moment-method helpers and deterministic serialization for reports.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, Tuple
import json

from aeroweight.core.point import Point
from aeroweight.core.result import Result
from aeroweight.errors import create_geometry_error

# Total weights at or below this cannot locate a CG
MIN_TOTAL_WEIGHT = 1e-10


def moment_center(
    pairs: Iterable[Tuple[float, Point]],
    source: str,
) -> Result[Point]:
    """
    Weighted-moment CG of (weight, position) pairs.

    Folds the pairs into (sum of weights, sum of weight * position) and
    divides once. Fails with an Invalid Geometry error when the total weight
    is not positive.
    """
    total_weight = 0.0
    total_moment = Point.origin()
    for weight, position in pairs:
        total_weight += weight
        total_moment = total_moment + position * weight

    if not total_weight > MIN_TOTAL_WEIGHT:
        return Result.fail(create_geometry_error(
            f"cannot locate CG: total weight is {total_weight!r} lb",
            source,
            total_weight,
        ))
    return Result.ok(total_moment / total_weight)


def determinize_dict(data: Dict[str, Any], precision: int = 6) -> Dict[str, Any]:
    """
    Make a dictionary deterministic for hashing and comparison.

    Operations:
    - Sorts all keys recursively
    - Rounds floats to consistent precision
    - Ensures consistent JSON serialization

    Args:
        data: Dictionary to determinize
        precision: Float rounding precision (default: 6)

    Returns:
        Deterministic dictionary with sorted keys and rounded floats
    """
    def _process(obj: Any) -> Any:
        if isinstance(obj, float):
            return round(obj, precision)
        elif isinstance(obj, dict):
            return {k: _process(v) for k, v in sorted(obj.items())}
        elif isinstance(obj, (list, tuple)):
            return [_process(item) for item in obj]
        elif isinstance(obj, (int, str, bool, type(None))):
            return obj
        else:
            return str(obj)

    processed = _process(data)
    return json.loads(json.dumps(processed, sort_keys=True))
