"""
Parameter Source

Immutable symbol -> value table read once, before any component is built,
from one or more CSV parameter lists.

File format (one parameter per row):

    symbol,value[,unit,comment...]
    s_w,1000.0,ft2,reference wing area

A header row whose first cell is "symbol" is skipped, as are blank
rows and rows whose first cell starts with "#". Extra columns are ignored.
When a symbol appears more than once (within a file or across files), the
last occurrence wins.

Malformed rows are never dropped silently: every problem across all files is
collected and raised together as a ParameterParseError before any
computation starts. "Absent" (a symbol never provided) is a separate
condition that components report later as a Missing Parameter failure.
"""

from __future__ import annotations
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union
import csv
import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from aeroweight.errors import (
    ErrorAggregator,
    ParameterParseError,
    create_malformed_parameter_error,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ParameterRecord(BaseModel):
    """One validated row of a parameter list."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    symbol: str = Field(..., min_length=1, description="Parameter symbol, e.g. s_w")
    value: float = Field(..., allow_inf_nan=False, description="Numeric value")


class ParameterSet(Mapping[str, float]):
    """
    Immutable parameter snapshot.

    Components only ever call lookup(); the Mapping interface is provided for
    reporting and tests.
    """

    def __init__(self, values: Optional[Mapping[str, float]] = None):
        self._values = MappingProxyType(dict(values or {}))

    @classmethod
    def from_records(cls, records: Iterable[ParameterRecord]) -> "ParameterSet":
        values: Dict[str, float] = {}
        for record in records:
            if record.symbol in values:
                logger.debug(
                    f"Duplicate symbol {record.symbol!r}: "
                    f"{values[record.symbol]} replaced by {record.value}"
                )
            values[record.symbol] = record.value
        return cls(values)

    def lookup(self, name: str) -> Optional[float]:
        """Value for ``name``, or None when it was never provided."""
        return self._values.get(name)

    def with_overrides(self, overrides: Mapping[str, float]) -> "ParameterSet":
        """New set with ``overrides`` applied (last write wins)."""
        merged = dict(self._values)
        merged.update(overrides)
        return ParameterSet(merged)

    def without(self, *names: str) -> "ParameterSet":
        """New set with ``names`` removed."""
        return ParameterSet({k: v for k, v in self._values.items() if k not in names})

    def __getitem__(self, name: str) -> float:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParameterSet({len(self)} symbols)"


def _iter_rows(path: Path) -> Iterator[Tuple[int, List[str]]]:
    with open(path, newline="", encoding="utf-8") as f:
        for line_no, row in enumerate(csv.reader(f), start=1):
            if not row or all(not cell.strip() for cell in row):
                continue
            first = row[0].strip()
            if first.startswith("#"):
                continue
            if first.lower() == "symbol":
                continue
            yield line_no, row


def parse_parameter_file(path: PathLike, aggregator: ErrorAggregator) -> List[ParameterRecord]:
    """
    Parse one CSV parameter list.

    Malformed rows, and a file that is not valid UTF-8, are added to
    ``aggregator``; valid rows are returned in file order.
    """
    path = Path(path)
    records: List[ParameterRecord] = []

    try:
        for line_no, row in _iter_rows(path):
            source = f"{path.name}:{line_no}"
            symbol = row[0].strip()

            if len(row) < 2:
                aggregator.add(create_malformed_parameter_error(
                    message="row has no value column",
                    source=source,
                    symbol=symbol or None,
                ))
                continue

            try:
                records.append(ParameterRecord(symbol=symbol, value=row[1].strip()))
            except ValidationError as exc:
                reasons = "; ".join(
                    f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                    for err in exc.errors()
                )
                aggregator.add(create_malformed_parameter_error(
                    message=reasons,
                    source=source,
                    symbol=symbol or None,
                    actual=row[1].strip(),
                ))
    except UnicodeDecodeError as exc:
        aggregator.add(create_malformed_parameter_error(
            message=f"file is not valid UTF-8 ({exc.reason} at byte {exc.start})",
            source=path.name,
        ))

    logger.debug(f"Parsed {len(records)} parameter(s) from {path}")
    return records


def load_parameters(*paths: PathLike) -> ParameterSet:
    """
    Build a ParameterSet from one or more CSV files.

    Files are applied in order, so later files override earlier ones.

    Raises:
        FileNotFoundError: if a file does not exist
        ParameterParseError: if any row in any file is malformed
    """
    aggregator = ErrorAggregator()
    records: List[ParameterRecord] = []

    for path in paths:
        if not Path(path).is_file():
            raise FileNotFoundError(f"Parameter file not found: {path}")
        records.extend(parse_parameter_file(path, aggregator))

    if aggregator.has_errors():
        raise ParameterParseError(aggregator.errors)

    parameters = ParameterSet.from_records(records)
    logger.info(f"Loaded {len(parameters)} parameter(s) from {len(paths)} file(s)")
    return parameters
