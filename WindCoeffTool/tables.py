"""
Read-only coefficient tables built once from anchors.py.

AnchorTable2D keeps h/L rows and angle columns as sorted tuples and the grid as
nested ``MappingProxyType`` views, so callers can read but never mutate it.
The rectangular-grid invariant is checked lazily: a lookup of a missing cell
raises TableIntegrityError, and ``problems()`` reports every gap up front for
the CLI drift check.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Generic, List, Mapping, Tuple, TypeVar, Union

from . import anchors as ANC
from . import calibration as CAL
from .errors import TableIntegrityError
from .formulas import area_reduction_factor

V = TypeVar("V", float, Tuple[float, ...])


def _freeze(value: Union[float, Tuple[float, ...]]):
    if isinstance(value, (tuple, list)):
        return tuple(float(v) for v in value)
    return float(value)


@dataclass(frozen=True)
class AnchorTable2D(Generic[V]):
    """Rectangular grid of coefficients: rows keyed by h/L, columns by roof angle [deg]."""
    name: str
    ratio_anchors: Tuple[float, ...]
    angle_anchors: Tuple[float, ...]
    rows: Mapping[float, Mapping[float, V]]

    @classmethod
    def from_nested(cls, name: str, data: Mapping[float, Mapping[float, V]]) -> "AnchorTable2D[V]":
        ratios = tuple(sorted(float(k) for k in data))
        if len(ratios) != len(set(ratios)):
            raise TableIntegrityError(f"{name}: duplicate h/L anchors")
        if len(ratios) < 2:
            raise TableIntegrityError(f"{name}: requires at least two h/L anchors")
        rows = MappingProxyType({
            float(r): MappingProxyType({float(a): _freeze(v) for a, v in sorted(cols.items())})
            for r, cols in data.items()
        })
        # Angle columns come from the first row; other rows are expected to match.
        angles = tuple(rows[ratios[0]].keys())
        if len(angles) < 1:
            raise TableIntegrityError(f"{name}: requires at least one angle column")
        return cls(name=name, ratio_anchors=ratios, angle_anchors=angles, rows=rows)

    @property
    def ratio_domain(self) -> Tuple[float, float]:
        return self.ratio_anchors[0], self.ratio_anchors[-1]

    @property
    def angle_domain(self) -> Tuple[float, float]:
        return self.angle_anchors[0], self.angle_anchors[-1]

    def cell(self, ratio: float, angle: float) -> V:
        """Stored value at an exact (h/L, angle) anchor pair."""
        try:
            return self.rows[ratio][angle]
        except KeyError:
            raise TableIntegrityError(
                f"{self.name}: no value for h/L={ratio:g} at angle={angle:g} deg"
            ) from None

    def column(self, angle: float) -> Tuple[V, ...]:
        """Values down one angle column, one per h/L anchor (ascending h/L)."""
        return tuple(self.cell(r, angle) for r in self.ratio_anchors)

    def problems(self) -> List[str]:
        """Every violation of the rectangular-grid invariant, empty when the table is sound."""
        out: List[str] = []
        expected = set(self.angle_anchors)
        for r in self.ratio_anchors:
            got = set(self.rows[r].keys())
            for a in sorted(expected - got):
                out.append(f"{self.name}: h/L={r:g} is missing angle {a:g}")
            for a in sorted(got - expected):
                out.append(f"{self.name}: h/L={r:g} has extra angle {a:g}")
        return out


@dataclass(frozen=True)
class ZoneRecord:
    """Parallel-to-ridge zone: Cp1 at h/L <= 0.5 and h/L >= 1.0, plus a constant alternate Cp2."""
    label: str
    cp1_low: float
    cp1_high: float
    cp2: float


@dataclass(frozen=True)
class ReductionCurve:
    """Three (area, factor) breakpoints of a continuous, non-increasing reduction curve."""
    breakpoints: Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]

    def __post_init__(self) -> None:
        if len(self.breakpoints) != 3:
            raise ValueError("reduction curve needs exactly three breakpoints")
        areas = [a for a, _ in self.breakpoints]
        factors = [r for _, r in self.breakpoints]
        if not all(a0 < a1 for a0, a1 in zip(areas, areas[1:])):
            raise ValueError("reduction curve areas must be strictly increasing")
        if not all(r0 >= r1 for r0, r1 in zip(factors, factors[1:])):
            raise ValueError("reduction curve factors must be non-increasing")
        if any(r > 1.0 for r in factors):
            raise ValueError("reduction curve factors must be <= 1")

    def factor(self, area: float) -> float:
        return area_reduction_factor(area, self.breakpoints)


# --- Tables (built once at import) ---

WINDWARD: AnchorTable2D[Tuple[float, ...]] = AnchorTable2D.from_nested("windward", ANC.WINDWARD_CP)
LEEWARD: AnchorTable2D[float] = AnchorTable2D.from_nested("leeward", ANC.LEEWARD_CP)

PARALLEL_ZONES: Tuple[ZoneRecord, ...] = tuple(
    ZoneRecord(label, float(lo), float(hi), float(cp2))
    for label, lo, hi, cp2 in ANC.PARALLEL_TO_RIDGE_ZONES
)

AREA_REDUCTION = ReductionCurve((
    (CAL.AREA_A1, CAL.AREA_R1),
    (CAL.AREA_A2, CAL.AREA_R2),
    (CAL.AREA_A3, CAL.AREA_R3),
))

# Leeward wall: (L/B, Cp) anchors, ascending L/B
LEEWARD_WALL: Tuple[Tuple[float, float], ...] = tuple((float(x), float(y)) for x, y in ANC.LEEWARD_WALL_CP)

TERRAIN: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {k: MappingProxyType(dict(v)) for k, v in ANC.TERRAIN.items()}
)


def all_problems() -> List[str]:
    """Integrity report over every embedded grid table."""
    return WINDWARD.problems() + LEEWARD.problems()
