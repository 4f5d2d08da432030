"""
Roof and wall external pressure coefficients (ASCE 7-22 Fig. 27.3-1) from the embedded tables.

Pure functions: every call reads the immutable tables and returns plain numbers
or NamedTuples. Out-of-domain h/L and angles are clamped to the table edges;
use ``domain_flags`` when the caller wants to know that happened.
"""
from __future__ import annotations

import math
from typing import List, NamedTuple, Optional, Sequence, Tuple, Literal

from . import calibration as CAL
from . import formulas as F
from .errors import InvalidInputError
from .tables import (
    AnchorTable2D, ReductionCurve, ZoneRecord,
    AREA_REDUCTION, WINDWARD, LEEWARD, PARALLEL_ZONES, LEEWARD_WALL,
)

WallSurface = Literal["windward_wall", "leeward_wall", "side_wall", "parapet"]


class WindwardCp(NamedTuple):
    cp1: float
    cp2: float


class ZoneCp(NamedTuple):
    zone: str
    cp1: float
    cp2: float
    reduction_factor: Optional[float]


# --- Bilinear interpolator ---

def _require_number(**values: float) -> None:
    """NaN has no table edge to clamp to; infinities clamp like any other out-of-range value."""
    for name, v in values.items():
        if math.isnan(v):
            raise InvalidInputError(f"{name} must be a number, got nan")


def interpolate_along_ratio(table: AnchorTable2D, angle: float, h: float):
    """Piecewise-linear value down one angle column at h/L = h (h already clamped).

    The whole column is read first so a gap anywhere in it raises TableIntegrityError.
    """
    column = table.column(angle)
    exact = F.match_exact(h, table.ratio_anchors)
    if exact is not None:
        return column[table.ratio_anchors.index(exact)]
    r0, r1, t = F.bracket(h, table.ratio_anchors)
    i0 = table.ratio_anchors.index(r0)
    i1 = table.ratio_anchors.index(r1)
    return F.blend(column[i0], column[i1], t)


def interpolate_bilinear(table: AnchorTable2D, h_over_l: float, angle_deg: float):
    """Value at (h/L, angle): along h/L at the bounding angle columns, then across angle."""
    _require_number(h_over_l=h_over_l, angle_deg=angle_deg)
    h = F.clamp(h_over_l, *table.ratio_domain)
    a = F.clamp(angle_deg, *table.angle_domain)

    exact = F.match_exact(a, table.angle_anchors)
    if exact is not None:
        return interpolate_along_ratio(table, exact, h)

    a0, a1, t = F.bracket(a, table.angle_anchors)
    v0 = interpolate_along_ratio(table, a0, h)
    v1 = interpolate_along_ratio(table, a1, h)
    return F.blend(v0, v1, t)


def domain_flags(table: AnchorTable2D, h_over_l: float, angle_deg: float) -> Tuple[bool, bool]:
    """(h/L clamped?, angle clamped?) for a query against table."""
    lo_h, hi_h = table.ratio_domain
    lo_a, hi_a = table.angle_domain
    return (not lo_h <= h_over_l <= hi_h), (not lo_a <= angle_deg <= hi_a)


# --- Area reducer ---

def reduce_coefficient(
        cp: float,
        plan_area: Optional[float],
        curve: ReductionCurve = AREA_REDUCTION,
) -> Tuple[float, Optional[float]]:
    """
    Area relief for the flagged table entry only:
        eligible when plan_area > 0 and |cp - (-1.30)| < 1e-9
        -> (cp * R(A), R(A))
    Otherwise returns (cp, None); None means "not eligible", never "factor 1.0".
    """
    if plan_area is not None and math.isnan(plan_area):
        raise InvalidInputError("plan_area must be a number, got nan")
    if plan_area is None or plan_area <= 0:
        return cp, None
    if abs(cp - CAL.AREA_REDUCTION_SENTINEL) >= CAL.MATCH_EPS:
        return cp, None
    r = curve.factor(plan_area)
    return cp * r, r


# --- Roof, wind normal to ridge ---

def windward_roof_cp_detail(
        length: float,
        height: float,
        angle_deg: float,
        plan_area: Optional[float] = None,
) -> Tuple[WindwardCp, Optional[float]]:
    """Windward (Cp1, Cp2) plus the factor applied to Cp1 (None if not applied). Cp2 is never reduced."""
    h = F.h_over_l(length, height)
    cp1, cp2 = interpolate_bilinear(WINDWARD, h, angle_deg)
    cp1, r1 = reduce_coefficient(cp1, plan_area)
    return WindwardCp(cp1, cp2), r1


def windward_roof_cp(
        length: float,
        height: float,
        angle_deg: float,
        plan_area: Optional[float] = None,
) -> WindwardCp:
    """
    Windward roof coefficients for wind normal to ridge.
    Args:
        length: plan length L along the wind (>0)
        height: mean roof height h (>0)
        angle_deg: roof angle [deg]; clamped to 10..90
        plan_area: roof plan area [ft^2]; when given, Cp = -1.30 is area-reduced
    Returns:
        WindwardCp(cp1, cp2)
    """
    return windward_roof_cp_detail(length, height, angle_deg, plan_area)[0]


def leeward_cp_detail(
        h_over_l: float,
        angle_deg: float,
        plan_area: Optional[float] = None,
) -> Tuple[float, Optional[float]]:
    cp = interpolate_bilinear(LEEWARD, h_over_l, angle_deg)
    return reduce_coefficient(cp, plan_area)


def leeward_cp(h_over_l: float, angle_deg: float, plan_area: Optional[float] = None) -> float:
    """Leeward roof Cp for wind normal to ridge; h/L clamped to 0.25..1.0, angle to 10..20 deg."""
    return leeward_cp_detail(h_over_l, angle_deg, plan_area)[0]


# --- Roof, wind parallel to ridge ---

def zone_cp1(zone: ZoneRecord, h_over_l: float) -> float:
    """Cp1 of one zone: low value up to h/L 0.5, high value from 1.0, linear between."""
    _require_number(h_over_l=h_over_l)
    if h_over_l <= CAL.ZONE_HL_LOW:
        return zone.cp1_low
    if h_over_l >= CAL.ZONE_HL_HIGH:
        return zone.cp1_high
    return F.lerp(h_over_l, CAL.ZONE_HL_LOW, zone.cp1_low, CAL.ZONE_HL_HIGH, zone.cp1_high)


def parallel_to_ridge(
        h_over_l: float,
        plan_area: Optional[float] = None,
        zones: Sequence[ZoneRecord] = PARALLEL_ZONES,
) -> List[ZoneCp]:
    """One entry per zone, in table order. Area reduction touches Cp1 only; Cp2 is constant."""
    out: List[ZoneCp] = []
    for z in zones:
        cp1, r = reduce_coefficient(zone_cp1(z, h_over_l), plan_area)
        out.append(ZoneCp(z.label, cp1, z.cp2, r))
    return out


# --- Walls ---

def leeward_wall_cp(l_over_b: float) -> float:
    """Leeward wall Cp, linear in L/B between (1, -0.5), (2, -0.3), (4, -0.2); clamped outside."""
    _require_number(l_over_b=l_over_b)
    xs = [x for x, _ in LEEWARD_WALL]
    x = F.clamp(l_over_b, xs[0], xs[-1])
    exact = F.match_exact(x, xs)
    if exact is not None:
        return LEEWARD_WALL[xs.index(exact)][1]
    x0, x1, t = F.bracket(x, xs)
    return F.blend(LEEWARD_WALL[xs.index(x0)][1], LEEWARD_WALL[xs.index(x1)][1], t)


def wall_cp(surface: WallSurface, length: Optional[float] = None, width: Optional[float] = None) -> float:
    """
    Wall external pressure coefficient.
    Args:
        surface: windward_wall | leeward_wall | side_wall | parapet
        length: L along the wind (leeward wall only)
        width: B across the wind (leeward wall only)
    """
    if surface == "windward_wall":
        return CAL.CP_WINDWARD_WALL
    if surface == "side_wall":
        return CAL.CP_SIDE_WALL
    if surface == "leeward_wall":
        if length is None or width is None:
            raise ValueError("leeward_wall requires length and width")
        return leeward_wall_cp(F.l_over_b(length, width))
    if surface == "parapet":
        raise NotImplementedError("parapets use GCpn, see ASCE 7-22 Sec. 27.3.4")
    raise ValueError(f"unsupported wall surface: {surface!r}")


# --- Series for plots (backend only, lists; no plotting) ---

def series_windward_vs_ratio(angle_deg: float, ratios: Sequence[float]) -> Tuple[List[float], List[float]]:
    """Windward (Cp1 list, Cp2 list) against h/L at a fixed angle, without area reduction."""
    cp1s: List[float] = []
    cp2s: List[float] = []
    for h in ratios:
        cp1, cp2 = interpolate_bilinear(WINDWARD, h, angle_deg)
        cp1s.append(cp1)
        cp2s.append(cp2)
    return cp1s, cp2s


def series_leeward_vs_ratio(angle_deg: float, ratios: Sequence[float]) -> List[float]:
    return [interpolate_bilinear(LEEWARD, h, angle_deg) for h in ratios]


def ratio_grid(lo: float = 0.0, hi: float = 1.25, n: int = 51) -> List[float]:
    """Evenly spaced h/L samples for plotting, endpoints included."""
    if n < 2:
        raise ValueError("n >= 2")
    step = (hi - lo) / (n - 1)
    return [lo + i * step for i in range(n)]
