import math
from typing import Optional, Sequence, Tuple, TypeVar

from .calibration import MATCH_EPS, QZ_COEF, KZ_COEF, KZ_Z_MIN_FT, KZ_Z_MAX_FT
from .errors import InvalidGeometryError

# A table value is one coefficient or a (Cp1, Cp2) pair.
V = TypeVar("V", float, Tuple[float, ...])

# =============================
# Axis resolver
# =============================

def clamp(value: float, lo: float, hi: float) -> float:
    """Bound value to [lo, hi]. Out-of-range input is clamped, never rejected."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value

def match_exact(value: float, anchors: Sequence[float], eps: float = MATCH_EPS) -> Optional[float]:
    """Return the anchor within eps of value, or None when value sits between anchors."""
    for a in anchors:
        if abs(value - a) < eps:
            return a
    return None

def bracket(value: float, anchors: Sequence[float]) -> Tuple[float, float, float]:
    """
    Adjacent anchors around value and the interpolation fraction:
        lower <= value <= upper,  t = (value - lower) / (upper - lower)
    Args:
        value: query, expected already clamped into [anchors[0], anchors[-1]]
        anchors: ascending, distinct
    Returns:
        (lower, upper, t); t = 0 when lower == upper.
        A value outside the anchors snaps to the nearest edge with t = 0.
    """
    if not anchors:
        raise ValueError("anchors must not be empty")
    for left, right in zip(anchors, anchors[1:]):
        if left <= value <= right:
            span = right - left
            t = (value - left) / span if span != 0 else 0.0
            return left, right, t
    edge = anchors[0] if value <= anchors[0] else anchors[-1]
    return edge, edge, 0.0

def lerp(x: float, x0: float, y0: float, x1: float, y1: float) -> float:
    """Straight line through (x0, y0) and (x1, y1) evaluated at x; y0 for a degenerate span."""
    if abs(x1 - x0) < 1e-12:
        return y0
    t = (x - x0) / (x1 - x0)
    return y0 * (1.0 - t) + y1 * t

def blend(v0: V, v1: V, t: float) -> V:
    """
    Linear mix of two table values (scalars or equal-length tuples):
        v = v0 * (1 - t) + v1 * t
    t = 0 gives v0 and t = 1 gives v1 exactly.
    """
    if isinstance(v0, tuple):
        return tuple(a * (1.0 - t) + b * t for a, b in zip(v0, v1))  # type: ignore[return-value]
    return v0 * (1.0 - t) + v1 * t

# =============================
# Geometry ratios
# =============================

def h_over_l(length: float, height: float) -> float:
    """
    Mean roof height over along-wind plan length:
        h/L = height / length
    Raises InvalidGeometryError for non-positive or non-finite length or height.
    """
    if not (length > 0 and math.isfinite(length)):
        raise InvalidGeometryError(f"length L must be finite and > 0, got {length!r}")
    if not (height > 0 and math.isfinite(height)):
        raise InvalidGeometryError(f"height h must be finite and > 0, got {height!r}")
    return height / length

def l_over_b(length: float, width: float) -> float:
    """Plan aspect L/B (along-wind length over across-wind width)."""
    if not (length > 0 and math.isfinite(length) and width > 0 and math.isfinite(width)):
        raise InvalidGeometryError(f"length L and width B must be finite and > 0, got {length!r}, {width!r}")
    return length / width

# =============================
# Area reduction curve
# =============================

def area_reduction_factor(area: float, breakpoints: Sequence[Tuple[float, float]]) -> float:
    """
    Piecewise-linear reduction factor R(A) over three (area, factor) breakpoints:
        A <= A1        -> R1
        A1 < A <= A2   -> linear R1..R2
        A2 < A < A3    -> linear R2..R3
        A >= A3        -> R3
    Args:
        area: plan area [ft^2]
        breakpoints: ((A1, R1), (A2, R2), (A3, R3)), areas ascending
    Returns:
        float: factor in (0, 1]
    """
    (a1, r1), (a2, r2), (a3, r3) = breakpoints
    if area <= a1:
        return r1
    if area >= a3:
        return r3
    if area <= a2:
        return lerp(area, a1, r1, a2, r2)  # 100..250 -> 1.00..0.90
    return lerp(area, a2, r2, a3, r3)      # 250..1000 -> 0.90..0.80

# =============================
# Velocity pressure (Ch. 26)
# =============================

def kz(z_ft: float, zg_ft: float, alpha: float) -> float:
    """
    Velocity pressure exposure coefficient, Table 26.10-1:
        Kz = 2.41 * (max(z, 15) / zg) ^ (2 / alpha)   for z <= zg
        Kz = 2.41                                     for zg < z <= 3280 ft
    Args:
        z_ft: height above ground [ft] (>0, <=3280)
        zg_ft: boundary layer height [ft] (>0)
        alpha: power law exponent (>0)
    Returns:
        float: Kz [-]
    """
    if z_ft <= 0:
        raise ValueError("z must be > 0")
    if zg_ft <= 0:
        raise ValueError("zg must be > 0")
    if alpha <= 0:
        raise ValueError("alpha must be > 0")
    if z_ft < KZ_Z_MIN_FT:
        return KZ_COEF * (KZ_Z_MIN_FT / zg_ft) ** (2.0 / alpha)
    if z_ft <= zg_ft:
        return KZ_COEF * (z_ft / zg_ft) ** (2.0 / alpha)
    if z_ft <= KZ_Z_MAX_FT:
        return KZ_COEF
    raise ValueError(f"z must be <= {KZ_Z_MAX_FT:g} ft")

def velocity_pressure(v_mph: float, kz_value: float, kzt: float = 1.0, ke: float = 1.0) -> float:
    """
    Velocity pressure, Eq. 26.10-1:
        qz = 0.00256 * Kz * Kzt * Ke * V^2   [psf]
    """
    if v_mph < 0:
        raise ValueError("V must be >= 0")
    return QZ_COEF * kz_value * kzt * ke * v_mph * v_mph

# =============================
# Topographic factor (Sec. 26.8)
# =============================

def topo_k2(x: float, lh: float, mu: float) -> float:
    """K2 = max(1 - |x| / (mu * Lh), 0); x is the distance from the crest."""
    if x <= 0:
        raise ValueError("x must be > 0")
    if lh <= 0:
        raise ValueError("Lh must be > 0")
    return max(1.0 - abs(x) / (mu * lh), 0.0)

def topo_k3(z: float, lh: float, gamma: float) -> float:
    """K3 = exp(-gamma * z / Lh); z is the height above local ground."""
    if z <= 0:
        raise ValueError("z must be > 0")
    if lh <= 0:
        raise ValueError("Lh must be > 0")
    return math.exp(-gamma * z / lh)

def kzt(k1: float, k2: float, k3: float) -> float:
    """Kzt = (1 + K1*K2*K3)^2, Eq. 26.8-1."""
    return (1.0 + k1 * k2 * k3) ** 2

# =============================
# Design pressure (Eq. 27.3-1)
# =============================

def design_pressure(
        q: float, kd: float, g: float, cp: float, qi: float, gcpi: Tuple[float, float],
) -> Tuple[float, float]:
    """
    Design wind pressure on a surface for both internal-pressure signs:
        p = q * Kd * G * Cp - qi * Kd * (GCpi)
    Args:
        q: qz (windward wall) or qh (other surfaces) [psf]
        kd: directionality factor
        g: gust effect factor
        cp: external pressure coefficient
        qi: internal velocity pressure [psf]
        gcpi: (+GCpi, -GCpi)
    Returns:
        (p with +GCpi, p with -GCpi) [psf]
    """
    external = q * kd * g * cp
    return external - qi * kd * gcpi[0], external - qi * kd * gcpi[1]
