"""
Scalar wind-load parameters (ASCE 7-22 Ch. 26): terrain constants, Kz/Kh, Kd, G, Ke, GCpi, Kzt.

Lookups by category raise ValueError for unknown keys; closed-form parts live in formulas.
"""
from __future__ import annotations

from typing import List, Literal, Mapping, Tuple

from . import anchors as ANC
from . import calibration as CAL
from . import formulas as F
from .tables import TERRAIN

Exposure = Literal["B", "C", "D"]
Enclosure = Literal["enclosed", "partially_enclosed", "partially_open", "open"]
Flexibility = Literal["rigid", "flexible"]
Topography = Literal["none", "ridge_or_valley", "escarpment", "axisymmetrical_hill"]
CrestSide = Literal["upwind", "downwind"]


def terrain_constants(exposure: Exposure) -> Mapping[str, float]:
    """Table 26.11-1 row: alpha, zg, alpha_hat, b_hat, a_bar, b_bar, c, l, e_bar, z_min."""
    try:
        return TERRAIN[exposure]
    except KeyError:
        raise ValueError(f"unsupported exposure category: {exposure!r}") from None


def kz_for_exposure(exposure: Exposure, z_ft: float) -> float:
    t = terrain_constants(exposure)
    return F.kz(z_ft, t["zg"], t["alpha"])


def kh_for_exposure(exposure: Exposure, h_ft: float) -> float:
    """Kh: Kz evaluated at mean roof height."""
    return kz_for_exposure(exposure, h_ft)


def kz_series(exposure: Exposure, z_start: float, z_end: float, z_step: float) -> List[Tuple[float, float]]:
    """(z, Kz) samples from z_start to z_end inclusive in steps of z_step [ft]."""
    if z_start <= 0:
        raise ValueError("z_start must be > 0")
    if z_end <= 0 or z_end < z_start:
        raise ValueError("z_end must be >= z_start and > 0")
    if z_step <= 0:
        raise ValueError("z_step must be > 0")
    out: List[Tuple[float, float]] = []
    i = 0
    z = z_start
    while z <= z_end + 1e-9:
        out.append((z, kz_for_exposure(exposure, z)))
        i += 1
        z = z_start + i * z_step
    return out


def directionality_factor(structure: str) -> float:
    """Kd, Table 26.6-1 (keys as in anchors.DIRECTIONALITY_KD)."""
    try:
        return ANC.DIRECTIONALITY_KD[structure]
    except KeyError:
        raise ValueError(f"unsupported structure type: {structure!r}") from None


def gust_effect_factor(flexibility: Flexibility = "rigid") -> float:
    if flexibility == "rigid":
        return CAL.G_RIGID
    if flexibility == "flexible":
        raise NotImplementedError("gust effect factor for flexible structures is not implemented")
    raise ValueError(f"unsupported structure flexibility: {flexibility!r}")


def ground_elevation_factor(ze_ft: float = 0.0) -> float:
    """Ke; Sec. 26.9 permits 1.0 for every ground elevation."""
    return CAL.KE_DEFAULT


def internal_gcpi(enclosure: Enclosure) -> Tuple[float, float]:
    """(+GCpi, -GCpi), Table 26.13-1."""
    try:
        return ANC.INTERNAL_GCPI[enclosure]
    except KeyError:
        raise ValueError(f"unsupported enclosure type: {enclosure!r}") from None


# --- Topographic factor ---

def topo_k1(topography: Topography, exposure: Exposure, hill_height: float, lh: float) -> float:
    """K1 = (H / Lh) * multiplier(feature, exposure); 1.0 for flat terrain."""
    if hill_height <= 0:
        raise ValueError("H must be > 0")
    if lh <= 0:
        raise ValueError("Lh must be > 0")
    if topography == "none":
        return 1.0
    try:
        mult = ANC.TOPO_K1[topography][exposure]
    except KeyError:
        raise ValueError(f"unsupported topography/exposure: {topography!r}/{exposure!r}") from None
    return hill_height / lh * mult


def topo_k2(topography: Topography, side: CrestSide, lh: float, x: float) -> float:
    if topography == "none":
        return 1.0
    try:
        mu = ANC.TOPO_MU[topography][side]
    except KeyError:
        raise ValueError(f"unsupported topography/crest side: {topography!r}/{side!r}") from None
    return F.topo_k2(x, lh, mu)


def topo_k3(topography: Topography, z: float, lh: float) -> float:
    if topography == "none":
        return 1.0
    try:
        gamma = ANC.TOPO_GAMMA[topography]
    except KeyError:
        raise ValueError(f"unsupported topography type: {topography!r}") from None
    return F.topo_k3(z, lh, gamma)


def topographic_factor(topography: Topography, k1: float, k2: float, k3: float) -> float:
    """Kzt; exactly 1.0 when there is no topographic feature."""
    if topography == "none":
        return 1.0
    if topography not in ANC.TOPO_GAMMA:
        raise ValueError(f"unsupported topography type: {topography!r}")
    return F.kzt(k1, k2, k3)
