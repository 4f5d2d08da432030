"""
Thin, stable API for the CLI and UI layers.

Contracts (dict in, JSON-serialisable dict out):
  - roof_windward(inputs) -> dict
  - roof_leeward(inputs) -> dict
  - roof_parallel(inputs) -> dict
  - wall(inputs) -> dict
  - velocity_pressure(inputs) -> dict
  - design_pressures(inputs) -> dict
  - table_report() -> dict

Validation is performed via Pydantic schemas. Schema failures on length/height/width
surface as InvalidGeometryError, any other as InvalidInputError. Clamped h/L or
angle queries are reported under "clamped" and logged at DEBUG.
"""
from __future__ import annotations

from typing import Any, Dict, List, Type, TypeVar
import logging

from pydantic import BaseModel, ValidationError

from . import analysis as A
from . import calibration as CAL
from . import formulas as F
from . import parameters as P
from . import tables as T
from .anchors import ORIGINS
from .errors import InvalidGeometryError, InvalidInputError
from .schemas import (
    WindwardRoofInputs, LeewardRoofInputs, ParallelRoofInputs,
    WallInputs, VelocityPressureInputs, BuildingInputs,
)

M = TypeVar("M", bound=BaseModel)

_GEOMETRY_FIELDS = {"length", "height", "width"}


def _validate(model: Type[M], inputs: Dict[str, Any]) -> M:
    try:
        return model(**inputs)
    except ValidationError as e:
        fields = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
        cls = InvalidGeometryError if fields & _GEOMETRY_FIELDS else InvalidInputError
        raise cls(f"invalid {model.__name__}: {', '.join(sorted(fields)) or 'input'}\n{e}") from e


def _clamped(table: T.AnchorTable2D, h_over_l: float, angle_deg: float) -> Dict[str, bool]:
    h_c, a_c = A.domain_flags(table, h_over_l, angle_deg)
    if h_c or a_c:
        logging.getLogger(__name__).debug(
            "%s query clamped: h/L=%g (domain %g..%g), angle=%g (domain %g..%g)",
            table.name, h_over_l, *table.ratio_domain, angle_deg, *table.angle_domain,
        )
    return {"h_over_l": h_c, "angle": a_c}


def roof_windward(inputs: Dict[str, Any]) -> Dict[str, Any]:
    """Windward roof (Cp1, Cp2), wind normal to ridge."""
    v = _validate(WindwardRoofInputs, inputs)
    cp, r = A.windward_roof_cp_detail(v.length, v.height, v.angle_deg, v.plan_area)
    h = F.h_over_l(v.length, v.height)
    return {
        "h_over_l": h,
        "angle_deg": v.angle_deg,
        "cp1": cp.cp1,
        "cp2": cp.cp2,
        "reduction_factor": r,
        "clamped": _clamped(T.WINDWARD, h, v.angle_deg),
    }


def roof_leeward(inputs: Dict[str, Any]) -> Dict[str, Any]:
    """Leeward roof Cp, wind normal to ridge."""
    v = _validate(LeewardRoofInputs, inputs)
    cp, r = A.leeward_cp_detail(v.h_over_l, v.angle_deg, v.plan_area)
    return {
        "h_over_l": v.h_over_l,
        "angle_deg": v.angle_deg,
        "cp": cp,
        "reduction_factor": r,
        "clamped": _clamped(T.LEEWARD, v.h_over_l, v.angle_deg),
    }


def roof_parallel(inputs: Dict[str, Any]) -> Dict[str, Any]:
    """Roof zones for wind parallel to ridge, in zone order."""
    v = _validate(ParallelRoofInputs, inputs)
    zones = A.parallel_to_ridge(v.h_over_l, v.plan_area)
    return {
        "h_over_l": v.h_over_l,
        "zones": [z._asdict() for z in zones],
    }


def wall(inputs: Dict[str, Any]) -> Dict[str, Any]:
    v = _validate(WallInputs, inputs)
    out: Dict[str, Any] = {"surface": v.surface, "cp": A.wall_cp(v.surface, v.length, v.width)}
    if v.length is not None and v.width is not None:
        out["l_over_b"] = F.l_over_b(v.length, v.width)
    return out


def velocity_pressure(inputs: Dict[str, Any]) -> Dict[str, Any]:
    """qz at one height for the given exposure."""
    v = _validate(VelocityPressureInputs, inputs)
    kz = P.kz_for_exposure(v.exposure, v.z_ft)
    return {
        "exposure": v.exposure,
        "z_ft": v.z_ft,
        "kz": kz,
        "kzt": v.kzt,
        "ke": v.ke,
        "qz_psf": F.velocity_pressure(v.v_mph, kz, v.kzt, v.ke),
    }


def design_pressures(inputs: Dict[str, Any]) -> Dict[str, Any]:
    """Design pressures on walls and roof for one building, wind normal to ridge.

    All surfaces use qh (velocity pressure at mean roof height), also as qi.
    Rejected caller input propagates without a traceback in the log.
    """
    try:
        return _design_pressures_impl(inputs)
    except InvalidInputError:
        raise
    except Exception:
        logging.getLogger(__name__).exception("design_pressures failed")
        raise


def _design_pressures_impl(inputs: Dict[str, Any]) -> Dict[str, Any]:
    b = _validate(BuildingInputs, inputs)
    kh = P.kh_for_exposure(b.exposure, b.height)
    qh = F.velocity_pressure(b.v_mph, kh, b.kzt, b.ke)
    kd = P.directionality_factor(b.structure)
    g = P.gust_effect_factor("rigid")
    gcpi = P.internal_gcpi(b.enclosure)

    h = F.h_over_l(b.length, b.height)
    roof_ww, r1 = A.windward_roof_cp_detail(b.length, b.height, b.angle_deg, b.plan_area)
    roof_lw, r_lw = A.leeward_cp_detail(h, b.angle_deg, b.plan_area)

    cps = [
        ("windward_wall", A.wall_cp("windward_wall"), None),
        ("leeward_wall", A.wall_cp("leeward_wall", b.length, b.width), None),
        ("side_wall", A.wall_cp("side_wall"), None),
        ("roof_windward_cp1", roof_ww.cp1, r1),
        ("roof_windward_cp2", roof_ww.cp2, None),
        ("roof_leeward", roof_lw, r_lw),
    ]
    surfaces: List[Dict[str, Any]] = []
    for name, cp, r in cps:
        p_pos, p_neg = F.design_pressure(qh, kd, g, cp, qh, gcpi)
        surfaces.append({
            "surface": name,
            "cp": cp,
            "reduction_factor": r,
            "p_pos_gcpi_psf": p_pos,
            "p_neg_gcpi_psf": p_neg,
        })

    return {
        "edition": CAL.EDITION,
        "h_over_l": h,
        "kh": kh,
        "qh_psf": qh,
        "kd": kd,
        "g": g,
        "gcpi": list(gcpi),
        "surfaces": surfaces,
        "clamped": {
            "windward": _clamped(T.WINDWARD, h, b.angle_deg),
            "leeward": _clamped(T.LEEWARD, h, b.angle_deg),
        },
    }


def table_report() -> Dict[str, Any]:
    """Embedded table shapes, source notes and any rectangular-grid violations."""
    def _shape(t: T.AnchorTable2D) -> Dict[str, Any]:
        return {"h_over_l": list(t.ratio_anchors), "angle_deg": list(t.angle_anchors)}
    return {
        "edition": CAL.EDITION,
        "tables": {"windward": _shape(T.WINDWARD), "leeward": _shape(T.LEEWARD)},
        "zones": [z.label for z in T.PARALLEL_ZONES],
        "problems": T.all_problems(),
        "origins": dict(ORIGINS),
    }
