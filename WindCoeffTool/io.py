"""
Lightweight parser for labeled TXT building case files.

Format: a [BUILDING] and a [WIND] section of ``key: value`` lines; ``#`` starts a
comment line. Decimal commas are normalized. Returns a dict consumable by
api.design_pressures.

    [BUILDING]
    length_ft: 100
    width_ft: 60
    height_ft: 25
    roof_angle_deg: 20
    plan_area_ft2: 600        # optional

    [WIND]
    v_mph: 115
    exposure: C               # optional, default C
    enclosure: enclosed       # optional
    structure: building_mwfrs # optional
    kzt: 1,0                  # optional
"""
from __future__ import annotations

from typing import Any, Dict, List


def _norm_number(s: str) -> float:
    s_clean = s.strip().replace("\u00A0", "").replace(" ", "").replace(",", ".")
    try:
        return float(s_clean)
    except ValueError as e:
        raise ValueError(f"Invalid numeric value: '{s}'") from e


def _parse_kv(lines: List[str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for ln in lines:
        if ":" not in ln:
            continue
        k, v = ln.split(":", 1)
        v = v.split("#", 1)[0]
        out[k.strip().lower()] = v.strip()
    return out


def _sections(text: str) -> Dict[str, List[str]]:
    out: Dict[str, List[str]] = {}
    current = None
    for raw in text.splitlines():
        ln = raw.strip()
        if not ln or ln.startswith("#"):
            continue
        if ln.startswith("[") and ln.endswith("]"):
            current = ln[1:-1].strip().upper()
            out.setdefault(current, [])
            continue
        if current is not None:
            out[current].append(ln)
    return out


def parse_case(text: str) -> Dict[str, Any]:
    sections = _sections(text)
    missing = [name for name in ("BUILDING", "WIND") if name not in sections]
    if missing:
        raise ValueError(f"Invalid case file: missing sections {missing}")

    kv_bld = _parse_kv(sections["BUILDING"])
    kv_wind = _parse_kv(sections["WIND"])

    required = [("BUILDING", k) for k in ("length_ft", "width_ft", "height_ft", "roof_angle_deg") if k not in kv_bld]
    required += [("WIND", k) for k in ("v_mph",) if k not in kv_wind]
    if required:
        raise ValueError(f"Invalid case file: missing keys {[f'{s}.{k}' for s, k in required]}")

    case: Dict[str, Any] = {
        "length": _norm_number(kv_bld["length_ft"]),
        "width": _norm_number(kv_bld["width_ft"]),
        "height": _norm_number(kv_bld["height_ft"]),
        "angle_deg": _norm_number(kv_bld["roof_angle_deg"]),
        "v_mph": _norm_number(kv_wind["v_mph"]),
        "exposure": kv_wind.get("exposure", "C").upper(),
        "enclosure": kv_wind.get("enclosure", "enclosed").lower(),
        "structure": kv_wind.get("structure", "building_mwfrs").lower(),
        "kzt": _norm_number(kv_wind.get("kzt", "1.0")),
        "ke": _norm_number(kv_wind.get("ke", "1.0")),
    }
    if kv_bld.get("plan_area_ft2"):
        case["plan_area"] = _norm_number(kv_bld["plan_area_ft2"])
    return case


def read_case(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_case(f.read())
