"""
Minimal CLI for coefficient lookups and building cases (no GUI).

Usage examples:
  python -m WindCoeffTool.cli windward --length 100 --height 25 --angle 20
  python -m WindCoeffTool.cli parallel --h-over-l 1.0 --plan-area 600 --output zones.csv
  python -m WindCoeffTool.cli case --input building.txt
  python -m WindCoeffTool.cli check-tables

Commands:
  - windward / leeward / parallel: roof pressure coefficients
  - wall: wall pressure coefficient
  - velocity-pressure: Kz and qz at one height
  - case: design pressures for a TXT (or JSON) building case
  - check-tables: embedded table shapes and integrity report
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional
import csv
import os

from . import api
from . import calibration as CAL
from . import io
from . import tables as T
from .anchors import ANCHORS
from .errors import TableIntegrityError, WindCoeffError


def _read_json(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _fail_on_drift() -> None:
    mismatches: List[str] = []
    for k in CAL.GUARDED:
        if float(ANCHORS[k]) != float(getattr(CAL, k)):
            mismatches.append(f"{k}: anchors={ANCHORS[k]!r} vs calibration={getattr(CAL, k)!r}")
    mismatches.extend(T.all_problems())
    if mismatches:
        raise SystemExit("Calibration drift detected (anchors vs runtime):\n" + "\n".join(" - " + m for m in mismatches))


def _inputs(args: argparse.Namespace, fields: Dict[str, str]) -> Dict[str, Any]:
    """JSON --input (if given) overlaid with any explicit flags."""
    data: Dict[str, Any] = _read_json(args.input) if getattr(args, "input", None) else {}
    for key, attr in fields.items():
        v = getattr(args, attr, None)
        if v is not None:
            data[key] = v
    return data


def _write_output(obj: Any, path: str | None) -> None:
    if not path:
        json.dump(obj, sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
        return
    ext = os.path.splitext(path)[1].lower()
    if ext == ".json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(obj, f, ensure_ascii=False)
    elif ext == ".csv":
        if isinstance(obj, list) and obj and all(isinstance(r, dict) for r in obj):
            # list of records -> one row each
            keys = list(obj[0].keys())
            with open(path, "w", newline="", encoding="utf-8") as f:
                w = csv.writer(f)
                w.writerow(keys)
                for r in obj:
                    w.writerow(["" if r.get(k) is None else r.get(k) for k in keys])
        elif isinstance(obj, dict) and all(not isinstance(v, (list, dict)) for v in obj.values()):
            with open(path, "w", newline="", encoding="utf-8") as f:
                w = csv.writer(f)
                w.writerow(list(obj.keys()))
                w.writerow(["" if obj[k] is None else obj[k] for k in obj.keys()])
        else:
            raise SystemExit("CSV output needs a flat record or a list of records; use .json")
    else:
        raise SystemExit(f"Unsupported output extension: {ext} (use .json or .csv)")


def _flat(out: Dict[str, Any]) -> Dict[str, Any]:
    """Drop nested bookkeeping (clamped flags) so single results fit one CSV row."""
    flat = {k: v for k, v in out.items() if not isinstance(v, dict)}
    for k, v in out.get("clamped", {}).items():
        flat[f"clamped_{k}"] = v
    return flat


def cmd_windward(args: argparse.Namespace) -> int:
    data = _inputs(args, {"length": "length", "height": "height", "angle_deg": "angle", "plan_area": "plan_area"})
    out = api.roof_windward(data)
    _write_output(_flat(out), args.output)
    return 0


def cmd_leeward(args: argparse.Namespace) -> int:
    data = _inputs(args, {"h_over_l": "h_over_l", "angle_deg": "angle", "plan_area": "plan_area"})
    out = api.roof_leeward(data)
    _write_output(_flat(out), args.output)
    return 0


def cmd_parallel(args: argparse.Namespace) -> int:
    data = _inputs(args, {"h_over_l": "h_over_l", "plan_area": "plan_area"})
    out = api.roof_parallel(data)
    ext = os.path.splitext(args.output or "")[1].lower()
    _write_output(out["zones"] if ext == ".csv" else out, args.output)
    return 0


def cmd_wall(args: argparse.Namespace) -> int:
    data = _inputs(args, {"surface": "surface", "length": "length", "width": "width"})
    _write_output(api.wall(data), args.output)
    return 0


def cmd_velocity_pressure(args: argparse.Namespace) -> int:
    data = _inputs(args, {"v_mph": "v_mph", "exposure": "exposure", "z_ft": "z", "kzt": "kzt", "ke": "ke"})
    _write_output(api.velocity_pressure(data), args.output)
    return 0


def cmd_case(args: argparse.Namespace) -> int:
    ext = os.path.splitext(args.input)[1].lower()
    data = _read_json(args.input) if ext == ".json" else io.read_case(args.input)
    out = api.design_pressures(data)
    ext_out = os.path.splitext(args.output or "")[1].lower()
    _write_output(out["surfaces"] if ext_out == ".csv" else out, args.output)
    return 0


def cmd_check_tables(args: argparse.Namespace) -> int:
    report = api.table_report()
    _write_output(report, args.output)
    return 1 if report["problems"] else 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="WindCoeffTool.cli", description="ASCE 7-22 pressure coefficient CLI (no GUI)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging (reports clamped queries)")
    p.add_argument("--fail-on-drift", action="store_true", help="Fail if calibration differs from anchors or a table is malformed")
    sub = p.add_subparsers(dest="cmd", required=True)

    def _common(sp: argparse.ArgumentParser, input_required: bool = False) -> None:
        sp.add_argument("--input", required=input_required, help="Path to input file")
        sp.add_argument("--output", required=False, help="Output file (.json or .csv)")

    p_ww = sub.add_parser("windward", help="Windward roof (Cp1, Cp2), wind normal to ridge")
    p_ww.add_argument("--length", type=float, help="Plan length L along the wind")
    p_ww.add_argument("--height", type=float, help="Mean roof height h")
    p_ww.add_argument("--angle", type=float, help="Roof angle [deg]")
    p_ww.add_argument("--plan-area", type=float, help="Roof plan area for Cp=-1.3 reduction")
    _common(p_ww)
    p_ww.set_defaults(func=cmd_windward)

    p_lw = sub.add_parser("leeward", help="Leeward roof Cp, wind normal to ridge")
    p_lw.add_argument("--h-over-l", type=float, help="Ratio h/L")
    p_lw.add_argument("--angle", type=float, help="Roof angle [deg]")
    p_lw.add_argument("--plan-area", type=float, help="Roof plan area for Cp=-1.3 reduction")
    _common(p_lw)
    p_lw.set_defaults(func=cmd_leeward)

    p_par = sub.add_parser("parallel", help="Roof zones, wind parallel to ridge")
    p_par.add_argument("--h-over-l", type=float, help="Ratio h/L")
    p_par.add_argument("--plan-area", type=float, help="Roof plan area for Cp=-1.3 reduction")
    _common(p_par)
    p_par.set_defaults(func=cmd_parallel)

    p_wall = sub.add_parser("wall", help="Wall Cp")
    p_wall.add_argument("--surface", choices=["windward_wall", "leeward_wall", "side_wall", "parapet"])
    p_wall.add_argument("--length", type=float, help="Plan length L along the wind")
    p_wall.add_argument("--width", type=float, help="Plan width B across the wind")
    _common(p_wall)
    p_wall.set_defaults(func=cmd_wall)

    p_vp = sub.add_parser("velocity-pressure", help="Kz and qz at one height")
    p_vp.add_argument("--v-mph", type=float, help="Basic wind speed [mph]")
    p_vp.add_argument("--exposure", choices=["B", "C", "D"])
    p_vp.add_argument("--z", type=float, help="Height above ground [ft]")
    p_vp.add_argument("--kzt", type=float)
    p_vp.add_argument("--ke", type=float)
    _common(p_vp)
    p_vp.set_defaults(func=cmd_velocity_pressure)

    p_case = sub.add_parser("case", help="Design pressures for a building case (.txt or .json)")
    _common(p_case, input_required=True)
    p_case.set_defaults(func=cmd_case)

    p_chk = sub.add_parser("check-tables", help="Embedded table shapes and integrity report")
    p_chk.add_argument("--output", required=False, help="Output file (.json)")
    p_chk.set_defaults(func=cmd_check_tables)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.fail_on_drift:
        _fail_on_drift()
    try:
        return args.func(args)
    except TableIntegrityError as e:
        logging.getLogger(__name__).critical("embedded coefficient table is malformed: %s", e)
        raise SystemExit(f"fatal: embedded coefficient table is malformed: {e}") from e
    except (WindCoeffError, NotImplementedError, ValueError) as e:
        raise SystemExit(f"error: {e}") from e


if __name__ == "__main__":
    raise SystemExit(main())
