import json
import logging
import typing

import pytest

from WindCoeffTool import analysis as A
from WindCoeffTool import api
from WindCoeffTool import tables as T
from WindCoeffTool.anchors import DIRECTIONALITY_KD
from WindCoeffTool.schemas import StructureType
from WindCoeffTool.errors import InvalidGeometryError, InvalidInputError, TableIntegrityError

BUILDING = {"length": 100.0, "width": 60.0, "height": 25.0, "angle_deg": 20.0, "v_mph": 115.0}


def test_roof_windward():
    out = api.roof_windward({"length": 100.0, "height": 25.0, "angle_deg": 20.0})
    assert out["h_over_l"] == 0.25
    assert (out["cp1"], out["cp2"]) == (-0.3, 0.2)
    assert out["reduction_factor"] is None
    assert out["clamped"] == {"h_over_l": False, "angle": False}
    json.dumps(out)


def test_roof_windward_reduced():
    out = api.roof_windward({"length": 20.0, "height": 20.0, "angle_deg": 10.0, "plan_area": 1000.0})
    assert out["reduction_factor"] == 0.8
    assert out["cp1"] == pytest.approx(-1.04)
    assert out["cp2"] == -0.18


def test_roof_windward_clamped_logs_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="WindCoeffTool.api")
    out = api.roof_windward({"length": 100.0, "height": 25.0, "angle_deg": 95.0})
    assert out["clamped"] == {"h_over_l": False, "angle": True}
    assert "windward query clamped" in caplog.text


def test_roof_windward_geometry_error():
    with pytest.raises(InvalidGeometryError):
        api.roof_windward({"length": 0.0, "height": 25.0, "angle_deg": 20.0})
    with pytest.raises(InvalidGeometryError):
        api.roof_windward({"length": 100.0, "height": -3.0, "angle_deg": 20.0})


def test_roof_windward_input_error_is_not_geometry():
    with pytest.raises(InvalidInputError) as exc:
        api.roof_windward({"length": 100.0, "height": 25.0, "angle_deg": "steep"})
    assert not isinstance(exc.value, InvalidGeometryError)
    with pytest.raises(InvalidInputError):
        api.roof_windward({"length": 100.0, "height": 25.0})


def test_roof_leeward():
    out = api.roof_leeward({"h_over_l": 0.1, "angle_deg": 10.0})
    assert out["cp"] == -0.30
    assert out["clamped"] == {"h_over_l": True, "angle": False}
    mid = api.roof_leeward({"h_over_l": 0.5, "angle_deg": 17.5})
    assert mid["cp"] == pytest.approx(-0.55)
    assert mid["reduction_factor"] is None


def test_roof_leeward_with_area():
    out = api.roof_leeward({"h_over_l": 1.0, "angle_deg": 10.0, "plan_area": 600.0})
    assert out["cp"] == -0.70
    assert out["reduction_factor"] is None


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_inputs_are_rejected(bad):
    with pytest.raises(InvalidInputError):
        api.roof_leeward({"h_over_l": bad, "angle_deg": 10.0})
    with pytest.raises(InvalidInputError):
        api.roof_leeward({"h_over_l": 0.5, "angle_deg": bad})
    with pytest.raises(InvalidInputError):
        api.roof_parallel({"h_over_l": bad})
    with pytest.raises(InvalidInputError):
        api.roof_parallel({"h_over_l": 0.5, "plan_area": bad})
    with pytest.raises(InvalidGeometryError):
        api.roof_windward({"length": bad, "height": 25.0, "angle_deg": 20.0})


def test_roof_parallel():
    out = api.roof_parallel({"h_over_l": 1.0, "plan_area": 250.0})
    assert [z["zone"] for z in out["zones"]] == ["0 to h/2", "h/2 to h", "h to 2h", "> 2h"]
    first = out["zones"][0]
    assert first["reduction_factor"] == 0.9
    assert first["cp1"] == pytest.approx(-1.17)
    assert set(first) == {"zone", "cp1", "cp2", "reduction_factor"}


def test_wall():
    assert api.wall({"surface": "windward_wall"}) == {"surface": "windward_wall", "cp": 0.8}
    out = api.wall({"surface": "leeward_wall", "length": 200.0, "width": 100.0})
    assert out == {"surface": "leeward_wall", "cp": -0.3, "l_over_b": 2.0}
    with pytest.raises(InvalidGeometryError):
        api.wall({"surface": "leeward_wall", "length": 200.0, "width": 0.0})
    with pytest.raises(InvalidInputError):
        api.wall({"surface": "floor"})


def test_velocity_pressure():
    out = api.velocity_pressure({"v_mph": 100.0, "exposure": "C", "z_ft": 3000.0})
    assert out["kz"] == 2.41
    assert out["qz_psf"] == pytest.approx(0.00256 * 2.41 * 100.0 ** 2)
    with pytest.raises(InvalidInputError):
        api.velocity_pressure({"v_mph": 100.0, "exposure": "C", "z_ft": 5000.0})
    with pytest.raises(InvalidInputError):
        api.velocity_pressure({"v_mph": 100.0, "exposure": "A", "z_ft": 30.0})


def test_design_pressures():
    out = api.design_pressures(BUILDING)
    assert out["edition"] == "ASCE 7-22"
    assert out["kd"] == 0.85
    assert out["g"] == 0.85
    assert out["gcpi"] == [0.18, -0.18]
    names = [s["surface"] for s in out["surfaces"]]
    assert names == [
        "windward_wall", "leeward_wall", "side_wall",
        "roof_windward_cp1", "roof_windward_cp2", "roof_leeward",
    ]
    qh = out["qh_psf"]
    assert qh == pytest.approx(0.00256 * out["kh"] * 115.0 ** 2)
    ww = out["surfaces"][0]
    assert ww["p_pos_gcpi_psf"] == pytest.approx(qh * 0.85 * (0.85 * 0.8 - 0.18))
    assert ww["p_neg_gcpi_psf"] == pytest.approx(qh * 0.85 * (0.85 * 0.8 + 0.18))
    roof = out["surfaces"][3]
    assert roof["cp"] == -0.3
    json.dumps(out)


def test_design_pressures_input_errors_are_not_logged(caplog):
    caplog.set_level(logging.ERROR)
    with pytest.raises(InvalidGeometryError):
        api.design_pressures(dict(BUILDING, width=-1.0))
    with pytest.raises(InvalidInputError):
        api.design_pressures(dict(BUILDING, structure="igloo"))
    assert "design_pressures failed" not in caplog.text


def test_design_pressures_logs_table_failure(caplog, monkeypatch):
    bad = T.AnchorTable2D.from_nested("windward", {
        0.25: {10.0: (-0.7, -0.18), 20.0: (-0.3, 0.2)},
        0.5: {10.0: (-0.9, -0.18)},
    })
    monkeypatch.setattr(A, "WINDWARD", bad)
    with pytest.raises(TableIntegrityError):
        api.design_pressures(BUILDING)
    assert "design_pressures failed" in caplog.text


def test_structure_choices_match_directionality_table():
    assert set(typing.get_args(StructureType)) == set(DIRECTIONALITY_KD)
    out = api.design_pressures(dict(BUILDING, structure="building_cc"))
    assert out["kd"] == DIRECTIONALITY_KD["building_cc"]


def test_table_report():
    rep = api.table_report()
    assert rep["problems"] == []
    assert rep["tables"]["leeward"]["angle_deg"] == [10.0, 15.0, 20.0]
    assert len(rep["zones"]) == 4
    assert "Fig. 27.3-1" in rep["origins"]["WINDWARD_CP"]
