import pytest

from WindCoeffTool import io

CASE = """
# warehouse, exposure C
[BUILDING]
length_ft: 100
width_ft: 60
height_ft: 25,5
roof_angle_deg: 20
plan_area_ft2: 600        # roof plan area

[WIND]
v_mph: 115
exposure: c
enclosure: Partially_Enclosed
kzt: 1,05
"""


def test_parse_case():
    case = io.parse_case(CASE)
    assert case["length"] == 100.0
    assert case["width"] == 60.0
    assert case["height"] == 25.5
    assert case["angle_deg"] == 20.0
    assert case["plan_area"] == 600.0
    assert case["v_mph"] == 115.0
    assert case["exposure"] == "C"
    assert case["enclosure"] == "partially_enclosed"
    assert case["structure"] == "building_mwfrs"
    assert case["kzt"] == 1.05
    assert case["ke"] == 1.0


def test_parse_case_without_area():
    text = CASE.replace("plan_area_ft2: 600        # roof plan area\n", "")
    assert "plan_area" not in io.parse_case(text)


def test_missing_section():
    with pytest.raises(ValueError, match="missing sections"):
        io.parse_case("[BUILDING]\nlength_ft: 100\n")


def test_missing_key():
    text = CASE.replace("roof_angle_deg: 20\n", "")
    with pytest.raises(ValueError, match="BUILDING.roof_angle_deg"):
        io.parse_case(text)


def test_bad_number():
    text = CASE.replace("v_mph: 115", "v_mph: fast")
    with pytest.raises(ValueError, match="Invalid numeric value"):
        io.parse_case(text)


def test_read_case(tmp_path):
    p = tmp_path / "case.txt"
    p.write_text(CASE, encoding="utf-8")
    assert io.read_case(str(p)) == io.parse_case(CASE)
