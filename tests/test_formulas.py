import math

import pytest

from WindCoeffTool import formulas as F
from WindCoeffTool.errors import InvalidGeometryError, WindCoeffError

RATIOS = (0.25, 0.5, 1.0)
BREAKPOINTS = ((100.0, 1.00), (250.0, 0.90), (1000.0, 0.80))


def test_clamp():
    assert F.clamp(0.1, 0.25, 1.0) == 0.25
    assert F.clamp(3.0, 0.25, 1.0) == 1.0
    assert F.clamp(0.6, 0.25, 1.0) == 0.6


def test_match_exact():
    assert F.match_exact(0.5, RATIOS) == 0.5
    assert F.match_exact(0.5 + 1e-12, RATIOS) == 0.5
    assert F.match_exact(0.3, RATIOS) is None
    assert F.match_exact(0.5 + 1e-6, RATIOS) is None


def test_bracket_inside():
    assert F.bracket(0.375, RATIOS) == (0.25, 0.5, 0.5)
    lo, hi, t = F.bracket(0.75, RATIOS)
    assert (lo, hi) == (0.5, 1.0)
    assert t == pytest.approx(0.5)


def test_bracket_snaps_outside_values_to_edge():
    assert F.bracket(0.1, RATIOS) == (0.25, 0.25, 0.0)
    assert F.bracket(2.0, RATIOS) == (1.0, 1.0, 0.0)


def test_bracket_empty_anchors():
    with pytest.raises(ValueError):
        F.bracket(0.5, ())


def test_lerp_and_blend():
    assert F.lerp(0.375, 0.25, -0.7, 0.5, -0.9) == pytest.approx(-0.8)
    # degenerate span
    assert F.lerp(1.0, 1.0, -0.5, 1.0, -0.3) == -0.5
    assert F.blend(-0.7, -0.9, 0.0) == -0.7
    assert F.blend(-0.7, -0.9, 1.0) == -0.9
    mixed = F.blend((-0.7, -0.18), (-0.9, -0.18), 0.5)
    assert mixed == pytest.approx((-0.8, -0.18))
    assert isinstance(mixed, tuple)


def test_h_over_l_and_l_over_b():
    assert F.h_over_l(100.0, 25.0) == 0.25
    assert F.l_over_b(200.0, 100.0) == 2.0
    with pytest.raises(InvalidGeometryError):
        F.h_over_l(0.0, 25.0)
    with pytest.raises(InvalidGeometryError):
        F.h_over_l(100.0, -1.0)
    with pytest.raises(InvalidGeometryError):
        F.l_over_b(100.0, 0.0)
    with pytest.raises(InvalidGeometryError):
        F.h_over_l(float("nan"), 25.0)
    with pytest.raises(InvalidGeometryError):
        F.h_over_l(100.0, float("nan"))
    with pytest.raises(InvalidGeometryError):
        F.l_over_b(float("nan"), 60.0)
    with pytest.raises(InvalidGeometryError):
        F.l_over_b(100.0, float("inf"))


def test_geometry_error_is_a_value_error():
    with pytest.raises(ValueError):
        F.h_over_l(-5.0, 10.0)
    assert issubclass(InvalidGeometryError, WindCoeffError)


def test_area_reduction_breakpoints():
    assert F.area_reduction_factor(50.0, BREAKPOINTS) == 1.0
    assert F.area_reduction_factor(100.0, BREAKPOINTS) == 1.0
    assert F.area_reduction_factor(250.0, BREAKPOINTS) == 0.9
    assert F.area_reduction_factor(1000.0, BREAKPOINTS) == 0.8
    assert F.area_reduction_factor(5000.0, BREAKPOINTS) == 0.8
    assert F.area_reduction_factor(175.0, BREAKPOINTS) == pytest.approx(0.95)
    assert F.area_reduction_factor(600.0, BREAKPOINTS) == pytest.approx(0.853333, abs=1e-6)


def test_kz_exposure_c_and_b():
    # Table 26.10-1: Kz(C, 15 ft) = 0.85, Kz(B, 30 ft) = 0.70
    assert F.kz(15.0, 2460.0, 9.8) == pytest.approx(0.85, abs=0.005)
    assert F.kz(30.0, 3280.0, 7.5) == pytest.approx(0.70, abs=0.015)


def test_kz_limits():
    assert F.kz(5.0, 2460.0, 9.8) == F.kz(15.0, 2460.0, 9.8)
    assert F.kz(3000.0, 2460.0, 9.8) == 2.41
    with pytest.raises(ValueError):
        F.kz(4000.0, 2460.0, 9.8)
    with pytest.raises(ValueError):
        F.kz(0.0, 2460.0, 9.8)
    with pytest.raises(ValueError):
        F.kz(30.0, 2460.0, 0.0)


def test_velocity_pressure():
    assert F.velocity_pressure(100.0, 1.0) == pytest.approx(25.6)
    assert F.velocity_pressure(100.0, 0.85, kzt=1.1, ke=1.0) == pytest.approx(25.6 * 0.85 * 1.1)
    with pytest.raises(ValueError):
        F.velocity_pressure(-1.0, 1.0)


def test_topographic_parts():
    assert F.topo_k2(50.0, 100.0, 1.5) == pytest.approx(1.0 - 50.0 / 150.0)
    assert F.topo_k2(500.0, 100.0, 1.5) == 0.0
    assert F.topo_k3(10.0, 100.0, 3.0) == pytest.approx(math.exp(-0.3))
    assert F.kzt(0.0, 0.5, 0.5) == 1.0
    assert F.kzt(0.4, 0.5, 0.6) == pytest.approx(1.12 ** 2)
    with pytest.raises(ValueError):
        F.topo_k2(0.0, 100.0, 1.5)
    with pytest.raises(ValueError):
        F.topo_k3(10.0, 0.0, 3.0)


def test_design_pressure_both_internal_signs():
    p_pos, p_neg = F.design_pressure(10.0, 0.85, 0.85, 0.8, 10.0, (0.18, -0.18))
    external = 10.0 * 0.85 * 0.85 * 0.8
    assert p_pos == pytest.approx(external - 10.0 * 0.85 * 0.18)
    assert p_neg == pytest.approx(external + 10.0 * 0.85 * 0.18)
