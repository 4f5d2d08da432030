import math

import pytest

from WindCoeffTool import parameters as P
from WindCoeffTool import formulas as F


def test_terrain_constants():
    c = P.terrain_constants("C")
    assert c["alpha"] == 9.8
    assert c["zg"] == 2460.0
    assert P.terrain_constants("B")["zg"] == 3280.0
    assert P.terrain_constants("D")["alpha"] == 11.5
    with pytest.raises(ValueError):
        P.terrain_constants("E")  # type: ignore[arg-type]


def test_kz_and_kh():
    assert P.kz_for_exposure("C", 15.0) == pytest.approx(0.85, abs=0.005)
    assert P.kz_for_exposure("D", 15.0) == pytest.approx(1.03, abs=0.01)
    assert P.kh_for_exposure("C", 40.0) == P.kz_for_exposure("C", 40.0)


def test_kz_series():
    series = P.kz_series("C", 10.0, 30.0, 10.0)
    assert [z for z, _ in series] == [10.0, 20.0, 30.0]
    assert series[0][1] == F.kz(15.0, 2460.0, 9.8)
    kzs = [k for _, k in series]
    assert kzs == sorted(kzs)
    with pytest.raises(ValueError):
        P.kz_series("C", 10.0, 5.0, 1.0)
    with pytest.raises(ValueError):
        P.kz_series("C", 10.0, 30.0, 0.0)


def test_scalar_factors():
    assert P.directionality_factor("building_mwfrs") == 0.85
    assert P.directionality_factor("chimney_round") == 1.0
    assert P.gust_effect_factor() == 0.85
    assert P.ground_elevation_factor(5000.0) == 1.0
    with pytest.raises(ValueError):
        P.directionality_factor("igloo")
    with pytest.raises(NotImplementedError):
        P.gust_effect_factor("flexible")


def test_internal_gcpi():
    assert P.internal_gcpi("enclosed") == (0.18, -0.18)
    assert P.internal_gcpi("partially_enclosed") == (0.55, -0.55)
    assert P.internal_gcpi("open") == (0.0, 0.0)
    with pytest.raises(ValueError):
        P.internal_gcpi("tent")  # type: ignore[arg-type]


def test_flat_terrain_topography():
    assert P.topo_k1("none", "C", 50.0, 100.0) == 1.0
    assert P.topo_k2("none", "upwind", 100.0, 20.0) == 1.0
    assert P.topo_k3("none", 20.0, 100.0) == 1.0
    assert P.topographic_factor("none", 0.7, 0.5, 0.3) == 1.0


def test_escarpment_topography():
    k1 = P.topo_k1("escarpment", "C", 50.0, 100.0)
    assert k1 == pytest.approx(0.5 * 0.85)
    k2 = P.topo_k2("escarpment", "downwind", 100.0, 200.0)
    assert k2 == pytest.approx(1.0 - 200.0 / 400.0)
    k3 = P.topo_k3("escarpment", 20.0, 100.0)
    assert k3 == pytest.approx(math.exp(-2.5 * 0.2))
    assert P.topographic_factor("escarpment", k1, k2, k3) == pytest.approx((1.0 + k1 * k2 * k3) ** 2)


def test_topography_errors():
    with pytest.raises(ValueError):
        P.topo_k1("mesa", "C", 50.0, 100.0)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        P.topo_k1("escarpment", "C", 0.0, 100.0)
    with pytest.raises(ValueError):
        P.topo_k2("escarpment", "sideways", 100.0, 10.0)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        P.topographic_factor("mesa", 1.0, 1.0, 1.0)  # type: ignore[arg-type]
