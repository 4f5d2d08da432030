"""
Frozen anchor data for ASCE 7-22 Directional Procedure coefficients, with brief origin notes.

These values are the tabulated figure/table entries the interpolators work from.
Tests assert exact-anchor fidelity against them. Update this file deliberately
and only together with the corresponding tests; tables.py builds read-only
copies at import time, nothing reads these literals at query time.
"""

ANCHORS: dict[str, float | int | str] = {
    "EDITION": "ASCE 7-22",

    # Interpolation / anchor matching
    "MATCH_EPS": 1e-9,

    # Roof area reduction (Fig. 27.3-1 note): only Cp = -1.30 is reduced
    "AREA_REDUCTION_SENTINEL": -1.30,
    "AREA_A1": 100.0,   "AREA_R1": 1.00,   # ft^2
    "AREA_A2": 250.0,   "AREA_R2": 0.90,
    "AREA_A3": 1000.0,  "AREA_R3": 0.80,

    # Parallel-to-ridge zone breakpoints in h/L
    "ZONE_HL_LOW": 0.5,
    "ZONE_HL_HIGH": 1.0,

    # Walls
    "CP_WINDWARD_WALL": 0.8,
    "CP_SIDE_WALL": -0.7,

    # Velocity pressure, Eq. 26.10-1 (psf per mph^2)
    "QZ_COEF": 0.00256,

    # Kz, Table 26.10-1
    "KZ_COEF": 2.41,
    "KZ_Z_MIN_FT": 15.0,
    "KZ_Z_MAX_FT": 3280.0,

    # Gust effect factor, rigid structures (Sec. 26.11.4)
    "G_RIGID": 0.85,

    # Ground elevation factor (Sec. 26.9), permitted as 1.0 everywhere
    "KE_DEFAULT": 1.0,
}

# ---------------------- ROOF: windward, normal to ridge ----------------------
# h/L -> angle [deg] -> (Cp1, Cp2)
# 60..80 deg columns follow the 0.01*theta rule.
WINDWARD_CP: dict[float, dict[float, tuple[float, float]]] = {
    0.25: {
        10.0: (-0.7, -0.18),
        15.0: (-0.5, 0.0),
        20.0: (-0.3, 0.2),
        25.0: (-0.2, 0.3),
        30.0: (-0.2, 0.3),
        35.0: (0.0, 0.4),
        45.0: (0.4, 0.4),
        60.0: (0.6, 0.6),
        70.0: (0.7, 0.7),
        80.0: (0.8, 0.8),
        90.0: (0.8, 0.8),
    },
    0.5: {
        10.0: (-0.9, -0.18),
        15.0: (-0.7, -0.18),
        20.0: (-0.4, 0.0),
        25.0: (-0.3, 0.2),
        30.0: (-0.2, 0.2),
        35.0: (-0.2, 0.3),
        45.0: (0.0, 0.4),
        60.0: (0.6, 0.6),
        70.0: (0.7, 0.7),
        80.0: (0.8, 0.8),
        90.0: (0.8, 0.8),
    },
    1.0: {
        10.0: (-1.3, -0.18),
        15.0: (-1.0, -0.18),
        20.0: (-0.7, 0.0),
        25.0: (-0.5, 0.2),
        30.0: (-0.3, 0.2),
        35.0: (-0.2, 0.2),
        45.0: (0.0, 0.3),
        60.0: (0.6, 0.6),
        70.0: (0.7, 0.7),
        80.0: (0.8, 0.8),
        90.0: (0.8, 0.8),
    },
}

# ---------------------- ROOF: leeward, normal to ridge ----------------------
# h/L -> angle [deg] -> Cp ; 20 deg stands for the >= 20 deg flat continuation
LEEWARD_CP: dict[float, dict[float, float]] = {
    0.25: {10.0: -0.30, 15.0: -0.50, 20.0: -0.60},
    0.50: {10.0: -0.50, 15.0: -0.50, 20.0: -0.60},
    1.00: {10.0: -0.70, 15.0: -0.60, 20.0: -0.60},
}

# ---------------------- ROOF: parallel to ridge ----------------------
# (zone, Cp1 for h/L <= 0.5, Cp1 for h/L >= 1.0, Cp2 everywhere)
PARALLEL_TO_RIDGE_ZONES: tuple[tuple[str, float, float, float], ...] = (
    ("0 to h/2", -0.90, -1.30, -0.18),
    ("h/2 to h", -0.90, -0.70, -0.18),
    ("h to 2h", -0.50, -0.70, -0.18),
    ("> 2h", -0.30, -0.70, -0.18),
)

# ---------------------- WALLS: leeward, L/B -> Cp ----------------------
LEEWARD_WALL_CP: tuple[tuple[float, float], ...] = (
    (1.0, -0.5),
    (2.0, -0.3),
    (4.0, -0.2),
)

# ---------------------- TERRAIN EXPOSURE, Table 26.11-1 ----------------------
TERRAIN: dict[str, dict[str, float]] = {
    "B": {"alpha": 7.5, "zg": 3280.0, "alpha_hat": 1.0 / 7.5, "b_hat": 0.84,
          "a_bar": 1.0 / 4.5, "b_bar": 0.47, "c": 0.30, "l": 320.0,
          "e_bar": 1.0 / 3.0, "z_min": 30.0},
    "C": {"alpha": 9.8, "zg": 2460.0, "alpha_hat": 1.0 / 9.8, "b_hat": 1.00,
          "a_bar": 1.0 / 6.4, "b_bar": 0.66, "c": 0.20, "l": 500.0,
          "e_bar": 1.0 / 5.0, "z_min": 15.0},
    "D": {"alpha": 11.5, "zg": 1935.0, "alpha_hat": 1.0 / 11.5, "b_hat": 1.09,
          "a_bar": 1.0 / 8.0, "b_bar": 0.78, "c": 0.15, "l": 650.0,
          "e_bar": 1.0 / 8.0, "z_min": 7.0},
}

# ---------------------- DIRECTIONALITY FACTOR, Table 26.6-1 ----------------------
DIRECTIONALITY_KD: dict[str, float] = {
    "building_mwfrs": 0.85,
    "building_cc": 0.85,
    "arched_roofs": 0.85,
    "circular_domes": 1.00,
    "circular_domes_non_axisymmetric": 0.95,
    "chimney_square": 0.90,
    "chimney_hexagonal": 0.95,
    "chimney_octagonal": 1.00,
    "chimney_octagonal_non_axisymmetric": 0.95,
    "chimney_round": 1.00,
    "chimney_round_non_axisymmetric": 0.95,
    "solid_freestanding_walls_signs": 0.85,
    "open_signs_single_plane_frames": 0.85,
    "trussed_towers_rectangular": 0.85,
    "trussed_towers_other": 0.95,
}

# ---------------------- INTERNAL PRESSURE, Table 26.13-1 ----------------------
# enclosure -> (+GCpi, -GCpi)
INTERNAL_GCPI: dict[str, tuple[float, float]] = {
    "enclosed": (0.18, -0.18),
    "partially_enclosed": (0.55, -0.55),
    "partially_open": (0.18, -0.18),
    "open": (0.0, 0.0),
}

# ---------------------- TOPOGRAPHIC FACTOR, Fig. 26.8-1 ----------------------
# K1 / (H/Lh) multiplier per feature and exposure
TOPO_K1: dict[str, dict[str, float]] = {
    "ridge_or_valley": {"B": 1.30, "C": 1.45, "D": 1.55},
    "escarpment": {"B": 0.75, "C": 0.85, "D": 0.95},
    "axisymmetrical_hill": {"B": 0.95, "C": 1.05, "D": 1.15},
}
# mu per feature and crest side
TOPO_MU: dict[str, dict[str, float]] = {
    "ridge_or_valley": {"upwind": 1.5, "downwind": 1.5},
    "escarpment": {"upwind": 1.5, "downwind": 4.0},
    "axisymmetrical_hill": {"upwind": 1.5, "downwind": 1.5},
}
TOPO_GAMMA: dict[str, float] = {
    "ridge_or_valley": 3.0,
    "escarpment": 2.5,
    "axisymmetrical_hill": 4.0,
}

# Origins (free-text for docs)
ORIGINS: dict[str, str] = {
    "WINDWARD_CP": "Fig. 27.3-1 roof, normal to ridge, windward (theta >= 10 deg)",
    "LEEWARD_CP": "Fig. 27.3-1 roof, normal to ridge, leeward",
    "PARALLEL_TO_RIDGE_ZONES": "Fig. 27.3-1 roof, theta < 10 deg and parallel to ridge",
    "AREA_REDUCTION_SENTINEL": "Fig. 27.3-1 note: Cp = -1.3 reduced by area factor",
    "LEEWARD_WALL_CP": "Fig. 27.3-1 walls, leeward, by L/B",
    "TERRAIN": "Table 26.11-1 terrain exposure constants",
    "DIRECTIONALITY_KD": "Table 26.6-1",
    "INTERNAL_GCPI": "Table 26.13-1",
    "TOPO_K1": "Fig. 26.8-1 K1 multipliers",
}
