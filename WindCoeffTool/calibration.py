"""
Centralized runtime constants for coefficient lookup and wind-load formulas.

Values are sourced from anchors.ANCHORS so that every number has one home.
Update anchors.py deliberately and adjust the anchor tests accordingly; the
CLI ``--fail-on-drift`` flag compares these against the anchors.
"""
from .anchors import ANCHORS

EDITION: str = str(ANCHORS["EDITION"])

# --- Anchor matching tolerance (anchors and queries are both floats) ---
MATCH_EPS: float = float(ANCHORS["MATCH_EPS"])

# --- Area reduction (roof, Fig. 27.3-1 note) ---
# Only a coefficient equal to the sentinel (within MATCH_EPS) is eligible.
AREA_REDUCTION_SENTINEL: float = float(ANCHORS["AREA_REDUCTION_SENTINEL"])
# Breakpoints (area [ft^2], factor): 100 -> 1.00, 250 -> 0.90, 1000 -> 0.80
AREA_A1: float = float(ANCHORS["AREA_A1"])
AREA_R1: float = float(ANCHORS["AREA_R1"])
AREA_A2: float = float(ANCHORS["AREA_A2"])
AREA_R2: float = float(ANCHORS["AREA_R2"])
AREA_A3: float = float(ANCHORS["AREA_A3"])
AREA_R3: float = float(ANCHORS["AREA_R3"])

# --- Parallel-to-ridge zones: Cp1 is interpolated between these h/L values ---
ZONE_HL_LOW: float = float(ANCHORS["ZONE_HL_LOW"])
ZONE_HL_HIGH: float = float(ANCHORS["ZONE_HL_HIGH"])

# --- Walls ---
CP_WINDWARD_WALL: float = float(ANCHORS["CP_WINDWARD_WALL"])
CP_SIDE_WALL: float = float(ANCHORS["CP_SIDE_WALL"])

# --- Velocity pressure: qz = QZ_COEF * Kz * Kzt * Ke * V^2 [psf], V in mph ---
QZ_COEF: float = float(ANCHORS["QZ_COEF"])

# --- Kz = KZ_COEF * (z/zg)^(2/alpha), evaluated at KZ_Z_MIN_FT below it ---
KZ_COEF: float = float(ANCHORS["KZ_COEF"])
KZ_Z_MIN_FT: float = float(ANCHORS["KZ_Z_MIN_FT"])
KZ_Z_MAX_FT: float = float(ANCHORS["KZ_Z_MAX_FT"])

# --- Scalar factors ---
G_RIGID: float = float(ANCHORS["G_RIGID"])
KE_DEFAULT: float = float(ANCHORS["KE_DEFAULT"])

# Names guarded by the CLI drift check (anchor key == attribute name).
GUARDED: tuple[str, ...] = (
    "MATCH_EPS",
    "AREA_REDUCTION_SENTINEL",
    "AREA_A1", "AREA_R1", "AREA_A2", "AREA_R2", "AREA_A3", "AREA_R3",
    "ZONE_HL_LOW", "ZONE_HL_HIGH",
    "QZ_COEF", "KZ_COEF", "G_RIGID",
)
