from __future__ import annotations

COLORS = {
  "cp1": "#00C853",
  "cp2": "#00B0FF",
  "leeward": "#FF6D00",
  "reduced": "#E91E63",
  "anchor": "#546E7A",
  "ok": "#00C853",
  "warn": "#FFC400",
  "crit": "#FF1744",
  "neutral": "#90A4AE",
  "bg": "#121212",
  "panel": "#1E1E1E",
  "grid": "#263238",
}

# Suction (negative Cp) badges: at or below these values
THRESHOLDS = {
  "cp_suction_warn": -0.9,
  "cp_suction_crit": -1.2,
}
