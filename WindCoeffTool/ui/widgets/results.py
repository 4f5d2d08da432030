from __future__ import annotations

from typing import Optional
from PySide6 import QtWidgets, QtGui
from ..theme import COLORS, THRESHOLDS


class MetricCard(QtWidgets.QFrame):
    def __init__(self, title: str, unit: str = "", parent=None):
        super().__init__(parent)
        self.setFrameShape(QtWidgets.QFrame.StyledPanel)
        layout = QtWidgets.QVBoxLayout(self)
        self.title = QtWidgets.QLabel(title)
        self.value = QtWidgets.QLabel("—")
        self.unit = QtWidgets.QLabel(unit)
        self.note = QtWidgets.QLabel("")
        self.badge = QtWidgets.QLabel("")
        for w in (self.title, self.value, self.unit, self.note, self.badge):
            layout.addWidget(w)
        self.setObjectName("MetricCard")

    def set_cp(self, cp: float, factor: Optional[float] = None, clamped: bool = False):
        """Show a pressure coefficient; badge by suction level, note the area factor / clamping."""
        self.value.setText(f"{cp:.3f}")
        notes = []
        if factor is not None:
            notes.append(f"R = {factor:.4f}")
        if clamped:
            notes.append("clamped to table")
        self.note.setText(", ".join(notes))
        level = "ok"
        if cp <= THRESHOLDS["cp_suction_crit"]:
            level = "crit"
        elif cp <= THRESHOLDS["cp_suction_warn"]:
            level = "warn"
        self._apply_badge(level)

    def clear(self):
        self.value.setText("—")
        self.note.setText("")
        self.badge.setText("")

    def _apply_badge(self, level: str):
        txt = {"ok": "", "warn": "HIGH SUCTION", "crit": "PEAK SUCTION"}.get(level, "")
        self.badge.setText(txt)
        color = COLORS.get(level, COLORS["neutral"])
        pal = self.badge.palette()
        pal.setColor(QtGui.QPalette.WindowText, QtGui.QColor(color))
        self.badge.setPalette(pal)
