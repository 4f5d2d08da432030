from __future__ import annotations

from typing import Any, Dict
from PySide6 import QtWidgets

from ..widgets.inputs import LabeledSpin
from ..widgets.results import MetricCard
from ..widgets.plots import CpPlot
from ..service import Recompute
from ..theme import COLORS
from ..state import UIState
from ... import analysis as A
from ... import api
from ... import tables as T


class RoofTab(QtWidgets.QWidget):
    """Wind normal to ridge: windward (Cp1, Cp2) and leeward Cp for one building."""

    def __init__(self, state: UIState, parent=None):
        super().__init__(parent)
        self.state = state
        self._recompute = Recompute(self._compute, parent=self)
        self._recompute.done.connect(self.on_result)
        self._recompute.failed.connect(self.on_error)
        self._build_ui()
        self._recompute.run_now()

    def _build_ui(self):
        layout = QtWidgets.QHBoxLayout(self)
        left = QtWidgets.QVBoxLayout()
        right = QtWidgets.QVBoxLayout()

        self.length = LabeledSpin("Length L", "ft", lo=0.01, hi=1e5, value=self.state.length)
        self.height = LabeledSpin("Height h", "ft", lo=0.01, hi=3280.0, value=self.state.height)
        self.angle = LabeledSpin("Roof angle", "°", lo=0.0, hi=90.0, decimals=1, value=self.state.angle_deg)
        self.area = LabeledSpin("Plan area", "ft²", lo=0.0, hi=1e7, value=500.0, optional=True)
        self.hl = QtWidgets.QLabel("h/L = —")
        self.error = QtWidgets.QLabel("")
        self.error.setStyleSheet(f"color: {COLORS['crit']};")

        form = QtWidgets.QFormLayout()
        for w in [self.length, self.height, self.angle, self.area]:
            form.addRow(w)
            w.changed.connect(self._recompute.pulse)
        left.addLayout(form)
        left.addWidget(self.hl)
        left.addWidget(self.error)
        left.addStretch(1)

        cards = QtWidgets.QHBoxLayout()
        self.card_cp1 = MetricCard("Windward Cp1")
        self.card_cp2 = MetricCard("Windward Cp2")
        self.card_lw = MetricCard("Leeward Cp")
        for c in (self.card_cp1, self.card_cp2, self.card_lw):
            cards.addWidget(c)
        right.addLayout(cards)

        self.plot = CpPlot()
        self.plot.set_anchors(T.WINDWARD.ratio_anchors)
        right.addWidget(self.plot.widget)
        self.btn_export = QtWidgets.QPushButton("Save plot PNG")
        self.btn_export.clicked.connect(self.on_export)
        right.addWidget(self.btn_export)

        layout.addLayout(left, 1)
        layout.addLayout(right, 3)

    def _compute(self) -> Dict[str, Any]:
        self.state.length = float(self.length.value() or 0.0)
        self.state.height = float(self.height.value() or 0.0)
        self.state.angle_deg = float(self.angle.value() or 0.0)
        self.state.plan_area = self.area.value()
        ww = api.roof_windward({
            "length": self.state.length,
            "height": self.state.height,
            "angle_deg": self.state.angle_deg,
            "plan_area": self.state.plan_area,
        })
        lw = api.roof_leeward({
            "h_over_l": ww["h_over_l"],
            "angle_deg": self.state.angle_deg,
            "plan_area": self.state.plan_area,
        })
        return {"windward": ww, "leeward": lw}

    def on_result(self, out: Dict[str, Any]):
        ww, lw = out["windward"], out["leeward"]
        self.error.setText("")
        self.state.last_windward = ww
        self.state.last_leeward = lw

        self.hl.setText(f"h/L = {ww['h_over_l']:.3f}")
        self.card_cp1.set_cp(ww["cp1"], ww["reduction_factor"], any(ww["clamped"].values()))
        self.card_cp2.set_cp(ww["cp2"], None, any(ww["clamped"].values()))
        self.card_lw.set_cp(lw["cp"], lw["reduction_factor"], any(lw["clamped"].values()))

        xs = A.ratio_grid(0.0, 1.25, 51)
        cp1s, cp2s = A.series_windward_vs_ratio(ww["angle_deg"], xs)
        self.plot.set_series("Windward Cp1", xs, cp1s, "cp1")
        self.plot.set_series("Windward Cp2", xs, cp2s, "cp2")
        self.plot.set_series("Leeward Cp", xs, A.series_leeward_vs_ratio(ww["angle_deg"], xs), "leeward")
        self.plot.set_query(ww["h_over_l"], [ww["cp1"], ww["cp2"], lw["cp"]])

    def on_error(self, msg: str):
        self.error.setText(msg)
        for c in (self.card_cp1, self.card_cp2, self.card_lw):
            c.clear()

    def on_export(self):
        path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Save plot", "roof_cp.png", "PNG Files (*.png)")
        if path:
            self.plot.export_png(path)
