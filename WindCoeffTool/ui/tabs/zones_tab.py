from __future__ import annotations

from typing import Any, Dict
from PySide6 import QtCore, QtWidgets

from ..widgets.inputs import LabeledSpin
from ..widgets.tables import SimpleTableModel
from ..service import Recompute
from ..state import UIState
from ... import api

HEADERS = ["Zone", "Cp1", "Cp2", "Reduction factor"]


class ZonesTab(QtWidgets.QWidget):
    """Roof zones for wind parallel to ridge (and flat roofs)."""

    def __init__(self, state: UIState, parent=None):
        super().__init__(parent)
        self.state = state
        self._recompute = Recompute(self._compute, parent=self)
        self._recompute.done.connect(self.on_result)
        self._recompute.failed.connect(self._show_toast)
        self._build_ui()
        self._recompute.run_now()

    def _build_ui(self) -> None:
        layout = QtWidgets.QVBoxLayout(self)
        top = QtWidgets.QHBoxLayout()

        self.hl = LabeledSpin("h/L", "", lo=0.0, hi=10.0, decimals=3, value=self.state.h_over_l)
        self.area = LabeledSpin("Plan area", "ft²", lo=0.0, hi=1e7, value=500.0, optional=True)
        self.btn_from_roof = QtWidgets.QPushButton("Use h/L from Roof tab")
        self.btn_export_csv = QtWidgets.QPushButton("Export CSV")

        self.hl.changed.connect(self._recompute.pulse)
        self.area.changed.connect(self._recompute.pulse)
        self.btn_from_roof.clicked.connect(self.on_from_roof)
        self.btn_export_csv.clicked.connect(self.on_export_csv)

        for w in [self.hl, self.area, self.btn_from_roof, self.btn_export_csv]:
            top.addWidget(w)

        self.table = QtWidgets.QTableView()
        self.table.horizontalHeader().setStretchLastSection(True)

        self._toast = QtWidgets.QLabel("")
        self._toast.setStyleSheet("color:white; background: rgba(0,0,0,160); padding: 6px; border-radius: 4px;")
        self._toast.setVisible(False)

        layout.addWidget(self._toast)
        layout.addLayout(top)
        layout.addWidget(self.table)

    def _compute(self) -> Dict[str, Any]:
        return api.roof_parallel({"h_over_l": self.hl.value() or 0.0, "plan_area": self.area.value()})

    def on_from_roof(self) -> None:
        self.hl.setValue(self.state.h_over_l)
        self._recompute.run_now()

    def on_result(self, out: Dict[str, Any]) -> None:
        self.state.last_zones = out["zones"]
        rows = [[z["zone"], z["cp1"], z["cp2"], z["reduction_factor"]] for z in out["zones"]]
        self.table.setModel(SimpleTableModel(HEADERS, rows, cp_cols=[1, 2], factor_cols=[3]))

    def on_export_csv(self) -> None:
        path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Export zones", "zones.csv", "CSV Files (*.csv)")
        if not path:
            return
        model = self.table.model()
        if not isinstance(model, SimpleTableModel):
            return
        try:
            model.export_csv(path)
            self._show_toast("CSV saved")
        except OSError as e:
            QtWidgets.QMessageBox.critical(self, "Export error", str(e))

    def _show_toast(self, text: str) -> None:
        self._toast.setText(text)
        self._toast.setVisible(True)
        QtCore.QTimer.singleShot(2200, lambda: self._toast.setVisible(False))
