from __future__ import annotations

from typing import Optional
from PySide6 import QtCore, QtWidgets


class LabeledSpin(QtWidgets.QWidget):
    """Label + double spin box; ``optional=True`` adds a checkbox and value() may return None."""
    changed = QtCore.Signal()

    def __init__(self, label: str, suffix: str = "", *, lo: float = 0.0, hi: float = 1e6,
                 decimals: int = 2, value: float = 0.0, optional: bool = False, parent=None):
        super().__init__(parent)
        layout = QtWidgets.QHBoxLayout(self)
        self.lbl = QtWidgets.QLabel(label)
        self.spin = QtWidgets.QDoubleSpinBox()
        self.spin.setDecimals(decimals)
        self.spin.setRange(lo, hi)
        self.spin.setValue(value)
        if suffix:
            self.spin.setSuffix(f" {suffix}")
        self.use: Optional[QtWidgets.QCheckBox] = None
        if optional:
            self.use = QtWidgets.QCheckBox()
            self.use.setChecked(False)
            self.spin.setEnabled(False)
            self.use.toggled.connect(self.spin.setEnabled)
            self.use.toggled.connect(self.changed)
            layout.addWidget(self.use)
        layout.addWidget(self.lbl)
        layout.addWidget(self.spin)
        self.spin.valueChanged.connect(self.changed)

    def value(self) -> Optional[float]:
        if self.use is not None and not self.use.isChecked():
            return None
        return float(self.spin.value())

    def setValue(self, v: float):
        self.spin.setValue(v)
