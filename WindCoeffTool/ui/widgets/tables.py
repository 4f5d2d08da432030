from __future__ import annotations

import csv
from typing import Any, List, Optional
from PySide6 import QtCore, QtGui
from ..theme import COLORS, THRESHOLDS


class SimpleTableModel(QtCore.QAbstractTableModel):
    def __init__(self, headers: List[str], rows: List[List[Any]], *,
                 cp_cols: Optional[List[int]] = None,
                 factor_cols: Optional[List[int]] = None):
        super().__init__()
        self.headers = headers
        self.rows = rows
        self.cp_cols = set(cp_cols or [])
        self.factor_cols = set(factor_cols or [])

    def rowCount(self, parent=QtCore.QModelIndex()):
        return len(self.rows)

    def columnCount(self, parent=QtCore.QModelIndex()):
        return len(self.headers)

    def data(self, index, role=QtCore.Qt.DisplayRole):
        if not index.isValid():
            return None
        val = self.rows[index.row()][index.column()]
        col = index.column()
        if role == QtCore.Qt.DisplayRole:
            if val is None:
                return "—"
            return f"{val:.3f}" if isinstance(val, float) else str(val)
        if role == QtCore.Qt.BackgroundRole:
            # Suction thresholds on Cp columns
            if col in self.cp_cols and isinstance(val, float):
                if val <= THRESHOLDS["cp_suction_crit"]:
                    return QtGui.QColor(COLORS["crit"]).lighter(180)
                if val <= THRESHOLDS["cp_suction_warn"]:
                    return QtGui.QColor(COLORS["warn"]).lighter(180)
            # Area reduction actually applied
            if col in self.factor_cols and val is not None:
                return QtGui.QColor(COLORS["reduced"]).lighter(190)
        return None

    def headerData(self, section, orientation, role=QtCore.Qt.DisplayRole):
        if role == QtCore.Qt.DisplayRole and orientation == QtCore.Qt.Horizontal:
            return self.headers[section]
        return None

    def export_csv(self, path: str):
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(self.headers)
            for r in self.rows:
                writer.writerow(["" if v is None else v for v in r])
