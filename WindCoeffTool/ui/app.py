from __future__ import annotations

from PySide6 import QtWidgets

from .state import UIState
from .tabs.roof_tab import RoofTab
from .tabs.zones_tab import ZonesTab
from .. import api


class App(QtWidgets.QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("WindCoeffTool")
        self.state = UIState()
        tabs = QtWidgets.QTabWidget()
        tabs.addTab(RoofTab(self.state), "Roof (normal to ridge)")
        tabs.addTab(ZonesTab(self.state), "Zones (parallel to ridge)")
        self.setCentralWidget(tabs)

        report = api.table_report()
        msg = f"{report['edition']} Fig. 27.3-1"
        if report["problems"]:
            msg += f"  |  {len(report['problems'])} table problem(s), see check-tables"
        self.statusBar().showMessage(msg)
