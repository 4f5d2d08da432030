from __future__ import annotations

from typing import Dict, List, Optional, Sequence
from PySide6 import QtCore
import pyqtgraph as pg
from pyqtgraph.exporters import ImageExporter
from ..theme import COLORS


class CpPlot(QtCore.QObject):
    """Cp against h/L: one curve per series, vertical lines at table anchors, a marker at the query."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widget = pg.PlotWidget(background=COLORS["bg"])
        self.widget.showGrid(x=True, y=True, alpha=0.3)
        self.widget.getPlotItem().getAxis('left').setPen(COLORS["neutral"])
        self.widget.getPlotItem().getAxis('bottom').setPen(COLORS["neutral"])
        self.widget.setLabel('bottom', "h/L")
        self.widget.setLabel('left', "Cp")
        self.legend = self.widget.addLegend()
        pg.setConfigOptions(antialias=True)

        self._series: Dict[str, pg.PlotDataItem] = {}
        self._anchors: List[pg.InfiniteLine] = []
        self._query: Optional[pg.ScatterPlotItem] = None

        self._readout = pg.TextItem("", color=COLORS["neutral"])  # type: ignore[arg-type]
        self._readout.setAnchor((0, 1))
        self._readout.setZValue(1000)
        self.widget.addItem(self._readout, ignoreBounds=True)
        self._mouse_proxy = pg.SignalProxy(self.widget.scene().sigMouseMoved, rateLimit=60, slot=self._on_mouse_moved_evt)

    def set_series(self, name: str, x: Sequence[float], y: Sequence[float], color_token: str, width: int = 2):
        if name in self._series:
            self._series[name].setData(list(x), list(y))
            return self._series[name]
        pen = pg.mkPen(COLORS.get(color_token, COLORS["neutral"]), width=width)
        item = self.widget.plot(list(x), list(y), name=name, pen=pen)
        self._series[name] = item
        return item

    def set_anchors(self, xs: Sequence[float]):
        """Dashed vertical lines where the table has stored (non-interpolated) rows."""
        for line in self._anchors:
            self.widget.removeItem(line)
        self._anchors = []
        pen = pg.mkPen(COLORS["anchor"], style=QtCore.Qt.DashLine)
        for x in xs:
            line = pg.InfiniteLine(pos=x, angle=90, movable=False, pen=pen)
            self.widget.addItem(line, ignoreBounds=True)
            self._anchors.append(line)

    def set_query(self, x: float, ys: Sequence[float]):
        if self._query is not None:
            self.widget.removeItem(self._query)
        self._query = pg.ScatterPlotItem(
            [x] * len(ys), list(ys), size=9,
            brush=pg.mkBrush(COLORS["reduced"]), pen=pg.mkPen(COLORS["neutral"]),
        )
        self.widget.addItem(self._query)

    def export_png(self, path: str):
        ImageExporter(self.widget.plotItem).export(path)

    def _on_mouse_moved_evt(self, args):
        pos = args[0] if isinstance(args, (list, tuple)) and args else args
        vb = self.widget.plotItem.vb
        if vb is None or pos is None:
            return
        pt = vb.mapSceneToView(pos)
        self._readout.setText(f"h/L={pt.x():.3f}, Cp={pt.y():.3f}")
        (x0, _), (_, y1) = vb.viewRange()
        self._readout.setPos(x0, y1)
