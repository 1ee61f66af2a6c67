import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import QWidget, QVBoxLayout

from starling.core.constants import EDV_SLIDER_MAX, EDV_SLIDER_MIN
from starling.physiology.frank_starling import DataPoint
from .styles import COLORS


def curve_name(kind, percent):
    """Legend name for an adjusted curve ('' while the level is 0)."""
    if kind == "inotropy":
        if percent > 0:
            return "Positive Inotropy"
        if percent < 0:
            return "Negative Inotropy"
    elif kind == "afterload":
        if percent > 0:
            return "Increased Afterload"
        if percent < 0:
            return "Decreased Afterload"
    return ""


class FrankStarlingChart(QWidget):
    """Cardiac output vs EDV for the baseline and adjusted regimes."""
    def __init__(self, edv_min=EDV_SLIDER_MIN, edv_max=EDV_SLIDER_MAX):
        super().__init__()
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot = pg.PlotWidget()
        self.plot.setBackground(COLORS['background_alt'])
        self.plot.showGrid(x=True, y=True, alpha=0.2)
        self.plot.setMouseEnabled(x=False, y=False)
        self.plot.setLabel('bottom', "End-Diastolic Volume (mL)")
        self.plot.setLabel('left', "Cardiac Output (L/min)")
        self.plot.setXRange(edv_min, edv_max, padding=0.02)
        self.plot.setAntialiasing(True)
        self.legend = self.plot.addLegend(offset=(10, 10))
        layout.addWidget(self.plot)

        self.curves = {}
        self.markers = {}
        # Current legend label per curve ('' = not in the legend)
        self.legend_names = {}
        for key, name in (("baseline", "Baseline"), ("inotropy", ""), ("afterload", "")):
            color = COLORS[key]
            self.curves[key] = self.plot.plot(pen=pg.mkPen(color=color, width=2.5), name=name or None)
            marker = pg.ScatterPlotItem(size=11, brush=pg.mkBrush(color), pen=pg.mkPen('w', width=1.5))
            self.plot.addItem(marker)
            self.markers[key] = marker
            self.legend_names[key] = name

        self.set_curve("inotropy", None, None)
        self.set_curve("afterload", None, None)

    def set_curve(self, key, points, current, name=""):
        """
        Show ``points`` (a list of DataPoint) with a marker at ``current``
        (a DataPoint), or hide the curve when ``points`` is None.
        """
        curve = self.curves[key]
        marker = self.markers[key]
        if points is None:
            curve.setData([], [])
            curve.setVisible(False)
            marker.setData([], [])
            self._rename(key, "")
            return

        edv = np.array([p.edv for p in points])
        co = np.array([p.co for p in points])
        curve.setData(edv, co)
        curve.setVisible(True)
        marker.setData([current.edv], [current.co])
        if name:
            self._rename(key, name)

    def _rename(self, key, name):
        if self.legend_names[key] == name:
            return
        curve = self.curves[key]
        self.legend.removeItem(curve)
        self.legend_names[key] = name
        if name:
            self.legend.addItem(curve, name)

    def update_view(self, engine):
        """Redraw every curve and marker from the engine's current inputs."""
        state = engine.get_state()
        baseline_point = _point(state.edv, state.baseline)
        self.set_curve("baseline", engine.baseline_curve(), baseline_point, "Baseline")

        inotropy_curve = engine.inotropy_curve()
        self.set_curve(
            "inotropy", inotropy_curve,
            _point(state.edv, state.inotropy) if inotropy_curve is not None else None,
            curve_name("inotropy", state.inotropy_pct),
        )
        afterload_curve = engine.afterload_curve()
        self.set_curve(
            "afterload", afterload_curve,
            _point(state.edv, state.afterload) if afterload_curve is not None else None,
            curve_name("afterload", state.afterload_pct),
        )

    def export_image(self, path):
        """Save the plot as an image (format from the file extension)."""
        import pyqtgraph.exporters
        exporter = pyqtgraph.exporters.ImageExporter(self.plot.plotItem)
        exporter.export(path)
        return path


def _point(edv, result):
    return DataPoint.from_values(edv, result)
