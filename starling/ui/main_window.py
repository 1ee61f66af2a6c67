import logging
import os
import sys

from PySide6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from starling.core.engine import StarlingEngine
from starling.core.recorder import CurveRecorder
from starling.core.report import write_report
from starling.ui.chart_widget import FrankStarlingChart
from starling.ui.controls_widget import ControlPanelWidget
from starling.ui.output_widget import OutputPanelWidget
from starling.ui.styles import COLORS, FONTS, get_base_widget_style, get_button_style

logger = logging.getLogger(__name__)

INFO_TEXT = (
    "The blue curve is normal cardiac function. Inotropy raises (+) or lowers (-) "
    "contractility, shifting the green curve up or down. Afterload raises (+) or "
    "lowers (-) the resistance the heart ejects against, shifting the red curve "
    "down or up. Cardiac Output (CO) = Stroke Volume (SV) x Heart Rate (HR)."
)


class MainWindow(QMainWindow):
    """Main window: controls and numerics on the left, Frank-Starling chart on the right."""
    def __init__(self, engine=None):
        super().__init__()
        self.setWindowTitle("Starling - Frank-Starling Curve Simulator")
        self.resize(1280, 760)
        self.setStyleSheet(get_base_widget_style())

        self.engine = engine or StarlingEngine()
        self.setup_ui()
        self.refresh()

    def setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        base_layout = QVBoxLayout(central)

        body = QHBoxLayout()
        left = QVBoxLayout()
        cfg = self.engine.config
        self.controls = ControlPanelWidget(
            cfg.edv_min, cfg.edv_max, self.engine.edv,
            self.engine.inotropy_pct, self.engine.afterload_pct,
        )
        self.controls.settings_changed.connect(self.on_settings_changed)
        self.outputs = OutputPanelWidget()
        left.addWidget(self.controls)
        left.addWidget(self.outputs)

        self.chart = FrankStarlingChart(cfg.edv_min, cfg.edv_max)
        body.addLayout(left, 1)
        body.addWidget(self.chart, 2)
        base_layout.addLayout(body)

        self.lbl_info = QLabel(INFO_TEXT)
        self.lbl_info.setWordWrap(True)
        self.lbl_info.setStyleSheet(f"color: {COLORS['text_dim']}; font-size: {FONTS['size_small']};")
        base_layout.addWidget(self.lbl_info)

        self.btn_export = QPushButton("Export Report")
        self.btn_export.setStyleSheet(get_button_style())
        self.btn_export.clicked.connect(self.on_export_clicked)
        base_layout.addWidget(self.btn_export)

    def on_settings_changed(self, edv, inotropy, afterload):
        self.engine.set_edv(edv)
        self.engine.set_inotropy(inotropy)
        self.engine.set_afterload(afterload)
        self.refresh()

    def refresh(self):
        self.outputs.update_state(self.engine.get_state())
        self.chart.update_view(self.engine)

    def on_export_clicked(self):
        output_dir = QFileDialog.getExistingDirectory(self, "Export Report To")
        if not output_dir:
            return
        try:
            paths = self.export_report(output_dir)
        except OSError as e:
            QMessageBox.critical(self, "Export Failed", f"Could not write the report:\n{e}")
            return
        QMessageBox.information(self, "Export Complete", "\n".join(paths))

    def export_report(self, output_dir, include_chart=True):
        """Write the text report, the curve CSV and (optionally) a PNG of the chart."""
        state = self.engine.get_state()
        report_path = write_report(state, os.path.join(output_dir, "starling_report.txt"))

        recorder = CurveRecorder(output_dir=output_dir)
        recorder.add_all(self.engine.curves())
        csv_path = recorder.save()

        paths = [report_path, csv_path]
        if include_chart:
            paths.append(self.chart.export_image(os.path.join(output_dir, "starling_chart.png")))
        logger.info("Exported report to %s", output_dir)
        return paths


def main():
    app = QApplication.instance()
    if not app:
        app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
