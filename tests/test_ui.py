import sys

import pytest

pytest.importorskip("PySide6")
pytest.importorskip("pyqtgraph")

from PySide6.QtWidgets import QApplication

from starling.core.engine import StarlingEngine
from starling.core.state import SimulatorConfig
from starling.ui.chart_widget import FrankStarlingChart, curve_name
from starling.ui.controls_widget import ControlPanelWidget, ParameterSlider
from starling.ui.main_window import MainWindow
from starling.ui.output_widget import OutputPanelWidget
from starling.ui.styles import COLORS, get_button_style


def get_qapp():
    app = QApplication.instance()
    if not app:
        app = QApplication(sys.argv)
    return app


@pytest.fixture(scope="module")
def qapp():
    return get_qapp()


@pytest.mark.parametrize("kind, percent, expected", [
    ("inotropy", 10, "Positive Inotropy"),
    ("inotropy", -10, "Negative Inotropy"),
    ("inotropy", 0, ""),
    ("afterload", 5, "Increased Afterload"),
    ("afterload", -5, "Decreased Afterload"),
])
def test_curve_name(kind, percent, expected):
    assert curve_name(kind, percent) == expected


def test_bidirectional_slider_label_is_signed(qapp):
    slider = ParameterSlider("Inotropy", "%", -100, 100, 0)
    slider.set_value(35)
    assert slider.lbl_value.text() == "+35 %"
    slider.set_value(-20)
    assert slider.lbl_value.text() == "-20 %"


def test_control_panel_emits_settings(qapp):
    panel = ControlPanelWidget()
    received = []
    panel.settings_changed.connect(lambda *values: received.append(values))
    panel.inotropy_slider.set_value(40)
    assert received[-1] == (120.0, 40.0, 0.0)


def test_output_panel_hides_unused_blocks(qapp):
    engine = StarlingEngine()
    panel = OutputPanelWidget()
    engine.set_edv(140)
    panel.update_state(engine.get_state())
    assert panel.baseline_block.co.value_text() == "6.48"
    assert panel.baseline_block.sv.value_text() == "90.0"
    assert panel.hr_display.value_text() == "72"
    assert panel.inotropy_block.isHidden()
    assert panel.afterload_block.isHidden()

    engine.set_afterload(50)
    panel.update_state(engine.get_state())
    assert not panel.afterload_block.isHidden()


def test_chart_shows_adjusted_curves(qapp):
    engine = StarlingEngine()
    chart = FrankStarlingChart()
    chart.update_view(engine)
    assert chart.curves["baseline"].isVisible()
    assert not chart.curves["inotropy"].isVisible()

    engine.set_inotropy(-30)
    chart.update_view(engine)
    assert chart.curves["inotropy"].isVisible()
    x, y = chart.curves["inotropy"].getData()
    assert len(x) == 101


def test_main_window_wires_controls_to_engine(qapp):
    window = MainWindow()
    window.controls.edv_slider.set_value(140)
    window.controls.afterload_slider.set_value(-100)
    assert window.engine.edv == 140.0
    assert window.engine.afterload_pct == -100.0
    assert window.outputs.baseline_block.co.value_text() == "6.48"


def test_main_window_export(qapp, tmp_path):
    window = MainWindow()
    paths = window.export_report(str(tmp_path), include_chart=False)
    assert len(paths) == 2
    assert (tmp_path / "starling_report.txt").exists()
    assert list(tmp_path.glob("starling_curves_*.csv"))


def test_button_style_uses_accent_color():
    style = get_button_style()
    assert COLORS['primary'] in style
    assert "QPushButton:disabled" in style


def test_legend_entry_kept_while_name_unchanged(qapp):
    engine = StarlingEngine()
    chart = FrankStarlingChart()
    engine.set_inotropy(20)
    chart.update_view(engine)
    entries = list(chart.legend.items)

    engine.set_inotropy(45)
    engine.set_edv(180)
    chart.update_view(engine)
    assert [id(sample) for sample, _ in chart.legend.items] == [id(sample) for sample, _ in entries]

    engine.set_inotropy(-45)
    chart.update_view(engine)
    assert chart.legend_names["inotropy"] == "Negative Inotropy"
    labels = [label.text for _, label in chart.legend.items]
    assert "Negative Inotropy" in labels
    assert "Positive Inotropy" not in labels


def test_main_window_uses_engine_edv_range(qapp):
    config = SimulatorConfig(edv_min=60, edv_max=160, initial_edv=100)
    window = MainWindow(StarlingEngine(config))
    slider = window.controls.edv_slider.slider
    assert (slider.minimum(), slider.maximum(), slider.value()) == (60, 160, 100)

    window.controls.edv_slider.set_value(slider.maximum())
    assert window.engine.edv == 160.0
    window.controls.edv_slider.set_value(slider.minimum())
    assert window.engine.edv == 60.0
