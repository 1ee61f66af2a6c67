import math

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QSlider, QGroupBox
from PySide6.QtCore import Qt, Signal

from starling.core.constants import (
    EDV_SLIDER_MAX,
    EDV_SLIDER_MIN,
    INITIAL_EDV,
    INTENSITY_PERCENT_MAX,
    INTENSITY_PERCENT_MIN,
)
from starling.core.utils import format_signed
from .styles import COLORS, FONTS, STYLE_GROUPBOX, get_slider_style


class ParameterSlider(QWidget):
    """
    Labelled integer slider. Bidirectional sliders (range crossing zero)
    show an explicit sign on the value.
    """
    value_changed = Signal(int)

    def __init__(self, label, unit, minimum, maximum, initial, color=COLORS['baseline']):
        super().__init__()
        self.unit = unit
        self.signed = minimum < 0 < maximum

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 4, 0, 4)
        layout.setSpacing(4)

        header = QHBoxLayout()
        self.lbl_title = QLabel(label)
        self.lbl_title.setStyleSheet(f"color: {COLORS['text_secondary']}; font-weight: 600;")
        self.lbl_value = QLabel()
        self.lbl_value.setStyleSheet(
            f"color: {color}; font-size: {FONTS['size_title']}; font-weight: 700;"
        )
        header.addWidget(self.lbl_title)
        header.addStretch()
        header.addWidget(self.lbl_value)
        layout.addLayout(header)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(math.ceil(minimum), math.floor(maximum))
        self.slider.setSingleStep(1)
        self.slider.setValue(int(initial))
        self.slider.setStyleSheet(get_slider_style(color))
        self.slider.valueChanged.connect(self._on_value_changed)
        layout.addWidget(self.slider)

        self._update_label(self.slider.value())

    def value(self):
        return self.slider.value()

    def set_value(self, value):
        self.slider.setValue(int(value))

    def _on_value_changed(self, value):
        self._update_label(value)
        self.value_changed.emit(value)

    def _update_label(self, value):
        text = format_signed(value) if self.signed else f"{value}"
        self.lbl_value.setText(f"{text} {self.unit}")


class ControlPanelWidget(QWidget):
    """EDV, inotropy and afterload controls."""
    settings_changed = Signal(float, float, float)  # edv (mL), inotropy (%), afterload (%)

    def __init__(self, edv_min=EDV_SLIDER_MIN, edv_max=EDV_SLIDER_MAX, initial_edv=INITIAL_EDV,
                 initial_inotropy=0, initial_afterload=0):
        super().__init__()
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        group = QGroupBox("Simulation Controls")
        group.setStyleSheet(STYLE_GROUPBOX)
        group_layout = QVBoxLayout(group)

        self.edv_slider = ParameterSlider(
            "End-Diastolic Volume (EDV)", "mL",
            edv_min, edv_max, initial_edv, COLORS['baseline'],
        )
        self.inotropy_slider = ParameterSlider(
            "Inotropy", "%",
            INTENSITY_PERCENT_MIN, INTENSITY_PERCENT_MAX, initial_inotropy, COLORS['inotropy'],
        )
        self.afterload_slider = ParameterSlider(
            "Afterload", "%",
            INTENSITY_PERCENT_MIN, INTENSITY_PERCENT_MAX, initial_afterload, COLORS['afterload'],
        )
        for slider in (self.edv_slider, self.inotropy_slider, self.afterload_slider):
            slider.value_changed.connect(self._emit_settings)
            group_layout.addWidget(slider)

        layout.addWidget(group)

    def settings(self):
        return (
            float(self.edv_slider.value()),
            float(self.inotropy_slider.value()),
            float(self.afterload_slider.value()),
        )

    def _emit_settings(self, _value):
        self.settings_changed.emit(*self.settings())
