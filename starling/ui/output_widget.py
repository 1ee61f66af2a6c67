from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame
from PySide6.QtCore import Qt

from starling.core.constants import CO_DECIMALS, HR_DECIMALS, SV_DECIMALS
from .styles import COLORS, FONTS, get_tinted_frame_style


class NumericDisplay(QFrame):
    """
    A single numeric value with its title and unit.
    """
    def __init__(self, label, unit="", color=COLORS['text'], initial_value="--",
                 size_variant="normal"):
        super().__init__()
        self.base_color = color

        layout = QVBoxLayout(self)
        layout.setSpacing(0)
        layout.setContentsMargins(10, 6, 10, 8)
        val_size = FONTS['size_numeric_small'] if size_variant == "small" else FONTS['size_numeric']

        self.lbl_title = QLabel(label)
        self.lbl_title.setStyleSheet(f"color: {color}; font-size: {FONTS['size_normal']}; font-weight: 600;")
        layout.addWidget(self.lbl_title, alignment=Qt.AlignRight)

        self.lbl_val = QLabel(initial_value)
        self.lbl_val.setStyleSheet(f"color: {color}; font-size: {val_size}; font-weight: 700;")
        self.lbl_val.setAlignment(Qt.AlignRight)
        layout.addWidget(self.lbl_val)

        if unit:
            self.lbl_unit = QLabel(unit)
            self.lbl_unit.setStyleSheet(f"color: {COLORS['text_dim']}; font-size: {FONTS['size_small']};")
            layout.addWidget(self.lbl_unit, alignment=Qt.AlignRight)

        self.setStyleSheet(get_tinted_frame_style(color, alpha=0.05, radius=6))

    def set_value(self, text):
        self.lbl_val.setText(text)

    def value_text(self):
        return self.lbl_val.text()


class ResultBlock(QWidget):
    """Cardiac output and stroke volume for one regime."""
    def __init__(self, title, color):
        super().__init__()
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self.co = NumericDisplay(f"CO ({title})", "L/min", color)
        self.sv = NumericDisplay(f"SV ({title})", "mL/beat", color, size_variant="small")
        layout.addWidget(self.co)
        layout.addWidget(self.sv)

    def set_result(self, result):
        self.co.set_value(f"{result.co:.{CO_DECIMALS}f}")
        self.sv.set_value(f"{result.sv:.{SV_DECIMALS}f}")


class OutputPanelWidget(QWidget):
    """Numeric results panel; adjusted blocks are hidden while their slider is at 0."""
    def __init__(self):
        super().__init__()
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        self.baseline_block = ResultBlock("Baseline", COLORS['baseline'])
        self.inotropy_block = ResultBlock("Inotropy", COLORS['inotropy'])
        self.afterload_block = ResultBlock("Afterload", COLORS['afterload'])
        self.hr_display = NumericDisplay("HR", "beats/min", COLORS['text_secondary'], size_variant="small")

        layout.addWidget(self.baseline_block)
        layout.addWidget(self.inotropy_block)
        layout.addWidget(self.afterload_block)
        layout.addWidget(self.hr_display)
        layout.addStretch()

        self.inotropy_block.setVisible(False)
        self.afterload_block.setVisible(False)

    def update_state(self, state):
        self.baseline_block.set_result(state.baseline)

        self.inotropy_block.setVisible(state.inotropy is not None)
        if state.inotropy is not None:
            self.inotropy_block.set_result(state.inotropy)

        self.afterload_block.setVisible(state.afterload is not None)
        if state.afterload is not None:
            self.afterload_block.set_result(state.afterload)

        self.hr_display.set_value(f"{state.heart_rate:.{HR_DECIMALS}f}")
