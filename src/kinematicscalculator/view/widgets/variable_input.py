"""
Variable Input Row
==================
One line of the input form: caption, value field and unit drop-down.
"""
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QLineEdit, QComboBox
from PySide6.QtCore import Signal

from kinematicscalculator.model import units
from kinematicscalculator.model.variables import VARIABLE_METADATA, Variable

TARGET_STYLE = "QLineEdit { border: 2px solid #0063b1; border-radius: 3px; }"


class VariableInputRow(QWidget):
    # (variable, new text / new unit)
    text_changed = Signal(object, str)
    unit_changed = Signal(object, str)

    def __init__(self, variable: Variable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.variable = variable
        info = VARIABLE_METADATA[variable]

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.lbl_name = QLabel(info.display_name)
        self.lbl_name.setMinimumWidth(150)
        layout.addWidget(self.lbl_name)

        self.edit_value = QLineEdit()
        self.edit_value.setPlaceholderText("Enter value")
        self.edit_value.textChanged.connect(lambda text: self.text_changed.emit(self.variable, text))
        layout.addWidget(self.edit_value, 1)

        self.combo_unit = QComboBox()
        self.combo_unit.addItems(units.units_for(info.category))
        self.combo_unit.setCurrentIndex(0)
        self.combo_unit.currentTextChanged.connect(lambda unit: self.unit_changed.emit(self.variable, unit))
        layout.addWidget(self.combo_unit)

    # --- STATE ---

    def set_target(self, is_target: bool) -> None:
        """The target field is read-only, blank and highlighted."""
        self.edit_value.setEnabled(not is_target)
        if is_target:
            self.edit_value.clear()
            self.edit_value.setPlaceholderText("Calculated Value")
            self.edit_value.setStyleSheet(TARGET_STYLE)
        else:
            self.edit_value.setPlaceholderText("Enter value")
            self.edit_value.setStyleSheet("")

    def reset(self) -> None:
        if self.edit_value.isEnabled():
            self.edit_value.clear()
        self.combo_unit.setCurrentIndex(0)
