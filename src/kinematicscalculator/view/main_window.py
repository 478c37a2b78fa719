"""
Main Application Window
=======================
The primary GUI container: menu bar, target selection, input rows, status
banner and result box.

Why is this file needed?
------------------------
1. Layout: It organizes the visual structure of the application.
2. Routing: It forwards button clicks to the Calculator controller and shows
   the returned Presentation. It contains no physics.
"""
import logging
from typing import Dict, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QComboBox,
    QPushButton, QGroupBox, QFrame, QMessageBox
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from kinematicscalculator.config import (
    APP_NAME, DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, MIN_WINDOW_HEIGHT, MIN_WINDOW_WIDTH,
)
from kinematicscalculator.controller.calculator import Calculator
from kinematicscalculator.controller.presenter import Presentation
from kinematicscalculator.model.outcome import Severity
from kinematicscalculator.model.state import CalculatorState
from kinematicscalculator.model.variables import VARIABLE_METADATA, Variable
from kinematicscalculator.view.dialogs.about_dialog import AboutDialog
from kinematicscalculator.view.widgets.variable_input import VariableInputRow

logger = logging.getLogger(__name__)

SEVERITY_COLORS: Dict[Severity, str] = {
    Severity.INFORMATIONAL: "#0063b1",
    Severity.SUCCESS: "green",
    Severity.WARNING: "#b36b00",
    Severity.ERROR: "red",
}

READY_MESSAGE = "Enter 3 known values and select the variable to calculate."


class MainWindow(QMainWindow):
    def __init__(self, state: CalculatorState) -> None:
        super().__init__()
        self.state: CalculatorState = state
        self.calculator = Calculator()
        self._status_severity: Optional[Severity] = None

        self.setWindowTitle(APP_NAME)
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)
        self.setMinimumSize(MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)

        self._build_menu()

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        layout = QVBoxLayout(main_widget)

        # --- 1. TARGET SELECTION ---
        target_row = QHBoxLayout()
        target_row.addWidget(QLabel("Calculate:"))
        self.combo_target = QComboBox()
        self.combo_target.addItems([info.display_name for info in VARIABLE_METADATA.values()])
        target_row.addWidget(self.combo_target, 1)
        layout.addLayout(target_row)

        # --- 2. INPUT ROWS ---
        grp_inputs = QGroupBox("Values")
        inputs_layout = QVBoxLayout(grp_inputs)
        self.rows: Dict[Variable, VariableInputRow] = {}
        for variable in VARIABLE_METADATA:
            row = VariableInputRow(variable)
            row.text_changed.connect(self.state.set_text)
            row.unit_changed.connect(self.state.set_unit)
            inputs_layout.addWidget(row)
            self.rows[variable] = row
        layout.addWidget(grp_inputs)

        # --- 3. ACTIONS ---
        buttons = QHBoxLayout()
        self.btn_calculate = QPushButton("Calculate")
        self.btn_calculate.setMinimumHeight(40)
        self.btn_calculate.setDefault(True)
        self.btn_calculate.clicked.connect(self.on_calculate_clicked)
        buttons.addWidget(self.btn_calculate)

        self.btn_clear = QPushButton("Clear")
        self.btn_clear.setMinimumHeight(40)
        self.btn_clear.clicked.connect(self.on_clear_clicked)
        buttons.addWidget(self.btn_clear)
        layout.addLayout(buttons)

        # --- 4. STATUS BANNER ---
        self.status_frame = QFrame()
        self.status_frame.setFrameShape(QFrame.StyledPanel)
        status_layout = QVBoxLayout(self.status_frame)
        self.lbl_status_title = QLabel("")
        self.lbl_status_message = QLabel("")
        self.lbl_status_message.setWordWrap(True)
        status_layout.addWidget(self.lbl_status_title)
        status_layout.addWidget(self.lbl_status_message)
        layout.addWidget(self.status_frame)

        # --- 5. RESULT ---
        self.grp_result = QGroupBox("Result")
        result_layout = QHBoxLayout(self.grp_result)
        self.lbl_result_variable = QLabel("")
        self.lbl_result_value = QLabel("")
        self.lbl_result_value.setStyleSheet("font-size: 16pt; font-weight: bold;")
        self.lbl_result_value.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.lbl_result_unit = QLabel("")
        result_layout.addWidget(self.lbl_result_variable)
        result_layout.addWidget(self.lbl_result_value, 1)
        result_layout.addWidget(self.lbl_result_unit)
        layout.addWidget(self.grp_result)

        layout.addStretch()

        # Connect last so the initial population does not clear anything
        self.combo_target.setCurrentIndex(list(VARIABLE_METADATA).index(self.state.target))
        self.combo_target.currentIndexChanged.connect(self.on_target_changed)

        self.update_control_states()
        self.clear_result()
        self.show_status(READY_MESSAGE, Severity.INFORMATIONAL, "Ready")

    def _build_menu(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        exit_action = QAction("E&xit", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        help_menu = menu_bar.addMenu("&Help")
        about_action = QAction("&About", self)
        about_action.triggered.connect(self.on_about)
        help_menu.addAction(about_action)

    # --- STATUS & RESULT ---

    def show_status(self, message: str, severity: Severity, title: Optional[str] = None) -> None:
        color = SEVERITY_COLORS[severity]
        self.lbl_status_title.setText(title or severity.name.title())
        self.lbl_status_title.setStyleSheet(f"color: {color}; font-weight: bold;")
        self.lbl_status_message.setText(message)
        self.status_frame.setStyleSheet(f"QFrame {{ border-left: 4px solid {color}; }}")
        self.status_frame.setVisible(True)
        self._status_severity = severity

    def clear_status(self) -> None:
        self.status_frame.setVisible(False)
        self._status_severity = None

    def clear_result(self) -> None:
        self.lbl_result_variable.setText("")
        self.lbl_result_value.setText("")
        self.lbl_result_unit.setText("")
        self.grp_result.setVisible(False)

    def show_presentation(self, presentation: Presentation) -> None:
        if presentation.has_result:
            self.lbl_result_variable.setText(presentation.variable_label)
            self.lbl_result_value.setText(presentation.value_text)
            self.lbl_result_unit.setText(presentation.unit)
            self.grp_result.setVisible(True)
        self.show_status(presentation.message, presentation.severity, presentation.title)

    def update_control_states(self) -> None:
        """Disable and highlight the target row, enable the others."""
        for variable, row in self.rows.items():
            row.set_target(variable == self.state.target)

    # --- SLOTS ---

    def on_target_changed(self, index: int) -> None:
        self.state.select_target(list(VARIABLE_METADATA)[index])
        self.update_control_states()
        self.clear_result()
        self.clear_status()

    def on_calculate_clicked(self) -> None:
        self.clear_status()
        self.clear_result()

        try:
            presentation = self.calculator.calculate(self.state)
        except Exception as e:
            logger.exception("Unexpected calculation error")
            self.show_status(
                f"An unexpected issue occurred ({type(e).__name__}). Check inputs.",
                Severity.ERROR, "Calculation Error",
            )
            QMessageBox.critical(self, "Calculation Error", str(e))
            return

        self.show_presentation(presentation)

    def on_clear_clicked(self) -> None:
        self.state.clear()
        for row in self.rows.values():
            row.set_target(False)
            row.reset()
        self.combo_target.setCurrentIndex(list(VARIABLE_METADATA).index(self.state.target))
        self.update_control_states()
        self.clear_result()
        self.show_status("Fields cleared. Enter new values.", Severity.INFORMATIONAL, "Cleared")

        for row in self.rows.values():
            if row.edit_value.isEnabled():
                row.edit_value.setFocus()
                break

    def on_about(self) -> None:
        AboutDialog(self).exec()
