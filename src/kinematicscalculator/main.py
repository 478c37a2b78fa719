"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging.
2. Instantiates the Calculator State (Model).
3. Instantiates the Main Window (View), which owns the Calculator (Controller).
4. Prevents circular import errors by being the orchestrator.
"""
import sys

from PySide6.QtWidgets import QApplication

from kinematicscalculator import config
from kinematicscalculator.logging_config import install_qt_message_handler, setup_logging
from kinematicscalculator.model.state import CalculatorState
from kinematicscalculator.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    # Set KINEMATICS_LOG_LEVEL=DEBUG to see the selected formulas
    setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)
    install_qt_message_handler()

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(config.APP_NAME)
    app.setApplicationVersion(config.APP_VERSION)

    # 3. Initialize the Data Model
    state = CalculatorState()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(state)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
