"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps numeric tolerances, window geometry and logging
   defaults in one place instead of scattering literals through the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (about text) when the app is frozen into an .exe.

Exports:
    EPSILON (float): Tolerance for floating-point comparisons.
    ASSETS_PATH (str): Absolute path to the assets directory.
    ABOUT_PATH (str): Absolute path to the about dialog text.
    LOG_LEVEL (int): Logging level, overridable by KINEMATICS_LOG_LEVEL.
    LOG_FILE (str | None): Optional log file, set by KINEMATICS_LOG_FILE.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/kinematicscalculator/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


def _log_level_from_env(default: int = logging.INFO) -> int:
    name = os.environ.get("KINEMATICS_LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


# Application
APP_NAME: str = "Kinematics Calculator"
APP_VERSION: str = "1.0.0"

# Numerics
EPSILON: float = 1e-9  # Tolerance for floating-point comparisons

# Window geometry (px)
DEFAULT_WINDOW_WIDTH: int = 600
DEFAULT_WINDOW_HEIGHT: int = 700
MIN_WINDOW_WIDTH: int = 500  # Below this the input rows become unusable
MIN_WINDOW_HEIGHT: int = 680

# Logging
LOG_LEVEL: int = _log_level_from_env()
LOG_FILE: Optional[str] = os.environ.get("KINEMATICS_LOG_FILE") or None

# Global Paths
ASSETS_PATH: str = get_resource_path("assets")
ABOUT_PATH: str = os.path.join(ASSETS_PATH, "about.html")

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
