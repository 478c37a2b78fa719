"""Kinematic variables and their metadata."""
from dataclasses import dataclass
from enum import StrEnum
from typing import Dict


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class Variable(StrEnum):
    """The five variables of one-dimensional motion with constant acceleration."""
    DISPLACEMENT = "displacement"
    INITIAL_VELOCITY = "initial_velocity"
    FINAL_VELOCITY = "final_velocity"
    ACCELERATION = "acceleration"
    TIME = "time"


class UnitCategory(StrEnum):
    LENGTH = "Length"
    VELOCITY = "Velocity"
    ACCELERATION = "Acceleration"
    TIME = "Time"


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class VariableInfo:
    display_name: str
    symbol: str
    category: UnitCategory


# Centralized Metadata for UI and Presentation (order = display order)
VARIABLE_METADATA: Dict[Variable, VariableInfo] = {
    Variable.DISPLACEMENT: VariableInfo(
        display_name="Displacement (Δx)", symbol="Δx", category=UnitCategory.LENGTH
    ),
    Variable.INITIAL_VELOCITY: VariableInfo(
        display_name="Initial Velocity (v₀)", symbol="v₀", category=UnitCategory.VELOCITY
    ),
    Variable.FINAL_VELOCITY: VariableInfo(
        display_name="Final Velocity (v)", symbol="v", category=UnitCategory.VELOCITY
    ),
    Variable.ACCELERATION: VariableInfo(
        display_name="Acceleration (a)", symbol="a", category=UnitCategory.ACCELERATION
    ),
    Variable.TIME: VariableInfo(
        display_name="Time (t)", symbol="t", category=UnitCategory.TIME
    ),
}


def display_name(variable: Variable) -> str:
    return VARIABLE_METADATA[variable].display_name


def category_of(variable: Variable) -> UnitCategory:
    return VARIABLE_METADATA[variable].category
