"""
tests/conftest.py - Shared fixtures.

Tests exercise the model and controller layers only, so no display or Qt
application is required.
"""

from pathlib import Path

import pytest

# Allow running from a source checkout without installing
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from kinematicscalculator.model.state import CalculatorState
from kinematicscalculator.model.variables import Variable


@pytest.fixture
def state():
    """Fresh calculator state with Displacement as target."""
    return CalculatorState()


@pytest.fixture
def filled_state(state):
    """State solving for final velocity from v0=0 m/s, a=9.8 m/s², t=2 s."""
    state.select_target(Variable.FINAL_VELOCITY)
    state.set_text(Variable.INITIAL_VELOCITY, "0")
    state.set_text(Variable.ACCELERATION, "9.8")
    state.set_text(Variable.TIME, "2")
    return state
