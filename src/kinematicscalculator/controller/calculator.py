"""
Calculation Controller
======================
Runs one calculation request: collect -> solve -> present.

Classes:
    Calculator: Stateless orchestrator working on a CalculatorState.
"""
from __future__ import annotations

import logging

from kinematicscalculator.controller.inputs import collect_knowns
from kinematicscalculator.controller.presenter import Presentation, input_error, present
from kinematicscalculator.model.errors import InputValidationError
from kinematicscalculator.model.solver import REQUIRED_KNOWNS, solve
from kinematicscalculator.model.state import CalculatorState

logger = logging.getLogger(__name__)


class Calculator:
    """Glue between the calculator state, the solver and the presenter."""

    def calculate(self, state: CalculatorState) -> Presentation:
        """
        Solve for the state's target from its field entries.

        The outcome is stored on `state.last_outcome` (None when the inputs
        could not be collected).
        """
        state.last_outcome = None
        target = state.target

        try:
            knowns = collect_knowns(target, state.entries)
        except InputValidationError as e:
            logger.info(f"Input error: {e}")
            return input_error(f"Input Error: {e}")

        if len(knowns) != REQUIRED_KNOWNS:
            message = f"Provide exactly {REQUIRED_KNOWNS} known values (found {len(knowns)})."
            logger.info(message)
            return input_error(message)

        outcome = solve(target, knowns)
        state.last_outcome = outcome
        logger.info(f"Solved {target}: {type(outcome).__name__}")

        return present(target, outcome, state.entries[target].unit)
