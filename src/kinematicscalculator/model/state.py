"""
Calculator State (Data Model)
=============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the selected target, the text and unit of every
   input field and the last outcome in one place.
2. Decoupling: Views read from this object; the controller computes from it.

Nothing here is persisted; a fresh state is created at start-up.

Classes:
    FieldEntry: Text and unit of one input field.
    CalculatorState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Dict, Optional

from kinematicscalculator.model import units
from kinematicscalculator.model.errors import UnknownUnitError
from kinematicscalculator.model.outcome import SolveOutcome
from kinematicscalculator.model.variables import VARIABLE_METADATA, Variable, category_of

logger = logging.getLogger(__name__)

DEFAULT_TARGET = Variable.DISPLACEMENT


@dataclass
class FieldEntry:
    text: str = ""
    unit: Optional[str] = None


def _default_entries() -> Dict[Variable, FieldEntry]:
    return {
        variable: FieldEntry(unit=units.default_unit(info.category))
        for variable, info in VARIABLE_METADATA.items()
    }


@dataclass
class CalculatorState:
    target: Variable = DEFAULT_TARGET
    entries: Dict[Variable, FieldEntry] = field(default_factory=_default_entries)
    last_outcome: Optional[SolveOutcome] = None

    def select_target(self, variable: Variable) -> None:
        """Make `variable` the unknown; its field is emptied."""
        self.target = Variable(variable)
        self.entries[self.target].text = ""
        self.last_outcome = None
        logger.debug(f"Target set to {self.target}")

    def set_text(self, variable: Variable, text: str) -> None:
        self.entries[Variable(variable)].text = text

    def set_unit(self, variable: Variable, unit: str) -> None:
        variable = Variable(variable)
        if unit not in units.units_for(category_of(variable)):
            raise UnknownUnitError(
                f"Unknown unit '{unit}' for category '{category_of(variable)}'."
            )
        self.entries[variable].unit = unit

    def clear(self) -> None:
        """Empty every field, reset units and the target."""
        self.entries = _default_entries()
        self.target = DEFAULT_TARGET
        self.last_outcome = None
        logger.debug("State cleared")
