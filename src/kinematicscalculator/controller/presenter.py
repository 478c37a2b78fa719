"""
Outcome Presentation
====================
Maps a solve outcome to the texts and severity the status banner and the
result box display.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from kinematicscalculator.model import units
from kinematicscalculator.model.outcome import (
    Impossible, Indeterminate, InputError, NoApplicableFormula, NumericError, Severity, SolveOutcome, Value,
)
from kinematicscalculator.model.variables import Variable, category_of, display_name
from kinematicscalculator.utils import format_value

SUCCESS_MESSAGE = "Calculation successful."


@dataclass(frozen=True)
class Presentation:
    severity: Severity
    title: str
    message: str
    variable_label: str = ""
    value_text: str = ""
    unit: str = ""

    @property
    def has_result(self) -> bool:
        return bool(self.value_text)


def input_error(message: str) -> Presentation:
    return Presentation(Severity.ERROR, "Input Error", message)


def present(target: Variable, outcome: SolveOutcome, unit: Optional[str]) -> Presentation:
    """
    Build the presentation of an outcome.

    Args:
        target: Variable that was solved for.
        outcome: Solver outcome.
        unit: Display unit selected for the target; the SI value is converted into it.
    """
    match outcome:
        case Value():
            return _present_value(target, outcome, unit)
        case Indeterminate():
            return Presentation(Severity.WARNING, "Indeterminate", outcome.reason)
        case NoApplicableFormula():
            return Presentation(Severity.WARNING, "Calculation Warning", outcome.reason)
        case Impossible() | NumericError():
            return Presentation(Severity.ERROR, "Calculation Error", outcome.reason)
        case InputError():
            return input_error(outcome.reason)
    raise TypeError(f"Unsupported outcome {outcome!r}")


def _present_value(target: Variable, outcome: Value, unit: Optional[str]) -> Presentation:
    category = category_of(target)
    unit = unit or units.default_unit(category)
    display_value = units.from_si(outcome.result, unit, category)

    lines: List[str] = list(outcome.warnings)
    if outcome.note:
        lines.append(outcome.note)

    if outcome.warnings:
        severity, title = Severity.WARNING, "Input Warning"
    elif outcome.note:
        severity, title = Severity.INFORMATIONAL, "Info"
    else:
        severity, title = Severity.SUCCESS, "Success"

    return Presentation(
        severity=severity,
        title=title,
        message="\n".join(lines) if lines else SUCCESS_MESSAGE,
        variable_label=f"{display_name(target)}:",
        value_text=format_value(display_value),
        unit=unit,
    )
