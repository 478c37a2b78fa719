"""
Input Collection
================
Parses the user-entered field texts and converts them to SI units.

Parsing is culture-invariant: '.' is the only decimal separator, ',' and '_'
are accepted as digit-group separators and dropped.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, Mapping, Optional

from kinematicscalculator.model import units
from kinematicscalculator.model.errors import InputValidationError
from kinematicscalculator.model.state import FieldEntry
from kinematicscalculator.model.variables import Variable, category_of, display_name

logger = logging.getLogger(__name__)


def parse_number(text: Optional[str]) -> Optional[float]:
    """
    Parse a numeric field.

    Returns:
        The value, or None if the field is blank.

    Raises:
        InputValidationError: If the text is not a finite number.
    """
    if text is None:
        return None
    cleaned = text.strip()
    if not cleaned:
        return None

    cleaned = cleaned.replace(",", "").replace("_", "")
    try:
        value = float(cleaned)
    except ValueError:
        raise InputValidationError(f"'{text.strip()}' is not a number.") from None
    if not math.isfinite(value):
        raise InputValidationError(f"'{text.strip()}' is not a finite number.")
    return value


def value_in_si(variable: Variable, entry: FieldEntry) -> Optional[float]:
    """Value of one field in SI units, None if the field is blank."""
    try:
        value = parse_number(entry.text)
    except InputValidationError:
        raise InputValidationError(f"Invalid numeric input for '{display_name(variable)}'.") from None
    if value is None:
        return None
    if not entry.unit:
        raise InputValidationError(f"No unit selected for '{display_name(variable)}'.")
    return units.to_si(value, entry.unit, category_of(variable))


def collect_knowns(target: Variable, entries: Mapping[Variable, FieldEntry]) -> Dict[Variable, float]:
    """
    Collect the known values for a solve.

    Args:
        target: Variable being calculated; its field is ignored.
        entries: Field text and unit per variable.

    Returns:
        SI values of every non-blank, non-target field.

    Raises:
        InputValidationError: Malformed text or missing unit.
        UnknownUnitError: Unit not in the conversion tables.
    """
    knowns: Dict[Variable, float] = {}
    for variable, entry in entries.items():
        variable = Variable(variable)
        if variable == target:
            continue
        value = value_in_si(variable, entry)
        if value is not None:
            knowns[variable] = value
    logger.debug(f"Collected knowns for {target}: {knowns}")
    return knowns
