"""
Unit Conversion
===============
Fixed linear conversion factors between display units and SI base units
(m, m/s, m/s², s).

Both conversions accept a scalar or a numpy array, so the same tables serve the
single-value GUI path and bulk conversions.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List

import numpy as np

from kinematicscalculator.model.errors import UnknownUnitError
from kinematicscalculator.model.variables import UnitCategory

if TYPE_CHECKING:
    import numpy.typing as npt

FOOT = 0.3048  # m
MILE = 1609.34  # m
HOUR = 3600.0  # s

# Factor to multiply a value in the given unit by to obtain SI.
# Insertion order is the order shown in the unit drop-downs; the first unit is the default.
UNIT_FACTORS: Dict[UnitCategory, Dict[str, float]] = {
    UnitCategory.LENGTH: {
        "m": 1.0,
        "ft": FOOT,
        "km": 1000.0,
        "mi": MILE,
    },
    UnitCategory.VELOCITY: {
        "m/s": 1.0,
        "ft/s": FOOT,
        "km/h": 1000.0 / HOUR,
        "mph": MILE / HOUR,
    },
    UnitCategory.ACCELERATION: {
        "m/s²": 1.0,
        "ft/s²": FOOT,
    },
    UnitCategory.TIME: {
        "s": 1.0,
        "min": 60.0,
        "h": HOUR,
    },
}


def units_for(category: UnitCategory | str) -> List[str]:
    """Unit names available for a category, default unit first."""
    return list(_table(category).keys())


def default_unit(category: UnitCategory | str) -> str:
    return units_for(category)[0]


def factor(unit: str, category: UnitCategory | str) -> float:
    """SI factor of `unit` within `category`."""
    table = _table(category)
    try:
        return table[unit]
    except KeyError:
        raise UnknownUnitError(f"Unknown unit '{unit}' for category '{category}'.") from None


def to_si(
    value: float | npt.NDArray[np.float64],
    unit: str,
    category: UnitCategory | str,
) -> float | npt.NDArray[np.float64]:
    """
    Convert a value from `unit` to its SI equivalent.

    Args:
        value: Magnitude(s) expressed in `unit`.
        unit: Unit name, e.g. "km/h".
        category: Unit category the unit belongs to.

    Returns:
        The magnitude in SI base units, same shape as `value`.

    Raises:
        UnknownUnitError: If the category or the unit is not recognized.
    """
    result = np.multiply(value, factor(unit, category))
    return float(result) if np.ndim(result) == 0 else result


def from_si(
    value_si: float | npt.NDArray[np.float64],
    unit: str,
    category: UnitCategory | str,
) -> float | npt.NDArray[np.float64]:
    """Convert a value in SI base units into `unit`. Inverse of `to_si`."""
    result = np.divide(value_si, factor(unit, category))
    return float(result) if np.ndim(result) == 0 else result


def _table(category: UnitCategory | str) -> Dict[str, float]:
    try:
        return UNIT_FACTORS[UnitCategory(category)]
    except ValueError:
        raise UnknownUnitError(f"Unknown unit category '{category}'.") from None
