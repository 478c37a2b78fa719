"""
tests/test_units.py - Unit Conversion Tests
"""

import numpy as np
import pytest

from kinematicscalculator.model import units
from kinematicscalculator.model.errors import InputValidationError, UnknownUnitError
from kinematicscalculator.model.variables import UnitCategory

ALL_UNITS = [
    (category, unit)
    for category, table in units.UNIT_FACTORS.items()
    for unit in table
]


class TestConversion:
    """to_si / from_si."""

    @pytest.mark.parametrize("category,unit", ALL_UNITS)
    @pytest.mark.parametrize("value", [0.0, 1.0, -42.5, 3.3e-7, 6.02e23])
    def test_round_trip(self, category, unit, value):
        converted = units.to_si(value, unit, category)
        assert units.from_si(converted, unit, category) == pytest.approx(value, rel=1e-12, abs=1e-300)

    def test_known_factors(self):
        assert units.to_si(1.0, "km/h", UnitCategory.VELOCITY) == pytest.approx(1000.0 / 3600.0)
        assert units.to_si(2.0, "min", UnitCategory.TIME) == 120.0
        assert units.to_si(10.0, "ft", UnitCategory.LENGTH) == pytest.approx(3.048)
        assert units.from_si(1609.34, "mi", UnitCategory.LENGTH) == pytest.approx(1.0)
        assert units.from_si(1.0, "ft/s²", UnitCategory.ACCELERATION) == pytest.approx(1 / 0.3048)

    def test_category_by_name(self):
        assert units.to_si(1.0, "h", "Time") == 3600.0

    def test_array_input(self):
        values = np.linspace(0.0, 10.0, 5)
        converted = units.to_si(values, "km", UnitCategory.LENGTH)
        assert isinstance(converted, np.ndarray)
        np.testing.assert_allclose(converted, values * 1000.0)
        np.testing.assert_allclose(units.from_si(converted, "km", UnitCategory.LENGTH), values)

    def test_scalar_returns_float(self):
        assert type(units.to_si(1, "m", UnitCategory.LENGTH)) is float


class TestTables:
    """Unit lookup and errors."""

    def test_units_for_keeps_display_order(self):
        assert units.units_for(UnitCategory.LENGTH) == ["m", "ft", "km", "mi"]
        assert units.units_for(UnitCategory.VELOCITY) == ["m/s", "ft/s", "km/h", "mph"]
        assert units.units_for(UnitCategory.ACCELERATION) == ["m/s²", "ft/s²"]
        assert units.units_for(UnitCategory.TIME) == ["s", "min", "h"]

    def test_default_unit_is_si(self):
        for category in UnitCategory:
            assert units.factor(units.default_unit(category), category) == 1.0

    def test_unknown_unit(self):
        with pytest.raises(UnknownUnitError, match="Unknown unit 'yd'"):
            units.to_si(1.0, "yd", UnitCategory.LENGTH)

    def test_unit_from_other_category(self):
        with pytest.raises(UnknownUnitError):
            units.from_si(1.0, "km/h", UnitCategory.LENGTH)

    def test_unknown_category(self):
        with pytest.raises(UnknownUnitError, match="category"):
            units.to_si(1.0, "m", "Mass")

    def test_unknown_unit_error_hierarchy(self):
        with pytest.raises(InputValidationError):
            units.factor("parsec", UnitCategory.LENGTH)
        with pytest.raises(KeyError):
            units.factor("parsec", UnitCategory.LENGTH)
