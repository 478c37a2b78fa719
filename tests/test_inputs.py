"""
tests/test_inputs.py - Input Collection Tests
"""

import pytest

from kinematicscalculator.controller.inputs import collect_knowns, parse_number, value_in_si
from kinematicscalculator.model.errors import InputValidationError, UnknownUnitError
from kinematicscalculator.model.state import FieldEntry
from kinematicscalculator.model.variables import Variable


class TestParseNumber:
    """Culture-invariant parsing of field texts."""

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_blank(self, text):
        assert parse_number(text) is None

    @pytest.mark.parametrize("text,expected", [
        ("12.5", 12.5),
        ("  -4 ", -4.0),
        ("+3", 3.0),
        ("1e3", 1000.0),
        ("2.5E-2", 0.025),
        ("1,000.5", 1000.5),
        (".5", 0.5),
    ])
    def test_valid(self, text, expected):
        assert parse_number(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["abc", "1.2.3", "12 m", "(5)", "nan", "inf", "-Infinity"])
    def test_invalid(self, text):
        with pytest.raises(InputValidationError):
            parse_number(text)


class TestCollectKnowns:
    """Field entries to SI knowns."""

    def test_skips_target_and_blank_fields(self):
        entries = {
            Variable.DISPLACEMENT: FieldEntry("", "m"),
            Variable.INITIAL_VELOCITY: FieldEntry("0", "m/s"),
            Variable.FINAL_VELOCITY: FieldEntry("99", "m/s"),
            Variable.ACCELERATION: FieldEntry("9.8", "m/s²"),
            Variable.TIME: FieldEntry("2", "s"),
        }
        knowns = collect_knowns(Variable.FINAL_VELOCITY, entries)
        assert knowns == {
            Variable.INITIAL_VELOCITY: 0.0,
            Variable.ACCELERATION: 9.8,
            Variable.TIME: 2.0,
        }

    def test_converts_to_si(self):
        entries = {
            Variable.DISPLACEMENT: FieldEntry("1.5", "km"),
            Variable.TIME: FieldEntry("2", "min"),
        }
        knowns = collect_knowns(Variable.ACCELERATION, entries)
        assert knowns[Variable.DISPLACEMENT] == pytest.approx(1500.0)
        assert knowns[Variable.TIME] == pytest.approx(120.0)

    def test_invalid_text_names_variable(self):
        entries = {Variable.TIME: FieldEntry("soon", "s")}
        with pytest.raises(InputValidationError, match=r"Invalid numeric input for 'Time \(t\)'"):
            collect_knowns(Variable.DISPLACEMENT, entries)

    def test_missing_unit(self):
        with pytest.raises(InputValidationError, match="No unit selected"):
            value_in_si(Variable.ACCELERATION, FieldEntry("3", None))

    def test_blank_field_without_unit_is_fine(self):
        assert value_in_si(Variable.ACCELERATION, FieldEntry("", None)) is None

    def test_unknown_unit(self):
        with pytest.raises(UnknownUnitError):
            value_in_si(Variable.INITIAL_VELOCITY, FieldEntry("3", "knots"))
