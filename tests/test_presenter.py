"""
tests/test_presenter.py - Outcome Presentation and Formatting Tests
"""

import pytest

from kinematicscalculator.controller.presenter import SUCCESS_MESSAGE, present
from kinematicscalculator.model.outcome import (
    Impossible, Indeterminate, InputError, NoApplicableFormula, NumericError, Severity, Value,
)
from kinematicscalculator.model.variables import Variable
from kinematicscalculator.utils import format_value


class TestFormatValue:
    """Display strings."""

    @pytest.mark.parametrize("value,expected", [
        (0.0, "0"),
        (1e-12, "0"),
        (-5e-10, "0"),
        (19.6, "19.6"),
        (-2.5, "-2.5"),
        (1e-4, "0.0001"),
        (1234567.891, "1234568"),
        (9999999.0, "9999999"),
        (1e7, "1.0000E+07"),
        (-3.5e-5, "-3.5000E-05"),
        (6.02214e23, "6.0221E+23"),
    ])
    def test_format(self, value, expected):
        assert format_value(value) == expected


class TestPresent:
    """Severity, title and result texts per outcome."""

    def test_success(self):
        p = present(Variable.FINAL_VELOCITY, Value(result=19.6), "m/s")
        assert p.severity == Severity.SUCCESS
        assert p.title == "Success"
        assert p.message == SUCCESS_MESSAGE
        assert p.variable_label == "Final Velocity (v):"
        assert p.value_text == "19.6"
        assert p.unit == "m/s"
        assert p.has_result

    def test_value_converted_to_display_unit(self):
        p = present(Variable.DISPLACEMENT, Value(result=1500.0), "km")
        assert p.value_text == "1.5"
        assert p.unit == "km"

    def test_missing_unit_uses_si(self):
        p = present(Variable.TIME, Value(result=3.0), None)
        assert p.unit == "s"

    def test_note_is_informational(self):
        p = present(Variable.INITIAL_VELOCITY, Value(result=4.0, note="Negative root might also be valid."), "m/s")
        assert p.severity == Severity.INFORMATIONAL
        assert p.title == "Info"
        assert "Negative root" in p.message

    def test_warnings_raise_severity(self):
        outcome = Value(result=1.0, note="note", warnings=("first", "second"))
        p = present(Variable.TIME, outcome, "s")
        assert p.severity == Severity.WARNING
        assert p.message.splitlines() == ["first", "second", "note"]
        assert p.has_result

    @pytest.mark.parametrize("outcome,severity,title", [
        (Indeterminate(reason="r"), Severity.WARNING, "Indeterminate"),
        (NoApplicableFormula(), Severity.WARNING, "Calculation Warning"),
        (Impossible(reason="r"), Severity.ERROR, "Calculation Error"),
        (NumericError(reason="r"), Severity.ERROR, "Calculation Error"),
        (InputError(reason="r"), Severity.ERROR, "Input Error"),
    ])
    def test_no_value_outcomes(self, outcome, severity, title):
        p = present(Variable.ACCELERATION, outcome, "m/s²")
        assert p.severity == severity
        assert p.title == title
        assert not p.has_result

    def test_severity_order(self):
        assert Severity.INFORMATIONAL < Severity.SUCCESS < Severity.WARNING < Severity.ERROR
