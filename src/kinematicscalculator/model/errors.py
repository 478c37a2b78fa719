"""
Exception Hierarchy
===================
All errors raised by the calculator derive from KinematicsError.

The solver helpers raise IndeterminateError, ImpossibleError and
NumericSolveError; `solve()` converts them into outcome values, so they never
reach the GUI. InputValidationError is raised by the input collector and turned
into an "Input Error" status by the controller.
"""


class KinematicsError(Exception):
    """Base class for calculator errors."""


class InputValidationError(KinematicsError, ValueError):
    """Malformed numeric text, missing unit or wrong number of known values."""


class UnknownUnitError(InputValidationError, KeyError):
    """Unit or unit category not present in the conversion tables."""

    def __str__(self) -> str:
        # KeyError quotes its message, keep it readable in the status banner
        return str(self.args[0]) if self.args else ""


class IndeterminateError(KinematicsError):
    """Known values are consistent but do not constrain the target."""


class ImpossibleError(KinematicsError):
    """Known values contradict each other under the kinematic model."""


class NumericSolveError(KinematicsError):
    """Overflow or an unreal (negative radicand / discriminant) result."""
