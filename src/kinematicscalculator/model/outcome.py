"""
Solve Outcomes
==============
Value types returned by the kinematics solver.

A solve never raises for physically meaningless input; it returns one of the
outcome variants below. Every variant carries the non-fatal consistency
warnings that were detected before the formula was evaluated.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Tuple, Union


class Severity(IntEnum):
    """Ordered severity of a status message (higher is more severe)."""
    INFORMATIONAL = 0
    SUCCESS = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True, kw_only=True)
class _Outcome:
    warnings: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, kw_only=True)
class Value(_Outcome):
    """A determined result in SI units, optionally with an informational note."""
    result: float
    note: Optional[str] = None


@dataclass(frozen=True, kw_only=True)
class Indeterminate(_Outcome):
    """The knowns are consistent but leave the target unconstrained."""
    reason: str


@dataclass(frozen=True, kw_only=True)
class Impossible(_Outcome):
    """The knowns contradict each other."""
    reason: str


@dataclass(frozen=True, kw_only=True)
class NoApplicableFormula(_Outcome):
    """None of the supported combinations matches the supplied knowns."""
    reason: str = (
        "Could not calculate result. Ensure the provided inputs allow "
        "calculation for the selected variable."
    )


@dataclass(frozen=True, kw_only=True)
class InputError(_Outcome):
    """The solve was not attempted (wrong count of knowns, non-finite value, ...)."""
    reason: str


@dataclass(frozen=True, kw_only=True)
class NumericError(_Outcome):
    """Overflow or an unreal result (negative discriminant or radicand)."""
    reason: str


SolveOutcome = Union[Value, Indeterminate, Impossible, NoApplicableFormula, InputError, NumericError]
