"""
Kinematics Solver
=================
Solves the five constant-acceleration equations of one-dimensional motion

    v  = v₀ + a·t
    Δx = v₀·t + ½·a·t²
    Δx = ½·(v₀ + v)·t
    Δx = v·t − ½·a·t²
    v² = v₀² + 2·a·Δx

for one unknown variable given exactly three of the other four, in SI units.

For every target the supported input combinations are tried in a fixed order
and the first one whose operands are all known is used. Every division checks
its denominator together with a paired numerator: both near zero means the
target is not constrained (Indeterminate), a non-zero numerator means the
inputs contradict each other (Impossible).

`solve()` is a pure function and never raises for physically meaningless
input; it returns one of the outcomes from `kinematicscalculator.model.outcome`.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

from kinematicscalculator.config import EPSILON
from kinematicscalculator.model.errors import ImpossibleError, IndeterminateError, NumericSolveError
from kinematicscalculator.model.outcome import (
    Impossible, Indeterminate, InputError, NoApplicableFormula, NumericError, SolveOutcome, Value,
)
from kinematicscalculator.model.variables import Variable, display_name

logger = logging.getLogger(__name__)

REQUIRED_KNOWNS = 3

# Variable -> KnownSet attribute
FIELD_NAMES: Dict[Variable, str] = {
    Variable.DISPLACEMENT: "dx",
    Variable.INITIAL_VELOCITY: "v0",
    Variable.FINAL_VELOCITY: "v",
    Variable.ACCELERATION: "a",
    Variable.TIME: "t",
}


@dataclass(frozen=True)
class KnownSet:
    """Known magnitudes in SI units; None marks an unknown."""
    dx: Optional[float] = None
    v0: Optional[float] = None
    v: Optional[float] = None
    a: Optional[float] = None
    t: Optional[float] = None

    @classmethod
    def from_mapping(cls, knowns: Mapping[Variable, Optional[float]]) -> KnownSet:
        return cls(**{FIELD_NAMES[Variable(key)]: value for key, value in knowns.items()})

    def has(self, *names: str) -> bool:
        return all(getattr(self, name) is not None for name in names)

    def count(self) -> int:
        return sum(getattr(self, f.name) is not None for f in fields(self))


FormulaResult = Union[float, Tuple[float, Optional[str]]]


@dataclass(frozen=True)
class Formula:
    """One way of computing a target from a fixed set of knowns."""
    equation: str
    requires: Tuple[str, ...]
    evaluate: Callable[[KnownSet], FormulaResult]


# ------------------------------------------------------------------------------
# Guards
# ------------------------------------------------------------------------------
def _near_zero(x: float) -> bool:
    return abs(x) < EPSILON


def guarded_divide(
    numerator: float,
    denominator: float,
    *,
    paired: float,
    indeterminate: str,
    impossible: str,
) -> float:
    """
    Divide, classifying a near-zero denominator by its paired numerator.

    Args:
        numerator: Dividend of the formula.
        denominator: Divisor of the formula.
        paired: Quantity that must also vanish when the denominator does for
            the inputs to be consistent.
        indeterminate: Message when both the denominator and `paired` vanish.
        impossible: Message when only the denominator vanishes.

    Raises:
        IndeterminateError: Denominator and paired quantity are both ≈ 0.
        ImpossibleError: Denominator ≈ 0 but the paired quantity is not.
    """
    if _near_zero(denominator):
        if _near_zero(paired):
            raise IndeterminateError(indeterminate)
        raise ImpossibleError(impossible)
    return numerator / denominator


def _non_negative_time(value: float) -> float:
    if value < -EPSILON:
        raise ImpossibleError(f"Resulting time is negative ({value:.4g}).")
    return max(0.0, value)


def _positive_root(square: float, name: str, symbol: str) -> Tuple[float, Optional[str]]:
    if square < -EPSILON:
        raise NumericSolveError(f"Resulting {name} is imaginary ({symbol}² < 0). Check inputs.")
    root = math.sqrt(max(0.0, square))
    note = None
    if root > EPSILON:
        note = f"Calculated positive root for {symbol}. Negative root might also be valid."
    return root, note


# ------------------------------------------------------------------------------
# Time: linear and quadratic solves of ½a·t² + b·t + c = 0
# ------------------------------------------------------------------------------
def solve_time_linear(quad_b: float, quad_c: float) -> float:
    """Solve b·t + c = 0 for a non-negative t."""
    if _near_zero(quad_b):
        if _near_zero(quad_c):
            raise IndeterminateError("Time cannot be determined (a=0, v=0, Δx=0).")
        raise ImpossibleError("Impossible state (a=0, v=0, Δx≠0).")
    return _non_negative_time(-quad_c / quad_b)


def solve_time_quadratic(quad_a: float, quad_b: float, quad_c: float) -> Tuple[float, Optional[str]]:
    """
    Solve quad_a·t² + quad_b·t + quad_c = 0 for the smallest non-negative t.

    Falls back to `solve_time_linear` when quad_a ≈ 0.

    Returns:
        Tuple (time, note). The note lists both roots when two distinct
        non-negative roots exist.

    Raises:
        NumericSolveError: Negative discriminant.
        ImpossibleError: Both roots negative, or inconsistent linear case.
        IndeterminateError: Degenerate linear case (0 = 0).
    """
    if _near_zero(quad_a):
        return solve_time_linear(quad_b, quad_c), None

    disc = quad_b * quad_b - 4.0 * quad_a * quad_c
    if disc < -EPSILON:
        raise NumericSolveError("No real solution for time (discriminant < 0).")
    sqrt_disc = math.sqrt(max(0.0, disc))
    denom = 2.0 * quad_a

    t1 = (-quad_b + sqrt_disc) / denom
    t2 = (-quad_b - sqrt_disc) / denom

    valid: List[float] = []
    if t1 >= -EPSILON:
        valid.append(max(0.0, t1))
    if abs(t1 - t2) > EPSILON and t2 >= -EPSILON:
        valid.append(max(0.0, t2))

    if not valid:
        raise ImpossibleError("Both calculated time roots are negative or invalid. Check inputs.")

    note = None
    if len(valid) == 2:
        note = (
            f"Two possible positive times found ({min(valid):.3g}s, {max(valid):.3g}s). "
            f"Using the smaller time."
        )
    return min(valid), note


# ------------------------------------------------------------------------------
# Formulas per target
# ------------------------------------------------------------------------------
def _displacement_from_velocities(k: KnownSet) -> float:
    return guarded_divide(
        k.v * k.v - k.v0 * k.v0, 2.0 * k.a,
        paired=k.v - k.v0,
        indeterminate="Displacement cannot be determined (a=0, v=v₀). Provide time instead.",
        impossible="Inconsistent state (a=0, v≠v₀). Check inputs.",
    )


def _over_time(numerator: float, k: KnownSet) -> float:
    """numerator / t, for formulas derived from Δx = f(t)."""
    return guarded_divide(
        numerator, k.t,
        paired=k.dx,
        indeterminate="Cannot be determined (t=0, Δx=0). Provide other values.",
        impossible="Cannot divide by zero time (t=0, Δx≠0).",
    )


def _over_time_squared(numerator: float, k: KnownSet) -> float:
    """numerator / t², guarded on t itself so small but valid times pass."""
    return guarded_divide(
        numerator, k.t,
        paired=k.dx,
        indeterminate="Acceleration cannot be determined (t=0, Δx=0).",
        impossible="Cannot divide by zero time squared (t=0, Δx≠0).",
    ) / k.t


def _acceleration_from_velocities(k: KnownSet) -> float:
    return guarded_divide(
        k.v - k.v0, k.t,
        paired=k.v - k.v0,
        indeterminate="Acceleration cannot be determined (t=0, v=v₀).",
        impossible="Infinite acceleration implied (t=0, v≠v₀).",
    )


def _acceleration_from_displacement(k: KnownSet) -> float:
    return guarded_divide(
        k.v * k.v - k.v0 * k.v0, 2.0 * k.dx,
        paired=k.v * k.v - k.v0 * k.v0,
        indeterminate="Acceleration cannot be determined (Δx=0, v²=v₀²).",
        impossible="Inconsistent state (Δx=0, v²≠v₀²).",
    )


def _time_from_velocities(k: KnownSet) -> float:
    return _non_negative_time(guarded_divide(
        k.v - k.v0, k.a,
        paired=k.v - k.v0,
        indeterminate="Time cannot be determined (a=0, v=v₀).",
        impossible="Impossible state (a=0, v≠v₀). Check inputs.",
    ))


def _time_from_average_velocity(k: KnownSet) -> float:
    return _non_negative_time(guarded_divide(
        2.0 * k.dx, k.v0 + k.v,
        paired=k.dx,
        indeterminate="Time cannot be determined (Δx=0, avg v=0).",
        impossible="Impossible state (Δx≠0, avg v=0).",
    ))


FORMULAS: Dict[Variable, Tuple[Formula, ...]] = {
    Variable.DISPLACEMENT: (
        Formula("Δx = v₀t + ½at²", ("v0", "a", "t"),
                lambda k: k.v0 * k.t + 0.5 * k.a * k.t * k.t),
        Formula("Δx = ½(v₀ + v)t", ("v0", "v", "t"),
                lambda k: 0.5 * (k.v0 + k.v) * k.t),
        Formula("Δx = vt − ½at²", ("v", "a", "t"),
                lambda k: k.v * k.t - 0.5 * k.a * k.t * k.t),
        Formula("Δx = (v² − v₀²) / 2a", ("v0", "v", "a"),
                _displacement_from_velocities),
    ),
    Variable.INITIAL_VELOCITY: (
        Formula("v₀ = v − at", ("v", "a", "t"),
                lambda k: k.v - k.a * k.t),
        Formula("v₀ = (Δx − ½at²) / t", ("dx", "a", "t"),
                lambda k: _over_time(k.dx - 0.5 * k.a * k.t * k.t, k)),
        Formula("v₀ = 2Δx / t − v", ("dx", "v", "t"),
                lambda k: _over_time(2.0 * k.dx, k) - k.v),
        Formula("v₀ = √(v² − 2aΔx)", ("v", "a", "dx"),
                lambda k: _positive_root(k.v * k.v - 2.0 * k.a * k.dx, "initial velocity", "v₀")),
    ),
    Variable.FINAL_VELOCITY: (
        Formula("v = v₀ + at", ("v0", "a", "t"),
                lambda k: k.v0 + k.a * k.t),
        Formula("v = 2Δx / t − v₀", ("dx", "v0", "t"),
                lambda k: _over_time(2.0 * k.dx, k) - k.v0),
        Formula("v = Δx / t + ½at", ("dx", "a", "t"),
                lambda k: _over_time(k.dx, k) + 0.5 * k.a * k.t),
        Formula("v = √(v₀² + 2aΔx)", ("v0", "a", "dx"),
                lambda k: _positive_root(k.v0 * k.v0 + 2.0 * k.a * k.dx, "final velocity", "v")),
    ),
    Variable.ACCELERATION: (
        Formula("a = (v − v₀) / t", ("v0", "v", "t"),
                _acceleration_from_velocities),
        Formula("a = 2(Δx − v₀t) / t²", ("dx", "v0", "t"),
                lambda k: _over_time_squared(2.0 * (k.dx - k.v0 * k.t), k)),
        Formula("a = 2(vt − Δx) / t²", ("dx", "v", "t"),
                lambda k: _over_time_squared(2.0 * (k.v * k.t - k.dx), k)),
        Formula("a = (v² − v₀²) / 2Δx", ("v0", "v", "dx"),
                _acceleration_from_displacement),
    ),
    Variable.TIME: (
        Formula("t = (v − v₀) / a", ("v0", "v", "a"),
                _time_from_velocities),
        Formula("t = 2Δx / (v₀ + v)", ("dx", "v0", "v"),
                _time_from_average_velocity),
        Formula("½at² + v₀t − Δx = 0", ("dx", "a", "v0"),
                lambda k: solve_time_quadratic(0.5 * k.a, k.v0, -k.dx)),
        Formula("½at² − vt + Δx = 0", ("dx", "a", "v"),
                lambda k: solve_time_quadratic(0.5 * k.a, -k.v, k.dx)),
    ),
}


def select_formula(target: Variable, knowns: KnownSet) -> Optional[Formula]:
    """First formula for `target` whose operands are all known, in table order."""
    for formula in FORMULAS[Variable(target)]:
        if knowns.has(*formula.requires):
            return formula
    return None


# ------------------------------------------------------------------------------
# Consistency checks
# ------------------------------------------------------------------------------
def check_consistency(k: KnownSet) -> List[str]:
    """
    Non-fatal physical plausibility checks on the known values.

    Returns:
        Warning messages, empty when nothing looks suspicious.
    """
    warnings: List[str] = []

    if k.has("a", "v0", "v"):
        if _near_zero(k.a) and abs(k.v - k.v0) > EPSILON:
            warnings.append("Provided acceleration is zero, but initial/final velocities differ.")
        if k.a > EPSILON and k.v < k.v0 - EPSILON:
            warnings.append("Provided acceleration is positive, but final velocity < initial velocity.")
        if k.a < -EPSILON and k.v > k.v0 + EPSILON:
            warnings.append("Provided acceleration is negative, but final velocity > initial velocity.")

    if k.t is not None and _near_zero(k.t):
        if k.has("v0", "v") and abs(k.v - k.v0) > EPSILON:
            warnings.append("Provided time is zero, but initial/final velocities differ.")
        if k.dx is not None and abs(k.dx) > EPSILON:
            warnings.append("Provided time is zero, but displacement is non-zero.")

    if k.has("v0", "a", "dx") and k.v0 * k.v0 + 2.0 * k.a * k.dx < -EPSILON:
        warnings.append("Provided inputs imply an imaginary final velocity (v² < 0).")

    if k.has("v", "a", "dx") and k.v * k.v - 2.0 * k.a * k.dx < -EPSILON:
        warnings.append("Provided inputs imply an imaginary initial velocity (v₀² < 0).")

    return warnings


def _validate(target: Variable, knowns: Mapping[Variable, Optional[float]]) -> Optional[str]:
    for key, value in knowns.items():
        if value is None:
            continue
        if Variable(key) == target:
            return f"{display_name(target)} is the variable being calculated and must be left blank."
        if not math.isfinite(value):
            return f"Invalid numeric input for '{display_name(Variable(key))}'."
    count = sum(value is not None for value in knowns.values())
    if count != REQUIRED_KNOWNS:
        return f"Provide exactly {REQUIRED_KNOWNS} known values (found {count})."
    return None


# ------------------------------------------------------------------------------
# Entry points
# ------------------------------------------------------------------------------
def solve(target: Variable, knowns: Mapping[Variable, Optional[float]]) -> SolveOutcome:
    """
    Solve for `target` from exactly three known values.

    Args:
        target: The unknown variable.
        knowns: Known magnitudes in SI units keyed by variable. Missing keys
            and None values are unknowns.

    Returns:
        Value on success; Indeterminate, Impossible, NoApplicableFormula,
        InputError or NumericError otherwise. All carry the consistency
        warnings detected before solving.
    """
    target = Variable(target)

    problem = _validate(target, knowns)
    if problem is not None:
        logger.debug(f"Rejected input for {target}: {problem}")
        return InputError(reason=problem)

    k = KnownSet.from_mapping(knowns)
    warnings = tuple(check_consistency(k))
    for message in warnings:
        logger.info(f"Input warning: {message}")

    if (target == Variable.TIME and k.has("dx", "v0", "v")
            and _near_zero(k.v0 + k.v) and abs(k.dx) > EPSILON):
        return Impossible(
            reason="Average velocity is zero, but displacement is non-zero. Cannot solve for time.",
            warnings=warnings,
        )

    formula = select_formula(target, k)
    if formula is None:
        logger.info(f"No applicable formula for {target} with {k}")
        return NoApplicableFormula(warnings=warnings)

    logger.debug(f"Solving {target} with '{formula.equation}'")
    try:
        evaluated = formula.evaluate(k)
        result, note = evaluated if isinstance(evaluated, tuple) else (evaluated, None)
        if not math.isfinite(result):
            raise OverflowError(result)
    except IndeterminateError as e:
        return Indeterminate(reason=str(e), warnings=warnings)
    except ImpossibleError as e:
        return Impossible(reason=str(e), warnings=warnings)
    except NumericSolveError as e:
        return NumericError(reason=str(e), warnings=warnings)
    except OverflowError:
        return NumericError(
            reason="Numerical overflow. Inputs likely result in excessively large numbers.",
            warnings=warnings,
        )

    logger.debug(f"{target} = {result!r}")
    return Value(result=result, note=note, warnings=warnings)


def solve_kinematics(
    target: Variable,
    *,
    dx: Optional[float] = None,
    v0: Optional[float] = None,
    v: Optional[float] = None,
    a: Optional[float] = None,
    t: Optional[float] = None,
) -> SolveOutcome:
    """Keyword form of `solve()`."""
    knowns = {
        Variable.DISPLACEMENT: dx,
        Variable.INITIAL_VELOCITY: v0,
        Variable.FINAL_VELOCITY: v,
        Variable.ACCELERATION: a,
        Variable.TIME: t,
    }
    return solve(target, {key: value for key, value in knowns.items() if value is not None})
