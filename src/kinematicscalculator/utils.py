from kinematicscalculator.config import EPSILON

PLAIN_MIN = 1e-4
PLAIN_MAX = 1e7


def format_value(value: float) -> str:
    """Format a result for display: plain decimal in [1e-4, 1e7), scientific otherwise."""
    magnitude = abs(value)
    if magnitude < EPSILON:
        return "0"
    if PLAIN_MIN <= magnitude < PLAIN_MAX:
        return f"{value:.7G}"
    return f"{value:.4E}"
