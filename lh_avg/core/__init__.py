"""Core utilities: errors, settings and logging."""

from lh_avg.core.exceptions import (
    LhAvgError,
    ParseError,
    ScoreArithmeticError,
    ScoreRangeError,
)

__all__ = [
    "LhAvgError",
    "ParseError",
    "ScoreArithmeticError",
    "ScoreRangeError",
]
