"""lh-avg exceptions."""


class LhAvgError(Exception):
    """Base exception for all lh-avg errors."""


class ParseError(LhAvgError, ValueError):
    """Score string does not match the score grammar."""

    def __init__(self, score_str: str, reason: str):
        self.score_str = score_str
        self.reason = reason
        super().__init__(f"Invalid score string {score_str!r}: {reason}")


class ScoreRangeError(ParseError):
    """A parsed component falls outside the 0-1 score range."""

    def __init__(self, score_str: str, field: str, value: float):
        self.field = field
        self.value = value
        super().__init__(
            score_str, f"{field} score {value:g} is outside the 0-1 range"
        )


class ScoreArithmeticError(LhAvgError, ArithmeticError):
    """A fraction token cannot be evaluated to a finite number."""

    def __init__(self, fraction: str, reason: str):
        self.fraction = fraction
        self.reason = reason
        super().__init__(f"Cannot evaluate fraction {fraction!r}: {reason}")
