"""lh-avg - Lighthouse average score calculator."""

from lh_avg.core.exceptions import (
    LhAvgError,
    ParseError,
    ScoreArithmeticError,
    ScoreRangeError,
)
from lh_avg.scoring import (
    LighthousePercentages,
    LighthouseScores,
    ScoreAggregator,
    ScoreForm,
    average,
    compute_one,
    split_score,
)

__version__ = "1.5.0"

__all__ = [
    "__version__",
    "average",
    "compute_one",
    "split_score",
    "LighthousePercentages",
    "LighthouseScores",
    "ScoreAggregator",
    "ScoreForm",
    "LhAvgError",
    "ParseError",
    "ScoreArithmeticError",
    "ScoreRangeError",
]
