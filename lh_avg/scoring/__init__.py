"""Lighthouse score parsing and aggregation."""

from .aggregator import ScoreAggregator, average, compute_one, eval_fraction, mean
from .formatting import perc, perc_diff
from .models import (
    LighthousePercentages,
    LighthouseScores,
    PwaDenominators,
    PwaPercentages,
    PwaScores,
    Result,
    ScoreForm,
    ScoreOutcome,
    SplitScore,
)
from .splitter import split_score

__all__ = [
    "ScoreAggregator",
    "average",
    "compute_one",
    "eval_fraction",
    "mean",
    "perc",
    "perc_diff",
    "split_score",
    "LighthousePercentages",
    "LighthouseScores",
    "PwaDenominators",
    "PwaPercentages",
    "PwaScores",
    "Result",
    "ScoreForm",
    "ScoreOutcome",
    "SplitScore",
]
