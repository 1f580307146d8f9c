"""Score aggregation for Lighthouse score strings."""

import math
from collections.abc import Sequence

from lh_avg.core.exceptions import (
    LhAvgError,
    ParseError,
    ScoreArithmeticError,
    ScoreRangeError,
)

from .formatting import perc_diff
from .models import (
    LighthousePercentages,
    LighthouseScores,
    PwaDenominators,
    PwaPercentages,
    PwaScores,
    Result,
    ScoreOutcome,
    SplitScore,
)
from .splitter import split_score


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean of a non-empty sequence."""
    return sum(values) / len(values)


def eval_fraction(fraction: str) -> float:
    """
    Evaluate a ``"numerator/denominator"`` token.

    Raises:
        ScoreArithmeticError: If either part is not a number, the
            denominator is zero, or the result is not finite.
    """
    parts = fraction.split("/")
    if len(parts) != 2:
        raise ScoreArithmeticError(fraction, "expected 'numerator/denominator'")

    try:
        numerator, denominator = (float(part) for part in parts)
    except ValueError:
        raise ScoreArithmeticError(fraction, "non-numeric part") from None

    if denominator == 0:
        raise ScoreArithmeticError(fraction, "zero denominator")

    value = numerator / denominator
    if not math.isfinite(value):
        raise ScoreArithmeticError(fraction, "result is not finite")
    return value


class ScoreAggregator:
    """
    Turns score strings into normalized Lighthouse scores.

    Category scores (0-100) are divided by 100. PWA sub-scores are either
    pass counts divided by the number of checks in their category
    (shorthand form) or explicit ``passed/total`` fractions.

    The composite ``average`` is the unweighted mean of the seven
    components: perf, a11y, bp, seo, fnr, ins and po.
    """

    def __init__(self, denominators: PwaDenominators | None = None) -> None:
        """
        Initialize the aggregator.

        Args:
            denominators: Check counts for the shorthand PWA form.
                          If None, uses Lighthouse's 3/3/7.
        """
        self.denominators = denominators or PwaDenominators()

    @staticmethod
    def _number(split: SplitScore, field: str) -> float:
        token = getattr(split, field)
        try:
            value = float(token)
        except ValueError:
            raise ParseError(
                split.raw, f"non-numeric {field} token {token!r}"
            ) from None
        if not math.isfinite(value):
            raise ParseError(split.raw, f"non-finite {field} token {token!r}")
        return value

    def _category(self, split: SplitScore, field: str) -> float:
        return self._number(split, field) / 100

    def _pwa(self, split: SplitScore, field: str) -> float:
        if split.shorthand_form:
            return self._number(split, field) / getattr(self.denominators, field)
        return eval_fraction(getattr(split, field))

    def compute_scores(self, score: str | SplitScore) -> LighthouseScores:
        """
        Compute numeric scores for one score string.

        Args:
            score: Raw score string or an already split one.

        Returns:
            LighthouseScores with every value in [0, 1].

        Raises:
            ParseError: If the string is malformed or a score is out of range.
            ScoreArithmeticError: If a PWA fraction cannot be evaluated.
        """
        split = split_score(score) if isinstance(score, str) else score

        values = {
            field: self._category(split, field)
            for field in ("perf", "a11y", "bp", "seo")
        }
        values.update(
            {field: self._pwa(split, field) for field in ("fnr", "ins", "po")}
        )

        for field, value in values.items():
            if not 0.0 <= value <= 1.0:
                raise ScoreRangeError(split.raw, field, value)

        return LighthouseScores(
            perf=values["perf"],
            a11y=values["a11y"],
            bp=values["bp"],
            seo=values["seo"],
            pwa=PwaScores(fnr=values["fnr"], ins=values["ins"], po=values["po"]),
            average=mean(list(values.values())),
        )

    def compute_one(
        self, score: str | SplitScore, as_percentage: bool = False
    ) -> Result:
        """
        Compute the result for one score string.

        Args:
            score: Raw score string or an already split one.
            as_percentage: Return percentage strings instead of fractions.

        Returns:
            LighthousePercentages if as_percentage, else LighthouseScores.
        """
        scores = self.compute_scores(score)
        return scores.to_percentages() if as_percentage else scores

    @staticmethod
    def diff(row: LighthouseScores, reference: LighthouseScores) -> LighthouseScores:
        """Absolute difference of every score against the reference row."""
        return LighthouseScores(
            perf=row.perf - reference.perf,
            a11y=row.a11y - reference.a11y,
            bp=row.bp - reference.bp,
            seo=row.seo - reference.seo,
            pwa=PwaScores(
                fnr=row.pwa.fnr - reference.pwa.fnr,
                ins=row.pwa.ins - reference.pwa.ins,
                po=row.pwa.po - reference.pwa.po,
            ),
            average=row.average - reference.average,
        )

    @staticmethod
    def percentage_diff(
        row: LighthouseScores, reference: LighthouseScores
    ) -> LighthousePercentages:
        """Difference against the reference row in percentage points."""
        return LighthousePercentages(
            perf=perc_diff(row.perf, reference.perf),
            a11y=perc_diff(row.a11y, reference.a11y),
            bp=perc_diff(row.bp, reference.bp),
            seo=perc_diff(row.seo, reference.seo),
            pwa=PwaPercentages(
                fnr=perc_diff(row.pwa.fnr, reference.pwa.fnr),
                ins=perc_diff(row.pwa.ins, reference.pwa.ins),
                po=perc_diff(row.pwa.po, reference.pwa.po),
            ),
            average=perc_diff(row.average, reference.average),
        )

    def _present(
        self,
        rows: list[LighthouseScores],
        as_percentage: bool,
        show_diff: bool,
    ) -> list[Result]:
        if not rows:
            return []
        if not show_diff:
            return [row.to_percentages() if as_percentage else row for row in rows]

        reference = rows[0]
        compare = self.percentage_diff if as_percentage else self.diff
        head: Result = reference.to_percentages() if as_percentage else reference
        return [head] + [compare(row, reference) for row in rows[1:]]

    def average(
        self,
        score_strings: Sequence[str],
        as_percentage: bool = False,
        show_diff: bool = False,
    ) -> list[Result]:
        """
        Compute results for a batch of score strings.

        The first error aborts the whole batch; use average_outcomes to
        collect per-item errors instead.

        Args:
            score_strings: Score strings, scored in order.
            as_percentage: Return percentage strings instead of fractions.
            show_diff: Replace every row after the first with its difference
                       against the first row.

        Returns:
            One result per score string, in input order.
        """
        rows = [self.compute_scores(score_str) for score_str in score_strings]
        return self._present(rows, as_percentage, show_diff)

    def average_outcomes(
        self,
        score_strings: Sequence[str],
        as_percentage: bool = False,
        show_diff: bool = False,
    ) -> list[ScoreOutcome]:
        """
        Compute results for a batch, recording failures per item.

        Diffs are taken against the first successfully scored row.

        Returns:
            One ScoreOutcome per score string, in input order.
        """
        scored: list[tuple[str, LighthouseScores | None, LhAvgError | None]] = []
        for score_str in score_strings:
            try:
                scored.append((score_str, self.compute_scores(score_str), None))
            except LhAvgError as e:
                scored.append((score_str, None, e))

        rows = [row for _, row, _ in scored if row is not None]
        presented = iter(self._present(rows, as_percentage, show_diff))

        return [
            ScoreOutcome(
                score_str=score_str,
                result=next(presented) if row is not None else None,
                error=error,
            )
            for score_str, row, error in scored
        ]


def compute_one(score_str: str, as_percentage: bool = False) -> Result:
    """Compute the result for one score string with default denominators."""
    return ScoreAggregator().compute_one(score_str, as_percentage)


def average(
    score_strings: Sequence[str],
    as_percentage: bool = False,
    show_diff: bool = False,
) -> list[Result]:
    """
    Lighthouse average scores calculator.

    Example:
        >>> average(["14 / 100 / 98 / 100 / (1, 0, 6)"], as_percentage=True)[0].average
        '61.58%'
    """
    return ScoreAggregator().average(score_strings, as_percentage, show_diff)
