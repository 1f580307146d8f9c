"""Data models for Lighthouse scores."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .formatting import perc


class ScoreForm(str, Enum):
    """Syntax used for the PWA group of a score string."""

    SHORTHAND = "shorthand"  # (1, 0, 6)
    FRACTION = "fraction"  # (1/3, 0/3, 6/7)


class SplitScore(BaseModel):
    """Tokens extracted from a score string."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(..., description="Original score string")
    perf: str = Field(..., description="Performance token (0-100)")
    a11y: str = Field(..., description="Accessibility token (0-100)")
    bp: str = Field(..., description="Best Practices token (0-100)")
    seo: str = Field(..., description="SEO token (0-100)")
    fnr: str = Field(..., description="Fast & Reliable token")
    ins: str = Field(..., description="Installable token")
    po: str = Field(..., description="PWA Optimized token")
    form: ScoreForm = Field(..., description="Syntax of the PWA group")

    @property
    def shorthand_form(self) -> bool:
        """Whether the PWA group holds bare pass counts."""
        return self.form is ScoreForm.SHORTHAND


class PwaDenominators(BaseModel):
    """Number of checks in each PWA category, used by the shorthand form."""

    fnr: int = Field(3, description="Fast & Reliable checks", ge=1)
    ins: int = Field(3, description="Installable checks", ge=1)
    po: int = Field(7, description="PWA Optimized checks", ge=1)


class PwaScores(BaseModel):
    """PWA sub-scores as fractions."""

    model_config = ConfigDict(frozen=True)

    fnr: float
    ins: float
    po: float


class PwaPercentages(BaseModel):
    """PWA sub-scores as percentage strings."""

    model_config = ConfigDict(frozen=True)

    fnr: str
    ins: str
    po: str


class LighthouseScores(BaseModel):
    """
    Numeric scores for one score string.

    Values are fractions in [0, 1], except for diff rows where they hold the
    (possibly negative) difference against the reference row.
    """

    model_config = ConfigDict(frozen=True)

    perf: float = Field(..., description="Performance")
    a11y: float = Field(..., description="Accessibility")
    bp: float = Field(..., description="Best Practices")
    seo: float = Field(..., description="Search Engine Optimization")
    pwa: PwaScores = Field(..., description="Progressive Web App sub-scores")
    average: float = Field(..., description="Mean of the seven components")

    @property
    def components(self) -> list[float]:
        """Return the seven component scores in order."""
        return [
            self.perf,
            self.a11y,
            self.bp,
            self.seo,
            self.pwa.fnr,
            self.pwa.ins,
            self.pwa.po,
        ]

    def to_percentages(self) -> "LighthousePercentages":
        """Format every score as a percentage string."""
        return LighthousePercentages(
            perf=perc(self.perf),
            a11y=perc(self.a11y),
            bp=perc(self.bp),
            seo=perc(self.seo),
            pwa=PwaPercentages(
                fnr=perc(self.pwa.fnr),
                ins=perc(self.pwa.ins),
                po=perc(self.pwa.po),
            ),
            average=perc(self.average),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the nested result mapping."""
        return self.model_dump()


class LighthousePercentages(BaseModel):
    """Scores for one score string formatted as percentages."""

    model_config = ConfigDict(frozen=True)

    perf: str
    a11y: str
    bp: str
    seo: str
    pwa: PwaPercentages
    average: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to the nested result mapping."""
        return self.model_dump()


Result = LighthouseScores | LighthousePercentages


class ScoreOutcome(BaseModel):
    """Per-item outcome when a batch is scored without failing fast."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    score_str: str
    result: Result | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """Whether the score string was scored successfully."""
        return self.error is None
