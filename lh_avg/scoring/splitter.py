"""Tokenize Lighthouse score strings.

Accepted grammar (whitespace is optional around every separator)::

    perf / a11y / bp / seo / (fnr, ins, po)

The PWA group is either in shorthand form, holding bare pass counts
(``(1, 0, 6)``), or in fraction form (``(1/3, 0/3, 6/7)``).
"""

import re

from lh_avg.core.exceptions import ParseError

from .models import ScoreForm, SplitScore

CATEGORY_FIELDS = ("perf", "a11y", "bp", "seo")
PWA_FIELDS = ("fnr", "ins", "po")

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
_FRACTION_RE = re.compile(r"(\d+)/(\d+)")
_SLASH_RE = re.compile(r"\s*/\s*")


def _split_pwa_group(score_str: str) -> tuple[str, str]:
    """Separate the category part from the parenthesized PWA group."""
    opening = score_str.count("(")
    closing = score_str.count(")")
    if opening == 0 and closing == 0:
        raise ParseError(score_str, "missing parenthesized PWA group")
    if opening != closing:
        raise ParseError(score_str, "unbalanced parentheses")
    if opening > 1:
        raise ParseError(score_str, "expected a single PWA group")

    start = score_str.index("(")
    end = score_str.index(")")
    if end < start:
        raise ParseError(score_str, "unbalanced parentheses")
    if score_str[end + 1 :].strip():
        raise ParseError(score_str, "unexpected text after the PWA group")

    return score_str[:start], score_str[start + 1 : end]


def _split_categories(score_str: str, head: str) -> list[str]:
    head = head.strip()
    if not head.endswith("/"):
        raise ParseError(score_str, "missing '/' before the PWA group")

    tokens = [token.strip() for token in head[:-1].split("/")]
    if len(tokens) != len(CATEGORY_FIELDS):
        raise ParseError(
            score_str,
            f"expected {len(CATEGORY_FIELDS)} category scores, got {len(tokens)}",
        )
    for name, token in zip(CATEGORY_FIELDS, tokens):
        if not _NUMBER_RE.fullmatch(token):
            raise ParseError(score_str, f"non-numeric {name} token {token!r}")
    return tokens


def _split_pwa(score_str: str, group: str) -> tuple[list[str], ScoreForm]:
    tokens = [_SLASH_RE.sub("/", token.strip()) for token in group.split(",")]
    if len(tokens) != len(PWA_FIELDS):
        raise ParseError(
            score_str,
            f"expected {len(PWA_FIELDS)} PWA scores, got {len(tokens)}",
        )

    form = (
        ScoreForm.FRACTION
        if any("/" in token for token in tokens)
        else ScoreForm.SHORTHAND
    )
    pattern = _FRACTION_RE if form is ScoreForm.FRACTION else _NUMBER_RE
    for name, token in zip(PWA_FIELDS, tokens):
        if not pattern.fullmatch(token):
            kind = "fraction" if form is ScoreForm.FRACTION else "numeric"
            raise ParseError(score_str, f"non-{kind} {name} token {token!r}")
    return tokens, form


def split_score(score_str: str) -> SplitScore:
    """
    Split a score string into its seven tokens.

    Args:
        score_str: Score string such as ``"14 / 100 / 98 / 100 / (1, 0, 6)"``.

    Returns:
        SplitScore with the tokens and the detected PWA form.

    Raises:
        ParseError: If the string does not match the score grammar.
    """
    if not score_str or not score_str.strip():
        raise ParseError(score_str, "empty score string")

    head, group = _split_pwa_group(score_str)
    categories = _split_categories(score_str, head)
    pwa, form = _split_pwa(score_str, group)

    return SplitScore(
        raw=score_str,
        **dict(zip(CATEGORY_FIELDS, categories)),
        **dict(zip(PWA_FIELDS, pwa)),
        form=form,
    )
