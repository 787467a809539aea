from __future__ import annotations

import random

from codemate.analysis.models import Issue, IssueKind, Severity

MAX_DUPLICATE_LINES = 4
MIN_SUGGESTIONS = 2
MAX_SUGGESTIONS = 4


class AnalysisNoise:
    """The only source of randomness in an analysis.

    Filler issue placement, the duplicate-line placeholder and the number of
    suggestions are all drawn from here. Pass a seed (or an ``rng``) to make
    results reproducible; subclasses can pin individual draws in tests.
    """

    def __init__(self, *, seed: int | None = None, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random(seed)

    def filler_line(self, line_count: int) -> int:
        return self._rng.randint(1, max(1, line_count))

    def duplicate_lines(self) -> int:
        return self._rng.randint(0, MAX_DUPLICATE_LINES)

    def suggestion_count(self) -> int:
        return self._rng.randint(MIN_SUGGESTIONS, MAX_SUGGESTIONS)


def line_count(code: str) -> int:
    # An empty text still has one (empty) line.
    return len(code.split("\n"))


def filler_issues(*, code: str, noise: AnalysisNoise) -> list[Issue]:
    """Two placeholder issues not tied to any rule, placed on random lines."""
    n = line_count(code)
    return [
        Issue(
            kind=IssueKind.suggestion,
            line=noise.filler_line(n),
            column=5,
            message="Consider adding documentation comments",
            rule_id="documentation",
            severity=Severity.low,
        ),
        Issue(
            kind=IssueKind.warning,
            line=noise.filler_line(n),
            column=10,
            message="Variable naming could be more descriptive",
            rule_id="naming-clarity",
            severity=Severity.medium,
        ),
    ]
