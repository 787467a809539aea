from __future__ import annotations

from collections import Counter
from typing import Iterable

from codemate.analysis.models import Issue, IssueKind

KIND_PENALTY: dict[IssueKind, int] = {
    IssueKind.error: 15,
    IssueKind.warning: 8,
    IssueKind.suggestion: 3,
}


def count_issue_kinds(issues: Iterable[Issue]) -> dict[IssueKind, int]:
    counts: Counter[IssueKind] = Counter(i.kind for i in issues)
    return {k: counts.get(k, 0) for k in IssueKind}


def score_issues(*, issues: Iterable[Issue]) -> int:
    counts = count_issue_kinds(issues)
    total_penalty = sum(KIND_PENALTY[k] * n for k, n in counts.items())
    return max(0, min(100, 100 - total_penalty))
