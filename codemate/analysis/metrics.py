from __future__ import annotations

import re

from codemate.analysis.models import Metrics
from codemate.analysis.noise import AnalysisNoise

COMMENT_PREFIX = "//"

# Substring counting, not word-boundary matching: "format" counts as "for".
_BRANCH_TOKENS = re.compile(r"if|else|while|for|switch|case")


def count_lines_of_code(code: str) -> int:
    count = 0
    for line in code.split("\n"):
        s = line.strip()
        if s and not s.startswith(COMMENT_PREFIX):
            count += 1
    return count


def cyclomatic_complexity(*, code: str, lines_of_code: int) -> int:
    return max(1, lines_of_code // 10 + len(_BRANCH_TOKENS.findall(code)))


def maintainability_index(*, issue_count: int, complexity: int) -> int:
    return max(10, 100 - issue_count * 5 - complexity // 2)


def estimate_test_coverage(*, issue_count: int) -> int:
    return max(0, 100 - issue_count * 3)


def compute_metrics(*, code: str, issue_count: int, noise: AnalysisNoise) -> Metrics:
    """Heuristic size/quality metrics.

    These are not real static-analysis figures: complexity counts branch
    keywords as substrings and ``duplicate_lines`` is a random placeholder.
    """
    loc = count_lines_of_code(code)
    complexity = cyclomatic_complexity(code=code, lines_of_code=loc)
    return Metrics(
        lines_of_code=loc,
        cyclomatic_complexity=complexity,
        maintainability_index=maintainability_index(issue_count=issue_count, complexity=complexity),
        duplicate_lines=noise.duplicate_lines(),
        test_coverage=estimate_test_coverage(issue_count=issue_count),
    )
