from __future__ import annotations

from codemate.analysis.noise import AnalysisNoise

SUGGESTION_POOL: tuple[str, ...] = (
    "Break down large methods into smaller, more focused functions",
    "Add unit tests to improve code reliability",
    "Use meaningful variable and method names",
    "Consider using design patterns for better code structure",
    "Add error handling and logging where appropriate",
)


def select_suggestions(*, noise: AnalysisNoise) -> list[str]:
    # A prefix of the pool, never shuffled.
    return list(SUGGESTION_POOL[: noise.suggestion_count()])
