from __future__ import annotations

import asyncio
import logging

from codemate.analysis.metrics import compute_metrics
from codemate.analysis.models import AnalysisResult, Language
from codemate.analysis.noise import AnalysisNoise, filler_issues
from codemate.analysis.suggestions import select_suggestions
from codemate.rules.builtin import rules_for
from codemate.rules.engine import run_rules
from codemate.scoring.scorer import score_issues

logger = logging.getLogger("codemate")

DEFAULT_DELAY_SECONDS = 2.0


class CodeAnalyzer:
    """Runs the full analysis: rules, filler issues, metrics, score, suggestions.

    Each call is independent; the analyzer holds no per-call state beyond the
    injected noise source.
    """

    def __init__(self, *, delay_seconds: float = DEFAULT_DELAY_SECONDS, noise: AnalysisNoise | None = None):
        self._delay = max(0.0, float(delay_seconds))
        self._noise = noise or AnalysisNoise()

    async def analyze(self, code: str, language: Language | str) -> AnalysisResult:
        # Simulated request latency; the result is produced in one step afterwards.
        if self._delay:
            await asyncio.sleep(self._delay)
        return self.analyze_now(code, language)

    def analyze_now(self, code: str, language: Language | str) -> AnalysisResult:
        code = code or ""
        lang = Language.from_id(language)

        issues = run_rules(code=code, rules=rules_for(lang))
        issues.extend(filler_issues(code=code, noise=self._noise))

        metrics = compute_metrics(code=code, issue_count=len(issues), noise=self._noise)
        score = score_issues(issues=issues)
        suggestions = select_suggestions(noise=self._noise)

        logger.debug("Analyzed %s source: %d issue(s), score=%d", lang.value, len(issues), score)
        return AnalysisResult(
            score=score,
            issues=tuple(issues),
            metrics=metrics,
            suggestions=tuple(suggestions),
        )


async def analyze_code(code: str, language: Language | str) -> AnalysisResult:
    """Analyze with default latency and an unseeded noise source."""
    return await CodeAnalyzer().analyze(code, language)
