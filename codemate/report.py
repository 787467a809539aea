from __future__ import annotations

import datetime as dt

from codemate.analysis.models import AnalysisResult, IssueKind, Language
from codemate.scoring.scorer import count_issue_kinds

REPORT_TITLE = "CodeMate Analysis Report"
MAX_REPORTED_ISSUES = 10
SCORE_BAR_WIDTH = 40
PAGE_BREAK = "\f"


def score_band(score: int) -> str:
    if score >= 90:
        return "good"
    if score >= 70:
        return "fair"
    return "poor"


def score_bar(score: int, *, width: int = SCORE_BAR_WIDTH) -> str:
    filled = round(width * max(0, min(100, score)) / 100)
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def _report_lines(result: AnalysisResult, *, language: str, generated_at: dt.date) -> list[str]:
    counts = count_issue_kinds(result.issues)
    m = result.metrics

    lines = [
        REPORT_TITLE,
        f"Language: {language.upper()}",
        f"Generated: {generated_at.isoformat()}",
        "",
        "Code Quality Score",
        f"{score_bar(result.score)} {result.score}/100 ({score_band(result.score)})",
        "",
        "Issues Summary",
        f"Errors: {counts[IssueKind.error]}",
        f"Warnings: {counts[IssueKind.warning]}",
        f"Suggestions: {counts[IssueKind.suggestion]}",
        "",
        "Code Metrics",
        f"Lines of Code: {m.lines_of_code}",
        f"Cyclomatic Complexity: {m.cyclomatic_complexity}",
        f"Maintainability Index: {m.maintainability_index}",
        f"Duplicate Lines: {m.duplicate_lines}",
        f"Test Coverage: {m.test_coverage}%",
    ]

    if result.issues:
        lines += ["", "Detailed Issues"]
        for idx, issue in enumerate(result.issues[:MAX_REPORTED_ISSUES], start=1):
            lines.append(f"{idx}. {issue.message}")
            lines.append(
                f"   Line {issue.line}, Column {issue.column} | Rule: {issue.rule_id} | Severity: {issue.severity.value}"
            )

    if result.suggestions:
        lines += ["", "Improvement Suggestions"]
        lines += [f"{idx}. {s}" for idx, s in enumerate(result.suggestions, start=1)]

    return lines


def paginate(lines: list[str], *, page_lines: int) -> list[list[str]]:
    if page_lines < 1:
        raise ValueError("page_lines must be >= 1")
    return [lines[i : i + page_lines] for i in range(0, len(lines), page_lines)] or [[]]


def format_report(
    result: AnalysisResult,
    *,
    language: Language | str,
    generated_at: dt.date | None = None,
    page_lines: int = 60,
) -> str:
    """Render an analysis result as a paginated plain-text report.

    Contract:
    - Input: a finished AnalysisResult (treated as read-only) and the language it was analyzed as
    - Output: header, score bar, issue-kind counts, metrics, the first 10 issues and all suggestions
    - Pages hold at most ``page_lines`` lines and are separated by a form feed
    - Always ends with a trailing newline
    """
    lang = language.value if isinstance(language, Language) else str(language or "")
    when = generated_at or dt.date.today()
    pages = paginate(_report_lines(result, language=lang, generated_at=when), page_lines=page_lines)
    return ("\n" + PAGE_BREAK + "\n").join("\n".join(p) for p in pages) + "\n"
