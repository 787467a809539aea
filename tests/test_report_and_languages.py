import datetime as dt

from codemate.analysis.models import AnalysisResult, Issue, IssueKind, Language, Metrics, Severity
from codemate.languages import detect_language
from codemate.report import PAGE_BREAK, format_report, score_band, score_bar


def _result(n_issues: int = 12) -> AnalysisResult:
    issues = tuple(
        Issue(
            kind=IssueKind.warning if i % 2 else IssueKind.error,
            line=i + 1,
            column=0,
            message=f"problem {i}",
            rule_id=f"rule-{i}",
            severity=Severity.medium,
        )
        for i in range(n_issues)
    )
    return AnalysisResult(
        score=42,
        issues=issues,
        metrics=Metrics(
            lines_of_code=10,
            cyclomatic_complexity=3,
            maintainability_index=50,
            duplicate_lines=2,
            test_coverage=64,
        ),
        suggestions=("one", "two"),
    )


def test_report_header_counts_and_metrics():
    text = format_report(_result(), language=Language.java, generated_at=dt.date(2024, 1, 2))

    assert text.startswith("CodeMate Analysis Report\nLanguage: JAVA\nGenerated: 2024-01-02\n")
    assert "42/100 (poor)" in text
    assert "Errors: 6\nWarnings: 6\nSuggestions: 0" in text
    assert "Test Coverage: 64%" in text
    assert "1. one\n2. two" in text
    assert text.endswith("\n")


def test_report_lists_only_first_ten_issues():
    text = format_report(_result(12), language="python")
    assert text.count("   Line ") == 10
    assert "rule-9" in text
    assert "rule-10" not in text


def test_report_without_issues_skips_issue_section():
    text = format_report(_result(0), language="cpp")
    assert "Detailed Issues" not in text
    assert "Errors: 0" in text


def test_report_paginates_when_page_is_full():
    text = format_report(_result(), language="java", page_lines=10)
    pages = text.rstrip("\n").split("\n" + PAGE_BREAK + "\n")
    assert len(pages) > 1
    assert all(len(p.split("\n")) <= 10 for p in pages)


def test_score_bar_and_band():
    assert score_bar(50, width=10) == "[#####-----]"
    assert score_bar(0, width=4) == "[----]"
    assert score_bar(100, width=4) == "[####]"
    assert score_band(95) == "good"
    assert score_band(70) == "fair"
    assert score_band(69) == "poor"


def test_detect_language_from_extension():
    assert detect_language("Main.JAVA") == Language.java
    assert detect_language("script.py") == Language.python
    assert detect_language("a.cc") == Language.cpp
    assert detect_language("a.cxx") == Language.cpp
    assert detect_language("README") == Language.unknown
    assert detect_language(None) == Language.unknown


def test_language_ids_map_onto_closed_set():
    assert Language.from_id("C++") == Language.cpp
    assert Language.from_id(" Python ") == Language.python
    assert Language.from_id(Language.java) == Language.java
    assert Language.from_id("rust") == Language.unknown
    assert Language.from_id(None) == Language.unknown
