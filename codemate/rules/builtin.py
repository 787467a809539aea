from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from codemate.analysis.models import IssueKind, Language, Severity
from codemate.rules.base import Rule, rule

JAVA_RULES: tuple[Rule, ...] = (
    rule(
        r"class\s+[a-z]",
        kind=IssueKind.warning,
        message="Class names should start with uppercase letter",
        rule_id="naming-convention",
        severity=Severity.medium,
    ),
    rule(
        r"public\s+static\s+void\s+main\s*\([^)]*\)\s*\{[^}]*\}",
        kind=IssueKind.suggestion,
        message="Consider extracting logic from main method into separate methods",
        rule_id="method-complexity",
        severity=Severity.low,
    ),
    rule(
        r"import\s+[^;]+;",
        kind=IssueKind.suggestion,
        message="Remove unused imports to improve code clarity",
        rule_id="unused-imports",
        severity=Severity.low,
        find_all=True,
    ),
    rule(
        r"for\s*\([^)]*\)\s*\{\s*for\s*\([^)]*\)",
        kind=IssueKind.warning,
        message="Nested loops detected - consider optimization",
        rule_id="performance",
        severity=Severity.medium,
    ),
)

PYTHON_RULES: tuple[Rule, ...] = (
    rule(
        r"def\s+[A-Z]",
        kind=IssueKind.warning,
        message="Function names should be in snake_case",
        rule_id="naming-convention",
        severity=Severity.medium,
    ),
    rule(
        r"import\s+\*",
        kind=IssueKind.warning,
        message="Avoid wildcard imports",
        rule_id="import-style",
        severity=Severity.medium,
    ),
    rule(
        r"except:",
        kind=IssueKind.error,
        message="Bare except clauses should specify exception types",
        rule_id="exception-handling",
        severity=Severity.high,
    ),
)

CPP_RULES: tuple[Rule, ...] = (
    rule(
        r"#include\s*<[^>]+>",
        kind=IssueKind.suggestion,
        message="Consider using forward declarations to reduce compilation time",
        rule_id="include-optimization",
        severity=Severity.low,
        find_all=True,
    ),
    rule(
        r"using\s+namespace\s+std;",
        kind=IssueKind.warning,
        message='Avoid "using namespace std" in header files',
        rule_id="namespace-pollution",
        severity=Severity.medium,
    ),
    rule(
        r"new\s+",
        kind=IssueKind.suggestion,
        message="Consider using smart pointers instead of raw pointers",
        rule_id="memory-management",
        severity=Severity.medium,
    ),
)

RULE_CATALOG: Mapping[Language, tuple[Rule, ...]] = MappingProxyType(
    {
        Language.java: JAVA_RULES,
        Language.python: PYTHON_RULES,
        Language.cpp: CPP_RULES,
        Language.unknown: (),
    }
)


def rules_for(language: Language | str) -> tuple[Rule, ...]:
    return RULE_CATALOG.get(Language.from_id(language), ())
