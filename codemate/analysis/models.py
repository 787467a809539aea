from __future__ import annotations

import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Language(str, Enum):
    java = "java"
    python = "python"
    cpp = "cpp"
    unknown = "unknown"

    @classmethod
    def from_id(cls, value: str | Language | None) -> Language:
        """Map a free-form language identifier onto the supported set.

        Unrecognised values map to ``Language.unknown`` instead of raising.
        """
        if isinstance(value, Language):
            return value
        v = (value or "").strip().lower()
        return _LANGUAGE_ALIASES.get(v, Language.unknown)


_LANGUAGE_ALIASES: dict[str, Language] = {
    "java": Language.java,
    "python": Language.python,
    "py": Language.python,
    "cpp": Language.cpp,
    "c++": Language.cpp,
    "cc": Language.cpp,
    "cxx": Language.cpp,
}


class IssueKind(str, Enum):
    error = "error"
    warning = "warning"
    suggestion = "suggestion"


class Severity(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


def new_issue_id() -> str:
    return uuid.uuid4().hex


class Issue(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_issue_id, description="Opaque per-issue identifier")
    kind: IssueKind
    line: int = Field(ge=1)
    column: int = Field(default=0, ge=0)
    message: str = Field(min_length=1)
    rule_id: str = Field(min_length=1)
    severity: Severity


class Metrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    lines_of_code: int = Field(ge=0)
    cyclomatic_complexity: int = Field(ge=1)
    maintainability_index: int = Field(ge=10)
    duplicate_lines: int = Field(ge=0)
    test_coverage: int = Field(ge=0, le=100)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    # Catalog-derived issues first (catalog order), filler issues last.
    issues: tuple[Issue, ...]
    metrics: Metrics
    suggestions: tuple[str, ...]


class AnalyzeRequest(BaseModel):
    code: str = Field(default="", description="Source code to analyze (may be empty)")
    language: str = Field(default="java", description="Language of the submitted code (java|python|cpp)")


class ReportRequest(BaseModel):
    result: AnalysisResult
    language: str = Field(default="java", description="Language the result was analyzed as")
