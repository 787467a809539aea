from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from codemate.analysis.models import Issue, IssueKind, Severity


class MatchMode(str, Enum):
    first = "first"
    all = "all"


@dataclass(frozen=True)
class Rule:
    """A static pattern rule; its metadata is copied onto every Issue it produces."""

    pattern: re.Pattern[str]
    kind: IssueKind
    message: str
    rule_id: str
    severity: Severity
    mode: MatchMode = MatchMode.first


def rule(
    pattern: str,
    *,
    kind: IssueKind,
    message: str,
    rule_id: str,
    severity: Severity,
    find_all: bool = False,
) -> Rule:
    return Rule(
        pattern=re.compile(pattern),
        kind=kind,
        message=message,
        rule_id=rule_id,
        severity=severity,
        mode=MatchMode.all if find_all else MatchMode.first,
    )


def issue(*, r: Rule, line: int, column: int) -> Issue:
    return Issue(
        kind=r.kind,
        line=max(1, int(line or 1)),
        column=max(0, int(column or 0)),
        message=r.message,
        rule_id=r.rule_id,
        severity=r.severity,
    )
