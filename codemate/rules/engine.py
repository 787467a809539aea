from __future__ import annotations

from typing import Iterable

from codemate.analysis.models import Issue
from codemate.rules.base import MatchMode, Rule, issue


def locate(code: str, offset: int) -> tuple[int, int]:
    """Return the 1-based line and the column of ``offset`` in ``code``.

    The column is the distance from the nearest line break at or before the
    offset (-1 when there is none), so every line counts the same way. A
    match at offset 0 reports column 0.
    """
    line = code.count("\n", 0, offset) + 1
    if offset == 0:
        return line, 0
    brk = code.rfind("\n", 0, offset + 1)
    return line, offset - brk


def match_rule(*, code: str, r: Rule) -> list[Issue]:
    if not code:
        return []

    if r.mode == MatchMode.all:
        starts = [m.start() for m in r.pattern.finditer(code)]
    else:
        m = r.pattern.search(code)
        starts = [m.start()] if m else []

    out: list[Issue] = []
    for start in starts:
        line, column = locate(code, start)
        out.append(issue(r=r, line=line, column=column))
    return out


def run_rules(*, code: str, rules: Iterable[Rule]) -> list[Issue]:
    issues: list[Issue] = []
    for r in rules:
        issues.extend(match_rule(code=code, r=r))
    return issues
