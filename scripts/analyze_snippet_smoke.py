from __future__ import annotations

import os
import sys

# Allow running as: `python scripts\analyze_snippet_smoke.py`
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from codemate.analysis.noise import AnalysisNoise
from codemate.analysis.pipeline import CodeAnalyzer
from codemate.report import format_report


def main() -> None:
    code = """\
import *
from math import sqrt

def calculateAverage(numbers):
    try:
        return sum(numbers) / len(numbers)
    except:
        return 0
"""

    analyzer = CodeAnalyzer(delay_seconds=0, noise=AnalysisNoise(seed=0))
    res = analyzer.analyze_now(code, "python")
    print(format_report(res, language="python"))


if __name__ == "__main__":
    main()
