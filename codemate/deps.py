from __future__ import annotations

from fastapi import Depends

from codemate.analysis.noise import AnalysisNoise
from codemate.analysis.pipeline import CodeAnalyzer
from codemate.settings import Settings, get_settings


def get_settings_dep() -> Settings:
    """FastAPI dependency for settings.

    Delegates to codemate.settings.get_settings (canonical constructor).
    """
    return get_settings()


# NOTE: Do not cache across process lifetime. Tests override settings per
# request; a shared analyzer would also share one noise stream between calls.


def get_analyzer(settings: Settings = Depends(get_settings_dep)) -> CodeAnalyzer:
    return CodeAnalyzer(
        delay_seconds=settings.analysis_delay_seconds,
        noise=AnalysisNoise(seed=settings.analysis_seed),
    )
