from __future__ import annotations

from pathlib import PurePath

from codemate.analysis.models import Language

_EXTENSIONS: dict[str, Language] = {
    "java": Language.java,
    "py": Language.python,
    "cpp": Language.cpp,
    "cc": Language.cpp,
    "cxx": Language.cpp,
}

SUPPORTED_LANGUAGES: tuple[Language, ...] = (Language.java, Language.python, Language.cpp)


def detect_language(filename: str | None) -> Language:
    """Infer the language from a file extension; unknown extensions map to ``Language.unknown``."""
    ext = PurePath(filename or "").suffix.lstrip(".").lower()
    return _EXTENSIONS.get(ext, Language.unknown)
