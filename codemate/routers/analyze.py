from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, File, HTTPException, UploadFile
from fastapi.responses import PlainTextResponse

from codemate.analysis.models import AnalysisResult, AnalyzeRequest, Language, ReportRequest
from codemate.analysis.pipeline import CodeAnalyzer
from codemate.deps import get_analyzer, get_settings_dep
from codemate.languages import SUPPORTED_LANGUAGES, detect_language
from codemate.report import format_report
from codemate.settings import Settings

logger = logging.getLogger("codemate")

router = APIRouter(prefix="/v1", tags=["analyze"])


@router.post("/analyze", response_model=AnalysisResult)
async def analyze_endpoint(
    payload: AnalyzeRequest = Body(...),
    analyzer: CodeAnalyzer = Depends(get_analyzer),
) -> AnalysisResult:
    """Analyze pasted source code.

    Accepts:
      {"code": "...", "language": "java"}

    Unknown languages are not rejected; they simply match no rules.
    """
    return await analyzer.analyze(payload.code, payload.language)


@router.post("/analyze/file", response_model=AnalysisResult)
async def analyze_file_endpoint(
    file: UploadFile = File(...),
    language: str | None = None,
    analyzer: CodeAnalyzer = Depends(get_analyzer),
) -> AnalysisResult:
    """Multipart file-upload analysis; the language defaults to the file extension."""
    try:
        code = await _read_code_from_file(file=file)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    lang = Language.from_id(language) if language else detect_language(file.filename)
    return await analyzer.analyze(code, lang)


@router.post("/report", response_class=PlainTextResponse)
async def report_endpoint(
    payload: ReportRequest = Body(...),
    settings: Settings = Depends(get_settings_dep),
) -> PlainTextResponse:
    """Render a previously returned analysis result as a plain-text report.

    The result is read-only input here; nothing is re-analyzed.
    """
    lang = Language.from_id(payload.language)
    try:
        text = format_report(payload.result, language=lang, page_lines=settings.report_page_lines)
    except Exception as e:
        logger.exception("Report rendering failed", extra={"language": lang.value})
        # Keep the message short to avoid leaking execution context.
        raise HTTPException(status_code=502, detail=f"Report failed: {type(e).__name__}")
    return PlainTextResponse(text)


@router.get("/languages")
async def languages_endpoint() -> dict[str, list[str]]:
    return {"languages": [lang.value for lang in SUPPORTED_LANGUAGES]}


async def _read_code_from_file(*, file: UploadFile) -> str:
    raw = await file.read()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError("Uploaded file must be UTF-8 encoded") from e
