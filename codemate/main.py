from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from codemate.languages import SUPPORTED_LANGUAGES
from codemate.logging_config import configure_logging
from codemate.routers.analyze import router as analyze_router
from codemate.settings import get_settings

configure_logging(get_settings().log_level)

APP_VERSION = "1.0.0"

app = FastAPI(title="CodeMate", version=APP_VERSION)
app.include_router(analyze_router)


@app.get("/healthz")
def healthz():
    return JSONResponse(
        {
            "ok": True,
            "service": "codemate",
            "version": APP_VERSION,
            "languages": [lang.value for lang in SUPPORTED_LANGUAGES],
        }
    )
