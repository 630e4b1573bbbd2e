"""
HTTP service for gazette matching.

Run with: gazette-matcher serve --port 5000
"""
import logging
import shutil
import tempfile
import time
from dataclasses import replace
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, File, Query, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from .cli.config import Config
from .errors import MatcherError, ReconciliationCancelled
from .matcher import GazetteMatcher

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.time()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = round((time.time() - start) * 1000, 1)
            logger.error(f"{request.method} {request.url.path} status=500 duration={duration_ms}ms")
            raise
        duration_ms = round((time.time() - start) * 1000, 1)

        msg = (
            f"{request.method} {request.url.path} "
            f"status={response.status_code} "
            f"duration={duration_ms}ms"
        )

        if response.status_code >= 500:
            logger.error(msg)
        elif response.status_code >= 400:
            logger.warning(msg)
        else:
            logger.info(msg)

        return response


def _save_upload(upload: UploadFile, directory: Path, stem: str) -> Path:
    """Copy an uploaded file into the request's temp directory, keeping its suffix."""
    suffix = Path(upload.filename or '').suffix.lower()
    path = directory / f"{stem}{suffix}"
    with path.open('wb') as f:
        shutil.copyfileobj(upload.file, f)
    return path


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Build the FastAPI application around an explicit configuration."""
    config = config or Config.from_env()
    config.validate()

    app = FastAPI(
        title="Gazette Matcher API",
        description="Confirm deceased names from a spreadsheet against a published gazette",
    )
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )
    app.add_middleware(LoggingMiddleware)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.post("/match")
    def match(
        excel: Optional[UploadFile] = File(None),
        pdf: Optional[UploadFile] = File(None),
        threshold: Optional[str] = Query(None),
        mode: Optional[str] = Query(None),
    ):
        if excel is None or pdf is None:
            logger.warning("Missing files")
            return JSONResponse(
                status_code=400,
                content={"error": "Both Excel and PDF files are required."},
            )

        overrides = {k: v for k, v in {'threshold': threshold, 'mode': mode}.items() if v is not None}
        request_config = replace(app.state.config, **overrides)
        matcher = GazetteMatcher(request_config)

        logger.info("Received upload")
        with tempfile.TemporaryDirectory(prefix="gazette-") as tmp:
            tmp_dir = Path(tmp)
            spreadsheet = _save_upload(excel, tmp_dir, "excel")
            document = _save_upload(pdf, tmp_dir, "pdf")
            return matcher.match_files(spreadsheet, document)

    @app.exception_handler(ReconciliationCancelled)
    async def handle_cancelled(_request, exc):
        return JSONResponse(status_code=504, content={"error": str(exc)})

    @app.exception_handler(MatcherError)
    async def handle_matcher_error(_request, exc):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def handle_unexpected(_request, exc):
        logger.error(f"Error during processing: {exc}", exc_info=exc)
        content = {"error": "Something went wrong. Please try again later."}
        if app.state.config.debug_details:
            content["details"] = str(exc)
        return JSONResponse(status_code=500, content=content)

    return app
