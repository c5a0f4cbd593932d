"""
FastAPI application for chartbrief.

Endpoints:
- CSV analysis from a JSON payload (csvText + fileName)
- CSV analysis from a multipart file upload
- Supported chart type catalogue
- Health check

Every analysis re-runs the upload checks server-side, parses the CSV, builds
a bounded prompt and asks the LLM for a chart recommendation and summary.
Nothing is stored between requests.
"""
import logging
from typing import Optional

from fastapi import FastAPI, UploadFile, File, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from chartbrief.config import (
    CORS_ALLOW_ORIGINS, LOG_LEVEL, MAX_FILE_SIZE_BYTES, EMPTY_CSV_MESSAGE,
    FILE_TOO_LARGE_MESSAGE, INVALID_FILE_TYPE_MESSAGE, INVALID_TEXT_MESSAGE,
    MISSING_FIELDS_MESSAGE, UNEXPECTED_ERROR_MESSAGE,
)
from chartbrief.exceptions import ChartbriefError, EmptyCSVError, FileRejectedError
from chartbrief.models import (
    AnalysisResult,
    AnalyzeRequest,
    AnalyzeResponse,
    ChartTypeOption,
    ChartTypesResponse,
)
from chartbrief.services import csv_parser, ingestion, llm_service, prompt_builder
from chartbrief.services.chart_types import CHART_TYPES, get_chart_type_label, is_cartesian_chart
from chartbrief.services.file_validator import has_csv_extension

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

# ============================================================================
# App init
# ============================================================================
app = FastAPI(title="chartbrief - CSV Chart Analysis", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, message: str) -> JSONResponse:
    body = AnalyzeResponse(success=False, error=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.info(
        "Request validation failed for %s: %s",
        request.url.path, [(err.get("type"), err.get("loc")) for err in errors],
    )
    if any(err.get("type") == "json_invalid" for err in errors):
        return _error_response(400, "Request body must be valid JSON")
    if request.url.path == "/api/analyze/upload":
        return _error_response(400, "Missing file upload")
    return _error_response(400, MISSING_FIELDS_MESSAGE)


@app.exception_handler(ChartbriefError)
async def chartbrief_exception_handler(request: Request, exc: ChartbriefError):
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path, exc_info=exc)
    return _error_response(500, UNEXPECTED_ERROR_MESSAGE)


# ============================================================================
# Analysis pipeline
# ============================================================================

def run_analysis(csv_text: str, file_name: str) -> AnalysisResult:
    """
    Parse the CSV, build the prompt and run the LLM analysis.

    Raises:
        EmptyCSVError: the CSV has no header row
        AnalysisServiceError: the LLM call or reply decoding failed
        ResponseValidationError: the reply has the wrong shape
    """
    csv = csv_parser.parse_csv(csv_text)

    if not csv.headers:
        raise EmptyCSVError(EMPTY_CSV_MESSAGE)

    prompt = prompt_builder.build_prompt(csv, file_name)
    logger.info(
        "Analyzing %d columns x %d rows (prompt: %d chars)",
        len(csv.headers), len(csv.rows), len(prompt),
    )
    return llm_service.analyze_csv(prompt)


def _analysis_response(csv_text: str, file_name: str) -> JSONResponse:
    try:
        result = run_analysis(csv_text, file_name)
    except ChartbriefError:
        raise
    except Exception:
        logger.exception("Analysis failed unexpectedly")
        return _error_response(500, UNEXPECTED_ERROR_MESSAGE)

    body = AnalyzeResponse(success=True, result=result)
    return JSONResponse(status_code=200, content=body.model_dump(mode="json", by_alias=True, exclude_none=True))


# ============================================================================
# Endpoints
# ============================================================================

@app.post("/api/analyze", response_model=AnalyzeResponse)
def analyze(payload: Optional[AnalyzeRequest] = None):
    if payload is None or not payload.csv_text or not payload.file_name:
        raise FileRejectedError(MISSING_FIELDS_MESSAGE)

    try:
        size_bytes = len(payload.csv_text.encode("utf-8"))
    except UnicodeEncodeError:
        # JSON allows lone surrogate escapes, UTF-8 does not
        raise FileRejectedError(INVALID_TEXT_MESSAGE) from None

    if size_bytes > MAX_FILE_SIZE_BYTES:
        raise FileRejectedError(FILE_TOO_LARGE_MESSAGE)

    if not has_csv_extension(payload.file_name):
        raise FileRejectedError(INVALID_FILE_TYPE_MESSAGE)

    return _analysis_response(payload.csv_text, payload.file_name)


@app.post("/api/analyze/upload", response_model=AnalyzeResponse)
def analyze_upload(file: UploadFile = File(...)):
    payload = ingestion.read_upload_request(file)
    return _analysis_response(payload.csv_text, payload.file_name)


@app.get("/api/chart-types", response_model=ChartTypesResponse)
async def get_chart_types():
    return ChartTypesResponse(
        chart_types=[
            ChartTypeOption(
                value=chart_type,
                label=get_chart_type_label(chart_type),
                cartesian=is_cartesian_chart(chart_type),
            )
            for chart_type, _ in CHART_TYPES
        ]
    )


@app.get("/health")
async def health():
    return {"status": "ok"}


# ============================================================================
# Entrypoint
# ============================================================================

def main():
    """Start the API server via uvicorn."""
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
