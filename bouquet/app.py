from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import DEFAULT_APP_CONFIG
from .errors import BouquetError, ErrorCode, error_response
from .flowers.catalog import FlowerCatalog, get_catalog
from .flowers.models import Flower, FlowerSummary
from .options.models import OPTIONS, OptionResponse
from .recommendations.models import (
    NoRecommendationFound,
    RecommendationRequest,
    RecommendationResponse,
)
from .recommendations.service import recommend

logging.basicConfig(
    level=DEFAULT_APP_CONFIG.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=DEFAULT_APP_CONFIG.title, version=DEFAULT_APP_CONFIG.version)


# ── Error handling ──────────────────────────────────────────────────────


@app.exception_handler(BouquetError)
async def bouquet_error_handler(request: Request, exc: BouquetError) -> JSONResponse:
    return error_response(exc.error_code, request, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    messages = []
    for err in exc.errors():
        # Malformed JSON reports a byte offset, not a field.
        parts = [] if err["type"] == "json_invalid" else err["loc"]
        field = ".".join(str(p) for p in parts if p != "body") or "body"
        messages.append(f"{field}: {err['msg']}")
    return error_response(ErrorCode.INVALID_INPUT_VALUE, request, ", ".join(messages))


_HTTP_ERROR_CODES = {
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
}


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(
    request: Request, exc: StarletteHTTPException,
) -> JSONResponse:
    if exc.status_code in _HTTP_ERROR_CODES:
        error_code = _HTTP_ERROR_CODES[exc.status_code]
    elif exc.status_code < 500:
        error_code = ErrorCode.INVALID_INPUT_VALUE
    else:
        error_code = ErrorCode.INTERNAL_SERVER_ERROR
    return error_response(
        error_code,
        request,
        str(exc.detail),
        status=exc.status_code,
        headers=exc.headers,
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(ErrorCode.INTERNAL_SERVER_ERROR, request)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/options", response_model=OptionResponse)
def options() -> OptionResponse:
    return OPTIONS


# ── Catalog endpoints ────────────────────────────────────────────────────


@app.get("/flowers", response_model=list[FlowerSummary])
def flowers(
    search: str | None = None,
    catalog: FlowerCatalog = Depends(get_catalog),
) -> list[FlowerSummary]:
    return [
        FlowerSummary(flower_id=f.flower_id, name=f.name)
        for f in catalog.search(search)
    ]


@app.get("/flowers/{flower_id}", response_model=Flower)
def flower_detail(
    flower_id: str,
    catalog: FlowerCatalog = Depends(get_catalog),
) -> Flower:
    flower = catalog.get(flower_id)
    if flower is None:
        raise BouquetError(ErrorCode.FLOWER_NOT_FOUND)
    return flower


# ── Recommendation endpoints ─────────────────────────────────────────────


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(
    body: RecommendationRequest,
    catalog: FlowerCatalog = Depends(get_catalog),
) -> RecommendationResponse:
    result = recommend(body, catalog.get_all())
    if isinstance(result, NoRecommendationFound):
        raise BouquetError(ErrorCode.NO_RECOMMENDATION_FOUND)
    return result
