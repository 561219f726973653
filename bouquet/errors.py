from __future__ import annotations

from enum import Enum

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorCode(Enum):
    NO_RECOMMENDATION_FOUND = (
        404,
        "/errors/no-recommendation-found",
        "No Recommendation Found",
        "입력하신 조건에 맞는 꽃 조합을 찾을 수 없습니다. 다른 조건으로 시도해 보세요.",
    )
    FLOWER_NOT_FOUND = (
        404,
        "/errors/flower-not-found",
        "Flower Not Found",
        "요청하신 꽃을 찾을 수 없습니다.",
    )
    INVALID_INPUT_VALUE = (
        400,
        "/errors/invalid-input-value",
        "Invalid Input Value",
        "요청 값이 올바르지 않습니다.",
    )
    NOT_FOUND = (
        404,
        "/errors/not-found",
        "Not Found",
        "요청하신 경로를 찾을 수 없습니다.",
    )
    METHOD_NOT_ALLOWED = (
        405,
        "/errors/method-not-allowed",
        "Method Not Allowed",
        "지원하지 않는 요청 방식입니다.",
    )
    INTERNAL_SERVER_ERROR = (
        500,
        "/errors/internal-server-error",
        "Internal Server Error",
        "요청을 처리하는 중 오류가 발생했습니다.",
    )

    def __init__(self, status: int, type_uri: str, title: str, detail: str) -> None:
        self.status = status
        self.type_uri = type_uri
        self.title = title
        self.detail = detail


class BouquetError(Exception):
    """Application error carrying an :class:`ErrorCode`."""

    def __init__(self, error_code: ErrorCode, message: str | None = None) -> None:
        self.error_code = error_code
        self.message = message or error_code.detail
        super().__init__(self.message)


class ErrorResponse(BaseModel):
    type: str
    title: str
    status: int
    detail: str
    instance: str


def error_response(
    error_code: ErrorCode,
    request: Request,
    detail: str | None = None,
    status: int | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render *error_code* as a problem-details body for *request*.

    *status* overrides the code's own status, for framework errors that
    have no dedicated code.
    """
    status = status or error_code.status
    body = ErrorResponse(
        type=error_code.type_uri,
        title=error_code.title,
        status=status,
        detail=detail or error_code.detail,
        instance=request.url.path,
    )
    return JSONResponse(status_code=status, content=body.model_dump(), headers=headers)
