"""FastAPI routes for applicant summarization."""
from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.auth import current_identity
from config import generation_config
from config.settings import settings
from summarization import ErrorDetail, SummaryError, SummaryGateway


router = APIRouter(prefix="/api")


def get_gateway() -> SummaryGateway:
    return SummaryGateway(generation_config(settings))


@router.post("/summarize-applicant", response_model=None)
def summarize_applicant(
    payload: Any = Body(None),
    identity: Optional[str] = Depends(current_identity),
    gateway: SummaryGateway = Depends(get_gateway),
) -> JSONResponse:
    result = gateway.summarize(payload, identity)
    return JSONResponse(status_code=result.status_code, content=result.body)


def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        ErrorDetail(path=[part for part in error.get("loc", ()) if part != "body"], message=error.get("msg", ""))
        for error in exc.errors()
    ]
    error = SummaryError("VALIDATION_ERROR", "The request body could not be read.", details)
    return JSONResponse(status_code=error.status_code, content=error.body())


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
