"""
API endpoints for the MRZ verification service
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, Header, HTTPException, status
from fastapi.responses import PlainTextResponse

from mrz_verifier.api.deps import get_validator, verify_api_key
from mrz_verifier.api.schemas import HealthResponse, ValidateRequest, ValidateResponse
from mrz_verifier.config import settings
from mrz_verifier.extraction import select_last_line
from mrz_verifier.validation import MRZValidator

logger = logging.getLogger(__name__)

router = APIRouter()

# Store server start time for uptime calculation
START_TIME = time.time()


@router.get("/api/ping", response_class=PlainTextResponse, tags=["Health"])
async def ping() -> str:
    """
    Liveness ping endpoint
    Returns 'OK' if the service is running.
    """
    return "OK"


@router.get("/api/health", response_model=HealthResponse, tags=["Health"])
async def health() -> HealthResponse:
    """
    Readiness/health details endpoint
    """
    uptime_sec = int(time.time() - START_TIME)
    return HealthResponse(status="ready", version=settings.VERSION, uptimeSec=uptime_sec)


@router.post("/api/mrz/validate", response_model=ValidateResponse, tags=["MRZ"])
async def validate_mrz(
    request: ValidateRequest,
    validator: MRZValidator = Depends(get_validator),
    _: bool = Depends(verify_api_key),
    x_request_id: str | None = Header(None, alias="X-RequestID"),
) -> ValidateResponse:
    """
    Validate the data line of a TD3 MRZ

    Submit the MRZ text extracted by OCR. The last line is checked; the
    response carries one flag per check and the display values, which are
    blank unless every check passed.
    """
    if x_request_id:
        logger.info("Request ID=%s", x_request_id)

    try:
        mrz_line = select_last_line(request.mrzText)
        report = validator.validate(mrz_line, request.now)
    except Exception as e:  # pragma: no cover - validation does not raise
        logger.exception("Unexpected error validating MRZ")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error during MRZ validation",
        ) from e

    logger.info("MRZ validation finished: valid=%s error=%s", report.is_valid, report.error)
    return ValidateResponse(mrzLine=mrz_line, report=report, display=report.display())
