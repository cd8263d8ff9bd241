"""Pydantic request and response models for the MRZ verification API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from mrz_verifier.models import DisplayFields, ValidationReport


class HealthResponse(BaseModel):
    status: str = "ready"
    version: str
    uptimeSec: int


class ValidateRequest(BaseModel):
    mrzText: str | None = Field(
        None, description="MRZ text as returned by OCR; the last line is validated"
    )
    now: datetime | None = Field(
        None, description="Reference time for the expiry check, defaults to the server time"
    )


class ValidateResponse(BaseModel):
    mrzLine: str = Field(..., description="The line that was validated")
    report: ValidationReport
    display: DisplayFields
