"""
API dependencies for the MRZ verification service
"""

from __future__ import annotations

from fastapi import HTTPException, Security, status
from fastapi.security.api_key import APIKeyHeader

from mrz_verifier.config import settings
from mrz_verifier.validation import MRZValidator

# API Key security (optional)
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(api_key: str | None = Security(api_key_header)) -> bool:
    """
    Verify the API key provided in the request header.
    Returns True if API key is valid or if API key verification is disabled.
    """
    if not settings.USE_API_KEY:
        return True

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="API Key header is missing",
        )

    if api_key != settings.API_KEY:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API Key",
        )

    return True


def get_validator() -> MRZValidator:
    """
    Get an MRZValidator configured from the service settings
    """
    return MRZValidator(settings)
