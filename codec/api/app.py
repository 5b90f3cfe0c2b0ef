"""FastAPI application for the secret decoding service."""

import logging
from fastapi import FastAPI
from shared.config.config import config
from shared.domain.consts import SecretSchemeName, SecretDisplay
from shared.domain.models import DecodeRequest, DecryptPasswordPayload, DecryptPasswordResponse
from codec.services.secret_codec import SecretCodec

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Network Device Secret Codec")

codec = SecretCodec()


@app.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint for Docker healthchecks.

    Returns:
        Dict with status "ok" if service is healthy.
    """
    return {"status": "ok"}


@app.get("/schemes")
async def list_schemes() -> dict:
    """Return the scheme names accepted as ``vendorType``."""
    return {"schemes": [scheme.value for scheme in SecretSchemeName]}


@app.post("/decrypt-password", response_model=DecryptPasswordResponse)
async def decrypt_password_endpoint(payload: DecryptPasswordPayload) -> DecryptPasswordResponse:
    """
    Decode a network device secret.

    Decode failures (malformed input, unsupported scheme, unknown hash) are
    returned as ``success: false`` with a message, never as HTTP errors.

    Returns:
        DecryptPasswordResponse mirroring the request's vendorType.
    """
    logger.info(
        "Received decrypt-password request: vendor_type=%s, prefix=%s",
        payload.vendor_type,
        payload.encrypted_password[:SecretDisplay.PREFIX_LENGTH],
    )

    result = codec.decode(
        DecodeRequest(encoded_text=payload.encrypted_password, scheme=payload.vendor_type)
    )

    if not result.success:
        logger.info(
            "Decrypt-password failed: vendor_type=%s, status=%s, reason=%s",
            payload.vendor_type,
            result.status.value,
            result.failure_reason,
        )

    return DecryptPasswordResponse.from_result(payload.vendor_type, result)
