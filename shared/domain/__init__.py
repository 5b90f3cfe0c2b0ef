"""Domain models and entities."""

from shared.domain.models import DecodeRequest, DecodeResult, DecryptPasswordPayload, DecryptPasswordResponse
from shared.domain.errors import (
    DecodeError,
    MalformedInputError,
    UnsupportedSchemeError,
    HashNotFoundError,
    EncodeError,
)
from shared.domain.consts import (
    SecretSchemeName,
    ResultStatus,
    ResultStatusLiteral,
    FailureReason,
    HashAlgorithm,
    SecretDisplay,
)

__all__ = [
    "DecodeRequest",
    "DecodeResult",
    "DecryptPasswordPayload",
    "DecryptPasswordResponse",
    "DecodeError",
    "MalformedInputError",
    "UnsupportedSchemeError",
    "HashNotFoundError",
    "EncodeError",
    "SecretSchemeName",
    "ResultStatus",
    "ResultStatusLiteral",
    "FailureReason",
    "HashAlgorithm",
    "SecretDisplay",
]
