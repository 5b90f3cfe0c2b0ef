"""Base64 secret decoder implementation."""

import base64
import binascii
from shared.domain.consts import FailureReason
from shared.domain.errors import MalformedInputError
from shared.interfaces.secret_decoder import SecretDecoder


class Base64Decoder(SecretDecoder):
    """Standard Base64 (RFC 4648) decoded as UTF-8 text."""
    
    def decode(self, encoded: str) -> str:
        try:
            raw = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError):
            raise MalformedInputError(FailureReason.INVALID_BASE64)
        
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            raise MalformedInputError(FailureReason.BASE64_NOT_UTF8)
