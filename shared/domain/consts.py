"""Constants to avoid string typos and magic numbers."""

from enum import Enum
from typing import Literal


class SecretSchemeName(str, Enum):
    """Secret scheme name constants (the external ``vendorType`` values)."""
    CISCO_TYPE7 = "cisco-type7"
    JUNIPER_TYPE9 = "juniper-type9"
    BASE64 = "base64"
    GENERIC_MD5 = "generic-md5"


class ResultStatus(str, Enum):
    """Result status constants."""
    DECODED = "DECODED"
    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    UNSUPPORTED = "UNSUPPORTED"
    ERROR = "ERROR"


# Type alias for result status literals
ResultStatusLiteral = Literal["DECODED", "INVALID_INPUT", "NOT_FOUND", "UNSUPPORTED", "ERROR"]


class FailureReason:
    """Human-readable failure reasons returned to callers."""
    EMPTY_INPUT = "encoded text must not be empty"
    UNSUPPORTED_SCHEME = "unsupported scheme"
    INVALID_CISCO_TYPE7 = "invalid Cisco Type 7 format"
    INVALID_JUNIPER_TYPE9 = "not a valid Juniper Type 9 password"
    TRUNCATED_JUNIPER_TYPE9 = "truncated Juniper Type 9 password"
    INVALID_JUNIPER_CHARACTER = "invalid character in Juniper Type 9 password"
    INVALID_BASE64 = "invalid Base64 format"
    BASE64_NOT_UTF8 = "decoded Base64 data is not valid UTF-8 text"
    INVALID_MD5 = "invalid MD5 hash format"
    HASH_NOT_FOUND = "hash not found in known passwords database"


class HashAlgorithm:
    """Hash algorithm constants."""
    MD5_LENGTH = 32  # MD5 hash is 32 hex characters


class SecretDisplay:
    """Constants for secret display."""
    PREFIX_LENGTH = 8  # Number of characters to show in logs (e.g., "094F471A...")
