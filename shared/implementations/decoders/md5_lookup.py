"""MD5 reverse-lookup decoder implementation."""

import hashlib
import re
from types import MappingProxyType
from typing import Mapping
from shared.domain.consts import FailureReason, HashAlgorithm
from shared.domain.errors import HashNotFoundError, MalformedInputError
from shared.interfaces.secret_decoder import SecretDecoder


# Default and commonly configured device passwords. Lookup only, never expanded.
KNOWN_PASSWORDS = (
    "password",
    "123456",
    "12345678",
    "111111",
    "abc123",
    "qwerty",
    "letmein",
    "changeme",
    "secret",
    "admin",
    "admin123",
    "root",
    "cisco",
    "cisco123",
    "juniper",
    "juniper123",
    "netscreen",
    "password123",
    "default",
    "public",
    "private",
    "manager",
    "enable",
)

KNOWN_HASHES: Mapping[str, str] = MappingProxyType({
    hashlib.md5(password.encode("utf-8")).hexdigest(): password
    for password in KNOWN_PASSWORDS
})


def validate_md5_hash(hash_value: str) -> bool:
    """Validate that hash is exactly 32 hex characters."""
    pattern = f"^[0-9a-f]{{{HashAlgorithm.MD5_LENGTH}}}$"
    return bool(re.match(pattern, hash_value.lower()))


class GenericMD5LookupDecoder(SecretDecoder):
    """Reverse lookup of an MD5 hex digest in KNOWN_HASHES.
    
    Case-insensitive; no hashing of the input is ever attempted.
    """
    
    def __init__(self, known_hashes: Mapping[str, str] = KNOWN_HASHES) -> None:
        self._known_hashes = known_hashes
    
    def decode(self, encoded: str) -> str:
        if not validate_md5_hash(encoded):
            raise MalformedInputError(FailureReason.INVALID_MD5)
        
        try:
            return self._known_hashes[encoded.lower()]
        except KeyError:
            raise HashNotFoundError()
