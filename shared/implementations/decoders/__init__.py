"""Secret decoder implementations.

This package contains concrete implementations of secret decoders.
"""

from shared.implementations.decoders.cisco_type7 import CiscoType7Decoder
from shared.implementations.decoders.juniper_type9 import JuniperType9Decoder
from shared.implementations.decoders.base64_decoder import Base64Decoder
from shared.implementations.decoders.md5_lookup import GenericMD5LookupDecoder, KNOWN_HASHES

__all__ = [
    "CiscoType7Decoder",
    "JuniperType9Decoder",
    "Base64Decoder",
    "GenericMD5LookupDecoder",
    "KNOWN_HASHES",
]
