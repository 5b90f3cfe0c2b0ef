"""Cisco Type 7 secret decoder implementation."""

import re
from shared.domain.consts import FailureReason
from shared.domain.errors import EncodeError, MalformedInputError
from shared.interfaces.secret_decoder import SecretDecoder


class CiscoType7Decoder(SecretDecoder):
    """Cisco IOS "password 7" / "key 7" reversal.

    Format: {salt}{data}
    - Salt: two decimal digits, the starting offset into XLAT_KEY
    - Data: one hex pair per plaintext character

    Each data byte at pair index i is XORed with XLAT_KEY[(i + salt) % 53].
    The cipher is symmetric, so encode and decode share one routine.
    """

    XLAT_KEY = "dsfd;kfoA,.iyewrkldJKDHSUBsgvca69834ncxv9873254k;fg87"
    MAX_SALT = 99  # salt is rendered as two decimal digits

    _HEX_PATTERN = re.compile(r"^(?:[0-9a-fA-F]{2})+$")

    def decode(self, encoded: str) -> str:
        """Decode a Type 7 string such as "094F471A1A0A" into "cisco".

        Raises:
            MalformedInputError: If the input is not salt + hex pairs
        """
        # Salt plus at least one data pair
        if len(encoded) < 4 or not self._HEX_PATTERN.match(encoded):
            raise MalformedInputError(FailureReason.INVALID_CISCO_TYPE7)

        salt_text = encoded[:2]
        if not salt_text.isdigit():
            raise MalformedInputError(FailureReason.INVALID_CISCO_TYPE7)

        data = bytes.fromhex(encoded[2:])
        return "".join(chr(b) for b in self._xor_stream(data, int(salt_text)))

    def encode(self, plaintext: str, salt: int = 0) -> str:
        """Encode plaintext into a Type 7 string.

        Raises:
            EncodeError: If salt is out of range or a character does not fit in a byte
        """
        if not 0 <= salt <= self.MAX_SALT:
            raise EncodeError(f"Salt {salt} must be between 0 and {self.MAX_SALT}")
        if not plaintext:
            raise EncodeError("Plaintext must not be empty")

        codes = [ord(c) for c in plaintext]
        if any(code > 0xFF for code in codes):
            raise EncodeError("Plaintext contains characters outside the single-byte range")

        return f"{salt:02d}" + self._xor_stream(bytes(codes), salt).hex().upper()

    def _xor_stream(self, data: bytes, salt: int) -> bytes:
        key_length = len(self.XLAT_KEY)
        return bytes(
            b ^ ord(self.XLAT_KEY[(i + salt) % key_length])
            for i, b in enumerate(data)
        )
