"""Juniper Type 9 ($9$) secret decoder implementation."""

import random
from typing import Dict, List, Optional, Tuple
from shared.domain.consts import FailureReason
from shared.domain.errors import EncodeError, MalformedInputError
from shared.interfaces.secret_decoder import SecretDecoder


class JuniperType9Decoder(SecretDecoder):
    """Junos "$9$" reversible secret.

    Format: $9${salt}{padding}{data}
    - Salt: one alphabet character; its family index is the padding length
    - Padding: random alphabet characters, discarded
    - Data: each plaintext character is written as a run of alphabet
      characters whose circular gaps, weighted by one ENCODING row, sum to
      the character code. Rows cycle by the number of characters decoded.
    """

    MAGIC = "$9$"

    FAMILY = ("QzF3n6/9CAtpu0O", "B1IREhcSyrleKvMW8LXx", "7N-dVbwsY2g4oaJZGUDj", "iHkq.mPf5T")

    ENCODING = (
        (1, 4, 32),
        (1, 16, 32),
        (1, 8, 32),
        (1, 64),
        (1, 32),
        (1, 4, 16, 128),
        (1, 32, 64),
    )

    ALPHABET = "".join(FAMILY)

    # Character -> position in ALPHABET
    ALPHA_NUM: Dict[str, int] = {c: i for i, c in enumerate(ALPHABET)}

    # Character -> family index (first substring is family 3, last is family 0)
    EXTRA: Dict[str, int] = {
        c: 3 - fam
        for fam, chars in enumerate(FAMILY)
        for c in chars
    }

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.SystemRandom()

    def decode(self, encoded: str) -> str:
        """Decode a "$9$..." string.

        Raises:
            MalformedInputError: On a missing prefix, unknown characters,
                truncated data, or a character code outside one byte
        """
        if not encoded.startswith(self.MAGIC):
            raise MalformedInputError(FailureReason.INVALID_JUNIPER_TYPE9)

        chars = encoded[len(self.MAGIC):]
        if not chars:
            raise MalformedInputError(FailureReason.INVALID_JUNIPER_TYPE9)
        if any(c not in self.ALPHA_NUM for c in chars):
            raise MalformedInputError(FailureReason.INVALID_JUNIPER_CHARACTER)

        salt = chars[0]
        padding_end = 1 + self.EXTRA[salt]
        if len(chars) < padding_end:
            raise MalformedInputError(FailureReason.TRUNCATED_JUNIPER_TYPE9)

        prev = salt
        pos = padding_end
        decoded: List[str] = []

        while pos < len(chars):
            row = self.ENCODING[len(decoded) % len(self.ENCODING)]
            nibble = chars[pos:pos + len(row)]
            if len(nibble) != len(row):
                raise MalformedInputError(FailureReason.TRUNCATED_JUNIPER_TYPE9)
            pos += len(row)

            value = 0
            for char, weight in zip(nibble, row):
                value += self.gap(prev, char) * weight
                prev = char

            if not 0 <= value <= 0xFF:
                raise MalformedInputError(
                    f"{FailureReason.INVALID_JUNIPER_TYPE9}: "
                    f"character {len(decoded)} decodes to {value}"
                )
            decoded.append(chr(value))

        return "".join(decoded)

    def encode(self, plaintext: str, salt: Optional[str] = None, padding: Optional[str] = None) -> str:
        """Encode plaintext into a "$9$..." string.

        Salt and padding are drawn at random unless given; padding length
        must equal the salt's family index.

        Raises:
            EncodeError: If salt/padding are invalid or a character does not fit in a byte
        """
        if salt is None:
            salt = self._random_chars(1)
        if len(salt) != 1 or salt not in self.ALPHA_NUM:
            raise EncodeError(f"Salt must be a single alphabet character, got {salt!r}")

        if padding is None:
            padding = self._random_chars(self.EXTRA[salt])
        if len(padding) != self.EXTRA[salt] or any(c not in self.ALPHA_NUM for c in padding):
            raise EncodeError(
                f"Padding must be {self.EXTRA[salt]} alphabet characters for salt {salt!r}"
            )

        prev = salt
        parts = [self.MAGIC, salt, padding]
        for index, char in enumerate(plaintext):
            code = ord(char)
            if code > 0xFF:
                raise EncodeError(f"Character {char!r} is outside the single-byte range")
            row = self.ENCODING[index % len(self.ENCODING)]
            encoded_char, prev = self._gap_encode(code, prev, row)
            parts.append(encoded_char)

        return "".join(parts)

    @classmethod
    def gap(cls, previous: str, current: str) -> int:
        """Circular distance from previous to current, minus one.

        Ranges over [-1, len(ALPHABET) - 2]; -1 means the characters repeat.
        """
        length = len(cls.ALPHABET)
        diff = cls.ALPHA_NUM[current] - cls.ALPHA_NUM[previous]
        return ((diff % length) + length) % length - 1

    def _gap_encode(self, code: int, prev: str, row: Tuple[int, ...]) -> Tuple[str, str]:
        gaps: List[int] = []
        for weight in reversed(row):
            gaps.insert(0, code // weight)
            code %= weight

        out = []
        for g in gaps:
            prev = self.ALPHABET[(self.ALPHA_NUM[prev] + g + 1) % len(self.ALPHABET)]
            out.append(prev)
        return "".join(out), prev

    def _random_chars(self, count: int) -> str:
        return "".join(self._rng.choice(self.ALPHABET) for _ in range(count))
