"""Codec business logic services."""

from codec.services.secret_codec import SecretCodec, decode

__all__ = [
    "SecretCodec",
    "decode",
]
