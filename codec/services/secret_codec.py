"""Dispatcher from scheme name to decoder, returning typed results."""

import logging
from shared.domain.consts import FailureReason, ResultStatus, SecretDisplay
from shared.domain.errors import DecodeError
from shared.domain.models import DecodeRequest, DecodeResult
from shared.factories.decoder_factory import create_decoder

logger = logging.getLogger(__name__)


class SecretCodec:
    """
    Decode encoded secrets by scheme.
    
    Stateless: each call builds its decoder from the factory, so one
    instance can serve any number of concurrent callers.
    
    Error handling:
    - Malformed input, unsupported scheme, and lookup misses are returned
      as failed results carrying the decoder's reason.
    - Any other exception is logged and returned as an ERROR result with
      the exception text. Nothing propagates to the caller.
    """
    
    def decode(self, request: DecodeRequest) -> DecodeResult:
        """
        Decode a single request.
        
        Returns:
            DecodeResult with plaintext on success, failure reason otherwise.
        """
        encoded = ""
        scheme = request.scheme
        
        try:
            encoded = (request.encoded_text or "").strip()
            decoder = create_decoder(scheme)
            if not encoded:
                return DecodeResult.failed(FailureReason.EMPTY_INPUT)
            plaintext = decoder.decode(encoded)
        except DecodeError as e:
            logger.debug(
                "Decode failed: scheme=%s, prefix=%s, status=%s, reason=%s",
                scheme,
                encoded[:SecretDisplay.PREFIX_LENGTH],
                e.status.value,
                e,
            )
            return DecodeResult.failed(str(e), status=e.status)
        except Exception as e:
            logger.error(
                f"Unexpected error decoding {scheme} secret: {e}",
                exc_info=True,
            )
            return DecodeResult.failed(str(e) or type(e).__name__, status=ResultStatus.ERROR)
        
        logger.debug(
            "Decoded secret: scheme=%s, prefix=%s",
            scheme,
            encoded[:SecretDisplay.PREFIX_LENGTH],
        )
        return DecodeResult.decoded(plaintext)


_codec = SecretCodec()


def decode(encoded_text: str, scheme: str) -> DecodeResult:
    """Decode ``encoded_text`` with the named scheme. Never raises."""
    return _codec.decode(DecodeRequest(encoded_text=encoded_text, scheme=scheme))
