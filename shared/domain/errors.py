"""Exceptions raised by decoders and encoders."""

from shared.domain.consts import FailureReason, ResultStatus


class DecodeError(ValueError):
    """Base class for expected decode failures.
    
    The message is the failure reason reported to the caller; ``status``
    classifies the failure in the resulting ``DecodeResult``.
    """
    
    status: ResultStatus = ResultStatus.INVALID_INPUT


class MalformedInputError(DecodeError):
    """Input does not match the scheme's format."""
    status = ResultStatus.INVALID_INPUT


class UnsupportedSchemeError(DecodeError):
    """Scheme name is not one of the supported schemes."""
    status = ResultStatus.UNSUPPORTED
    
    def __init__(self, scheme_name: str) -> None:
        super().__init__(FailureReason.UNSUPPORTED_SCHEME)
        self.scheme_name = scheme_name


class HashNotFoundError(DecodeError):
    """Digest is well formed but absent from the known hash table."""
    status = ResultStatus.NOT_FOUND
    
    def __init__(self) -> None:
        super().__init__(FailureReason.HASH_NOT_FOUND)


class EncodeError(ValueError):
    """Plaintext or parameters cannot be encoded by the scheme."""
