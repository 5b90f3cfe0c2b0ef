"""Domain models for decode requests, results, and HTTP payloads."""

from dataclasses import dataclass
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict
from shared.config.config import config
from shared.domain.consts import ResultStatus, ResultStatusLiteral, SecretSchemeName


@dataclass(frozen=True)
class DecodeRequest:
    """An encoded secret and the scheme it was encoded with."""
    encoded_text: str
    scheme: str  # one of SecretSchemeName, validated by the dispatcher


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of a single decode call.

    Exactly one of ``plaintext`` / ``failure_reason`` is set, and which one
    is tied to ``success``.
    """
    success: bool
    plaintext: Optional[str] = None
    failure_reason: Optional[str] = None
    status: ResultStatus = ResultStatus.DECODED

    def __post_init__(self) -> None:
        if self.success:
            if self.plaintext is None or self.failure_reason is not None:
                raise ValueError("Successful result must carry plaintext and no failure reason")
            if self.status != ResultStatus.DECODED:
                raise ValueError(f"Successful result cannot have status {self.status}")
        else:
            if self.plaintext is not None or not self.failure_reason:
                raise ValueError("Failed result must carry a failure reason and no plaintext")
            if self.status == ResultStatus.DECODED:
                raise ValueError("Failed result cannot have status DECODED")

    @classmethod
    def decoded(cls, plaintext: str) -> "DecodeResult":
        """Build a successful result."""
        return cls(success=True, plaintext=plaintext)

    @classmethod
    def failed(cls, reason: str, status: ResultStatus = ResultStatus.INVALID_INPUT) -> "DecodeResult":
        """Build a failed result."""
        return cls(success=False, failure_reason=reason, status=status)


class DecryptPasswordPayload(BaseModel):
    """Payload for decrypt-password request."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "encryptedPassword": "094F471A1A0A",
                "vendorType": SecretSchemeName.CISCO_TYPE7,
            }
        }
    )

    encrypted_password: str = Field(
        ...,
        alias="encryptedPassword",
        max_length=config.MAX_ENCODED_LENGTH,
        description="Encoded secret as found in the device configuration",
    )
    # Plain str so unknown schemes reach the dispatcher instead of failing validation
    vendor_type: str = Field(..., alias="vendorType", description="Secret scheme name")


class DecryptPasswordResponse(BaseModel):
    """Result payload for decrypt-password request."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "success": True,
                "decryptedPassword": "cisco",
                "vendorType": SecretSchemeName.CISCO_TYPE7,
                "status": "DECODED",
                "message": None,
            }
        }
    )

    success: bool = Field(..., description="Whether the secret was decoded")
    decrypted_password: Optional[str] = Field(None, alias="decryptedPassword", description="Plaintext if decoded")
    vendor_type: str = Field(..., alias="vendorType", description="Scheme name echoed from the request")
    status: ResultStatusLiteral = Field(..., description="DECODED, INVALID_INPUT, NOT_FOUND, UNSUPPORTED, or ERROR")
    message: Optional[str] = Field(None, description="Failure reason if not decoded")

    @classmethod
    def from_result(cls, vendor_type: str, result: DecodeResult) -> "DecryptPasswordResponse":
        """Map a domain result onto the external JSON contract."""
        return cls(
            success=result.success,
            decrypted_password=result.plaintext,
            vendor_type=vendor_type,
            status=result.status.value,
            message=result.failure_reason,
        )
