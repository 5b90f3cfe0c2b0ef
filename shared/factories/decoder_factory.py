"""Factory for creating secret decoder instances."""

from shared.interfaces.secret_decoder import SecretDecoder
from shared.implementations.decoders import (
    CiscoType7Decoder,
    JuniperType9Decoder,
    Base64Decoder,
    GenericMD5LookupDecoder,
)
from shared.domain.consts import SecretSchemeName
from shared.domain.errors import UnsupportedSchemeError


DECODERS: dict[str, type[SecretDecoder]] = {
    SecretSchemeName.CISCO_TYPE7: CiscoType7Decoder,
    SecretSchemeName.JUNIPER_TYPE9: JuniperType9Decoder,
    SecretSchemeName.BASE64: Base64Decoder,
    SecretSchemeName.GENERIC_MD5: GenericMD5LookupDecoder,
}


def create_decoder(scheme_name: str) -> SecretDecoder:
    """Factory for creating secret decoders.
        
    Returns:
        SecretDecoder instance
        
    Raises:
        UnsupportedSchemeError: If scheme_name is unknown
    """
    try:
        decoder_cls = DECODERS[scheme_name]
    except (KeyError, TypeError):
        raise UnsupportedSchemeError(str(scheme_name))
    return decoder_cls()
