"""Pytest configuration and fixtures."""

import pytest
from codec.services.secret_codec import SecretCodec
from shared.implementations.decoders import (
    CiscoType7Decoder,
    JuniperType9Decoder,
)


@pytest.fixture
def codec():
    """Dispatcher instance shared by a test."""
    return SecretCodec()


@pytest.fixture
def cisco():
    """Cisco Type 7 decoder."""
    return CiscoType7Decoder()


@pytest.fixture
def juniper():
    """Juniper Type 9 decoder."""
    return JuniperType9Decoder()
