import pytest

from timeotp import Secret

# Seeds from RFC 6238 Appendix B, one per hash function
RFC_SHA256_SEED = b"12345678901234567890123456789012"
RFC_SHA512_SEED = b"1234567890123456789012345678901234567890123456789012345678901234"


@pytest.fixture
def secret():
    return Secret(RFC_SHA256_SEED)


@pytest.fixture
def sha512_secret():
    return Secret(RFC_SHA512_SEED)
