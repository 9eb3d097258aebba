import pytest

from timeotp import ConfigurationError, DecodeError, Secret, random_base32, random_secret


def fixed_bytes(n):
    return bytes(range(n))


def test_from_base32():
    assert Secret.from_base32("JBSWY3DP").value == b"Hello"


def test_from_base32_ignores_case_and_padding():
    assert Secret.from_base32("jbswy3dp").value == b"Hello"
    assert Secret.from_base32("JBSWY3DPEE======") == Secret.from_base32("JBSWY3DPEE")


def test_to_base32_has_no_padding():
    assert Secret(b"Hello!").to_base32() == "JBSWY3DPEE"


@pytest.mark.parametrize("text", ["JBSWY3D!", "A", "JBSWY3DP1", "ÄÖÜ"])
def test_from_base32_rejects_malformed_text(text):
    with pytest.raises(DecodeError):
        Secret.from_base32(text)


def test_generate_uses_injected_source():
    secret = Secret.generate(random_bytes=fixed_bytes)
    assert secret.value == bytes(range(20))
    assert len(secret) == 20


def test_generate_default_source_is_random():
    assert Secret.generate() != Secret.generate()
    assert len(Secret.generate(32)) == 32


def test_generate_rejects_short_length():
    with pytest.raises(ConfigurationError, match="at least 128 bits"):
        Secret.generate(10, random_bytes=fixed_bytes)


def test_generate_rejects_short_read():
    with pytest.raises(ConfigurationError, match="expected 16"):
        Secret.generate(16, random_bytes=lambda n: b"\x00" * (n - 1))


def test_short_secret_can_exist():
    assert len(Secret(b"Hello")) == 5


def test_repr_hides_key():
    assert "Hello" not in repr(Secret(b"Hello"))
    assert repr(Secret(b"Hello")) == "Secret(<5 bytes>)"


def test_random_helpers():
    assert random_secret(random_bytes=fixed_bytes) == Secret(bytes(range(20)))
    assert random_base32(random_bytes=fixed_bytes) == Secret(bytes(range(20))).to_base32()
    assert len(random_base32()) == 32


@pytest.mark.parametrize("value", [16, "0123456789abcdef", None, [0] * 16])
def test_rejects_non_bytes_value(value):
    with pytest.raises(ConfigurationError, match="secret must be bytes"):
        Secret(value)


def test_accepts_bytes_like_value():
    assert Secret(bytearray(b"Hello")) == Secret(memoryview(b"Hello"))
    assert bytes(Secret(b"Hello")) == b"Hello"
