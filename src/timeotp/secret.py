import base64
import secrets
from typing import Callable, Optional

from .exceptions import ConfigurationError, DecodeError

MIN_SECRET_BYTES = 16
DEFAULT_SECRET_BYTES = 20

RandomBytes = Callable[[int], bytes]


class Secret(object):
    """
    Shared key of an OTP handler.

    Holds raw bytes and never changes after creation. The 128-bit minimum
    is checked by the handler that consumes the secret, not here.
    """

    __slots__ = ("_value",)

    def __init__(self, value: bytes) -> None:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise ConfigurationError("secret must be bytes, got {}".format(type(value).__name__))
        self._value = bytes(value)

    @property
    def value(self) -> bytes:
        return self._value

    @classmethod
    def generate(cls, length: int = DEFAULT_SECRET_BYTES, random_bytes: Optional[RandomBytes] = None) -> "Secret":
        """
        Draws a fresh secret from a random byte source.

        :param length: number of bytes, at least 16
        :param random_bytes: callable returning ``n`` random bytes, defaults
            to :func:`secrets.token_bytes`
        """
        if length < MIN_SECRET_BYTES:
            raise ConfigurationError("Secrets should be at least 128 bits")
        if random_bytes is None:
            random_bytes = secrets.token_bytes
        value = random_bytes(length)
        if len(value) != length:
            raise ConfigurationError("random source returned {} bytes, expected {}".format(len(value), length))
        return cls(value)

    @classmethod
    def from_base32(cls, text: str) -> "Secret":
        """
        Decodes an RFC 4648 Base32 secret. Padding is optional and case is ignored.
        """
        missing_padding = len(text) % 8
        if missing_padding != 0:
            text += "=" * (8 - missing_padding)
        try:
            return cls(base64.b32decode(text, casefold=True))
        except ValueError as e:
            raise DecodeError("Invalid base32 secret: {}".format(e)) from e

    def to_base32(self) -> str:
        # otpauth URIs carry the secret without padding
        return base64.b32encode(self._value).decode("ascii").rstrip("=")

    def __bytes__(self) -> bytes:
        return self._value

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Secret):
            return NotImplemented
        return self._value == other._value

    def __repr__(self) -> str:
        return "Secret(<{} bytes>)".format(len(self._value))
