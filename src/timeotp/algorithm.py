import enum
import hashlib
import hmac

from .exceptions import ConfigurationError


class Algorithm(enum.Enum):
    """
    Hash functions supported inside the HMAC.

    The value is the name used in the ``algorithm`` parameter of an
    otpauth URI, so ``str(Algorithm.SHA256)`` gives ``"SHA256"``.
    """

    SHA256 = "SHA256"
    SHA512 = "SHA512"

    def __str__(self) -> str:
        return self.value

    @property
    def digest(self):
        if self is Algorithm.SHA256:
            return hashlib.sha256
        return hashlib.sha512

    def sign(self, key: bytes, message: bytes) -> bytes:
        """
        :param key: HMAC key, any length
        :param message: data to authenticate
        :returns: raw digest, 32 bytes for SHA256 and 64 bytes for SHA512
        """
        return hmac.new(key, message, self.digest).digest()

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        # "sha256", "SHA-256" and "SHA256" all name the same function
        normalized = name.upper().replace("-", "")
        for algorithm in cls:
            if algorithm.value == normalized:
                return algorithm
        raise ConfigurationError("Invalid value for algorithm, must be SHA256 or SHA512")
