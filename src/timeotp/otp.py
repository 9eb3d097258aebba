from .algorithm import Algorithm
from .exceptions import ConfigurationError
from .secret import MIN_SECRET_BYTES, Secret

MIN_DIGITS = 6
MAX_DIGITS = 8


def dynamic_truncate(hmac_hash: bytes) -> int:
    """
    RFC 4226 section 5.3: the low nibble of the last byte picks a 4-byte
    window of the digest, read big-endian with the sign bit cleared.
    """
    offset = hmac_hash[-1] & 0xF
    return int.from_bytes(hmac_hash[offset : offset + 4], "big") & 0x7FFFFFFF


class OTP(object):
    """
    Base class for OTP handlers.

    Validates and stores the configuration shared by every handler and
    turns an HMAC counter into a code.
    """

    def __init__(
        self,
        secret: Secret,
        issuer: str,
        account: str,
        algorithm: Algorithm = Algorithm.SHA256,
        digits: int = 6,
    ) -> None:
        if not isinstance(secret, Secret):
            raise ConfigurationError("secret must be a Secret, use Secret.from_base32() for text secrets")
        if len(secret) < MIN_SECRET_BYTES:
            raise ConfigurationError("Secrets should be at least 128 bits, got {} bytes".format(len(secret)))
        if ":" in issuer or ":" in account:
            # ':' separates issuer and account in the URI label
            raise ConfigurationError("issuer and account must not contain ':'")
        if not isinstance(algorithm, Algorithm):
            raise ConfigurationError("algorithm must be Algorithm.SHA256 or Algorithm.SHA512")
        if isinstance(digits, bool) or not isinstance(digits, int) or not MIN_DIGITS <= digits <= MAX_DIGITS:
            raise ConfigurationError("Digits may only be 6, 7, or 8")

        self._secret = secret
        self._issuer = issuer
        self._account = account
        self._algorithm = algorithm
        self._digits = digits

    @property
    def secret(self) -> Secret:
        return self._secret

    @property
    def issuer(self) -> str:
        return self._issuer

    @property
    def account(self) -> str:
        return self._account

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def digits(self) -> int:
        return self._digits

    def sign_counter(self, counter: int) -> bytes:
        """
        :param counter: the HMAC counter value, a non-negative integer
        :returns: raw HMAC digest of the 8-byte big-endian counter
        """
        if counter < 0:
            raise ValueError("input must be positive integer")
        return self._algorithm.sign(bytes(self._secret), self.int_to_bytestring(counter))

    def generate_otp(self, counter: int) -> str:
        """
        :param counter: the HMAC counter value to use as the OTP input.
            For TOTP this is the number of whole steps since the epoch.
        """
        code = dynamic_truncate(self.sign_counter(counter))
        return str(code % 10**self._digits).zfill(self._digits)

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret
        """
        return i.to_bytes(padding, "big")
