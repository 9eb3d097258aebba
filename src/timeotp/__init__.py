import logging
from typing import Any, Dict, Optional
from urllib.parse import parse_qsl, unquote, urlparse

from .algorithm import Algorithm as Algorithm
from .exceptions import ConfigurationError as ConfigurationError
from .exceptions import DecodeError as DecodeError
from .exceptions import TimeOTPError as TimeOTPError
from .otp import OTP as OTP
from .secret import DEFAULT_SECRET_BYTES, RandomBytes
from .secret import Secret as Secret
from .totp import TOTP as TOTP

logger = logging.getLogger(__name__)


def random_secret(length: int = DEFAULT_SECRET_BYTES, random_bytes: Optional[RandomBytes] = None) -> Secret:
    return Secret.generate(length, random_bytes=random_bytes)


def random_base32(length: int = DEFAULT_SECRET_BYTES, random_bytes: Optional[RandomBytes] = None) -> str:
    # Note: the otpauth scheme DOES NOT use base32 padding for secret lengths not divisible by 5 bytes.
    return random_secret(length, random_bytes=random_bytes).to_base32()


def parse_uri(uri: str) -> TOTP:
    """
    Parses a TOTP provisioning URI, as produced by :meth:`TOTP.get_url`.

    See also:
        https://github.com/google/google-authenticator/wiki/Key-Uri-Format

    :param uri: the totp URI to parse
    :returns: TOTP object
    :raises ConfigurationError: if the URI is not a valid TOTP URI
    :raises DecodeError: if the secret is not valid Base32
    """
    secret = None
    otp_data: Dict[str, Any] = {}

    parsed_uri = urlparse(uri)

    if parsed_uri.scheme != "otpauth":
        raise ConfigurationError("Not an otpauth URI")
    if parsed_uri.netloc != "totp":
        raise ConfigurationError("Not a supported OTP type")

    # the label is percent-encoded once; query values are decoded by parse_qsl
    accountinfo_parts = unquote(parsed_uri.path[1:]).split(":", 1)
    if len(accountinfo_parts) == 1:
        otp_data["account"] = accountinfo_parts[0]
    else:
        otp_data["issuer"] = accountinfo_parts[0]
        otp_data["account"] = accountinfo_parts[1]

    for key, value in parse_qsl(parsed_uri.query):
        if key == "secret":
            secret = value
        elif key == "issuer":
            if otp_data.get("issuer") is not None and otp_data["issuer"] != value:
                raise ConfigurationError("If issuer is specified in both label and parameters, it should be equal.")
            otp_data["issuer"] = value
        elif key == "algorithm":
            otp_data["algorithm"] = Algorithm.from_name(value)
        elif key in ("digits", "period"):
            try:
                number = int(value)
            except ValueError:
                raise ConfigurationError("Invalid value for {}: {!r}".format(key, value)) from None
            otp_data["digits" if key == "digits" else "step"] = number

    if not secret:
        raise ConfigurationError("No secret found in URI")

    otp_data.setdefault("issuer", "")
    logger.debug("Parsed otpauth URI for account %r", otp_data["account"])
    return TOTP.from_base32(secret, **otp_data)
