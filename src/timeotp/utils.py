from hmac import compare_digest
from typing import Dict, Optional, Union
from urllib.parse import quote, urlencode

from .algorithm import Algorithm
from .secret import Secret

DEFAULT_PERIOD = 30


def build_uri(
    secret: Union[Secret, bytes],
    issuer: str,
    account: str,
    digits: int,
    algorithm: Algorithm,
    period: Optional[int] = None,
) -> str:
    """
    Returns the provisioning URI for a TOTP key.

    The result can be encoded in a QR Code and scanned by an authenticator
    app. Parameters always appear in the order issuer, secret, digits,
    algorithm, which is what existing consumers of these URIs expect.

    For module-internal use.

    See also:
        https://github.com/google/google-authenticator/wiki/Key-Uri-Format

    :param secret: raw secret bytes, written out as unpadded Base32
    :param issuer: the name of the OTP issuer; this will be the
        organization title of the OTP entry in Authenticator
    :param account: name of the account
    :param digits: the length of the OTP generated code
    :param algorithm: the algorithm used in the OTP generation
    :param period: the number of seconds the OTP generator is set to
        expire every code; only written when it is not the default 30
    :returns: provisioning uri
    """
    if not isinstance(secret, Secret):
        secret = Secret(secret)

    url_args: Dict[str, Union[int, str]] = {
        "issuer": issuer,
        "secret": secret.to_base32(),
        "digits": digits,
        "algorithm": str(algorithm),
    }
    if period is not None and period != DEFAULT_PERIOD:
        url_args["period"] = period

    label = quote(issuer) + ":" + quote(account)
    return "otpauth://totp/{0}?{1}".format(label, urlencode(url_args).replace("+", "%20"))


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
