import calendar
import datetime
import logging
import time
from typing import Any, Optional, Union

from . import utils
from .algorithm import Algorithm
from .exceptions import ConfigurationError
from .otp import OTP
from .secret import Secret

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = Algorithm.SHA256
DEFAULT_DIGITS = 6
DEFAULT_SKEW = 1
DEFAULT_STEP = 30

TimeLike = Union[int, float, datetime.datetime]


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        secret: Secret,
        issuer: str,
        account: str,
        algorithm: Algorithm = DEFAULT_ALGORITHM,
        digits: int = DEFAULT_DIGITS,
        skew: int = DEFAULT_SKEW,
        step: int = DEFAULT_STEP,
    ) -> None:
        """
        :param secret: shared key, at least 16 bytes
        :param issuer: the name of the OTP issuer, without ':'
        :param account: name of the user account, without ':'
        :param algorithm: hash function used in the HMAC
        :param digits: number of integers in the OTP, 6 to 8
        :param skew: number of steps before and after the current one
            accepted by :meth:`verify`
        :param step: the time interval in seconds for OTP. This defaults to 30.
        :raises ConfigurationError: if any parameter is out of range
        """
        if isinstance(skew, bool) or not isinstance(skew, int) or skew < 0:
            raise ConfigurationError("skew must be a non-negative integer")
        if isinstance(step, bool) or not isinstance(step, int) or step <= 0:
            raise ConfigurationError("step must be a positive number of seconds")
        super().__init__(secret, issuer, account, algorithm=algorithm, digits=digits)
        self._skew = skew
        self._step = step
        logger.debug(
            "Created TOTP handler algorithm=%s digits=%d skew=%d step=%d", algorithm, digits, skew, step
        )

    @classmethod
    def from_base32(cls, secret: str, issuer: str, account: str, **kwargs: Any) -> "TOTP":
        """
        Builds a handler from a Base32 secret, as found in provisioning URIs.

        :raises DecodeError: if the secret is not valid Base32
        """
        return cls(Secret.from_base32(secret), issuer, account, **kwargs)

    @property
    def skew(self) -> int:
        return self._skew

    @property
    def step(self) -> int:
        return self._step

    def timecode(self, for_time: TimeLike) -> int:
        """
        Number of whole steps between the Unix epoch and ``for_time``.

        Naive datetimes are read as UTC.
        """
        if isinstance(for_time, datetime.datetime):
            for_time = calendar.timegm(for_time.utctimetuple())
        return int(for_time // self._step)

    def sign(self, for_time: TimeLike) -> bytes:
        return self.sign_counter(self.timecode(for_time))

    def generate(self, for_time: TimeLike) -> str:
        """
        Generates the OTP for the given time.

        :param for_time: Unix timestamp or datetime
        :returns: OTP, exactly ``digits`` characters
        """
        return self.generate_otp(self.timecode(for_time))

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.generate(time.time())

    def verify(self, token: str, for_time: Optional[TimeLike] = None) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        Codes from up to ``skew`` steps before or after ``for_time`` are
        accepted.

        :param token: the OTP to check against
        :param for_time: Time to check OTP at (defaults to now)
        :returns: True if verification succeeded, False otherwise
        """
        if for_time is None:
            for_time = time.time()

        token = str(token)
        base_counter = self.timecode(for_time) - self._skew
        for i in range(2 * self._skew + 1):
            counter = base_counter + i
            if counter < 0:
                continue
            if utils.strings_equal(token, self.generate(counter * self._step)):
                return True
        logger.debug("TOTP verification failed for account %r", self._account)
        return False

    def get_url(self) -> str:
        """
        Returns the provisioning URI for the OTP. This can then be
        encoded in a QR Code and used to provision an OTP app like
        Google Authenticator.

        ``period`` is only written when the step is not 30 seconds.
        Issuer and account are percent-encoded in both the label and the
        ``issuer`` parameter, so a label with a space or ``@`` appears as
        ``%20`` or ``%40`` rather than literally. Plain ASCII labels are
        written unchanged.
        """
        return utils.build_uri(
            self._secret,
            issuer=self._issuer,
            account=self._account,
            digits=self._digits,
            algorithm=self._algorithm,
            period=self._step,
        )

    def provisioning_uri(self) -> str:
        return self.get_url()

    def __repr__(self) -> str:
        return "TOTP(issuer={!r}, account={!r}, algorithm={}, digits={}, skew={}, step={})".format(
            self._issuer, self._account, self._algorithm, self._digits, self._skew, self._step
        )
