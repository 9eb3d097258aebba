class TimeOTPError(ValueError):
    """
    Base class for errors raised by timeotp.
    """


class ConfigurationError(TimeOTPError):
    """
    Raised when an OTP handler is built from invalid parameters: a secret
    shorter than 128 bits, a label containing ``:``, an unsupported digit
    count, step, skew or algorithm.
    """


class DecodeError(TimeOTPError):
    """
    Raised when a Base32 secret cannot be decoded.
    """
