class OtpAuthError(ValueError):
    """Base class for invalid authenticator configuration."""
    pass


class InvalidPasswordLength(OtpAuthError):
    """Password length is not a positive integer."""
    pass


class InvalidWindowSize(OtpAuthError):
    """Window size is negative."""
    pass


class InvalidInterval(OtpAuthError):
    """TOTP interval is not a positive number of seconds."""
    pass


class UnsupportedAlgorithm(OtpAuthError):
    """Hash is unknown to hmac or its digest is too short for truncation."""
    pass


class InvalidMovingFactor(OtpAuthError):
    """Moving factor does not fit in an unsigned 64-bit integer."""
    pass
