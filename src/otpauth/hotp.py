import logging
from typing import Any, Union

from . import utils
from .exceptions import InvalidPasswordLength, InvalidWindowSize, UnsupportedAlgorithm
from .otp import DEFAULT_ALGORITHM, DEFAULT_PASSWORD_LENGTH, DEFAULT_WINDOW_SIZE, generate_otp, resolve_algorithm
from .window import verify_window

logger = logging.getLogger(__name__)


class HOTP(object):
    """
    Handler for HMAC-based OTP counters.

    Holds the configuration for one shared secret. Nothing is remembered
    between calls: tracking the server side counter and refusing replayed
    passwords is up to the caller. Setting an attribute validates it on the
    spot.
    """

    def __init__(
        self,
        secret: Union[bytes, str],
        algorithm: Any = DEFAULT_ALGORITHM,
        password_length: int = DEFAULT_PASSWORD_LENGTH,
        window_size: int = DEFAULT_WINDOW_SIZE,
    ) -> None:
        """
        :param secret: raw shared key; text is encoded as UTF-8
        :param algorithm: HMAC hash name, e.g. "sha1", "sha256" or "sha512"
        :param password_length: number of digits in the OTP
        :param window_size: counter steps accepted on each side when verifying
        """
        self.secret = secret
        self.algorithm = algorithm
        self.password_length = password_length
        self.window_size = window_size

    @property
    def secret(self) -> bytes:
        return self._secret

    @secret.setter
    def secret(self, value: Union[bytes, str]) -> None:
        if isinstance(value, str):
            value = value.encode("utf-8")
        elif isinstance(value, (bytes, bytearray, memoryview)):
            value = bytes(value)
        else:
            raise TypeError("secret must be bytes or str, got {}".format(type(value).__name__))
        self._secret = value

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @algorithm.setter
    def algorithm(self, value: Any) -> None:
        try:
            self._algorithm = resolve_algorithm(value)
        except UnsupportedAlgorithm:
            logger.warning("rejected HMAC algorithm %r", value)
            raise
        logger.debug("algorithm set to %s", self._algorithm)

    @property
    def password_length(self) -> int:
        return self._password_length

    @password_length.setter
    def password_length(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            logger.warning("rejected password length %r", value)
            raise InvalidPasswordLength("password length must be a positive integer, got {!r}".format(value))
        self._password_length = value

    @property
    def window_size(self) -> int:
        return self._window_size

    @window_size.setter
    def window_size(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning("rejected window size %r", value)
            raise InvalidWindowSize("window size must be a non-negative integer, got {!r}".format(value))
        self._window_size = value

    def generate_password(self, moving_factor: int = 1) -> str:
        """
        Generates the OTP for the given moving factor.

        :param moving_factor: the OTP HMAC counter
        :returns: OTP
        """
        return generate_otp(self._secret, self._algorithm, moving_factor, self._password_length)

    def verify_password(self, password: Union[str, int], moving_factor: int = 1) -> bool:
        """
        Verifies the OTP passed in against the counters around ``moving_factor``.

        :param password: the OTP to check against; an int is zero-padded to
            ``password_length`` digits first
        :param moving_factor: the expected OTP HMAC counter
        :returns: True if the password matches a counter inside the window
        """
        return self.verify_in_window(password, moving_factor, self._window_size)

    def verify_in_window(self, password: Union[str, int], center: int, window_size: int) -> bool:
        candidate = utils.normalize_candidate(password, self._password_length)
        if candidate is None:
            logger.debug("rejected candidate of type %s", type(password).__name__)
            return False
        return verify_window(candidate, center, window_size, self.generate_password)

    def __repr__(self) -> str:
        return "{}(algorithm={!r}, password_length={}, window_size={})".format(
            type(self).__name__, self._algorithm, self._password_length, self._window_size
        )
