import calendar
import datetime
import logging
import time
from typing import Any, Optional, Union

from .exceptions import InvalidInterval, InvalidMovingFactor
from .hotp import HOTP
from .otp import DEFAULT_ALGORITHM, DEFAULT_PASSWORD_LENGTH, DEFAULT_WINDOW_SIZE

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 30

Timestamp = Union[int, float, datetime.datetime]


def to_timestamp(for_time: Timestamp) -> Union[int, float]:
    """
    Unix seconds for ``for_time``. Aware datetimes are read as UTC, naive
    ones as local time.

    :raises InvalidMovingFactor: if the time is before the Unix epoch
    """
    if isinstance(for_time, datetime.datetime):
        if for_time.tzinfo:
            timestamp = calendar.timegm(for_time.utctimetuple())
        else:
            timestamp = time.mktime(for_time.timetuple())
    else:
        timestamp = for_time
    if timestamp < 0:
        raise InvalidMovingFactor("timestamp {} is before the Unix epoch".format(timestamp))
    return timestamp


def timecode(for_time: Timestamp, interval: int) -> int:
    """
    Turns a point in time into the TOTP moving factor, floor(t / interval).

    :param for_time: Unix timestamp in seconds, or a datetime
    :param interval: length of one time step in seconds
    :returns: time-step counter
    """
    return int(to_timestamp(for_time) // interval)


class TOTP(object):
    """
    Handler for time-based OTP counters.

    Wraps an :class:`HOTP` and feeds it the time-step counter instead of an
    event counter. ``window_size`` is counted in steps, so a window of 1 with
    the default interval accepts codes from 30 seconds either side.

    There is no locking: don't reconfigure an instance that other threads
    are generating or verifying with.
    """

    def __init__(
        self,
        secret: Union[bytes, str],
        algorithm: Any = DEFAULT_ALGORITHM,
        password_length: int = DEFAULT_PASSWORD_LENGTH,
        window_size: int = DEFAULT_WINDOW_SIZE,
        interval: int = DEFAULT_INTERVAL,
    ) -> None:
        """
        :param secret: raw shared key; text is encoded as UTF-8
        :param algorithm: HMAC hash name, e.g. "sha1", "sha256" or "sha512"
        :param password_length: number of digits in the OTP
        :param window_size: time steps accepted on each side when verifying
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        """
        self._hotp = HOTP(secret, algorithm=algorithm, password_length=password_length, window_size=window_size)
        self.interval = interval

    @property
    def hotp(self) -> HOTP:
        return self._hotp

    @property
    def secret(self) -> bytes:
        return self._hotp.secret

    @secret.setter
    def secret(self, value: Union[bytes, str]) -> None:
        self._hotp.secret = value

    @property
    def algorithm(self) -> str:
        return self._hotp.algorithm

    @algorithm.setter
    def algorithm(self, value: Any) -> None:
        self._hotp.algorithm = value

    @property
    def password_length(self) -> int:
        return self._hotp.password_length

    @password_length.setter
    def password_length(self, value: int) -> None:
        self._hotp.password_length = value

    @property
    def window_size(self) -> int:
        return self._hotp.window_size

    @window_size.setter
    def window_size(self, value: int) -> None:
        self._hotp.window_size = value

    @property
    def interval(self) -> int:
        return self._interval

    @interval.setter
    def interval(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            logger.warning("rejected interval %r", value)
            raise InvalidInterval("interval must be a positive number of seconds, got {!r}".format(value))
        self._interval = value

    def timecode(self, for_time: Optional[Timestamp] = None) -> int:
        """
        Time-step counter for ``for_time``, reading the clock once if omitted.
        """
        if for_time is None:
            for_time = time.time()
        return timecode(for_time, self._interval)

    def generate_password(self, timestamp: Optional[Timestamp] = None) -> str:
        """
        Generates the OTP for the time step containing ``timestamp``.

        :param timestamp: Unix time or datetime; defaults to now
        :returns: OTP
        """
        return self._hotp.generate_password(self.timecode(timestamp))

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.generate_password()

    def verify_password(self, password: Union[str, int], timestamp: Optional[Timestamp] = None) -> bool:
        """
        Verifies the OTP passed in against the time steps around ``timestamp``.

        :param password: the OTP to check against
        :param timestamp: time to check OTP at (defaults to now)
        :returns: True if verification succeeded, False otherwise
        """
        return self._hotp.verify_in_window(password, self.timecode(timestamp), self._hotp.window_size)

    def remaining(self, timestamp: Optional[Timestamp] = None) -> int:
        """
        Seconds left before the OTP for ``timestamp`` rolls over.
        """
        if timestamp is None:
            timestamp = time.time()
        return self._interval - int(to_timestamp(timestamp)) % self._interval

    def __repr__(self) -> str:
        return "{}(algorithm={!r}, password_length={}, window_size={}, interval={})".format(
            type(self).__name__, self.algorithm, self.password_length, self.window_size, self._interval
        )
