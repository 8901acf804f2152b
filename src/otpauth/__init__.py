import logging

from .exceptions import InvalidInterval as InvalidInterval
from .exceptions import InvalidMovingFactor as InvalidMovingFactor
from .exceptions import InvalidPasswordLength as InvalidPasswordLength
from .exceptions import InvalidWindowSize as InvalidWindowSize
from .exceptions import OtpAuthError as OtpAuthError
from .exceptions import UnsupportedAlgorithm as UnsupportedAlgorithm
from .hotp import HOTP as HOTP
from .otp import generate_otp as generate_otp
from .totp import TOTP as TOTP
from .window import verify_window as verify_window

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
