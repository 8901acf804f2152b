import hashlib
import hmac
import logging
from typing import Any

from . import utils
from .exceptions import InvalidMovingFactor, UnsupportedAlgorithm

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "sha1"
DEFAULT_PASSWORD_LENGTH = 6
DEFAULT_WINDOW_SIZE = 1

# offset is at most 15 and four bytes are read from it
MIN_DIGEST_SIZE = 19
MAX_MOVING_FACTOR = 2**64 - 1


def resolve_algorithm(algorithm: Any) -> str:
    """
    Validates an HMAC hash and returns its canonical hashlib name.

    :param algorithm: hash name such as ``"sha1"`` or ``"SHA256"``, or a
        hashlib constructor such as ``hashlib.sha512``
    :returns: lower-case hashlib name
    :raises UnsupportedAlgorithm: if the hash is not available or its digest
        is too short (or of variable length) for dynamic truncation
    """
    if callable(algorithm):
        try:
            algorithm = algorithm().name
        except (TypeError, AttributeError, ValueError) as e:
            raise UnsupportedAlgorithm("{!r} is not a hashlib constructor".format(algorithm)) from e
    if not isinstance(algorithm, str):
        raise UnsupportedAlgorithm("algorithm must be a hash name, got {!r}".format(algorithm))

    name = algorithm.lower()
    if name not in hashlib.algorithms_available:
        raise UnsupportedAlgorithm("{!r} is not a supported HMAC hash".format(algorithm))
    try:
        digest_size = hashlib.new(name).digest_size
    except ValueError as e:
        # listed but disabled by the OpenSSL build, e.g. under FIPS
        raise UnsupportedAlgorithm("{!r} is not usable on this platform".format(algorithm)) from e

    if digest_size < MIN_DIGEST_SIZE:
        raise UnsupportedAlgorithm(
            "{!r} digest is {} bytes, dynamic truncation needs at least {}".format(
                algorithm, digest_size, MIN_DIGEST_SIZE
            )
        )
    return name


def dynamic_truncate(hmac_hash: bytes) -> int:
    """
    RFC 4226 section 5.3 dynamic truncation.

    The low nibble of the last byte picks an offset; the four bytes starting
    there are read big-endian with the sign bit cleared.

    :param hmac_hash: HMAC digest, at least 19 bytes long
    :returns: 31-bit unsigned integer
    """
    offset = hmac_hash[-1] & 0xF
    return (
        (hmac_hash[offset] & 0x7F) << 24
        | (hmac_hash[offset + 1] & 0xFF) << 16
        | (hmac_hash[offset + 2] & 0xFF) << 8
        | (hmac_hash[offset + 3] & 0xFF)
    )


def generate_otp(secret: bytes, algorithm: str, moving_factor: int, password_length: int) -> str:
    """
    Generates the HOTP value for one moving factor (RFC 4226).

    :param secret: raw shared key
    :param algorithm: hashlib name, already checked by :func:`resolve_algorithm`
    :param moving_factor: counter in the unsigned 64-bit range
    :param password_length: number of decimal digits to return
    :returns: zero-padded decimal string of exactly ``password_length`` digits
    :raises InvalidMovingFactor: if the counter is out of range
    """
    if isinstance(moving_factor, bool) or not isinstance(moving_factor, int):
        raise InvalidMovingFactor("moving factor must be an integer, got {!r}".format(moving_factor))
    if not 0 <= moving_factor <= MAX_MOVING_FACTOR:
        raise InvalidMovingFactor("moving factor {} is outside the unsigned 64-bit range".format(moving_factor))

    hasher = hmac.new(secret, utils.int_to_bytestring(moving_factor), algorithm)
    code = dynamic_truncate(hasher.digest()) % 10**password_length
    return str(code).zfill(password_length)
