import logging
from typing import Callable

from . import utils
from .otp import MAX_MOVING_FACTOR

logger = logging.getLogger(__name__)


def verify_window(candidate: str, center: int, window_size: int, generator: Callable[[int], str]) -> bool:
    """
    Checks a password against every moving factor within ``window_size``
    steps of ``center``.

    Factors that fall outside the unsigned 64-bit range are skipped. Each
    comparison is constant-time, so a mismatch leaks nothing about how close
    the guess was.

    :param candidate: password as typed by the user
    :param center: expected moving factor
    :param window_size: steps tolerated on each side of ``center``
    :param generator: maps a moving factor to its password
    :returns: True if any factor in the window produces ``candidate``
    """
    for offset in range(-window_size, window_size + 1):
        factor = center + offset
        if factor < 0 or factor > MAX_MOVING_FACTOR:
            continue
        if utils.strings_equal(candidate, generator(factor)):
            logger.debug("password matched at offset %d", offset)
            return True
    logger.debug("no match within %d steps of moving factor %d", window_size, center)
    return False
