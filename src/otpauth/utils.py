import unicodedata
from hmac import compare_digest

MOVING_FACTOR_BYTES = 8


def int_to_bytestring(i: int, padding: int = MOVING_FACTOR_BYTES) -> bytes:
    """
    Turns an integer to the OATH specified bytestring, which is fed to the
    HMAC along with the secret.

    The whole integer is encoded big-endian; a counter above 2**32 keeps its
    high word.

    :param i: non-negative integer that fits in ``padding`` bytes
    :param padding: width of the result in bytes
    :raises OverflowError: if ``i`` is negative or too large
    """
    return i.to_bytes(padding, "big", signed=False)


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))


def normalize_candidate(candidate, password_length: int):
    """
    Brings a user supplied password into string form for comparison.

    Integers are zero-padded back to ``password_length`` digits, strings are
    passed through untouched. Anything else, including text that cannot be
    encoded as UTF-8, returns None so the caller can reject it without
    raising.
    """
    if isinstance(candidate, bool):
        return None
    if isinstance(candidate, int):
        if candidate < 0:
            return None
        return str(candidate).zfill(password_length)
    if isinstance(candidate, str):
        try:
            candidate.encode("utf-8")
        except UnicodeEncodeError:
            return None
        return candidate
    return None
