import hashlib

import pytest

from otpauth import HOTP, InvalidPasswordLength, InvalidWindowSize, UnsupportedAlgorithm

from .vectors import RFC4226_CODES, RFC6238_SECRETS


def test_defaults(secret):
    hotp = HOTP(secret)
    assert hotp.secret == secret
    assert hotp.algorithm == "sha1"
    assert hotp.password_length == 6
    assert hotp.window_size == 1


@pytest.mark.parametrize("counter, expected", list(enumerate(RFC4226_CODES)))
def test_generate_password(secret, counter, expected):
    assert HOTP(secret).generate_password(counter) == expected


def test_generate_password_defaults_to_counter_one(secret):
    assert HOTP(secret).generate_password() == RFC4226_CODES[1]


def test_text_secret_is_encoded_as_utf8(secret):
    assert HOTP(secret.decode("ascii")).generate_password(0) == RFC4226_CODES[0]
    assert HOTP(bytearray(secret)).secret == secret


def test_secret_must_be_bytes_or_text():
    with pytest.raises(TypeError):
        HOTP(12345)


def test_secret_can_be_replaced(secret):
    hotp = HOTP(b"another key")
    hotp.secret = secret
    assert hotp.generate_password(0) == RFC4226_CODES[0]


class TestValidation:
    @pytest.mark.parametrize("length", [0, -1, "6", 6.0, None, True])
    def test_invalid_password_length(self, secret, length):
        hotp = HOTP(secret)
        with pytest.raises(InvalidPasswordLength):
            hotp.password_length = length
        assert hotp.password_length == 6

    @pytest.mark.parametrize("window", [-1, "1", 1.0, None])
    def test_invalid_window_size(self, secret, window):
        hotp = HOTP(secret)
        with pytest.raises(InvalidWindowSize):
            hotp.window_size = window
        assert hotp.window_size == 1

    @pytest.mark.parametrize("algorithm", ["not-a-hash", "md5", "shake_256", object, int])
    def test_unsupported_algorithm(self, secret, algorithm):
        hotp = HOTP(secret)
        with pytest.raises(UnsupportedAlgorithm):
            hotp.algorithm = algorithm
        assert hotp.algorithm == "sha1"

    def test_constructor_validates(self, secret):
        with pytest.raises(InvalidPasswordLength):
            HOTP(secret, password_length=0)
        with pytest.raises(InvalidWindowSize):
            HOTP(secret, window_size=-1)
        with pytest.raises(UnsupportedAlgorithm):
            HOTP(secret, algorithm="not-a-hash")

    def test_zero_window_is_allowed(self, secret):
        assert HOTP(secret, window_size=0).window_size == 0

    def test_algorithm_accepts_constructor(self, secret):
        hotp = HOTP(secret)
        hotp.algorithm = hashlib.sha256
        assert hotp.algorithm == "sha256"


class TestVerifyPassword:
    def test_window_acceptance(self, secret):
        hotp = HOTP(secret, window_size=1)
        assert hotp.verify_password(RFC4226_CODES[4], 5)
        assert hotp.verify_password(RFC4226_CODES[5], 5)
        assert hotp.verify_password(RFC4226_CODES[6], 5)
        assert not hotp.verify_password(RFC4226_CODES[3], 5)
        assert not hotp.verify_password(RFC4226_CODES[7], 5)

    def test_wider_window(self, secret):
        hotp = HOTP(secret, window_size=3)
        assert hotp.verify_password(RFC4226_CODES[2], 5)
        assert hotp.verify_password(RFC4226_CODES[8], 5)
        assert not hotp.verify_password(RFC4226_CODES[9], 5)

    def test_integer_candidate(self, secret):
        assert HOTP(secret).verify_password(755224, 0)

    def test_integer_candidate_keeps_leading_zeros(self):
        # RFC 6238 SHA-1 vector at T=1111111109 is 07081804
        hotp = HOTP(RFC6238_SECRETS["sha1"], password_length=8, window_size=0)
        assert hotp.verify_password(7081804, 1111111109 // 30)
        assert hotp.verify_password("07081804", 1111111109 // 30)
        assert not hotp.verify_password("7081804", 1111111109 // 30)

    @pytest.mark.parametrize(
        "candidate", ["abc", "", "7552240", " 755224", None, b"755224", 755224.0, [], -1, "\ud800", "75522\udfff"]
    )
    def test_malformed_candidates_are_rejected(self, secret, candidate):
        assert HOTP(secret).verify_password(candidate, 0) is False

    def test_negative_center_does_not_raise(self, secret):
        assert HOTP(secret).verify_password(RFC4226_CODES[0], -1)
        assert not HOTP(secret).verify_password(RFC4226_CODES[0], -2)

    @pytest.mark.parametrize("algorithm", ["sha1", "sha256", "sha512"])
    @pytest.mark.parametrize("length", [1, 6, 8, 10])
    @pytest.mark.parametrize("moving_factor", [0, 1, 2**31, 2**32, 2**64 - 1])
    def test_round_trip(self, secret, algorithm, length, moving_factor):
        hotp = HOTP(secret, algorithm=algorithm, password_length=length, window_size=0)
        assert hotp.verify_password(hotp.generate_password(moving_factor), moving_factor)


def test_repr_hides_secret(secret):
    assert "1234" not in repr(HOTP(secret))
    assert repr(HOTP(secret)) == "HOTP(algorithm='sha1', password_length=6, window_size=1)"
