import pytest

from .vectors import RFC4226_SECRET


@pytest.fixture
def secret():
    return RFC4226_SECRET
