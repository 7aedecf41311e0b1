import pytest

from srpconfig.configuration import Configuration
from srpconfig.crypto.groups import get_group


@pytest.fixture
def group():
    return get_group("rfc5054-2048")


@pytest.fixture
def config(group):
    return Configuration(N=group.N, g=group.g)


@pytest.fixture
def n_256():
    # bit width exactly 256
    return 2**255 + 1
