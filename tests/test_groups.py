import pytest

from srpconfig.common.errors import UnknownParameter
from srpconfig.configuration import Configuration
from srpconfig.crypto.digest import digest_func
from srpconfig.crypto.groups import GROUPS, get_group


@pytest.mark.parametrize("name", sorted(GROUPS))
def test_groups_are_2048_bit_safe_primes(name):
    group = GROUPS[name]
    assert group.N.bit_length() == 2048
    assert group.byte_len == 256
    assert group.g == 2
    # Fermat checks on N and q = (N-1)/2
    q = (group.N - 1) // 2
    assert pow(2, group.N - 1, group.N) == 1
    assert pow(2, q - 1, q) == 1


def test_known_prefixes():
    assert hex(get_group("rfc5054-2048").N).startswith("0xac6bdb41324a9a9b")
    assert hex(get_group("rfc3526-2048").N).startswith("0xffffffffffffffffc90fdaa2")


def test_group_configuration_validates():
    group = get_group("RFC3526-2048")
    config = group.configuration(digest=digest_func("sha384"))
    assert isinstance(config, Configuration)
    config.validate()
    assert config.N == group.N
    assert len(config.digest(b"")) == 48


def test_unknown_group():
    with pytest.raises(UnknownParameter) as exc:
        get_group("ffdhe2048")
    assert exc.value.kind == "group"
