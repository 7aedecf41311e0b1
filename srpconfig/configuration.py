# srpconfig/configuration.py
import logging
from dataclasses import dataclass
from typing import Optional

from srpconfig.common.errors import GeneratorInvalid, PrimeTooShort
from srpconfig.common.settings import Settings
from srpconfig.common.utils import int_to_bytes
from srpconfig.crypto.digest import Digest, Hmac, digest_func, hmac_func, sha256_digest, sha256_hmac
from srpconfig.crypto.groups import get_group
from srpconfig.crypto.private_value import PrivateValueFunc, generate_private_value

logger = logging.getLogger(__name__)

MIN_PRIME_BITS = 256


@dataclass(frozen=True)
class Configuration:
    """
    Parameters for one SRP exchange.

    N        A large safe prime (N = 2q+1, where q is prime)
    g        A generator modulo N
    digest   Hash used for intermediate values and for deriving a single shared key
    hmac     HMAC(key, msg) used when deriving several keys from one shared secret
    a_func   (ONLY for testing) override producing the client private value
    b_func   (ONLY for testing) override producing the server private value

    Nothing is checked on construction; call validate() before use, or build
    through Configuration.validated().
    """
    N: int
    g: int
    digest: Digest = sha256_digest
    hmac: Hmac = sha256_hmac
    a_func: Optional[PrivateValueFunc] = None
    b_func: Optional[PrivateValueFunc] = None

    @classmethod
    def validated(cls, *args, **kwargs) -> "Configuration":
        config = cls(*args, **kwargs)
        config.validate()
        return config

    @property
    def modulus(self) -> bytes:
        return int_to_bytes(self.N)

    @property
    def generator(self) -> bytes:
        return int_to_bytes(self.g)

    def validate(self) -> None:
        bits = self.N.bit_length() if self.N > 0 else 0
        if bits < MIN_PRIME_BITS:
            logger.warning("Rejecting configuration: %d-bit modulus", bits)
            raise PrimeTooShort(bits, MIN_PRIME_BITS)
        if self.g <= 1:
            logger.warning("Rejecting configuration: generator %d", self.g)
            raise GeneratorInvalid(self.g)

    def _private_int(self, override: Optional[PrivateValueFunc]) -> int:
        if override is not None:
            # test vectors: used verbatim, range not checked
            return override()
        self.validate()
        return generate_private_value(self.N)

    def client_private_int(self) -> int:
        return self._private_int(self.a_func)

    def server_private_int(self) -> int:
        return self._private_int(self.b_func)

    def client_private_value(self) -> bytes:
        """Private value 'a', serialized."""
        return int_to_bytes(self.client_private_int())

    def server_private_value(self) -> bytes:
        """Private value 'b', serialized."""
        return int_to_bytes(self.server_private_int())


def load_configuration(settings: Optional[Settings] = None) -> Configuration:
    """Build a validated configuration from SRP_GROUP / SRP_DIGEST (see Settings)."""
    settings = settings or Settings.from_env()
    group = get_group(settings.group)
    config = Configuration.validated(
        N=group.N,
        g=group.g,
        digest=digest_func(settings.digest),
        hmac=hmac_func(settings.digest),
    )
    logger.info("Loaded %s (%d bits) with %s", group.name, group.N.bit_length(), settings.digest)
    return config
