# srpconfig/crypto/digest.py
"""
Digest and HMAC primitives handed to a Configuration.

Any callable with the right shape works; the ones built here wrap the
`cryptography` hash implementations so the algorithm can be picked by name.
"""
from typing import Dict, Protocol, Type

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

from srpconfig.common.errors import UnknownParameter


class Digest(Protocol):
    def __call__(self, data: bytes) -> bytes: ...


class Hmac(Protocol):
    def __call__(self, key: bytes, data: bytes) -> bytes: ...


ALGORITHMS: Dict[str, Type[hashes.HashAlgorithm]] = {
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}


def _algorithm(name: str) -> Type[hashes.HashAlgorithm]:
    try:
        return ALGORITHMS[name.lower()]
    except KeyError:
        raise UnknownParameter("digest", name, ALGORITHMS) from None


def make_digest(algorithm: Type[hashes.HashAlgorithm]) -> Digest:
    def digest(data: bytes) -> bytes:
        h = hashes.Hash(algorithm())
        h.update(data)
        return h.finalize()
    digest.__name__ = f"{algorithm.name}_digest"
    return digest


def make_hmac(algorithm: Type[hashes.HashAlgorithm]) -> Hmac:
    def mac(key: bytes, data: bytes) -> bytes:
        h = crypto_hmac.HMAC(key, algorithm())
        h.update(data)
        return h.finalize()
    mac.__name__ = f"{algorithm.name}_hmac"
    return mac


def digest_func(name: str) -> Digest:
    return make_digest(_algorithm(name))


def hmac_func(name: str) -> Hmac:
    return make_hmac(_algorithm(name))


def digest_size(name: str) -> int:
    return _algorithm(name).digest_size


sha256_digest: Digest = make_digest(hashes.SHA256)
sha256_hmac: Hmac = make_hmac(hashes.SHA256)
