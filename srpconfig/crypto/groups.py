# srpconfig/crypto/groups.py
from dataclasses import dataclass
from typing import Dict

from srpconfig.common.errors import UnknownParameter
from srpconfig.crypto.digest import Digest, Hmac, sha256_digest, sha256_hmac

# RFC 5054 Appendix A, 2048-bit group
RFC5054_2048_N = int("""
AC6BDB41324A9A9BF166DE5E1389582FAF72B6651987EE07FC3192943DB56050A37329CBB4
A099ED8193E0757767A13DD52312AB4B03310DCD7F48A9DA04FD50E8083969EDB767B0CF60
95179A163AB3661A05FBD5FAAAE82918A9962F0B93B855F97993EC975EEAA80D740ADBF4FF
747359D041D5C33EA71D281E446B14773BCA97B43A23FB801676BD207A436C6481F1D2B907
8717461A5B9D32E688F87748544523B524B0D57D5EA77A2775D2ECFA032CFBDBF52FB37861
60279004E57AE6AF874E7303CE53299CCC041C7BC308D82A5698F3A8D0C38271AE35F8E9DB
FBB694B5C803D89F7AE435DE236D525F54759B65E372FCD68EF20FA7111F9E4AFF73
""".replace("\n", ""), 16)

# RFC 3526 Group 14 (2048-bit MODP)
RFC3526_2048_N = int("""
FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD1
29024E088A67CC74020BBEA63B139B22514A08798E3404DD
EF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245
E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED
EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3D
C2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F
83655D23DCA3AD961C62F356208552BB9ED529077096966D
670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B
E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9
DE2BCBF6955817183995497CEA956AE515D2261898FA0510
15728E5A8AACAA68FFFFFFFFFFFFFFFF
""".replace("\n", ""), 16)


@dataclass(frozen=True)
class Group:
    name: str
    N: int
    g: int

    @property
    def byte_len(self) -> int:
        return (self.N.bit_length() + 7) // 8

    def configuration(self, digest: Digest = sha256_digest, hmac: Hmac = sha256_hmac):
        from srpconfig.configuration import Configuration
        return Configuration(N=self.N, g=self.g, digest=digest, hmac=hmac)


GROUPS: Dict[str, Group] = {
    group.name: group
    for group in (
        Group("rfc5054-2048", RFC5054_2048_N, 2),
        Group("rfc3526-2048", RFC3526_2048_N, 2),
    )
}


def get_group(name: str) -> Group:
    try:
        return GROUPS[name.lower()]
    except KeyError:
        raise UnknownParameter("group", name, GROUPS) from None
