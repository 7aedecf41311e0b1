# srpconfig/common/protocol.py
from pydantic import BaseModel
from typing import Literal
import json
from .utils import b64decode, b64encode, bytes_to_int
from srpconfig.common.settings import DEFAULT_DIGEST


# Base class with serialization helpers
class BaseMessage(BaseModel):
    type: str

    def to_json(self) -> str:
        # Convert to JSON
        return json.dumps(self.model_dump(), separators=(",", ":"))

    @classmethod
    def from_json(cls, raw: str) -> "BaseMessage":
        return cls.model_validate(json.loads(raw))


# Group parameters as published to the peer / handshake component
class ParamsMessage(BaseMessage):
    type: Literal["srp_params"] = "srp_params"
    N: str   # base64 of the canonical bytes, these are large integers
    g: str
    digest: str = DEFAULT_DIGEST

    def N_bytes(self) -> bytes:
        return b64decode(self.N)

    def g_bytes(self) -> bytes:
        return b64decode(self.g)

    @classmethod
    def from_configuration(cls, config, digest: str = DEFAULT_DIGEST) -> "ParamsMessage":
        # override functions are never carried
        return cls(N=b64encode(config.modulus), g=b64encode(config.generator), digest=digest)

    def to_configuration(self):
        from srpconfig.configuration import Configuration
        from srpconfig.crypto.digest import digest_func, hmac_func
        return Configuration(
            N=bytes_to_int(self.N_bytes()),
            g=bytes_to_int(self.g_bytes()),
            digest=digest_func(self.digest),
            hmac=hmac_func(self.digest),
        )


_MSG_TYPE_MAP = {
    "srp_params": ParamsMessage,
}


def parse_message(raw_json: str) -> BaseMessage:
    payload = json.loads(raw_json)
    msg_type = payload.get("type")

    cls = _MSG_TYPE_MAP.get(msg_type)
    if cls is None:
        # Fallback: unknown message type
        return BaseMessage.model_validate(payload)

    return cls.model_validate(payload)
