# srpconfig/common/settings.py
import os
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_GROUP = "rfc5054-2048"
DEFAULT_DIGEST = "sha256"


class Settings(BaseModel):
    group: str = DEFAULT_GROUP
    digest: str = DEFAULT_DIGEST
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            group=os.getenv("SRP_GROUP", DEFAULT_GROUP),
            digest=os.getenv("SRP_DIGEST", DEFAULT_DIGEST),
            log_level=os.getenv("SRP_LOG_LEVEL", "INFO"),
        )
