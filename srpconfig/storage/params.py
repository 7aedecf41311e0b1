# srpconfig/storage/params.py
import os
import json
import logging
from dotenv import load_dotenv
from srpconfig.common.protocol import ParamsMessage

load_dotenv()

logger = logging.getLogger(__name__)

PARAMS_DIR = os.getenv("PARAMS_DIR", "params")


def default_params_path(name: str) -> str:
    return os.path.join(PARAMS_DIR, f"{name}.json")


def save_params(message: ParamsMessage, path: str) -> str:
    """
    Write the parameter message as JSON, creating parent directories.
    Returns the path written.
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(message.model_dump(), f, indent=2)
    logger.info("Saved %s parameters to %s", message.digest, path)
    return path


def load_params(path: str) -> ParamsMessage:
    with open(path, "r", encoding="utf-8") as f:
        return ParamsMessage.model_validate(json.load(f))
