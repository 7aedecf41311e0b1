# srpconfig/common/utils.py
import base64


def b64encode(data: bytes) -> str:
    # Return base64 (no newline) string from bytes
    return base64.b64encode(data).decode("ascii")

def b64decode(data_b64: str) -> bytes:
    # Return bytes from base64 string
    return base64.b64decode(data_b64.encode("ascii"))

def int_to_bytes(n: int) -> bytes:
    # Canonical big-endian form, no leading zero bytes; 0 -> b""
    if n < 0:
        raise ValueError("Only non-negative integers can be serialized")
    return n.to_bytes((n.bit_length() + 7) // 8, "big")

def bytes_to_int(data: bytes) -> int:
    return int.from_bytes(data, "big")
