# srpconfig/common/errors.py


class SRPError(Exception):
    """Base class for every error raised by srpconfig."""


class ConfigurationError(SRPError):
    pass


class PrimeTooShort(ConfigurationError):
    def __init__(self, bits: int, minimum: int):
        super().__init__(f"Modulus is {bits} bits, need at least {minimum}")
        self.bits = bits
        self.minimum = minimum


class GeneratorInvalid(ConfigurationError):
    def __init__(self, g: int):
        super().__init__(f"Generator must be greater than 1, got {g}")
        self.g = g


class UnknownParameter(SRPError, KeyError):
    # raised for unknown group / digest names
    def __init__(self, kind: str, name: str, known):
        super().__init__(f"Unknown {kind} {name!r}, expected one of: {', '.join(sorted(known))}")
        self.kind = kind
        self.name = name

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]
