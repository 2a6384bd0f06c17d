from typing import Optional


class MultibaseError(ValueError):
    """Base class for every encode/decode failure raised by this package."""


class UnsupportedBase(MultibaseError):
    """Raised when a registered base has no usable alphabet (padded variants)."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unsupported base: {name}")
        self.name = name


class UnknownBase(MultibaseError):
    """Raised when a code or name matches no registered base."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Unknown base: {code!r}")
        self.code = code


class InvalidBaseString(MultibaseError):
    """Raised when the encoded text holds a symbol outside the base alphabet."""

    def __init__(self, message: str = "Decoding error", position: Optional[int] = None) -> None:
        super().__init__(message)
        self.position = position


class EncodeError(MultibaseError):
    """Raised when the payload cannot be written with the chosen alphabet."""
