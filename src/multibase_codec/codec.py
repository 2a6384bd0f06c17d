from typing import Tuple, Union

from . import converter
from .bases import Base, alphabet_of, base_of, resolve_base
from .errors import MultibaseError

BytesLike = Union[bytes, bytearray, memoryview]


def _to_bytes(data: Union[str, BytesLike], encoding: str = "utf-8") -> bytes:
    if isinstance(data, str):
        return data.encode(encoding)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected str or bytes-like input, got {type(data).__name__}")


def encode(base: Union[Base, str], data: Union[str, BytesLike], encoding: str = "utf-8") -> str:
    """
    Encode `data` with `base` and prefix the base code.

    `base` may be a Base, a name such as "base58btc" or a code such as "z".
    Text input is encoded with `encoding` first.
    """
    target = resolve_base(base)
    alphabet = alphabet_of(target)
    body = converter.encode(alphabet, _to_bytes(data, encoding))
    return target.code + body.decode("ascii")


def detect_base(text: Union[str, BytesLike]) -> Base:
    """Return the base named by the leading code without converting anything."""
    raw = _to_bytes(text)
    return base_of(raw[0] if raw else 0)


def decode(text: Union[str, BytesLike]) -> Tuple[Base, bytes]:
    """
    Decode multibase text into (base, payload).

    Empty input has no code and is treated as code byte 0, which is unknown.
    """
    raw = _to_bytes(text)
    base = base_of(raw[0] if raw else 0)
    alphabet = alphabet_of(base)
    return base, converter.decode(alphabet, raw[1:])


def transcode(text: Union[str, BytesLike], base: Union[Base, str]) -> str:
    """Re-encode multibase text in another base."""
    _, payload = decode(text)
    return encode(base, payload)


def is_encoded(text: Union[str, BytesLike]) -> bool:
    try:
        decode(text)
    except MultibaseError:
        return False
    return True
