import base64
import binascii
from typing import Iterable, List, Literal, Optional

DataFormat = Literal["utf8", "hex", "base64"]

PREFERRED_ENCODINGS: List[str] = [
    "utf-8",
    "cp1252",
    "latin-1",
]


def load_bytes(data: str, fmt: DataFormat) -> bytes:
    """Turn CLI text into the payload bytes it describes."""
    if fmt == "utf8":
        return data.encode("utf-8")
    if fmt == "hex":
        try:
            return bytes.fromhex(data)
        except ValueError as exc:
            raise ValueError(f"Invalid hex input: {exc}") from None
    if fmt == "base64":
        try:
            return base64.b64decode(data, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"Invalid base64 input: {exc}") from None
    raise ValueError(f"Unsupported data format: {fmt}")


def dump_bytes(data: bytes, fmt: DataFormat) -> str:
    if fmt == "utf8":
        return decode_bytes_best_effort(data)
    if fmt == "hex":
        return data.hex()
    if fmt == "base64":
        return base64.b64encode(data).decode("ascii")
    raise ValueError(f"Unsupported data format: {fmt}")


def decode_bytes_best_effort(data: bytes, preferred_encoding: Optional[str] = None, encodings: Optional[Iterable[str]] = None) -> str:
    """
    Decode bytes with a set of common encodings, falling back to replacement on failure.

    - If preferred_encoding is provided, try it first.
    - Then try the provided list (or the default preferred list).
    - If all fail, decode with the first candidate using replacement to avoid crashes.
    """
    candidates: List[str] = []
    if preferred_encoding:
        candidates.append(preferred_encoding)
    candidates.extend(list(encodings) if encodings else PREFERRED_ENCODINGS)
    # de-duplicate while preserving order
    seen = set()
    ordered = []
    for enc in candidates:
        if enc and enc.lower() not in seen:
            ordered.append(enc)
            seen.add(enc.lower())

    for enc in ordered:
        try:
            return data.decode(enc)
        except UnicodeDecodeError:
            continue
    return data.decode(ordered[0], errors="replace")
