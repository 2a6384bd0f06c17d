"""
Radix conversion between raw bytes and digit strings over an arbitrary alphabet.

Both directions treat the payload as one big-endian unsigned integer. Leading
zero bytes carry no numeric weight, so each one is written as an extra leader
symbol (the alphabet's zero digit) and restored from it on the way back.
"""
from typing import Dict, List

from .errors import EncodeError, InvalidBaseString


def _check_alphabet(alphabet: bytes) -> None:
    if not alphabet:
        raise ValueError("Alphabet must contain at least one symbol.")
    if len(set(alphabet)) != len(alphabet):
        raise ValueError("Alphabet symbols must be distinct.")


def _count_leaders(data: bytes, leader: int) -> int:
    # The final element always goes through the numeric path, so a lone zero
    # byte (or leader symbol) is a value of zero rather than a leader.
    count = 0
    for b in data[:-1]:
        if b != leader:
            break
        count += 1
    return count


def encode(alphabet: bytes, data: bytes) -> bytes:
    """
    Encode `data` as digits of base len(alphabet), most significant first.

    Returns b"" for empty input. A unary alphabet can only express zero, so
    only all-zero payloads are accepted for it.
    """
    if not data:
        return b""
    _check_alphabet(alphabet)
    radix = len(alphabet)

    num = int.from_bytes(data, "big")
    digits: List[int] = []
    if num == 0:
        digits.append(0)
    elif radix < 2:
        raise EncodeError("A unary alphabet can only encode zero bytes.")
    while num > 0:
        num, rem = divmod(num, radix)
        digits.append(rem)

    digits.extend([0] * _count_leaders(data, 0))
    digits.reverse()
    return bytes(alphabet[d] for d in digits)


def decode(alphabet: bytes, text: bytes) -> bytes:
    """
    Decode digits of base len(alphabet) back into the original bytes.

    Raises InvalidBaseString at the first symbol that is not in `alphabet`.
    """
    if not text:
        return b""
    if not alphabet:
        raise InvalidBaseString("Cannot decode with an empty alphabet.")
    radix = len(alphabet)
    inv: Dict[int, int] = {symbol: value for value, symbol in enumerate(alphabet)}

    num = 0
    for pos, symbol in enumerate(text):
        value = inv.get(symbol)
        if value is None:
            raise InvalidBaseString(
                f"Invalid symbol {chr(symbol)!r} at position {pos}", position=pos
            )
        num = num * radix + value

    length = max(1, (num.bit_length() + 7) // 8)
    pad = _count_leaders(text, alphabet[0])
    return b"\x00" * pad + num.to_bytes(length, "big")
