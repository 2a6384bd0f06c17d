from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from .errors import UnknownBase, UnsupportedBase

BASE1_ALPHABET = b"1"
BASE2_ALPHABET = b"01"
BASE8_ALPHABET = b"01234567"
BASE10_ALPHABET = b"0123456789"
BASE16_ALPHABET = b"0123456789abcdef"
BASE32HEX_ALPHABET = b"0123456789abcdefghijklmnopqrstuv"
BASE32_ALPHABET = b"abcdefghijklmnopqrstuvwxyz234567"
BASE32Z_ALPHABET = b"ybndrfg8ejkmcpqxot1uwisza345h769"
BASE58_FLICKR_ALPHABET = b"123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ"
BASE58_BTC_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE64_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BASE64URL_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"


@dataclass(frozen=True)
class Base:
    """
    A registered numeral system.

    `alphabet` is None for the padded variants: their codes are reserved so
    that texts using them are recognised, but they cannot be converted yet.
    """

    code: str
    name: str
    alphabet: Optional[bytes] = None

    @property
    def supported(self) -> bool:
        return self.alphabet is not None

    def __str__(self) -> str:
        return self.name


BASE1 = Base("1", "base1", BASE1_ALPHABET)
BASE2 = Base("0", "base2", BASE2_ALPHABET)
BASE8 = Base("7", "base8", BASE8_ALPHABET)
BASE10 = Base("9", "base10", BASE10_ALPHABET)
BASE16 = Base("f", "base16", BASE16_ALPHABET)
BASE16_UPPER = Base("F", "base16upper", BASE16_ALPHABET.upper())
BASE32HEX = Base("v", "base32hex", BASE32HEX_ALPHABET)
BASE32HEX_UPPER = Base("V", "base32hexupper", BASE32HEX_ALPHABET.upper())
BASE32HEX_PAD = Base("t", "base32hexpad")
BASE32HEX_PAD_UPPER = Base("T", "base32hexpadupper")
BASE32 = Base("b", "base32", BASE32_ALPHABET)
BASE32_UPPER = Base("B", "base32upper", BASE32_ALPHABET.upper())
BASE32_PAD = Base("c", "base32pad")
BASE32_PAD_UPPER = Base("C", "base32padupper")
BASE32Z = Base("h", "base32z", BASE32Z_ALPHABET)
BASE58_FLICKR = Base("Z", "base58flickr", BASE58_FLICKR_ALPHABET)
BASE58_BTC = Base("z", "base58btc", BASE58_BTC_ALPHABET)
BASE64 = Base("m", "base64", BASE64_ALPHABET)
BASE64_PAD = Base("M", "base64pad")
BASE64URL = Base("u", "base64url", BASE64URL_ALPHABET)
BASE64URL_PAD = Base("U", "base64urlpad")

BASES: Tuple[Base, ...] = (
    BASE1,
    BASE2,
    BASE8,
    BASE10,
    BASE16,
    BASE16_UPPER,
    BASE32HEX,
    BASE32HEX_UPPER,
    BASE32HEX_PAD,
    BASE32HEX_PAD_UPPER,
    BASE32,
    BASE32_UPPER,
    BASE32_PAD,
    BASE32_PAD_UPPER,
    BASE32Z,
    BASE58_FLICKR,
    BASE58_BTC,
    BASE64,
    BASE64_PAD,
    BASE64URL,
    BASE64URL_PAD,
)


def _index_by_code() -> Dict[str, Base]:
    index: Dict[str, Base] = {}
    for base in BASES:
        if len(base.code) != 1 or not base.code.isascii() or not base.code.isprintable():
            raise RuntimeError(f"Base code must be one printable ASCII character: {base.name}")
        if base.code in index:
            raise RuntimeError(f"Duplicate base code {base.code!r}: {index[base.code].name} and {base.name}")
        index[base.code] = base
    return index


_BY_CODE = _index_by_code()
_BY_NAME = {base.name: base for base in BASES}


def code_of(base: Base) -> str:
    return base.code


def alphabet_of(base: Base) -> bytes:
    """Return the alphabet of `base`, or raise UnsupportedBase for padded variants."""
    if base.alphabet is None:
        raise UnsupportedBase(base.name)
    return base.alphabet


def base_of(code: Union[str, int]) -> Base:
    """
    Look up a base by its code character.

    Accepts the character itself or its byte value, which is what callers get
    when they index into encoded bytes.
    """
    key = chr(code) if isinstance(code, int) else code
    try:
        return _BY_CODE[key]
    except KeyError:
        raise UnknownBase(key) from None


def base_by_name(name: str) -> Base:
    try:
        return _BY_NAME[name.strip().lower()]
    except KeyError:
        raise UnknownBase(name) from None


def resolve_base(spec: Union[Base, str]) -> Base:
    """
    Resolve a Base, a base name ("base58btc") or a single code character ("z").
    """
    if isinstance(spec, Base):
        return spec
    if len(spec) == 1:
        return base_of(spec)
    return base_by_name(spec)


def registry() -> Dict[str, Base]:
    return dict(_BY_NAME)
