from .bases import (
    BASES,
    Base,
    alphabet_of,
    base_by_name,
    base_of,
    code_of,
    registry,
    resolve_base,
)
from .codec import decode, detect_base, encode, is_encoded, transcode
from .config import CodecConfig, load_config, save_config
from .errors import (
    EncodeError,
    InvalidBaseString,
    MultibaseError,
    UnknownBase,
    UnsupportedBase,
)
from .history import log_event, read_history

__all__ = [
    "BASES",
    "Base",
    "CodecConfig",
    "EncodeError",
    "InvalidBaseString",
    "MultibaseError",
    "UnknownBase",
    "UnsupportedBase",
    "alphabet_of",
    "base_by_name",
    "base_of",
    "code_of",
    "decode",
    "detect_base",
    "encode",
    "is_encoded",
    "load_config",
    "log_event",
    "read_history",
    "registry",
    "resolve_base",
    "save_config",
    "transcode",
]
