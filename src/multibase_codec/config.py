import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from .bases import base_by_name
from .errors import UnknownBase

CONFIG_PATH = Path.home() / ".multibase_codec.json"
DEFAULT_BASE = "base58btc"

ENV_MAPPING: Dict[str, str] = {
    "default_base": "MULTIBASE_DEFAULT_BASE",
    "history": "MULTIBASE_HISTORY",
    "history_path": "MULTIBASE_HISTORY_PATH",
}

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class CodecConfig:
    default_base: str = DEFAULT_BASE
    history: bool = True
    history_path: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "default_base": self.default_base,
            "history": self.history,
            "history_path": self.history_path,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "CodecConfig":
        return cls(
            default_base=str(data.get("default_base", "") or DEFAULT_BASE),
            history=bool(data.get("history", True)),
            history_path=str(data.get("history_path", "") or ""),
        )


def parse_flag(value: str) -> bool:
    return value.strip().lower() not in _FALSE_VALUES


def _merge_env(cfg: CodecConfig) -> CodecConfig:
    """Environment variables win over the file for the fields they set."""
    base_env = os.getenv(ENV_MAPPING["default_base"], "")
    if base_env:
        cfg.default_base = base_env
    history_env = os.getenv(ENV_MAPPING["history"], "")
    if history_env:
        cfg.history = parse_flag(history_env)
    path_env = os.getenv(ENV_MAPPING["history_path"], "")
    if path_env:
        cfg.history_path = path_env
    return cfg


def load_config(path: Path = CONFIG_PATH) -> CodecConfig:
    config = CodecConfig()
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                config = CodecConfig.from_dict(data)
        except (OSError, ValueError):
            # Fall back to defaults/env if file malformed.
            pass
    config = _merge_env(config)
    try:
        config.default_base = base_by_name(config.default_base).name
    except UnknownBase:
        config.default_base = DEFAULT_BASE
    return config


def save_config(config: CodecConfig, path: Path = CONFIG_PATH) -> None:
    payload = config.to_dict()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
