import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .bases import BASES, resolve_base
from .codec import decode, encode, transcode
from .config import CONFIG_PATH, CodecConfig, load_config, parse_flag, save_config
from .errors import MultibaseError
from .history import log_event, read_history
from .utils import decode_bytes_best_effort, dump_bytes, load_bytes


def _config_path(args: argparse.Namespace) -> Path:
    return Path(args.config) if getattr(args, "config", None) else CONFIG_PATH


def _history_path(config: CodecConfig) -> Optional[Path]:
    return Path(config.history_path).expanduser() if config.history_path else None


def _load_text(args: argparse.Namespace) -> str:
    if args.in_file:
        with open(args.in_file, "rb") as fh:
            return decode_bytes_best_effort(fh.read()).strip()
    if args.text is None:
        raise argparse.ArgumentTypeError("Provide TEXT or --in-file.")
    return args.text


def _load_payload(args: argparse.Namespace) -> bytes:
    # Files are taken verbatim; --input-format only applies to inline text.
    if args.in_file:
        with open(args.in_file, "rb") as fh:
            return fh.read()
    if args.text is None:
        raise argparse.ArgumentTypeError("Provide TEXT or --in-file.")
    return load_bytes(args.text, args.input_format)


def _write_output(args: argparse.Namespace, output: object) -> Optional[str]:
    if not args.out_file:
        return output.hex() if isinstance(output, bytes) else str(output)
    if isinstance(output, bytes):
        with open(args.out_file, "wb") as fh:
            fh.write(output)
    else:
        with open(args.out_file, "w", encoding="utf-8") as fh:
            fh.write(str(output))
    return None


def _run_encode(args: argparse.Namespace, config: CodecConfig) -> Optional[str]:
    base = config.default_base if args.base == "-" else args.base
    return _write_output(args, encode(base, _load_payload(args)))


def _run_decode(args: argparse.Namespace, config: CodecConfig) -> Optional[str]:
    base, payload = decode(_load_text(args))
    if args.binary and args.out_file:
        return _write_output(args, payload)
    rendered = dump_bytes(payload, args.output_format)
    if args.show_base:
        rendered = f"{base.name}: {rendered}"
    return _write_output(args, rendered)


def _run_transcode(args: argparse.Namespace, config: CodecConfig) -> str:
    base = config.default_base if args.base == "-" else args.base
    return transcode(args.text, base)


def _run_bases(args: argparse.Namespace, config: CodecConfig) -> str:
    lines = []
    for base in BASES:
        marker = "*" if base.name == config.default_base else " "
        alphabet = base.alphabet.decode("ascii") if base.alphabet is not None else "[unsupported]"
        lines.append(f"{marker} {base.code}  {base.name:<18} {alphabet}")
    return "\n".join(lines)


def _run_config(args: argparse.Namespace, config: CodecConfig) -> str:
    changed = False
    if args.default_base is not None:
        config.default_base = resolve_base(args.default_base).name
        changed = True
    if args.history is not None:
        config.history = parse_flag(args.history)
        changed = True
    if changed:
        save_config(config, _config_path(args))

    lines = [
        f"default_base: {config.default_base}",
        f"history: {'on' if config.history else 'off'}",
        f"history_path: {config.history_path or '[default]'}",
    ]
    if changed:
        lines.append("Configuration saved; environment variables still take precedence.")
    return "\n".join(lines)


def _run_history(args: argparse.Namespace, config: CodecConfig) -> str:
    records = read_history(_history_path(config), limit=args.limit)
    if not records:
        return "[no history]"
    lines = []
    for record in records:
        action = record.get("action", "unknown")
        rest = ", ".join(f"{k}={v}" for k, v in record.items() if k != "action" and v is not None)
        lines.append(f"{action}: {rest}" if rest else action)
    return "\n".join(lines)


def _base_argument(value: str) -> str:
    if value == "-":
        return value
    try:
        return resolve_base(value).name
    except MultibaseError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multibase-codec",
        description="Self-describing base encoding for binary data.",
    )
    parser.add_argument(
        "--no-history", action="store_true", help="Do not record the operation in history."
    )
    parser.add_argument("--config", help=f"Config file (default: {CONFIG_PATH}).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode data with a base")
    encode_parser.add_argument(
        "base", type=_base_argument, help="Base name or code, '-' for the configured default."
    )
    encode_parser.add_argument("text", nargs="?", help="Input text (ignored if --in-file).")
    encode_parser.add_argument("--in-file", help="Read raw bytes from file.")
    encode_parser.add_argument("--input-format", choices=["utf8", "hex", "base64"], default="utf8")
    encode_parser.add_argument("--out-file", help="Write result to file.")
    encode_parser.set_defaults(func=_run_encode)

    decode_parser = subparsers.add_parser("decode", help="Decode multibase text")
    decode_parser.add_argument("text", nargs="?", help="Encoded text (ignored if --in-file).")
    decode_parser.add_argument("--in-file", help="Read encoded text from file.")
    decode_parser.add_argument("--output-format", choices=["utf8", "hex", "base64"], default="utf8")
    decode_parser.add_argument("--show-base", action="store_true", help="Prefix output with the detected base.")
    decode_parser.add_argument("--out-file", help="Write result to file.")
    decode_parser.add_argument("--binary", action="store_true", help="Write raw bytes to --out-file.")
    decode_parser.set_defaults(func=_run_decode)

    transcode_parser = subparsers.add_parser("transcode", help="Re-encode multibase text in another base")
    transcode_parser.add_argument("base", type=_base_argument, help="Target base name or code.")
    transcode_parser.add_argument("text", help="Encoded text.")
    transcode_parser.set_defaults(func=_run_transcode)

    bases_parser = subparsers.add_parser("bases", help="List known bases")
    bases_parser.set_defaults(func=_run_bases)

    config_parser = subparsers.add_parser("config", help="Show or update configuration")
    config_parser.add_argument("--default-base", type=_base_argument, help="Base used when '-' is given.")
    config_parser.add_argument("--history", choices=["on", "off"], help="Enable or disable history.")
    config_parser.set_defaults(func=_run_config)

    history_parser = subparsers.add_parser("history", help="Show recent operations")
    history_parser.add_argument("--limit", type=int, default=20)
    history_parser.set_defaults(func=_run_history)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(_config_path(args))
    try:
        result = args.func(args, config)
    except (ValueError, argparse.ArgumentTypeError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if result is not None:
        print(result)
    if args.command in ("encode", "decode", "transcode") and config.history and not args.no_history:
        log_event(
            action=args.command,
            payload={
                "base": getattr(args, "base", None),
                "input": getattr(args, "text", None),
                "in_file": getattr(args, "in_file", None),
                "out_file": getattr(args, "out_file", None),
            },
            path=_history_path(config),
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
