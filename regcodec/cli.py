import argparse
import sys
from typing import Optional, Sequence

from regcodec.config import CodecSettings, get_settings
from regcodec.converter import Converter
from regcodec.devices import load_bundled_feature_map
from regcodec.exceptions import CodecError
from regcodec.featuremap import load_feature_map


def _parse_assignment(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def _parse_hex(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a hex payload: {text!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="regcodec", description="Encode and decode register payloads.")
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="Encode command parameters into register payloads.")
    source = enc.add_mutually_exclusive_group(required=True)
    source.add_argument("--feature-map", type=str, help="Path to a YAML or JSON feature map document.")
    source.add_argument("--model", type=str, help="Name of a bundled feature map.")
    enc.add_argument("--all", action="store_true", help="Encode every matching parameter, not just the first.")
    enc.add_argument("params", nargs="+", type=_parse_assignment, metavar="KEY=VALUE")

    dec = sub.add_parser("decode", help="Decode device responses into report text.")
    dec.add_argument("messages", nargs="+", type=_parse_hex, metavar="HEX")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings: CodecSettings = get_settings()

    try:
        if args.command == "encode":
            if args.all:
                settings = settings.model_copy(update={"encode_all_params": True})
            fmap = load_feature_map(args.feature_map) if args.feature_map else load_bundled_feature_map(args.model)
            result = Converter(settings=settings).convert_issue_message("", "", "", dict(args.params), fmap)
            for payload in result.input_messages:
                print(payload.hex())
        else:
            print(Converter(settings=settings).convert_device_messages(args.messages).text)
    except (CodecError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
