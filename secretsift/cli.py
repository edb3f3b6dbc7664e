"""Command-line interface."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from .schema import Config
from .verify import verify_secret

_VERSION = "0.1.0"
_FORMATS = ("text", "json", "sarif", "csv")


def build_parser() -> argparse.ArgumentParser:
    """The argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="secretsift",
        description="High-performance secret scanner for codebases",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    commands = parser.add_subparsers(dest="command")

    verify = commands.add_parser(
        "verify", help="Verify if a detected secret is valid (calls provider API)"
    )
    verify.add_argument("secret", help="The secret value to verify")
    verify.add_argument(
        "-s", "--secret-type", help="Type of secret (aws, github, slack, stripe, etc.)"
    )
    verify.add_argument("-f", "--format", choices=_FORMATS, default="text", help="Output format")
    verify.add_argument("--timeout", type=int, default=10, help="Timeout in seconds")
    verify.set_defaults(handler=run_verify)

    init = commands.add_parser("init", help="Create default config file")
    init.add_argument("--minimal", action="store_true", help="Create minimal config")
    init.add_argument(
        "--full", action="store_true", help="Create config with all options documented"
    )
    init.add_argument(
        "-o", "--output", type=Path, default=Path(".secretscanner.yaml"), help="Output path"
    )
    init.add_argument("--force", action="store_true", help="Overwrite existing file")
    init.set_defaults(handler=run_init)

    return parser


def run_verify(args: argparse.Namespace) -> int:
    """Verify a secret; exit 1 if it is valid, 0 if not."""
    result = verify_secret(args.secret, args.secret_type, args.timeout)
    if args.format == "json":
        data = {
            "secret_type": result.secret_type,
            "is_valid": result.is_valid,
            "message": result.message,
        }
        if result.details is not None:
            data["details"] = result.details
        print(json.dumps(data, separators=(",", ":")))
    else:
        status = "VALID" if result.is_valid else "INVALID"
        print(f"[{status}] {result.secret_type} - {result.message}")
        if result.details is not None:
            print(f"  {result.details}")
    return 1 if result.is_valid else 0


def run_init(args: argparse.Namespace) -> int:
    """Write a starter config file; refuse to overwrite unless forced."""
    output: Path = args.output
    if output.exists() and not args.force:
        print(f"Error: {output} already exists. Use --force to overwrite.", file=sys.stderr)
        return 1
    config = Config.full() if args.full else Config.minimal()
    try:
        output.write_text(config.to_yaml(), encoding="utf-8")
    except OSError as exc:
        print(f"Error writing config: {exc}", file=sys.stderr)
        return 2
    print(f"Created {output}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help(sys.stderr)
        return 2
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())