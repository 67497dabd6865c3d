"""passforge command-line interface.

Usage examples:
    python -m passforge generate -n 20 -c 5
    python -m passforge generate --min-numeric 3 --no-special --copy
    python -m passforge generate --custom "abc123" -n 12
    python -m passforge charsets
"""

import argparse
import logging
import sys

from passforge import CHARACTER_SETS, DEFAULT_OPTIONS, PasswordOptions
from passforge.config import MAX_LENGTH, MIN_LENGTH
from passforge.session import GeneratorSession

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passforge",
        description="Generate random passwords from character classes or a custom alphabet.",
    )
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=DEFAULT_OPTIONS.length,
        help=f"Password length, {MIN_LENGTH}-{MAX_LENGTH} (default: {DEFAULT_OPTIONS.length})",
    )
    gen_p.add_argument("--no-lowercase", action="store_true")
    gen_p.add_argument("--no-uppercase", action="store_true")
    gen_p.add_argument("--no-numeric", action="store_true")
    gen_p.add_argument("--no-special", action="store_true")
    gen_p.add_argument(
        "--custom", metavar="CHARS",
        help="Draw every character from CHARS instead of the character classes",
    )
    gen_p.add_argument(
        "--min-numeric", type=int, default=DEFAULT_OPTIONS.min_numeric,
        help=f"Minimum number of digits (default: {DEFAULT_OPTIONS.min_numeric})",
    )
    gen_p.add_argument(
        "--min-special", type=int, default=DEFAULT_OPTIONS.min_special,
        help=f"Minimum number of special characters (default: {DEFAULT_OPTIONS.min_special})",
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument(
        "--copy", action="store_true",
        help="Copy the last generated password to the clipboard",
    )

    # ── charsets ───────────────────────────────────────────────────────
    sub.add_parser("charsets", help="List the built-in character classes")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s: %(message)s",
    )

    if args.command == "generate":
        if not MIN_LENGTH <= args.length <= MAX_LENGTH:
            gen_p.error(f"--length must be between {MIN_LENGTH} and {MAX_LENGTH}")
        if args.min_numeric < 0 or args.min_special < 0:
            gen_p.error("minimum counts cannot be negative")
        if args.count < 1:
            gen_p.error("--count must be at least 1")
        return _cmd_generate(args)
    if args.command == "charsets":
        return _cmd_charsets(args)

    parser.print_help()
    return 0


def _options_from_args(args: argparse.Namespace) -> PasswordOptions:
    return PasswordOptions(
        lowercase=not args.no_lowercase,
        uppercase=not args.no_uppercase,
        numeric=not args.no_numeric,
        special=not args.no_special,
        custom=args.custom is not None,
        custom_chars=args.custom or "",
        length=args.length,
        min_numeric=args.min_numeric,
        min_special=args.min_special,
    )


def _cmd_generate(args: argparse.Namespace) -> int:
    options = _options_from_args(args)
    logger.debug("Generating %d password(s) with %s", args.count, options)

    session = GeneratorSession(options)
    for i in range(args.count):
        result = session.result if i == 0 else session.regenerate()
        if result["error"]:
            print(f"Error: {result['error']}", file=sys.stderr)
            return 1
        print(f"  {result['password']}  ({result['label']}, {result['entropy']} bits)")

    if args.copy:
        session.copy()
        if session.copied:
            print("  Copied to clipboard.")
        else:
            print("  Could not copy to clipboard.", file=sys.stderr)

    return 0


def _cmd_charsets(args: argparse.Namespace) -> int:
    for name, chars in CHARACTER_SETS.items():
        print(f"  {name:<10} {len(chars):>3}  {chars}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
