#!/usr/bin/env python
"""Inspect how an email body is split into fragments.

Usage:
    python scripts/inspect_email.py reply.txt                 # Fragment table and visible text
    python scripts/inspect_email.py reply.txt --lines         # Also show line kinds
    cat reply.txt | python scripts/inspect_email.py -         # Read from stdin
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from quotestrip import Email, EmailParser, LineClassifier, Normalizer


def read_email(source: str) -> str:
    """Read an email body from a file path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def print_line_table(text: str, max_header_lines: int) -> None:
    """Print the kind of every line."""
    classifier = LineClassifier(max_header_lines=max_header_lines)
    classified = classifier.classify(Normalizer().normalize(text))

    print("LINES:")
    print(f"  {'#':>4}  {'Kind':<13}  Text")
    print(f"  {'-'*4}  {'-'*13}  {'-'*60}")
    for line in classified:
        kind = line.kind + ("*" if line.is_footer_rule else "")
        preview = line.text[:60] + "..." if len(line.text) > 60 else line.text
        print(f"  {line.line_index:>4}  {kind:<13}  {preview}")
    print()


def print_fragment_table(email: Email) -> None:
    """Print one row per fragment with its flags."""
    print("FRAGMENTS:")
    print(f"  {'#':>3}  {'Q':>1} {'S':>1} {'F':>1} {'H':>1}  {'Lines':>5}  First line")
    print(f"  {'-'*3}  {'-'*7}  {'-'*5}  {'-'*55}")
    for index, fragment in enumerate(email):
        flags = " ".join(
            "x" if flag else "."
            for flag in (fragment.quoted, fragment.signature, fragment.forwarded, fragment.hidden)
        )
        first = next((line for line in fragment.lines if line.strip()), "(blank)")
        preview = first[:55] + "..." if len(first) > 55 else first
        print(f"  {index:>3}  {flags}  {len(fragment.lines):>5}  {preview}")
    print()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("source", help="Path to a plain-text email body, or - for stdin")
    parser.add_argument("--lines", action="store_true", help="Show the kind of every line")
    parser.add_argument("--max-header-lines", type=int, default=3, help="Lines a quote header may span")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        text = read_email(args.source)
    except OSError as e:
        print(f"Error: cannot read {args.source}: {e}")
        sys.exit(1)

    if args.lines:
        print_line_table(text, args.max_header_lines)

    email = EmailParser(max_header_lines=args.max_header_lines).parse(text)
    print_fragment_table(email)

    print("VISIBLE TEXT:")
    print("=" * 80)
    print(email.visible_text)
    print("=" * 80)


if __name__ == "__main__":
    main()
