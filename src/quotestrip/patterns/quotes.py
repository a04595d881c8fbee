"""Quoted-message pattern detection.

Patterns for detecting:
- Quote markers (lines prefixed with >)
- Quote headers ("On <date>, <name> wrote:" and the Gmail date variant)
- Quote banners (delimiters that open an unmarked prior message)

Patterns match against normalized match keys (see pipeline.normalizer).
"""

import re

from quotestrip.patterns.base import Matcher, any_match

QUOTE_MARKERS: tuple[Matcher, ...] = (
    Matcher("angle_bracket", re.compile(r"^\s*>")),
)

# Attribution lines that label the quoted block below them
QUOTE_HEADERS: tuple[Matcher, ...] = (
    Matcher("on_date_wrote", re.compile(r"^\s*On\s.+wrote:\s*$", re.IGNORECASE)),
    # Gmail in some locales: "2013/2/23 Name <name@example.com>", no "wrote:"
    Matcher(
        "gmail_date_address",
        re.compile(r"^\s*\d{4}/\d{1,2}/\d{1,2}\s.*<[^<>\s]+@[^<>\s]+>:?\s*$"),
    ),
)

# Last physical line of an attribution that a client wrapped
HEADER_TAIL_PATTERN = re.compile(r"wrote:\s*$", re.IGNORECASE)

_FROM_LINE_PATTERN = re.compile(r"^\s*\*?From:\*?\s", re.IGNORECASE)

# Delimiters that introduce a prior message whose lines carry no > marker
QUOTE_BANNERS: tuple[Matcher, ...] = (
    # Yahoo (underscores) and Outlook (dashes) put a rule above the From: block
    Matcher("rule_then_from", re.compile(r"^\s*(?:_{7,}|-{7,})\s*$"), followed_by=_FROM_LINE_PATTERN),
    Matcher(
        "original_message",
        re.compile(r"^\s*-{3,}\s*Original Message\s*-{3,}\s*$", re.IGNORECASE),
    ),
)


def is_quote_marker_line(line: str) -> bool:
    """Check if a line starts with a quoting glyph.

    Args:
        line: A single normalized line of text.

    Returns:
        True if the line is part of a >-quoted block.
    """
    return any_match(QUOTE_MARKERS, line)


def is_quote_header_line(line: str) -> bool:
    """Check if a line is a single-line quote attribution.

    Args:
        line: A single normalized line of text.

    Returns:
        True if the line matches a quote header pattern.
    """
    if not line.strip():
        return False

    return any_match(QUOTE_HEADERS, line)


def is_quote_banner_line(line: str, following: str | None = None) -> bool:
    """Check if a line opens an unmarked quoted message.

    Args:
        line: A single normalized line of text.
        following: The next line, needed by banners that require a From: line.

    Returns:
        True if the line matches a quote banner pattern.
    """
    return any_match(QUOTE_BANNERS, line, following)
