"""Forwarded-message delimiter detection."""

import re

from quotestrip.patterns.base import Matcher, any_match

# Leading quote glyphs are tolerated: a forwarded block stays forwarded
# when a client quotes it.
FORWARD_MARKERS: tuple[Matcher, ...] = (
    Matcher(
        "forwarded_message",
        re.compile(r"^\s*(?:>\s*)*-{2,}\s*Forwarded message\s*-{2,}\s*$", re.IGNORECASE),
    ),
    # Apple Mail
    Matcher(
        "begin_forwarded",
        re.compile(r"^\s*(?:>\s*)*Begin forwarded message:\s*$", re.IGNORECASE),
    ),
)


def is_forward_marker_line(line: str) -> bool:
    """Check if a line is a forwarded-message delimiter.

    Args:
        line: A single normalized line of text.

    Returns:
        True if the line matches a forwarded-message pattern.
    """
    return any_match(FORWARD_MARKERS, line)
