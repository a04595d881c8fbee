"""Email signature pattern detection.

Patterns for detecting:
- Sign-off delimiters (--, __)
- Name-prefixed dashes (-Name)
- Mobile client sign-offs (Sent from my iPhone)
- Mailing-list footer rules
"""

import re

from quotestrip.patterns.base import Matcher, any_match

SIGNATURE_MARKERS: tuple[Matcher, ...] = (
    # "-- " is the RFC 3676 delimiter; longer dash runs are used the same way
    Matcher("dash_delimiter", re.compile(r"^\s*--")),
    Matcher("underscore_delimiter", re.compile(r"^\s*__")),
    Matcher("dash_name", re.compile(r"^-\w")),
    # Anchored at both ends so "Sent from my desk, ..." stays body text
    Matcher("sent_from_device", re.compile(r"^\s*Sent from my(?:\s+\w+){1,3}\s*$")),
)

# Footer rules close a signature block even when the reply sits directly above
FOOTER_RULES: tuple[Matcher, ...] = (
    Matcher("underscore_rule", re.compile(r"^\s*_{7,}\s*$")),
)


def is_signature_line(line: str) -> bool:
    """Check if a line matches a sign-off marker.

    Args:
        line: A single normalized line of text.

    Returns:
        True if the line matches a signature pattern.
    """
    if not line.strip():
        return False

    return any_match(SIGNATURE_MARKERS, line)


def is_footer_rule_line(line: str) -> bool:
    """Check if a line is a mailing-list footer rule."""
    return any_match(FOOTER_RULES, line)
