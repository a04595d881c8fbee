"""Pattern databases for email reply line classification."""

from quotestrip.patterns.base import Matcher
from quotestrip.patterns.forwards import is_forward_marker_line
from quotestrip.patterns.pattern_set import DEFAULT_PATTERNS, PatternSet
from quotestrip.patterns.quotes import (
    is_quote_banner_line,
    is_quote_header_line,
    is_quote_marker_line,
)
from quotestrip.patterns.signatures import is_footer_rule_line, is_signature_line

__all__ = [
    "DEFAULT_PATTERNS",
    "Matcher",
    "PatternSet",
    "is_footer_rule_line",
    "is_forward_marker_line",
    "is_quote_banner_line",
    "is_quote_header_line",
    "is_quote_marker_line",
    "is_signature_line",
]
