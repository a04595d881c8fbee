"""The frozen collection of recognizers consulted by the line classifier."""

import re
from dataclasses import dataclass, fields, replace

from quotestrip.patterns.base import Matcher, any_match
from quotestrip.patterns.forwards import FORWARD_MARKERS
from quotestrip.patterns.quotes import (
    HEADER_TAIL_PATTERN,
    QUOTE_BANNERS,
    QUOTE_HEADERS,
    QUOTE_MARKERS,
)
from quotestrip.patterns.signatures import FOOTER_RULES, SIGNATURE_MARKERS


@dataclass(frozen=True, slots=True)
class PatternSet:
    """Ordered recognizers for every line category.

    Built once and shared; a PatternSet is never mutated. Use extend() to
    derive a set with additional matchers.

    Attributes:
        quote_markers: Lines belonging to a >-quoted block.
        quote_headers: Attribution lines folded into the quoted block below.
        quote_banners: Delimiters opening an unmarked prior message.
        signatures: Sign-off markers.
        footer_rules: Signature lines that close a block without a blank line.
        forward_markers: Forwarded-message delimiters.
        header_tail: Pattern for the last line of a wrapped quote header.
    """

    quote_markers: tuple[Matcher, ...]
    quote_headers: tuple[Matcher, ...]
    quote_banners: tuple[Matcher, ...]
    signatures: tuple[Matcher, ...]
    footer_rules: tuple[Matcher, ...]
    forward_markers: tuple[Matcher, ...]
    header_tail: re.Pattern[str]

    def extend(self, **extra: tuple[Matcher, ...]) -> "PatternSet":
        """Return a copy with matchers appended to the named categories.

        Example:
            patterns = DEFAULT_PATTERNS.extend(
                quote_headers=(Matcher("le_a_ecrit", re.compile(r"^Le .+ a écrit :$")),),
            )

        Raises:
            ValueError: If a keyword does not name a matcher category.
        """
        categories = {field.name for field in fields(self) if field.name != "header_tail"}
        unknown = set(extra) - categories
        if unknown:
            raise ValueError(f"Unknown pattern categories: {', '.join(sorted(unknown))}")

        changes = {name: getattr(self, name) + tuple(matchers) for name, matchers in extra.items()}
        return replace(self, **changes)

    def is_quote_marker(self, line: str) -> bool:
        return any_match(self.quote_markers, line)

    def is_quote_header(self, line: str) -> bool:
        return any_match(self.quote_headers, line)

    def is_quote_banner(self, line: str, following: str | None) -> bool:
        return any_match(self.quote_banners, line, following)

    def is_signature(self, line: str) -> bool:
        return any_match(self.signatures, line)

    def is_footer_rule(self, line: str) -> bool:
        return any_match(self.footer_rules, line)

    def is_forward_marker(self, line: str) -> bool:
        return any_match(self.forward_markers, line)

    def ends_quote_header(self, line: str) -> bool:
        """Whether a line can be the last line of a wrapped quote header."""
        return self.header_tail.search(line) is not None


DEFAULT_PATTERNS = PatternSet(
    quote_markers=QUOTE_MARKERS,
    quote_headers=QUOTE_HEADERS,
    quote_banners=QUOTE_BANNERS,
    signatures=SIGNATURE_MARKERS,
    footer_rules=FOOTER_RULES,
    forward_markers=FORWARD_MARKERS,
    header_tail=HEADER_TAIL_PATTERN,
)
