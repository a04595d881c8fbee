"""EmailParser - Main public interface for reply parsing.

Provides two parsing methods:
- parse(): Full result as an Email of typed fragments
- parse_reply(): Visible reply text only

Module-level parse() and parse_reply() use a shared default parser.
"""

import logging

from quotestrip.exceptions import InvalidInputError
from quotestrip.message import Email
from quotestrip.patterns.pattern_set import DEFAULT_PATTERNS, PatternSet
from quotestrip.pipeline.builder import FragmentBuilder
from quotestrip.pipeline.classifier import DEFAULT_MAX_HEADER_LINES, LineClassifier
from quotestrip.pipeline.normalizer import Normalizer
from quotestrip.pipeline.visibility import VisibilityClassifier

logger = logging.getLogger(__name__)


class EmailParser:
    """Main class for splitting email replies into fragments.

    The parsing pipeline:
    1. Normalize line endings and split into lines
    2. Classify each line (quote, header, signature, forward, ...)
    3. Build fragments bottom-to-top
    4. Mark hidden fragments top-to-bottom

    A parser holds only immutable configuration and may be shared between
    threads.

    Example:
        parser = EmailParser()

        # Typed fragments
        email = parser.parse(body)
        for fragment in email:
            print(fragment.quoted, fragment.signature, fragment.hidden)

        # Reply text only
        reply = parser.parse_reply(body)
    """

    def __init__(
        self,
        patterns: PatternSet = DEFAULT_PATTERNS,
        *,
        normalize_unicode: bool = True,
        max_header_lines: int = DEFAULT_MAX_HEADER_LINES,
    ) -> None:
        """Initialize the parser.

        Args:
            patterns: Recognizers used to classify lines.
            normalize_unicode: If True, match patterns against neologdn/NFKC
                normalized lines so full-width variants are recognized.
            max_header_lines: Maximum physical lines a wrapped quote header
                may span.

        Raises:
            ValueError: If max_header_lines is less than 1.
        """
        # Pipeline components
        self._normalizer = Normalizer()
        self._classifier = LineClassifier(
            patterns,
            normalize_unicode=normalize_unicode,
            max_header_lines=max_header_lines,
        )
        self._builder = FragmentBuilder()
        self._visibility = VisibilityClassifier()

    @property
    def patterns(self) -> PatternSet:
        """The pattern set used to classify lines."""
        return self._classifier.patterns

    def parse(self, text: str) -> Email:
        """Split an email body into classified fragments.

        Args:
            text: Plain-text email body. Any string is accepted.

        Returns:
            Email with fragments in top-to-bottom order.

        Raises:
            InvalidInputError: If text is not a string.
        """
        if not isinstance(text, str):
            raise InvalidInputError(message=f"Expected str, got {type(text).__name__}")

        # Step 1: Normalize
        normalized = self._normalizer.normalize(text)

        # Step 2: Classify lines
        classified = self._classifier.classify(normalized)

        # Step 3: Build fragments
        fragments = self._builder.build(classified)

        # Step 4: Visibility
        fragments = self._visibility.classify(fragments)

        logger.debug(
            "Parsed %d lines into %d fragments (%d hidden)",
            len(normalized.lines),
            len(fragments),
            sum(1 for fragment in fragments if fragment.hidden),
        )

        return Email(fragments=fragments)

    def parse_reply(self, text: str) -> str:
        """Extract only the visible reply text.

        Args:
            text: Plain-text email body.

        Returns:
            Text of the non-hidden fragments, without leading or trailing
            blank lines.

        Raises:
            InvalidInputError: If text is not a string.
        """
        return self.parse(text).visible_text


_default_parser = EmailParser()


def parse(text: str) -> Email:
    """Parse an email body with the default parser."""
    return _default_parser.parse(text)


def parse_reply(text: str) -> str:
    """Return the visible reply text of an email body, using the default parser."""
    return _default_parser.parse_reply(text)
