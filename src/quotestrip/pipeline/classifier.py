"""Line classification for email reply parsing.

Assigns each normalized line one kind:
- BLANK: empty or whitespace-only
- FORWARD: forwarded-message delimiter
- QUOTE: prefixed with a quoting glyph
- QUOTE_HEADER: attribution introducing a quoted block, possibly wrapped
  over several physical lines
- QUOTE_BANNER: delimiter introducing an unmarked prior message
- SIGNATURE: sign-off marker
- TEXT: anything else

Kinds are tried in that order, so a forwarded delimiter quoted with > is
still FORWARD and a Yahoo rule above a From: line is QUOTE_BANNER rather
than SIGNATURE.
"""

from dataclasses import dataclass
from typing import Literal

from quotestrip.patterns.pattern_set import DEFAULT_PATTERNS, PatternSet
from quotestrip.pipeline.normalizer import NormalizedEmail, match_key

LineKind = Literal["BLANK", "FORWARD", "QUOTE", "QUOTE_HEADER", "QUOTE_BANNER", "SIGNATURE", "TEXT"]

LINE_KINDS: tuple[LineKind, ...] = (
    "BLANK",
    "FORWARD",
    "QUOTE",
    "QUOTE_HEADER",
    "QUOTE_BANNER",
    "SIGNATURE",
    "TEXT",
)

# Physical lines a wrapped "On <date>, <name> wrote:" header may span
DEFAULT_MAX_HEADER_LINES = 3


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """A line with its classification.

    Attributes:
        text: Original line text.
        line_index: Zero-based position in the email.
        kind: Line category (one of LINE_KINDS).
        is_footer_rule: SIGNATURE line that closes its block on its own.
    """

    text: str
    line_index: int
    kind: LineKind
    is_footer_rule: bool = False


class LineClassifier:
    """Classifies the lines of a normalized email.

    Patterns are consulted on match keys (neologdn + NFKC) unless
    normalize_unicode is disabled; the classified lines keep the original
    text either way.
    """

    def __init__(
        self,
        patterns: PatternSet = DEFAULT_PATTERNS,
        *,
        normalize_unicode: bool = True,
        max_header_lines: int = DEFAULT_MAX_HEADER_LINES,
    ) -> None:
        """Initialize the classifier.

        Args:
            patterns: Recognizers to consult.
            normalize_unicode: If True, match patterns against neologdn/NFKC
                normalized keys instead of raw lines.
            max_header_lines: Maximum physical lines a quote header may span.

        Raises:
            ValueError: If max_header_lines is less than 1.
        """
        if max_header_lines < 1:
            raise ValueError(f"max_header_lines must be at least 1, got {max_header_lines}")

        self._patterns = patterns
        self._normalize_unicode = normalize_unicode
        self._max_header_lines = max_header_lines

    @property
    def patterns(self) -> PatternSet:
        """The pattern set this classifier consults."""
        return self._patterns

    def classify(self, normalized: NormalizedEmail) -> tuple[ClassifiedLine, ...]:
        """Classify every line of a normalized email.

        Args:
            normalized: Output from the Normalizer component.

        Returns:
            One ClassifiedLine per input line, in top-to-bottom order.
        """
        lines = normalized.lines
        keys = tuple(self._key(line) for line in lines)
        header_indices = self._find_quote_headers(keys)

        classified: list[ClassifiedLine] = []
        for index, text in enumerate(lines):
            following = keys[index + 1] if index + 1 < len(keys) else None
            kind = self._classify_key(keys[index], following, index in header_indices)
            classified.append(
                ClassifiedLine(
                    text=text,
                    line_index=index,
                    kind=kind,
                    is_footer_rule=kind == "SIGNATURE" and self._patterns.is_footer_rule(keys[index]),
                )
            )

        return tuple(classified)

    def classify_line(self, line: str, following: str | None = None) -> LineKind:
        """Classify a single line without multi-line header stitching.

        Args:
            line: A single line of text.
            following: The next line, if any.

        Returns:
            The line's kind.
        """
        key = self._key(line)
        following_key = self._key(following) if following is not None else None
        return self._classify_key(key, following_key, self._patterns.is_quote_header(key))

    def _key(self, line: str) -> str:
        if self._normalize_unicode:
            return match_key(line)
        return line if line.strip() else ""

    def _classify_key(self, key: str, following: str | None, is_header: bool) -> LineKind:
        if not key:
            return "BLANK"

        patterns = self._patterns
        if patterns.is_forward_marker(key):
            return "FORWARD"
        if patterns.is_quote_marker(key):
            return "QUOTE"
        if is_header:
            return "QUOTE_HEADER"
        if patterns.is_quote_banner(key, following):
            return "QUOTE_BANNER"
        if patterns.is_signature(key):
            return "SIGNATURE"
        return "TEXT"

    def _find_quote_headers(self, keys: tuple[str, ...]) -> set[int]:
        """Find the indices of all lines that belong to a quote header.

        A header on one line is taken as is. A line ending in "wrote:" that
        is not a header by itself is joined to its non-blank predecessors,
        shortest span first, until the joined text matches or the span limit
        is reached. Quoted lines never take part in stitching.

        Args:
            keys: Match keys for every line.

        Returns:
            Set of line indices classified as quote header.
        """
        patterns = self._patterns
        header_indices: set[int] = set()

        for index, key in enumerate(keys):
            if not key or patterns.is_quote_marker(key):
                continue

            if patterns.is_quote_header(key):
                header_indices.add(index)
                continue

            if not patterns.ends_quote_header(key):
                continue

            for span in range(2, self._max_header_lines + 1):
                start = index - span + 1
                if start < 0:
                    break
                head = keys[start]
                if not head or patterns.is_quote_marker(head):
                    break
                joined = " ".join(part.strip() for part in keys[start : index + 1])
                if patterns.is_quote_header(joined):
                    header_indices.update(range(start, index + 1))
                    break

        return header_indices
