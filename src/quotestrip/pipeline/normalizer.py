"""Text normalization for email bodies.

Handles:
- Line ending normalization
- Line splitting
- Match keys (neologdn + NFKC) for pattern recognition

The normalized lines are what fragments keep, so rendering stays lossless.
Match keys are only used to decide which pattern a line satisfies.
"""

import unicodedata
from dataclasses import dataclass

import neologdn


@dataclass(frozen=True, slots=True)
class NormalizedEmail:
    """Result of normalizing an email body.

    Attributes:
        lines: Normalized lines (without line endings). Empty for empty input.
        text: Full normalized text with newlines.
    """

    lines: tuple[str, ...]
    text: str


class Normalizer:
    """Normalizes email body text for downstream processing.

    Converts CRLF and bare CR line endings to LF and splits the body into
    lines. Nothing else about the text is changed.
    """

    def normalize(self, text: str) -> NormalizedEmail:
        """Normalize email text.

        Args:
            text: Plain-text email body, any line-terminator convention.

        Returns:
            NormalizedEmail with normalized lines and text.
        """
        # Normalize line endings: CRLF and CR to LF
        text = text.replace("\r\n", "\n").replace("\r", "\n")

        # An empty body has no lines at all, not a single empty line
        lines = tuple(text.split("\n")) if text else ()

        return NormalizedEmail(lines=lines, text=text)


def match_key(line: str) -> str:
    """Build the key a line's patterns are matched against.

    Uses neologdn followed by NFKC normalization, so full-width glyphs
    (＞, Ｏｎ) and dash variants match the ASCII patterns. Leading
    indentation is kept as is.

    Args:
        line: A single line of text.

    Returns:
        Normalized line. Blank lines map to the empty string.
    """
    if not line.strip():
        return ""

    # neologdn strips leading spaces; "-Name" only counts at column zero
    body = line.lstrip()
    indent = line[: len(line) - len(body)]

    # neologdn first (width folding, dash variants, space squeezing)
    key = neologdn.normalize(body)

    # NFKC for remaining Unicode normalization
    return indent + unicodedata.normalize("NFKC", key)
