"""Fragment Builder: splits classified lines into fragments.

Lines are scanned bottom-to-top. Quote blocks and signature blocks grow
upward from the bottom of a message, so walking in reverse lets each line be
judged against the block below it:

- A quote header folds into the quoted block it labels.
- A quote banner claims the plain block below it; a forwarded delimiter
  claims the plain or quoted block below it.
- A plain block is closed as a signature at the first paragraph break above
  a sign-off marker. Blank lines, the start of the text and the first line
  of a different block all count as paragraph breaks.

The buffer for each block collects lines in reverse; it is reversed once when
the block is finalized, and the fragment list is reversed once at the end.
"""

import logging
from dataclasses import dataclass, field

from quotestrip.message import Fragment
from quotestrip.pipeline.classifier import ClassifiedLine

logger = logging.getLogger(__name__)

_QUOTE_KINDS = frozenset({"QUOTE", "QUOTE_HEADER", "QUOTE_BANNER"})


@dataclass(slots=True)
class _FragmentBuffer:
    """An open fragment during the reverse scan.

    Attributes:
        lines: Lines collected so far, bottom line first.
        quoted: Buffer holds a quoted block.
        forwarded: Buffer holds a forwarded block.
        paragraph: Lines added since the most recent blank line, bottom first.
    """

    lines: list[ClassifiedLine] = field(default_factory=list)
    quoted: bool = False
    forwarded: bool = False
    paragraph: list[ClassifiedLine] = field(default_factory=list)

    @property
    def is_plain(self) -> bool:
        return not (self.quoted or self.forwarded)

    @property
    def top(self) -> ClassifiedLine:
        return self.lines[-1]

    def add(self, line: ClassifiedLine) -> None:
        self.lines.append(line)
        if line.kind == "BLANK":
            self.paragraph = []
        else:
            self.paragraph.append(line)

    def closes_as_signature(self, line: ClassifiedLine | None) -> bool:
        """Whether the buffer ends as a signature with this line above it.

        Args:
            line: The next line upward, or None at the start of the text.
        """
        if not self.is_plain:
            return False

        if line is None or line.kind == "BLANK":
            return any(member.kind == "SIGNATURE" for member in self.paragraph)

        return self.top.is_footer_rule

    def finish(self, *, signature: bool = False) -> Fragment:
        return Fragment(
            lines=tuple(line.text for line in reversed(self.lines)),
            quoted=self.quoted,
            signature=signature,
            forwarded=self.forwarded,
        )


class FragmentBuilder:
    """Builds the ordered fragment list for one email.

    The builder is stateless between calls; scan state lives in a
    per-call _Scan object.
    """

    def build(self, lines: tuple[ClassifiedLine, ...]) -> tuple[Fragment, ...]:
        """Split classified lines into finalized fragments.

        Args:
            lines: Output from the LineClassifier, top-to-bottom.

        Returns:
            Fragments in top-to-bottom order. Empty for empty input.
        """
        scan = _Scan()

        for line in reversed(lines):
            scan.scan_line(line)

        fragments = scan.finish()
        logger.debug("Built %d fragments from %d lines", len(fragments), len(lines))
        return fragments


class _Scan:
    """State of a single bottom-to-top scan."""

    def __init__(self) -> None:
        self._buffer: _FragmentBuffer | None = None
        self._fragments: list[Fragment] = []

    def scan_line(self, line: ClassifiedLine) -> None:
        buffer = self._buffer

        if buffer is not None and buffer.closes_as_signature(line):
            self._finish_buffer(signature=True)
            buffer = None

        if buffer is None:
            self._open(line)
            return

        kind = line.kind

        if kind == "BLANK":
            buffer.add(line)

        elif kind == "QUOTE" or kind == "QUOTE_HEADER":
            if buffer.quoted:
                buffer.add(line)
            else:
                self._split(line)

        elif kind == "QUOTE_BANNER":
            if buffer.quoted:
                buffer.add(line)
            elif buffer.is_plain:
                # The unmarked message below the banner is the quoted part
                buffer.quoted = True
                buffer.add(line)
            else:
                self._split(line)

        elif kind == "FORWARD":
            if not buffer.forwarded:
                # The marker heads the message below it, quoted or not
                buffer.quoted = False
                buffer.forwarded = True
                buffer.add(line)
            else:
                self._split(line)

        else:
            # SIGNATURE and TEXT
            if buffer.is_plain:
                buffer.add(line)
            else:
                self._split(line)

    def finish(self) -> tuple[Fragment, ...]:
        """Close the open buffer and return fragments top-to-bottom."""
        if self._buffer is not None:
            # The start of the text counts as a paragraph break
            self._finish_buffer(signature=self._buffer.closes_as_signature(None))

        self._fragments.reverse()
        return tuple(self._fragments)

    def _split(self, line: ClassifiedLine) -> None:
        """Close the open buffer at a block boundary and open one for the line.

        The boundary line counts as a paragraph break, so a sign-off directly
        below a quote still closes as a signature.
        """
        if self._buffer is not None:
            self._finish_buffer(signature=self._buffer.closes_as_signature(None))
        self._open(line)

    def _open(self, line: ClassifiedLine) -> None:
        buffer = _FragmentBuffer(
            quoted=line.kind in _QUOTE_KINDS,
            forwarded=line.kind == "FORWARD",
        )
        buffer.add(line)
        self._buffer = buffer

    def _finish_buffer(self, *, signature: bool = False) -> None:
        if self._buffer is None:
            return

        self._fragments.append(self._buffer.finish(signature=signature))
        self._buffer = None
