"""Parsed email data model.

An Email is the ordered collection of Fragments produced by the parser,
top-to-bottom. Each Fragment is one contiguous block of the body sharing a
single classification.
"""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Fragment:
    """A contiguous, semantically homogeneous block of an email body.

    Attributes:
        lines: Raw lines of the block, in top-to-bottom order.
        quoted: Block is a quoted prior message (or the header introducing it).
        signature: Block is a sign-off block.
        forwarded: Block is a forwarded message.
        hidden: Block is noise excluded from the visible rendering.
    """

    lines: tuple[str, ...]
    quoted: bool = False
    signature: bool = False
    forwarded: bool = False
    hidden: bool = False

    @property
    def text(self) -> str:
        """Raw text of the block."""
        return "\n".join(self.lines)

    @property
    def content(self) -> str:
        """Text of the block without surrounding whitespace."""
        return self.text.strip()

    @property
    def is_blank(self) -> bool:
        """Whether the block has no non-blank line."""
        return not any(line.strip() for line in self.lines)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Email:
    """An email body split into fragments.

    Supports len(), iteration and indexing over its fragments.
    str(email) returns the visible text.

    Attributes:
        fragments: Fragments in top-to-bottom order.
    """

    fragments: tuple[Fragment, ...]

    def __len__(self) -> int:
        return len(self.fragments)

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self.fragments)

    def __getitem__(self, index: int) -> Fragment:
        return self.fragments[index]

    def __str__(self) -> str:
        return self.visible_text

    @property
    def text(self) -> str:
        """The full body, equal to the normalized input."""
        return "\n".join(fragment.text for fragment in self.fragments)

    @property
    def visible_text(self) -> str:
        """The reply-only text: fragments that are not hidden.

        Leading and trailing blank lines are removed; indentation of the
        remaining lines is kept.
        """
        return _render([fragment for fragment in self.fragments if not fragment.hidden])

    @property
    def quoted_text(self) -> str:
        """The collapsed history: hidden fragments only."""
        return _render([fragment for fragment in self.fragments if fragment.hidden])


def _render(fragments: list[Fragment]) -> str:
    """Join fragments and trim blank lines at both ends."""
    lines = [line for fragment in fragments for line in fragment.lines]

    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1

    end = len(lines)
    while end > start and not lines[end - 1].strip():
        end -= 1

    return "\n".join(lines[start:end])
