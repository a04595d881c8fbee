"""Line matcher shared by all pattern categories."""

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Matcher:
    """A named line recognizer.

    Attributes:
        name: Short identifier, used in debugging output.
        pattern: Compiled pattern searched in the line.
        followed_by: Optional pattern the next physical line must match.
            Used for delimiters that only count when a header line follows.
    """

    name: str
    pattern: re.Pattern[str]
    followed_by: re.Pattern[str] | None = None

    def matches(self, line: str, following: str | None = None) -> bool:
        """Check whether the line (and its successor, if required) match.

        Args:
            line: A single line of text.
            following: The next line in top-to-bottom order, or None at the
                end of the text.

        Returns:
            True if the line is recognized.
        """
        if self.pattern.search(line) is None:
            return False

        if self.followed_by is None:
            return True

        return following is not None and self.followed_by.search(following) is not None


def any_match(matchers: tuple[Matcher, ...], line: str, following: str | None = None) -> bool:
    """Check a line against an ordered group of matchers."""
    return any(matcher.matches(line, following) for matcher in matchers)
