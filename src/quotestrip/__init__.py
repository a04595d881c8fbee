"""quotestrip - Strip quoted history, signatures and forwards from email replies."""

from quotestrip.exceptions import InvalidInputError, QuoteStripError
from quotestrip.message import Email, Fragment
from quotestrip.parser import EmailParser, parse, parse_reply
from quotestrip.patterns import DEFAULT_PATTERNS, Matcher, PatternSet
from quotestrip.pipeline import (
    LINE_KINDS,
    ClassifiedLine,
    FragmentBuilder,
    LineClassifier,
    LineKind,
    NormalizedEmail,
    Normalizer,
    VisibilityClassifier,
)

__version__ = "0.1.0"

__all__ = [
    "ClassifiedLine",
    "DEFAULT_PATTERNS",
    "Email",
    "EmailParser",
    "Fragment",
    "FragmentBuilder",
    "InvalidInputError",
    "LINE_KINDS",
    "LineClassifier",
    "LineKind",
    "Matcher",
    "NormalizedEmail",
    "Normalizer",
    "PatternSet",
    "QuoteStripError",
    "VisibilityClassifier",
    "parse",
    "parse_reply",
]
