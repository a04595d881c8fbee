"""Pipeline components for email reply parsing."""

from quotestrip.pipeline.builder import FragmentBuilder
from quotestrip.pipeline.classifier import (
    DEFAULT_MAX_HEADER_LINES,
    LINE_KINDS,
    ClassifiedLine,
    LineClassifier,
    LineKind,
)
from quotestrip.pipeline.normalizer import NormalizedEmail, Normalizer, match_key
from quotestrip.pipeline.visibility import VisibilityClassifier, is_noise

__all__ = [
    "ClassifiedLine",
    "DEFAULT_MAX_HEADER_LINES",
    "FragmentBuilder",
    "LINE_KINDS",
    "LineClassifier",
    "LineKind",
    "NormalizedEmail",
    "Normalizer",
    "VisibilityClassifier",
    "is_noise",
    "match_key",
]
