"""Exceptions for quotestrip reply parsing."""

from dataclasses import dataclass


class QuoteStripError(Exception):
    """Base exception for all quotestrip errors."""

    pass


@dataclass
class InvalidInputError(QuoteStripError):
    """Input is not valid for parsing.

    Raised when:
    - Input is not a string (bytes must be decoded by the caller)

    Every string, including the empty string, is valid input.
    """

    message: str

    def __str__(self) -> str:
        return self.message
