"""Error kinds raised by the s2common codecs and identifier factories.

Every error is raised synchronously to the caller.  Nothing in this package
retries, downgrades or swallows a decode failure; a decode either fully
succeeds or raises one of these.
"""

from __future__ import annotations


class S2Error(Exception):
    """Base class for recoverable s2common errors."""


class BadFormatError(S2Error, ValueError):
    """Raised when text (or other structured input) is malformed.

    Examples: a language tag with more than three subtags, instant text
    without exactly one ``.`` separator, digest text with the wrong alphabet
    or length, an empty tenant name.
    """


class InvalidLengthError(BadFormatError):
    """Raised when a binary value does not have its required fixed size."""

    def __init__(self, what: str, expected: int, actual: int) -> None:
        super().__init__(
            f"{what} values are {expected} bytes but {actual} were passed."
        )
        self.expected = expected
        self.actual = actual


class CodingFault(RuntimeError):
    """Raised when the caller has made a programming error.

    Unlike ``S2Error`` this is not expected to be handled; it indicates the
    code calling into s2common is wrong.
    """
