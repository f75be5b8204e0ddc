"""
Exception hierarchy for posbraid.

Usage errors are the only failures a user is expected to see; everything
deriving from InvariantViolation signals a defect in the predicates or the
search driver and is meant to abort the run.
"""


class PosbraidError(Exception):
    """Base class for all posbraid errors."""


class UsageError(PosbraidError):
    """Malformed or missing command-line input."""


class InvariantViolation(PosbraidError, AssertionError):
    """An internal contract of the search or the extractor did not hold."""


class DTCodeError(InvariantViolation):
    """The closure walk of a braid word did not trace exactly one knot."""

    def __init__(self, word, passes: int, expected: int):
        self.word = tuple(word)
        self.passes = passes
        self.expected = expected
        super().__init__(
            f"closure of {list(self.word)} took {passes} passes, "
            f"expected {expected}"
        )
