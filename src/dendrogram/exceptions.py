"""Exceptions raised by the dendrogram core.

The core never logs. It signals failures with these types and leaves the
handling to the caller: ingestion skips records that raise InvalidRecord,
while everything else propagates to the top of the run.
"""


class DendrogramError(Exception):
    """Base class for all dendrogram errors."""


class InvalidRecord(DendrogramError, ValueError):
    """A single organism record could not be parsed.

    Attributes:
        record: The offending line of text.
        reason: Short description of what is wrong with it.
    """

    def __init__(self, record: str, reason: str) -> None:
        self.record = record
        self.reason = reason
        super().__init__(f"'{record}' {reason}")


class EmptyInput(DendrogramError, ValueError):
    """Agglomeration was attempted over an empty collection of trees."""

    def __init__(self, message: str = "Empty list of organism trees") -> None:
        super().__init__(message)


class DuplicateName(DendrogramError, ValueError):
    """Two clusters in the working collection share a root name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Multiple organisms with same name '{name}'. Check input file for duplicates."
        )


class DuplicateScore(DendrogramError, ValueError):
    """Two clusters in the working collection share a root score."""

    def __init__(self, score: float) -> None:
        self.score = score
        super().__init__(
            f"Multiple organisms with same score {score:g}. Check input file for duplicates."
        )


class EmptyTree(DendrogramError):
    """An operation that needs a root was invoked on an empty tree."""

    def __init__(self, message: str = "Tree is empty") -> None:
        super().__init__(message)
