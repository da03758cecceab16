from __future__ import annotations

from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)


# ==================================================
# Fragment Errors
# ==================================================


@dataclass(slots=True)
class InvariantDetails:
    """
    Structured metadata for a broken segment/value invariant.
    """

    operation: str
    segment_count: int
    value_count: int


class FragmentError(Exception):
    """
    Base error type for the sqlfragment package.
    """


class FragmentInvariantError(FragmentError):
    """
    Raised when a fragment no longer holds exactly one more segment than values.

    This is a programming error; no recovery is attempted.
    """

    def __init__(self, details: InvariantDetails) -> None:
        self.details = details
        super().__init__(
            f"[{details.operation}] {self.__class__.__name__}: expected "
            f"{details.value_count + 1} segments for {details.value_count} values, "
            f"found {details.segment_count}"
        )


def check_invariant(segment_count: int, value_count: int, *, operation: str) -> None:
    """
    Raises FragmentInvariantError unless segment_count == value_count + 1.
    """
    if segment_count == value_count + 1:
        return
    logger.error(
        "Fragment invariant broken during %s: %d segments for %d values",
        operation,
        segment_count,
        value_count,
    )
    raise FragmentInvariantError(
        InvariantDetails(
            operation=operation,
            segment_count=segment_count,
            value_count=value_count,
        )
    )
