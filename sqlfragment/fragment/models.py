from __future__ import annotations

import copy
import re
import threading
from typing import Any, Sequence

from sqlfragment.errors import check_invariant

DEFAULT_PLACEHOLDER_PREFIX = "$"

_WHITESPACE_ONLY = re.compile(r"\s*")

# ==================================================
# Fragment
# ==================================================


class Fragment:
    """
    A piece of SQL made of literal text segments and bound values.

    ``segments[i]`` is the text in front of ``values[i]`` and the last segment is
    the trailing text, so there is always exactly one more segment than values.
    Bound values never end up inside the text; rendering replaces each one with a
    positional placeholder (``$1``, ``$2``, ...).

    Nested fragments passed as values are flattened, so::

        Fragment(["SELECT name FROM person WHERE ", ""], [Fragment(["id = ", ""], [7])])

    is the same as ``Fragment(["SELECT name FROM person WHERE id = ", ""], [7])``.

    ``append`` and ``append_value`` mutate the fragment and return it for chaining.
    A fragment is not safe for concurrent mutation from several threads; reads
    (rendering, cloning, merging into another fragment) always see a consistent
    snapshot of both sequences.
    """

    def __init__(
        self,
        segments: Sequence[str | None] | str | None = None,
        values: Sequence[Any] | None = None,
    ) -> None:
        if segments is None:
            segments = [""]
        elif isinstance(segments, str):
            segments = [segments]
        if values is None:
            values = []

        self._lock = threading.RLock()
        self._segments: list[str] = [_segment_at(segments, 0)]
        self._values: list[Any] = []

        for index, value in enumerate(values):
            following = _segment_at(segments, index + 1)
            if isinstance(value, Fragment):
                self._merge(value)
                self._segments[-1] += following
                continue
            self._values.append(value)
            self._segments.append(following)

    # --------------------------------------------------
    # Accessors
    # --------------------------------------------------

    @property
    def segments(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._segments)

    @property
    def values(self) -> tuple[Any, ...]:
        with self._lock:
            return tuple(self._values)

    @property
    def text(self) -> str:
        """
        The SQL text with ``$n`` placeholders in place of the bound values.
        """
        return self.render()

    def _snapshot(self) -> tuple[tuple[str, ...], tuple[Any, ...]]:
        with self._lock:
            return tuple(self._segments), tuple(self._values)

    def _checked_snapshot(self, operation: str) -> tuple[tuple[str, ...], tuple[Any, ...]]:
        segments, values = self._snapshot()
        check_invariant(len(segments), len(values), operation=operation)
        return segments, values

    # --------------------------------------------------
    # Composition
    # --------------------------------------------------

    def _merge(self, other: Fragment) -> None:
        # Snapshot first so merging a fragment into itself stays well defined.
        segments, values = other._checked_snapshot("merge")
        with self._lock:
            self._segments[-1] += segments[0]
            for value, segment in zip(values, segments[1:]):
                self._values.append(value)
                self._segments.append(segment)

    def append(self, part: Fragment | str) -> Fragment:
        """
        Appends a fragment (merged) or literal SQL text to the end of this fragment.

        Text is added verbatim, so only pass strings that come from a trusted set
        (keywords, separators, known column names). Use ``append_value`` for data.
        """
        if isinstance(part, Fragment):
            self._merge(part)
            return self
        if not isinstance(part, str):
            raise TypeError(
                f"append() expects a Fragment or str, got {type(part).__name__}; "
                "use append_value() to bind a value."
            )
        with self._lock:
            self._segments[-1] += part
        return self

    def append_value(self, value: Any) -> Fragment:
        """
        Appends a fragment (merged) or binds any other value at the end of this fragment.
        """
        if isinstance(value, Fragment):
            self._merge(value)
            return self
        with self._lock:
            self._values.append(value)
            self._segments.append("")
        return self

    def clone(self) -> Fragment:
        """
        Returns an independent copy. The bound values themselves are shared, not copied.
        """
        segments, values = self._checked_snapshot("clone")
        return type(self)(segments, values)

    __copy__ = clone

    def __deepcopy__(self, memo: dict[int, Any]) -> Fragment:
        segments, values = self._checked_snapshot("clone")
        return type(self)(segments, copy.deepcopy(values, memo))

    # The lock is per instance and is not carried across pickling.
    def __getstate__(self) -> dict[str, list[Any]]:
        segments, values = self._checked_snapshot("pickle")
        return {"segments": list(segments), "values": list(values)}

    def __setstate__(self, state: dict[str, list[Any]]) -> None:
        self._lock = threading.RLock()
        self._segments = list(state["segments"])
        self._values = list(state["values"])

    # --------------------------------------------------
    # Rendering
    # --------------------------------------------------

    def render(self, prefix: str = DEFAULT_PLACEHOLDER_PREFIX) -> str:
        """
        Renders the text, numbering placeholders from 1 with the given prefix.
        """
        segments, _ = self._checked_snapshot("render")
        parts = [segments[0]]
        for index, segment in enumerate(segments[1:], start=1):
            parts.append(f"{prefix}{index}")
            parts.append(segment)
        return "".join(parts)

    def to_pretty_string(self, prefix: str = DEFAULT_PLACEHOLDER_PREFIX) -> str:
        """
        Renders the text with surrounding blank lines and shared indentation removed.
        """
        lines = self.render(prefix).replace("\r\n", "\n").split("\n")

        padding = min(
            (len(line) - len(line.lstrip(" ")) for line in lines if line.lstrip(" ")),
            default=0,
        )
        content = [index for index, line in enumerate(lines) if line.strip()]
        if not content:
            return ""

        return "\n".join(line[padding:] for line in lines[content[0]:content[-1] + 1])

    # --------------------------------------------------
    # Splitting
    # --------------------------------------------------

    def split(self, separator: str | re.Pattern[str]) -> list[Fragment]:
        """
        Splits on every occurrence of ``separator`` in the literal text.

        Bound values are never searched, so a separator can not match across or
        inside a value. Each resulting fragment numbers its placeholders from 1.
        """
        pattern = _compile_separator(separator)
        segments, values = self._checked_snapshot("split")

        current = Fragment()
        pieces = [current]
        for index, segment in enumerate(segments):
            start = 0
            for match in pattern.finditer(segment):
                if match.end() == match.start():
                    continue
                current.append(segment[start:match.start()])
                current = Fragment()
                pieces.append(current)
                start = match.end()

            current.append(segment[start:])
            if index < len(values):
                current.append_value(values[index])

        return pieces

    # --------------------------------------------------
    # Predicates
    # --------------------------------------------------

    def is_empty(self) -> bool:
        """
        True for a fragment with no text at all and no bound values.
        """
        segments, values = self._snapshot()
        return not values and len(segments) == 1 and segments[0] == ""

    def is_whitespace_only(self) -> bool:
        """
        True for a fragment holding only whitespace and no bound values.

        A bound value always renders as a placeholder, so ``Fragment(["", ""], [""])``
        is not whitespace-only.
        """
        segments, values = self._snapshot()
        if values or len(segments) != 1:
            return False
        return _WHITESPACE_ONLY.fullmatch(segments[0]) is not None

    # --------------------------------------------------
    # Dunder helpers
    # --------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fragment):
            return NotImplemented
        return self._snapshot() == other._snapshot()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        segments, values = self._snapshot()
        return f"{self.__class__.__name__}(segments={list(segments)!r}, values={list(values)!r})"


def _segment_at(segments: Sequence[str | None], index: int) -> str:
    # Missing trailing text counts as an empty segment.
    if index >= len(segments) or segments[index] is None:
        return ""
    return segments[index]


def _compile_separator(separator: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(separator, re.Pattern):
        return separator
    if separator == "":
        raise ValueError("split() separator must not be empty.")
    return re.compile(re.escape(separator))
