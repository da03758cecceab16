from __future__ import annotations

from typing import Any, Iterable

from sqlfragment.fragment.models import Fragment

# ==================================================
# Coercion Entry Point
# ==================================================


def sql(*args: Any) -> Fragment:
    """
    Builds a Fragment from whatever shape the caller has at hand.

    - ``sql()`` returns an empty fragment.
    - ``sql(fragment)`` returns ``fragment`` itself.
    - ``sql(t"... {value} ...")`` takes the strings and values of a template.
    - ``sql(["a = ", " AND b = ", ""], 1, 2)`` pairs the strings with the values.
    - ``sql("a = ", 1, " AND b = ", 2)`` is the alternating form, see ``build``.
    """
    if not args:
        return Fragment()

    first = args[0]
    if len(args) == 1 and isinstance(first, Fragment):
        return first
    if len(args) == 1 and _is_template(first):
        return Fragment(list(first.strings), list(first.values))
    if isinstance(first, (list, tuple)):
        return Fragment(first, args[1:])
    return build(*args)


def _is_template(value: Any) -> bool:
    # string.templatelib.Template (t-strings) exposes both attributes.
    return hasattr(value, "strings") and hasattr(value, "interpolations")


def is_fragment(value: Any) -> bool:
    return isinstance(value, Fragment)


# ==================================================
# Builders
# ==================================================


def build(*strs_and_vals: Any) -> Fragment:
    """
    Builds a fragment from text, value, text, value, ... starting with text.

    ``build("SELECT name FROM person WHERE id = ", person_id)`` is equivalent to
    ``Fragment(["SELECT name FROM person WHERE id = ", ""], [person_id])``.
    """
    # Falsy text slots (None, 0, False) count as empty text.
    segments: list[str] = [(strs_and_vals[0] or "") if strs_and_vals else ""]
    values: list[Any] = []

    for index in range(1, len(strs_and_vals), 2):
        values.append(strs_and_vals[index])
        segments.append((strs_and_vals[index + 1] or "") if index + 1 < len(strs_and_vals) else "")

    return Fragment(segments, values)


def join(items: Iterable[Any], separator: Fragment | str = ",") -> Fragment:
    """
    Joins fragments and values with a literal separator.

    Fragments are merged; everything else is bound, so
    ``join([31, 45, 22])`` renders as ``$1,$2,$3``.
    """
    joined = Fragment()
    for index, item in enumerate(items):
        if index > 0:
            joined.append(separator)
        joined.append_value(item)
    return joined


def join_queries(items: Iterable[Fragment | str], separator: Fragment | str = ",") -> Fragment:
    """
    Joins fragments and literal SQL strings with a literal separator.

    Nothing is bound implicitly; strings are added as SQL text.
    """
    joined = Fragment()
    for index, item in enumerate(items):
        if index > 0:
            joined.append(separator)
        joined.append(item)
    return joined


def identifier(*names: str) -> Fragment:
    """
    Returns a fragment quoting each name as a SQL identifier, delimited by dots.

    ``identifier("Person", "Birthday")`` renders as ``"Person"."Birthday"``.
    Embedded double quotes are escaped by doubling them.
    """
    if not names:
        raise ValueError("identifier() requires at least one name.")
    quoted = ['"' + name.replace('"', '""') + '"' for name in names]
    return Fragment(".".join(quoted))
