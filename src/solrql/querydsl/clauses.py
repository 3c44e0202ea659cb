"""Clause and condition helpers.

Each helper formats one fragment of the Solr standard query syntax. They are
pure string functions: values are stringified with ``str()`` and nothing is
validated, so whatever Solr would reject is rejected by Solr at request time.

Typical usage:

- Clauses: ``where("id", 12345)`` -> ``id:12345``
- Conditions: ``where("type", or_("book", "dvd"))`` -> ``type:(book OR dvd)``
- Ranges: ``where("price", range_(1, 20))`` -> ``price:[1 TO 20]``
- Faceting: ``tag("t", where("type", "book"))`` and ``ex("t", "type")``
"""

from collections.abc import Iterable

from ..types import Bounds, Value

__all__ = (
    "where",
    "not_",
    "and_",
    "or_",
    "range_",
    "tag",
    "ex",
    "quote",
)

_MISSING = object()


def _join(keyword: str, values: Iterable[Value]) -> str:
    return "(" + f" {keyword} ".join(str(v) for v in values) + ")"


# -------------------
# Clauses
# -------------------
def where(field: str, value: Value) -> str:
    """Create a where-clause in the form ``field:value``."""
    return f"{field}:{value}"


def not_(field: str, value: Value) -> str:
    """Create a not-clause in the form ``-field:value``."""
    return f"-{where(field, value)}"


# -------------------
# Conditions
# -------------------
def and_(*values: Value) -> str:
    """Join ``values`` with AND inside parentheses, ready for use in `where` and `not_`."""
    return _join("AND", values)


def or_(*values: Value) -> str:
    """Join ``values`` with OR inside parentheses, ready for use in `where` and `not_`.

    A single non-string iterable is joined item by item, so both
    ``or_(15, 20, 25)`` and ``or_([15, 20, 25])`` give ``(15 OR 20 OR 25)``.
    """
    if len(values) == 1 and not isinstance(values[0], (str, bytes)) and isinstance(values[0], Iterable):
        values = tuple(values[0])
    return _join("OR", values)


def range_(lower: Value, upper: Value = _MISSING) -> str:
    """Create a ``[lower TO upper]`` range condition.

    Accepts either both bounds or a single ``(lower, upper)`` pair. Bound order
    is not checked.
    """
    if upper is _MISSING:
        bounds: Bounds = lower
        lower, upper = bounds
    return f"[{lower} TO {upper}]"


# -------------------
# Local params
# -------------------
def tag(name: str, fq: str) -> str:
    """Tag a filter query so a facet can exclude it with `ex`."""
    return f"{{!tag={name}}}{fq}"


def ex(name: str, field: str) -> str:
    """Reference a facet field that excludes the filters tagged ``name``."""
    return f"{{!ex={name}}}{field}"


def quote(value: Value) -> str:
    """Wrap the string form of ``value`` in double quotes.

    Safe for primitives, strings and enums; other objects quote whatever their
    ``__str__`` returns.
    """
    return f'"{value}"'
