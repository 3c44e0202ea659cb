"""Infix-style helpers bound to a field name.

`F` gives the clause helpers a subject-first reading::

    F("id") == 12345                 # "id:12345"
    F("status").not_equals("gone")   # "-status:gone"
    F("price").equals(range_(1, 20)) # "price:[1 TO 20]"
"""

from __future__ import annotations

from ..types import Bounds, Value
from .clauses import not_, range_, where

__all__ = ("F",)


class F:
    """A field name with clause-building methods and operators.

    - ``==`` / `equals` build a where-clause.
    - ``!=`` / `not_equals` build a not-clause.
    - `in_range` builds a range condition from a ``(lower, upper)`` pair.

    Since ``==`` returns a clause string, `F` instances are not hashable.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def equals(self, value: Value) -> str:
        return where(self.name, value)

    def not_equals(self, value: Value) -> str:
        return not_(self.name, value)

    def in_range(self, boundaries: Bounds) -> str:
        """Return the ``[lower TO upper]`` condition for ``boundaries``.

        The field name is not part of the result; bind it with `equals`.
        """
        return range_(boundaries)

    def __eq__(self, value: Value) -> str:  # type: ignore[override]
        return self.equals(value)

    def __ne__(self, value: Value) -> str:  # type: ignore[override]
        return self.not_equals(value)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<F: {self.name}>"
