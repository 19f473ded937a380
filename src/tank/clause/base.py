"""Clause accumulator."""

from typing import Generic, Self

from tank.clause.interfaces import C


class Clause(Generic[C]):
    """Mutable accumulator for query text plus an opaque context value.

    The query only ever grows: fragment builders concatenate onto it and hand
    back this same instance. Not safe for concurrent writers.
    """

    def __init__(self, context: C, query: str = "") -> None:
        self.query: str = query
        self._context: C = context

    @property
    def context(self) -> C:
        return self._context

    def append(self, fragment: str) -> Self:
        """Append a fragment to the query being built.

        Args:
            fragment: Text to concatenate onto the query

        Returns:
            Self for method chaining
        """
        self.query = self.query + fragment
        return self

    def __str__(self) -> str:
        return self.query

    def __repr__(self) -> str:
        return f"{type(self).__name__}(query={self.query!r}, context={self._context!r})"
