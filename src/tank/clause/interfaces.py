"""Clause interfaces.

This module defines the structural contract the fragment builders rely on, so
the builder capability can be attached to any clause type without a shared
class hierarchy.
"""

from typing import Protocol, Self, TypeVar

# Generic type variable for the context carried alongside the query text
C = TypeVar("C")
C_co = TypeVar("C_co", covariant=True)


class QueryAccumulator(Protocol[C_co]):
    """Protocol for anything holding an in-progress query and its context."""

    query: str

    @property
    def context(self) -> C_co:
        """Opaque value carried alongside the query text."""
        ...

    def append(self, fragment: str) -> Self:
        """Append a fragment to the accumulated query.

        Args:
            fragment: Text to concatenate onto the query

        Returns:
            The same accumulator, for chaining
        """
        ...
