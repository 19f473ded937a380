"""Node and relationship pattern fragments.

`GraphClause` is a mixin: combine it with any class satisfying
`QueryAccumulator` (usually `Clause`) to give that clause type the fragment
builders below. Every builder appends to the clause's query and returns the
same clause, so calls chain:

    clause.node("a", PERSON).relationship("r", KNOWS).node("b", PERSON)
    # (a:Person)-[r:KNOWS]->(b:Person)
"""

from collections.abc import Sequence
from typing import Any, TypeVar, overload

from structlog.typing import FilteringBoundLogger

from tank.clause.helpers import (
    PropertyBlock,
    ScopedPropertyBlock,
    evaluate_properties,
    evaluate_scoped_properties,
    join_labels,
    join_types,
)
from tank.clause.interfaces import QueryAccumulator
from tank.core.config import settings
from tank.core.logging import get_logger
from tank.domain.entities import Node, Relationship

logger: FilteringBoundLogger = get_logger(name=__name__)

A = TypeVar("A", bound=QueryAccumulator[Any])
N = TypeVar("N", bound=Node)
R = TypeVar("R", bound=Relationship)


def _split_alias(args: Sequence[Any], alias: str | None) -> tuple[str, tuple[Any, ...]]:
    """Separate a leading positional alias from the entities that follow it."""
    if args and isinstance(args[0], str):
        if alias is not None:
            raise TypeError("alias given both positionally and by keyword")
        return args[0], tuple(args[1:])
    return alias or "", tuple(args)


class GraphClause:
    """Mixin providing node and relationship fragment builders."""

    def _emit(self: A, fragment: str) -> A:
        if settings.log_fragments:
            logger.debug("Appending fragment", clause=type(self).__name__, fragment=fragment)
        return self.append(fragment)

    @overload
    def node(self: A, alias: str = "", *, properties: PropertyBlock | None = None) -> A: ...

    @overload
    def node(self: A, alias: str, /, *labels: N, properties: ScopedPropertyBlock[N] | None = None) -> A: ...

    @overload
    def node(self: A, *labels: N, alias: str | None = None, properties: ScopedPropertyBlock[N] | None = None) -> A: ...

    def node(self, *args: Any, alias: str | None = None, properties: Any = None) -> Any:
        """Append a node pattern on the form ``(<alias>:<labels> { <properties> })``.

        The alias may be given positionally as the first argument or by keyword.
        With labels, ``properties`` receives the first label and may return None
        for no property map. Without labels the fragment is ``(<alias>)`` and
        ``properties`` takes no arguments.

        Returns:
            Self for method chaining

        Example:
            ```python
            clause.node("p", PERSON, properties=lambda p: p.name.eq("Alice"))
            # (p:Person { name: "Alice" })
            ```
        """
        alias_text, labels = _split_alias(args, alias)

        if not labels:
            return self._emit(f"({alias_text}{evaluate_properties(properties)})")

        body = evaluate_scoped_properties(labels, properties, "node")
        return self._emit(f"({alias_text}:{join_labels(labels)}{body})")

    @overload
    def relationship(self: A, alias: str = "", *, properties: PropertyBlock | None = None) -> A: ...

    @overload
    def relationship(
        self: A, alias: str, /, *types: R, properties: ScopedPropertyBlock[R] | None = None
    ) -> A: ...

    @overload
    def relationship(
        self: A, *types: R, alias: str | None = None, properties: ScopedPropertyBlock[R] | None = None
    ) -> A: ...

    def relationship(self, *args: Any, alias: str | None = None, properties: Any = None) -> Any:
        """Append a relationship pattern on the form ``-[<alias>:<types> { <properties> }]->``.

        Relationships are always directed left to right. Argument handling
        mirrors `node`: types are joined with ``|`` and ``properties`` receives
        the first type, or nothing when no types are given.

        Returns:
            Self for method chaining
        """
        alias_text, types = _split_alias(args, alias)

        if not types:
            return self._emit(f"-[{alias_text}{evaluate_properties(properties)}]->")

        body = evaluate_scoped_properties(types, properties, "relationship")
        return self._emit(f"-[{alias_text}:{join_types(types)}{body}]->")
