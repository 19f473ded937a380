"""Helpers shared by the fragment builders.

Label/type joining and property-block evaluation. Nothing here escapes or
validates its input; tokens and property text are written verbatim.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from tank.core.base import FragmentErrorDetails
from tank.core.errors import EmptyEntitiesError
from tank.domain.entities import Entity, Node, Relationship

E = TypeVar("E", bound=Entity)

PropertyBlock = Callable[[], str | None]
ScopedPropertyBlock = Callable[[E], str | None]


def join_labels(labels: Sequence[Node]) -> str:
    """Join node labels with ``:``, preserving order and duplicates."""
    return ":".join(node.label for node in labels)


def join_types(types: Sequence[Relationship]) -> str:
    """Join relationship types with ``|``, preserving order and duplicates."""
    return "|".join(relationship.type for relationship in types)


def property_body(text: str | None) -> str:
    """Wrap property text as `` { <text> }``, or nothing when absent."""
    if text is None:
        return ""
    return f" {{ {text} }}"


def evaluate_properties(block: PropertyBlock | None) -> str:
    """Evaluate an unscoped property block into property-map text."""
    if block is None:
        return ""
    return property_body(block())


def evaluate_scoped_properties(
    entities: Sequence[E],
    block: ScopedPropertyBlock[E] | None,
    fragment: str = "fragment",
) -> str:
    """Evaluate a property block scoped to the first of ``entities``.

    Args:
        entities: Labels or types given to the enclosing fragment
        block: Property block receiving the first entity, or None
        fragment: Kind of fragment being built, reported on error

    Returns:
        Property-map text, empty when the block is absent or yields None

    Raises:
        EmptyEntitiesError: If a block is given but ``entities`` is empty
    """
    if block is None:
        return ""
    if not entities:
        raise EmptyEntitiesError(
            f"Entity-scoped property block for {fragment} needs at least one label or type",
            details=FragmentErrorDetails(
                source=__name__,
                operation="evaluate_scoped_properties",
                fragment=fragment,
            ),
        )
    return property_body(block(entities[0]))
