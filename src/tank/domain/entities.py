"""Entity markers for pattern fragments.

Nodes and relationships carry nothing beyond the token they render as. Concrete
markers subclass them and attach property descriptors at class level:

    class Person(Node):
        label = "Person"
        name = StringProperty("name")
"""

from abc import ABC, abstractmethod


class Entity(ABC):
    """Anything that can appear inside a pattern fragment."""

    @property
    @abstractmethod
    def entity_name(self) -> str:
        """Display name of the entity, the token written into the fragment."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.entity_name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self.entity_name == other.entity_name

    def __hash__(self) -> int:
        return hash((type(self), self.entity_name))


class Node(Entity):
    """A node-label token such as ``Person``."""

    label: str = ""

    def __init__(self, label: str | None = None) -> None:
        if label is not None:
            self.label = label

    @property
    def entity_name(self) -> str:
        return self.label


class Relationship(Entity):
    """A relationship-type token such as ``KNOWS``."""

    type: str = ""

    def __init__(self, type: str | None = None) -> None:
        if type is not None:
            self.type = type

    @property
    def entity_name(self) -> str:
        return self.type
