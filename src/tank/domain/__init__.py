from .entities import Entity, Node, Relationship
from .properties import (
    IntProperty,
    Property,
    StringProperty,
    int_eq,
    join_properties,
    string_eq,
)

__all__ = [
    "Entity",
    "IntProperty",
    "Node",
    "Property",
    "Relationship",
    "StringProperty",
    "int_eq",
    "join_properties",
    "string_eq",
]
