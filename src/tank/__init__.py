"""Fluent builder for Cypher node and relationship pattern fragments."""

from tank.clause import (
    Clause,
    ClauseType,
    GraphClause,
    MatchClause,
    clause_for,
    create,
    match,
    merge,
    optional_match,
)
from tank.core import ApplicationError, EmptyEntitiesError
from tank.domain import (
    Entity,
    IntProperty,
    Node,
    Relationship,
    StringProperty,
    join_properties,
)

__all__ = [
    "ApplicationError",
    "Clause",
    "ClauseType",
    "EmptyEntitiesError",
    "Entity",
    "GraphClause",
    "IntProperty",
    "MatchClause",
    "Node",
    "Relationship",
    "StringProperty",
    "clause_for",
    "create",
    "join_properties",
    "match",
    "merge",
    "optional_match",
]
