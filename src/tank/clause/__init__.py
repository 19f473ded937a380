"""Clause accumulators and the pattern-fragment builders attached to them."""

from .base import Clause
from .clauses import (
    CreateClause,
    MatchClause,
    MergeClause,
    OptionalMatchClause,
    PatternClause,
    clause_for,
    create,
    match,
    merge,
    optional_match,
)
from .graph import GraphClause
from .helpers import (
    evaluate_properties,
    evaluate_scoped_properties,
    join_labels,
    join_types,
    property_body,
)
from .interfaces import QueryAccumulator
from .state import ClauseType

__all__ = [
    "Clause",
    "ClauseType",
    "CreateClause",
    "GraphClause",
    "MatchClause",
    "MergeClause",
    "OptionalMatchClause",
    "PatternClause",
    "QueryAccumulator",
    "clause_for",
    "create",
    "evaluate_properties",
    "evaluate_scoped_properties",
    "join_labels",
    "join_types",
    "match",
    "merge",
    "optional_match",
    "property_body",
]
