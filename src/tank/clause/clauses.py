"""Concrete clause types carrying the fragment builders.

Each clause starts out with its Cypher keyword; fragments are appended after it.

    match(ctx).node("p", PERSON).relationship(KNOWS).node("f", PERSON).query
    # 'MATCH (p:Person)-[:KNOWS]->(f:Person)'
"""

from typing import ClassVar

from tank.clause.base import Clause
from tank.clause.graph import GraphClause
from tank.clause.interfaces import C
from tank.clause.state import ClauseType


class PatternClause(Clause[C], GraphClause):
    """A clause opened by a keyword and followed by pattern fragments."""

    clause_type: ClassVar[ClauseType]

    def __init__(self, context: C, query: str | None = None) -> None:
        super().__init__(context, self.clause_type.keyword if query is None else query)


class MatchClause(PatternClause[C]):
    clause_type = ClauseType.MATCH


class OptionalMatchClause(PatternClause[C]):
    clause_type = ClauseType.OPTIONAL_MATCH


class CreateClause(PatternClause[C]):
    clause_type = ClauseType.CREATE


class MergeClause(PatternClause[C]):
    clause_type = ClauseType.MERGE


_CLAUSES: dict[ClauseType, type[PatternClause]] = {
    ClauseType.MATCH: MatchClause,
    ClauseType.OPTIONAL_MATCH: OptionalMatchClause,
    ClauseType.CREATE: CreateClause,
    ClauseType.MERGE: MergeClause,
}


def clause_for(clause_type: ClauseType, context: C) -> PatternClause[C]:
    """Create an empty clause of the given type.

    Args:
        clause_type: Which clause to open
        context: Opaque value carried alongside the query text

    Returns:
        A new clause whose query holds only its keyword
    """
    return _CLAUSES[clause_type](context)


def match(context: C) -> MatchClause[C]:
    return MatchClause(context)


def optional_match(context: C) -> OptionalMatchClause[C]:
    return OptionalMatchClause(context)


def create(context: C) -> CreateClause[C]:
    return CreateClause(context)


def merge(context: C) -> MergeClause[C]:
    return MergeClause(context)
