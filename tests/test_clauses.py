"""Tests for the concrete clause types."""

import pytest

from tank import ClauseType, MatchClause, clause_for, create, match, merge, optional_match
from tank.clause import CreateClause, MergeClause, OptionalMatchClause, QueryAccumulator


class TestClauseFactories:
    """Tests for the clause factory functions."""

    @pytest.mark.parametrize(
        ("factory", "cls", "keyword"),
        [
            (match, MatchClause, "MATCH "),
            (optional_match, OptionalMatchClause, "OPTIONAL MATCH "),
            (create, CreateClause, "CREATE "),
            (merge, MergeClause, "MERGE "),
        ],
    )
    def test_seeded_with_keyword(self, factory, cls, keyword):
        clause = factory({"tx": 1})

        assert isinstance(clause, cls)
        assert clause.query == keyword
        assert clause.context == {"tx": 1}

    def test_clause_for(self):
        clause = clause_for(ClauseType.MERGE, None)

        assert isinstance(clause, MergeClause)
        assert clause.query == "MERGE "

    def test_explicit_query_overrides_keyword(self):
        assert MatchClause(None, query="").query == ""


class TestPatternClause:
    """Tests for building patterns on concrete clauses."""

    def test_match_pattern(self, person, knows):
        clause = (
            match(None)
            .node("a", person, properties=lambda p: p.name.eq("Alice"))
            .relationship(knows)
            .node("b", person)
        )

        assert str(clause) == 'MATCH (a:Person { name: "Alice" })-[:Knows]->(b:Person)'

    def test_create_pattern(self, employee):
        clause = create("ctx").node("e", employee, properties=lambda e: e.employee_id.eq(7))

        assert clause.query == "CREATE (e:Employee { employeeId: 7 })"

    def test_satisfies_accumulator_protocol(self):
        clause: QueryAccumulator[None] = match(None)

        assert clause.append("(n)") is clause
        assert clause.query == "MATCH (n)"

    def test_repr(self):
        assert repr(match(1)) == "MatchClause(query='MATCH ', context=1)"
