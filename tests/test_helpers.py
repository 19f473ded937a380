"""Tests for label joining and property-block evaluation."""

import pytest

from tank import Node, Relationship
from tank.clause import (
    evaluate_properties,
    evaluate_scoped_properties,
    join_labels,
    join_types,
    property_body,
)
from tank.core import EmptyEntitiesError, ErrorCode


class TestJoiners:
    """Tests for join_labels and join_types."""

    def test_labels_joined_with_colon(self):
        assert join_labels([Node("A"), Node("B"), Node("C")]) == "A:B:C"

    def test_types_joined_with_pipe(self):
        assert join_types([Relationship("A"), Relationship("B"), Relationship("C")]) == "A|B|C"

    def test_single_entity_has_no_separator(self):
        assert join_labels([Node("A")]) == "A"
        assert join_types([Relationship("A")]) == "A"

    def test_empty_sequences(self):
        assert join_labels([]) == ""
        assert join_types([]) == ""

    def test_order_and_duplicates_preserved(self):
        assert join_labels([Node("B"), Node("A"), Node("B")]) == "B:A:B"


class TestPropertyBody:
    """Tests for property_body and the evaluators built on it."""

    def test_absent_text(self):
        assert property_body(None) == ""

    def test_wraps_text(self):
        assert property_body("a: 1") == " { a: 1 }"

    def test_absent_block(self):
        assert evaluate_properties(None) == ""

    def test_unscoped_block(self):
        assert evaluate_properties(lambda: "a: 1") == " { a: 1 }"

    def test_unscoped_block_returning_none(self):
        assert evaluate_properties(lambda: None) == ""

    def test_scoped_block_uses_first_entity(self):
        entities = [Node("First"), Node("Second")]

        assert evaluate_scoped_properties(entities, lambda e: f"tag: {e.label}") == " { tag: First }"

    def test_absent_scoped_block_needs_no_entities(self):
        assert evaluate_scoped_properties([], None) == ""

    def test_scoped_block_on_empty_entities(self):
        with pytest.raises(EmptyEntitiesError) as exc_info:
            evaluate_scoped_properties([], lambda e: None, "relationship")

        assert exc_info.value.code == ErrorCode.EMPTY_ENTITIES
        assert "relationship" in exc_info.value.message
