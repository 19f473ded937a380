"""Clause kinds a pattern fragment can be built into."""

from enum import Enum


class ClauseType(str, Enum):
    """Enum for Cypher clause types that take a pattern."""

    MATCH = "MATCH"
    OPTIONAL_MATCH = "OPTIONAL MATCH"
    CREATE = "CREATE"
    MERGE = "MERGE"

    @property
    def keyword(self) -> str:
        """Cypher keyword opening a clause of this type, with a trailing space."""
        return f"{self.value} "
