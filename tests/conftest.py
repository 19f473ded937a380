"""Pytest configuration and shared entity markers."""

import pytest

from tank import IntProperty, Node, Relationship, StringProperty
from tank.clause import Clause, GraphClause


class Person(Node):
    label = "Person"
    name = StringProperty("name")
    age = IntProperty("age")


class Employee(Node):
    label = "Employee"
    employee_id = IntProperty("employeeId")


class Knows(Relationship):
    type = "Knows"
    since = IntProperty("since")


class Likes(Relationship):
    type = "Likes"
    reason = StringProperty("reason")


class SessionClause(Clause[dict], GraphClause):
    """Clause type defined the way application code would define its own."""


@pytest.fixture
def person() -> Person:
    return Person()


@pytest.fixture
def employee() -> Employee:
    return Employee()


@pytest.fixture
def knows() -> Knows:
    return Knows()


@pytest.fixture
def likes() -> Likes:
    return Likes()


@pytest.fixture
def clause() -> SessionClause:
    """Empty clause carrying a context dict."""
    return SessionClause(context={"session": "test"})
