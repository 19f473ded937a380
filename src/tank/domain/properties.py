"""Typed property descriptors and the equality operators built on them."""

from typing import Any

from pydantic import BaseModel, ConfigDict, validate_call


class Property(BaseModel):
    """Reference to a property by its key name."""

    model_config = ConfigDict(frozen=True)

    property_name: str

    def __init__(self, property_name: str, **data: Any) -> None:
        super().__init__(property_name=property_name, **data)


class StringProperty(Property):
    """A property holding string values."""

    def eq(self, value: str) -> str:
        """Render ``<name>: "<value>"``.

        The value is quoted verbatim; embedded quotes are not escaped.
        """
        return string_eq(self, value)


class IntProperty(Property):
    """A property holding integer values."""

    def eq(self, value: int) -> str:
        """Render ``<name>: <value>`` with the value unquoted."""
        return int_eq(self, value)


@validate_call(config=ConfigDict(strict=True))
def string_eq(prop: StringProperty, value: str) -> str:
    """Compare a string property against a string literal.

    Strict validation rejects non-string values instead of coercing them.
    """
    return f'{prop.property_name}: "{value}"'


@validate_call(config=ConfigDict(strict=True))
def int_eq(prop: IntProperty, value: int) -> str:
    """Compare an integer property against an integer literal.

    Strict validation rejects strings, floats and booleans.
    """
    return f"{prop.property_name}: {value}"


def join_properties(*parts: str | None) -> str | None:
    """Join property comparisons into the inner text of a property map.

    Absent parts are skipped. Returns None when nothing is left, which the
    fragment builders render as no property map at all.

    Example:
        ```python
        join_properties(Person.name.eq("Alice"), Person.age.eq(30))
        # 'name: "Alice", age: 30'
        ```
    """
    present = [part for part in parts if part is not None]
    if not present:
        return None
    return ", ".join(present)
