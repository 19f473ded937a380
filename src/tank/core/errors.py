"""Specific error types for the fragment builder."""

from .base import ApplicationError, ErrorCode, ErrorLevel, FragmentErrorDetails


class EmptyEntitiesError(ApplicationError, IndexError):
    """An entity-scoped property block was given no labels or types to scope to.

    Subclasses IndexError so code expecting the plain out-of-range failure still
    catches it.
    """

    def __init__(self, message: str, details: FragmentErrorDetails | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.EMPTY_ENTITIES,
            level=ErrorLevel.ERROR,
            details=details or FragmentErrorDetails(
                source="clause",
                operation="evaluate_properties",
                fragment="unknown",
            ),
        )
