from .base import (
    ApplicationError,
    ErrorCode,
    ErrorDetails,
    ErrorLevel,
    FragmentErrorDetails,
)
from .config import Settings, settings
from .errors import EmptyEntitiesError
