from .base import BaseService
from .errors import (
    DependencyMissingError,
    ExternalCommandFailedError,
    IoFailedError,
    ServiceFailure,
    UserCancelledError,
    ValidationFailedError,
)

__all__ = [
    "BaseService",
    "DependencyMissingError",
    "ExternalCommandFailedError",
    "IoFailedError",
    "ServiceFailure",
    "UserCancelledError",
    "ValidationFailedError",
]
