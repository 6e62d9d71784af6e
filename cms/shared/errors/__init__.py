from .base import (
    AppError,
    DomainError,
    InfrastructureError,
    RateLimitedError,
    UnauthorizedError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "RateLimitedError",
    "UnauthorizedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
