from exceptions.api import ApiError, NetworkError
from exceptions.auth import AuthenticationError
from exceptions.base import BaseError
from exceptions.validation import ValidationError

__all__ = [
    "ApiError",
    "AuthenticationError",
    "BaseError",
    "NetworkError",
    "ValidationError",
]
