from http import HTTPStatus

from exceptions.base import BaseError


class AuthenticationError(BaseError):
    """Raised when re-authentication after a 401 response fails."""

    def __init__(
        self,
        message: str = "Authentication failed",
        status_code: HTTPStatus = HTTPStatus.UNAUTHORIZED,
    ):
        super().__init__(message=message, status_code=status_code)
