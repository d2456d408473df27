from http import HTTPStatus

from enums import ErrorCode
from exceptions.base import BaseError


class ApiError(BaseError):
    """Raised when the backend answers with a non-success status."""

    code: ErrorCode = ErrorCode.API_ERROR

    def __init__(
        self,
        message: str = "API request failed",
        status_code: HTTPStatus | int | None = HTTPStatus.INTERNAL_SERVER_ERROR,
    ):
        super().__init__(message=message, status_code=status_code)


class NetworkError(ApiError):
    """Raised when the request never produced an HTTP response."""

    code = ErrorCode.NETWORK_ERROR

    def __init__(self, message: str = "Network request failed"):
        super().__init__(message=message, status_code=None)
