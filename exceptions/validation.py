from http import HTTPStatus

from exceptions.base import BaseError


class ValidationError(BaseError):
    """Raised when a response body does not match the expected schema."""

    def __init__(
        self,
        message: str = "Invalid data format received from server",
        status_code: HTTPStatus = HTTPStatus.UNPROCESSABLE_ENTITY,
    ):
        super().__init__(message=message, status_code=status_code)
