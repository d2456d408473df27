from http import HTTPStatus


class BaseError(Exception):
    def __init__(
        self,
        message: str = "Internal error",
        status_code: HTTPStatus | int | None = HTTPStatus.INTERNAL_SERVER_ERROR,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
