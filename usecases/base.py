from typing import Any, Callable

import httpx
import logfire
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from client import AuthorizedClient
from enums import ErrorCode
from exceptions import ApiError, AuthenticationError, ValidationError
from schemas import ActionFailure, ActionResult, ActionSuccess

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def _parse(response: httpx.Response, adapter: TypeAdapter[Any]) -> Any:
    try:
        return adapter.validate_json(response.content)
    except PydanticValidationError as exc:
        raise ValidationError() from exc


def _failure(exc: Exception) -> ActionFailure:
    if isinstance(exc, AuthenticationError):
        return ActionFailure(error=exc.message)
    if isinstance(exc, ValidationError):
        return ActionFailure(error=exc.message, code=ErrorCode.VALIDATION_ERROR)
    if isinstance(exc, ApiError):
        return ActionFailure(error=exc.message, code=exc.code, status=exc.status_code)

    logfire.exception("Unexpected error during remote call")
    return ActionFailure(error=UNEXPECTED_ERROR_MESSAGE, code=ErrorCode.UNKNOWN_ERROR)


def run_action(
    request: Callable[[], httpx.Response], schema: Any
) -> ActionResult[Any]:
    """Run a remote call and validate its JSON body against a schema.

    Args:
        request: Zero-argument callable performing the gateway call.
        schema: Type the response body must match, e.g. `list[MenuItem]`.

    Returns:
        `ActionSuccess` with validated data, or `ActionFailure` describing
        what went wrong.

    """
    adapter = TypeAdapter(schema)
    try:
        data = _parse(response=request(), adapter=adapter)
    except Exception as exc:
        return _failure(exc)

    return ActionSuccess(data=data)


def run_command(request: Callable[[], httpx.Response]) -> ActionResult[None]:
    """Run a remote call whose response body is not needed."""
    try:
        request()
    except Exception as exc:
        return _failure(exc)

    return ActionSuccess(data=None)


class BaseUsecase:
    def __init__(self, client: AuthorizedClient):
        self._client = client
