from http import HTTPStatus

import httpx

from enums import ErrorCode
from exceptions import ApiError, AuthenticationError
from schemas import ActionFailure, ActionSuccess
from usecases import run_action, run_command
from usecases.base import UNEXPECTED_ERROR_MESSAGE


def respond(status_code: int = HTTPStatus.OK, **kwargs) -> httpx.Response:
    return httpx.Response(status_code, **kwargs)


def raise_error(exc: Exception):
    def request() -> httpx.Response:
        raise exc

    return request


class TestRunAction:
    def test_ok(self) -> None:
        result = run_action(request=lambda: respond(json=[1, 2, 3]), schema=list[int])

        assert result == ActionSuccess(data=[1, 2, 3])
        assert result.success is True

    def test_schema_mismatch(self) -> None:
        result = run_action(request=lambda: respond(json={"id": "x"}), schema=list[int])

        assert isinstance(result, ActionFailure)
        assert result.success is False
        assert result.error.startswith("Invalid data format")
        assert result.code == ErrorCode.VALIDATION_ERROR
        assert not hasattr(result, "data")

    def test_not_json(self) -> None:
        result = run_action(request=lambda: respond(text="<html></html>"), schema=dict)

        assert result.code == ErrorCode.VALIDATION_ERROR

    def test_authentication_error(self) -> None:
        result = run_action(request=raise_error(AuthenticationError()), schema=dict)

        assert result == ActionFailure(error="Authentication failed")

    def test_api_error(self) -> None:
        result = run_action(
            request=raise_error(
                ApiError(message="Cart is locked", status_code=HTTPStatus.CONFLICT)
            ),
            schema=dict,
        )

        assert result == ActionFailure(
            error="Cart is locked",
            code=ErrorCode.API_ERROR,
            status=HTTPStatus.CONFLICT,
        )

    def test_unexpected_error(self) -> None:
        result = run_action(request=raise_error(RuntimeError("boom")), schema=dict)

        assert result == ActionFailure(
            error=UNEXPECTED_ERROR_MESSAGE, code=ErrorCode.UNKNOWN_ERROR
        )


class TestRunCommand:
    def test_ok_ignores_body(self) -> None:
        result = run_command(request=lambda: respond(HTTPStatus.NO_CONTENT))

        assert result == ActionSuccess(data=None)

    def test_api_error(self) -> None:
        result = run_command(
            request=raise_error(ApiError(message="Gone", status_code=410))
        )

        assert result.success is False
        assert result.status == 410
