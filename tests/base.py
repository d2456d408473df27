from http import HTTPStatus

import httpx
import pytest
import respx

from client import AuthorizedClient
from settings.api import ApiSettings

SESSION_COOKIE = "session=fresh-session; Path=/; HttpOnly"


class BaseTestCase:
    @pytest.fixture(autouse=True)
    def setup(
        self,
        api_settings: ApiSettings,
        api_mock: respx.MockRouter,
        api_client: AuthorizedClient,
    ):
        self.settings = api_settings
        self.api_mock = api_mock
        self.client = api_client

    def mock_token(self, status_code: int = HTTPStatus.OK) -> respx.Route:
        headers = {"set-cookie": SESSION_COOKIE} if status_code < 300 else {}
        return self.api_mock.post("/oauth2/token").mock(
            return_value=httpx.Response(status_code, headers=headers)
        )
