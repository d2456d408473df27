from typing import Iterator

import logfire
import pytest
import respx

from client import AuthorizedClient
from settings.api import ApiSettings

BASE_URL = "http://api.test"


@pytest.fixture(scope="session", autouse=True)
def configure_logfire() -> None:
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(scope="function")
def api_settings() -> ApiSettings:
    return ApiSettings(
        base_url=BASE_URL, client_id="storefront", client_secret="s3cret"
    )


@pytest.fixture(scope="function")
def api_mock() -> Iterator[respx.MockRouter]:
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture(scope="function")
def api_client(
    api_settings: ApiSettings, api_mock: respx.MockRouter
) -> Iterator[AuthorizedClient]:
    with AuthorizedClient(settings=api_settings) as client:
        yield client
