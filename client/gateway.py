import threading
import weakref
from typing import Any

import httpx
import logfire

from client.token import TokenProvider
from exceptions import ApiError, AuthenticationError, NetworkError
from settings.api import ApiSettings

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def _normalize_error_detail(detail: Any) -> str:
    """Convert an error payload to a readable string."""
    normalized = ""

    if detail is None:
        normalized = ""
    elif isinstance(detail, str):
        normalized = detail
    elif isinstance(detail, dict):
        if "msg" in detail:
            location = detail.get("loc")
            message = str(detail.get("msg"))
            if isinstance(location, list) and location:
                loc_text = ".".join(str(item) for item in location)
                normalized = f"{loc_text}: {message}"
            else:
                normalized = message
        else:
            normalized = ", ".join(
                str(key) + ": " + _normalize_error_detail(value)
                for key, value in detail.items()
            )
    elif isinstance(detail, list):
        normalized_items = [_normalize_error_detail(item) for item in detail]
        normalized = "; ".join(item for item in normalized_items if item)
    else:
        normalized = str(detail)

    return normalized


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        for key in ("detail", "message", "error"):
            if payload.get(key):
                normalized = _normalize_error_detail(payload[key]).strip()
                if normalized:
                    return normalized

    return response.reason_phrase or "Unknown error"


class AuthorizedClient:
    """HTTP gateway that re-authenticates once when the backend answers 401.

    Session state lives only in the underlying client's cookie jar. Concurrent
    calls that hit 401 share a single token exchange: a call whose request was
    sent before another thread re-authenticated retries without exchanging
    credentials again.
    """

    def __init__(
        self,
        settings: ApiSettings,
        client: httpx.Client | None = None,
        token_provider: TokenProvider | None = None,
    ):
        self.base_url = settings.base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=settings.timeout)
        self._owns_client = client is None
        self._finalizer = (
            weakref.finalize(self, self._client.close) if self._owns_client else None
        )
        self._token_provider = token_provider or TokenProvider(
            client=self._client, settings=settings
        )
        self._auth_lock = threading.Lock()
        self._auth_generation = 0

    @property
    def http_client(self) -> httpx.Client:
        return self._client

    def close(self) -> None:
        """Close the HTTP client if we own it.

        An owned client is also closed when the gateway itself is discarded,
        e.g. together with the Streamlit session state holding it.
        """
        if self._finalizer is not None:
            self._finalizer()

    def __enter__(self) -> "AuthorizedClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(
        self, method: str, url: str, options: dict[str, Any]
    ) -> httpx.Response:
        try:
            return self._client.request(method=method, url=url, **options)
        except httpx.TransportError as exc:
            logfire.warn(
                "Network failure on {method} {url}: {error}",
                method=method,
                url=url,
                error=str(exc),
            )
            raise NetworkError(message=str(exc) or type(exc).__name__) from exc

    def _reauthenticate(self, seen_generation: int) -> bool:
        with self._auth_lock:
            if self._auth_generation != seen_generation:
                return True

            if not self._token_provider.authenticate():
                return False

            self._auth_generation += 1
            return True

    def send(self, method: str, path: str, **options: Any) -> httpx.Response:
        """Send a JSON request, re-authenticating and retrying once on 401.

        Args:
            method: HTTP method.
            path: Path relative to the backend base URL.
            **options: Extra `httpx.Client.request` arguments.

        Returns:
            The successful response.

        Raises:
            AuthenticationError: The backend answered 401 and re-authentication failed.
            ApiError: The final response status is outside the 2xx range.
            NetworkError: No HTTP response was received.

        """
        url = f"{self.base_url}{path}"
        headers = httpx.Headers(options.get("headers"))
        headers.update(JSON_HEADERS)
        options["headers"] = headers

        seen_generation = self._auth_generation
        response = self._request(method=method, url=url, options=options)

        if response.status_code == httpx.codes.UNAUTHORIZED:
            logfire.info(
                "Unauthorized on {method} {url}, re-authenticating",
                method=method,
                url=url,
            )
            if not self._reauthenticate(seen_generation=seen_generation):
                raise AuthenticationError()
            response = self._request(method=method, url=url, options=options)

        if not response.is_success:
            message = _error_message(response)
            logfire.warn(
                "{method} {url} failed with {status_code}: {message}",
                method=method,
                url=url,
                status_code=response.status_code,
                message=message,
            )
            raise ApiError(message=message, status_code=response.status_code)

        return response

    def get(self, path: str, **options: Any) -> httpx.Response:
        return self.send("GET", path, **options)

    def post(self, path: str, **options: Any) -> httpx.Response:
        return self.send("POST", path, **options)

    def patch(self, path: str, **options: Any) -> httpx.Response:
        return self.send("PATCH", path, **options)

    def delete(self, path: str, **options: Any) -> httpx.Response:
        return self.send("DELETE", path, **options)
