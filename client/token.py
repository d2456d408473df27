import base64

import httpx
import logfire

from settings.api import ApiSettings


def basic_auth_header(client_id: str, client_secret: str) -> str:
    """Build a Basic authorization header value from client credentials."""
    raw = f"{client_id}:{client_secret}".encode("utf-8")
    return f"Basic {base64.b64encode(raw).decode('ascii')}"


class TokenProvider:
    def __init__(self, client: httpx.Client, settings: ApiSettings):
        """Initialize token provider.

        Args:
            client: HTTP client whose cookie jar receives the session cookie.
            settings: Backend API settings holding the client credentials.

        """
        self._client = client
        self._settings = settings

    def authenticate(self) -> bool:
        """Run the client credentials exchange against the token endpoint.

        The session cookie set by the server lands in the shared client's
        cookie jar; no token is kept here.

        Returns:
            True when the server accepted the credentials, False otherwise.

        """
        try:
            response = self._client.post(
                self._settings.token_url,
                data={
                    "grant_type": "client_credentials",
                    "scope": self._settings.scope,
                },
                headers={
                    "Authorization": basic_auth_header(
                        client_id=self._settings.client_id,
                        client_secret=self._settings.client_secret,
                    ),
                },
            )
        except httpx.HTTPError as exc:
            logfire.warn("Token request failed: {error}", error=str(exc))
            return False

        if not response.is_success:
            logfire.warn(
                "Token endpoint rejected credentials with {status_code}",
                status_code=response.status_code,
            )
            return False

        logfire.info("Client credentials exchange succeeded")
        return True
