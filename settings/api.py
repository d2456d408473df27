from pydantic import Field
from pydantic_settings import SettingsConfigDict

from settings.base import BaseSettings


class ApiSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="api_")

    base_url: str = Field(default="http://localhost:8000", title="Backend API URL")
    client_id: str = Field(default="", title="OAuth2 client ID")
    client_secret: str = Field(default="", title="OAuth2 client secret")
    token_path: str = Field(default="/oauth2/token", title="Token endpoint path")
    scope: str = Field(default="write", title="Client credentials scope")
    timeout: float = Field(default=30.0, title="Request timeout in seconds")

    @property
    def token_url(self) -> str:
        """Return the absolute URL of the token endpoint."""
        return f"{self.base_url.rstrip('/')}{self.token_path}"


api_settings = ApiSettings()
