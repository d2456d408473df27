from pydantic import Field
from pydantic_settings import SettingsConfigDict

from settings.base import BaseSettings


class LogfireSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="logfire_")

    token: str | None = Field(default=None, title="Logfire write token")
    service_name: str = Field(default="storefront", title="Service name")
    environment: str = Field(default="local", title="Deployment environment")


logfire_settings = LogfireSettings()
