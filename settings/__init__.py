from settings.api import api_settings
from settings.base import BASE_PATH
from settings.logfire import logfire_settings

__all__ = [
    "api_settings",
    "logfire_settings",
    "BASE_PATH",
]
