from client.gateway import AuthorizedClient
from client.token import TokenProvider, basic_auth_header

__all__ = ["AuthorizedClient", "TokenProvider", "basic_auth_header"]
