import logfire
import streamlit as st

from client import AuthorizedClient
from settings import api_settings


def init_state() -> None:
    """Initialize Streamlit state keys used by the storefront."""
    defaults: dict[str, object] = {
        "favorites_page": 0,
        "testimonials_page": 0,
        "selected_category": None,
        "last_order_id": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def get_client() -> AuthorizedClient:
    """Get the visitor's API client, creating it on first use.

    Each browser session keeps its own client so the backend session cookie
    is never shared between visitors. The client releases its connection pool
    when the session state holding it is dropped.
    """
    if "api_client" not in st.session_state:
        client = AuthorizedClient(settings=api_settings)
        logfire.instrument_httpx(client.http_client)
        st.session_state["api_client"] = client
    return st.session_state["api_client"]


def step_page(key: str, step: int) -> None:
    st.session_state[key] = st.session_state[key] + step
