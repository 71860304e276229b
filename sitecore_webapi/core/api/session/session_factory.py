"""Session factory using Factory Pattern."""
import requests
from requests.adapters import HTTPAdapter

from ..config import ContextConfig


class SessionFactory:
    """Factory for creating HTTP sessions."""

    @staticmethod
    def create_sync_session(config: ContextConfig = None) -> requests.Session:
        """Creates a synchronous HTTP session without retries."""
        config = config or ContextConfig.default()
        session = requests.Session()
        session.headers.update(config.get_session_headers())
        adapter = HTTPAdapter(max_retries=0)
        session.mount('http://', adapter)
        session.mount('https://', adapter)
        return session
