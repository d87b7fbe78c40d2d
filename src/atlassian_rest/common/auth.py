"""Authentication settings applied by the HTTP connector."""

import logging

logger = logging.getLogger(__name__)


class Authentication:
    """Holds basic-auth, bearer-token and user-agent settings.

    The connector reads these values when it builds a request. Basic auth
    wins over a bearer token when both are set.
    """

    def __init__(self) -> None:
        self._email = ""
        self._token = ""
        self._bearer_token = ""
        self._user_agent = ""

    def set_basic_auth(self, email: str, token: str) -> None:
        """Authenticate with an account email and API token."""
        self._email = email
        self._token = token

    def get_basic_auth(self) -> tuple[str, str]:
        return self._email, self._token

    def has_basic_auth(self) -> bool:
        return bool(self._email and self._token)

    def set_bearer_token(self, token: str) -> None:
        """Authenticate with an OAuth 2.0 access token."""
        self._bearer_token = token

    def get_bearer_token(self) -> str:
        return self._bearer_token

    def has_bearer_token(self) -> bool:
        return bool(self._bearer_token)

    def set_user_agent(self, agent: str) -> None:
        self._user_agent = agent

    def get_user_agent(self) -> str:
        return self._user_agent

    def has_user_agent(self) -> bool:
        return bool(self._user_agent)

    def __repr__(self) -> str:
        if self.has_basic_auth():
            mode = f"basic({self._email})"
        elif self.has_bearer_token():
            mode = "bearer"
        else:
            mode = "anonymous"
        return f"Authentication({mode})"
