"""HTTP connector, authentication and credential management.

- AtlassianClient: ``Connector`` implementation on ``requests``
- Authentication: basic auth, bearer token and user agent settings
- get_credentials / save_credentials / delete_credentials: site and token
  lookup through arguments, environment, keyring and .env files
"""

from atlassian_rest.common.auth import Authentication
from atlassian_rest.common.base import AtlassianClient
from atlassian_rest.common.credentials import (
    AtlassianCredentials,
    delete_credentials,
    get_credentials,
    save_credentials,
)

__all__ = [
    "AtlassianClient",
    "Authentication",
    "AtlassianCredentials",
    "get_credentials",
    "save_credentials",
    "delete_credentials",
]
