"""Credential resolution for Atlassian sites.

Credentials are resolved in the following order:
1. Explicit parameters passed to the client
2. Environment variables (ATLASSIAN_SITE, ATLASSIAN_USER_EMAIL, ATLASSIAN_API_TOKEN)
3. System keyring (via keyring library)
4. .env file in current directory or parent directories

Only the site is mandatory. Without an email and token the client sends
anonymous requests, unless a bearer token is configured on it.

Example:
    from atlassian_rest.common.credentials import get_credentials

    site, email, token = get_credentials()
    site, email, token = get_credentials(service="wiki-sync")
"""

import logging
import os
from pathlib import Path
from typing import NamedTuple

import keyring
import keyring.errors

logger = logging.getLogger(__name__)

DEFAULT_SERVICE = "atlassian-rest"

ENV_SITE = "ATLASSIAN_SITE"
ENV_USER_EMAIL = "ATLASSIAN_USER_EMAIL"
ENV_API_TOKEN = "ATLASSIAN_API_TOKEN"  # noqa: S105

KEYRING_SITE = "site"
KEYRING_EMAIL = "user_email"
KEYRING_TOKEN = "api_token"  # noqa: S105


class AtlassianCredentials(NamedTuple):
    """Site URL plus optional basic-auth credentials."""

    site: str
    email: str
    api_token: str


def get_credentials(
    site: str | None = None,
    email: str | None = None,
    api_token: str | None = None,
    service: str = DEFAULT_SERVICE,
) -> AtlassianCredentials:
    """Resolve the site and credentials from the configured sources.

    Args:
        site: Explicit site URL (e.g., https://example.atlassian.net)
        email: Explicit account email
        api_token: Explicit API token
        service: Keyring service name

    Returns:
        AtlassianCredentials with the site stripped of its trailing slash.
        Email and token are empty strings when no source provides them.

    Raises:
        ValueError: If no site can be found
    """
    resolved = {
        ENV_SITE: site,
        ENV_USER_EMAIL: email,
        ENV_API_TOKEN: api_token,
    }
    accounts = {
        ENV_SITE: KEYRING_SITE,
        ENV_USER_EMAIL: KEYRING_EMAIL,
        ENV_API_TOKEN: KEYRING_TOKEN,
    }

    for name in resolved:
        if not resolved[name]:
            resolved[name] = os.environ.get(name)

    for name, account in accounts.items():
        if not resolved[name]:
            resolved[name] = _get_from_keyring(service, account)

    if not all(resolved.values()):
        env_vars = _load_dotenv()
        for name in resolved:
            if not resolved[name]:
                resolved[name] = env_vars.get(name)

    resolved_site = resolved[ENV_SITE]
    if not resolved_site:
        raise ValueError(
            f"No Atlassian site configured. Set {ENV_SITE}, "
            f"use the keyring, or pass the site explicitly."
        )

    return AtlassianCredentials(
        site=resolved_site.rstrip("/"),
        email=resolved[ENV_USER_EMAIL] or "",
        api_token=resolved[ENV_API_TOKEN] or "",
    )


def save_credentials(
    site: str,
    email: str,
    api_token: str,
    service: str = DEFAULT_SERVICE,
) -> None:
    """Save credentials to the system keyring.

    Args:
        site: Atlassian site URL
        email: Account email
        api_token: API token
        service: Keyring service name
    """
    keyring.set_password(service, KEYRING_SITE, site)
    keyring.set_password(service, KEYRING_EMAIL, email)
    keyring.set_password(service, KEYRING_TOKEN, api_token)
    logger.info("Credentials saved to keyring (service: %s)", service)


def delete_credentials(service: str = DEFAULT_SERVICE) -> None:
    """Delete credentials from the system keyring.

    Args:
        service: Keyring service name
    """
    for account in (KEYRING_SITE, KEYRING_EMAIL, KEYRING_TOKEN):
        try:
            keyring.delete_password(service, account)
        except keyring.errors.PasswordDeleteError:
            logger.debug("No keyring entry %s/%s to delete", service, account)
    logger.info("Credentials deleted from keyring (service: %s)", service)


def _get_from_keyring(service: str, account: str) -> str | None:
    try:
        return keyring.get_password(service, account)
    except keyring.errors.KeyringError as e:
        logger.debug("Keyring error for %s/%s: %s", service, account, e)
        return None


def _load_dotenv() -> dict[str, str]:
    """Read KEY=value pairs from the nearest .env file.

    Searches the current directory, then each parent, and stops at the
    first .env found.

    Returns:
        Variables defined in the file, empty when none is found
    """
    env_vars: dict[str, str] = {}

    current = Path.cwd()
    env_file = next(
        (d / ".env" for d in (current, *current.parents) if (d / ".env").is_file()),
        None,
    )
    if env_file is None:
        return env_vars

    logger.debug("Loading .env from %s", env_file)
    try:
        lines = env_file.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        logger.debug("Error reading .env file: %s", e)
        return env_vars

    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip().removeprefix("export ").strip()
        value = value.strip()
        if len(value) >= 2 and value[0] in ('"', "'") and value[-1] == value[0]:
            value = value[1:-1]
        env_vars[key] = value

    return env_vars
