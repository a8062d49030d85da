"""
API key resolution utilities.

Resolves API keys from multiple sources:
1. Explicit value
2. Environment variables
3. System keyring (optional)
"""

from __future__ import annotations

import os

from pydantic import SecretStr

from async_openai.telemetry import get_logger

logger = get_logger(__name__)

DEFAULT_API_KEY_ENV = "OPENAI_API_KEY"
KEYRING_SERVICE = "openai"


def resolve_api_key(
    explicit_key: str | SecretStr | None = None,
    env_var: str = DEFAULT_API_KEY_ENV,
    keyring_user: str = "default",
) -> SecretStr:
    """Resolve the API key for a config.

    Resolution order:
    1. Explicit key if provided
    2. Environment variable (``OPENAI_API_KEY`` by default)
    3. System keyring entry ``openai/<keyring_user>`` (if keyring is installed)

    An unresolved key is an empty secret, not an error: the server rejects
    the request with an authentication error instead.

    Args:
        explicit_key: Explicitly provided API key
        env_var: Environment variable to consult
        keyring_user: Keyring username under the ``openai`` service

    Returns:
        The key wrapped in a SecretStr
    """
    if isinstance(explicit_key, SecretStr):
        return explicit_key
    if explicit_key:
        return SecretStr(explicit_key)

    key = os.getenv(env_var)
    if key:
        return SecretStr(key)

    key = _try_keyring(keyring_user)
    if key:
        return SecretStr(key)

    return SecretStr("")


def _try_keyring(username: str) -> str | None:
    """Try to get API key from system keyring.

    Args:
        username: Keyring username

    Returns:
        API key from keyring or None
    """
    try:
        import keyring

        return keyring.get_password(KEYRING_SERVICE, username)
    except ImportError:
        # keyring not installed
        return None
    except Exception as e:
        # Keyring backend errors are common in containers and CI
        logger.debug("keyring lookup failed", error=str(e))
        return None
