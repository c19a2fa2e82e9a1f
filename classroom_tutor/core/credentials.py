"""Credentials providers that supply the bearer token for backend requests.

API clients receive a provider at construction time and ask it for a token on
every request, so a token refreshed on disk is picked up without rebuilding
the client.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

from classroom_tutor.constants.api_constants import PLACEHOLDER_AUTH_TOKEN

logger = logging.getLogger(__name__)

AUTH_TOKEN_ENV_VAR = "CLASSROOM_TUTOR_AUTH_TOKEN"


class CredentialsProvider(Protocol):
    def get_token(self) -> str:
        ...


class StaticCredentials:
    """Always returns the same token."""

    def __init__(self, token: str | None = None) -> None:
        self._token = (token or "").strip() or PLACEHOLDER_AUTH_TOKEN

    def get_token(self) -> str:
        return self._token


class EnvironmentCredentials:
    """Reads the token from an environment variable on each request."""

    def __init__(self, variable: str = AUTH_TOKEN_ENV_VAR) -> None:
        self._variable = variable

    def get_token(self) -> str:
        token = os.environ.get(self._variable, "").strip()
        return token or PLACEHOLDER_AUTH_TOKEN


class TokenFileCredentials:
    """Reads the token from a file, the desktop equivalent of browser local storage."""

    def __init__(self, token_path: Path) -> None:
        self._token_path = token_path

    def get_token(self) -> str:
        try:
            token = self._token_path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return PLACEHOLDER_AUTH_TOKEN
        except OSError as exc:
            logger.warning("Could not read token file %s: %s", self._token_path, exc)
            return PLACEHOLDER_AUTH_TOKEN
        return token or PLACEHOLDER_AUTH_TOKEN

    def store_token(self, token: str) -> None:
        self._token_path.parent.mkdir(parents=True, exist_ok=True)
        self._token_path.write_text(token.strip() + "\n", encoding="utf-8")


def credentials_from_settings(auth_token: str | None, token_file: Path | None) -> CredentialsProvider:
    """Pick the provider matching the configured settings."""
    if auth_token:
        return StaticCredentials(auth_token)
    if token_file is not None:
        return TokenFileCredentials(token_file)
    return EnvironmentCredentials()
