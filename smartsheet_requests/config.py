"""
Client configuration.

A `ClientConfig` is constructed once per client and is read-only afterwards; it
is threaded explicitly into the URL and header builders.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .constants import API_URL
from .exceptions import ConfigurationError

ENV_ACCESS_TOKEN = "SMARTSHEET_ACCESS_TOKEN"
ENV_BASE_URL = "SMARTSHEET_BASE_URL"
ENV_APP_USER_AGENT = "SMARTSHEET_APP_USER_AGENT"
ENV_ASSUME_USER = "SMARTSHEET_ASSUME_USER"


def _maybe_load_dotenv(env_file: str | Path) -> None:
    from dotenv import load_dotenv

    load_dotenv(dotenv_path=Path(env_file), override=False)


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """
    Settings folded into every request a client makes.

    Attributes:
        token: API access token, sent as a bearer token.
        base_url: Base URL every path template is resolved under.
        app_user_agent: Optional suffix appended to the User-Agent header.
        assume_user: Optional identity to impersonate (Assume-User header).
    """

    token: str
    base_url: str = API_URL
    app_user_agent: str | None = None
    assume_user: str | None = None

    def __repr__(self) -> str:
        return (
            f"ClientConfig(token='****', base_url={self.base_url!r}, "
            f"app_user_agent={self.app_user_agent!r}, assume_user={self.assume_user!r})"
        )

    def with_overrides(self, **overrides: Any) -> ClientConfig:
        """Return a copy with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_env(
        cls,
        *,
        dotenv: bool = False,
        env_file: str | Path = ".env",
        **overrides: Any,
    ) -> ClientConfig:
        """
        Build a config from `SMARTSHEET_*` environment variables.

        Explicit (non-None) keyword overrides win over the environment. Loading a
        `.env` file is opt-in and never overrides variables already set.

        Raises:
            ConfigurationError: If no access token is available.
        """
        if dotenv:
            _maybe_load_dotenv(env_file)

        token = overrides.pop("token", None) or os.getenv(ENV_ACCESS_TOKEN, "").strip()
        if not token:
            raise ConfigurationError(
                f"Missing access token. Pass token= or set {ENV_ACCESS_TOKEN}."
            )

        config = cls(
            token=token,
            base_url=os.getenv(ENV_BASE_URL) or API_URL,
            app_user_agent=os.getenv(ENV_APP_USER_AGENT) or None,
            assume_user=os.getenv(ENV_ASSUME_USER) or None,
        )
        return config.with_overrides(**overrides)
