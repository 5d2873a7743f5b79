from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from smartsheet_requests.config import ClientConfig
from smartsheet_requests.exceptions import ConfigurationError

from .errors import CLIError

OutputFormat = Literal["table", "json"]


@dataclass
class CLIContext:
    output: OutputFormat
    quiet: bool
    verbosity: int
    dotenv: bool
    env_file: Path
    token: str | None
    base_url: str | None
    app_user_agent: str | None
    assume_user: str | None

    def resolve_config(self) -> ClientConfig:
        """Resolve client settings: explicit options first, then SMARTSHEET_* env vars."""
        try:
            return ClientConfig.from_env(
                dotenv=self.dotenv,
                env_file=self.env_file,
                token=(self.token or "").strip() or None,
                base_url=self.base_url,
                app_user_agent=self.app_user_agent,
                assume_user=self.assume_user,
            )
        except ConfigurationError as e:
            raise CLIError("Missing access token.", hint=str(e), error_type="missing_token") from e
