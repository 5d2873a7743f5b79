from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _CLIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ErrorInfo(_CLIModel):
    type: str
    message: str
    details: dict[str, Any] | None = None


class CommandMeta(_CLIModel):
    duration_ms: int = Field(..., alias="durationMs")
    dry_run: bool = Field(False, alias="dryRun")


class CommandResult(_CLIModel):
    ok: bool
    command: str
    data: Any | None = None
    meta: CommandMeta
    error: ErrorInfo | None = None
