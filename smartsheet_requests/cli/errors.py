from __future__ import annotations


class CLIError(Exception):
    """A user-facing command failure, rendered as a one-line error without a traceback."""

    exit_code = 2
    error_type = "usage_error"

    def __init__(self, message: str, *, hint: str | None = None, error_type: str | None = None):
        super().__init__(message)
        self.message = message
        self.hint = hint
        if error_type is not None:
            self.error_type = error_type
