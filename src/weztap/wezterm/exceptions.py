"""WezTerm-specific exceptions.

PUBLIC API:
  - WeztermError: Base exception for all wezterm cli operations
  - CommandFailedError: Process exited non-zero or could not be started
  - CommandTimeoutError: Process exceeded its wall-clock budget
  - OutputLimitError: Process produced more output than allowed
"""


class WeztermError(Exception):
    """Base exception for all wezterm cli operations."""

    pass


class CommandFailedError(WeztermError):
    """Raised when a wezterm cli invocation does not complete successfully.

    Attributes:
        command: The shell command string that was run.
        returncode: Exit status, or None if the process never finished.
        stderr: Standard error captured from the process, if any.
    """

    def __init__(self, message: str, command: str = "", returncode: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr


class CommandTimeoutError(CommandFailedError):
    """Raised when a wezterm cli invocation is killed by the timeout."""

    pass


class OutputLimitError(CommandFailedError):
    """Raised when captured output exceeds the configured byte ceiling."""

    pass
