"""
Exceptions raised by wtask.

Library code raises these; the CLI turns them into a diagnostic on stderr
and exit code 1.
"""
from pathlib import Path
from typing import Optional, Sequence, Tuple


class WtaskError(Exception):
    """Base class for every error wtask reports to the user."""


class ConfigNotFoundError(WtaskError):
    """No candidate config file could be loaded."""

    def __init__(self, candidates: Sequence[Tuple[str, Path]]):
        self.paths = [path for _, path in candidates]
        lines = ["No configuration file found.", "Expected locations:"]
        lines.extend(f"  {label.capitalize()}: {path}" for label, path in candidates)
        super().__init__("\n".join(lines))


class ConfigUnreadableError(WtaskError):
    """A config file exists but could not be read or parsed."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Error loading configuration file {path}: {cause}")


class EmptyConfigError(WtaskError):
    """A config file was parsed but defines no sections."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path
        message = "No tasks found in configuration"
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)


class TaskNotFoundError(WtaskError):
    """The requested alias is not in the task table."""

    def __init__(self, alias: str, kind: str = "Task"):
        self.alias = alias
        super().__init__(f"{kind} '{alias}' not found")


class SpawnError(WtaskError):
    """The command could not be started."""

    def __init__(self, command: str, cause: Exception):
        self.command = command
        self.cause = cause
        super().__init__(f"Error executing '{command}': {cause}")
