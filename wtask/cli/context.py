"""
CLI context and configuration management.

Provides shared context for Click commands with lazy config loading.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging

from wtask.core.config import TASKS_CONFIG_NAME, get_config_candidates
from wtask.core.errors import EmptyConfigError
from wtask.core.loader import load_tasks
from wtask.core.models import TaskTable
from wtask.executor import StreamPolicy

logger = logging.getLogger(__name__)


@dataclass
class CLIContext:
    """
    Shared context for CLI commands.

    Attributes:
        verbose: Enable verbose logging output
        config_path: Explicit config file (skips local/global resolution if set)
        config_name: Base file name for the local/global candidates
        stream_policy: How the child's stdout/stderr are wired
        _tasks: Loaded task table (lazy-initialized)
    """
    verbose: bool = False
    config_path: Optional[Path] = None
    config_name: str = TASKS_CONFIG_NAME
    stream_policy: StreamPolicy = StreamPolicy.INHERIT
    _tasks: Optional[TaskTable] = field(default=None, repr=False, init=False)

    def candidates(self):
        """Config locations this invocation will try, in order."""
        if self.config_path is not None:
            return [("config", self.config_path)]
        return get_config_candidates(self.config_name)

    def get_tasks(self) -> TaskTable:
        """
        Load the task table once per invocation.

        Raises:
            ConfigNotFoundError: If no candidate file could be loaded
            EmptyConfigError: If the file defines no sections
        """
        if self._tasks is None:
            tasks, path = load_tasks(self.candidates())
            if not tasks:
                raise EmptyConfigError(path)
            if self.verbose:
                logger.info("Using configuration: %s", path)
            self._tasks = tasks
        return self._tasks
