"""
Load the task table from the first usable config file.
"""
import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

from wtask.core.config import TASKS_CONFIG_NAME, get_config_candidates
from wtask.core.errors import ConfigNotFoundError, ConfigUnreadableError
from wtask.core.models import TaskTable
from wtask.core.parser import parse_config

logger = logging.getLogger(__name__)


def read_config_file(path: Path) -> TaskTable:
    """
    Read and parse one config file.

    Raises:
        ConfigUnreadableError: If the file cannot be read or decoded
    """
    try:
        content = path.read_text(encoding="utf-8")
        return parse_config(content)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise ConfigUnreadableError(path, e) from e


def load_tasks(
    candidates: Optional[Sequence[Tuple[str, Path]]] = None,
    config_name: str = TASKS_CONFIG_NAME,
) -> Tuple[TaskTable, Path]:
    """
    Load the task table from the first candidate that exists and parses.

    Exactly one file is used; local and global definitions are never merged.
    A file that exists but fails to load is logged and the next candidate is
    tried.

    Args:
        candidates: ``(label, path)`` pairs to try in order. Defaults to the
            local then global location for ``config_name``.
        config_name: Base file name used to build the default candidates

    Returns:
        The parsed table and the path it came from. The table may be empty;
        deciding whether that is an error is left to the caller.

    Raises:
        ConfigNotFoundError: If no candidate could be loaded
    """
    if candidates is None:
        candidates = get_config_candidates(config_name)

    for label, path in candidates:
        if not path.exists():
            logger.debug("No %s configuration at %s", label, path)
            continue
        try:
            tasks = read_config_file(path)
        except ConfigUnreadableError as e:
            logger.error("Error loading %s configuration file: %s", label, e.cause)
            continue
        logger.debug("Loaded %d task(s) from %s configuration %s", len(tasks), label, path)
        return tasks, path

    raise ConfigNotFoundError(candidates)
