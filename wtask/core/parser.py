"""
Parser for the wtask config format.

The format looks like TOML but is a much smaller, line-oriented subset::

    # comment
    [alias]
    name = "Display Name"
    description = "Shown in interactive picker"
    run = "executable arg1 arg2"

Only full-line comments are supported. Values lose every double-quote
character, not just the surrounding pair, so ``run = "a "b" c"`` becomes
``a b c``.
"""
import logging
import re
from enum import Enum
from typing import Dict, Optional

from wtask.core.models import Task, TaskTable

logger = logging.getLogger(__name__)

SECTION_RE = re.compile(r"\[(\w+)\]", re.ASCII)
TASK_FIELDS = ("name", "description", "run")


class ParserState(Enum):
    """Where the parser is relative to section headers."""
    OUTSIDE_SECTION = "outside-section"
    INSIDE_SECTION = "inside-section"


def parse_value(raw: str) -> str:
    """
    Normalize the right-hand side of an assignment.

    Parameters
    ----
    raw : str
        Everything after the first ``=`` on the line

    Returns
    ----
    str
        The value with all double quotes removed, then trimmed
    """
    return raw.replace('"', "").strip()


def parse_config(content: str) -> TaskTable:
    """
    Parse config text into a task table.

    Single pass, no lookahead. A ``[alias]`` line opens a fresh task with
    every field set to ``""``; a repeated alias replaces the earlier task.
    Inside a section, ``key = value`` lines set ``name``, ``description`` or
    ``run`` and any other key is ignored. Anything before the first header
    is ignored.

    Parameters
    ----
    content : str
        Raw file contents

    Returns
    ----
    TaskTable
        Aliases in file order (a re-declared alias keeps its first position)
    """
    sections: Dict[str, Dict[str, str]] = {}
    state = ParserState.OUTSIDE_SECTION
    current: Optional[str] = None

    for lineno, line in enumerate(content.split("\n"), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        match = SECTION_RE.fullmatch(line)
        if match:
            current = match.group(1)
            if current in sections:
                logger.debug("Line %d: section [%s] redeclared, replacing it", lineno, current)
            sections[current] = {field: "" for field in TASK_FIELDS}
            state = ParserState.INSIDE_SECTION
            continue

        if state is ParserState.OUTSIDE_SECTION or "=" not in line:
            continue

        key, _, raw_value = line.partition("=")
        key = key.strip()
        if key in TASK_FIELDS:
            sections[current][key] = parse_value(raw_value)

    return {alias: Task(**fields) for alias, fields in sections.items()}
