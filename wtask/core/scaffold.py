"""
Starter config files written by ``wtask --init`` and ``wsearch --init``.
"""
import logging
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TASKS_CONFIG = """\
# wtask configuration
# Generated on {generated_at}

[py]
name = "Python Version"
description = "Show the Python version"
run = "python --version"

[gs]
name = "Git Status"
description = "Short git status of the current directory"
run = "git status --short"

[ls]
name = "List Files"
description = "List files in the current directory"
run = "ls -la"

# Usage examples:
# wtask py      - Show the Python version
# wtask -i      - Pick a task interactively
# wtask --list  - Show all available tasks
"""

DEFAULT_SEARCH_CONFIG = """\
# wsearch configuration
# Generated on {generated_at}
#
# `run` is a URL. {{query}} is replaced with the encoded search terms;
# without it the terms are appended to the end.

[wt]
name = "Web Search"
description = "General web search (Google)"
run = "https://www.google.com/search?q="

[yt]
name = "YouTube Search"
description = "Search on YouTube"
run = "https://www.youtube.com/results?search_query="

[gh]
name = "GitHub Search"
description = "Search on GitHub"
run = "https://github.com/search?q={{query}}&type=repositories"

[py]
name = "PyPI Search"
description = "Search on PyPI"
run = "https://pypi.org/search/?q="
"""


def write_default_config(path: Path, template: str = DEFAULT_TASKS_CONFIG) -> bool:
    """
    Write a starter config file unless one already exists.

    Parameters
    ----
    path : Path
        Destination file
    template : str
        One of the ``DEFAULT_*_CONFIG`` templates

    Returns
    ----
    bool
        True if the file was created, False if it was already there
    """
    if path.exists():
        logger.debug("Config file already exists at %s", path)
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    content = template.format(generated_at=datetime.now().isoformat(timespec="seconds"))
    path.write_text(content, encoding="utf-8")
    logger.debug("Created config file at %s", path)
    return True
