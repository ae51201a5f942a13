"""
Search-engine variant of wtask.

Engines come from the same config format as tasks; each engine's ``run``
value is a URL template. The finished URL is handed to the platform's
"open this" command.
"""
import logging
import platform
import subprocess
from typing import List, Optional
from urllib.parse import quote_plus

from wtask.core.errors import SpawnError

logger = logging.getLogger(__name__)

QUERY_PLACEHOLDER = "{query}"

BROWSER_COMMANDS = {
    "Darwin": ["open"],
    "Linux": ["xdg-open"],
    "Windows": ["cmd", "/c", "start", ""],
}


def build_search_url(template: str, query: str) -> str:
    """
    Build a search URL from an engine template.

    Parameters
    ----
    template : str
        Engine URL. ``{query}`` marks where the terms go; without it the
        terms are appended.
    query : str
        Search terms as typed

    Returns
    ----
    str
        URL with the terms form-encoded
    """
    encoded = quote_plus(query.strip())
    if QUERY_PLACEHOLDER in template:
        return template.replace(QUERY_PLACEHOLDER, encoded)
    return template + encoded


def browser_command(url: str, system: Optional[str] = None) -> List[str]:
    """
    Get the argv that opens ``url`` in the default browser.

    Raises
    ---
    OSError
        If running on unsupported OS
    """
    system = system or platform.system()
    try:
        opener = BROWSER_COMMANDS[system]
    except KeyError:
        raise OSError(f"Unsupported operating system: {system}") from None

    if system == "Windows":
        # cmd treats a bare & as a command separator
        url = url.replace("&", "^&")
    return opener + [url]


def open_url(url: str, system: Optional[str] = None) -> int:
    """
    Open ``url`` in the default browser.

    Returns
    ----
    int
        Exit status of the opener command

    Raises
    ---
    SpawnError
        If the opener is missing or the platform is unsupported
    """
    try:
        argv = browser_command(url, system)
        logger.debug("Opening %s with %r", url, argv[:-1])
        result = subprocess.run(argv, check=False)
    except OSError as e:
        raise SpawnError(url, e) from e
    return result.returncode
