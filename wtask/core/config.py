"""
Configuration file locations for wtask.

Two candidates are tried in order: a local file next to the installed
package, then a dotfile in the user's home directory.
"""
from pathlib import Path
from typing import List, Tuple

TASKS_CONFIG_NAME = "wtask.toml"
SEARCH_CONFIG_NAME = "wsearch.toml"


def get_install_dir() -> Path:
    """
    Get the directory the wtask package is installed in.

    Returns
    ----
    Path
        Directory containing the ``wtask`` package modules
    """
    return Path(__file__).resolve().parent.parent


def get_local_config_path(config_name: str = TASKS_CONFIG_NAME) -> Path:
    """
    Get the project-local config path, ``<install-dir>/../<config_name>``.
    """
    return get_install_dir().parent / config_name


def get_global_config_path(config_name: str = TASKS_CONFIG_NAME) -> Path:
    """
    Get the per-user config path, ``~/.<config_name>``.
    """
    return Path.home() / f".{config_name}"


def get_config_candidates(config_name: str = TASKS_CONFIG_NAME) -> List[Tuple[str, Path]]:
    """
    Get the labelled candidate paths in resolution order.

    Returns
    ----
    List[Tuple[str, Path]]
        ``[("local", ...), ("global", ...)]``
    """
    return [
        ("local", get_local_config_path(config_name)),
        ("global", get_global_config_path(config_name)),
    ]
