"""
Tests for config file resolution and loading.
"""
import logging
from pathlib import Path

import pytest

import wtask
from wtask.core.config import (
    SEARCH_CONFIG_NAME,
    get_config_candidates,
    get_global_config_path,
    get_local_config_path,
)
from wtask.core.errors import ConfigNotFoundError, ConfigUnreadableError
from wtask.core.loader import load_tasks, read_config_file


@pytest.fixture
def candidates(tmp_path):
    """Local and global candidate paths inside a temp directory."""
    local_dir = tmp_path / "install"
    home_dir = tmp_path / "home"
    local_dir.mkdir()
    home_dir.mkdir()
    return [
        ("local", local_dir / "wtask.toml"),
        ("global", home_dir / ".wtask.toml"),
    ]


class TestConfigPaths:
    """Tests for candidate path resolution."""

    def test_local_path_is_next_to_package(self):
        """Test the local config sits in the package's parent directory."""
        package_dir = Path(wtask.__file__).resolve().parent
        assert get_local_config_path() == package_dir.parent / "wtask.toml"

    def test_global_path_is_home_dotfile(self, monkeypatch, tmp_path):
        """Test the global config is a dotfile in the home directory."""
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_global_config_path() == tmp_path / ".wtask.toml"
        assert get_global_config_path(SEARCH_CONFIG_NAME) == tmp_path / ".wsearch.toml"

    def test_candidates_order(self):
        """Test local is tried before global."""
        labels = [label for label, _ in get_config_candidates()]
        assert labels == ["local", "global"]


class TestLoadTasks:
    """Tests for load_tasks."""

    def test_global_used_when_local_missing(self, candidates):
        """Test fallback to the global file when no local file exists."""
        _, global_path = candidates[1]
        global_path.write_text('[g]\nrun = "echo global"\n')

        tasks, path = load_tasks(candidates)

        assert path == global_path
        assert tasks["g"].run == "echo global"

    def test_local_wins_without_blending(self, candidates):
        """Test only the local file is used when both exist."""
        (_, local_path), (_, global_path) = candidates
        local_path.write_text('[l]\nrun = "echo local"\n')
        global_path.write_text('[g]\nrun = "echo global"\n[l]\nname = "from global"\n')

        tasks, path = load_tasks(candidates)

        assert path == local_path
        assert list(tasks) == ["l"]
        assert tasks["l"].name == ""

    def test_no_file_lists_both_paths(self, candidates):
        """Test ConfigNotFoundError names every attempted path."""
        with pytest.raises(ConfigNotFoundError) as exc_info:
            load_tasks(candidates)

        message = str(exc_info.value)
        for _, path in candidates:
            assert str(path) in message
        assert exc_info.value.paths == [path for _, path in candidates]

    def test_unreadable_local_falls_back(self, candidates, caplog):
        """Test a local file that fails to load is logged and skipped."""
        (_, local_path), (_, global_path) = candidates
        local_path.write_bytes(b"[a]\nrun = \"\xff\xfe\"\n")
        global_path.write_text('[g]\nrun = "echo global"\n')

        with caplog.at_level(logging.ERROR, logger="wtask.core.loader"):
            tasks, path = load_tasks(candidates)

        assert path == global_path
        assert "local" in caplog.text

    def test_all_unreadable_is_fatal(self, candidates):
        """Test ConfigNotFoundError when every existing file fails to load."""
        for _, path in candidates:
            path.mkdir()

        with pytest.raises(ConfigNotFoundError):
            load_tasks(candidates)

    def test_empty_file_is_not_a_loader_error(self, candidates):
        """Test an empty table is returned for the caller to judge."""
        _, local_path = candidates[0]
        local_path.write_text("# nothing here\n")

        tasks, path = load_tasks(candidates)

        assert tasks == {}
        assert path == local_path


def test_read_config_file_wraps_os_errors(tmp_path):
    """Test read errors surface as ConfigUnreadableError."""
    with pytest.raises(ConfigUnreadableError) as exc_info:
        read_config_file(tmp_path / "missing.toml")
    assert isinstance(exc_info.value.cause, OSError)
