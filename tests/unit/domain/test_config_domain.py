from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against corrupted config files.
3. Persistence (Save/Load) without touching real user data.
"""

import json
from unittest.mock import patch

import pytest

from fstree.domain.config import (
    CURRENT_CONFIG_VERSION,
    get_default_app_state,
    get_default_config,
    load_app_state,
    load_config,
    save_config,
)


@pytest.fixture
def mock_config_path(tmp_path):
    """
    Fixture to redirect the config file into a temp directory.
    Prevents tests from reading/writing to the real OS user folder.
    """
    config_dir = tmp_path / "fstree"
    config_dir.mkdir()
    config_file = config_dir / "config.json"

    with patch("fstree.domain.config.get_config_path", return_value=str(config_file)):
        yield config_file


def test_default_config_keys():
    conf = get_default_config()
    assert conf["pattern"] == "*"
    assert conf["recursive"] is True
    assert conf["follow_symlinks"] is True
    assert conf["log_level"] == "WARNING"


def test_default_app_state_structure():
    state = get_default_app_state()
    assert state["version"] == CURRENT_CONFIG_VERSION
    assert state["last_session"] == get_default_config()


def test_load_fresh_state_returns_defaults(mock_config_path):
    """If no config file exists, it should return the default state structure."""
    assert not mock_config_path.exists()

    state = load_app_state()
    assert state["version"] == CURRENT_CONFIG_VERSION
    assert state["last_session"]["recursive"] is True


def test_load_corrupted_file_returns_defaults(mock_config_path):
    """If JSON is malformed, it should fall back to defaults safely."""
    mock_config_path.write_text("{ this is not json", encoding="utf-8")

    state = load_app_state()
    assert state == get_default_app_state()


def test_load_non_dict_payload_returns_defaults(mock_config_path):
    mock_config_path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_app_state()["last_session"] == get_default_config()


def test_partial_session_is_merged_over_defaults(mock_config_path):
    """Keys missing from an older file are filled from the defaults."""
    mock_config_path.write_text(
        json.dumps({"version": "0.9.0", "last_session": {"pattern": "*.py"}}),
        encoding="utf-8",
    )

    state = load_app_state()
    assert state["version"] == CURRENT_CONFIG_VERSION
    assert state["last_session"]["pattern"] == "*.py"
    assert state["last_session"]["follow_symlinks"] is True


def test_save_and_load_roundtrip(mock_config_path):
    conf = get_default_config()
    conf["pattern"] = "*.log"
    conf["recursive"] = False

    save_config(conf)

    assert mock_config_path.exists()
    on_disk = json.loads(mock_config_path.read_text(encoding="utf-8"))
    assert on_disk["version"] == CURRENT_CONFIG_VERSION
    assert on_disk["last_session"]["pattern"] == "*.log"

    loaded = load_config()
    assert loaded["pattern"] == "*.log"
    assert loaded["recursive"] is False
