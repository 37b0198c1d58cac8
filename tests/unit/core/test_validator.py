from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.

Verifies type coercion, default filling, path normalization and the
strict-mode failures.
"""

import os
from typing import Any, Dict

import pytest

from fstree.core.validator import validate_config
from fstree.domain.config import get_default_config


def test_valid_config_passes_unchanged(mock_config_dict: Dict[str, Any]) -> None:
    conf, warnings = validate_config(mock_config_dict)

    assert warnings == []
    assert conf["pattern"] == "*.txt"
    assert conf["log_level"] == "INFO"
    assert conf["root_path"] == os.path.abspath("/tmp/test_root")


def test_missing_keys_are_filled_from_defaults() -> None:
    conf, warnings = validate_config({"pattern": "*.md"})
    defaults = get_default_config()

    assert warnings == []
    assert conf["pattern"] == "*.md"
    for key in ("recursive", "follow_symlinks", "files_only_size", "human_readable"):
        assert conf[key] == defaults[key]


def test_non_dict_input_returns_defaults() -> None:
    conf, warnings = validate_config(["not", "a", "dict"])
    assert conf["pattern"] == get_default_config()["pattern"]
    assert len(warnings) == 1
    assert "Invalid config type" in warnings[0]


@pytest.mark.parametrize("raw, expected", [
    ("yes", True), ("ON", True), ("1", True), (1, True),
    ("no", False), ("off", False), ("0", False), (0, False),
])
def test_bool_coercion(raw: Any, expected: bool) -> None:
    conf, warnings = validate_config({"recursive": raw})
    assert conf["recursive"] is expected
    assert len(warnings) == 1


def test_invalid_bool_falls_back() -> None:
    conf, warnings = validate_config({"follow_symlinks": "maybe"})
    assert conf["follow_symlinks"] is True
    assert any("follow_symlinks" in w for w in warnings)


def test_invalid_string_falls_back() -> None:
    conf, warnings = validate_config({"pattern": 42})
    assert conf["pattern"] == "*"
    assert any("pattern" in w for w in warnings)


def test_blank_root_path_uses_default() -> None:
    conf, _ = validate_config({"root_path": "   "})
    assert conf["root_path"] == os.path.abspath(os.getcwd())


def test_root_path_expands_user_home() -> None:
    conf, _ = validate_config({"root_path": "~/data"})
    assert conf["root_path"] == os.path.abspath(os.path.expanduser("~/data"))


def test_log_level_is_uppercased() -> None:
    conf, warnings = validate_config({"log_level": "debug"})
    assert conf["log_level"] == "DEBUG"
    assert warnings == []


def test_unknown_log_level_falls_back() -> None:
    conf, warnings = validate_config({"log_level": "LOUD"})
    assert conf["log_level"] == "WARNING"
    assert any("LOUD" in w for w in warnings)


def test_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("bad", strict=True)
    with pytest.raises(TypeError):
        validate_config({"recursive": "yes"}, strict=True)
    with pytest.raises(TypeError):
        validate_config({"pattern": 3}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"log_level": "LOUD"}, strict=True)
