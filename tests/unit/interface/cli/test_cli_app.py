from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs main() in-process against temporary trees. Logging bootstrap is
patched out so the global logging state is left untouched, and the
persisted session lives in a temp directory.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from fstree.interface.cli.app import _merge_config, main


@pytest.fixture(autouse=True)
def logging_bootstrap():
    with patch("fstree.interface.cli.app.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture(autouse=True)
def config_file(tmp_path: Path):
    """Redirect the persisted session into a temp directory."""
    target = tmp_path / "fstree_home" / "config.json"
    with patch("fstree.domain.config.get_config_path", return_value=str(target)):
        yield target


def _run(argv, capsys):
    code = main(["--use-defaults", *argv])
    out, err = capsys.readouterr()
    return code, out, err


def test_walk_lists_every_entry(sample_tree: Path, capsys):
    code, out, _ = _run(["-i", str(sample_tree)], capsys)

    assert code == 0
    assert f"{sample_tree}/" in out
    assert str(sample_tree / "sub" / "b.txt") in out
    assert "3 directories, 2 files" in out


def test_tree_renders_connectors(sample_tree: Path, capsys):
    code, out, _ = _run(["-i", str(sample_tree), "--tree"], capsys)

    assert code == 0
    assert out.splitlines()[0] == "R/"
    assert "└── sub2/" in out


def test_size_raw_bytes(sample_tree: Path, capsys):
    code, out, _ = _run(["-i", str(sample_tree), "--size", "--files-only", "--bytes"], capsys)

    assert code == 0
    assert out.strip() == "8"


def test_search_recursive_and_flat(sample_tree: Path, capsys):
    code, out, _ = _run(["-i", str(sample_tree), "--search", "*.txt"], capsys)
    assert code == 0
    assert "2 match(es) for '*.txt'" in out

    code, out, _ = _run(["-i", str(sample_tree), "--search", "*.txt", "--no-recursive"], capsys)
    assert code == 0
    assert "1 match(es) for '*.txt'" in out
    assert "b.txt" not in out


def test_compare_exit_codes(tmp_path: Path, capsys):
    (tmp_path / "a").write_bytes(b"same")
    (tmp_path / "b").write_bytes(b"same")
    (tmp_path / "c").write_bytes(b"diff")

    code, out, _ = _run(["--compare", str(tmp_path / "a"), str(tmp_path / "b")], capsys)
    assert code == 0
    assert out.startswith("EQUAL:")

    code, out, _ = _run(["--compare", str(tmp_path / "a"), str(tmp_path / "c")], capsys)
    assert code == 1
    assert out.startswith("DIFFERENT:")


def test_missing_root_returns_2(tmp_path: Path, capsys):
    code, _, err = _run(["-i", str(tmp_path / "nope")], capsys)
    assert code == 2
    assert "does not exist" in err


def test_core_failure_returns_1(sample_tree: Path, capsys):
    def denied(path):
        raise PermissionError(13, "Permission denied", path)

    with patch("fstree.infra.fs.os.listdir", side_effect=denied):
        code, _, err = _run(["-i", str(sample_tree)], capsys)

    assert code == 1
    assert "Permission denied" in err


def test_json_output(sample_tree: Path, capsys):
    code, out, _ = _run(["-i", str(sample_tree), "--json"], capsys)
    payload = json.loads(out)

    assert code == 0
    assert payload["ok"] is True
    assert payload["command"] == "walk"
    assert len(payload["nodes"]) == 5
    assert payload["nodes"][0]["parent"] is None


def test_dump_config(sample_tree: Path, capsys):
    code, out, _ = _run(["-i", str(sample_tree), "--dump-config", "--no-recursive"], capsys)
    conf = json.loads(out)

    assert code == 0
    assert conf["root_path"] == str(sample_tree)
    assert conf["recursive"] is False


def test_merge_config_ignores_unknown_keys():
    merged = _merge_config({"pattern": "*"}, {"pattern": "*.py", "evil": 1, "recursive": None})
    assert merged["pattern"] == "*.py"
    assert "evil" not in merged
    assert "recursive" not in merged


def test_tree_show_size(sample_tree: Path, capsys):
    code, out, _ = _run(["-i", str(sample_tree), "--tree", "--show-size"], capsys)

    assert code == 0
    assert "├── a.txt (5 B)" in out
    assert "b.txt (3 B)" in out

# -----------------------------------------------------------------------------
# LOGGING LEVEL AND SESSION PERSISTENCE
# -----------------------------------------------------------------------------

def test_persisted_log_level_is_applied(sample_tree: Path, config_file: Path, logging_bootstrap, capsys):
    config_file.parent.mkdir(parents=True)
    config_file.write_text(
        json.dumps({"last_session": {"log_level": "info", "root_path": str(sample_tree)}}),
        encoding="utf-8",
    )

    code = main([])
    capsys.readouterr()

    assert code == 0
    cfg = logging_bootstrap.call_args.args[0]
    assert cfg.level == "INFO"
    assert logging_bootstrap.call_args.kwargs == {"force": True}


def test_debug_flag_wins_over_config_level(sample_tree: Path, logging_bootstrap, capsys):
    code, _, _ = _run(["-i", str(sample_tree), "--debug"], capsys)

    assert code == 0
    assert [c.args[0].level for c in logging_bootstrap.call_args_list] == ["DEBUG"]


def test_successful_run_becomes_last_session(sample_tree: Path, config_file: Path, capsys):
    assert main(["-i", str(sample_tree), "--search", "*.txt", "--no-recursive"]) == 0
    capsys.readouterr()

    saved = json.loads(config_file.read_text(encoding="utf-8"))["last_session"]
    assert saved["root_path"] == str(sample_tree)
    assert saved["pattern"] == "*.txt"
    assert saved["recursive"] is False

    # No -i: the root comes from the last session
    assert main(["--tree"]) == 0
    out, _ = capsys.readouterr()
    assert out.splitlines()[0] == "R/"


def test_failed_or_default_runs_are_not_persisted(tmp_path: Path, sample_tree: Path, config_file: Path, capsys):
    assert main(["-i", str(tmp_path / "missing")]) == 2
    assert _run(["-i", str(sample_tree)], capsys)[0] == 0
    capsys.readouterr()

    assert not config_file.exists()
