from __future__ import annotations

"""
Unit tests for Command Result Data Models.
"""

import dataclasses

import pytest

from fstree.domain.node_models import Node, NodeKind
from fstree.domain.result_models import (
    CommandResult,
    create_error_result,
    create_success_result,
)


def test_error_result_defaults():
    result = create_error_result("boom", "walk", "/r", {"elapsed": 0.1})

    assert result.ok is False
    assert result.error == "boom"
    assert result.command == "walk"
    assert result.nodes == []
    assert result.total_size is None
    assert result.equal is None
    assert result.summary == {"elapsed": 0.1}


def test_success_result_serializes_nodes():
    root = Node(path="/r", kind=NodeKind.DIRECTORY, size=64)
    child = Node(path="/r/a.txt", kind=NodeKind.FILE, size=5, parent=root)

    result = create_success_result("walk", "/r", nodes=[root, child])

    assert result.ok is True
    assert result.error == ""
    assert [n["path"] for n in result.nodes] == ["/r", "/r/a.txt"]
    assert result.nodes[1]["parent"] == "/r"
    assert result.nodes[1]["kind"] == "file"


def test_success_result_payloads():
    size_result = create_success_result("size", "/r", total_size=128)
    cmp_result = create_success_result("compare", "/r", equal=False)
    tree_result = create_success_result("tree", "/r", lines=["r/", "└── a"])

    assert size_result.total_size == 128
    assert cmp_result.equal is False
    assert tree_result.lines == ["r/", "└── a"]


def test_result_is_immutable():
    result = create_success_result("walk", "/r")
    assert isinstance(result, CommandResult)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.ok = False  # type: ignore[misc]
