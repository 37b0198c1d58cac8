from __future__ import annotations

"""
Command Result Data Models.

Carries the outcome of one CLI command from the core operations to the
rendering layer (human summary or JSON).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from fstree.domain.node_models import Node

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a CLI command.

    Attributes:
        ok: Whether the command completed without error.
        error: Failure description (empty on success).
        command: Executed action (walk, tree, size, search, compare).
        root_path: Normalized root the command targeted.
        nodes: Serialized Nodes produced by the command.
        lines: Rendered tree lines (tree command only).
        total_size: Aggregated size (size command only).
        equal: Comparison verdict (compare command only).
        summary: Free-form execution metadata.
    """
    ok: bool
    error: str
    command: str
    root_path: str

    nodes: List[Dict[str, Any]] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)
    total_size: Optional[int] = None
    equal: Optional[bool] = None

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        command: str,
        root_path: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> CommandResult:
    """
    Create a failed command result.

    Args:
        error: Failure description.
        command: Action that failed.
        root_path: Targeted root.
        summary_extra: Additional metadata.

    Returns:
        CommandResult: Immutable error result.
    """
    return CommandResult(
        ok=False,
        error=error,
        command=command,
        root_path=root_path,
        summary=summary_extra or {},
    )


def create_success_result(
        command: str,
        root_path: str,
        nodes: Optional[Sequence[Node]] = None,
        lines: Optional[List[str]] = None,
        total_size: Optional[int] = None,
        equal: Optional[bool] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> CommandResult:
    """
    Create a successful command result.

    Nodes are serialized here so the result stays JSON-friendly and holds no
    live parent references.

    Returns:
        CommandResult: Immutable success result.
    """
    return CommandResult(
        ok=True,
        error="",
        command=command,
        root_path=root_path,
        nodes=[n.to_dict() for n in nodes or []],
        lines=lines or [],
        total_size=total_size,
        equal=equal,
        summary=summary_extra or {},
    )
