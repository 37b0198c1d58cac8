from __future__ import annotations

"""
Tree Renderer.

Converts a flat walk result into a visual ASCII tree. The hierarchy is
recovered from the parent back-references alone; sibling order follows the
walk order.
"""

from typing import Dict, List, Sequence

from fstree.domain.node_models import Node

_UNITS = ("B", "KB", "MB", "GB", "TB")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_nodes(nodes: Sequence[Node], show_size: bool = False) -> List[str]:
    """
    Render a walk result as indented ASCII lines.

    Uses standard connectors (├──, └──). The first Node is taken as the root;
    a Node whose parent is not part of the sequence is not rendered.

    Args:
        nodes: Pre-order walk result.
        show_size: Append a human-readable size to file entries.

    Returns:
        List[str]: Visual lines, root first.
    """
    if not nodes:
        return []

    children: Dict[str, List[Node]] = {}
    for node in nodes[1:]:
        if node.parent is not None:
            children.setdefault(node.parent.path, []).append(node)

    root = nodes[0]
    lines = [_label(root, show_size)]
    _render_level(root, children, lines, "", show_size)
    return lines


def format_size(size: int) -> str:
    """Format a byte count with a binary unit suffix (e.g. ``1.5 KB``)."""
    value = float(size)
    for unit in _UNITS:
        if value < 1024 or unit == _UNITS[-1]:
            if unit == "B":
                return f"{int(value)} B"
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{size} B"

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_level(
        directory: Node,
        children: Dict[str, List[Node]],
        lines: List[str],
        prefix: str,
        show_size: bool,
) -> None:
    entries = children.get(directory.path, [])
    total = len(entries)

    for i, node in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_label(node, show_size)}")

        if node.is_dir:
            new_prefix = prefix + ("    " if is_last else "│   ")
            _render_level(node, children, lines, new_prefix, show_size)


def _label(node: Node, show_size: bool) -> str:
    if node.is_dir:
        return f"{node.name}/"
    if show_size:
        return f"{node.name} ({format_size(node.size)})"
    return node.name
