from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the fstree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="fstree",
        description="Materialize, measure, search and compare filesystem trees.",
    )

    p.add_argument(
        "-i", "--input",
        dest="root_path",
        default=None,
        help="Root directory (or file) to operate on. Defaults to the last session, then CWD.",
    )

    # --- Actions (walk is the default) ---
    actions = p.add_mutually_exclusive_group()
    actions.add_argument(
        "--walk",
        action="store_true",
        help="List every entry reachable from the root in pre-order.",
    )
    actions.add_argument(
        "--tree",
        action="store_true",
        help="Render the walk as an ASCII tree.",
    )
    actions.add_argument(
        "--size",
        action="store_true",
        help="Print the aggregate size of everything under the root.",
    )
    actions.add_argument(
        "--search",
        dest="pattern",
        metavar="PATTERN",
        default=None,
        help="Find entries whose name matches a glob (* and ?).",
    )
    actions.add_argument(
        "--compare",
        nargs=2,
        metavar=("FILE_A", "FILE_B"),
        default=None,
        help="Compare two files byte for byte.",
    )

    # --- Traversal modifiers ---
    p.add_argument(
        "--no-recursive",
        action="store_true",
        help="Search only the direct children of the root.",
    )
    p.add_argument(
        "--files-only",
        action="store_true",
        help="Exclude directory entry sizes from --size.",
    )
    p.add_argument(
        "--no-follow-symlinks",
        action="store_true",
        help="Report symbolic links as opaque files instead of resolving them.",
    )
    p.add_argument(
        "--show-size",
        action="store_true",
        help="Append file sizes to --tree entries.",
    )
    p.add_argument(
        "--bytes",
        action="store_true",
        help="Print raw byte counts instead of human-readable sizes.",
    )

    # --- Configuration and diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted session and do not update it.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only flags the user actually set produce a key, so persisted values
    survive for everything else.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.root_path:
        overrides["root_path"] = args.root_path
    if args.pattern:
        overrides["pattern"] = args.pattern

    if args.no_recursive:
        overrides["recursive"] = False
    if args.no_follow_symlinks:
        overrides["follow_symlinks"] = False
    if args.files_only:
        overrides["files_only_size"] = True
    if args.bytes:
        overrides["human_readable"] = False
    return overrides


def resolve_command(args: argparse.Namespace) -> str:
    """Name of the action selected on the command line."""
    if args.compare:
        return "compare"
    if args.pattern:
        return "search"
    if args.size:
        return "size"
    if args.tree:
        return "tree"
    return "walk"
