from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults, persisted session, command-line overrides), execution of one core
operation and rendering of its result. The CLI holds no traversal logic of
its own; every action delegates to fstree.core.
"""

import asyncio
import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fstree.core.aggregator import sum_sizes, total_size
from fstree.core.comparator import is_equal
from fstree.core.matcher import search
from fstree.core.render import format_size, render_nodes
from fstree.core.validator import validate_config
from fstree.core.walker import walk
from fstree.domain.config import get_default_config, load_config, save_config
from fstree.domain.errors import FsTreeError
from fstree.domain.node_models import Node
from fstree.domain.result_models import (
    CommandResult,
    create_error_result,
    create_success_result,
)
from fstree.infra.fs import astat_path
from fstree.infra.logging import LoggingConfig, configure_logging, get_logger
from fstree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional argument list. Defaults to sys.argv.

    Returns:
        int: 0 on success (and equality for --compare), 1 on failure or
             difference, 2 if the input path does not exist, 130 on interrupt.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Logging bootstrap (console on stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 2. Configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # Re-apply logging with the resolved level; --debug wins over the config
    if not args.debug:
        configure_logging(
            LoggingConfig(level=conf["log_level"], console=True, log_file=args.log_file),
            force=True,
        )

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return 0

    command = cli_args.resolve_command(args)
    root_path = conf["root_path"]

    # 3. Pre-flight input verification
    targets = list(args.compare) if command == "compare" else [root_path]
    for target in targets:
        if not os.path.exists(target):
            logger.error(f"Path does not exist: {target}")
            print(f"ERROR: Path does not exist: {target}", file=sys.stderr)
            return 2

    # 4. Execution
    logger.debug(f"Running '{command}' on: {', '.join(targets)}")
    try:
        result = asyncio.run(_execute(command, conf, args.compare, args.show_size))
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    except FsTreeError as e:
        logger.error(f"{command} failed: {e}")
        result = create_error_result(str(e), command, root_path, {"path": e.path})

    # 5. Rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, conf)

    # 6. Session persistence (only successful runs become the last session)
    if result.ok and not args.use_defaults:
        save_config(conf)

    if not result.ok:
        return 1
    if result.equal is False:
        return 1
    return 0

# -----------------------------------------------------------------------------
# COMMAND DISPATCH
# -----------------------------------------------------------------------------

async def _execute(
        command: str,
        conf: Dict[str, Any],
        compare: Optional[List[str]],
        show_size: bool = False,
) -> CommandResult:
    """Run one core operation and wrap its outcome."""
    root = conf["root_path"]
    follow = conf["follow_symlinks"]

    if command == "compare" and compare:
        a = Node.from_metadata(await astat_path(compare[0], follow))
        b = Node.from_metadata(await astat_path(compare[1], follow))
        equal = await is_equal(a, b)
        return create_success_result(command, root, nodes=[a, b], equal=equal)

    if command == "search":
        matches = await search(root, conf["pattern"], conf["recursive"], follow_symlinks=follow)
        return create_success_result(
            command, root, nodes=matches,
            summary_extra={"pattern": conf["pattern"], "recursive": conf["recursive"]},
        )

    if command == "size":
        if conf["files_only_size"]:
            size = sum_sizes(await walk(root, follow_symlinks=follow), files_only=True)
        else:
            size = await total_size(root, follow_symlinks=follow)
        return create_success_result(
            command, root, total_size=size,
            summary_extra={"files_only": conf["files_only_size"]},
        )

    nodes = await walk(root, follow_symlinks=follow)
    summary = {
        "files": sum(1 for n in nodes if n.is_file),
        "directories": sum(1 for n in nodes if n.is_dir),
    }
    if command == "tree":
        return create_success_result(
            command, root, lines=render_nodes(nodes, show_size), summary_extra=summary,
        )
    return create_success_result(command, root, nodes=nodes, summary_extra=summary)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge overrides into the base configuration.

    Only known keys are merged so external input cannot add new ones.
    """
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: CommandResult, conf: Dict[str, Any]) -> None:
    """Print a CommandResult as plain text on stdout (errors on stderr)."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.command == "compare":
        a, b = result.nodes[0]["path"], result.nodes[1]["path"]
        verdict = "EQUAL" if result.equal else "DIFFERENT"
        print(f"{verdict}: {a} <-> {b}")
        return

    if result.command == "size":
        size = result.total_size or 0
        print(format_size(size) if conf["human_readable"] else size)
        return

    if result.command == "tree":
        print("\n".join(result.lines))
    else:
        for node in result.nodes:
            suffix = "/" if node["kind"] == "directory" else ""
            print(f"{node['path']}{suffix}")

    if result.command == "search":
        print(f"\n{len(result.nodes)} match(es) for '{result.summary.get('pattern')}'")
    else:
        print(
            f"\n{result.summary.get('directories', 0)} directories, "
            f"{result.summary.get('files', 0)} files"
        )

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
