"""schemafs CLI entry points.

This module exposes read-only commands over the embedded schema assets.
It maps argparse commands onto AssetFileSystem calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import SchemaFsConfig
from core.constants import DEFAULT_READDIR_COUNT, ROOT_PATH, SUPPORTED_LOG_LEVELS
from core.errors import EndOfListing, SchemaFsError
from core.logging_config import configure_logging
from core.types import AssetStat
from vfs.filesystem import AssetFileSystem


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="schemafs", description="Embedded schema asset CLI")
    parser.add_argument(
        "--local",
        action="store_true",
        default=None,
        help="Serve loose source files instead of embedded payloads",
    )
    parser.add_argument("--local-root", help="Override SCHEMAFS_LOCAL_ROOT for this command")
    parser.add_argument("--mount", help="Expose this table prefix as the root")
    parser.add_argument("--table", help="Load an external JSON or YAML asset table")
    parser.add_argument("--log-level", choices=SUPPORTED_LOG_LEVELS, help="Log level")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_ls_command(subparsers)
    _add_cat_command(subparsers)
    _add_stat_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the schemafs CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _build_config(args)
    configure_logging(config.log_level)
    try:
        filesystem = AssetFileSystem(config)
        if args.command == "ls":
            return _run_ls_command(filesystem, args)
        if args.command == "cat":
            return _run_cat_command(filesystem, args)
        if args.command == "stat":
            return _run_stat_command(filesystem, args)
    except SchemaFsError as error:
        print(f"error={error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(args: argparse.Namespace) -> SchemaFsConfig:
    """Apply CLI overrides on top of environment config.

    Args:
        args: Parsed CLI args.

    Returns:
        Effective configuration.
    """
    config = SchemaFsConfig.from_env()
    if args.table:
        table_path = Path(args.table).expanduser().resolve()
        config = replace(config, table_path=table_path, local_root=table_path.parent)
    if args.local_root:
        config = replace(config, local_root=Path(args.local_root).expanduser().resolve())
    if args.local is not None:
        config = replace(config, use_local=args.local)
    if args.mount is not None:
        config = replace(config, mount_name=args.mount)
    if args.log_level:
        config = replace(config, log_level=args.log_level)
    return config


def _run_ls_command(filesystem: AssetFileSystem, args: argparse.Namespace) -> int:
    """Handle ls command.

    Args:
        filesystem: Asset filesystem.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    try:
        entries = filesystem.listdir(args.path, args.count)
    except EndOfListing:
        return 0
    for entry in entries:
        print(_format_stat(entry))
    return 0


def _run_cat_command(filesystem: AssetFileSystem, args: argparse.Namespace) -> int:
    """Handle cat command by writing asset content as UTF-8 text."""
    content = filesystem.read_bytes(args.path)
    sys.stdout.write(content.decode("utf-8", errors="replace"))
    sys.stdout.flush()
    return 0


def _run_stat_command(filesystem: AssetFileSystem, args: argparse.Namespace) -> int:
    """Handle stat command."""
    print(_format_stat(filesystem.stat(args.path)))
    return 0


def _format_stat(entry: AssetStat) -> str:
    kind = "d" if entry.is_directory else "-"
    return f"{kind}\t{entry.size}\t{entry.modified_at.isoformat()}\t{entry.name}"


def _add_ls_command(subparsers: Any) -> None:
    """Register ls subcommand."""
    parser = subparsers.add_parser("ls", help="List a directory")
    parser.add_argument("path", nargs="?", default=ROOT_PATH, help="Directory path")
    parser.add_argument(
        "--count",
        type=int,
        default=DEFAULT_READDIR_COUNT,
        help="Maximum entries; 0 lists everything",
    )


def _add_cat_command(subparsers: Any) -> None:
    """Register cat subcommand."""
    parser = subparsers.add_parser("cat", help="Print an asset's content")
    parser.add_argument("path", help="Asset path")


def _add_stat_command(subparsers: Any) -> None:
    """Register stat subcommand."""
    parser = subparsers.add_parser("stat", help="Show asset file information")
    parser.add_argument("path", help="Asset path")
