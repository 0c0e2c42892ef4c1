"""
Command-line interface for sqlizer.

Builds the argparse parser and handles the ``config`` and ``generate``
commands. Handlers return process exit codes.
"""

import argparse
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table
from rich import box

from . import __version__
from .codegen import (
    GoFormatter,
    OutputWriter,
    build_generated_type,
    create_go_generator,
    generate_code,
)
from .config import ConfigError, ConfigManager
from .database import SchemaReader
from .errors import (
    DatabaseConnectionError,
    ImportNormalizationError,
    SqlizerError,
)
from .interactive import ConfigInitHandler
from .logging_config import get_logger

logger = get_logger(__name__)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="sqlizer",
        description="sqlizer generates Go types from your SQL Server database objects",
        epilog="For a full list of subcommands, run: sqlizer --help",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="config file (default: ~/.sqlizer.json)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    config_parser = subparsers.add_parser(
        "config",
        help="Manage sqlizer config",
        description="config contains commands for quickly interacting with "
        "and changing your config",
    )
    config_subparsers = config_parser.add_subparsers(
        dest="config_command", metavar="ACTION"
    )
    config_subparsers.add_parser("init", help="initializes sqlizer config")
    config_subparsers.add_parser("show", help="shows the active sqlizer config")

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a Go type from the structure of a database table",
        description="Look up a table in your database and generate a Go type "
        "representing it. For example: sqlizer generate -d YourDatabase -t YourTable",
    )
    generate_parser.add_argument(
        "--database", "-d", required=True, help="the database name"
    )
    generate_parser.add_argument(
        "--table", "-t", required=True, help="the target table"
    )
    generate_parser.add_argument(
        "--output-dir",
        "-o",
        metavar="DIR",
        default=".",
        help="directory to create the table directory in (default: current directory)",
    )
    generate_parser.add_argument(
        "--package",
        "-p",
        metavar="NAME",
        help="Go package name (default: derived from the table name)",
    )
    generate_parser.add_argument(
        "--no-comments",
        action="store_true",
        help="don't generate a doc comment on the struct",
    )
    generate_parser.add_argument(
        "--show",
        action="store_true",
        help="print the generated code after writing it",
    )

    return parser


def handle_config_command(args: argparse.Namespace) -> int:
    """Dispatch ``config`` subcommands."""
    manager = ConfigManager(args.config)

    if args.config_command == "init":
        return ConfigInitHandler(manager, console, err_console).run()
    if args.config_command == "show":
        return _show_config(manager)

    err_console.print("[red]Missing config action: use 'init' or 'show'[/red]")
    return 2


def _show_config(manager: ConfigManager) -> int:
    try:
        params = manager.load_connection_params()
    except ConfigError as e:
        err_console.print(f"[red]While loading config: {escape(str(e))}[/red]")
        return 1

    source = (
        str(manager.config_path) if manager.exists() else "environment only"
    )
    table = Table(title=f"sqlizer config ({source})", box=box.ROUNDED)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for key, value in params.masked().items():
        table.add_row(f"server.{key}", str(value))
    console.print(table)
    return 0


def handle_generate_command(
    args: argparse.Namespace,
    reader: Optional[SchemaReader] = None,
    writer: Optional[OutputWriter] = None,
) -> int:
    """
    Handle the ``generate`` command.

    Args:
        args: Parsed command line arguments
        reader: Schema reader (default: pyodbc-backed reader)
        writer: Output writer (default: gofmt/goimports into args.output_dir)

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        params = ConfigManager(args.config).load_connection_params()
    except ConfigError as e:
        err_console.print(f"[red]While loading config: {escape(str(e))}[/red]")
        return 1

    reader = reader or SchemaReader()
    writer = writer or OutputWriter(GoFormatter(), base_dir=Path(args.output_dir))

    try:
        columns = reader.read_columns(params, args.database, args.table)
    except DatabaseConnectionError as e:
        return _report("While connecting to database server", e)
    except SqlizerError as e:
        return _report("While reading database table", e)

    generated_type = build_generated_type(args.table, columns)
    generator = create_go_generator(
        {"package_name": args.package, "add_comments": not args.no_comments}
    )

    try:
        result = generate_code(generator, generated_type)
    except SqlizerError as e:
        return _report("While generating code", e)

    for warning in result.warnings:
        err_console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")

    try:
        path = writer.write(result.code, generated_type.table_name)
    except ImportNormalizationError as e:
        _report("While writing generated code", e)
        if e.path is not None:
            err_console.print(
                f"[yellow]{escape(str(e.path))} was written but its imports were not normalized[/yellow]"
            )
        return 1
    except SqlizerError as e:
        return _report("While writing generated code", e)

    console.print(
        f"[green]Generated {generator.resolve_package_name(args.table)}."
        f"{generated_type.table_name} with {len(generated_type.attributes)} "
        f"fields in {path}[/green]"
    )

    if getattr(args, "show", False):
        code = path.read_text(encoding="utf-8")
        console.print(Syntax(code, "go", theme="monokai", line_numbers=True))

    return 0


def _report(phase: str, error: Exception) -> int:
    err_console.print(f"[red]{phase}:[/red] {escape(str(error))}", highlight=False)
    logger.debug("%s failed", phase, exc_info=error)
    return 1
