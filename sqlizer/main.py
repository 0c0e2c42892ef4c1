"""Entry point for the sqlizer command."""

from __future__ import annotations

import sys

from .cli import create_parser, handle_config_command, handle_generate_command
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the requested command.

    Args:
        argv: Command line arguments (default: sys.argv[1:]).

    Returns:
        Process exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)
    logger.debug("Arguments: %s", args)

    if args.command == "config":
        return handle_config_command(args)
    if args.command == "generate":
        return handle_generate_command(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
