"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing to the catalog service
- Output formatting and error reporting
"""
import argparse
import sys
from typing import Any, Callable, Dict, List, Optional

from gof_patterns._package import DESCRIPTION, PACKAGE_NAME, __version__
from gof_patterns.application.catalog_service import CatalogService
from gof_patterns.cli.formatters import format_output
from gof_patterns.config.manager import ConfigurationManager
from gof_patterns.config.schemas import VALID_LOG_LEVELS, VALID_OUTPUT_FORMATS
from gof_patterns.domain.catalog import PatternCategory
from gof_patterns.infrastructure.error import ErrorMiddleware
from gof_patterns.infrastructure.logging.logger import get_logger, setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with global options and sub-commands."""
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List every pattern
  %(prog)s list --category structural        # List structural patterns
  %(prog)s show "Chain of Responsibility"    # Describe a pattern
  %(prog)s run adapter --variant analytics   # Run one demo
  %(prog)s run proxy --all-variants          # Run every demo of a pattern
  %(prog)s --format table run-all            # Summarize every demo
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument(
        "--log-level", choices=VALID_LOG_LEVELS, type=str.upper, help="Set logging level"
    )
    parser.add_argument("--format", choices=VALID_OUTPUT_FORMATS, help="Output format")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    categories = [c.value for c in PatternCategory]
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List patterns")
    list_parser.add_argument("--category", choices=categories, help="Filter by category")

    show_parser = subparsers.add_parser("show", help="Show pattern details")
    show_parser.add_argument("pattern", help="Pattern name, e.g. factory-method")

    run_parser = subparsers.add_parser("run", help="Run a pattern demo")
    run_parser.add_argument("pattern", help="Pattern name")
    variant_group = run_parser.add_mutually_exclusive_group()
    variant_group.add_argument("--variant", help="Demo variant to run")
    variant_group.add_argument(
        "--all-variants", action="store_true", help="Run every variant of the pattern"
    )

    run_all_parser = subparsers.add_parser("run-all", help="Run every demo")
    run_all_parser.add_argument("--category", choices=categories, help="Filter by category")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def _list(service: CatalogService, args: argparse.Namespace) -> Dict[str, Any]:
    return {"patterns": [info.model_dump(mode="json") for info in service.list_patterns(args.category)]}


def _show(service: CatalogService, args: argparse.Namespace) -> Dict[str, Any]:
    return {"pattern": service.describe(args.pattern)}


def _run(service: CatalogService, args: argparse.Namespace) -> Dict[str, Any]:
    if args.all_variants:
        results = service.run_variants(args.pattern)
    else:
        results = [service.run(args.pattern, args.variant)]
    return {"results": [result.model_dump(mode="json") for result in results]}


def _run_all(service: CatalogService, args: argparse.Namespace) -> Dict[str, Any]:
    return {"results": [result.model_dump(mode="json") for result in service.run_all(args.category)]}


COMMAND_HANDLERS: Dict[str, Callable[[CatalogService, argparse.Namespace], Dict[str, Any]]] = {
    "list": _list,
    "show": _show,
    "run": _run,
    "run-all": _run_all,
}


def execute_command(args: argparse.Namespace) -> int:
    """
    Load configuration, execute the selected command and print its result.

    Args:
        args: Parsed command line arguments

    Returns:
        Process exit code
    """
    config_manager = ConfigurationManager(args.config)
    logging_config = config_manager.logging
    if args.log_level:
        logging_config = logging_config.model_copy(update={"level": args.log_level})
    setup_logging(logging_config)

    logger = get_logger(__name__)
    catalog_config = config_manager.catalog
    output_format = args.format or catalog_config.default_format

    service = CatalogService(config=catalog_config)
    logger.debug("Executing command", command=args.command, output_format=output_format)
    result = COMMAND_HANDLERS[args.command](service, args)

    print(format_output(result, output_format, show_banner=catalog_config.show_banner))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point; returns the exit code."""
    args = parse_args(argv)

    if not args.command:
        build_parser().print_help(sys.stderr)
        return 1

    try:
        return ErrorMiddleware().wrap_script_handler(execute_command)(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
