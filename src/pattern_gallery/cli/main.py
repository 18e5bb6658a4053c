"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the application composition root
"""
import argparse
import os
import sys
import traceback
from typing import Any, Callable, Dict, List, Optional

from pattern_gallery._version import __version__
from pattern_gallery.application.catalog import PatternCategory
from pattern_gallery.bootstrap import Application, create_application
from pattern_gallery.cli.formatters import format_output
from pattern_gallery.config.schemas import OUTPUT_FORMATS
from pattern_gallery.domain.core.exceptions import DomainException
from pattern_gallery.infrastructure.logging.logger import get_logger

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "pattern-gallery",
        description="Pattern Gallery - runnable demonstrations of classic design patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List all pattern demos
  %(prog)s list --category structural        # List structural patterns only
  %(prog)s show proxy                        # Show details of one pattern
  %(prog)s run composite flyweight           # Run selected demos
  %(prog)s run --all --format table          # Run every demo, tabulated
  %(prog)s config show --format yaml         # Show effective configuration
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Set logging level")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format")
    parser.add_argument("--output", help="Output file (default: stdout)")
    parser.add_argument("--quiet", action="store_true", help="Suppress non-essential output")
    parser.add_argument("--verbose", action="store_true", help="Show tracebacks on errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # list
    list_parser = subparsers.add_parser("list", help="List pattern demos")
    list_parser.add_argument(
        "--category", choices=[c.value for c in PatternCategory], help="Filter by pattern category"
    )
    list_parser.add_argument("--format", dest="command_format", choices=OUTPUT_FORMATS, help="Output format")

    # show
    show_parser = subparsers.add_parser("show", help="Show pattern demo details")
    show_parser.add_argument("name", help="Pattern demo name")
    show_parser.add_argument("--format", dest="command_format", choices=OUTPUT_FORMATS, help="Output format")

    # run
    run_parser = subparsers.add_parser("run", help="Run pattern demos")
    run_parser.add_argument("names", nargs="*", help="Pattern demo names to run")
    run_parser.add_argument("--all", action="store_true", help="Run every registered demo")
    run_parser.add_argument("--format", dest="command_format", choices=OUTPUT_FORMATS, help="Output format")

    # config
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="action", help="Config actions")
    config_show = config_subparsers.add_parser("show", help="Show effective configuration")
    config_show.add_argument("--format", dest="command_format", choices=OUTPUT_FORMATS, help="Output format")

    return parser.parse_args(argv)


def handle_list(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    category = PatternCategory(args.category) if args.category else None
    return {"patterns": [demo.describe() for demo in app.catalog.list_demos(category)]}


def handle_show(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    return {"pattern": app.catalog.get(args.name).describe()}


def handle_run(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    names = app.catalog.names() if args.all else args.names
    results = app.run_demos(names)
    return {"results": [result.model_dump(mode="json") for result in results]}


def handle_config_show(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    return {"config": app.config.model_dump(mode="json")}


COMMAND_HANDLERS: Dict[tuple, Callable[[argparse.Namespace, Application], Dict[str, Any]]] = {
    ("list", None): handle_list,
    ("show", None): handle_show,
    ("run", None): handle_run,
    ("config", "show"): handle_config_show,
}


def execute_command(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler_key = (args.command, getattr(args, "action", None))
    handler = COMMAND_HANDLERS.get(handler_key)
    if handler is None:
        raise ValueError(f"Unknown command: {' '.join(str(part) for part in handler_key if part)}")
    return handler(args, app)


def _validate_args(args: argparse.Namespace) -> Optional[str]:
    if not args.command:
        return "No command specified. Use --help for usage information."
    if args.command == "config" and not args.action:
        return "No action specified for config. Use --help for usage information."
    if args.command == "run" and args.all and args.names:
        return "Pattern demo names cannot be combined with --all."
    if args.command == "run" and not args.all and not args.names:
        return "No pattern demos specified. Name one or more demos or use --all."
    return None


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)
        logger = get_logger(__name__)

        # Validate required arguments
        error = _validate_args(args)
        if error:
            print(f"Error: {error}")
            sys.exit(1)

        # Initialize application
        try:
            app = create_application(args.config, log_level=args.log_level)
        except Exception as e:
            logger.error("Failed to initialize application", error=str(e))
            if args.verbose:
                traceback.print_exc()
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)

        # Execute command
        try:
            result = execute_command(args, app)

            # Format and output result
            output_format = getattr(args, "command_format", None) or args.format or app.config.output.format
            formatted_output = format_output(result, output_format)

            if args.output:
                with open(args.output, "w", encoding="utf-8") as f:
                    f.write(formatted_output)
                if not args.quiet:
                    print(f"Output written to {args.output}")
            else:
                print(formatted_output)

        except DomainException as e:
            logger.error("Domain error", error=str(e))
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)
        except Exception as e:
            logger.error("Unexpected error", error=str(e))
            if args.verbose:
                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
