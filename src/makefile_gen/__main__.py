#!/usr/bin/env python3
"""Entry point for makefile-gen."""

import argparse
import asyncio
import os
import sys
from pathlib import Path

from makefile_gen.core.makefile import MakefileGenerator
from makefile_gen.core.models import TargetSpec
from makefile_gen.exceptions import MakefileGenError
from makefile_gen.server import MakefileGenServer, setup_logging


def _configure(args) -> Path:
    """Set up logging and return the Makefile path to work on."""
    # Log level from env overrides the CLI flag
    log_level = os.getenv("MAKEFILE_GEN_LOG_LEVEL", args.log_level)
    setup_logging(log_level)

    # Path: CLI flag > env var > current directory
    path = getattr(args, "path", None) or os.getenv("MAKEFILE_GEN_PATH") or "."
    return Path(path)


def cmd_generate(args):
    """Generate the boilerplate Makefile."""
    path = _configure(args)

    try:
        makefile_path = MakefileGenerator().generate(path, overwrite=args.overwrite)
    except MakefileGenError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Makefile was generated successfully at {makefile_path.absolute()}")


def cmd_addtarget(args):
    """Append a target to an existing Makefile."""
    path = _configure(args)

    try:
        makefile_path = MakefileGenerator().add_target(
            path,
            args.target,
            content=args.content,
            dependencies=args.dependencies,
        )
    except MakefileGenError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Target {args.target} was successfully added to {makefile_path.absolute()}")


def cmd_preview(args):
    """Print the block addtarget would append, without writing anything."""
    _configure(args)

    spec = TargetSpec(name=args.target, content=args.content, dependencies=args.dependencies or [])
    try:
        block = MakefileGenerator().render_target(spec)
    except MakefileGenError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(block, end="")


def cmd_serve(args):
    """Run the MCP server."""
    path = _configure(args)

    server = MakefileGenServer(
        default_path=path,
        allow_overwrite=not args.no_overwrite,
    )

    asyncio.run(server.run())


def _add_target_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-t", "--target", required=True, help="Name of the target")
    parser.add_argument(
        "-c",
        "--content",
        "--targetContent",
        dest="content",
        help="Command line placed under the target",
    )
    parser.add_argument(
        "-d",
        "--dependency",
        dest="dependencies",
        action="append",
        help="Target dependency (repeat for several)",
    )


def main():
    """Main entry point with subcommands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    path_option = argparse.ArgumentParser(add_help=False)
    path_option.add_argument(
        "-p",
        "--path",
        default=None,
        help="Path to the Makefile or its directory (default: $MAKEFILE_GEN_PATH or .)",
    )

    parser = argparse.ArgumentParser(
        description="Generate Makefiles and add targets to them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create ./Makefile with help, test and coverage targets
  makefile-gen generate

  # Replace an existing Makefile
  makefile-gen generate -p build/Makefile --overwrite

  # Append a target with a command and dependencies
  makefile-gen addtarget -t lint -c "@ ruff check ." -d install -d fmt

  # Show the block that would be appended
  makefile-gen preview -t lint -c "@ ruff check ."
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    generate_parser = subparsers.add_parser(
        "generate", parents=[common, path_option], help="Generate a basic Makefile"
    )
    generate_parser.add_argument(
        "-o",
        "--overwrite",
        action="store_true",
        help="Overwrite existing Makefile",
    )
    generate_parser.set_defaults(func=cmd_generate)

    # Add target command
    addtarget_parser = subparsers.add_parser(
        "addtarget", parents=[common, path_option], help="Add a target to the Makefile"
    )
    _add_target_arguments(addtarget_parser)
    addtarget_parser.set_defaults(func=cmd_addtarget)

    # Preview command
    preview_parser = subparsers.add_parser("preview", parents=[common], help="Print a target block without writing it")
    _add_target_arguments(preview_parser)
    preview_parser.set_defaults(func=cmd_preview)

    # Serve command
    serve_parser = subparsers.add_parser("serve", parents=[common, path_option], help="Run MCP server")
    serve_parser.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Refuse generate calls that would discard existing content",
    )
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
