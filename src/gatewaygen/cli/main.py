#!/usr/bin/env python3
"""
gatewaygen CLI - Main entry point.

Usage:
    gatewaygen init                         # Create gatewaygen.yaml
    gatewaygen generate                     # Generate gateway sources
    gatewaygen plan --format json           # Print the query plan
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .. import __version__
from ..core.builder import build_query_plan
from ..core.errors import GatewayGenError
from ..core.schema_loader import load_schema_file
from ..emit.document import render_document
from ..generator import GatewayGenerator, GatewayProject
from .config import CONFIG_FILE_NAME, PLAN_FORMATS, GatewayGenConfig, load_config


def configure_logging(verbosity: int) -> None:
    """Map -v flags to a log level (warnings are always shown)."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def resolve_config(args: argparse.Namespace) -> GatewayGenConfig:
    """Load the config file (if any) and apply command line overrides."""
    config = load_config(args.config) or GatewayGenConfig(version=1, project=Path.cwd().name)

    if getattr(args, "supergraph", None):
        config.supergraph = args.supergraph
    if getattr(args, "output", None):
        config.output = args.output
    if getattr(args, "port", None) is not None:
        config.port = args.port
    if getattr(args, "format", None):
        config.plan_format = args.format
    return config


def cmd_init(args: argparse.Namespace) -> int:
    """Initialize a new gatewaygen project."""
    config_path = Path(args.config)

    if config_path.exists() and not args.force:
        print(f"Error: {config_path} already exists. Use --force to overwrite.")
        return 1

    config = GatewayGenConfig(version=1, project=args.name or Path.cwd().name)
    config.save(config_path)
    print(f"Created {config_path}")

    Path(config.output).mkdir(parents=True, exist_ok=True)
    print(f"Created {config.output}/")

    print(f"\nProject '{config.project}' initialized!")
    print("Next steps:")
    print(f"  1. Put the composed supergraph SDL in {config.supergraph}")
    print("  2. Run 'gatewaygen generate'")
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate gateway sources from the supergraph."""
    try:
        config = resolve_config(args)
        project = GatewayProject(
            name=config.project,
            supergraph_path=config.supergraph,
            output_path=config.output,
            port=config.port,
            plan_format=config.plan_format,
        )
        generator = GatewayGenerator(project)
        written = generator.generate()
    except GatewayGenError as e:
        print(f"Error: {e}")
        return 1

    for path in written.values():
        print(f"Generated {path}")
    if generator.result and generator.result.warnings:
        print(f"\n{len(generator.result.warnings)} field(s) left out of the query plan:")
        for warning in generator.result.warnings:
            print(f"  {warning}")
    return 0


def cmd_plan(args: argparse.Namespace) -> int:
    """Print the query plan document."""
    try:
        config = resolve_config(args)
        result = build_query_plan(load_schema_file(config.supergraph))
        print(render_document(result, config.plan_format), end="")
    except GatewayGenError as e:
        print(f"Error: {e}")
        return 1
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="gatewaygen",
        description="gatewaygen - federation gateway generator for supergraph schemas"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", "-c", default=CONFIG_FILE_NAME, help="Config file path")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="Increase log verbosity")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init
    init_parser = subparsers.add_parser("init", help="Create a gatewaygen.yaml config")
    init_parser.add_argument("--name", help="Project name")
    init_parser.add_argument("--force", "-f", action="store_true", help="Overwrite existing config")

    # generate
    generate_parser = subparsers.add_parser("generate", help="Generate gateway sources")
    generate_parser.add_argument("--supergraph", "-s", help="Supergraph SDL file")
    generate_parser.add_argument("--output", "-o", help="Output directory (must exist)")
    generate_parser.add_argument("--port", "-p", type=int, help="Gateway port")
    generate_parser.add_argument("--format", choices=PLAN_FORMATS, help="Plan document format")

    # plan
    plan_parser = subparsers.add_parser("plan", help="Print the query plan")
    plan_parser.add_argument("--supergraph", "-s", help="Supergraph SDL file")
    plan_parser.add_argument("--format", choices=PLAN_FORMATS, help="Output format")

    return parser


def app(args: Optional[List[str]] = None) -> int:
    """Main CLI application."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        return 0

    configure_logging(parsed.verbose)

    commands = {
        "init": cmd_init,
        "generate": cmd_generate,
        "plan": cmd_plan,
    }

    handler = commands.get(parsed.command)
    if handler:
        return handler(parsed)

    parser.print_help()
    return 1


def main() -> None:
    """Entry point for CLI."""
    sys.exit(app())


if __name__ == "__main__":
    main()
