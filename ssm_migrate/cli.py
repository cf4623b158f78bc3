#!/usr/bin/env python3
"""
Command Line Interface for the Parameter Store migration

Provides the copy command and a list command for inspecting the store.
"""

import argparse
import sys
from typing import List, Optional

from .common import format_migration_summary
from .config_schema import check_config, load_config, select_profile
from .errors import MigrationError
from .param_copy import ParamCopy
from .parameter_store import ParameterStoreError, SSMParameterStore


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--environment", "-e", default="staging",
                        help="Environment to migrate (default: staging)")
    parser.add_argument("--config", "-c", help="Configuration file overriding the defaults")
    parser.add_argument("--profile", "-P",
                        help="AWS profile (default: chosen from the environment)")
    parser.add_argument("--region", "-r", help="AWS region")


def _connect(parsed_args, config) -> SSMParameterStore:
    # Environment is checked even when --profile is given
    profile = select_profile(config, parsed_args.environment)
    if parsed_args.profile:
        profile = parsed_args.profile
    region = parsed_args.region or config.get('region')
    print(f"Environment: {parsed_args.environment}")
    print(f"Profile: {profile}")
    return SSMParameterStore.from_profile(profile, region)


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        description="Migrate SSM parameters from the old naming hierarchy to the new one"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Copy command
    copy_parser = subparsers.add_parser("copy", help="Copy parameters to their new names")
    _add_common_arguments(copy_parser)
    copy_parser.add_argument("--variables", "-V", nargs="+",
                             help="Variable identifiers to migrate (overrides the config)")
    copy_parser.add_argument("--overwrite", "-o", action="store_true",
                             help="Overwrite destination parameters that already exist")

    # List command
    list_parser = subparsers.add_parser("list", help="List all parameters in the store")
    _add_common_arguments(list_parser)

    # Parse arguments
    parsed_args = parser.parse_args(args)

    if parsed_args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(parsed_args.config)

        # Command line overrides go through the same validation as the file
        if parsed_args.command == "copy":
            if parsed_args.variables:
                config['variables'] = parsed_args.variables
            if parsed_args.overwrite:
                config['overwrite'] = True
            check_config(config)

        store = _connect(parsed_args, config)

        if parsed_args.command == "copy":
            param_copy = ParamCopy(store, config, parsed_args.environment)
            summary = param_copy.migrate()

            # Print summary
            print(f"\n{format_migration_summary(summary)}")

        elif parsed_args.command == "list":
            summaries = store.list_all()
            for summary in summaries:
                print(f"{summary.name} ({summary.type}) {summary.description}".rstrip())
            print(f"\n{len(summaries)} parameters")

    except MigrationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ParameterStoreError as e:
        print(f"Error: failed to list parameters: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
