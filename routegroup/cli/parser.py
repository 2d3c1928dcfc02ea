"""
CLI argument parser.

This module contains the argument parser setup for the routegroup CLI.
"""

import argparse

from routegroup.config import DEFAULT_CONFIG_FILE

from .commands import (
    handle_check_command,
    handle_list_command,
    handle_show_command,
)

ROUTEGROUP_VERSION = "0.1.0"


def create_parser():
    """Create and configure the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="routegroup", description="Inspect route groups defined in a route file."
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {ROUTEGROUP_VERSION}"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--config",
        "-c",
        help=f"Path to the route file. Default: ./{DEFAULT_CONFIG_FILE}",
        default=DEFAULT_CONFIG_FILE,
    )

    subparsers = parser.add_subparsers(
        title="commands", dest="command", required=False, help="Command to execute"
    )

    list_parser = subparsers.add_parser("list", help="Print the route table.")
    list_parser.add_argument(
        "--group", "-g", help="Only print the routes of this group.", default=None
    )
    list_parser.set_defaults(func=handle_list_command)

    show_parser = subparsers.add_parser(
        "show", help="Resolve a qualified route name such as 'posts.show'."
    )
    show_parser.add_argument("name", help="Route name in the form group.action")
    show_parser.set_defaults(func=handle_show_command)

    check_parser = subparsers.add_parser(
        "check", help="Validate the route file and summarize it."
    )
    check_parser.set_defaults(func=handle_check_command)

    return parser
