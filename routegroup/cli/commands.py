"""
CLI command handlers.

Each handler receives the parsed namespace and returns a process exit code.
"""

import logging

from routegroup.config import load_registry
from routegroup.exceptions import (
    InvalidRouteNameException,
    RouteConfigError,
    RouteNotFoundException,
)

logger = logging.getLogger("routegroup")


def handle_list_command(args_ns) -> int:
    """Handles the 'list' command."""
    logger.debug("List command started.")
    try:
        registry = load_registry(args_ns.config)
    except (RouteConfigError, InvalidRouteNameException) as e:
        logger.error(f"Error loading routes from '{args_ns.config}': {e.message}")
        return 1

    if args_ns.group is not None:
        group = registry.get_group(args_ns.group)
        if group is None:
            logger.error(f"Route group '{args_ns.group}' is not defined in '{args_ns.config}'.")
            return 1
        print(group)
        return 0

    if not registry.groups():
        print("No route groups are defined.")
        return 0

    print(registry)
    return 0


def handle_show_command(args_ns) -> int:
    """Handles the 'show' command."""
    logger.debug(f"Show command started for '{args_ns.name}'.")
    try:
        registry = load_registry(args_ns.config)
        route = registry.route(args_ns.name)
    except (RouteConfigError, RouteNotFoundException, InvalidRouteNameException) as e:
        logger.error(e.message)
        return 1

    print(f"{route.verb} {route.uri}")
    print(f"  name: {route.name}")
    return 0


def handle_check_command(args_ns) -> int:
    """Handles the 'check' command."""
    logger.debug("Check command started.")
    try:
        registry = load_registry(args_ns.config)
    except (RouteConfigError, InvalidRouteNameException) as e:
        logger.error(f"Invalid route file '{args_ns.config}': {e.message}")
        return 1

    groups = registry.groups()
    print(f"Route file '{args_ns.config}' is valid.")
    print(f"  groups: {len(groups)}")
    for group in groups:
        resources = "with resources" if group.uses_resources else "custom only"
        print(f"  • {group.name}: {len(group)} route(s), {resources}")
    return 0
