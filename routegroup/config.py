import logging
import os
import re
from pathlib import Path
from typing import Any, TypedDict

import yaml

from routegroup.exceptions import RouteConfigError
from routegroup.registry import RouteRegistry

logger = logging.getLogger(__name__)

# Default route file name
DEFAULT_CONFIG_FILE = "routes.yaml"

ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


class GroupConfig(TypedDict, total=False):
    resources: bool
    routes: dict[str, list[str]]


class RoutesConfig(TypedDict, total=False):
    groups: dict[str, GroupConfig]
    routes: dict[str, list[str]]


def load_raw_config(config_path: str | Path) -> dict[str, Any]:
    """
    Read a route file into a plain dictionary.

    A missing or empty route file is an empty configuration, so a project
    without routes can still be listed and checked.

    Raises:
        RouteConfigError: If the file cannot be read, is not valid YAML, or
            its top level is not a mapping.
    """
    route_file = Path(config_path)
    if not route_file.exists():
        logger.debug(f"Route file {route_file} not found, using empty configuration")
        return {}

    try:
        text = route_file.read_text()
    except OSError as e:
        raise RouteConfigError(f"Cannot read route file {route_file}: {e}") from e

    try:
        config = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RouteConfigError(f"Error loading configuration from {route_file}: {e}") from e

    if config is None:
        return {}

    if not isinstance(config, dict):
        raise RouteConfigError(
            f"Route file {route_file} must contain a mapping of 'groups' and 'routes', "
            f"found {type(config).__name__}"
        )

    logger.debug(f"Read route file {route_file} with sections {sorted(map(str, config))}")
    return config


def _substitute_env_vars(config: dict[str, Any]) -> dict[str, Any]:
    """
    Substitute ``${VAR_NAME}`` references with environment variables.

    Raises:
        RouteConfigError: If a referenced variable is not set.
    """

    def replace_env_var(match: re.Match) -> str:
        env_var = match.group(1)
        env_value = os.getenv(env_var)
        if env_value is None:
            raise RouteConfigError(f"Required environment variable '{env_var}' is not set")
        return env_value

    def substitute_value(value: Any) -> Any:
        if isinstance(value, str):
            return ENV_VAR_PATTERN.sub(replace_env_var, value)
        elif isinstance(value, dict):
            return {k: substitute_value(v) for k, v in value.items()}
        elif isinstance(value, list):
            return [substitute_value(item) for item in value]
        else:
            return value

    return substitute_value(config)


def _validate_route_map(routes: Any, where: str) -> None:
    if not isinstance(routes, dict):
        raise RouteConfigError(f"'{where}' must be a mapping of names to [verb, uri]")

    for name, definition in routes.items():
        if not isinstance(name, str):
            raise RouteConfigError(
                f"Route name {name!r} in '{where}' must be a string; quote it in the route file"
            )
        if (
            not isinstance(definition, list)
            or len(definition) != 2
            or not all(isinstance(part, str) and part for part in definition)
        ):
            raise RouteConfigError(
                f"Route '{name}' in '{where}' must be a [verb, uri] pair of strings"
            )


def validate_config(config: dict[str, Any]) -> None:
    """
    Check the shape of a route configuration.

    Raises:
        RouteConfigError: If a section has the wrong type.
    """
    groups = config.get("groups", {})
    if not isinstance(groups, dict):
        raise RouteConfigError("'groups' must be a mapping of group names to settings")

    for group_name, group_config in groups.items():
        if group_config is None:
            continue
        if not isinstance(group_config, dict):
            raise RouteConfigError(f"Group '{group_name}' must be a mapping")

        resources = group_config.get("resources", True)
        if not isinstance(resources, bool):
            raise RouteConfigError(f"Group '{group_name}': 'resources' must be true or false")

        if "routes" in group_config:
            _validate_route_map(group_config["routes"], f"groups.{group_name}.routes")

    if "routes" in config:
        _validate_route_map(config["routes"], "routes")


def load_config(config_path: str | Path) -> RoutesConfig:
    """
    Load, substitute and validate a route configuration file.

    Raises:
        RouteConfigError: If the configuration is unreadable or invalid.
    """
    config = load_raw_config(config_path)
    config = _substitute_env_vars(config)
    validate_config(config)
    return config


def build_registry(config: RoutesConfig) -> RouteRegistry:
    """
    Build a registry from a loaded configuration.

    Groups are created in file order and their routes registered with
    ``RouteGroup.add_all()``; top-level ``routes`` go through
    ``RouteRegistry.add_all()``.

    Raises:
        InvalidRouteNameException: If a group route name contains a dot or
            a top-level route name is not qualified.
    """
    registry = RouteRegistry()

    for group_name, group_config in (config.get("groups") or {}).items():
        group_config = group_config or {}
        group = registry.group(str(group_name), group_config.get("resources", True))
        group.add_all(group_config.get("routes") or {})

    registry.add_all(config.get("routes") or {})

    logger.info(
        f"Loaded {len(registry.groups())} route group(s) with {len(registry.all())} route(s)"
    )
    return registry


def load_registry(config_path: str | Path = DEFAULT_CONFIG_FILE) -> RouteRegistry:
    """Load a route file and build its registry."""
    return build_registry(load_config(config_path))
