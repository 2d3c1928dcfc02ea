"""Name-based route registration across several groups.

Groups key their routes by bare action names. The registry addresses
routes by qualified ``group.action`` names instead, creating groups on
demand, and is where dotted names passed to ``RouteGroup.add_all()``
belong.
"""

import logging
from collections.abc import Iterator, Mapping, Sequence

from routegroup.exceptions import InvalidRouteNameException, RouteNotFoundException
from routegroup.group import HEADER_ROW, RouteGroup, route_definition
from routegroup.route import Route
from routegroup.table import render_table

logger = logging.getLogger(__name__)


def split_name(name: str) -> tuple[str, str]:
    """Split a qualified route name on its last dot.

    >>> split_name("admin.posts.index")
    ('admin.posts', 'index')

    Raises:
        InvalidRouteNameException: If either part is missing.
    """
    group_name, dot, action = name.rpartition(".")
    if not dot or not group_name or not action:
        raise InvalidRouteNameException(
            name,
            f"Route name '{name}' must be qualified as 'group.action'.",
        )
    return group_name, action


class RouteRegistry:
    """Ordered collection of route groups addressed by qualified names.

    Examples:
        ```python
        registry = RouteRegistry()
        registry.group("posts")
        registry.add_all({"admin.dashboard": ["GET", "/admin"]})

        registry.route("posts.show").uri        # "/posts/{posts}"
        registry.route("admin.dashboard").verb  # "GET"
        ```
    """

    def __init__(self):
        self._groups: dict[str, RouteGroup] = {}

    def __repr__(self) -> str:
        return f"RouteRegistry(groups={list(self._groups)!r})"

    def __str__(self) -> str:
        return render_table([HEADER_ROW, *self.to_array()], align="l")

    def __contains__(self, group_name: object) -> bool:
        return group_name in self._groups

    def __iter__(self) -> Iterator[RouteGroup]:
        return iter(self.groups())

    def group(self, name: str, uses_resources: bool = True) -> RouteGroup:
        """Return the group called ``name``, creating it if needed.

        ``uses_resources`` only applies when the group is created.
        """
        if name not in self._groups:
            logger.debug(f"Creating route group '{name}' (resources={uses_resources})")
            self._groups[name] = RouteGroup(name, uses_resources)
        return self._groups[name]

    def get_group(self, name: str) -> RouteGroup | None:
        return self._groups.get(name)

    def groups(self) -> list[RouteGroup]:
        return list(self._groups.values())

    def route(self, name: str) -> Route:
        """Resolve a qualified ``group.action`` name.

        Raises:
            InvalidRouteNameException: If ``name`` is not qualified.
            RouteNotFoundException: If the group or the action is unknown.
        """
        group_name, action = split_name(name)
        group = self._groups.get(group_name)
        if group is None:
            raise RouteNotFoundException(action, group_name)
        return group.route(action)

    def add(self, verb: str, uri: str, name: str) -> Route:
        """Register a route under a qualified name.

        Missing groups are created without resource routes.
        """
        group_name, action = split_name(name)
        return self.group(group_name, uses_resources=False).add(verb, uri, action)

    def add_all(self, routes: Mapping[str, Sequence[str]]) -> list[Route]:
        """Register routes keyed by qualified name.

        All entries are validated before any route is added.

        Raises:
            InvalidRouteNameException: If any name is not ``group.action``.
            ValueError: If any definition is not a (verb, uri) pair.
        """
        definitions = []
        for name, definition in routes.items():
            split_name(name)
            definitions.append((name, route_definition(name, definition)))

        return [self.add(verb, uri, name) for name, (verb, uri) in definitions]

    def remove(self, name: str) -> None:
        """Remove a custom route by qualified name. Unknown names are ignored."""
        group_name, action = split_name(name)
        group = self._groups.get(group_name)
        if group is not None:
            group.remove(action)

    def all(self) -> list[Route]:
        """Every group's ``all()`` in group creation order."""
        return [route for group in self._groups.values() for route in group.all()]

    def to_array(self) -> list[list[str]]:
        return [row for group in self._groups.values() for row in group.to_array()]
