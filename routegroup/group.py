import logging
from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType

from routegroup import resources as catalog
from routegroup.exceptions import InvalidRouteNameException, RouteNotFoundException
from routegroup.route import Route
from routegroup.table import render_table

logger = logging.getLogger(__name__)

HEADER_ROW = ["VERB", "URI", "ACTION", "NAME"]


def route_definition(key: str, definition: Sequence[str]) -> tuple[str, str]:
    """Unpack a ``(verb, uri)`` pair registered under ``key``.

    Raises:
        ValueError: If ``definition`` is not a pair of strings.
    """
    if (
        isinstance(definition, str)
        or not isinstance(definition, Sequence)
        or len(definition) != 2
        or not all(isinstance(part, str) for part in definition)
    ):
        raise ValueError(f"Route '{key}' must be defined as a (verb, uri) pair, got {definition!r}")

    verb, uri = definition
    return verb, uri


class RouteGroup:
    """A named group of routes.

    A group resolves action names against two sources: custom routes that
    were registered explicitly, and, when ``uses_resources`` is enabled, the
    seven conventional resource actions (index, create, store, show, edit,
    update, destroy) instantiated with the group's name.

    Point lookups give custom routes precedence over resource routes of the
    same action. Enumeration does not deduplicate: ``all()`` lists every
    custom route followed by every resource route, so an overridden
    conventional action appears twice.

    Examples:
        ```python
        posts = RouteGroup("posts")
        posts.add("GET", "/posts/featured", "featured")

        posts.route("featured").uri  # "/posts/featured"
        posts.route("show").uri      # "/posts/{posts}"
        print(posts)                 # table of all nine routes
        ```

    Args:
        name: Group name, also substituted into resource URI templates.
        uses_resources: Whether conventional resource actions take part in
            resolution and in ``all()``.
    """

    def __init__(self, name: str, uses_resources: bool = True):
        if not name:
            raise ValueError("Route groups require a non-empty name.")

        self.name = name
        self.uses_resources = uses_resources
        self.custom_routes: dict[str, Route] = {}

    def __repr__(self) -> str:
        return (
            f"RouteGroup(name={self.name!r}, uses_resources={self.uses_resources!r}, "
            f"custom_routes={list(self.custom_routes)!r})"
        )

    def __str__(self) -> str:
        return self.to_string()

    def __iter__(self) -> Iterator[Route]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self.all())

    def __contains__(self, action: object) -> bool:
        if not isinstance(action, str):
            return False
        if action in self.custom_routes:
            return True
        return self.uses_resources and catalog.resource(action) is not None

    @staticmethod
    def resources() -> MappingProxyType[str, tuple[str, str]]:
        """All conventional resource actions mapped to ``(verb, uri_template)``."""
        return catalog.resources()

    @staticmethod
    def resource(action: str) -> tuple[str, str] | None:
        """The ``(verb, uri_template)`` pair for a conventional action, else None."""
        return catalog.resource(action)

    def resource_route(self, action: str) -> Route:
        """Synthesize the conventional route for ``action`` in this group.

        Works whether or not the group uses resources.

        Raises:
            RouteNotFoundException: If ``action`` is not a conventional action.
        """
        definition = catalog.resource(action)
        if definition is None:
            raise RouteNotFoundException(action, self.name)

        verb, uri_template = definition
        return Route(verb, catalog.expand_template(uri_template, self.name), action, self.name)

    def route(self, name: str) -> Route:
        """Resolve an action name to a route.

        Custom routes win over resource routes. Resource actions are only
        considered when the group uses resources.

        Raises:
            RouteNotFoundException: If neither source knows the action.
        """
        if name in self.custom_routes:
            return self.custom_routes[name]

        if self.uses_resources and catalog.resource(name) is not None:
            return self.resource_route(name)

        raise RouteNotFoundException(name, self.name)

    def resource_routes(self) -> list[Route]:
        """All seven resource routes in catalog order, regardless of ``uses_resources``."""
        return [self.resource_route(action) for action in catalog.resources()]

    def registered_routes(self) -> list[Route]:
        """Custom routes in registration order."""
        return list(self.custom_routes.values())

    def all(self) -> list[Route]:
        """Custom routes followed by resource routes when the group uses them."""
        routes = self.registered_routes()
        if self.uses_resources:
            routes.extend(self.resource_routes())
        return routes

    def add(self, verb: str, uri: str, action: str) -> Route:
        """Register a custom route, replacing any existing route for ``action``."""
        route = Route(verb, uri, action, self.name)
        if action in self.custom_routes:
            logger.debug(f"Replacing route '{action}' in group '{self.name}'")
        self.custom_routes[action] = route
        return route

    def add_all(self, routes: Mapping[str, Sequence[str]]) -> list[Route]:
        """Register several custom routes keyed by action name.

        Every entry is checked before anything is registered, so a rejected
        call leaves the group unchanged.

        Args:
            routes: Mapping of action name to a ``(verb, uri)`` pair.

        Returns:
            The new routes in the mapping's order.

        Raises:
            InvalidRouteNameException: If any action name contains a dot.
            ValueError: If any definition is not a (verb, uri) pair.
        """
        definitions = []
        for action, definition in routes.items():
            if "." in action:
                raise InvalidRouteNameException(action)
            definitions.append((action, route_definition(action, definition)))

        return [self.add(verb, uri, action) for action, (verb, uri) in definitions]

    def remove(self, name: str) -> None:
        """Remove a custom route. Unknown names are ignored."""
        if self.custom_routes.pop(name, None) is not None:
            logger.debug(f"Removed route '{name}' from group '{self.name}'")

    def to_array(self) -> list[list[str]]:
        """Rows of ``[group, verb, uri, action]`` for every route in ``all()``."""
        return [[self.name, *route.to_array()] for route in self.all()]

    def to_string(self, align: str | Sequence[str] = "l") -> str:
        """Render the group as a table.

        The header reads VERB, URI, ACTION, NAME while each row starts with
        the group name, so the labels sit one column off from the data.
        """
        return render_table([HEADER_ROW, *self.to_array()], align=align)
