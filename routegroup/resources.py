"""Conventional resource actions shared by every route group.

Templates use two tokens: ``$`` is replaced with the group name and
``{$}`` therefore becomes an identifier placeholder such as ``{posts}``,
which is left in the URI for the router that eventually dispatches it.
"""

from types import MappingProxyType

GROUP_PLACEHOLDER = "$"
IDENTIFIER_PLACEHOLDER = "{$}"

RESOURCE_ACTIONS: MappingProxyType[str, tuple[str, str]] = MappingProxyType(
    {
        "index": ("GET", "/$"),
        "create": ("GET", "/$/create"),
        "store": ("POST", "/$"),
        "show": ("GET", "/$/{$}"),
        "edit": ("GET", "/$/{$}/edit"),
        "update": ("PUT/PATCH", "/$/{$}"),
        "destroy": ("DELETE", "/$/{$}"),
    }
)


def resources() -> MappingProxyType[str, tuple[str, str]]:
    """All conventional actions in table order."""
    return RESOURCE_ACTIONS


def resource(action: str) -> tuple[str, str] | None:
    """The ``(verb, uri_template)`` pair for ``action``, or None if it is not conventional."""
    return RESOURCE_ACTIONS.get(action)


def expand_template(uri_template: str, group_name: str) -> str:
    """Substitute every group placeholder in ``uri_template``.

    >>> expand_template("/$/{$}/edit", "posts")
    '/posts/{posts}/edit'
    """
    return uri_template.replace(GROUP_PLACEHOLDER, group_name)
