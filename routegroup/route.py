"""Route value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Route:
    """One route definition owned by a route group.

    ``verb`` is a single HTTP method or a slash-joined alternation such as
    ``PUT/PATCH``. ``uri`` may still contain identifier placeholders like
    ``{posts}`` that a downstream router binds at request time.

    Routes are never edited. Registering the same action again replaces the
    group's entry with a new Route.
    """

    verb: str
    uri: str
    action: str
    group: str

    @property
    def name(self) -> str:
        """The qualified ``group.action`` name."""
        return f"{self.group}.{self.action}"

    def to_array(self) -> list[str]:
        """Project to ``[verb, uri, action]`` for table rows.

        The group is left out; the owning group prepends it.
        """
        return [self.verb, self.uri, self.action]
