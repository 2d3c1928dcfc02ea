class RouteGroupException(Exception):
    """Base exception for routegroup.

    ``message`` is the text shown to CLI users; it defaults to the class name.
    """
    message: str

    def __init__(self, message: str | None = None):
        self.message = message or self.__class__.__name__
        super().__init__(self.message)


class RouteNotFoundException(RouteGroupException):
    """Raised when an action is neither a custom route nor an enabled resource route."""

    def __init__(self, action: str, group: str):
        super().__init__(f"Route '{action}' is not registered for group '{group}'.")
        self.action = action
        self.group = group


class InvalidRouteNameException(RouteGroupException):
    """Raised when a route is registered under a name it may not use.

    Group registration reserves the dot character for qualified
    ``group.action`` names, which only the registry accepts.
    """

    def __init__(self, action: str, message: str | None = None):
        if message is None:
            message = (
                "Registered actions should not contain the dot (.) character.\n"
                "Try calling add_all() on 'RouteRegistry' to register by names instead of actions."
            )
        super().__init__(message)
        self.action = action


class RouteConfigError(RouteGroupException):
    """Raised for unreadable or malformed route configuration files."""


RouteNotFound = RouteNotFoundException
InvalidRouteName = InvalidRouteNameException
