import pytest
import yaml

from routegroup import RouteGroup


@pytest.fixture
def posts() -> RouteGroup:
    return RouteGroup("posts")


@pytest.fixture
def write_routes(tmp_path):
    """Write a route file from a dict and return its path."""

    def _write(config, name="routes.yaml"):
        path = tmp_path / name
        with open(path, "w") as f:
            yaml.safe_dump(config, f, sort_keys=False)
        return path

    return _write
