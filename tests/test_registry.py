import pytest

from routegroup import InvalidRouteNameException, RouteNotFoundException, RouteRegistry
from routegroup.registry import split_name


@pytest.fixture
def registry() -> RouteRegistry:
    registry = RouteRegistry()
    registry.group("posts")
    return registry


def test_split_name_uses_last_dot():
    assert split_name("posts.index") == ("posts", "index")
    assert split_name("admin.posts.index") == ("admin.posts", "index")


@pytest.mark.parametrize("name", ["index", ".index", "posts.", ""])
def test_split_name_rejects_unqualified(name):
    with pytest.raises(InvalidRouteNameException):
        split_name(name)


def test_group_is_created_once(registry):
    posts = registry.group("posts", uses_resources=False)
    assert posts is registry.group("posts")
    assert posts.uses_resources is True
    assert "posts" in registry
    assert registry.get_group("pages") is None


def test_route_by_qualified_name(registry):
    assert registry.route("posts.show").uri == "/posts/{posts}"


def test_route_unknown_group(registry):
    with pytest.raises(RouteNotFoundException) as exc_info:
        registry.route("pages.index")
    assert exc_info.value.group == "pages"


def test_route_unknown_action(registry):
    with pytest.raises(RouteNotFoundException):
        registry.route("posts.archive")


def test_add_creates_group_without_resources(registry):
    route = registry.add("GET", "/admin", "admin.dashboard")
    assert route.name == "admin.dashboard"
    admin = registry.get_group("admin")
    assert admin.uses_resources is False
    assert admin.all() == [route]


def test_add_into_existing_group_keeps_resources(registry):
    registry.add("GET", "/posts/featured", "posts.featured")
    assert len(registry.group("posts").all()) == 8


def test_add_all(registry):
    routes = registry.add_all(
        {
            "posts.featured": ["GET", "/posts/featured"],
            "admin.dashboard": ["GET", "/admin"],
        }
    )
    assert [route.name for route in routes] == ["posts.featured", "admin.dashboard"]
    assert [group.name for group in registry.groups()] == ["posts", "admin"]


def test_add_all_validates_before_adding(registry):
    with pytest.raises(InvalidRouteNameException):
        registry.add_all({"admin.dashboard": ["GET", "/admin"], "featured": ["GET", "/x"]})
    assert "admin" not in registry
    assert registry.group("posts").custom_routes == {}


def test_remove(registry):
    registry.add("GET", "/articles", "posts.index")
    registry.remove("posts.index")
    registry.remove("posts.index")
    registry.remove("pages.index")
    assert registry.route("posts.index").uri == "/posts"


def test_all_and_to_array_follow_group_order(registry):
    registry.add("GET", "/admin", "admin.dashboard")
    routes = registry.all()
    assert len(routes) == 8
    assert routes[-1].name == "admin.dashboard"
    assert registry.to_array()[-1] == ["admin", "GET", "/admin", "dashboard"]
    assert [group.name for group in registry] == ["posts", "admin"]


def test_str_renders_single_table(registry):
    registry.add("GET", "/admin", "admin.dashboard")
    lines = str(registry).splitlines()
    assert len(lines) == 2 + 8
    assert "VERB" in lines[0]
    assert "dashboard" in lines[-1]


def test_add_all_validates_definitions_before_adding(registry):
    with pytest.raises(ValueError):
        registry.add_all({"admin.dashboard": ["GET", "/admin"], "admin.users": "GE"})
    assert "admin" not in registry
