import pytest

from routegroup import RouteGroup
from routegroup.resources import RESOURCE_ACTIONS, expand_template, resource, resources


def test_catalog_order_and_definitions():
    assert list(resources().items()) == [
        ("index", ("GET", "/$")),
        ("create", ("GET", "/$/create")),
        ("store", ("POST", "/$")),
        ("show", ("GET", "/$/{$}")),
        ("edit", ("GET", "/$/{$}/edit")),
        ("update", ("PUT/PATCH", "/$/{$}")),
        ("destroy", ("DELETE", "/$/{$}")),
    ]


def test_resource_lookup_miss_returns_none():
    assert resource("featured") is None
    assert resource("update") == ("PUT/PATCH", "/$/{$}")


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        RESOURCE_ACTIONS["archive"] = ("POST", "/$/archive")


def test_group_static_accessors_share_catalog():
    assert RouteGroup.resources() is resources()
    assert RouteGroup.resource("show") == ("GET", "/$/{$}")
    assert RouteGroup.resource("missing") is None


def test_expand_template_keeps_identifier_placeholder():
    assert expand_template("/$/{$}/edit", "posts") == "/posts/{posts}/edit"
    assert expand_template("/$", "comments") == "/comments"
