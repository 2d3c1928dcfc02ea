"""Route groups: named sets of custom and conventional resource routes."""

from routegroup.exceptions import (
    InvalidRouteName,
    InvalidRouteNameException,
    RouteConfigError,
    RouteGroupException,
    RouteNotFound,
    RouteNotFoundException,
)
from routegroup.group import RouteGroup
from routegroup.registry import RouteRegistry
from routegroup.route import Route
from routegroup.table import render_table

__all__ = [
    "InvalidRouteName",
    "InvalidRouteNameException",
    "Route",
    "RouteConfigError",
    "RouteGroup",
    "RouteGroupException",
    "RouteNotFound",
    "RouteNotFoundException",
    "RouteRegistry",
    "render_table",
]
