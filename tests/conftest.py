from typing import Any, Callable, Mapping, Optional

import pytest

from taghelpers.config import HelperConfig
from taghelpers.context import FormParams, RequestContext, ValidationErrors
from taghelpers.routing import Route, RouteTable


def _route_table() -> RouteTable:
    table = RouteTable()
    table.add(Route("index", "/"))
    table.add(Route("login", "/login", via=("POST",)))
    table.add(Route("search", "/search", via=("GET", "POST")))
    table.add(Route("article", "/articles/{id}"))

    admin = Route("admin", "/admin", via=("POST", "PUT"))
    admin.add_child("settings", "/settings")
    admin.add_child("audit", "/audit", via=("GET",))
    table.add(admin)
    return table


@pytest.fixture
def routes() -> RouteTable:
    return _route_table()


@pytest.fixture
def make_ctx() -> Callable[..., RequestContext]:
    """Build a RequestContext from plain dictionaries."""

    def _make(
        params: Optional[Mapping[str, Any]] = None,
        errors: Optional[Mapping[str, Any]] = None,
        csrf_token: str = "fa6a08",
        config: Optional[HelperConfig] = None,
    ) -> RequestContext:
        table = _route_table()
        return RequestContext(
            params=FormParams(params),
            validation=ValidationErrors(errors),
            urls=table,
            routes=table,
            csrf_issuer=lambda: csrf_token,
            config=config or HelperConfig(),
        )

    return _make


@pytest.fixture
def ctx(make_ctx) -> RequestContext:
    return make_ctx()
