"""Pydantic models for helper configuration and offline request fixtures."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .context import FormParams, RequestContext, ValidationErrors
from .routing import Route, RouteTable

logger = logging.getLogger(__name__)


class HelperConfig(BaseModel):
    """Settings shared by every helper of one template environment."""

    error_class: str = Field(
        "field-with-error",
        alias="errorClass",
        description="Class appended to fields that failed validation.",
    )
    submit_label: str = Field(
        "Ok", alias="submitLabel", description="Default label of submit buttons."
    )
    csrf_field_name: str = Field(
        "csrf_token",
        alias="csrfFieldName",
        description="Name of the hidden input written by csrf_field.",
    )
    context_variable: str = Field(
        "request_ctx",
        alias="contextVariable",
        description="Template variable holding the RequestContext.",
    )
    base_path: str = Field(
        "",
        alias="basePath",
        description="Prefix applied to path targets by the bundled URL resolver.",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class RouteSpec(BaseModel):
    """Route entry of a request fixture."""

    name: str = Field(..., description="Route name used by url_for and form_for.")
    pattern: str = Field("", description="Path fragment, may contain {placeholders}.")
    via: List[str] = Field(
        default_factory=list,
        description="Allowed HTTP methods; empty inherits the parent's methods.",
    )
    children: List["RouteSpec"] = Field(
        default_factory=list, description="Nested routes below this one."
    )

    def to_route(self, parent: Optional[Route] = None) -> Route:
        route = Route(name=self.name, pattern=self.pattern, via=tuple(self.via), parent=parent)
        route.children = [child.to_route(route) for child in self.children]
        return route


class RequestFixture(BaseModel):
    """Description of a request used to render templates outside a server."""

    params: Dict[str, Any] = Field(
        default_factory=dict, description="Previously submitted values per field."
    )
    errors: Dict[str, Any] = Field(
        default_factory=dict, description="Validation messages per field."
    )
    csrf_token: Optional[str] = Field(
        None, alias="csrfToken", description="Token written by csrf_field."
    )
    routes: List[RouteSpec] = Field(
        default_factory=list, description="Named routes available to url_for."
    )

    model_config = ConfigDict(populate_by_name=True)

    def build_context(self, config: Optional[HelperConfig] = None) -> RequestContext:
        config = config or HelperConfig()
        table = RouteTable(base_path=config.base_path)
        for spec in self.routes:
            table.add(spec.to_route())

        ctx = RequestContext(
            params=FormParams(self.params),
            validation=ValidationErrors(self.errors),
            urls=table,
            routes=table,
            config=config,
        )
        if self.csrf_token is not None:
            token = self.csrf_token
            ctx.csrf_issuer = lambda: token
        return ctx


class _FormValueLoader(yaml.SafeLoader):
    """Safe loader that leaves YAML boolean words as plain text."""


_FormValueLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:bool"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _read_yaml_mapping(path: Path, loader: type = yaml.SafeLoader) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    data = yaml.load(path.read_text(encoding="utf-8"), Loader=loader) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping.")
    return data


def load_config(path: Path) -> HelperConfig:
    """Load a HelperConfig from YAML; an empty file yields the defaults."""

    data = _read_yaml_mapping(Path(path))
    try:
        config = HelperConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid helper config in {path}: {exc}") from exc
    logger.debug("loaded helper config from %s: %s", path, config)
    return config


def load_request_fixture(path: Path) -> RequestFixture:
    """Load a RequestFixture from YAML.

    Submitted form values are text, so unquoted YAML booleans such as ``yes``
    or ``off`` keep their spelling instead of turning into ``True``/``False``.
    """

    data = _read_yaml_mapping(Path(path), _FormValueLoader)
    try:
        return RequestFixture.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid request fixture in {path}: {exc}") from exc


__all__ = [
    "HelperConfig",
    "RequestFixture",
    "RouteSpec",
    "load_config",
    "load_request_fixture",
]
