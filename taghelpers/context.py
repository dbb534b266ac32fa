"""Request-scoped collaborators consulted by the helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Protocol,
)

if TYPE_CHECKING:  # pragma: no cover
    from .config import HelperConfig


class ParamStore(Protocol):
    def every_param(self, name: str) -> List[str]: ...

    def param(self, name: str) -> Optional[str]: ...


class ValidationState(Protocol):
    def has_error(self, name: str) -> bool: ...


class UrlResolver(Protocol):
    def url_for(self, target: str, params: Optional[Mapping[str, Any]] = None) -> str: ...


class RouteDescriptor(Protocol):
    via: Iterable[str]
    parent: Optional["RouteDescriptor"]


class RouteLookup(Protocol):
    def lookup(self, name: str) -> Optional[RouteDescriptor]: ...


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [_as_text(item) for item in value]
    return [_as_text(value)]


class FormParams:
    """Submitted request parameters, several values per name allowed."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        self._values: Dict[str, List[str]] = {
            name: _as_list(value) for name, value in (values or {}).items()
        }

    def every_param(self, name: str) -> List[str]:
        return list(self._values.get(name, []))

    def param(self, name: str) -> Optional[str]:
        values = self._values.get(name)
        return values[-1] if values else None


class ValidationErrors:
    """Field names that failed validation, with their messages."""

    def __init__(self, errors: Optional[Mapping[str, Any]] = None) -> None:
        self._errors: Dict[str, List[str]] = {
            name: _as_list(messages) for name, messages in (errors or {}).items()
        }

    def has_error(self, name: str) -> bool:
        return name in self._errors

    def errors_for(self, name: str) -> List[str]:
        return list(self._errors.get(name, []))


class _NoRoutes:
    def lookup(self, name: str) -> None:
        return None


class _PassthroughUrls:
    def url_for(self, target: str, params: Optional[Mapping[str, Any]] = None) -> str:
        return target


def _no_csrf_token() -> str:
    raise RuntimeError("no CSRF token issuer configured for this request")


@dataclass
class RequestContext:
    """Everything a helper may consult while rendering one request."""

    params: ParamStore = field(default_factory=FormParams)
    validation: ValidationState = field(default_factory=ValidationErrors)
    urls: UrlResolver = field(default_factory=_PassthroughUrls)
    routes: RouteLookup = field(default_factory=_NoRoutes)
    csrf_issuer: Callable[[], str] = _no_csrf_token
    config: Optional["HelperConfig"] = None

    def __post_init__(self) -> None:
        if self.config is None:
            from .config import HelperConfig

            self.config = HelperConfig()

    def every_param(self, name: str) -> List[str]:
        return self.params.every_param(name)

    def param(self, name: str) -> Optional[str]:
        return self.params.param(name)

    def has_error(self, name: str) -> bool:
        return self.validation.has_error(name)

    def url_for(self, target: str, params: Optional[Mapping[str, Any]] = None) -> str:
        return self.urls.url_for(target, params)

    def lookup_route(self, name: str) -> Optional[RouteDescriptor]:
        return self.routes.lookup(name)

    def csrf_token(self) -> str:
        return self.csrf_issuer()


__all__ = [
    "FormParams",
    "ParamStore",
    "RequestContext",
    "RouteDescriptor",
    "RouteLookup",
    "UrlResolver",
    "ValidationErrors",
    "ValidationState",
]
