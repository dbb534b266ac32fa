"""Named route tree and URL resolution used by form and link helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional
from urllib.parse import urlencode

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def is_absolute_url(target: str) -> bool:
    """Return True for targets that must not be rewritten."""

    return "://" in target or target.startswith(("mailto:", "#", "//"))


@dataclass(eq=False)
class Route:
    """Route node; ``via`` lists allowed methods, empty means unrestricted."""

    name: str
    pattern: str = ""
    via: tuple[str, ...] = ()
    parent: Optional["Route"] = field(default=None, repr=False)
    children: List["Route"] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.via = tuple(method.upper() for method in self.via)

    @property
    def full_pattern(self) -> str:
        prefix = self.parent.full_pattern if self.parent else ""
        return prefix + self.pattern

    def add_child(self, name: str, pattern: str = "", via: Iterable[str] = ()) -> "Route":
        child = Route(name=name, pattern=pattern, via=tuple(via), parent=self)
        self.children.append(child)
        return child

    def walk(self) -> Iterable["Route"]:
        yield self
        for child in self.children:
            yield from child.walk()


class RouteTable:
    """Lookup of named routes plus ``url_for`` resolution."""

    def __init__(self, base_path: str = "") -> None:
        self.base_path = base_path.rstrip("/")
        self._named: Dict[str, Route] = {}

    def add(self, route: Route) -> Route:
        """Register a top level route together with all of its descendants."""

        for node in route.walk():
            if node.name:
                self._named[node.name] = node
        return route

    def lookup(self, name: str) -> Optional[Route]:
        return self._named.get(name)

    def url_for(self, target: str, params: Optional[Mapping[str, Any]] = None) -> str:
        if is_absolute_url(target):
            return target
        if target.startswith("/"):
            return self.base_path + target

        route = self.lookup(target)
        if route is None:
            return target

        remaining: Dict[str, Any] = dict(params or {})
        fmt = remaining.pop("format", None)

        def _substitute(match: re.Match) -> str:
            key = match.group(1)
            if key not in remaining:
                raise KeyError(f"route '{route.name}' requires parameter '{key}'")
            return str(remaining.pop(key))

        path = _PLACEHOLDER.sub(_substitute, route.full_pattern) or "/"
        if fmt:
            path = f"{path}.{fmt}"
        url = self.base_path + path
        if remaining:
            url += "?" + urlencode(sorted(remaining.items()))
        return url


__all__ = ["Route", "RouteTable", "is_absolute_url"]
