"""Tag builder for HTML helpers."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .markup import Content, Markup, escape

DEFAULT_ERROR_CLASS = "field-with-error"


def _flatten_data(attrs: Mapping[str, Any]) -> Dict[str, Any]:
    flat = dict(attrs)
    data = flat.get("data")
    if isinstance(data, Mapping):
        del flat["data"]
        for key, value in data.items():
            flat[f"data-{key}".replace("_", "-").lower()] = value
    return flat


def _render_attrs(attrs: Mapping[str, Any]) -> str:
    parts = []
    for name in sorted(attrs):
        value = attrs[name]
        parts.append(f' {name}="{escape("" if value is None else value)}"')
    return "".join(parts)


def build_tag(
    name: str,
    attrs: Optional[Mapping[str, Any]] = None,
    content: Content = Content(),
) -> Markup:
    """Serialize a single element.

    Attributes are written in sorted order. Without content the element is
    self-closing; text content is escaped and raw content is inserted as is.
    The result is ``Markup`` so autoescaping templates leave it alone.
    """

    if not name:
        raise ValueError("tag name must be a non-empty string")

    tag = f"<{name}{_render_attrs(_flatten_data(attrs or {}))}"
    if not content.supplied:
        return Markup(tag + " />")
    return Markup(f"{tag}>{content.render()}</{name}>")


def add_class(attrs: Mapping[str, Any], token: str) -> Dict[str, Any]:
    """Return a copy of attrs with ``token`` appended to the class list."""

    updated = dict(attrs)
    existing = updated.get("class")
    updated["class"] = f"{existing} {token}" if existing else token
    return updated


def tag_with_error(
    name: str,
    attrs: Optional[Mapping[str, Any]] = None,
    content: Content = Content(),
    error_class: str = DEFAULT_ERROR_CLASS,
) -> Markup:
    return build_tag(name, add_class(attrs or {}, error_class), content)


__all__ = ["DEFAULT_ERROR_CLASS", "add_class", "build_tag", "tag_with_error"]
