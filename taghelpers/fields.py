"""Form field value population and validation error marking."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .context import RequestContext
from .markup import Content, Markup, Producer
from .tags import build_tag, tag_with_error

CHECKABLE_TYPES = frozenset({"checkbox", "radio"})


def populate_input_attrs(
    ctx: RequestContext, name: str, attrs: Mapping[str, Any]
) -> Dict[str, Any]:
    """Merge previously submitted values for ``name`` into input attributes.

    Submit buttons are left alone. Check boxes and radio buttons keep their own
    value and gain ``checked`` when that value was submitted; every other type
    takes the first submitted value, replacing any default.
    """

    populated = dict(attrs)
    values = ctx.every_param(name)
    input_type = populated.get("type") or ""
    if not values or input_type == "submit":
        return populated

    if input_type in CHECKABLE_TYPES:
        own = populated.get("value")
        own = "" if own is None else str(own)
        populated["value"] = own
        if own in values:
            populated["checked"] = "checked"
    else:
        populated["value"] = values[0]
    return populated


def textarea_content(
    ctx: RequestContext, name: str, text: Any = None, caller: Optional[Producer] = None
) -> Content:
    """Submitted value, then default text, then caller body, then empty text."""

    submitted = ctx.param(name)
    if submitted is not None:
        return Content.text(submitted)
    if text is not None:
        return Content.text(text)
    if caller is not None:
        return Content.raw(caller)
    return Content.text("")


def with_validation_error_class(
    ctx: RequestContext,
    field_name: str,
    tag_name: str,
    attrs: Optional[Mapping[str, Any]] = None,
    content: Content = Content(),
) -> Markup:
    if not ctx.has_error(field_name):
        return build_tag(tag_name, attrs, content)
    return tag_with_error(tag_name, attrs, content, ctx.config.error_class)


__all__ = ["populate_input_attrs", "textarea_content", "with_validation_error_class"]
