"""Tag helpers exposed to templates.

Every helper takes the request context first, followed by positional-only
structural arguments (name, target, value, body). Attributes may be passed as a
mapping (``attrs``), as keyword arguments, or both; keyword arguments win and
``class_``/``for_`` map to ``class``/``for``. Attributes a helper owns, such as
``type`` on the field helpers, are applied last and cannot be overridden.

Helpers that accept ``caller`` treat it as a producer of raw markup, which is
what Jinja passes for the body of a ``{% call %}`` block.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from .context import RequestContext
from .fields import populate_input_attrs, textarea_content, with_validation_error_class
from .markup import Content, Markup, Producer, collect_attrs
from .options import OptionEntry, render_options
from .tags import build_tag
from .tags import tag_with_error as _tag_with_error

logger = logging.getLogger(__name__)

Attrs = Optional[Mapping[str, Any]]

FIELD_TYPES = (
    "color",
    "date",
    "datetime",
    "email",
    "month",
    "number",
    "range",
    "search",
    "tel",
    "text",
    "time",
    "url",
    "week",
)


def tag(
    ctx: RequestContext,
    name: str,
    content: Any = None,
    /,
    *,
    attrs: Attrs = None,
    caller: Optional[Producer] = None,
    **kwargs: Any,
) -> Markup:
    return build_tag(name, collect_attrs(attrs, kwargs), Content.pick(content, caller))


t = tag


def tag_with_error(
    ctx: RequestContext,
    name: str,
    content: Any = None,
    /,
    *,
    attrs: Attrs = None,
    caller: Optional[Producer] = None,
    **kwargs: Any,
) -> Markup:
    """Same as ``tag`` but always marks the element with the error class."""

    return _tag_with_error(
        name,
        collect_attrs(attrs, kwargs),
        Content.pick(content, caller),
        ctx.config.error_class,
    )


def _input(ctx: RequestContext, name: str, attrs: Dict[str, Any]) -> Markup:
    populated = populate_input_attrs(ctx, name, attrs)
    populated["name"] = name
    return with_validation_error_class(ctx, name, "input", populated)


def input_tag(
    ctx: RequestContext, name: str, value: Any = None, /, *, attrs: Attrs = None, **kwargs: Any
) -> Markup:
    """Generic ``<input>``; the type comes from the attributes, if any."""

    merged = collect_attrs(attrs, kwargs)
    if value is not None:
        merged = {"value": value, **merged}
    return _input(ctx, name, merged)


def _field_helper(input_type: str) -> Callable[..., Markup]:
    def helper(
        ctx: RequestContext, name: str, value: Any = None, /, *, attrs: Attrs = None, **kwargs: Any
    ) -> Markup:
        merged = collect_attrs(attrs, kwargs)
        if value is not None:
            merged = {"value": value, **merged}
        merged["type"] = input_type
        return _input(ctx, name, merged)

    helper.__name__ = f"{input_type}_field"
    helper.__qualname__ = helper.__name__
    helper.__doc__ = (
        f"``<input type=\"{input_type}\">`` picking up previously submitted values."
    )
    return helper


color_field = _field_helper("color")
date_field = _field_helper("date")
datetime_field = _field_helper("datetime")
email_field = _field_helper("email")
month_field = _field_helper("month")
number_field = _field_helper("number")
range_field = _field_helper("range")
search_field = _field_helper("search")
tel_field = _field_helper("tel")
text_field = _field_helper("text")
time_field = _field_helper("time")
url_field = _field_helper("url")
week_field = _field_helper("week")


def check_box(
    ctx: RequestContext, name: str, value: Any, /, *, attrs: Attrs = None, **kwargs: Any
) -> Markup:
    merged = {"value": value, **collect_attrs(attrs, kwargs), "type": "checkbox"}
    return _input(ctx, name, merged)


def radio_button(
    ctx: RequestContext, name: str, value: Any, /, *, attrs: Attrs = None, **kwargs: Any
) -> Markup:
    merged = {"value": value, **collect_attrs(attrs, kwargs), "type": "radio"}
    return _input(ctx, name, merged)


def password_field(
    ctx: RequestContext, name: str, /, *, attrs: Attrs = None, **kwargs: Any
) -> Markup:
    # Submitted passwords are never written back into the page.
    merged = {**collect_attrs(attrs, kwargs), "name": name, "type": "password"}
    return with_validation_error_class(ctx, name, "input", merged)


def hidden_field(
    ctx: RequestContext, name: str, value: Any, /, *, attrs: Attrs = None, **kwargs: Any
) -> Markup:
    merged = {"name": name, "value": value, **collect_attrs(attrs, kwargs), "type": "hidden"}
    return build_tag("input", merged)


def csrf_field(ctx: RequestContext, /, *, attrs: Attrs = None, **kwargs: Any) -> Markup:
    return hidden_field(
        ctx, ctx.config.csrf_field_name, ctx.csrf_token(), attrs=attrs, **kwargs
    )


def file_field(
    ctx: RequestContext, name: str, /, *, attrs: Attrs = None, **kwargs: Any
) -> Markup:
    merged = {"name": name, **collect_attrs(attrs, kwargs), "type": "file"}
    return build_tag("input", merged)


def submit_button(
    ctx: RequestContext, value: Any = None, /, *, attrs: Attrs = None, **kwargs: Any
) -> Markup:
    label = ctx.config.submit_label if value is None else value
    merged = {"value": label, **collect_attrs(attrs, kwargs), "type": "submit"}
    return build_tag("input", merged)


def label_for(
    ctx: RequestContext,
    name: str,
    content: Any = None,
    /,
    *,
    attrs: Attrs = None,
    caller: Optional[Producer] = None,
    **kwargs: Any,
) -> Markup:
    merged = {"for": name, **collect_attrs(attrs, kwargs)}
    return with_validation_error_class(ctx, name, "label", merged, Content.pick(content, caller))


def text_area(
    ctx: RequestContext,
    name: str,
    content: Any = None,
    /,
    *,
    attrs: Attrs = None,
    caller: Optional[Producer] = None,
    **kwargs: Any,
) -> Markup:
    """``<textarea>`` filled with the submitted value, else the given default."""

    merged = {**collect_attrs(attrs, kwargs), "name": name}
    body = textarea_content(ctx, name, content, caller)
    return with_validation_error_class(ctx, name, "textarea", merged, body)


def select_field(
    ctx: RequestContext,
    name: str,
    options: Iterable[OptionEntry],
    /,
    *,
    attrs: Attrs = None,
    **kwargs: Any,
) -> Markup:
    """``<select>`` with options and option groups.

    Options whose value was previously submitted under ``name`` are marked
    ``selected``.
    """

    selected = frozenset(ctx.every_param(name))
    body = render_options(options, selected)
    merged = {**collect_attrs(attrs, kwargs), "name": name}
    return with_validation_error_class(ctx, name, "select", merged, Content.raw(lambda: body))


def _allows_post_only(ctx: RequestContext, target: str) -> bool:
    route = ctx.lookup_route(target)
    if route is None:
        return False

    methods = {"GET", "POST"}
    while route is not None:
        via = {method.upper() for method in (route.via or ())}
        if via:
            methods &= via
        route = route.parent
    logger.debug("route %r allows methods %s", target, sorted(methods))
    return "POST" in methods and "GET" not in methods


def form_for(
    ctx: RequestContext,
    target: str,
    params: Optional[Mapping[str, Any]] = None,
    /,
    *,
    attrs: Attrs = None,
    caller: Optional[Producer] = None,
    **kwargs: Any,
) -> Markup:
    """``<form>`` pointing at a route, path or URL.

    Routes that accept POST but not GET get ``method="POST"`` unless the
    caller chose a method.
    """

    merged: Dict[str, Any] = {"action": ctx.url_for(target, params)}
    if _allows_post_only(ctx, target):
        merged["method"] = "POST"
    merged.update(collect_attrs(attrs, kwargs))
    return build_tag("form", merged, Content.pick(caller=caller))


def link_to(
    ctx: RequestContext,
    target: str,
    content: Any = None,
    params: Optional[Mapping[str, Any]] = None,
    /,
    *,
    attrs: Attrs = None,
    caller: Optional[Producer] = None,
    **kwargs: Any,
) -> Markup:
    merged = {"href": ctx.url_for(target, params), **collect_attrs(attrs, kwargs)}
    body = Content.pick(target if content is None else content, caller)
    return build_tag("a", merged, body)


def image(
    ctx: RequestContext, target: str, /, *, attrs: Attrs = None, **kwargs: Any
) -> Markup:
    merged = {"src": ctx.url_for(target), **collect_attrs(attrs, kwargs)}
    return build_tag("img", merged)


def javascript(
    ctx: RequestContext,
    target: Optional[str] = None,
    /,
    *,
    attrs: Attrs = None,
    caller: Optional[Producer] = None,
    **kwargs: Any,
) -> Markup:
    """``<script>`` referencing ``target`` or wrapping the caller body in CDATA.

    Script elements are never self-closing.
    """

    merged = collect_attrs(attrs, kwargs)
    if target is not None:
        merged["src"] = ctx.url_for(target)

    body = Markup("")
    if caller is not None:
        body = Markup("//<![CDATA[\n") + Markup(caller()) + Markup("\n//]]>")
    return build_tag("script", merged, Content.raw(lambda: body))


def stylesheet(
    ctx: RequestContext,
    target: Optional[str] = None,
    /,
    *,
    attrs: Attrs = None,
    caller: Optional[Producer] = None,
    **kwargs: Any,
) -> Markup:
    """``<link rel="stylesheet">`` for ``target``, else an inline ``<style>``."""

    if target is not None:
        merged = {"rel": "stylesheet", "href": ctx.url_for(target), **collect_attrs(attrs, kwargs)}
        return build_tag("link", merged)

    content = Content.empty()
    if caller is not None:
        css = Markup("/*<![CDATA[*/\n") + Markup(caller()) + Markup("\n/*]]>*/")
        content = Content.raw(lambda: css)
    return build_tag("style", collect_attrs(attrs, kwargs), content)


HELPERS: Dict[str, Callable[..., Markup]] = {
    "check_box": check_box,
    "csrf_field": csrf_field,
    "file_field": file_field,
    "form_for": form_for,
    "hidden_field": hidden_field,
    "image": image,
    "input_tag": input_tag,
    "javascript": javascript,
    "label_for": label_for,
    "link_to": link_to,
    "password_field": password_field,
    "radio_button": radio_button,
    "select_field": select_field,
    "stylesheet": stylesheet,
    "submit_button": submit_button,
    "t": tag,
    "tag": tag,
    "tag_with_error": tag_with_error,
    "text_area": text_area,
}
HELPERS.update({f"{name}_field": globals()[f"{name}_field"] for name in FIELD_TYPES})


__all__ = ["FIELD_TYPES", "HELPERS", *sorted(HELPERS)]
