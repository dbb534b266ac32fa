"""Option and option group descriptors for select fields."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Any, Dict, Iterable, List, Mapping, Union

from .markup import Content, Markup
from .tags import build_tag


@dataclass(frozen=True)
class Option:
    """A single ``<option>``; ``value`` defaults to the label."""

    label: Any
    value: Any = None
    attrs: Mapping[str, Any] = field(default_factory=dict)

    @property
    def resolved_value(self) -> str:
        return str(self.label if self.value is None else self.value)

    def render(self, selected: AbstractSet[str]) -> Markup:
        attrs: Dict[str, Any] = {"value": self.resolved_value}
        if self.resolved_value in selected:
            attrs["selected"] = "selected"
        attrs.update(self.attrs)
        return build_tag("option", attrs, Content.text(self.label))


@dataclass(frozen=True)
class OptGroup:
    label: Any
    options: List["OptionEntry"] = field(default_factory=list)
    attrs: Mapping[str, Any] = field(default_factory=dict)

    def render(self, selected: AbstractSet[str]) -> Markup:
        body = Markup("").join(as_option(entry).render(selected) for entry in self.options)
        attrs = {"label": self.label, **self.attrs}
        return build_tag("optgroup", attrs, Content.raw(lambda: body))


OptionEntry = Union[Option, OptGroup, tuple, list, str, int, float]


def as_option(entry: Any) -> Option:
    """Normalize a bare value or a ``(label, value[, attrs])`` sequence.

    Option groups are built with ``OptGroup``; a value that is itself a
    collection is rejected rather than rendered as text.
    """

    if isinstance(entry, Option):
        return entry
    if isinstance(entry, OptGroup):
        raise ValueError("option groups cannot be nested")
    if isinstance(entry, Mapping):
        raise ValueError(f"option entries cannot be mappings; got {entry!r}")
    if isinstance(entry, (tuple, list)):
        if not 1 <= len(entry) <= 3:
            raise ValueError(f"option entries take a label, value and attrs; got {entry!r}")
        label = entry[0]
        value = entry[1] if len(entry) > 1 else None
        attrs = entry[2] if len(entry) > 2 else {}
        if isinstance(value, (tuple, list, Mapping)):
            raise ValueError(
                f"option value must be a scalar, use OptGroup for groups; got {value!r}"
            )
        if not isinstance(attrs, Mapping):
            raise ValueError(f"option attributes must be a mapping; got {attrs!r}")
        return Option(label, value, dict(attrs))
    return Option(entry)


def render_options(entries: Iterable[OptionEntry], selected: AbstractSet[str]) -> Markup:
    parts: List[Markup] = []
    for entry in entries:
        if isinstance(entry, OptGroup):
            parts.append(entry.render(selected))
        else:
            parts.append(as_option(entry).render(selected))
    return Markup("").join(parts)


__all__ = ["OptGroup", "Option", "OptionEntry", "as_option", "render_options"]
