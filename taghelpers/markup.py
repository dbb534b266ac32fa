"""Safe markup marker and tagged tag content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal, Mapping, Optional

from markupsafe import Markup, escape

Producer = Callable[[], Any]


@dataclass(frozen=True)
class Content:
    """Body of a tag: nothing, escaped text, or raw producer output."""

    kind: Literal["empty", "text", "raw"] = "empty"
    value: Any = None

    @classmethod
    def empty(cls) -> "Content":
        return cls("empty")

    @classmethod
    def text(cls, value: Any) -> "Content":
        return cls("text", value)

    @classmethod
    def raw(cls, producer: Producer) -> "Content":
        return cls("raw", producer)

    @classmethod
    def pick(cls, text: Any = None, caller: Optional[Producer] = None) -> "Content":
        """Build content from helper arguments; a caller body wins over text."""

        if caller is not None:
            return cls.raw(caller)
        if text is not None:
            return cls.text(text)
        return cls.empty()

    @property
    def supplied(self) -> bool:
        return self.kind != "empty"

    def render(self) -> Markup:
        if self.kind == "raw":
            return Markup(self.value())
        if self.kind == "text":
            return escape(self.value)
        return Markup("")


def collect_attrs(attrs: Mapping[str, Any] | None, kwargs: Mapping[str, Any]) -> dict[str, Any]:
    """Merge an attribute mapping with keyword arguments.

    Keyword names drop one trailing underscore so ``class_`` and ``for_`` can
    be passed from Python code.
    """

    merged: dict[str, Any] = dict(attrs or {})
    for key, value in kwargs.items():
        merged[key[:-1] if key.endswith("_") else key] = value
    return merged


__all__ = ["Content", "Markup", "Producer", "collect_attrs", "escape"]
