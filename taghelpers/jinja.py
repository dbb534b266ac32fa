"""Registration of the tag helpers in a Jinja environment."""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional

from jinja2 import BaseLoader, Environment, StrictUndefined, UndefinedError, pass_context
from jinja2.runtime import Context

from .config import HelperConfig
from .context import RequestContext
from .helpers import HELPERS
from .markup import Markup
from .options import OptGroup, Option


def _bind(helper: Callable[..., Markup], variable: str) -> Callable[..., Markup]:
    @pass_context
    @functools.wraps(helper)
    def bound(context: Context, *args: Any, **kwargs: Any) -> Markup:
        request_ctx = context.get(variable)
        if not isinstance(request_ctx, RequestContext):
            raise UndefinedError(
                f"'{variable}' must hold the RequestContext to use {helper.__name__}()"
            )
        return helper(request_ctx, *args, **kwargs)

    return bound


def register_helpers(env: Environment, config: Optional[HelperConfig] = None) -> Environment:
    """Install every tag helper as a global of ``env``.

    Templates call the helpers without the request context; it is read from
    the template variable named by ``config.context_variable``. The ``Option``
    and ``OptGroup`` descriptors are installed too so templates can build
    option groups for ``select_field``.
    """

    config = config or HelperConfig()
    for name, helper in HELPERS.items():
        env.globals[name] = _bind(helper, config.context_variable)
    env.globals["Option"] = Option
    env.globals["OptGroup"] = OptGroup
    return env


def create_environment(
    loader: Optional[BaseLoader] = None, config: Optional[HelperConfig] = None
) -> Environment:
    """Create an autoescaping, strict environment with the helpers installed."""

    env = Environment(
        loader=loader,
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    return register_helpers(env, config)


__all__ = ["create_environment", "register_helpers"]
