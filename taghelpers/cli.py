"""Command-line interface for rendering templates with the tag helpers."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Optional

from jinja2 import FileSystemLoader, TemplateError

from .config import HelperConfig, RequestFixture, load_config, load_request_fixture
from .helpers import HELPERS
from .io_utils import write_output
from .jinja import create_environment


def _load_config_arg(path: Optional[str]) -> HelperConfig:
    if not path:
        return HelperConfig()
    try:
        return load_config(Path(path))
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc


def _load_fixture_arg(path: Optional[str]) -> RequestFixture:
    if not path:
        return RequestFixture()
    try:
        return load_request_fixture(Path(path))
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc


def _handle_render(args: argparse.Namespace) -> None:
    template_path = Path(args.template)
    if not template_path.exists():
        raise SystemExit(f"Template not found: {template_path}")

    config = _load_config_arg(args.config)
    fixture = _load_fixture_arg(args.request)

    env = create_environment(FileSystemLoader(str(template_path.parent)), config)
    try:
        rendered = env.get_template(template_path.name).render(
            {config.context_variable: fixture.build_context(config)}
        )
    except (TemplateError, KeyError, RuntimeError) as exc:
        raise SystemExit(f"Failed to render {template_path}: {exc}") from exc

    write_output(Path(args.out) if args.out else None, rendered)


def _handle_helpers(args: argparse.Namespace) -> None:
    write_output(None, "\n".join(sorted(HELPERS)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taghelpers",
        description="Render Jinja templates that use the HTML tag helpers.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="taghelpers 0.1.0",
        help="Show the taghelpers version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a template with the tag helpers installed.",
        description="Render a Jinja template against a request fixture.",
    )
    render_parser.add_argument("template", help="Path to the Jinja template.")
    render_parser.add_argument(
        "--request",
        help="YAML fixture with params, errors, csrfToken and routes.",
    )
    render_parser.add_argument(
        "--config",
        help="YAML helper configuration (errorClass, submitLabel, ...).",
    )
    render_parser.add_argument(
        "--out",
        help="File to write the rendered markup to; defaults to stdout.",
    )
    render_parser.set_defaults(func=_handle_render)

    helpers_parser = subparsers.add_parser(
        "helpers",
        help="List the helper names available to templates.",
        description="Print every registered helper name.",
    )
    helpers_parser.set_defaults(func=_handle_helpers)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
