"""CLI entry point: python -m stache render|demo ..."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from stache.models import RenderOptions

DEMO_TEMPLATE = "{{message}}\n{{#list}}\t<b>{{& name}}</b>\n{{/list}}"


def demo_context() -> dict:
    return {
        "message": "Current employees:",
        "list": [
            {"name": "Jared"},
            {"name": "Mark"},
            {"name": "Jeff"},
            {"name": "<i>Cameron</i>"},
        ],
    }


def cmd_render(args: argparse.Namespace) -> None:
    from stache.config import resolve_options
    from stache.context import load_context
    from stache.errors import RenderError
    from stache.template_engine import render_template

    try:
        options = resolve_options(
            args.config,
            delim_open=args.open,
            delim_close=args.close,
            max_depth=args.max_depth,
        )
    except (OSError, ValueError, TypeError, yaml.YAMLError) as exc:
        print(f"Error: invalid options: {exc}", file=sys.stderr)
        sys.exit(1)

    try:
        context = load_context(args.data) if args.data else {}
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"Error: could not load context: {exc}", file=sys.stderr)
        sys.exit(1)

    try:
        rendered = render_template(args.template, context, options)
    except OSError as exc:
        print(f"Error: could not read template: {exc}", file=sys.stderr)
        sys.exit(1)
    except RenderError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(rendered)
        logging.getLogger(__name__).info("Wrote %s", out)
    else:
        sys.stdout.write(rendered)


def cmd_demo(args: argparse.Namespace) -> None:
    from stache.template_engine import render

    context = demo_context()
    print(json.dumps(context, indent=4))
    print()
    print(render(DEMO_TEMPLATE, context, RenderOptions()))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="stache",
        description="Mustache-style template renderer",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # -- render --
    p_render = subparsers.add_parser("render", help="Render a template file")
    p_render.add_argument("template", help="Path to the template file")
    p_render.add_argument("--data", default=None,
                          help="JSON or YAML file with the context value ('-' for stdin)")
    p_render.add_argument("--config", default=None,
                          help="YAML file with render options (default: $STACHE_CONFIG)")
    p_render.add_argument("--open", default=None, help="Opening delimiter (default: {{)")
    p_render.add_argument("--close", default=None, help="Closing delimiter (default: }})")
    p_render.add_argument("--max-depth", type=int, default=None,
                          help="Maximum section nesting depth")
    p_render.add_argument("--output", "-o", default=None,
                          help="Write output to this file instead of stdout")
    p_render.set_defaults(func=cmd_render)

    # -- demo --
    p_demo = subparsers.add_parser("demo", help="Render the built-in employee list example")
    p_demo.set_defaults(func=cmd_demo)

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    args.func(args)


if __name__ == "__main__":
    main()
