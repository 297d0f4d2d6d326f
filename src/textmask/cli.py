"""CLI entrypoint for textmask."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from textmask.config import load_config
from textmask.io import presets_to_json, to_json, write_json
from textmask.log import configure_logging
from textmask.models import MaskRequest
from textmask.presets import list_presets
from textmask.service import run_mask


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="textmask",
        description="Pattern-based text masking.",
    )
    subparsers = parser.add_subparsers(dest="command")

    for name, help_text in (
        ("format", "Format a value for display"),
        ("normalize", "Reduce a value to its canonical stored form"),
    ):
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("value", help="Input text (raw or already formatted)")
        selector = command.add_mutually_exclusive_group(required=True)
        selector.add_argument("--pattern", default=None, help="Mask template, e.g. 'NNN-NNNN'")
        selector.add_argument("--preset", default=None, help="Registered preset id, e.g. 'br.cpf'")
        command.add_argument(
            "--case-fold",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Upper-case slot characters (default: from config)",
        )
        command.add_argument("--json", action="store_true", help="Print the full JSON response")
        command.add_argument(
            "-o",
            "--output",
            default=None,
            help="Output JSON path. If omitted, prints to stdout.",
        )

    presets = subparsers.add_parser("presets", help="List registered presets")
    presets.add_argument("--json", action="store_true", help="Print the catalog as JSON")

    serve = subparsers.add_parser("serve", help="Run the textmask HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config()
    configure_logging(config.log_level)

    if args.command in {"format", "normalize"}:
        case_fold = config.case_fold if args.case_fold is None else args.case_fold
        try:
            request = MaskRequest(
                value=args.value,
                pattern=args.pattern,
                preset=args.preset,
                case_fold=case_fold,
            )
            response = run_mask(request, args.command)
        except (KeyError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        if args.output:
            write_json(response, args.output)
            print(f"Wrote {args.command} JSON to {args.output}")
            return 0
        if args.json:
            print(to_json(response))
        elif response.result is not None:
            print(response.result)
        return 0

    if args.command == "presets":
        catalog = list_presets()
        if args.json:
            print(presets_to_json(catalog))
            return 0
        for preset in catalog:
            print(f"{preset.id}\t{preset.pattern or '-'}\t{preset.example or ''}")
        return 0

    if args.command == "serve":
        try:
            import uvicorn
        except ModuleNotFoundError:
            print(
                "`textmask serve` requires uvicorn. Install project dependencies first.",
                file=sys.stderr,
            )
            return 1

        host = args.host or config.api_host
        port = args.port or config.api_port
        uvicorn.run(
            "textmask.api:app",
            host=host,
            port=port,
            workers=config.workers,
            log_level=config.log_level.lower(),
            reload=False,
        )
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
