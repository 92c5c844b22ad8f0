"""CLI entry-point for cardgen.

Usage:
    python -m cardgen render <request.json> [--output FILE]
    python -m cardgen build <payload.json> --out <dir> [--validate]
    python -m cardgen resolve <request.json>
    python -m cardgen validate <instance.json> <schema_name>
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import jsonschema

from cardgen import __version__
from cardgen.api import decode_payload, load_request, render_batch, render_card
from cardgen.contracts.load import validate_instance
from cardgen.core.config import RenderConfig
from cardgen.core.resolver import resolve_card
from cardgen.errors import CardgenError, PayloadError
from cardgen.render.document import render_index_page, render_not_found_page
from cardgen.utils.exit_codes import ExitCode
from cardgen.utils.json_norm import stable_json_dumps


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _safe_output_name(name: str) -> bool:
    """Reject names that would escape the output directory."""
    return bool(name) and "/" not in name and "\\" not in name and name not in (".", "..")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cardgen",
        description="Render digital contact cards to static HTML.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log per-card progress (DEBUG level).",
    )
    sub = p.add_subparsers(dest="command")

    # ── render subcommand ───────────────────────────────────────────
    render_p = sub.add_parser(
        "render",
        help="Render one card record (RenderRequest JSON) to HTML.",
    )
    render_p.add_argument("request", type=Path, help="Path to the card record JSON.")
    render_p.add_argument(
        "--output",
        dest="render_output",
        type=Path,
        default=None,
        help="Write the page to FILE instead of stdout.",
    )

    # ── build subcommand ────────────────────────────────────────────
    build_p = sub.add_parser(
        "build",
        help="Render every card in a payload file into an output directory.",
    )
    build_p.add_argument(
        "payload",
        type=Path,
        help='Path to the payload JSON ({"cards": [...]}).',
    )
    build_p.add_argument(
        "--out",
        dest="build_out",
        type=Path,
        default=Path("dist"),
        help="Directory to write <slug>.html, index.html and 404.html (default: dist).",
    )
    build_p.add_argument(
        "--validate",
        dest="build_validate",
        action="store_true",
        default=False,
        help="Schema-check each card record before rendering it.",
    )

    # ── resolve subcommand ──────────────────────────────────────────
    resolve_p = sub.add_parser(
        "resolve",
        help="Print the resolved metadata for one card record as JSON.",
    )
    resolve_p.add_argument("request", type=Path, help="Path to the card record JSON.")

    # ── validate subcommand ─────────────────────────────────────────
    val_p = sub.add_parser(
        "validate",
        help="Validate a JSON instance against a bundled schema.",
    )
    val_p.add_argument("instance", type=Path, help="Path to the JSON file to validate.")
    val_p.add_argument(
        "schema_name",
        help="Schema filename, e.g. render_request.schema.json",
    )

    return p


# ── handlers ────────────────────────────────────────────────────────


def _handle_render(args: argparse.Namespace, config: RenderConfig) -> int:
    """Dispatch ``cardgen render <request.json>``."""
    if not args.request.exists():
        print(f"error: file does not exist: {args.request}", file=sys.stderr)
        return ExitCode.ERROR
    try:
        request = load_request(_read_json(args.request))
    except (CardgenError, json.JSONDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    rendered = render_card(request, config=config)
    if args.render_output:
        out: Path = args.render_output
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(rendered.html, encoding="utf-8")
        print(f"Card written to {out}", file=sys.stderr)
    else:
        print(rendered.html)
    return ExitCode.SUCCESS


def _handle_build(args: argparse.Namespace, config: RenderConfig) -> int:
    """Dispatch ``cardgen build <payload.json>``."""
    if not args.payload.exists():
        print(f"error: file does not exist: {args.payload}", file=sys.stderr)
        return ExitCode.ERROR
    try:
        cards = decode_payload(_read_json(args.payload))
    except (PayloadError, json.JSONDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    print(f"Found {len(cards)} cards", file=sys.stderr)
    result = render_batch(cards, config=config, validate=args.build_validate)

    out_dir: Path = args.build_out
    out_dir.mkdir(parents=True, exist_ok=True)
    written = 0
    errors = result.errors
    for page in result.pages:
        if not _safe_output_name(page.output_name or ""):
            print(f"error: unsafe output name: {page.output_name!r}", file=sys.stderr)
            errors += 1
            continue
        (out_dir / f"{page.output_name}.html").write_text(page.html, encoding="utf-8")
        print(f"Generated: {page.output_name}.html", file=sys.stderr)
        written += 1

    (out_dir / "index.html").write_text(render_index_page(), encoding="utf-8")
    (out_dir / "404.html").write_text(render_not_found_page(), encoding="utf-8")

    print(
        f"Summary: {written} generated, {result.skipped} skipped, {errors} errors",
        file=sys.stderr,
    )
    return ExitCode.VIOLATION if errors else ExitCode.SUCCESS


def _handle_resolve(args: argparse.Namespace, config: RenderConfig) -> int:
    """Dispatch ``cardgen resolve <request.json>``."""
    if not args.request.exists():
        print(f"error: file does not exist: {args.request}", file=sys.stderr)
        return ExitCode.ERROR
    try:
        request = load_request(_read_json(args.request))
    except (CardgenError, json.JSONDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    sys.stdout.write(stable_json_dumps(resolve_card(request, config)))
    return ExitCode.SUCCESS


def _handle_validate(args: argparse.Namespace) -> int:
    """Dispatch ``cardgen validate <instance.json> <schema_name>``.

    Exit code contract:
      1 = schema violation
      2 = unreadable instance / unknown schema
    """
    try:
        validate_instance(_read_json(args.instance), args.schema_name)
    except jsonschema.ValidationError as e:
        print(f"FAIL: {e.message}", file=sys.stderr)
        return ExitCode.VIOLATION
    except (OSError, json.JSONDecodeError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    print("OK")
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point: returns an exit code (see ``cardgen.utils.exit_codes``)."""
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR

    if args.command == "validate":
        return _handle_validate(args)

    config = RenderConfig.from_env()

    if args.command == "render":
        return _handle_render(args, config)
    if args.command == "build":
        return _handle_build(args, config)
    if args.command == "resolve":
        return _handle_resolve(args, config)

    parser.print_help(sys.stderr)
    return ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())
