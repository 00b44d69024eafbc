"""CLI entry point: python -m metagen {extract,scrape} FILE... [options]"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from metagen import settings
from metagen.api import MetadataResult, async_extract_metadata_from_file
from metagen.errors import MetadataError
from metagen.extractors.metatags import extract_meta_tags
from metagen.items import MetaTag
from metagen.profiles import load_profile

logger = logging.getLogger(__name__)

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--profile", default=None, metavar="PATH",
                        help="YAML profile file supplying option defaults")
    common.add_argument("--profile-name", default=None, metavar="NAME",
                        help="Named section of the profile file to apply")
    common.add_argument("--log-level", default=None, choices=_LEVELS,
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help=f"Logging level (default: {settings.LOG_LEVEL})")
    common.add_argument("--json", dest="output", action="store_const", const="json",
                        default=None, help="Print JSON instead of tables")

    parser = argparse.ArgumentParser(
        prog="metagen",
        description=(
            "Extract front-matter metadata (YAML, TOML, JSON) from documents\n"
            "and render it as HTML meta tags, or scrape meta tags from HTML."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    extract = sub.add_parser("extract", parents=[common], help="Extract front matter from documents")
    extract.add_argument("files", nargs="+", metavar="FILE")
    extract.add_argument("--process", action="store_true", default=None,
                         help="Normalize the date, require title/date and derive the slug")

    scrape = sub.add_parser("scrape", parents=[common], help="List the <meta> tags of HTML files")
    scrape.add_argument("files", nargs="+", metavar="FILE")
    return parser


def _resolve_options(args: argparse.Namespace) -> dict[str, Any]:
    """Merge CLI flags over profile values over built-in defaults."""
    options: dict[str, Any] = {
        "process": False,
        "log_level": settings.LOG_LEVEL,
        "output": "text",
    }
    if args.profile:
        options.update(load_profile(args.profile, args.profile_name))
    if getattr(args, "process", None) is not None:
        options["process"] = args.process
    if args.log_level is not None:
        options["log_level"] = args.log_level
    if args.output is not None:
        options["output"] = args.output
    return options


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _print_extract_text(path: str, result: MetadataResult) -> None:
    from rich import box
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table

    metadata, keywords, groups = result
    console = Console()
    tbl = Table(title=f"[bold cyan]{escape(path)}[/bold cyan]", box=box.SIMPLE_HEAVY)
    tbl.add_column("Key", style="green", no_wrap=True)
    tbl.add_column("Value")
    for key, value in metadata.items():
        tbl.add_row(escape(key), escape(value))
    console.print(tbl)
    if keywords:
        console.print(f"  [bold]Keywords:[/bold] {escape(', '.join(keywords))}")
    if not groups.is_empty():
        console.print("  [bold]Meta tags:[/bold]")
        console.print(str(groups).strip("\n"), markup=False, highlight=False)


def _print_scrape_text(path: str, tags: list[MetaTag]) -> None:
    from rich import box
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table

    tbl = Table(title=f"[bold cyan]{escape(path)}[/bold cyan] ({len(tags)} tags)", box=box.SIMPLE_HEAVY)
    tbl.add_column("#", style="dim", justify="right", width=4)
    tbl.add_column("Name", style="green", no_wrap=True)
    tbl.add_column("Content")
    for i, tag in enumerate(tags, 1):
        tbl.add_row(str(i), escape(tag.name), escape(tag.content))
    Console().print(tbl)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

async def _extract_all(files: list[str], process: bool) -> list[MetadataResult]:
    return await asyncio.gather(
        *(async_extract_metadata_from_file(f, process=process) for f in files),
    )


def _run_extract(files: list[str], options: dict[str, Any]) -> None:
    results = asyncio.run(_extract_all(files, options["process"]))
    if options["output"] == "json":
        payload = [
            {
                "file": path,
                "metadata": metadata,
                "keywords": keywords,
                "meta_tags": groups.model_dump(),
            }
            for path, (metadata, keywords, groups) in zip(files, results, strict=True)
        ]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    for path, result in zip(files, results, strict=True):
        _print_extract_text(path, result)


def _run_scrape(files: list[str], options: dict[str, Any]) -> None:
    scraped: list[tuple[str, list[MetaTag]]] = []
    for path in files:
        html = Path(path).read_text(encoding="utf-8", errors="replace")
        scraped.append((path, extract_meta_tags(html)))
    if options["output"] == "json":
        payload = [
            {"file": path, "meta_tags": [t.model_dump() for t in tags]}
            for path, tags in scraped
        ]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    for path, tags in scraped:
        _print_scrape_text(path, tags)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    options = _resolve_options(args)

    logging.basicConfig(level=str(options["log_level"]).upper(), format=settings.LOG_FORMAT)

    try:
        if args.command == "extract":
            _run_extract(args.files, options)
        else:
            _run_scrape(args.files, options)
    except MetadataError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
