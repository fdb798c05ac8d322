"""Command-line interface for propdoc."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress

from propdoc.core.config import config
from propdoc.core.error_handling import PropDocError
from propdoc.core.workspace import Workspace


def _open(src: str, console: Console) -> Workspace:
    try:
        return Workspace.open(src)
    except FileNotFoundError:
        console.print(f"[bold red]Path not found:[/bold red] {src}")
        sys.exit(1)


def _generate(src: str, out: str, names: List[str], console: Console) -> None:
    """Generate one page per component of ``src`` into ``out``."""
    ws = _open(src, console)
    files = ws.component_files(names)
    console.print(f"Generating documents...{': ' + ', '.join(names) if names else ''}")
    records = []
    with Progress(console=console, transient=True) as progress:
        task = progress.add_task("[green]Parsing...", total=len(files))
        for path in files:
            progress.update(task, description=f"[green]Parsing {path.name}")
            records.append(ws.parse(path))
            progress.advance(task)
    written = ws.write_pages(out, records)
    console.print(Panel(f"{len(written)} documents have been generated!", style="green"))


def _preview(src: str, names: List[str], raw_json: bool, console: Console) -> None:
    """Print the extracted records instead of writing pages."""
    ws = _open(src, console)
    data = [record.to_dict() for record in ws.parse_all(names)]
    if raw_json:
        print(json.dumps(data, indent=2))
    else:
        console.print_json(data=data)


def main() -> None:
    """Entry point for the ``propdoc`` command."""

    console = Console()
    parser = argparse.ArgumentParser(description="propdoc command-line interface")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--quiet", action="store_true", help="Reduce logs to errors only")
    sub = parser.add_subparsers(dest="command")

    generate_p = sub.add_parser("generate", help="Write component pages")
    generate_p.add_argument("src", help="Directory of component sources")
    generate_p.add_argument("--out", required=True, help="Output directory for pages")
    generate_p.add_argument("names", nargs="*", help="Only these components")

    preview_p = sub.add_parser("preview", help="Print extracted records")
    preview_p.add_argument("src", help="Directory of component sources")
    preview_p.add_argument("names", nargs="*", help="Only these components")
    preview_p.add_argument("--raw-json", action="store_true", help="Output raw JSON")

    args = parser.parse_args()
    if getattr(args, "debug", False):
        log_level = logging.DEBUG
    elif getattr(args, "quiet", False):
        log_level = logging.ERROR
    elif getattr(args, "verbose", False):
        log_level = logging.INFO
    else:
        log_level = config.get("logging", "level", "WARNING")
    logging.basicConfig(level=log_level)

    try:
        if args.command == "generate":
            _generate(args.src, args.out, args.names, console)
        elif args.command == "preview":
            _preview(args.src, args.names, args.raw_json, console)
        else:
            parser.print_help()
    except PropDocError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
