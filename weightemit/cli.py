"""Command line helpers for weightemit."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from rich.console import Console
from rich.table import Table

from .config import EmitterConfig
from .diagnostics.plan import build_plan
from .domain.exceptions import InvalidArgument
from .emitter import WeightedEmitter

console = Console()


def run_plan(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Show the order in which weighted listeners would be called"
    )
    parser.add_argument(
        "names",
        nargs="+",
        help="Registration names in subscription order, e.g. saved.2 saved saved.1",
    )
    parser.add_argument("--event", help="Only show the plan for this event key")
    parser.add_argument(
        "--once",
        action="append",
        default=[],
        metavar="NAME",
        help="Register NAME as a one-shot listener (may be repeated)",
    )
    parser.add_argument("--emit", action="store_true", help="Dispatch each event after planning")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = EmitterConfig.from_env()
    if args.verbose:
        config.log_dispatch = True
    emitter = WeightedEmitter(config)
    journal: list[str] = []

    try:
        for index, name in enumerate(args.names, start=1):
            emitter.on(name, _labelled(journal, f"#{index} {name}"))
        for index, name in enumerate(args.once, start=len(args.names) + 1):
            emitter.once(name, _labelled(journal, f"#{index} {name} (once)"))
    except InvalidArgument as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        sys.exit(1)

    keys = [args.event] if args.event else emitter.event_names()
    for key in keys:
        table = Table(title=f"Delivery plan for '{key}'")
        table.add_column("#", justify="right")
        table.add_column("Weight", justify="right")
        table.add_column("Listener")
        table.add_column("Once")
        for entry in build_plan(emitter, key):
            table.add_row(str(entry.position), entry.weight, entry.label, "yes" if entry.once else "")
        console.print(table)

        if args.emit:
            journal.clear()
            emitter.emit(key)
            console.print(f"Dispatched '{key}': {', '.join(journal) or 'no listeners'}")


def _labelled(journal: list[str], label: str):
    def listener(*args) -> None:
        journal.append(label)

    listener.__qualname__ = label
    return listener
