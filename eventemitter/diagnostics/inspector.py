"""Render the listeners registered on an emitter."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from ..emitter import EventEmitter


def build_listener_table(emitter: EventEmitter) -> Table:
    limit = emitter.get_max_listeners()
    table = Table(
        title=f"Listeners (max {limit or 'unlimited'})",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Event")
    table.add_column("#", justify="right")
    table.add_column("Handler")
    table.add_column("Scope")
    table.add_column("Once")

    for event_type in emitter.event_types():
        listeners = emitter.listeners(event_type)
        if listeners is None:
            continue
        style = "red" if listeners.warned else None
        for index, listener in enumerate(listeners):
            table.add_row(
                str(event_type),
                str(index),
                getattr(listener.handler, "__qualname__", None) or repr(listener.handler),
                "" if listener.scope is None else type(listener.scope).__name__,
                "yes" if listener.once else "",
                style=style,
            )
    return table


def print_listener_table(emitter: EventEmitter, console: Console | None = None) -> None:
    console = console or Console()
    if not emitter.event_types():
        console.print("No listeners registered.", style="yellow")
        return
    console.print(build_listener_table(emitter))
