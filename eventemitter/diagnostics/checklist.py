"""Automated checks to highlight likely listener leaks."""

from __future__ import annotations

import inspect
from collections import Counter
from dataclasses import dataclass

from ..emitter import EventEmitter

NEAR_LIMIT_RATIO = 0.8


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


def run_checklist(emitter: EventEmitter) -> list[ChecklistIssue]:
    issues: list[ChecklistIssue] = []
    limit = emitter.get_max_listeners()
    if not limit:
        issues.append(
            ChecklistIssue("warning", "Leak detection is disabled (max listeners is 0).")
        )

    for event_type in emitter.event_types():
        listeners = emitter.listeners(event_type) or ()
        count = len(listeners)
        if limit and count > limit:
            issues.append(
                ChecklistIssue(
                    "error",
                    f"Event {event_type!r} has {count} listeners, above the limit of {limit}.",
                )
            )
        elif limit and count >= limit * NEAR_LIMIT_RATIO:
            issues.append(
                ChecklistIssue(
                    "warning",
                    f"Event {event_type!r} has {count} listeners, close to the limit of {limit}.",
                )
            )

        handlers = Counter(_handler_key(listener.handler) for listener in listeners)
        for listener in listeners:
            repeats = handlers.pop(_handler_key(listener.handler), 0)
            if repeats > 1:
                issues.append(
                    ChecklistIssue(
                        "warning",
                        f"Handler {_describe(listener.handler)} is subscribed to "
                        f"{event_type!r} {repeats} times.",
                    )
                )

    return issues


def _describe(handler: object) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


def _handler_key(handler: object) -> tuple[int, int]:
    if inspect.ismethod(handler):
        return id(handler.__func__), id(handler.__self__)
    return id(handler), 0
