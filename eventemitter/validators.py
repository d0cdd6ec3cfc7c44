"""Validation utilities for event emitters."""

from __future__ import annotations

from .emitter import EventEmitter


def validate_emitter(emitter: EventEmitter) -> list[str]:
    """Return list of structural problems discovered in the emitter's registry."""
    errors: list[str] = []

    if emitter.get_max_listeners() < 0:
        errors.append(f"Max listeners '{emitter.get_max_listeners()}' cannot be negative.")

    for event_type in emitter.event_types():
        listeners = emitter.listeners(event_type)
        if listeners is None:
            continue
        if not listeners:
            errors.append(f"Event type {event_type!r} is registered with an empty listener list.")

        seen: set[int] = set()
        for index, listener in enumerate(listeners):
            if id(listener) in seen:
                errors.append(f"Event type {event_type!r} holds listener #{index} more than once.")
            seen.add(id(listener))

            if listener.type != event_type:
                errors.append(
                    f"Listener #{index} of {event_type!r} is recorded under type {listener.type!r}."
                )
            if listener.emitter is not emitter:
                errors.append(f"Listener #{index} of {event_type!r} belongs to another emitter.")
            if not callable(listener.handler):
                errors.append(f"Listener #{index} of {event_type!r} has a non-callable handler.")
            if listener.once and listener.fired:
                errors.append(f"One-shot listener #{index} of {event_type!r} fired but was not removed.")

    return errors


__all__ = ["validate_emitter"]
