"""Listener records and the per-type listener sequence."""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Hashable, Iterator, Sequence

if TYPE_CHECKING:
    from ..emitter import EventEmitter


EventType = Hashable
Handler = Callable[..., Any]


@dataclass(slots=True, eq=False)
class Listener:
    """One handler subscribed to one event type.

    When ``scope`` is set the handler receives it as its first positional
    argument, the way a method receives ``self``. Without a scope the handler
    is called with the emitted arguments only.
    """

    type: EventType
    handler: Handler
    scope: Any = None
    once: bool = False
    emitter: EventEmitter | None = field(default=None, repr=False)
    fired: bool = field(default=False, init=False, repr=False)

    def fire(self, args: Sequence[Any] = ()) -> None:
        """Invoke the handler; one-shot listeners deregister even if it raises."""
        if self.once:
            self.fired = True
        try:
            if self.scope is None:
                self.handler(*args)
            else:
                self.handler(self.scope, *args)
        finally:
            if self.once and self.emitter is not None:
                self.emitter.discard(self)

    def matches(self, handler: Handler) -> bool:
        if self.handler is handler:
            return True
        # obj.method builds a new bound method object on every access
        return inspect.ismethod(handler) and self.handler == handler


class _Cursor:
    __slots__ = ("position",)

    def __init__(self) -> None:
        self.position = 0


class ListenerList(list):
    """Live, ordered listeners of a single event type.

    Walks run over the list itself rather than a copy. Removing an element at
    or before a walk's position moves that walk back by one, so nothing that
    shifted into the current slot is skipped.
    """

    __slots__ = ("warned", "_cursors")

    def __init__(self, listeners: Sequence[Listener] = ()) -> None:
        super().__init__(listeners)
        self.warned = False
        self._cursors: list[_Cursor] = []

    def remove_at(self, index: int) -> Listener:
        listener = self.pop(index)
        for cursor in self._cursors:
            if index <= cursor.position:
                cursor.position -= 1
        return listener

    def walk(self) -> Iterator[tuple[int, Listener]]:
        cursor = _Cursor()
        self._cursors.append(cursor)
        try:
            while cursor.position < len(self):
                yield cursor.position, self[cursor.position]
                cursor.position += 1
        finally:
            self._cursors.remove(cursor)


__all__ = ["EventType", "Handler", "Listener", "ListenerList"]
