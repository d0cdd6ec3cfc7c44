"""Synchronous, in-process event emitter."""

from __future__ import annotations

import logging
import threading
from contextlib import closing
from typing import Any, Callable, Sequence

from .config import EmitterConfig
from .domain.exceptions import InvalidListener, InvalidMaxListeners
from .domain.listener import EventType, Handler, Listener, ListenerList

NEW_LISTENER = "newListener"

LEAK_WARNING = (
    "Possible EventEmitter memory leak detected. %d listeners added for %r. "
    "Use emitter.set_max_listeners() to increase limit."
)

WalkCallback = Callable[[Listener, int], "bool | None"]


class EventEmitter:
    """Register listeners for named events and fire them in registration order.

    Every mutator returns the emitter so calls can be chained::

        emitter.on("ready", start).once("ready", announce).emit("ready")

    Registering any listener first emits ``"newListener"`` with
    ``(event_type, handler, scope, once)``. Listeners may add or remove
    listeners, and emit again, while a dispatch is running.
    """

    def __init__(
        self,
        config: EmitterConfig | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or EmitterConfig()
        self._listeners: dict[EventType, ListenerList] = {}
        self._logger = logger or logging.getLogger(self.config.logger_name)
        self._lock = threading.RLock()
        self._max_listeners = 0
        self.set_max_listeners(self.config.effective_max_listeners())

    def add_listener(
        self,
        event_type: EventType,
        handler: Handler,
        scope: Any = None,
        once: bool = False,
    ) -> "EventEmitter":
        if not callable(handler):
            raise InvalidListener(handler)
        with self._lock:
            # announced before insertion so a "newListener" observer never hears about itself
            self.emit(NEW_LISTENER, (event_type, handler, scope, once))

            listeners = self._listeners.get(event_type)
            if listeners is None:
                listeners = self._listeners[event_type] = ListenerList()
            listeners.append(Listener(event_type, handler, scope, once, self))
            self._logger.debug(
                "Added %s listener %r for %r",
                "once" if once else "persistent",
                handler,
                event_type,
            )

            if (
                self._max_listeners
                and not listeners.warned
                and len(listeners) > self._max_listeners
            ):
                self._logger.warning(LEAK_WARNING, len(listeners), event_type)
                listeners.warned = True
        return self

    on = add_listener

    def once(self, event_type: EventType, handler: Handler, scope: Any = None) -> "EventEmitter":
        return self.add_listener(event_type, handler, scope, once=True)

    def remove_listener(self, event_type: EventType, handler: Handler) -> "EventEmitter":
        """Remove every listener of ``event_type`` registered with ``handler``."""
        with self._lock:
            listeners = self._listeners.get(event_type)
            if listeners is None:
                return self

            def remove_match(listener: Listener, index: int) -> None:
                if listener.matches(handler):
                    listeners.remove_at(index)
                    self._logger.debug("Removed listener %r for %r", handler, event_type)

            self.each_listener(event_type, remove_match)
            self._prune(event_type, listeners)
        return self

    off = remove_listener

    def discard(self, listener: Listener) -> "EventEmitter":
        """Remove one specific listener record, leaving others with the same handler."""
        with self._lock:
            listeners = self._listeners.get(listener.type)
            if listeners is None:
                return self
            for index, current in enumerate(listeners):
                if current is listener:
                    listeners.remove_at(index)
                    break
            self._prune(listener.type, listeners)
        return self

    def remove_all_listeners(self, event_type: EventType | None = None) -> "EventEmitter":
        """Drop the listeners of ``event_type``, or of every type when omitted."""
        with self._lock:
            if event_type is None:
                # emptied in place so running dispatches stop at their next step
                for listeners in self._listeners.values():
                    listeners.clear()
                self._listeners.clear()
            else:
                listeners = self._listeners.pop(event_type, None)
                if listeners is not None:
                    listeners.clear()
        return self

    def listeners(self, event_type: EventType) -> ListenerList | None:
        """Return the live listener sequence, or ``None`` for an unknown type.

        The returned list is the one dispatch walks; do not mutate it.
        """
        return self._listeners.get(event_type)

    def listener_count(self, event_type: EventType) -> int:
        listeners = self._listeners.get(event_type)
        return len(listeners) if listeners is not None else 0

    def event_types(self) -> list[EventType]:
        return list(self._listeners)

    def each_listener(self, event_type: EventType, callback: WalkCallback) -> "EventEmitter":
        """Pass each listener of ``event_type`` and its index to ``callback``.

        The walk follows the live sequence. ``callback`` may remove entries;
        returning ``True`` stops the walk.
        """
        with self._lock:
            listeners = self._listeners.get(event_type)
            if listeners is None:
                return self
            with closing(listeners.walk()) as walker:
                for index, listener in walker:
                    if callback(listener, index) is True:
                        break
        return self

    def emit(self, event_type: EventType, args: Sequence[Any] | None = None) -> "EventEmitter":
        """Call every listener of ``event_type`` with ``args``.

        A bare string or bytes value is passed as a single argument.

        Exceptions raised by a listener propagate immediately; listeners after
        it are not called for this emit.
        """
        if args is None:
            args = ()
        elif isinstance(args, (str, bytes)):
            args = (args,)

        def fire(listener: Listener, index: int) -> None:
            if listener.once and listener.fired:
                return
            listener.fire(args)

        with self._lock:
            self.each_listener(event_type, fire)
        return self

    def set_max_listeners(self, max_listeners: int) -> "EventEmitter":
        """Set the listener count above which a leak warning is logged; 0 disables it."""
        if (
            not isinstance(max_listeners, int)
            or isinstance(max_listeners, bool)
            or max_listeners < 0
        ):
            raise InvalidMaxListeners(max_listeners)
        with self._lock:
            self._max_listeners = max_listeners
        return self

    def get_max_listeners(self) -> int:
        return self._max_listeners

    def _prune(self, event_type: EventType, listeners: ListenerList) -> None:
        if not listeners and self._listeners.get(event_type) is listeners:
            del self._listeners[event_type]

    def __repr__(self) -> str:
        counts = {event_type: len(listeners) for event_type, listeners in self._listeners.items()}
        return f"EventEmitter(max_listeners={self._max_listeners}, listeners={counts!r})"


__all__ = ["EventEmitter", "LEAK_WARNING", "NEW_LISTENER"]
