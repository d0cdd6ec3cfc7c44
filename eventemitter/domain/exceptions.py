"""Exceptions raised by the event emitter."""


class EventEmitterError(RuntimeError):
    """Base class for emitter exceptions."""


class InvalidListener(EventEmitterError, TypeError):
    """Raised when a non-callable handler is registered."""

    def __init__(self, handler: object) -> None:
        super().__init__(f"Listener must be callable, got {type(handler).__name__}")
        self.handler = handler


class InvalidMaxListeners(EventEmitterError, ValueError):
    """Raised when the listener limit is not a non-negative integer."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Max listeners must be a non-negative integer, got {value!r}")
        self.value = value
