"""Example wiring of a small order workflow on an event emitter.

Run ``eventemitter-inspect examples.basic_usage`` from the repository root to
see the registered listeners.
"""

from __future__ import annotations

import logging

from eventemitter import NEW_LISTENER, EmitterConfig, EventEmitter


class Ledger:
    def __init__(self) -> None:
        self.total = 0

    def record(self, order_id: str, amount: int) -> None:
        self.total += amount
        print(f"Order {order_id}: +{amount} (total {self.total})")


def announce_subscription(event_type, handler, scope, once) -> None:
    kind = "once" if once else "on"
    print(f"{kind}({event_type!r}, {getattr(handler, '__name__', handler)})")


def greet(shop: dict, customer: str) -> None:
    print(f"{shop['name']} welcomes {customer}")


def register(emitter: EventEmitter) -> None:
    """Subscribe the workflow listeners."""
    ledger = Ledger()
    shop = {"name": "Corner Shop"}
    emitter.on(NEW_LISTENER, announce_subscription)
    emitter.on("order:paid", ledger.record)
    emitter.once("customer:first-visit", greet, shop)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    emitter = EventEmitter(EmitterConfig.from_env())
    register(emitter)
    emitter.emit("customer:first-visit", ["Alice"]).emit("customer:first-visit", ["Bob"])
    emitter.emit("order:paid", ["A-1", 30]).emit("order:paid", ["A-2", 12])


if __name__ == "__main__":
    main()
