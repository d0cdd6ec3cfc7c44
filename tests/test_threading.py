import threading
import time

from eventemitter import EventEmitter


def test_registration_waits_for_running_dispatch():
    emitter = EventEmitter()
    order = []
    started = threading.Event()

    def slow():
        order.append("start")
        started.set()
        time.sleep(0.2)
        order.append("end")

    emitter.on("go", slow)
    worker = threading.Thread(target=emitter.emit, args=("go",))
    worker.start()
    assert started.wait(timeout=5)

    emitter.on("go", lambda: None)
    order.append("registered")
    worker.join(timeout=5)

    assert not worker.is_alive()
    assert order == ["start", "end", "registered"]
    assert emitter.listener_count("go") == 2


def test_removal_waits_for_running_dispatch():
    emitter = EventEmitter()
    order = []
    started = threading.Event()

    def slow():
        order.append("start")
        started.set()
        time.sleep(0.2)
        order.append("end")

    emitter.on("go", slow)
    worker = threading.Thread(target=emitter.emit, args=("go",))
    worker.start()
    assert started.wait(timeout=5)

    emitter.remove_listener("go", slow)
    order.append("removed")
    worker.join(timeout=5)

    assert not worker.is_alive()
    assert order == ["start", "end", "removed"]
    assert emitter.listeners("go") is None
