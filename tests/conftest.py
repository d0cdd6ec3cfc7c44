from eventemitter.testing.fixtures import emitter  # noqa: F401
