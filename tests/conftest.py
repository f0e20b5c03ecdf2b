from weightemit.testing.fixtures import emitter, recorder  # noqa: F401
