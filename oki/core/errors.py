"""Error types raised by the timer and session core."""


class OkiError(Exception):
    """Base class for everything the core raises on purpose."""


class InvalidStateError(OkiError):
    """A timer operation was called in a state that forbids it."""

    def __init__(self, operation, state):
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation}() a timer that is {state.value}")


class InvalidDurationError(OkiError):
    """The requested duration has no representable countdown (negative total)."""


class PersistenceError(OkiError):
    """The key-value store failed to read or write."""
