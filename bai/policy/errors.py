"""Policy compiler exception hierarchy.

All compiler errors inherit from PolicyError. Errors raised while building a
PolicySet propagate out of compile()/recompile() and nothing is cached.
"""


class PolicyError(Exception):
    """Base exception for policy compilation errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnknownEventKindError(PolicyError):
    """Raised when a key names an event outside the EventKind vocabulary."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown event kind: {token!r}")
        self.token = token


class MalformedKeyError(PolicyError):
    """Raised when a key does not fit the grammar of its qualifier."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Malformed policy key {key!r}: {reason}")
        self.key = key
        self.reason = reason


class PolicySourceError(PolicyError):
    """Raised when a property source cannot supply usable key/value pairs."""
