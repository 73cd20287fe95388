"""Runtime event vocabulary and name resolution."""

from enum import Enum

from bai.policy.errors import UnknownEventKindError


class EventKind(str, Enum):
    """Event categories raised by a Camel context.

    Policy keys name these case-insensitively by member name
    (``event.include.routestart...``).
    """

    # Context lifecycle
    CONTEXTSTARTED = "contextstarted"
    CONTEXTSTOPPED = "contextstopped"

    # Route lifecycle
    ROUTEADDED = "routeadded"
    ROUTEREMOVED = "routeremoved"
    ROUTESTART = "routestart"
    ROUTECOMPLETE = "routecomplete"

    # Exchange lifecycle
    EXCHANGECREATED = "exchangecreated"
    EXCHANGECOMPLETED = "exchangecompleted"
    EXCHANGEFAILED = "exchangefailed"
    EXCHANGEFAILUREHANDLED = "exchangefailurehandled"
    EXCHANGEREDELIVERY = "exchangeredelivery"
    EXCHANGESENDING = "exchangesending"
    EXCHANGESENT = "exchangesent"


def resolve_event_kind(token: str) -> EventKind:
    """Resolve a key token to its EventKind.

    The token is upper-cased and looked up by member name; no other
    normalization is applied.

    Raises:
        UnknownEventKindError: If no member has that name
    """
    try:
        return EventKind[token.upper()]
    except KeyError:
        raise UnknownEventKindError(token) from None
