"""Scope construction and redundant-scope pruning."""

from collections.abc import Iterable

from bai.policy.enums import ActionType, FilterElement, FilterMethod
from bai.policy.events import EventKind
from bai.policy.models import Policy, Scope
from bai.policy.wildcard import WILDCARD_LANGUAGE


def enum_scope(
    element: FilterElement,
    values: Iterable[str],
    method: FilterMethod | None = None,
) -> Scope:
    """Scope matching one of the given values.

    Without an explicit method a single value yields ENUM_VALUE_ONE and
    several yield ENUM_VALUE_MULTIPLE.
    """
    enum_values = frozenset(values)
    if method is None:
        method = (
            FilterMethod.ENUM_VALUE_ONE
            if len(enum_values) == 1
            else FilterMethod.ENUM_VALUE_MULTIPLE
        )
    return Scope(element=element, method=method, enum_values=enum_values)


def event_scope(kind: EventKind) -> Scope:
    """Scope restricting a policy to one event kind."""
    return Scope(
        element=FilterElement.EVENT,
        method=FilterMethod.ENUM_VALUE_ONE,
        enum_values=frozenset({kind.name}),
    )


def expression_scope(element: FilterElement, language: str, expression: str) -> Scope:
    return Scope(
        element=element,
        method=FilterMethod.EXPRESSION,
        expression_language=language,
        expression=expression,
    )


def wildcard_scope(element: FilterElement, pattern: str) -> Scope:
    """Expression scope in the wildcard-aware string language."""
    return expression_scope(element, WILDCARD_LANGUAGE, pattern)


def prune_redundant_scopes(scopes: Iterable[Scope]) -> tuple[Scope, ...]:
    """Drop scopes identical to an earlier one, keeping first-seen order."""
    seen: set[tuple[object, ...]] = set()
    pruned: list[Scope] = []
    for scope in scopes:
        if scope.signature in seen:
            continue
        seen.add(scope.signature)
        pruned.append(scope)
    return tuple(pruned)


def build_policy(
    action: ActionType,
    scopes: Iterable[Scope],
    source_key: str | None = None,
) -> Policy:
    """Prune redundant scopes and build the policy."""
    return Policy(
        action=action,
        scopes=prune_redundant_scopes(scopes),
        source_key=source_key,
    )
