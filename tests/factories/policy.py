"""Test factories for policy model objects."""

from collections.abc import Sequence

from bai.policy.enums import ActionType, FilterElement, FilterMethod
from bai.policy.models import Policy, PolicySet, Scope
from bai.policy.wildcard import WILDCARD_LANGUAGE


class ScopeFactory:
    """Factory for creating Scope instances for testing."""

    @staticmethod
    def wildcard(
        element: FilterElement = FilterElement.BUNDLE,
        pattern: str = "orders*",
    ) -> Scope:
        return Scope(
            element=element,
            method=FilterMethod.EXPRESSION,
            expression_language=WILDCARD_LANGUAGE,
            expression=pattern,
        )

    @staticmethod
    def contexts(*names: str) -> Scope:
        return Scope(
            element=FilterElement.CONTEXT,
            method=FilterMethod.ENUM_VALUE_MULTIPLE,
            enum_values=frozenset(names or ("ctx-a", "ctx-b")),
        )

    @staticmethod
    def event(name: str = "ROUTESTART") -> Scope:
        return Scope(
            element=FilterElement.EVENT,
            method=FilterMethod.ENUM_VALUE_ONE,
            enum_values=frozenset({name}),
        )


class PolicyFactory:
    """Factory for creating Policy and PolicySet instances for testing."""

    @staticmethod
    def create(
        *,
        action: ActionType = ActionType.INCLUDE,
        scopes: Sequence[Scope] | None = None,
        source_key: str | None = None,
    ) -> Policy:
        return Policy(
            action=action,
            scopes=tuple(scopes) if scopes is not None else (ScopeFactory.wildcard(),),
            source_key=source_key,
        )

    @staticmethod
    def create_set(*policies: Policy) -> PolicySet:
        return PolicySet(tuple(policies))
