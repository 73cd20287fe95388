"""Enums for the policy model."""

from enum import Enum


class ActionType(str, Enum):
    """What happens to events matched by a policy."""

    INCLUDE = "include"
    EXCLUDE = "exclude"

    @classmethod
    def from_keyword(cls, keyword: str) -> "ActionType":
        """Anything other than 'exclude' (any case) means include."""
        if keyword.lower() == cls.EXCLUDE.value:
            return cls.EXCLUDE
        return cls.INCLUDE


class FilterElement(str, Enum):
    """The dimension a scope constrains.

    - CONTEXT: the owning Camel context (container)
    - EVENT: the event kind itself
    - BUNDLE: the hosting OSGi bundle (module)
    - EXCHANGE: the in-flight message
    - ENDPOINT: the endpoint URI
    """

    CONTEXT = "context"
    EVENT = "event"
    BUNDLE = "bundle"
    EXCHANGE = "exchange"
    ENDPOINT = "endpoint"


class FilterMethod(str, Enum):
    """How a scope matches its element.

    - ENUM_VALUE_ONE: equals exactly one enumerated value
    - ENUM_VALUE_MULTIPLE: equals one of several enumerated values
    - EXPRESSION: satisfies an expression in a named language
    """

    ENUM_VALUE_ONE = "enum_value_one"
    ENUM_VALUE_MULTIPLE = "enum_value_multiple"
    EXPRESSION = "expression"


class Qualifier(str, Enum):
    """First segment of a policy key; selects the key dialect."""

    CAMEL_CONTEXT = "camelContext"
    EVENT = "event"
    EXCHANGE = "exchange"
    ENDPOINT = "endpoint"

    @classmethod
    def parse(cls, token: str) -> "Qualifier | None":
        """Return the matching qualifier, or None for unrecognized tokens.

        Matching is case-sensitive.
        """
        try:
            return cls(token)
        except ValueError:
            return None
