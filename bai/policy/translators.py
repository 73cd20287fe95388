"""Qualifier translators: one small grammar per policy key dialect.

Every translator receives the key with its qualifier already split off
(``remainder``) plus the configured value, checks the structure of the
remainder and turns it into a Policy. Structural problems raise
MalformedKeyError; unknown event names raise UnknownEventKindError.

Dialects:

    camelContext.<include|exclude> = <pattern> [<pattern> ...]
    event.<include|exclude>.<eventName>.<bundlePattern> = <contextPattern>
    exchange.filter.<eventName>.<language>[/<bundlePattern>[/<contextPattern>]] = <expression>
    endpoint.<include|exclude>[/<bundlePattern>[/<contextPattern>]] = <endpointUriPattern>

The last dotted segment of each dialect absorbs any remaining dots, so
bundle symbolic names such as ``org.acme.orders`` can be used as patterns.
"""

from abc import ABC, abstractmethod

from bai.policy.enums import ActionType, FilterElement, FilterMethod, Qualifier
from bai.policy.errors import MalformedKeyError
from bai.policy.events import resolve_event_kind
from bai.policy.models import Policy, Scope
from bai.policy.scopes import (
    build_policy,
    enum_scope,
    event_scope,
    expression_scope,
    wildcard_scope,
)

SEGMENT_SEPARATOR = "."
PART_SEPARATOR = "/"


class QualifierTranslator(ABC):
    """Parses one key dialect into a Policy."""

    qualifier: Qualifier

    @abstractmethod
    def translate(self, key: str, remainder: str, value: str) -> Policy:
        """Translate a key (minus its qualifier) and its value into a Policy."""

    def _segments(self, key: str, remainder: str, count: int) -> list[str]:
        """Split the remainder into exactly ``count`` non-empty segments."""
        segments = remainder.split(SEGMENT_SEPARATOR, count - 1)
        if len(segments) != count or not all(segments):
            raise MalformedKeyError(
                key, f"expected {count} non-empty segment(s) after '{self.qualifier.value}'"
            )
        return segments

    def _parts(self, key: str, text: str, max_parts: int) -> list[str]:
        """Split a slashed segment into 1..max_parts non-empty parts."""
        parts = text.split(PART_SEPARATOR)
        if len(parts) > max_parts:
            raise MalformedKeyError(key, f"expected at most {max_parts} '/'-separated parts")
        if not all(parts):
            raise MalformedKeyError(key, "empty '/'-separated part")
        return parts

    def _require_value(self, key: str, value: str) -> str:
        if not value:
            raise MalformedKeyError(key, "value must not be empty")
        return value

    @staticmethod
    def _location_scopes(parts: list[str]) -> list[Scope]:
        """Bundle then context wildcard scopes from optional trailing parts."""
        scopes: list[Scope] = []
        if len(parts) >= 1:
            scopes.append(wildcard_scope(FilterElement.BUNDLE, parts[0]))
        if len(parts) >= 2:
            scopes.append(wildcard_scope(FilterElement.CONTEXT, parts[1]))
        return scopes


class CamelContextTranslator(QualifierTranslator):
    """``camelContext.(include|exclude) = ctxPattern [ctxPattern ...]``"""

    qualifier = Qualifier.CAMEL_CONTEXT

    def translate(self, key: str, remainder: str, value: str) -> Policy:
        (action,) = self._segments(key, remainder, 1)
        if SEGMENT_SEPARATOR in action:
            raise MalformedKeyError(key, "expected camelContext.<include|exclude>")

        patterns = value.split()
        if not patterns:
            raise MalformedKeyError(key, "no context patterns given")

        return build_policy(
            ActionType.from_keyword(action),
            [
                enum_scope(
                    FilterElement.CONTEXT, patterns, method=FilterMethod.ENUM_VALUE_MULTIPLE
                )
            ],
            source_key=key,
        )


class EventTranslator(QualifierTranslator):
    """``event.(include|exclude).eventName.bundlePattern = ctxPattern``"""

    qualifier = Qualifier.EVENT

    def translate(self, key: str, remainder: str, value: str) -> Policy:
        action, event_name, bundle_pattern = self._segments(key, remainder, 3)
        context_pattern = self._require_value(key, value)

        return build_policy(
            ActionType.from_keyword(action),
            [
                event_scope(resolve_event_kind(event_name)),
                wildcard_scope(FilterElement.BUNDLE, bundle_pattern),
                wildcard_scope(FilterElement.CONTEXT, context_pattern),
            ],
            source_key=key,
        )


class ExchangeTranslator(QualifierTranslator):
    """``exchange.filter.eventName.language[/bundle[/ctx]] = expression``

    Always INCLUDE: there is no exclude form, negate inside the expression.
    """

    qualifier = Qualifier.EXCHANGE

    def translate(self, key: str, remainder: str, value: str) -> Policy:
        _filter, event_name, language_spec = self._segments(key, remainder, 3)
        language, *location = self._parts(key, language_spec, 3)
        expression = self._require_value(key, value)

        scopes = [
            event_scope(resolve_event_kind(event_name)),
            expression_scope(FilterElement.EXCHANGE, language, expression),
            *self._location_scopes(location),
        ]
        return build_policy(ActionType.INCLUDE, scopes, source_key=key)


class EndpointTranslator(QualifierTranslator):
    """``endpoint.(include|exclude)[/bundle[/ctx]] = endpointUriPattern``"""

    qualifier = Qualifier.ENDPOINT

    def translate(self, key: str, remainder: str, value: str) -> Policy:
        if not remainder:
            raise MalformedKeyError(key, "expected endpoint.<include|exclude>[/bundle[/context]]")
        action, *location = self._parts(key, remainder, 3)
        if SEGMENT_SEPARATOR in action:
            raise MalformedKeyError(key, "expected endpoint.<include|exclude>[/bundle[/context]]")
        uri_pattern = self._require_value(key, value)

        scopes = [
            wildcard_scope(FilterElement.ENDPOINT, uri_pattern),
            *self._location_scopes(location),
        ]
        return build_policy(ActionType.from_keyword(action), scopes, source_key=key)


TRANSLATORS: dict[Qualifier, QualifierTranslator] = {
    translator.qualifier: translator
    for translator in (
        CamelContextTranslator(),
        EventTranslator(),
        ExchangeTranslator(),
        EndpointTranslator(),
    )
}


def get_translator(qualifier: Qualifier) -> QualifierTranslator:
    return TRANSLATORS[qualifier]
