"""Policy DSL compiler.

Turns flat auditing keys such as::

    camelContext.exclude = audit-ctx monitoring-*
    event.include.routestart.orders* = ctx*
    exchange.filter.exchangesent.xpath/orders*/ctx* = //order
    endpoint.exclude/orders* = seda:*

into an immutable PolicySet of include/exclude policies, each guarded by
a conjunction of scopes.

Compilers wired to a configured property source come from
``bai.policy.factory.create_policy_compiler``.
"""

from bai.policy.compiler import CompilerState, PolicyCompiler
from bai.policy.enums import ActionType, FilterElement, FilterMethod, Qualifier
from bai.policy.errors import (
    MalformedKeyError,
    PolicyError,
    PolicySourceError,
    UnknownEventKindError,
)
from bai.policy.events import EventKind, resolve_event_kind
from bai.policy.models import Policy, PolicySet, Scope
from bai.policy.scopes import (
    build_policy,
    enum_scope,
    event_scope,
    expression_scope,
    prune_redundant_scopes,
    wildcard_scope,
)
from bai.policy.wildcard import WILDCARD_LANGUAGE, compile_wildcard, matches_wildcard

__all__ = [
    # Compiler
    "PolicyCompiler",
    "CompilerState",
    # Model
    "ActionType",
    "FilterElement",
    "FilterMethod",
    "Qualifier",
    "Policy",
    "PolicySet",
    "Scope",
    # Events
    "EventKind",
    "resolve_event_kind",
    # Scopes
    "build_policy",
    "enum_scope",
    "event_scope",
    "expression_scope",
    "prune_redundant_scopes",
    "wildcard_scope",
    # Wildcard language
    "WILDCARD_LANGUAGE",
    "compile_wildcard",
    "matches_wildcard",
    # Errors
    "PolicyError",
    "UnknownEventKindError",
    "MalformedKeyError",
    "PolicySourceError",
]
