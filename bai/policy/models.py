"""Policy model.

A Policy is an include/exclude action guarded by a conjunction of scopes;
a PolicySet is the ordered result of compiling every policy key. All models
are frozen: a compiled PolicySet can be shared between threads without
further locking.
"""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

from bai.policy.enums import ActionType, FilterElement, FilterMethod


class Scope(BaseModel):
    """One filter constraint within a policy.

    Enum-based methods carry ``enum_values``; EXPRESSION carries
    ``expression_language`` and ``expression``. Never both.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    element: FilterElement = Field(..., description="Dimension being constrained")
    method: FilterMethod = Field(..., description="How the element is matched")
    enum_values: frozenset[str] = Field(
        default_factory=frozenset,
        description="Accepted values for enum-based methods",
    )
    expression_language: str | None = Field(
        default=None,
        description="Language of the expression (e.g. wildcardAwareString, xpath)",
    )
    expression: str | None = Field(default=None, description="Expression text")

    @model_validator(mode="after")
    def check_operands(self) -> "Scope":
        if self.method is FilterMethod.EXPRESSION:
            if not self.expression_language or self.expression is None:
                raise ValueError("expression scopes need a language and an expression")
            if self.enum_values:
                raise ValueError("expression scopes cannot carry enum values")
            return self

        if self.expression_language is not None or self.expression is not None:
            raise ValueError("enum scopes cannot carry an expression")
        if not self.enum_values:
            raise ValueError("enum scopes need at least one value")
        if self.method is FilterMethod.ENUM_VALUE_ONE and len(self.enum_values) != 1:
            raise ValueError("ENUM_VALUE_ONE scopes take exactly one value")
        return self

    @property
    def is_expression(self) -> bool:
        """Check if this scope matches by expression."""
        return self.method is FilterMethod.EXPRESSION

    @property
    def signature(self) -> tuple[object, ...]:
        """Structural identity used to detect redundant scopes."""
        return (
            self.element,
            self.method,
            self.enum_values,
            self.expression_language,
            self.expression,
        )


class Policy(BaseModel):
    """An include/exclude decision; an event matches only if every scope matches."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    action: ActionType
    scopes: tuple[Scope, ...] = Field(..., min_length=1)
    source_key: str | None = Field(
        default=None,
        description="Configuration key this policy was compiled from",
    )

    @model_validator(mode="after")
    def check_unique_scopes(self) -> "Policy":
        if len({scope.signature for scope in self.scopes}) != len(self.scopes):
            raise ValueError("policy scopes must not contain duplicates")
        return self

    @property
    def is_exclude(self) -> bool:
        return self.action is ActionType.EXCLUDE

    def scopes_for(self, element: FilterElement) -> tuple[Scope, ...]:
        """Scopes constraining the given element, in policy order."""
        return tuple(scope for scope in self.scopes if scope.element is element)


class PolicySet(RootModel[tuple[Policy, ...]]):
    """Ordered, immutable collection of compiled policies."""

    model_config = ConfigDict(frozen=True)

    root: tuple[Policy, ...] = ()

    def __iter__(self) -> Iterator[Policy]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Policy:
        return self.root[index]

    def includes(self) -> tuple[Policy, ...]:
        return tuple(p for p in self.root if p.action is ActionType.INCLUDE)

    def excludes(self) -> tuple[Policy, ...]:
        return tuple(p for p in self.root if p.action is ActionType.EXCLUDE)

    def by_element(self, element: FilterElement) -> tuple[Policy, ...]:
        """Policies with at least one scope on the given element."""
        return tuple(p for p in self.root if p.scopes_for(element))
