"""Test factories for creating test data."""

from tests.factories.policy import PolicyFactory, ScopeFactory
from tests.factories.sources import CountingPropertySource

__all__ = [
    "CountingPropertySource",
    "PolicyFactory",
    "ScopeFactory",
]
