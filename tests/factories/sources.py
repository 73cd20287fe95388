"""Test property sources."""

from collections.abc import Iterable

from bai.sources.inmemory import InMemoryPropertySource


class CountingPropertySource(InMemoryPropertySource):
    """In-memory source that counts how often its keys are enumerated.

    Each compiler build enumerates keys exactly once, so ``key_reads``
    counts builds.
    """

    def __init__(self, properties: dict[str, str] | None = None) -> None:
        super().__init__(properties)
        self.key_reads = 0

    def keys(self) -> Iterable[str]:
        self.key_reads += 1
        return super().keys()
