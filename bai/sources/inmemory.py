"""In-memory implementation of PropertySource."""

from collections.abc import Iterable, Mapping

from bai.sources.base import PropertySource


class InMemoryPropertySource(PropertySource):
    """Dict-backed property source for testing and embedded use.

    Keys keep insertion order. Changes take effect on the compiler's next
    recompile().
    """

    def __init__(self, properties: Mapping[str, str] | None = None) -> None:
        self._properties: dict[str, str] = dict(properties or {})

    def keys(self) -> Iterable[str]:
        # Snapshot so a concurrent set()/remove() cannot break iteration
        return list(self._properties)

    def get(self, key: str) -> str:
        return self._properties[key]

    def set(self, key: str, value: str) -> None:
        self._properties[key] = value

    def remove(self, key: str) -> bool:
        """Remove a key, returning whether it was present."""
        return self._properties.pop(key, None) is not None
