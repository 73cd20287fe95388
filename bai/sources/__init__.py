"""Property sources supplying raw policy keys to the compiler."""

from bai.sources.base import PropertySource
from bai.sources.inmemory import InMemoryPropertySource
from bai.sources.toml import TomlPropertySource, flatten_table

__all__ = [
    "PropertySource",
    "InMemoryPropertySource",
    "TomlPropertySource",
    "flatten_table",
]
