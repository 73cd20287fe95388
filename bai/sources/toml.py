"""TOML file implementation of PropertySource.

Policy keys are dotted, so TOML's dotted keys express them directly:

    camelContext.exclude = "audit-ctx monitoring-*"
    event.exclude.exchangesent."org.acme.*" = "*"
    exchange.filter.exchangesent."xpath/orders*/ctx*" = "//order[@priority='high']"
    endpoint."exclude/orders*" = "seda:*"

Nested tables are flattened back into dotted keys. Segments containing
``/`` or ``.`` must be quoted.
"""

from pathlib import Path
from typing import Any

from bai.config.loader import flatten_keys, load_toml
from bai.observability.logging import get_logger
from bai.policy.errors import PolicySourceError
from bai.sources.base import PropertySource

logger = get_logger(__name__)


def flatten_table(table: dict[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested TOML tables into dotted keys with string values.

    Arrays of strings are joined with a single space, which is how
    multi-pattern values (camelContext include/exclude lists) are written.

    Raises:
        PolicySourceError: For values that are neither strings nor arrays of strings
    """
    flat: dict[str, str] = {}
    for key, value in flatten_keys(table, prefix).items():
        if isinstance(value, str):
            flat[key] = value
        elif isinstance(value, list) and all(isinstance(item, str) for item in value):
            flat[key] = " ".join(value)
        else:
            raise PolicySourceError(
                f"Policy key {key!r} must have a string or array-of-strings value, "
                f"got {type(value).__name__}"
            )
    return flat


class TomlPropertySource(PropertySource):
    """Property source backed by a TOML policy file.

    The file is read on construction and again on reload().
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._properties: dict[str, str] = {}
        self.reload()

    @property
    def path(self) -> Path:
        return self._path

    def reload(self) -> None:
        """Re-read the policy file.

        Raises:
            PolicySourceError: If the file is missing, invalid TOML or holds
                unsupported values
        """
        try:
            data = load_toml(self._path)
        except FileNotFoundError as e:
            raise PolicySourceError(str(e)) from e
        except ValueError as e:
            # tomllib.TOMLDecodeError subclasses ValueError
            raise PolicySourceError(f"Invalid policy file {self._path}: {e}") from e

        self._properties = flatten_table(data)
        logger.info("policy_file_loaded", path=str(self._path), keys=len(self._properties))

    def keys(self) -> list[str]:
        return list(self._properties)

    def get(self, key: str) -> str:
        return self._properties[key]
