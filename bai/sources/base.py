"""PropertySource abstract interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable


class PropertySource(ABC):
    """Supplier of raw policy keys and their string values.

    The compiler reads every key once per build, in the order ``keys()``
    yields them; that order becomes the PolicySet order.
    """

    @abstractmethod
    def keys(self) -> Iterable[str]:
        """Return all policy keys."""
        pass

    @abstractmethod
    def get(self, key: str) -> str:
        """Return the value of a key.

        Raises:
            KeyError: If the key is not present
        """
        pass
