"""Abstract collection store (port) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from typing import Any


class CollectionStore(ABC):
    """Port for whole-collection persistence — implemented in the infrastructure layer.

    A collection is an ordered list of JSON objects addressed by name. It is
    always read and written as a unit: there are no partial or merge writes,
    and concurrent writers race with the last save winning.
    """

    @abstractmethod
    async def load(self, name: str) -> list[dict[str, Any]]:
        """Read the full collection. Raises CollectionLoadError on failure."""
        ...

    @abstractmethod
    async def save(self, name: str, records: list[dict[str, Any]]) -> None:
        """Overwrite the full collection. Raises CollectionSaveError on failure."""
        ...
