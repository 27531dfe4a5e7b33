"""Candidate item store contract.

The matcher only needs read access to found items filtered by status. The real
store lives with the portal's persistence layer; InMemoryItemStore serves
tests and embedding callers that already hold the records.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Literal

ItemStatus = Literal["pending", "active", "claimed", "expired"]

ACTIVE_STATUS: ItemStatus = "active"


class CandidateStore(ABC):
    """Abstract read source of found-item records."""

    @abstractmethod
    def get_items(self, status: ItemStatus | None = None) -> list[Mapping[str, Any]]:
        """Return items, optionally only those with the given status.

        Args:
            status: Status to filter on (None for all items)

        Returns:
            Item records in store order
        """


class InMemoryItemStore(CandidateStore):
    """CandidateStore backed by a list of item records.

    Records are returned as-is (not copied) in insertion order.
    """

    def __init__(self, items: Iterable[Mapping[str, Any]] = ()) -> None:
        self._items: list[Mapping[str, Any]] = list(items)

    def add(self, item: Mapping[str, Any]) -> None:
        self._items.append(item)

    def get_items(self, status: ItemStatus | None = None) -> list[Mapping[str, Any]]:
        if status is None:
            return list(self._items)
        return [item for item in self._items if item.get("status") == status]

    def __len__(self) -> int:
        return len(self._items)
