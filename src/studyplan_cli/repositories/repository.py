"""Storage abstraction layer for the study planner.

This module defines the abstract base class (interface) for the durable
key-value store that backs the planner, following the Ports & Adapters
pattern.

The planner keeps exactly two logical keys, one per collection. Business
logic never talks to the store directly; it goes through
``studyplan_cli.adapters.persistence.PlannerPersistence``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Abstract base class for a durable string key-value store.

    Values are opaque serialized strings; the store performs no parsing.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Read the value stored under a key.

        Args:
            key: Logical key name

        Returns:
            The stored string, or None if the key has never been written

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError("KeyValueStore.get() must be implemented by adapter")

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Write a value under a key, replacing any previous value.

        Args:
            key: Logical key name
            value: Serialized value

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError("KeyValueStore.set() must be implemented by adapter")
