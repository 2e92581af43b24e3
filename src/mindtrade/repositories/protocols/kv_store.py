"""Durable key-value store protocols used by the response cache."""

from typing import Iterable, Optional, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """String-to-string durable storage (localStorage-like)."""

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value or None."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any existing one."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove a key; missing keys are ignored."""
        ...


@runtime_checkable
class EnumerableKeyValueStore(KeyValueStore, Protocol):
    """Key-value store that can list its keys."""

    def keys(self) -> Iterable[str]:
        """Return all stored keys."""
        ...
