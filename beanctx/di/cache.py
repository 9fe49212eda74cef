"""Singleton cache: one instance per bean name for the context's lifetime."""

from threading import Lock
from typing import Any, Dict, List, Optional


class SingletonCache:
    """Memo of constructed beans keyed by name.

    Entries are written once and never evicted; the whole store is only
    dropped when the owning context is closed.
    """

    def __init__(self):
        self._instances: Dict[str, Any] = {}
        self._lock = Lock()

    def get(self, name: str) -> Optional[Any]:
        """Get the cached instance for a name, or None."""
        with self._lock:
            return self._instances.get(name)

    def put(self, name: str, instance: Any) -> Any:
        """Store an instance unless one is already cached.

        Args:
            name: Bean name
            instance: Freshly constructed instance

        Returns:
            The instance held by the cache (the first writer's)
        """
        with self._lock:
            return self._instances.setdefault(name, instance)

    def names(self) -> List[str]:
        with self._lock:
            return list(self._instances)

    def clear(self) -> None:
        """Drop every cached instance."""
        with self._lock:
            self._instances.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._instances

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)
