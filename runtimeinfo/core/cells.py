"""Single-assignment cell for process-wide cached values."""

import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

_UNSET = object()


class OnceCell(Generic[T]):
    """Holds a value that is set at most once.

    The first successful ``try_set`` wins; later writers are discarded and
    read the stored value instead. Reads after the value is set take no lock.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._value = _UNSET
        self._lock = threading.Lock()

    @property
    def is_set(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> Optional[T]:
        """Return the stored value, or None when unset."""
        value = self._value
        return None if value is _UNSET else value

    def try_set(self, value: T) -> bool:
        """Store value if the cell is still empty.

        Returns:
            True if this call stored the value, False if another writer did first
        """
        with self._lock:
            if self._value is not _UNSET:
                return False
            self._value = value
            return True

    def get_or_init(self, factory: Callable[[], T]) -> T:
        """Return the stored value, computing it with factory on first use.

        The factory runs outside the lock, so racing first callers may each
        run it; only the first result is kept.
        """
        value = self._value
        if value is not _UNSET:
            return value
        self.try_set(factory())
        return self._value

    def reset(self) -> None:
        """Clear the stored value."""
        with self._lock:
            self._value = _UNSET

    def __repr__(self) -> str:
        state = "unset" if self._value is _UNSET else repr(self._value)
        return f"OnceCell(name={self.name!r}, value={state})"
