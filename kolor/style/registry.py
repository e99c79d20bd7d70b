# style/registry.py

import threading
from typing import Any, Dict, Iterator, List, Optional

from ..errors import DuplicateNameError, DuplicateValueError, RegistryTypeError

UNKNOWN = "unknown"


class RegistryEntry:
    """
    A single named value inside a NamedRegistry.

    The name is not part of identity: two entries are equal when they come
    from the same registry and hold the same value.
    """
    __slots__ = ("registry", "value")

    def __init__(self, registry: "NamedRegistry", value: Any):
        self.registry = registry
        self.value = value

    @property
    def name(self) -> str:
        return self.registry.name_for(self.value)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{self.registry.label} {self.name}:{self.value!r}>"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, RegistryEntry)
            and other.registry is self.registry
            and other.value == self.value
        )

    def __hash__(self) -> int:
        return hash(self.value)


class NamedRegistry:
    """
    Bidirectional name <-> value registry with unique names and unique values.

    Every registered name is also reachable as an attribute
    (``Foreground.red``) until it is removed. An optional value type is
    enforced on every registration once declared.
    """
    def __init__(self, label: str, value_type: Optional[type] = None):
        self.label = label
        self._value_type = value_type
        self._registry: Dict[str, RegistryEntry] = {}
        self._values: Dict[Any, str] = {}
        self._lock = threading.RLock()

    def declare_type(self, value_type: type) -> None:
        """Constrain every future entry to ``value_type``."""
        self._value_type = value_type

    @property
    def value_type(self) -> Optional[type]:
        return self._value_type

    def register(self, name: str, value: Any) -> RegistryEntry:
        """
        Bind ``name`` to ``value``.

        Raises:
            RegistryTypeError: value does not match the declared type
            DuplicateValueError: value already owned by another name
            DuplicateNameError: name already bound
        """
        name = str(name)
        with self._lock:
            if self._value_type is not None and not isinstance(value, self._value_type):
                raise RegistryTypeError(name, self._value_type, type(value))
            if value in self._values:
                raise DuplicateValueError(name, value, self._values[value])
            if name in self._registry:
                raise DuplicateNameError(name, self._registry[name].value)

            entry = RegistryEntry(self, value)
            self._registry[name] = entry
            self._values[value] = name
            return entry

    def get(self, name) -> Optional[RegistryEntry]:
        """Return the entry registered under ``name`` or None."""
        with self._lock:
            return self._registry.get(str(name))

    def __getitem__(self, name) -> Optional[RegistryEntry]:
        return self.get(name)

    def __getattr__(self, name: str) -> RegistryEntry:
        if name.startswith("_"):
            raise AttributeError(name)
        entry = self.get(name)
        if entry is None:
            raise AttributeError(f"{self.label} has no entry '{name}'")
        return entry

    def name_for(self, value: Any) -> str:
        """Resolve a value back to its name, or ``"unknown"``."""
        with self._lock:
            return self._values.get(value, UNKNOWN)

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._registry)

    def values(self) -> List[Any]:
        with self._lock:
            return [entry.value for entry in self._registry.values()]

    def all(self) -> List[RegistryEntry]:
        with self._lock:
            return list(self._registry.values())

    def remove(self, name) -> Optional[RegistryEntry]:
        """Delete ``name`` in both directions; returns the removed entry."""
        name = str(name)
        with self._lock:
            entry = self._registry.pop(name, None)
            if entry is not None:
                self._values.pop(entry.value, None)
            return entry

    def __contains__(self, name) -> bool:
        with self._lock:
            return str(name) in self._registry

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._registry)

    def __repr__(self) -> str:
        return f"<NamedRegistry {self.label} ({len(self)} entries)>"
