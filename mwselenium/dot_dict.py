"""
Dictionary-like object with attribute-style access.

DotDict backs the environment configuration: values can be read as
``config.browser`` or ``config["browser"]`` and nested sections with dotted
paths such as ``config.get("logging.level")``. Attributes starting with an
underscore are private state of subclasses and never show up as keys.
"""

import builtins
from collections.abc import Iterator
from typing import Any


class DotDict:
    """
    Dictionary-like object with attribute-style access and nested structure support.

    Nested dictionaries are converted to DotDict instances on assignment.
    """

    # Keys that would shadow methods and are not allowed.
    _RESERVED_KEYS = frozenset({"set", "clear", "dict", "to_dict", "get", "has"})

    def __init__(self, **kwargs: Any) -> None:
        self.set(**kwargs)

    def set(self, **kwargs: Any) -> "DotDict":
        """
        Set multiple key-value pairs, with automatic nested object creation.

        Returns:
            self: For method chaining
        """
        for key, val in kwargs.items():
            self._set_item(key, val)
        return self

    def _set_item(self, key: Any, val: Any) -> None:
        if not isinstance(key, str):
            key = str(key)

        if key in self._RESERVED_KEYS:
            raise ValueError(
                f"Key '{key}' is reserved and cannot be used (would shadow method)"
            )

        if isinstance(val, dict):
            setattr(self, key, DotDict(**{str(k): v for k, v in val.items()}))
        elif isinstance(val, list):
            setattr(self, key, [self._map_entry(v) for v in val])
        else:
            setattr(self, key, val)

    @staticmethod
    def _map_entry(entry: Any) -> Any:
        if isinstance(entry, dict):
            return DotDict(**{str(k): v for k, v in entry.items()})
        return entry

    def _public(self) -> builtins.dict[str, Any]:
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}

    def clear(self) -> None:
        """Remove all public keys."""
        for key in list(self._public()):
            delattr(self, key)

    def dict(self) -> builtins.dict[str, Any]:
        """Shallow conversion: nested DotDicts become dicts, lists are kept as is."""
        return {
            key: val.dict() if isinstance(val, DotDict) else val
            for key, val in self._public().items()
        }

    def to_dict(self) -> builtins.dict[str, Any]:
        """Recursively convert DotDict and all nested structures to plain dicts."""
        result: builtins.dict[str, Any] = {}
        for key, val in self._public().items():
            if isinstance(val, DotDict):
                result[key] = val.to_dict()
            elif isinstance(val, list):
                result[key] = [
                    item.to_dict() if isinstance(item, DotDict) else item
                    for item in val
                ]
            else:
                result[key] = val
        return result

    def keys(self):  # type: ignore[no-untyped-def]
        return self._public().keys()

    def values(self):  # type: ignore[no-untyped-def]
        return self._public().values()

    def items(self):  # type: ignore[no-untyped-def]
        return self._public().items()

    def __iter__(self) -> Iterator[str]:
        return iter(self._public())

    def __contains__(self, key: Any) -> bool:
        return isinstance(key, str) and not key.startswith("_") and key in self.__dict__

    def __getitem__(self, key: str) -> Any:
        """Return the value for key, or None if the key doesn't exist."""
        return self.__dict__[key] if key in self else None

    def __setitem__(self, key: str, val: Any) -> None:
        if key in self:
            delattr(self, key)
        self._set_item(key, val)

    def __len__(self) -> int:
        return len(self._public())

    def __str__(self) -> str:
        return str(self.dict())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.dict()!r})"

    def has(self, path: str) -> bool:
        """
        Check if a dot-separated path exists.

        Args:
            path: Dot-separated path to check (e.g., "logging.level")

        Returns:
            True if the path exists
        """
        cur: Any = self
        for item in (p for p in path.split(".") if p):
            if not isinstance(cur, DotDict) or item not in cur:
                return False
            cur = cur.__dict__[item]
        return bool(path)

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get value by dot-separated path.

        Follows dict.get() semantics: returns default if the path is not found.
        """
        if not self.has(path):
            return default

        cur: Any = self
        for item in (p for p in path.split(".") if p):
            cur = cur.__dict__[item]
        return cur


class DotDictPathNotFoundError(KeyError):
    """Raised when a referenced path is not found in a DotDict."""

    def __init__(self, obj: DotDict, path: str) -> None:
        self.obj = obj
        self.path = path
        super().__init__(path)

    def __str__(self) -> str:
        return f"path '{self.path}' not found"
