"""
Binding registry for browser factories.

A binding ties one or more configuration option names to a callback. When a
configuration is resolved, a binding whose option names are all present is
called with the configured values, in declared order, followed by the
options dict being accumulated for the browser:

    registry = BindingRegistry()
    registry.register(["browser_user_agent"], lambda ua, opts: ...)
    registry.register(["browser_width", "browser_height"], lambda w, h, opts: ...)

Bindings are stored under the single option name, or under the tuple of names
for multi-option bindings. Registering again under an existing key appends;
every binding runs, in registration order.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from mwselenium.exceptions import BindingError

BindingKey = str | tuple[str, ...]
BindingCallback = Callable[..., Any]


def noop(*_args: Any) -> None:
    """Callback for placeholder bindings."""


@dataclass(frozen=True)
class Binding:
    """
    A declared rule: required option names plus the callback consuming them.

    Attributes:
        option_names: Required option names, in the order values are passed
        callback: Called with one value per option name, then the options dict
    """

    option_names: tuple[str, ...]
    callback: BindingCallback

    @property
    def key(self) -> BindingKey:
        """Registry key: the name itself for single-option bindings."""
        if len(self.option_names) == 1:
            return self.option_names[0]
        return self.option_names

    def applies_to(self, config: Mapping[str, Any]) -> bool:
        """True when every required option name is a key of config."""
        return all(name in config for name in self.option_names)

    def invoke(self, config: Mapping[str, Any], options: dict[str, Any]) -> Any:
        """Call the callback with the configured values followed by options."""
        values = [config[name] for name in self.option_names]
        return self.callback(*values, options)

    def __call__(self, config: Mapping[str, Any], options: dict[str, Any]) -> bool:
        """
        Invoke the binding if it applies to config.

        Returns:
            True if the callback was invoked
        """
        if not self.applies_to(config):
            return False
        self.invoke(config, options)
        return True


def _normalize_names(option_names: Iterable[str] | str) -> tuple[str, ...]:
    if isinstance(option_names, str):
        names = (option_names,)
    else:
        names = tuple(option_names)

    if not names:
        raise BindingError("a binding needs at least one option name")
    if len(set(names)) != len(names):
        raise BindingError("binding option names must be distinct", names=",".join(names))
    for name in names:
        if not isinstance(name, str) or not name:
            raise BindingError("binding option names must be non-empty strings", name=name)
    return names


class BindingRegistry(Mapping[BindingKey, list[Binding]]):
    """
    Ordered collection of bindings keyed by option name(s).

    Behaves as a read-only mapping of key to the list of bindings registered
    under it. Keys keep the order in which they were first registered.
    """

    def __init__(self) -> None:
        self._bindings: dict[BindingKey, list[Binding]] = {}

    def register(
        self, option_names: Sequence[str] | str, callback: BindingCallback | None
    ) -> Binding:
        """
        Append a new binding under the key formed from option_names.

        Args:
            option_names: One or more distinct option names
            callback: Callable taking one value per option name plus the options dict

        Returns:
            The registered binding

        Raises:
            BindingError: If callback is None or option_names are invalid
        """
        names = _normalize_names(option_names)
        if callback is None:
            raise BindingError("a binding requires a callback", names=",".join(names))
        if not callable(callback):
            raise BindingError("binding callback is not callable", names=",".join(names))

        binding = Binding(names, callback)
        self._bindings.setdefault(binding.key, []).append(binding)
        return binding

    def all(self) -> dict[BindingKey, list[Binding]]:
        """Copy of the full ordered registry (key to ordered binding list)."""
        return {key: list(bindings) for key, bindings in self._bindings.items()}

    def callbacks(self, key: BindingKey) -> list[BindingCallback]:
        """Callbacks registered under key, in registration order."""
        return [binding.callback for binding in self._bindings.get(key, [])]

    def option_names(self) -> list[str]:
        """Every option name referenced by any binding, without duplicates."""
        names: dict[str, None] = {}
        for binding in self.bindings():
            for name in binding.option_names:
                names[name] = None
        return list(names)

    def bindings(self) -> Iterator[Binding]:
        """All bindings, grouped by key in key order."""
        for bindings in self._bindings.values():
            yield from bindings

    def __iter__(self) -> Iterator[Any]:
        return iter(self._bindings)

    def __getitem__(self, key: BindingKey) -> list[Binding]:
        return list(self._bindings[key])

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"BindingRegistry({list(self._bindings)!r})"

    @classmethod
    def merge(cls, *registries: "BindingRegistry") -> "BindingRegistry":
        """
        Compose registries into a new one without touching the inputs.

        Bindings for a key present in several registries are concatenated in
        argument order.
        """
        merged = cls()
        for registry in registries:
            for key, bindings in registry._bindings.items():
                merged._bindings.setdefault(key, []).extend(bindings)
        return merged
