# argbind — (c) 2025 argbind contributors — MIT Licensed
"""
Provides `BindingRegistry`, the name → binding lookup used during parsing.

The registry keeps two maps: primary name → `Binding` and alias → primary name.
Names across both maps are pairwise disjoint, and every alias points at an
existing primary name. Once parsing begins the registry is frozen and any
further registration is a `UsageError`.
"""
from __future__ import annotations

from typing import Iterator

from argbind.logger import logger
from argbind.parser.binding import Binding
from argbind.signals import UsageError


class BindingRegistry:
    """
    Registry of bindings keyed by primary name and alias.

    Methods:
        add(binding): Register a binding, enforcing name uniqueness.
        resolve(name): Look up a binding by primary name, then alias.
        is_registered(name): True if `name` is a primary name or alias.
        freeze(): Forbid further registration.
    """

    def __init__(self) -> None:
        self._bindings: dict[str, Binding] = {}
        self._aliases: dict[str, str] = {}
        self._frozen: bool = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def next_index(self) -> int:
        """Registration index to assign to the next binding."""
        return len(self._bindings)

    def freeze(self) -> None:
        self._frozen = True

    def _validate_name(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            raise UsageError(f"Command names must be non-empty strings, got {name!r}.")
        if name.startswith("-"):
            raise UsageError(
                f"Command name '{name}' must not start with '-'; "
                "leading dashes are stripped during tokenization."
            )
        if name in self._bindings or name in self._aliases:
            raise UsageError(f"Duplicate names are prohibited ('{name}').")

    def add(self, binding: Binding) -> Binding:
        """
        Register a binding.

        Raises:
            UsageError: If the registry is frozen, a name is empty or starts with
                '-', the alias equals the primary name, or either name is
                already taken in either namespace.
        """
        if self._frozen:
            raise UsageError(f"Cannot register '{binding.name}' after parse().")
        self._validate_name(binding.name)
        if binding.alias is not None:
            if binding.alias == binding.name:
                raise UsageError(
                    f"Alias '{binding.alias}' must differ from its primary name."
                )
            self._validate_name(binding.alias)

        self._bindings[binding.name] = binding
        if binding.alias is not None:
            self._aliases[binding.alias] = binding.name
        logger.debug(
            "Registered '%s' (alias=%s, arity=%s, priority=%d)",
            binding.name,
            binding.alias,
            binding.expected_arity,
            binding.priority,
        )
        return binding

    def resolve(self, name: str) -> Binding | None:
        """Return the binding for `name`, trying primary names before aliases."""
        binding = self._bindings.get(name)
        if binding is not None:
            return binding
        primary = self._aliases.get(name)
        if primary is not None:
            return self._bindings[primary]
        return None

    def is_registered(self, name: str) -> bool:
        return name in self._bindings or name in self._aliases

    def get(self, name: str) -> Binding | None:
        """Return the binding registered under the primary `name`."""
        return self._bindings.get(name)

    @property
    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)

    def __iter__(self) -> Iterator[Binding]:
        return iter(list(self._bindings.values()))

    def __len__(self) -> int:
        return len(self._bindings)

    def __str__(self) -> str:
        return (
            f"BindingRegistry(bindings={len(self._bindings)}, "
            f"aliases={len(self._aliases)}, frozen={self._frozen})"
        )

    def __repr__(self) -> str:
        return str(self)
