# Clarg Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Ordered storage for `ArgumentDef` entries.

The registry keeps definitions in registration order and maintains two indexes,
by name and by short name, so the parser resolves `--name` and `-c` tokens with
a dict lookup. Entries are addressed by their position; builders hold that
position rather than a reference to the definition.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterator

from clarg.argument import ArgumentDef
from clarg.exceptions import DuplicateNameError, DuplicateShortNameError
from clarg.logger import logger

RESERVED_NAMES = frozenset({"help"})
RESERVED_SHORT_NAMES = frozenset({"h"})


class Registry:
    """Ordered, indexed collection of argument definitions."""

    def __init__(self) -> None:
        self._definitions: list[ArgumentDef] = []
        self._by_name: dict[str, int] = {}
        self._by_short_name: dict[str, int] = {}

    def add(self, definition: ArgumentDef) -> int:
        """
        Append a definition and return its index.

        Raises:
            DuplicateNameError: If the name is taken or reserved.
            DuplicateShortNameError: If the short name is taken or reserved.
        """
        if definition.name in self._by_name or definition.name in RESERVED_NAMES:
            raise DuplicateNameError(definition.name)
        if definition.short_name is not None:
            self._check_short_name(definition.short_name, index=None)
        index = len(self._definitions)
        self._definitions.append(definition)
        self._by_name[definition.name] = index
        if definition.short_name is not None:
            self._by_short_name[definition.short_name] = index
        logger.debug(
            "Registered %s '%s' at index %d", definition.kind, definition.name, index
        )
        return index

    def update(self, index: int, **changes: Any) -> ArgumentDef:
        """Replace the definition at `index` with a copy carrying `changes`."""
        current = self._definitions[index]
        if "name" in changes and changes["name"] != current.name:
            raise ValueError("Argument names cannot be changed after registration")
        short_name = changes.get("short_name", current.short_name)
        if short_name != current.short_name:
            if short_name is not None:
                self._check_short_name(short_name, index=index)
            if current.short_name is not None:
                del self._by_short_name[current.short_name]
            if short_name is not None:
                self._by_short_name[short_name] = index
        updated = replace(current, **changes)
        self._definitions[index] = updated
        return updated

    def _check_short_name(self, short_name: str, index: int | None) -> None:
        if short_name in RESERVED_SHORT_NAMES:
            raise DuplicateShortNameError(short_name, owner="help")
        owner_index = self._by_short_name.get(short_name)
        if owner_index is not None and owner_index != index:
            raise DuplicateShortNameError(
                short_name, owner=self._definitions[owner_index].name
            )

    def at(self, index: int) -> ArgumentDef:
        return self._definitions[index]

    def get(self, name: str) -> ArgumentDef | None:
        index = self._by_name.get(name)
        if index is None:
            return None
        return self._definitions[index]

    def get_by_short_name(self, short_name: str) -> ArgumentDef | None:
        index = self._by_short_name.get(short_name)
        if index is None:
            return None
        return self._definitions[index]

    def positionals(self) -> list[ArgumentDef]:
        """Positional definitions in registration order."""
        return [definition for definition in self._definitions if definition.is_positional]

    def keywords(self) -> list[ArgumentDef]:
        """Flag and option definitions in registration order."""
        return [
            definition for definition in self._definitions if not definition.is_positional
        ]

    def __iter__(self) -> Iterator[ArgumentDef]:
        return iter(list(self._definitions))

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name
