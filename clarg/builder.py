# Clarg Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentBuilder`, the fluent configuration surface returned by
`Parser.add_flag`, `Parser.add_option` and `Parser.add_positional`.

The builder holds the parser's registry and the index of the definition it
configures. Each call replaces that registry entry with an updated copy and
returns the builder, so calls chain in any order:

    parser.add_option("output").with_short_name("o").required().with_help("...")
"""
from __future__ import annotations

from clarg.argument import ArgumentDef
from clarg.exceptions import InvalidArgumentError
from clarg.registry import Registry


class ArgumentBuilder:
    """Configures one registered argument in place."""

    def __init__(self, registry: Registry, index: int) -> None:
        self._registry = registry
        self._index = index

    @property
    def definition(self) -> ArgumentDef:
        """The current definition this builder points at."""
        return self._registry.at(self._index)

    def with_short_name(self, short_name: str) -> ArgumentBuilder:
        """
        Add a short name (e.g. `-o`) to the argument.

        Raises:
            InvalidArgumentError: If the argument is positional or `short_name`
                is not a single usable character. Digits are rejected since
                `-1` is read as a negative number.
            DuplicateShortNameError: If another argument already uses it.
        """
        definition = self.definition
        if definition.is_positional:
            raise InvalidArgumentError(
                f"Positional argument '{definition.name}' cannot have a short name"
            )
        if not isinstance(short_name, str) or len(short_name) != 1:
            raise InvalidArgumentError(
                f"Short name for '{definition.name}' must be a single character, "
                f"got {short_name!r}"
            )
        if short_name == "-" or short_name.isspace() or short_name.isdigit():
            raise InvalidArgumentError(f"Short name {short_name!r} is not allowed")
        self._registry.update(self._index, short_name=short_name)
        return self

    def with_help(self, help_text: str) -> ArgumentBuilder:
        """Set the help text, replacing any previous value."""
        self._registry.update(self._index, help=help_text)
        return self

    def required(self) -> ArgumentBuilder:
        """
        Mark the argument as required.

        Flags only record presence and can never be required.

        Raises:
            InvalidArgumentError: If the argument is a flag.
        """
        definition = self.definition
        if definition.is_flag:
            raise InvalidArgumentError(f"Flag '{definition.name}' cannot be required")
        self._registry.update(self._index, required=True)
        return self

    def __repr__(self) -> str:
        return f"ArgumentBuilder({self.definition!r})"
