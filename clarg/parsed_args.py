# Clarg Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParsedArgs`, the result of a successful `Parser.parse` call.

A fresh instance is built for every parse and handed to the caller:
- `flags`: names of the flags that were present
- `options`: option name to raw string value
- `positionals`: bare tokens in the order their slots were registered

Typed access goes through `get_value_as`, which converts an option's raw
string on demand. Conversion problems are raised from that call only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from clarg.coerce import coerce_value
from clarg.exceptions import ValueConversionError


@dataclass
class ParsedArgs:
    """
    Flags, options and positionals matched by the parser.

    Attributes:
        flags (set[str]): Names of the flags that were present.
        options (dict[str, str]): Option names mapped to their raw values.
        positionals (list[str]): Positional values in registration order.
        positional_names (tuple[str, ...]): Names of all registered positionals,
            aligned with `positionals`.
    """

    flags: set[str] = field(default_factory=set)
    options: dict[str, str] = field(default_factory=dict)
    positionals: list[str] = field(default_factory=list)
    positional_names: tuple[str, ...] = field(default=(), compare=False)

    def has_flag(self, name: str) -> bool:
        return name in self.flags

    def get_positional(self, name: str) -> str | None:
        """Return the value of the positional registered as `name`, if supplied."""
        try:
            index = self.positional_names.index(name)
        except ValueError:
            return None
        if index < len(self.positionals):
            return self.positionals[index]
        return None

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return an option value, else a positional value, else `default`."""
        if name in self.options:
            return self.options[name]
        value = self.get_positional(name)
        if value is None:
            return default
        return value

    def get_value_as(self, name: str, target_type: Any = str) -> Any:
        """
        Get and convert the value of an option.

        Args:
            name (str): The option name.
            target_type: The type or one-argument converter to apply, see
                `clarg.coerce.coerce_value`.

        Returns:
            None if the option was not supplied, otherwise the converted value.

        Raises:
            ValueConversionError: If the option was supplied but its value
                cannot be converted to `target_type`.

        Example:
            port = results.get_value_as("port", int)
        """
        raw = self.options.get(name)
        if raw is None:
            return None
        try:
            return coerce_value(raw, target_type)
        except (ValueError, TypeError) as error:
            raise ValueConversionError(name, raw, target_type, str(error)) from error

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping of every matched argument."""
        result: dict[str, Any] = {name: True for name in sorted(self.flags)}
        result.update(self.options)
        result.update(zip(self.positional_names, self.positionals))
        return result
