# Clarg Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentKind`, the enum that tells the parser how a registered
argument consumes tokens.

Supports alias coercion for shorthand or config-friendly values, so definition
files can say `kind: opt` or `kind: arg`.

Example:
    ArgumentKind("flag")   → ArgumentKind.FLAG
    ArgumentKind("opt")    → ArgumentKind.OPTION (via alias)
    ArgumentKind("arg")    → ArgumentKind.POSITIONAL (via alias)
"""
from __future__ import annotations

from enum import Enum


class ArgumentKind(Enum):
    """
    Defines how an argument is matched and what it consumes.

    Members:
        FLAG: Boolean presence, matched by `--name` or `-c`, consumes no value.
        OPTION: Matched by `--name` or `-c`, consumes exactly one value token.
        POSITIONAL: Filled from bare tokens in registration order.

    Aliases:
        - "switch" → "flag"
        - "opt" → "option"
        - "arg", "argument" → "positional"
    """

    FLAG = "flag"
    OPTION = "option"
    POSITIONAL = "positional"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "switch": "flag",
            "opt": "option",
            "arg": "positional",
            "argument": "positional",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the argument kind."""
        return self.value
