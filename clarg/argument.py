# Clarg Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ArgumentDef` dataclass used by `Parser` to describe one
registered flag, option or positional argument.

Definitions are frozen. The builder returned by `Parser.add_*` swaps in an
updated copy through the registry, so a definition read from the registry
never changes underneath its holder.

Key Attributes:
- `name`: Unique name, used as `--name` and as the key in parsed results
- `kind`: `ArgumentKind` describing how tokens are consumed
- `short_name`: Optional single-character alias, used as `-c`
- `help`: Help text rendered by the help generator
- `required`: Whether parsing fails when the argument is absent
"""
from dataclasses import dataclass

from clarg.argument_kind import ArgumentKind


@dataclass(frozen=True)
class ArgumentDef:
    """
    Represents a registered command-line argument.

    Attributes:
        name (str): The unique argument name.
        kind (ArgumentKind): Flag, option or positional.
        short_name (str | None): Single-character alias, never set for positionals.
        help (str): Help text for the argument.
        required (bool): True if parsing must fail when the argument is missing.
    """

    name: str
    kind: ArgumentKind
    short_name: str | None = None
    help: str = ""
    required: bool = False

    @property
    def is_flag(self) -> bool:
        return self.kind is ArgumentKind.FLAG

    @property
    def is_option(self) -> bool:
        return self.kind is ArgumentKind.OPTION

    @property
    def is_positional(self) -> bool:
        return self.kind is ArgumentKind.POSITIONAL

    @property
    def takes_value(self) -> bool:
        """True if the argument consumes a value token."""
        return self.kind is not ArgumentKind.FLAG

    @property
    def long_flag(self) -> str | None:
        if self.is_positional:
            return None
        return f"--{self.name}"

    @property
    def short_flag(self) -> str | None:
        if self.short_name is None:
            return None
        return f"-{self.short_name}"

    def get_metavar(self) -> str:
        """Get the placeholder shown for the argument's value."""
        if self.is_option:
            return self.name.upper().replace("-", "_")
        if self.is_positional:
            return self.name
        return ""

    def get_flag_text(self) -> str:
        """Get the left-hand column text used in help output."""
        if self.is_positional:
            return self.name
        short = f"{self.short_flag}, " if self.short_flag else "    "
        text = f"{short}{self.long_flag}"
        if self.is_option:
            text = f"{text} {self.get_metavar()}"
        return text

    def get_usage_text(self) -> str:
        """Get the compact text used in the usage line."""
        if self.is_positional:
            text = f"<{self.name}>"
        elif self.is_option:
            text = f"{self.short_flag or self.long_flag} {self.get_metavar()}"
        else:
            text = self.short_flag or self.long_flag or self.name
        if self.required:
            return text
        return f"[{text}]"
