# Clarg Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Parser`, the entry point of clarg. It owns the registry
of argument definitions, scans token sequences into `ParsedArgs`, and produces
help text.

Key Features:
- Declarative registration via `add_flag()`, `add_option()`, `add_positional()`
- Fluent configuration through the returned `ArgumentBuilder`
- Long (`--name`) and short (`-c`) forms, matched by exact name only
- POSIX-style bundling for single-character flags (`-abc`, `-vo FILE`)
- Negative numbers (`-42`, `-3.5`) and a lone `-` are treated as values
- Required options and positionals, checked after the scan
- Plain-text and Rich-rendered help

Public Interface:
- `add_flag(name)`, `add_option(name)`, `add_positional(name)`: Register an argument.
- `parse(tokens)`: Parse a token list into `ParsedArgs`.
- `parse_argv(argv)`: Parse a raw process vector, skipping the program name.
- `generate_help()`: Return help text.
- `render_help()`: Print Rich-styled help.

Example Usage:
    parser = Parser(program="convert")
    parser.add_flag("verbose").with_short_name("v")
    parser.add_option("output").with_short_name("o").required()
    parser.add_positional("input")

    try:
        args = parser.parse(["-v", "--output", "out.txt", "in.txt"])
    except HelpRequested:
        parser.render_help()
        sys.exit(0)

    # args.flags == {"verbose"}
    # args.options == {"output": "out.txt"}
    # args.positionals == ["in.txt"]
"""
from __future__ import annotations

import re
import sys
from typing import Any, Sequence

from rich.console import Console

from clarg.argument import ArgumentDef
from clarg.argument_kind import ArgumentKind
from clarg.builder import ArgumentBuilder
from clarg.console import console as default_console
from clarg.exceptions import (
    InvalidArgumentError,
    MissingRequiredArgumentError,
    MissingValueError,
    OptionInMiddleOfGroupError,
    UnexpectedPositionalError,
    UnknownArgumentError,
)
from clarg.help import generate_help_text, render_help
from clarg.logger import logger
from clarg.parsed_args import ParsedArgs
from clarg.registry import Registry
from clarg.signals import HelpRequested
from clarg.utils import get_program_invocation

HELP_TOKENS = frozenset({"--help", "-h"})
NUMBER_PATTERN = re.compile(r"-?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?")


def is_number(token: str) -> bool:
    """True for decimal literals such as `-42`, `-3.5` or `1e-3`."""
    return NUMBER_PATTERN.fullmatch(token) is not None


def looks_like_marker(token: str) -> bool:
    """True if `token` should be read as a flag or option rather than a value."""
    return token.startswith("-") and len(token) > 1 and not is_number(token)


class Parser:
    """
    Command-line argument parser.

    Arguments are registered up front and matched by exact name. A parse is a
    single left-to-right scan; the first problem aborts it with an
    `ArgParseError` and a help request aborts it with `HelpRequested`.
    """

    def __init__(
        self,
        program: str | None = None,
        description: str = "",
        epilog: str = "",
        version: str = "",
    ) -> None:
        self.program: str | None = program
        self.description: str = description
        self.epilog: str = epilog
        self.version: str = version
        self._registry: Registry = Registry()

    @property
    def arguments(self) -> list[ArgumentDef]:
        """Registered definitions in registration order."""
        return list(self._registry)

    def _validate_name(self, name: str) -> None:
        if not isinstance(name, str):
            raise InvalidArgumentError(f"Argument name {name!r} must be a string")
        if not name:
            raise InvalidArgumentError("Argument name cannot be empty")
        if name.startswith("-"):
            raise InvalidArgumentError(
                f"Argument name '{name}' must not start with '-'; "
                "pass the bare name, e.g. 'verbose'"
            )
        if "=" in name or any(char.isspace() for char in name):
            raise InvalidArgumentError(
                f"Argument name '{name}' cannot contain whitespace or '='"
            )

    def add(self, name: str, kind: ArgumentKind | str) -> ArgumentBuilder:
        """
        Register an argument of the given kind with default settings.

        Args:
            name (str): Unique argument name.
            kind (ArgumentKind | str): Flag, option or positional.

        Returns:
            ArgumentBuilder: Builder bound to the new definition.

        Raises:
            DuplicateNameError: If `name` is already registered.
            InvalidArgumentError: If `name` or `kind` is malformed.
        """
        self._validate_name(name)
        if not isinstance(kind, ArgumentKind):
            try:
                kind = ArgumentKind(kind)
            except ValueError as error:
                raise InvalidArgumentError(str(error)) from error
        index = self._registry.add(ArgumentDef(name=name, kind=kind))
        return ArgumentBuilder(self._registry, index)

    def add_flag(self, name: str) -> ArgumentBuilder:
        """Define a flag argument (e.g. `--verbose`, `-v`)."""
        return self.add(name, ArgumentKind.FLAG)

    def add_option(self, name: str) -> ArgumentBuilder:
        """Define an option that takes a value (e.g. `--output <file>`)."""
        return self.add(name, ArgumentKind.OPTION)

    def add_positional(self, name: str) -> ArgumentBuilder:
        """Define a positional argument (e.g. `<input-file>`)."""
        return self.add(name, ArgumentKind.POSITIONAL)

    def get_argument(self, name: str) -> ArgumentDef | None:
        """Return the definition registered as `name`, if any."""
        return self._registry.get(name)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert argument metadata into a serializable list of dicts.

        The shape matches what `clarg.config.build_parser` accepts.
        """
        defs = []
        for arg in self._registry:
            entry: dict[str, Any] = {"name": arg.name, "kind": arg.kind.value}
            if arg.short_name:
                entry["short"] = arg.short_name
            if arg.help:
                entry["help"] = arg.help
            if arg.required:
                entry["required"] = True
            defs.append(entry)
        return defs

    def _consume(
        self, arg: ArgumentDef, tokens: list[str], i: int, result: ParsedArgs
    ) -> int:
        """Record `arg` matched at `tokens[i]` and return the next index."""
        if not arg.takes_value:
            result.flags.add(arg.name)
            return i + 1
        if i + 1 >= len(tokens):
            raise MissingValueError(arg.name)
        value = tokens[i + 1]
        if value in HELP_TOKENS:
            raise HelpRequested()
        if looks_like_marker(value):
            raise MissingValueError(arg.name)
        result.options[arg.name] = value
        return i + 2

    def _consume_group(self, tokens: list[str], i: int, result: ParsedArgs) -> int:
        """Expand a POSIX bundle such as `-abc` or `-vo FILE`."""
        group = tokens[i][1:]
        last = len(group) - 1
        for position, char in enumerate(group):
            arg = self._registry.get_by_short_name(char)
            if arg is None:
                raise UnknownArgumentError(f"-{char}")
            if arg.is_option:
                if position != last:
                    raise OptionInMiddleOfGroupError(arg.name)
                return self._consume(arg, tokens, i, result)
            result.flags.add(arg.name)
        return i + 1

    def _handle_token(
        self,
        tokens: list[str],
        i: int,
        result: ParsedArgs,
        positional_args: list[ArgumentDef],
    ) -> int:
        token = tokens[i]
        if token in HELP_TOKENS:
            raise HelpRequested()

        if token.startswith("--") and len(token) > 2:
            arg = self._registry.get(token[2:])
            if arg is None or arg.is_positional:
                raise UnknownArgumentError(token)
            return self._consume(arg, tokens, i, result)

        if looks_like_marker(token):
            if len(token) == 2:
                arg = self._registry.get_by_short_name(token[1])
                if arg is None:
                    raise UnknownArgumentError(token)
                return self._consume(arg, tokens, i, result)
            return self._consume_group(tokens, i, result)

        if len(result.positionals) >= len(positional_args):
            raise UnexpectedPositionalError(token)
        result.positionals.append(token)
        return i + 1

    def _validate_required(self, result: ParsedArgs) -> None:
        positional_index = 0
        for arg in self._registry:
            if arg.is_positional:
                supplied = positional_index < len(result.positionals)
                positional_index += 1
            elif arg.is_option:
                supplied = arg.name in result.options
            else:
                continue
            if arg.required and not supplied:
                raise MissingRequiredArgumentError(arg.name)

    def parse(self, tokens: Sequence[str]) -> ParsedArgs:
        """
        Parse a token sequence into `ParsedArgs`.

        The tokens are used as given. Use `parse_argv` for a raw process
        vector whose first element is the program path.

        Args:
            tokens (Sequence[str]): Arguments to parse.

        Returns:
            ParsedArgs: Flags, options and positionals that were matched.

        Raises:
            HelpRequested: `--help` or `-h` was encountered.
            UnknownArgumentError: A marked token matches no flag or option.
            MissingValueError: An option is not followed by a value.
            OptionInMiddleOfGroupError: An option is bundled before the last
                position of a short group.
            UnexpectedPositionalError: More bare tokens than positionals.
            MissingRequiredArgumentError: A required argument was not supplied.
        """
        tokens = list(tokens)
        positional_args = self._registry.positionals()
        result = ParsedArgs(positional_names=tuple(arg.name for arg in positional_args))
        logger.debug("Parsing %d token(s): %s", len(tokens), tokens)

        i = 0
        try:
            while i < len(tokens):
                i = self._handle_token(tokens, i, result, positional_args)
            self._validate_required(result)
        except HelpRequested:
            logger.debug("Help requested at token %d", i)
            raise
        except Exception as error:
            logger.debug("Parse failed (%s): %s", type(error).__name__, error)
            raise

        logger.debug(
            "Parsed flags=%s options=%s positionals=%s",
            sorted(result.flags),
            result.options,
            result.positionals,
        )
        return result

    def parse_argv(self, argv: Sequence[str] | None = None) -> ParsedArgs:
        """Parse a raw process argument vector, skipping the program name."""
        if argv is None:
            argv = sys.argv
        return self.parse(list(argv)[1:])

    def get_program(self) -> str:
        return self.program or get_program_invocation()

    def generate_help(self) -> str:
        """Return help text describing every registered argument."""
        return generate_help_text(
            self._registry,
            self.get_program(),
            description=self.description,
            epilog=self.epilog,
            version=self.version,
        )

    def render_help(self, console: Console | None = None) -> None:
        """Print Rich-styled help to `console` (stdout by default)."""
        render_help(
            self._registry,
            self.get_program(),
            console or default_console,
            description=self.description,
            epilog=self.epilog,
            version=self.version,
        )

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        arguments = list(self._registry)
        flags = sum(arg.is_flag for arg in arguments)
        options = sum(arg.is_option for arg in arguments)
        positional = sum(arg.is_positional for arg in arguments)
        required = sum(arg.required for arg in arguments)
        return (
            f"Parser(args={len(arguments)}, flags={flags}, options={options}, "
            f"positional={positional}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
