"""
Clarg Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Check a definition file against a command line:

    python -m clarg deploy.yaml -v --output out.txt in.txt
"""
from __future__ import annotations

import sys
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from clarg.config import load_parser
from clarg.console import console, error_console
from clarg.exceptions import ArgParseError, ClargError
from clarg.parsed_args import ParsedArgs
from clarg.parser import HELP_TOKENS
from clarg.signals import HelpRequested

USAGE = (
    f"[bold]usage:[/bold] {escape('clarg CONFIG [TOKENS ...]')}\n\n"
    "Parse TOKENS with the arguments defined in CONFIG (.yaml, .yml or .toml)\n"
    "and print what matched. Everything after CONFIG is passed through as-is."
)


def build_result_table(result: ParsedArgs) -> Table:
    table = Table(title="Parsed arguments", show_lines=False)
    table.add_column("Kind", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Value")
    for name in sorted(result.flags):
        table.add_row("flag", name, "present")
    for name, value in result.options.items():
        table.add_row("option", name, escape(value))
    for name, value in zip(result.positional_names, result.positionals):
        table.add_row("positional", name, escape(value))
    return table


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        error_console.print(USAGE)
        return 2
    if args[0] in HELP_TOKENS:
        console.print(USAGE)
        return 0

    config_path, tokens = args[0], args[1:]
    try:
        parser = load_parser(config_path)
    except (ClargError, FileNotFoundError) as error:
        error_console.print(f"[bold red]error:[/bold red] {escape(str(error))}")
        return 1

    try:
        result = parser.parse(tokens)
    except HelpRequested:
        parser.render_help(console)
        return 0
    except ArgParseError as error:
        error_console.print(f"[bold red]error:[/bold red] {escape(str(error))}")
        return 2

    console.print(build_result_table(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
