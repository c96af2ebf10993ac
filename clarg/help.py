# Clarg Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help text generation for `Parser`.

`generate_help_text` is a pure function of the registry: it returns plain text
with one line per argument, in registration order, grouped into options and
positional arguments. `render_help` prints the same layout through a Rich
console with styling. Neither function decides where or when help is shown.

Example output:

    Usage: convert [-h] [-v] -o OUTPUT <input>

    Convert files.

    Options:
      -h, --help               Show this help message and exit.
      -v, --verbose            Verbose output.
      -o, --output OUTPUT      Output file. (required)

    Arguments:
      input                    Input file. (required)
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from clarg.argument import ArgumentDef
from clarg.registry import Registry

HELP_FLAG_TEXT = "-h, --help"
HELP_DESCRIPTION = "Show this help message and exit."
REQUIRED_MARKER = "(required)"
COLUMN_WIDTH = 24


def get_usage(registry: Registry, program: str) -> str:
    """Return the usage line body: program name followed by every argument."""
    parts = [program, "[-h]"]
    parts.extend(arg.get_usage_text() for arg in registry.keywords())
    parts.extend(arg.get_usage_text() for arg in registry.positionals())
    return " ".join(part for part in parts if part)


def _describe(arg: ArgumentDef) -> str:
    help_text = arg.help or ""
    if arg.required:
        help_text = f"{help_text} {REQUIRED_MARKER}".strip()
    return help_text


def _format_line(left: str, description: str) -> str:
    if not description:
        return f"  {left}"
    return f"  {left:<{COLUMN_WIDTH}} {description}"


def generate_help_text(
    registry: Registry,
    program: str,
    description: str = "",
    epilog: str = "",
    version: str = "",
) -> str:
    """
    Render the registry as plain help text.

    Args:
        registry (Registry): The definitions to describe.
        program (str): Program name shown in the usage line.
        description (str): Optional paragraph printed below the usage line.
        epilog (str): Optional paragraph printed at the end.
        version (str): Optional version; adds a "<program> <version>" header.

    Returns:
        str: Help text terminated by a newline.
    """
    lines = []
    if version:
        lines.append(f"{program} {version}")
    lines.extend([f"Usage: {get_usage(registry, program)}", ""])
    if description:
        lines.extend([description, ""])

    lines.append("Options:")
    lines.append(_format_line(HELP_FLAG_TEXT, HELP_DESCRIPTION))
    for arg in registry.keywords():
        lines.append(_format_line(arg.get_flag_text(), _describe(arg)))

    positionals = registry.positionals()
    if positionals:
        lines.extend(["", "Arguments:"])
        for arg in positionals:
            lines.append(_format_line(arg.get_flag_text(), _describe(arg)))

    if epilog:
        lines.extend(["", epilog])
    return "\n".join(lines) + "\n"


def render_help(
    registry: Registry,
    program: str,
    console: Console,
    description: str = "",
    epilog: str = "",
    version: str = "",
) -> None:
    """
    Print formatted help text using Rich output.

    Includes usage, description, argument groups, and optional epilog.
    """
    if version:
        console.print(f"[bold]{escape(program)}[/bold] {escape(version)}")
    console.print(f"[bold]usage:[/bold] {escape(get_usage(registry, program))}\n")

    if description:
        console.print(escape(description) + "\n")

    console.print("[bold]options:[/bold]")
    console.print(escape(_format_line(HELP_FLAG_TEXT, HELP_DESCRIPTION)))
    for arg in registry.keywords():
        line = escape(_format_line(arg.get_flag_text(), arg.help or ""))
        if arg.required:
            line += f" [dim]{escape(REQUIRED_MARKER)}[/dim]"
        console.print(line)

    positionals = registry.positionals()
    if positionals:
        console.print("\n[bold]arguments:[/bold]")
        for arg in positionals:
            line = escape(_format_line(arg.get_flag_text(), arg.help or ""))
            if arg.required:
                line += f" [dim]{escape(REQUIRED_MARKER)}[/dim]"
            console.print(line)

    if epilog:
        console.print("\n" + escape(epilog), style="dim")
