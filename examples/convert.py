import logging
import sys

from clarg import ArgParseError, HelpRequested, Parser
from clarg.console import error_console
from clarg.logger import logger
from clarg.utils import setup_logging

setup_logging(
    console_log_level=logging.DEBUG if "--debug" in sys.argv else logging.WARNING
)

parser = Parser(
    program="convert",
    description="Convert an input file and write the result.",
    epilog="Use - as INPUT to read from standard input.",
)
parser.add_flag("verbose").with_short_name("v").with_help("Print progress.")
parser.add_flag("debug").with_help("Log parser activity.")
parser.add_option("output").with_short_name("o").required().with_help("Output file.")
parser.add_option("level").with_short_name("l").with_help("Compression level 0-9.")
parser.add_positional("input").required().with_help("File to convert.")


def main() -> int:
    try:
        args = parser.parse_argv()
    except HelpRequested:
        parser.render_help()
        return 0
    except ArgParseError as error:
        error_console.print(f"[bold red]error:[/] {error}")
        return 2

    try:
        level = args.get_value_as("level", int)
    except ValueError as error:
        error_console.print(f"[bold red]error:[/] {error}")
        return 2

    logger.info("Parsed %s", args.to_dict())
    if args.has_flag("verbose"):
        print(f"{args.get('input')} -> {args.options['output']} (level={level or 6})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
