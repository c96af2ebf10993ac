# Clarg Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Build a `Parser` from declarative argument definitions in YAML, TOML or a dict."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from clarg.argument_kind import ArgumentKind
from clarg.exceptions import ConfigError
from clarg.logger import logger
from clarg.parser import Parser

EXAMPLE_CONFIG = (
    "Example:\n"
    "program: 'convert'\n"
    "arguments:\n"
    "  - name: 'verbose'\n"
    "    kind: 'flag'\n"
    "    short: 'v'\n"
    "  - name: 'input'\n"
    "    kind: 'positional'\n"
    "    required: true"
)


class RawArgument(BaseModel):
    """One argument entry in a definition file."""

    name: str
    kind: ArgumentKind = ArgumentKind.OPTION
    short: str | None = None
    help: str = ""
    required: bool = False

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ArgumentKind:
        if isinstance(value, ArgumentKind):
            return value
        return ArgumentKind(value)


class ParserConfig(BaseModel):
    """Definition file model for a clarg parser."""

    program: str | None = None
    description: str = ""
    epilog: str = ""
    version: str = ""
    arguments: list[RawArgument] = Field(default_factory=list)

    def to_parser(self) -> Parser:
        parser = Parser(
            program=self.program,
            description=self.description,
            epilog=self.epilog,
            version=self.version,
        )
        for raw in self.arguments:
            builder = parser.add(raw.name, raw.kind)
            if raw.short is not None:
                builder.with_short_name(raw.short)
            if raw.help:
                builder.with_help(raw.help)
            if raw.required:
                builder.required()
        return parser


def build_parser(raw_config: dict[str, Any]) -> Parser:
    """
    Build a parser from a mapping shaped like `Parser.to_definition_list()`
    wrapped in an `arguments` key.

    Raises:
        ConfigError: If the mapping does not match the definition schema.
        ArgumentDefinitionError: If the definitions conflict with each other.
    """
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration must be a dictionary with a list of arguments.\n"
            + EXAMPLE_CONFIG
        )
    try:
        config = ParserConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid argument definitions:\n{error}") from error
    return config.to_parser()


def load_parser(file_path: Path | str) -> Parser:
    """
    Load parser definitions from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the definition file.

    Returns:
        Parser: A parser with every argument registered.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ConfigError: If the format is unsupported or the content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse {path}: {error}") from error

    logger.debug("Loaded argument definitions from %s", path)
    return build_parser(raw_config)
