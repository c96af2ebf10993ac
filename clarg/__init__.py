"""
Clarg Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .argument import ArgumentDef
from .argument_kind import ArgumentKind
from .builder import ArgumentBuilder
from .exceptions import (
    ArgParseError,
    ArgumentDefinitionError,
    ClargError,
    DuplicateNameError,
    DuplicateShortNameError,
    InvalidArgumentError,
    MissingRequiredArgumentError,
    MissingValueError,
    OptionInMiddleOfGroupError,
    UnexpectedPositionalError,
    UnknownArgumentError,
    ValueConversionError,
)
from .parsed_args import ParsedArgs
from .parser import Parser
from .signals import HelpRequested

logger = logging.getLogger("clarg")


__all__ = [
    "Parser",
    "ParsedArgs",
    "ArgumentBuilder",
    "ArgumentDef",
    "ArgumentKind",
    "HelpRequested",
    "ClargError",
    "ArgParseError",
    "ArgumentDefinitionError",
    "DuplicateNameError",
    "DuplicateShortNameError",
    "InvalidArgumentError",
    "MissingRequiredArgumentError",
    "MissingValueError",
    "OptionInMiddleOfGroupError",
    "UnexpectedPositionalError",
    "UnknownArgumentError",
    "ValueConversionError",
]
