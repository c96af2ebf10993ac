# Clarg Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by clarg.

Parse-time failures carry the offending token or argument name so callers can
build their own messages. Registration-time failures are raised eagerly from
`Parser.add_*` and the builder methods.

Exception Hierarchy:
- ClargError
    ├── ArgParseError
    │   ├── UnknownArgumentError
    │   ├── MissingValueError
    │   ├── UnexpectedPositionalError
    │   ├── MissingRequiredArgumentError
    │   └── OptionInMiddleOfGroupError
    ├── ArgumentDefinitionError
    │   ├── DuplicateNameError
    │   ├── DuplicateShortNameError
    │   └── InvalidArgumentError
    ├── ValueConversionError
    └── ConfigError

A help request is not an error. See `clarg.signals.HelpRequested`.
"""


class ClargError(Exception):
    """Base exception for clarg."""


class ArgParseError(ClargError):
    """Exception raised when a token sequence cannot be parsed."""


class UnknownArgumentError(ArgParseError):
    """Exception raised when a marked token matches no registered name."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"Unrecognized option '{token}'. Use --help to see available options."
        )


class MissingValueError(ArgParseError):
    """Exception raised when an option is not followed by its value."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Option '{name}' requires a value.")


class UnexpectedPositionalError(ArgParseError):
    """Exception raised when more bare tokens are supplied than positionals."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unexpected positional argument: {token}")


class MissingRequiredArgumentError(ArgParseError):
    """Exception raised when a required option or positional was never supplied."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing required argument '{name}'")


class OptionInMiddleOfGroupError(ArgParseError):
    """Exception raised when an option is bundled before the end of a short group."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Option '{name}' takes a value and must be last in a short flag group."
        )


class ArgumentDefinitionError(ClargError):
    """Exception raised when an argument cannot be registered or configured."""


class DuplicateNameError(ArgumentDefinitionError):
    """Exception raised when an argument name is already registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Argument '{name}' is already defined.")


class DuplicateShortNameError(ArgumentDefinitionError):
    """Exception raised when a short name is already used by another argument."""

    def __init__(self, short_name: str, owner: str | None = None):
        self.short_name = short_name
        self.owner = owner
        message = f"Short name '-{short_name}' is already used"
        if owner:
            message += f" by argument '{owner}'"
        super().__init__(message + ".")


class InvalidArgumentError(ArgumentDefinitionError):
    """Exception raised when an argument definition is malformed."""


class ValueConversionError(ClargError, ValueError):
    """Exception raised when an option value cannot be converted to a type."""

    def __init__(self, name: str, value: str, target_type: object, reason: str = ""):
        self.name = name
        self.value = value
        self.target_type = target_type
        type_name = getattr(target_type, "__name__", str(target_type))
        message = f"Invalid value for '{name}': {value!r} is not a valid {type_name}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ConfigError(ClargError):
    """Exception raised when an argument definition file is invalid."""
