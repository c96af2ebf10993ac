# Clarg Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised by the clarg parser.

Signals interrupt parsing without being treated as traditional exceptions.
`FlowSignal` subclasses `BaseException` so a help request passes straight
through `except Exception` and `except ArgParseError` blocks and reaches the
caller, which decides how to print help and exit.

Signals:
- HelpRequested: The user passed `--help` or `-h`.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in clarg.

    These are not errors. They tell the caller that parsing stopped on purpose.
    """


class HelpRequested(FlowSignal):
    """Raised when the token sequence asks for help."""

    def __init__(self, message: str = "Help requested."):
        super().__init__(message)
