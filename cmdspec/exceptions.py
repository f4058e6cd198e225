# Cmdspec CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by the cmdspec engine.

Resolution errors abort the pass over the argument vector immediately; no
partial result is returned. Validation errors carry the underlying pydantic
`ValidationError` as their cause so callers can inspect it programmatically.

All exceptions inherit from `CmdSpecError`, the base exception for the engine.

Exception Hierarchy:
- CmdSpecError
    ├── CommandNotFoundError
    ├── UnrecognizedOptionError
    ├── MissingOptionValueError
    ├── ArgumentValidationError
    │     └── MissingArgumentError
    └── InvalidHandlerError

These are raised to the embedding application, which decides on the
user-facing message and the process exit code.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from pydantic import ValidationError

    from cmdspec.parsed import ParsedCommand


class CmdSpecError(Exception):
    """Base exception for the cmdspec engine."""


class CommandNotFoundError(CmdSpecError):
    """
    Raised when a token is neither a known subcommand nor fits a free
    positional slot at the current resolution depth.
    """

    def __init__(self, command_path: Sequence[str], token: str) -> None:
        self.command_path: list[str] = list(command_path)
        self.token: str = token
        path = " ".join(self.command_path)
        super().__init__(f"{path} {token}: Is not valid command. See {path} --help")


class UnrecognizedOptionError(CmdSpecError):
    """Raised when a flag token matches no alias declared on the current command."""

    def __init__(self, command_path: Sequence[str], token: str) -> None:
        self.command_path: list[str] = list(command_path)
        self.token: str = token
        path = " ".join(self.command_path)
        super().__init__(f"Unrecognized option: {token}. See {path} --help")


class MissingOptionValueError(CmdSpecError):
    """Raised when a value-bearing option is the last token of the input."""

    def __init__(self, command_path: Sequence[str], option: str, placeholder: str) -> None:
        self.command_path: list[str] = list(command_path)
        self.option: str = option
        self.placeholder: str = placeholder
        super().__init__(f"Option '{option}' expects a value: {placeholder}")


class ArgumentValidationError(CmdSpecError):
    """Raised when the positional arguments of a resolved command fail validation."""

    def __init__(
        self,
        message: str,
        parsed: ParsedCommand,
        validation_error: ValidationError,
    ) -> None:
        self.parsed: ParsedCommand = parsed
        self.validation_error: ValidationError = validation_error
        super().__init__(message)


class MissingArgumentError(ArgumentValidationError):
    """Raised when fewer positional arguments were given than the command declares."""


class InvalidHandlerError(CmdSpecError):
    """Raised when a configured handler cannot be imported or is not callable."""
