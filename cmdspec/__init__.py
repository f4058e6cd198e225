"""
Cmdspec CLI Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .dispatcher import bind_args, dispatch
from .exceptions import (
    ArgumentValidationError,
    CmdSpecError,
    CommandNotFoundError,
    InvalidHandlerError,
    MissingArgumentError,
    MissingOptionValueError,
    UnrecognizedOptionError,
)
from .help import build_help_dialog, build_select_help_dialog, render_help
from .logger import logger
from .parsed import ParsedCommand
from .resolver import ParseResult, SpecResolver, parse_args, resolve
from .spec import ArgumentSpec, CommandSpec, OptionSpec, SingleArgumentSpec
from .validation import SchemaValidation, build_schema, validate

__all__ = [
    "ArgumentSpec",
    "ArgumentValidationError",
    "CmdSpecError",
    "CommandNotFoundError",
    "CommandSpec",
    "InvalidHandlerError",
    "MissingArgumentError",
    "MissingOptionValueError",
    "OptionSpec",
    "ParseResult",
    "ParsedCommand",
    "SchemaValidation",
    "SingleArgumentSpec",
    "SpecResolver",
    "UnrecognizedOptionError",
    "bind_args",
    "build_help_dialog",
    "build_schema",
    "build_select_help_dialog",
    "dispatch",
    "logger",
    "parse_args",
    "render_help",
    "resolve",
    "validate",
]
