# Cmdspec CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements the tokenizer/resolver that walks an argument vector against a
Command Spec Tree and produces the Parsed Spec Chain.

Resolution is a single left-to-right pass with no backtracking. Every token is
classified by the first rule that applies, in this fixed order:

1. Option: the token starts with `-` and is an alias of an option declared on
   the current command. Boolean flags store `True`; value-bearing options consume
   the next token unconditionally as their value.
2. Subcommand: the token names a subcommand of the current command. A new chain
   node is pushed and becomes current.
3. Positional: the current command declares an argument for the next free slot.
4. Anything else aborts the pass with `CommandNotFoundError`.

Subcommands are matched before positional arguments, so a subcommand name wins
over literal capture of the same text.

Public Interface:
- `resolve(spec, args)`: Return the tail `ParsedCommand` of the chain.
- `parse_args(spec, args)`: Return a `ParseResult` bundling the tail node with
  its `validate()` entry point.

Example:
    result = parse_args(spec, ["--output", "yaml", "user", "edit", "user1"])
    result.parsed.command_path   # ['cli', 'user', 'edit']
    result.parsed.options_parsed # {'o': 'yaml', 'output': 'yaml'}
    result.validate()            # ('user1',)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from cmdspec.exceptions import (
    CommandNotFoundError,
    MissingOptionValueError,
    UnrecognizedOptionError,
)
from cmdspec.logger import logger
from cmdspec.parsed import ParsedCommand
from cmdspec.spec import CommandSpec
from cmdspec.validation import validate


@dataclass(frozen=True)
class ParseResult:
    """The resolved tail node together with its validation entry point."""

    parsed: ParsedCommand

    def validate(self) -> tuple[str, ...]:
        """Validate the resolved node. See `cmdspec.validation.validate`."""
        return validate(self.parsed)


class SpecResolver:
    """
    Resolves argument vectors against one Command Spec Tree.

    The resolver holds no state between calls: every `resolve()` builds a fresh
    chain, so resolving the same arguments twice yields equal results.
    """

    def __init__(self, spec: CommandSpec) -> None:
        self.spec: CommandSpec = spec

    def resolve(self, args: Sequence[str] | None = None) -> ParsedCommand:
        """
        Walk `args` and return the tail node of the resulting chain.

        Raises:
            UnrecognizedOptionError: A flag token matches no declared alias.
            MissingOptionValueError: A value-bearing option is the last token.
            CommandNotFoundError: A token is neither a subcommand nor a free
                positional slot.
        """
        tokens = list(args or [])
        current = ParsedCommand.root(self.spec)

        i = 0
        while i < len(tokens):
            current, i = self._handle_token(tokens, i, current)

        logger.debug("Resolved '%s' from %s", " ".join(current.command_path), tokens)
        return current

    def _handle_token(
        self, tokens: list[str], i: int, current: ParsedCommand
    ) -> tuple[ParsedCommand, int]:
        token = tokens[i]
        if token.startswith("-"):
            return current, self._consume_option(tokens, i, current)

        subcommand = current.spec.find_subcommand(token)
        if subcommand is not None:
            logger.debug(
                "[%s] Entering subcommand '%s'",
                " ".join(current.command_path),
                subcommand.name,
            )
            return current.descend(subcommand), i + 1

        if len(current.arguments_parsed) < len(current.spec.arguments):
            current.arguments_parsed.append(token)
            return current, i + 1

        raise CommandNotFoundError(current.command_path, token)

    def _consume_option(self, tokens: list[str], i: int, current: ParsedCommand) -> int:
        token = tokens[i]
        option = current.spec.find_option(token)
        if option is None:
            raise UnrecognizedOptionError(current.command_path, token)

        if option.argument is None:
            current.store_option(option, True)
            return i + 1

        if i + 1 >= len(tokens):
            raise MissingOptionValueError(
                current.command_path, token, option.argument.name
            )
        current.store_option(option, tokens[i + 1])
        return i + 2


def resolve(spec: CommandSpec, args: Sequence[str] | None = None) -> ParsedCommand:
    """Resolve `args` against `spec` and return the tail of the Parsed Spec Chain."""
    return SpecResolver(spec).resolve(args)


def parse_args(spec: CommandSpec, args: Sequence[str] | None = None) -> ParseResult:
    """Resolve `args` against `spec` and pair the result with its validator."""
    return ParseResult(parsed=resolve(spec, args))
