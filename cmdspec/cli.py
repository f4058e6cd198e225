# Cmdspec CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Thin command-line boundary for applications built on a Command Spec Tree.

`run()` takes care of the parts of a CLI that live outside the engine: reading
`sys.argv`, answering `-h` / `--help`, printing errors to the console and turning
the outcome into an exit code.

Exit codes:
    0   Success, or help was shown.
    1   Resolution or validation failed (`CmdSpecError`).
    130 Interrupted from the keyboard.

Exceptions raised by handlers are not caught here; they propagate to the caller.

Example:
    if __name__ == "__main__":
        main(spec)
"""
from __future__ import annotations

import asyncio
import sys
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from cmdspec.console import console as default_console
from cmdspec.dispatcher import bind_args
from cmdspec.exceptions import ArgumentValidationError, CmdSpecError
from cmdspec.help import build_select_help_dialog, render_help
from cmdspec.logger import logger
from cmdspec.spec import CommandSpec

HELP_FLAGS = ("-h", "--help")


def help_request(spec: CommandSpec, args: Sequence[str]) -> list[str] | None:
    """
    Return the tokens to render help for, or None when `args` do not ask for help.

    Tokens are walked the way the resolver reads them. `-h` / `--help` only count
    as a help request when the command reached so far does not declare that alias
    and the token is not being consumed as an option value. Help is rendered for
    the tokens preceding the flag.
    """
    current = spec
    positionals = 0
    i = 0
    while i < len(args):
        token = args[i]
        option = current.find_option(token)
        if option is not None:
            i += 1 if option.argument is None else 2
            continue
        if token in HELP_FLAGS:
            return list(args[:i])
        if token.startswith("-"):
            return None
        subcommand = current.find_subcommand(token)
        if subcommand is not None:
            current = subcommand
            positionals = 0
        elif positionals < len(current.arguments):
            positionals += 1
        else:
            return None
        i += 1
    return None


def wants_help(spec: CommandSpec, args: Sequence[str]) -> bool:
    return help_request(spec, args) is not None


async def run(
    spec: CommandSpec,
    argv: Sequence[str] | None = None,
    console: Console | None = None,
) -> int:
    """
    Dispatch `argv` (default `sys.argv[1:]`) against `spec`.

    Returns:
        int: The process exit code.
    """
    console = console or default_console
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        help_tokens = help_request(spec, args)
        if help_tokens is not None:
            render_help(spec, help_tokens, console)
            return 0
        await bind_args(spec, args)
    except ArgumentValidationError as error:
        logger.info("[%s] %s", " ".join(error.parsed.command_path), error)
        console.print(f"[red]❌ Error:[/] {escape(str(error))}")
        for line in build_select_help_dialog(error.parsed.spec, error.parsed.command_path):
            console.print(escape(line), highlight=False, soft_wrap=True)
        return 1
    except CmdSpecError as error:
        logger.info("%s", error)
        console.print(f"[red]❌ Error:[/] {escape(str(error))}")
        return 1
    return 0


def main(spec: CommandSpec, argv: Sequence[str] | None = None) -> None:
    """Run `spec` as a program and exit the process with its exit code."""
    try:
        exit_code = asyncio.run(run(spec, argv))
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt. Exiting %s.", spec.name)
        exit_code = 130
    sys.exit(exit_code)
