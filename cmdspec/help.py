# Cmdspec CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders the help dialog of any command in a Command Spec Tree.

The dialog is produced lazily, one line at a time, in a fixed order:

    <description>
    <blank>
    Usage: <path> [options] <arg1> <arg2>
       or: <path> [options] <command>
    <blank>
    Arguments / Commands / Options blocks, each followed by a blank line

A block is emitted only when at least one of its entries has a description.
Entries without a description are still listed inside an emitted block and
always take part in the shared column width.

The target command is found with the same resolver used for parsing, so help
for `cli user edit` and parsing of `cli user edit ...` agree on the path.

Public Interface:
- `build_select_help_dialog(spec, command_path, args)`: Lines for a known node.
- `build_help_dialog(spec, args)`: Resolve `args`, then render that node.
- `render_help(spec, args, console)`: Print the dialog with Rich.
"""
from __future__ import annotations

from typing import Iterator, Sequence

from rich.console import Console
from rich.markup import escape

from cmdspec.console import console as default_console
from cmdspec.exceptions import CommandNotFoundError
from cmdspec.logger import logger
from cmdspec.resolver import resolve
from cmdspec.spec import CommandSpec

USAGE_LABEL_WIDTH = 6
COLUMN_GAP = "    "


def _usage_labels() -> Iterator[str]:
    yield "Usage:".rjust(USAGE_LABEL_WIDTH)
    while True:
        yield "or:".rjust(USAGE_LABEL_WIDTH)


def _block(title: str, rows: list[tuple[str, str | None]], pad: int) -> Iterator[str]:
    yield title
    for label, description in rows:
        yield f"  {label.ljust(pad)}{COLUMN_GAP}{description or ''}"
    yield ""


def build_select_help_dialog(
    spec: CommandSpec | None,
    command_path: Sequence[str],
    args: Sequence[str] | None = None,
) -> Iterator[str]:
    """
    Yield the help lines of `spec`, reached through `command_path`.

    When `spec` is None the path could not be resolved and a single explanatory
    line is produced instead.
    """
    path = " ".join(command_path)
    if spec is None:
        program = command_path[0] if command_path else ""
        yield f"{path}: Is not valid command. See {program} --help"
        return

    if spec.description:
        yield spec.description
        yield ""

    labels = _usage_labels()
    options_text = " [options]" if spec.options else ""
    if not spec.arguments and not spec.subcommands:
        yield f"{next(labels)} {path}{options_text}"
    if spec.arguments:
        arguments_text = " ".join(argument.name for argument in spec.arguments)
        yield f"{next(labels)} {path}{options_text} {arguments_text}"
    if spec.subcommands:
        yield f"{next(labels)} {path}{options_text} <command>"
    yield ""

    pad = max(
        [
            *(len(argument.name) for argument in spec.arguments),
            *(len(option.label) for option in spec.options),
            *(len(subcommand.name) for subcommand in spec.subcommands),
        ],
        default=0,
    )

    if any(argument.description for argument in spec.arguments):
        yield from _block(
            "Arguments",
            [(argument.name, argument.description) for argument in spec.arguments],
            pad,
        )

    if any(subcommand.description for subcommand in spec.subcommands):
        yield from _block(
            "Commands",
            [(subcommand.name, subcommand.description) for subcommand in spec.subcommands],
            pad,
        )

    if any(option.description for option in spec.options):
        yield from _block(
            "Options",
            [(option.label, option.description) for option in spec.options],
            pad,
        )


def build_help_dialog(spec: CommandSpec, args: Sequence[str] | None = None) -> Iterator[str]:
    """
    Resolve `args` against `spec` and yield the help lines of the node reached.

    A path that does not resolve degrades to a single explanatory line rather
    than raising. Option errors still propagate.
    """
    args = list(args or [])
    try:
        parsed = resolve(spec, args)
    except CommandNotFoundError as error:
        logger.debug("Help requested for unknown command: %s", error)
        yield from build_select_help_dialog(None, [*error.command_path, error.token], args)
        return
    yield from build_select_help_dialog(parsed.spec, parsed.command_path, args)


def render_help(
    spec: CommandSpec,
    args: Sequence[str] | None = None,
    console: Console | None = None,
) -> None:
    """Print the help dialog for the command reached by `args`."""
    console = console or default_console
    for line in build_help_dialog(spec, args):
        console.print(escape(line), highlight=False, soft_wrap=True)
