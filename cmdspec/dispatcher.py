# Cmdspec CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Binds an argument vector to the handler of the command it resolves to.

`bind_args()` runs the resolver, validates the resolved node, then awaits the
node's handler with three positional inputs:

    handler(arguments_parsed, options_parsed, parsed)

where `parsed` is the tail `ParsedCommand`, giving access to `command_path` and
the `parent` chain. Handlers may be plain functions or coroutines. A command
without a handler is a pass-through container and dispatching to it does nothing.

Any exception raised by the handler propagates unchanged to the caller.
"""
from __future__ import annotations

from typing import Any, Sequence

from cmdspec.logger import logger
from cmdspec.resolver import parse_args
from cmdspec.spec import CommandSpec
from cmdspec.utils import ensure_async


async def bind_args(spec: CommandSpec, args: Sequence[str] | None = None) -> Any:
    """
    Resolve, validate and dispatch `args` against `spec`.

    Returns:
        Any: The handler's return value, or None when the command has no handler.

    Raises:
        CmdSpecError: Resolution or validation failed; the handler is not called.
    """
    result = parse_args(spec, args)
    result.validate()

    parsed = result.parsed
    path = " ".join(parsed.command_path)
    if parsed.spec.handler is None:
        logger.debug("[%s] No handler registered, nothing to dispatch.", path)
        return None

    logger.info("[%s] Dispatching with arguments %s", path, parsed.arguments_parsed)
    handler = ensure_async(parsed.spec.handler)
    return await handler(parsed.arguments_parsed, parsed.options_parsed, parsed)


dispatch = bind_args
