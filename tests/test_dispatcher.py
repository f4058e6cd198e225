import asyncio

import pytest

from cmdspec import (
    ArgumentSpec,
    CommandNotFoundError,
    CommandSpec,
    MissingArgumentError,
    OptionSpec,
    ParsedCommand,
    SingleArgumentSpec,
    bind_args,
    dispatch,
)


def user_edit_spec(handler) -> CommandSpec:
    return CommandSpec(
        name="cli",
        options=[
            OptionSpec(
                name="output",
                aliases=["-o", "--output"],
                argument=SingleArgumentSpec(name="format"),
            )
        ],
        subcommands=[
            CommandSpec(
                name="user",
                subcommands=[
                    CommandSpec(
                        name="edit",
                        handler=handler,
                        arguments=[ArgumentSpec(name="user_id")],
                    )
                ],
            )
        ],
    )


@pytest.mark.asyncio
async def test_invoke_sync_handler():
    calls = []

    def handler(args, options, parsed):
        calls.append((args, options, parsed))

    await bind_args(user_edit_spec(handler), ["--output", "yaml", "user", "edit", "user1"])

    assert len(calls) == 1
    args, options, parsed = calls[0]
    assert args == ["user1"]
    assert options["output"] == "yaml"
    assert isinstance(parsed, ParsedCommand)
    assert parsed.command_path == ["cli", "user", "edit"]
    assert parsed.parent is not None
    assert parsed.parent.command_path == ["cli", "user"]


@pytest.mark.asyncio
async def test_invoke_async_handler_is_awaited():
    events = []

    async def handler(args, options, parsed):
        await asyncio.sleep(0)
        events.append(args[0])
        return "done"

    result = await dispatch(user_edit_spec(handler), ["user", "edit", "42"])

    assert events == ["42"]
    assert result == "done"


@pytest.mark.asyncio
async def test_no_handler_is_a_noop():
    spec = CommandSpec(name="cli", subcommands=[CommandSpec(name="user")])

    assert await bind_args(spec, ["user"]) is None


@pytest.mark.asyncio
async def test_handler_not_called_on_missing_argument():
    calls = []

    with pytest.raises(MissingArgumentError):
        await bind_args(user_edit_spec(lambda *a: calls.append(a)), ["user", "edit"])

    assert calls == []


@pytest.mark.asyncio
async def test_handler_not_called_on_unknown_command():
    calls = []

    with pytest.raises(CommandNotFoundError):
        await bind_args(user_edit_spec(lambda *a: calls.append(a)), ["group"])

    assert calls == []


@pytest.mark.asyncio
async def test_handler_error_propagates_unchanged():
    failure = RuntimeError("boom")

    async def handler(args, options, parsed):
        raise failure

    with pytest.raises(RuntimeError) as exc_info:
        await bind_args(user_edit_spec(handler), ["user", "edit", "1"])

    assert exc_info.value is failure
