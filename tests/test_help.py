import pytest
from rich.console import Console

from cmdspec import (
    ArgumentSpec,
    CommandSpec,
    OptionSpec,
    UnrecognizedOptionError,
    build_help_dialog,
    build_select_help_dialog,
    render_help,
)


def full_spec(subcommand_description: str | None = None) -> CommandSpec:
    return CommandSpec(
        name="cli",
        description="I am description",
        arguments=[ArgumentSpec(name="<abc>", description="im an argument")],
        options=[OptionSpec(name="abc", aliases=["-a", "--abc"], description="abc option")],
        subcommands=[CommandSpec(name="ls", description=subcommand_description)],
    )


def test_help_minimal():
    spec = CommandSpec(name="cli", description="I am description")

    assert list(build_help_dialog(spec, [])) == [
        "I am description",
        "",
        "Usage: cli",
        "",
    ]


def test_help_is_lazy():
    spec = CommandSpec(name="cli", description="I am description")
    lines = build_help_dialog(spec, [])

    assert next(lines) == "I am description"
    assert next(lines) == ""
    assert next(lines) == "Usage: cli"
    assert next(lines) == ""
    with pytest.raises(StopIteration):
        next(lines)


def test_help_without_description():
    spec = CommandSpec(name="cli")

    assert list(build_help_dialog(spec)) == ["Usage: cli", ""]


def test_help_argument_without_description_has_no_block():
    spec = CommandSpec(
        name="cli",
        description="I am description",
        arguments=[ArgumentSpec(name="<abc>")],
    )

    assert list(build_help_dialog(spec, [])) == [
        "I am description",
        "",
        "Usage: cli <abc>",
        "",
    ]


def test_help_with_arguments():
    spec = CommandSpec(
        name="cli",
        description="I am description",
        arguments=[ArgumentSpec(name="<abc>", description="im an argument")],
    )

    assert list(build_help_dialog(spec, [])) == [
        "I am description",
        "",
        "Usage: cli <abc>",
        "",
        "Arguments",
        "  <abc>    im an argument",
        "",
    ]


def test_help_with_arguments_and_options():
    spec = CommandSpec(
        name="cli",
        description="I am description",
        arguments=[ArgumentSpec(name="<abc>", description="im an argument")],
        options=[OptionSpec(name="abc", aliases=["-a", "--abc"], description="abc option")],
    )

    assert list(build_help_dialog(spec, [])) == [
        "I am description",
        "",
        "Usage: cli [options] <abc>",
        "",
        "Arguments",
        "  <abc>       im an argument",
        "",
        "Options",
        "  -a --abc    abc option",
        "",
    ]


def test_help_options_only():
    spec = CommandSpec(
        name="cli",
        options=[OptionSpec(name="verbose", aliases=["-v"], description="Be loud")],
    )

    assert list(build_help_dialog(spec, [])) == [
        "Usage: cli [options]",
        "",
        "Options",
        "  -v    Be loud",
        "",
    ]


def test_help_subcommand_without_description_has_no_commands_block():
    assert list(build_help_dialog(full_spec(), [])) == [
        "I am description",
        "",
        "Usage: cli [options] <abc>",
        "   or: cli [options] <command>",
        "",
        "Arguments",
        "  <abc>       im an argument",
        "",
        "Options",
        "  -a --abc    abc option",
        "",
    ]


def test_help_with_arguments_options_and_subcommands():
    assert list(build_help_dialog(full_spec("ls command"), [])) == [
        "I am description",
        "",
        "Usage: cli [options] <abc>",
        "   or: cli [options] <command>",
        "",
        "Arguments",
        "  <abc>       im an argument",
        "",
        "Commands",
        "  ls          ls command",
        "",
        "Options",
        "  -a --abc    abc option",
        "",
    ]


def test_help_for_subcommand():
    assert list(build_help_dialog(full_spec("ls command"), ["abc", "ls"])) == [
        "ls command",
        "",
        "Usage: cli ls",
        "",
    ]


def test_help_for_unknown_command_degrades_to_single_line():
    spec = CommandSpec(
        name="cli",
        description="I am description",
        options=[OptionSpec(name="abc", aliases=["-a", "--abc"], description="abc option")],
        subcommands=[CommandSpec(name="ls", description="ls command")],
    )

    assert list(build_help_dialog(spec, ["ls", "no-found"])) == [
        "cli ls no-found: Is not valid command. See cli --help",
    ]


def test_help_unknown_option_propagates():
    spec = CommandSpec(name="cli")

    with pytest.raises(UnrecognizedOptionError):
        list(build_help_dialog(spec, ["--nope"]))


def test_select_help_without_spec():
    assert list(build_select_help_dialog(None, ["cli", "bogus"], [])) == [
        "cli bogus: Is not valid command. See cli --help",
    ]


def test_entries_without_description_still_pad():
    spec = CommandSpec(
        name="cli",
        arguments=[ArgumentSpec(name="<a>", description="first")],
        subcommands=[CommandSpec(name="a-very-long-command")],
    )

    lines = list(build_help_dialog(spec))

    assert "  <a>                    first" in lines
    assert "Commands" not in lines


def test_render_help_prints_lines(capsys):
    console = Console(force_terminal=False, width=120)

    render_help(full_spec("ls command"), [], console=console)

    captured = capsys.readouterr()
    assert "Usage: cli [options] <abc>" in captured.out
    assert "   or: cli [options] <command>" in captured.out
    assert "  -a --abc    abc option" in captured.out
