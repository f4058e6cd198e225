# Cmdspec CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the declarative Command Spec Tree consumed by the cmdspec engine.

A program's interface is described as a tree of `CommandSpec` nodes. Each node
declares its options, its positional arguments, its subcommands and an optional
handler. The tree is static and immutable once built: the resolver walks it,
it never changes it.

Models:
- `ArgumentSpec`: a positional argument, bound by position.
- `SingleArgumentSpec`: the value placeholder of a value-bearing option.
- `OptionSpec`: a flag (`-x` / `--word`), boolean or value-bearing.
- `CommandSpec`: one command node, recursive through `subcommands`.

Example:
    spec = CommandSpec(
        name="cli",
        options=[
            OptionSpec(
                name="output",
                aliases=["-o", "--output"],
                argument=SingleArgumentSpec(name="<format>"),
            )
        ],
        subcommands=[
            CommandSpec(
                name="user",
                subcommands=[
                    CommandSpec(
                        name="edit",
                        arguments=[ArgumentSpec(name="user_id")],
                        handler=edit_user,
                    )
                ],
            )
        ],
    )

Specs may also be given as plain dictionaries (`CommandSpec.model_validate`)
or loaded from YAML/TOML with `cmdspec.config.loader`.
"""
from __future__ import annotations

import re
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from cmdspec.utils import strip_flag_prefix

LONG_ALIAS = re.compile(r"^--[\w-]+$")
SHORT_ALIAS = re.compile(r"^-\w$")

Handler = Callable[..., Any]


class ArgumentSpec(BaseModel):
    """
    A positional argument of a command.

    `multiple` is reserved for variadic capture; the resolver currently binds
    every positional argument to exactly one token.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    multiple: bool = False


class SingleArgumentSpec(BaseModel):
    """The value placeholder shown for a value-bearing option."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None


class OptionSpec(BaseModel):
    """
    A command option.

    Attributes:
        name (str): Canonical key of the option.
        aliases (list[str]): Flag tokens, each `--word` or `-x`. At least one.
        description (str | None): Help text.
        multiple (bool): Accumulate every occurrence into a list.
        argument (SingleArgumentSpec | None): Present for value-bearing options,
            absent for boolean flags.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    aliases: list[str] = Field(min_length=1)
    description: str | None = None
    multiple: bool = False
    argument: SingleArgumentSpec | None = None

    @field_validator("aliases")
    @classmethod
    def validate_aliases(cls, aliases: list[str]) -> list[str]:
        for alias in aliases:
            if not (LONG_ALIAS.match(alias) or SHORT_ALIAS.match(alias)):
                raise ValueError(
                    f"Invalid alias '{alias}': expected '--word' or '-x' form"
                )
        return aliases

    @property
    def is_flag(self) -> bool:
        """True when the option takes no value."""
        return self.argument is None

    @property
    def storage_keys(self) -> list[str]:
        """Storage keys of the option, one per alias, without the dash prefix."""
        return [strip_flag_prefix(alias) for alias in self.aliases]

    @property
    def label(self) -> str:
        return " ".join(self.aliases)


class CommandSpec(BaseModel):
    """
    One node of the Command Spec Tree.

    A node without a handler is a pass-through container: resolving to it and
    dispatching is a no-op.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    options: list[OptionSpec] = Field(default_factory=list)
    arguments: list[ArgumentSpec] = Field(default_factory=list)
    subcommands: list[CommandSpec] = Field(default_factory=list)
    handler: Handler | None = None

    @model_validator(mode="after")
    def validate_unique_subcommands(self) -> CommandSpec:
        seen: set[str] = set()
        for subcommand in self.subcommands:
            if subcommand.name in seen:
                raise ValueError(
                    f"Duplicate subcommand '{subcommand.name}' under '{self.name}'"
                )
            seen.add(subcommand.name)
        return self

    def find_option(self, token: str) -> OptionSpec | None:
        """Return the option declaring `token` as one of its aliases."""
        return next((option for option in self.options if token in option.aliases), None)

    def find_subcommand(self, name: str) -> CommandSpec | None:
        return next(
            (subcommand for subcommand in self.subcommands if subcommand.name == name),
            None,
        )

    def __str__(self) -> str:
        return (
            f"CommandSpec(name={self.name!r}, options={len(self.options)}, "
            f"arguments={len(self.arguments)}, subcommands={len(self.subcommands)}, "
            f"handler={self.handler is not None})"
        )
