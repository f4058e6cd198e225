# Cmdspec CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParsedCommand`, one node of the Parsed Spec Chain.

The resolver creates one node per traversed command: the root node at chain
start and a new node at every subcommand transition. Each node links back to
its parent, so the tail node returned by the resolver gives access to the whole
chain.

Option values are stored under every alias of the matched option with its dash
prefix removed, so an option declared as `-o` / `--output` is readable under both
`o` and `output`. `get_option()` provides the canonical-name lookup on top of that.

Inheritance:
    A child node starts with a shallow copy of its parent's options at the moment
    of transition, so options given before a subcommand remain visible after it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from cmdspec.spec import CommandSpec, OptionSpec

OptionValue = bool | str | list[str]


@dataclass
class ParsedCommand:
    """
    One level of command resolution.

    Attributes:
        spec (CommandSpec): The matched command.
        command_path (list[str]): Traversed command names, root included.
        options_parsed (dict[str, OptionValue]): Values keyed by de-prefixed alias.
        arguments_parsed (list[str]): Positional tokens consumed at this level.
        parent (ParsedCommand | None): Enclosing node; None only at the root.
    """

    spec: CommandSpec
    command_path: list[str]
    options_parsed: dict[str, OptionValue] = field(default_factory=dict)
    arguments_parsed: list[str] = field(default_factory=list)
    parent: ParsedCommand | None = field(default=None, repr=False)

    @classmethod
    def root(cls, spec: CommandSpec) -> ParsedCommand:
        """Start a new chain for `spec`."""
        return cls(spec=spec, command_path=[spec.name])

    def descend(self, spec: CommandSpec) -> ParsedCommand:
        """Create the child node for a subcommand transition."""
        return ParsedCommand(
            spec=spec,
            command_path=[*self.command_path, spec.name],
            options_parsed=dict(self.options_parsed),
            arguments_parsed=[],
            parent=self,
        )

    def store_option(self, option: OptionSpec, value: Any) -> None:
        """Record one occurrence of `option` under each of its storage keys."""
        for key in option.storage_keys:
            if option.multiple:
                current = self.options_parsed.get(key)
                values = list(current) if isinstance(current, list) else []
                values.append(value)
                self.options_parsed[key] = values
            else:
                self.options_parsed[key] = value

    def get_option(self, name: str, default: Any = None) -> Any:
        """
        Return the value of the option whose canonical name is `name`.

        The option may be declared on this command or any ancestor.
        """
        for node in reversed(self.chain()):
            for option in node.spec.options:
                if option.name != name:
                    continue
                for key in option.storage_keys:
                    if key in self.options_parsed:
                        return self.options_parsed[key]
                return default
        return default

    def chain(self) -> list[ParsedCommand]:
        """Return the nodes from the root down to this one."""
        return list(reversed(list(self.ancestors(include_self=True))))

    def ancestors(self, include_self: bool = False) -> Iterator[ParsedCommand]:
        node = self if include_self else self.parent
        while node is not None:
            yield node
            node = node.parent

    @property
    def depth(self) -> int:
        return len(self.command_path) - 1

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def __str__(self) -> str:
        return (
            f"ParsedCommand(path={' '.join(self.command_path)!r}, "
            f"options={self.options_parsed}, arguments={self.arguments_parsed})"
        )
