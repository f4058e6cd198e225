# Cmdspec CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for cmdspec command trees.

A spec file describes the root command as a mapping. Handlers are given as dotted
import paths and resolved at load time. A subcommand entry may instead point to
another spec file with `config`, resolved relative to the including file.

Example (YAML):
    name: cli
    description: User management
    options:
      - name: output
        aliases: ["-o", "--output"]
        argument:
          name: <format>
    subcommands:
      - name: user
        subcommands:
          - name: edit
            handler: my_app.users.edit
            arguments:
              - name: user_id
      - config: reports.yaml
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field

from cmdspec.exceptions import InvalidHandlerError
from cmdspec.logger import logger
from cmdspec.spec import ArgumentSpec, CommandSpec, OptionSpec

MAX_DEPTH = 5


def import_handler(dotted_path: str) -> Any:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise InvalidHandlerError(f"Invalid handler path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise InvalidHandlerError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        handler = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise InvalidHandlerError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(handler):
        raise InvalidHandlerError(f"Handler '{dotted_path}' is not callable")
    return handler


class RawCommandSpec(BaseModel):
    """Raw command model as written in a spec file."""

    name: str
    description: str | None = None
    handler: str | None = None
    options: list[OptionSpec] = Field(default_factory=list)
    arguments: list[ArgumentSpec] = Field(default_factory=list)
    subcommands: list[dict[str, Any]] = Field(default_factory=list)


def convert_command(
    raw: dict[str, Any], *, parent_path: Path | None = None, depth: int = 0
) -> CommandSpec:
    raw_command = RawCommandSpec(**raw)
    subcommands = [
        convert_subcommand(entry, parent_path=parent_path, depth=depth)
        for entry in raw_command.subcommands
    ]
    return CommandSpec(
        name=raw_command.name,
        description=raw_command.description,
        options=raw_command.options,
        arguments=raw_command.arguments,
        subcommands=subcommands,
        handler=import_handler(raw_command.handler) if raw_command.handler else None,
    )


def convert_subcommand(
    entry: dict[str, Any], *, parent_path: Path | None = None, depth: int = 0
) -> CommandSpec:
    if not entry.get("config"):
        return convert_command(entry, parent_path=parent_path, depth=depth)

    config_path = Path(entry["config"])
    if parent_path and not config_path.is_absolute():
        config_path = (parent_path.parent / config_path).resolve()
    return loader(config_path, _depth=depth + 1)


def _read_config(path: Path) -> dict[str, Any]:
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping describing the root command.\n"
            "Example:\n"
            "name: 'cli'\n"
            "subcommands:\n"
            "  - name: 'ls'\n"
            "    handler: 'my_module.my_function'"
        )
    return raw_config


def loader(file_path: Path | str, _depth: int = 0) -> CommandSpec:
    """
    Load a command tree from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the spec file.

    Returns:
        CommandSpec: The root command of the loaded tree.

    Raises:
        FileNotFoundError: The file does not exist.
        ValueError: Unsupported format, bad content or includes nested too deep.
        InvalidHandlerError: A handler path cannot be imported.
        pydantic.ValidationError: The content does not describe a valid spec.
    """
    if _depth > MAX_DEPTH:
        raise ValueError(f"Maximum include depth exceeded ({MAX_DEPTH} levels deep)")

    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    logger.debug("Loading command spec from '%s'", path)
    return convert_command(_read_config(path), parent_path=path, depth=_depth)
