# Cmdspec CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds and applies the structural schemas of a resolved command.

Two schemas are derived from a `ParsedCommand`:

- `arguments_schema`: a pydantic `TypeAdapter` over a fixed-length tuple with
  one required `str` slot per positional argument declared on the resolved
  command.
- `option_schema`: a pydantic model merging the options declared on the
  resolved command and all of its ancestors. Fields are named after the
  option's canonical name (`option_<n>` when that name cannot be a pydantic
  field) and accept the canonical name or any de-prefixed alias as input keys.
  Value-bearing options are `str` (`list[str]` when `multiple`), boolean flags
  are `Literal[True]`.

`validate()` enforces the positional schema only. The option schema is exposed
for callers that want to check option values themselves.
"""
from __future__ import annotations

import keyword
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, Field, TypeAdapter, ValidationError, create_model

from cmdspec.exceptions import ArgumentValidationError, MissingArgumentError
from cmdspec.logger import logger
from cmdspec.parsed import ParsedCommand
from cmdspec.spec import OptionSpec


@dataclass(frozen=True)
class SchemaValidation:
    """Schemas derived from one resolved command."""

    option_schema: type[BaseModel]
    arguments_schema: TypeAdapter


def _field_name(option: OptionSpec, taken: set[str]) -> str:
    """
    Pick the model field for `option`.

    The canonical name (dashes as underscores) is used when pydantic accepts it
    as a plain field. Names that are private, keywords, in the `model_`
    namespace or shadow a `BaseModel` attribute fall back to `option_<n>`; the
    canonical name stays reachable as an input key through the alias choices.
    """
    name = option.name.replace("-", "_")
    if (
        name.isidentifier()
        and not keyword.iskeyword(name)
        and not name.startswith(("_", "model_"))
        and not hasattr(BaseModel, name)
        and name not in taken
    ):
        return name
    index = len(taken)
    while f"option_{index}" in taken:
        index += 1
    return f"option_{index}"


def _option_field(option: OptionSpec) -> tuple[Any, Any]:
    annotation: Any
    if option.argument is None:
        annotation = Literal[True]
    elif option.multiple:
        annotation = list[str]
    else:
        annotation = str
    aliases = AliasChoices(option.name, *option.storage_keys)
    return annotation, Field(validation_alias=aliases, description=option.description)


def build_schema(parsed: ParsedCommand) -> SchemaValidation:
    """Derive the option and argument schemas for a resolved command."""
    options: dict[str, OptionSpec] = {}
    for node in parsed.chain():
        for option in node.spec.options:
            options[option.name] = option

    fields: dict[str, tuple[Any, Any]] = {}
    for option in options.values():
        fields[_field_name(option, set(fields))] = _option_field(option)

    model_name = "".join(part.title() for part in parsed.command_path) + "Options"
    option_schema = create_model(model_name, **fields)  # type: ignore[call-overload]

    slots = tuple(str for _ in parsed.spec.arguments)
    arguments_schema = TypeAdapter(tuple[slots])  # type: ignore[valid-type]

    return SchemaValidation(option_schema=option_schema, arguments_schema=arguments_schema)


def validate(parsed: ParsedCommand) -> tuple[str, ...]:
    """
    Check the positional arguments of a resolved command.

    Returns:
        tuple[str, ...]: The checked positional arguments.

    Raises:
        MissingArgumentError: Fewer arguments than the command declares. The
            pydantic `ValidationError` is attached as the cause.
        ArgumentValidationError: Any other structural mismatch.
    """
    schemas = build_schema(parsed)
    try:
        return schemas.arguments_schema.validate_python(parsed.arguments_parsed)
    except ValidationError as error:
        path = " ".join(parsed.command_path)
        if len(parsed.arguments_parsed) < len(parsed.spec.arguments):
            names = ", ".join(argument.name for argument in parsed.spec.arguments)
            logger.debug("[%s] Missing arguments: %s", path, names)
            raise MissingArgumentError(
                f"Missing {names} argument", parsed, error
            ) from error
        raise ArgumentValidationError(
            f"Invalid arguments for '{path}'. See {path} --help", parsed, error
        ) from error
