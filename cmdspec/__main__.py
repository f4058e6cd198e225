"""
Cmdspec CLI Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Runs a command tree described in a spec file:

    CMDSPEC_CONFIG=tools.yaml python -m cmdspec user edit 42
"""

import os
import sys
from pathlib import Path
from typing import Sequence

import yaml
from pydantic import ValidationError
from rich.markup import escape

from cmdspec.cli import main as run_spec
from cmdspec.config import loader
from cmdspec.console import console
from cmdspec.exceptions import CmdSpecError
from cmdspec.logger import logger


def find_cmdspec_config() -> Path | None:
    candidates = [
        Path(os.environ.get("CMDSPEC_CONFIG", "cmdspec.yaml")),
        Path.cwd() / "cmdspec.yaml",
        Path.cwd() / "cmdspec.toml",
        Path.cwd() / ".cmdspec.yaml",
        Path.cwd() / ".cmdspec.toml",
        Path.home() / ".config" / "cmdspec" / "cmdspec.yaml",
        Path.home() / ".config" / "cmdspec" / "cmdspec.toml",
    ]
    return next((p for p in candidates if p.exists()), None)


def bootstrap() -> Path | None:
    config_path = find_cmdspec_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def main(argv: Sequence[str] | None = None) -> None:
    config_path = bootstrap()
    if config_path is None:
        console.print(
            "[red]❌ No spec file found.[/] Set CMDSPEC_CONFIG or add cmdspec.yaml "
            "to the current directory."
        )
        sys.exit(1)
    try:
        spec = loader(config_path)
    except (CmdSpecError, ValidationError, ValueError, yaml.YAMLError) as error:
        logger.error("Failed to load spec file '%s': %s", config_path, error)
        console.print(
            f"[red]❌ Could not load '{escape(str(config_path))}':[/] {escape(str(error))}"
        )
        sys.exit(1)
    run_spec(spec, argv)


if __name__ == "__main__":
    main()
