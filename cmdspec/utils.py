# Cmdspec CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import functools
import inspect
import logging
import os
from typing import Any, Awaitable, Callable, TypeVar

import pythonjsonlogger.json
from rich.logging import RichHandler

T = TypeVar("T")

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def is_coroutine(function: Callable[..., Any]) -> bool:
    return inspect.iscoroutinefunction(function)


def ensure_async(function: Callable[..., T]) -> Callable[..., Awaitable[T]]:
    if is_coroutine(function):
        return function  # type: ignore

    if not callable(function):
        raise TypeError(f"{function} is not callable")

    @functools.wraps(function)
    async def async_wrapper(*args, **kwargs) -> T:
        result = function(*args, **kwargs)
        if inspect.isawaitable(result):
            return await result
        return result

    return async_wrapper


def strip_flag_prefix(alias: str) -> str:
    """Turn an option alias (`--word` or `-x`) into its storage key."""
    return alias[2:] if alias.startswith("--") else alias[1:]


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def setup_logging(
    mode: str | None = None,
    log_filename: str = "cmdspec.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Install console and file handlers on the root logger.

    `mode` is "cli" (Rich console output) or "json" (one JSON object per
    record). It defaults to `CMDSPEC_LOG_MODE`, then to "json" inside a
    container and "cli" elsewhere. The file handler writes plain text unless
    `json_log_to_file` is set. Existing root handlers are replaced.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    if not mode:
        mode = os.getenv("CMDSPEC_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
    file_handler.setLevel(file_log_level)
    if json_log_to_file:
        file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers[:] = [console_handler, file_handler]
    logging.getLogger("cmdspec").debug("Logging initialized in '%s' mode.", mode)
