# Cmdspec CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used for help output and CLI error reporting."""
from rich.console import Console

console = Console(highlight=False)
