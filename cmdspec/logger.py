# Cmdspec CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for the cmdspec engine."""
import logging

logger: logging.Logger = logging.getLogger("cmdspec")
