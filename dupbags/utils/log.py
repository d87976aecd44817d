"""
Logging helpers shared by all `dupbags` modules.

The library never installs handlers; it only creates loggers under the `dupbags` namespace and
logs at levels below `DEBUG` for per-operation detail, so that nothing is emitted unless a caller
explicitly asks for it.
"""

import logging

ROOT_LOGGER_NAME = "dupbags"

# Set operations are very low level, so their logs sit below `DEBUG`.
VERBOSE_LOG_LEVEL = logging.DEBUG - 1
PER_KEY_LOG_LEVEL = logging.DEBUG - 2


def get_logger(name: str) -> logging.Logger:
    """Return a logger for module `name`, which is expected to live in the `dupbags` package."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
