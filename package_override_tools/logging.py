# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import logging
import sys

from colorama import Fore

from package_override_tools import HINT_LEVEL, get_logger
from package_override_tools.environment import PackageOverrideSettings
from package_override_tools.errors import WarningAsExceptionError


class StdoutFilter(logging.Filter):
    """
    Progress notices, hints and debug output are written to stdout
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


class StderrFilter(logging.Filter):
    """
    Warnings and errors are written to stderr
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.WARNING


class WarningsAsErrorsFilter(logging.Filter):
    """
    Abort on the first warning when -W flag is passed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno == logging.WARNING:
            raise WarningAsExceptionError(record.getMessage())

        return True


class LevelPrefixFormatter(logging.Formatter):
    """
    Prefix every line with the name of its level, colored on terminals.
    Levels missing from ``STYLES`` fall back to their logging name.
    """

    STYLES = {
        logging.DEBUG: ('DEBUG', Fore.LIGHTBLACK_EX),
        HINT_LEVEL: ('HINT', Fore.CYAN),
        logging.INFO: ('NOTICE', Fore.GREEN),
        logging.WARNING: ('WARNING', Fore.YELLOW),
        logging.ERROR: ('ERROR', Fore.RED),
    }

    def __init__(self, colored: bool = True) -> None:
        super().__init__(fmt='%(message)s')
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        prefix, color = self.STYLES.get(record.levelno, (record.levelname, ''))
        line = f'{prefix}: {super().format(record)}'

        if self.colored and color and sys.stdout.isatty() and sys.stderr.isatty():
            return f'{color}{line}{Fore.RESET}'

        return line


def setup_logging(warnings_as_errors: bool = False) -> None:
    """Attach stdout and stderr handlers to the package logger"""
    settings = PackageOverrideSettings()
    logger = get_logger()

    if settings.DEBUG_MODE:
        logger.setLevel(logging.DEBUG)
    elif settings.NO_HINTS:
        logger.setLevel(logging.INFO)
    else:
        logger.setLevel(HINT_LEVEL)

    # repeated calls must not duplicate output
    logger.handlers.clear()

    formatter = LevelPrefixFormatter(colored=not settings.NO_COLORS)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(StdoutFilter())
    stdout_handler.setFormatter(formatter)
    logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.addFilter(StderrFilter())
    stderr_handler.setFormatter(formatter)
    logger.addHandler(stderr_handler)

    if warnings_as_errors:
        stderr_handler.addFilter(WarningsAsErrorsFilter())

    logger.propagate = False
