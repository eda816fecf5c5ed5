# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import logging as lib_logging

LOGGING_NAMESPACE = __package__
HINT_LEVEL = 15


def get_logger() -> lib_logging.Logger:
    """
    Get the logger shared by the command line tool and the manifest tools.

    Prefer it over `logging.getLogger(__name__)`, handlers are configured
    only on this logger by `setup_logging`.
    """
    return lib_logging.getLogger(LOGGING_NAMESPACE)


from package_override_tools.environment import PackageOverrideSettings  # noqa: E402
from package_override_tools.logging import setup_logging  # noqa: E402
from package_override_tools.messages import (  # noqa: E402
    debug,
    error,
    hint,
    notice,
    warn,
)

__all__ = [
    'HINT_LEVEL',
    'LOGGING_NAMESPACE',
    'PackageOverrideSettings',
    'debug',
    'error',
    'get_logger',
    'hint',
    'notice',
    'setup_logging',
    'warn',
]
