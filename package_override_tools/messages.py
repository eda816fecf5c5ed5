# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""Thin wrappers around the package logger, one per output level"""

from package_override_tools import HINT_LEVEL, get_logger


def debug(message: str, *args, **kwargs) -> None:
    """Printed only with PACKAGE_OVERRIDE_DEBUG_MODE=1"""
    get_logger().debug(message, *args, **kwargs)


def hint(message: str, *args, **kwargs) -> None:
    """Suggestions for the user, hidden with PACKAGE_OVERRIDE_NO_HINTS=1"""
    get_logger().log(HINT_LEVEL, message, *args, **kwargs)


def notice(message: str, *args, **kwargs) -> None:
    get_logger().info(message, *args, **kwargs)


def warn(message: str, *args, **kwargs) -> None:
    """Goes to stderr, raises WarningAsExceptionError under -W"""
    get_logger().warning(message, *args, **kwargs)


def error(message: str, *args, **kwargs) -> None:
    get_logger().error(message, *args, **kwargs)
