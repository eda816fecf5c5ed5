# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
from .core import initialize_cli, safe_cli

__all__ = [
    'initialize_cli',
    'safe_cli',
]
