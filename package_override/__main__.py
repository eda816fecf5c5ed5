#!/usr/bin/env python
#
# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0

from .cli import safe_cli


def main():
    safe_cli()


if __name__ == '__main__':
    main()
