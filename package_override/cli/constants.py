# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import typing as t

import click
from click.decorators import FC

from package_override.cli.validations import validate_manifest_path
from package_override_tools import setup_logging


def get_warnings_as_errors_option() -> t.List[FC]:
    return [
        click.option(
            '--warnings-as-errors',
            '-W',
            is_flag=True,
            default=False,
            # eager, so logging is ready before other arguments are validated
            is_eager=True,
            expose_value=False,
            callback=lambda ctx, param, value: setup_logging(value),  # noqa: ARG005
            help='Treat warnings as errors.',
        ),
    ]


def get_manifest_path_argument() -> t.List[FC]:
    return [
        click.argument(
            'manifest_path',
            required=True,
            type=click.Path(dir_okay=False),
            callback=validate_manifest_path,
        ),
    ]


def get_overrides_argument() -> t.List[FC]:
    return [
        click.argument(
            'overrides',
            nargs=-1,
        ),
    ]
