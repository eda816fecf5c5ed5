# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import click


def validate_manifest_path(ctx, param, value):  # noqa: ARG001
    if not value:
        raise click.BadParameter('Path to the manifest file can not be an empty string')
    return value
