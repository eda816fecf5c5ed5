# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import sys
import typing as t

import click

from package_override.core import OverrideArguments, patch
from package_override_tools import error, warn
from package_override_tools.__version__ import __version__ as package_override_version
from package_override_tools.errors import FatalError, WarningAsExceptionError

from .constants import (
    get_manifest_path_argument,
    get_overrides_argument,
    get_warnings_as_errors_option,
)
from .utils import add_options

CLI_NAME = 'override-package-version'

DEFAULT_SETTINGS: t.Dict[str, t.Any] = {
    'help_option_names': ['-h', '--help'],
    'show_default': True,
}


def initialize_cli():
    """
    Initialize the CLI.
    """

    @click.command(name=CLI_NAME, context_settings=DEFAULT_SETTINGS)
    @add_options(
        get_warnings_as_errors_option() + get_manifest_path_argument() + get_overrides_argument()
    )
    @click.version_option(
        package_override_version,
        '--version',
        prog_name=CLI_NAME,
        message='%(version)s',
        help='Print the version and exit.',
    )
    def cli(manifest_path, overrides):
        """
        Force versions of packages in the MANIFEST_PATH file.

        OVERRIDES are pairs of a package name and a version. Declared entries
        in "dependencies" and "devDependencies" are overwritten, and every
        pair is recorded in "resolutions".

        \b
        Examples:
        - $ override-package-version package.json left-pad 1.3.0
          Will force `left-pad` to `1.3.0`.
        - $ override-package-version package.json react 18.2.0 react-dom 18.2.0
          Will force both packages.
        """
        arguments = OverrideArguments.from_values(manifest_path, overrides)

        if arguments.unpaired is not None:
            warn(f'No version given for "{arguments.unpaired}", the argument is ignored')

        patch(arguments)

    return cli


def safe_cli():
    """
    CLI entry point with error handling.
    """
    try:
        cli = initialize_cli()
        cli()
    except WarningAsExceptionError as e:
        error(str(e))
        sys.exit(1)
    except FatalError as e:
        error(str(e))
        sys.exit(e.exit_code)
