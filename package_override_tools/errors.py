# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0


import typing as t


class FatalError(RuntimeError):
    """Generic unrecoverable runtime error"""

    exit_code = 2

    def __init__(self, *args: t.Any, **kwargs: t.Any) -> None:
        super().__init__(*args)
        exit_code = kwargs.pop('exit_code', None)
        if exit_code:
            self.exit_code = exit_code


class ProcessingError(FatalError):
    pass


class ManifestError(ProcessingError):
    """Manifest content can't be patched"""


class ManifestReadError(ManifestError):
    """Manifest file is missing, unreadable or isn't valid JSON"""


class ManifestWriteError(ProcessingError):
    """Manifest file can't be written back"""


class WarningAsExceptionError(FatalError):
    pass
