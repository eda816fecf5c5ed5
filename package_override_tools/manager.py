# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import json
import os
import typing as t
from pathlib import Path

from .errors import ManifestError, ManifestReadError, ManifestWriteError
from .manifest import PackageManifest
from .messages import debug

JSON_INDENT = 4


def _reject_constant(name: str) -> t.NoReturn:
    raise ValueError(f'{name} is not a valid JSON value')


class ManifestManager:
    """
    Reads and writes the manifest file.
    """

    def __init__(self, path: t.Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> PackageManifest:
        try:
            content = self.path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestReadError(f'Cannot read the manifest file "{self.path}": {e}')

        try:
            tree = json.loads(content, parse_constant=_reject_constant)
        except ValueError as e:
            raise ManifestReadError(
                'Cannot parse the manifest file. Please check that\n'
                '\t{}\n'
                'is a valid JSON file\n'
                '{}'.format(self.path, e)
            )

        try:
            return PackageManifest(tree)
        except ManifestError:
            raise ManifestReadError(
                'Manifest file should be a JSON object. Please check that\n'
                '\t{}\n'
                'is a valid manifest file'.format(self.path)
            )

    def dump(
        self,
        manifest: PackageManifest,
        path: t.Optional[t.Union[str, Path]] = None,
    ) -> None:
        if path is None:
            path = self.path

        try:
            serialized = json.dumps(
                manifest.tree, indent=JSON_INDENT, ensure_ascii=False, allow_nan=False
            )
        except ValueError as e:
            raise ManifestWriteError(f'Cannot serialize the manifest "{path}": {e}')

        # lone surrogates go back to their \uXXXX escapes
        data = (serialized + os.linesep).encode('utf-8', errors='backslashreplace')

        # encoded before opening, a failed serialization leaves the file untouched
        try:
            with open(path, 'wb') as fw:
                fw.write(data)
        except OSError as e:
            raise ManifestWriteError(f'Cannot write the manifest file "{path}": {e}')

        debug(f'Manifest written to {path}')
