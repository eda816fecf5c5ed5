# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""Typed view over the tree of a package.json manifest"""

import typing as t

from package_override_tools.errors import ManifestError
from package_override_tools.messages import debug

DEPENDENCIES_KEY = 'dependencies'
DEV_DEPENDENCIES_KEY = 'devDependencies'
RESOLUTIONS_KEY = 'resolutions'


class Override(t.NamedTuple):
    name: str
    version: str


class PackageManifest:
    """
    Wraps the ordered tree loaded from the manifest file.

    The tree is modified in place, so key order of the file is kept and
    new sections are appended at the end.
    """

    def __init__(self, tree: t.Dict[str, t.Any]) -> None:
        if not isinstance(tree, dict):
            raise ManifestError('Manifest root should be a JSON object')

        self.tree = tree

    def section(self, key: str) -> t.Optional[t.Dict[str, t.Any]]:
        """Return the section if it is present and is a JSON object"""
        value = self.tree.get(key)
        if isinstance(value, dict):
            return value

        if key in self.tree:
            debug(f'Section "{key}" is not an object, skipping it')

        return None

    @property
    def dependencies(self) -> t.Optional[t.Dict[str, t.Any]]:
        return self.section(DEPENDENCIES_KEY)

    @property
    def dev_dependencies(self) -> t.Optional[t.Dict[str, t.Any]]:
        return self.section(DEV_DEPENDENCIES_KEY)

    @property
    def resolutions(self) -> t.Optional[t.Dict[str, t.Any]]:
        return self.section(RESOLUTIONS_KEY)

    def ensure_resolutions(self) -> t.Dict[str, t.Any]:
        if RESOLUTIONS_KEY not in self.tree:
            self.tree[RESOLUTIONS_KEY] = {}

        resolutions = self.resolutions
        if resolutions is None:
            raise ManifestError(
                f'Section "{RESOLUTIONS_KEY}" should be a JSON object, '
                f'got {type(self.tree[RESOLUTIONS_KEY]).__name__}'
            )

        return resolutions

    def force_version(self, override: Override) -> t.List[str]:
        """
        Apply one override. Returns keys of the dependency sections
        where the package was declared and has been overwritten.
        """
        updated = []
        declared_in = (
            (DEPENDENCIES_KEY, self.dependencies),
            (DEV_DEPENDENCIES_KEY, self.dev_dependencies),
        )
        for key, section in declared_in:
            if section is None:
                continue

            if override.name in section:
                section[override.name] = override.version
                updated.append(key)

        self.ensure_resolutions()[override.name] = override.version

        return updated
