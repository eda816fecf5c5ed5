# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""Core module of override-package-version"""

import typing as t
from dataclasses import dataclass, field
from pathlib import Path

from package_override_tools import hint, notice
from package_override_tools.manager import ManifestManager
from package_override_tools.manifest import (
    DEPENDENCIES_KEY,
    DEV_DEPENDENCIES_KEY,
    Override,
    PackageManifest,
)


def pair_overrides(values: t.Sequence[str]) -> t.Tuple[t.List[Override], t.Optional[str]]:
    """
    Split positional values into (name, version) pairs.

    Returns the pairs and the trailing value left without a version, if any.
    """
    overrides = [Override(name, version) for name, version in zip(values[::2], values[1::2])]
    unpaired = values[-1] if len(values) % 2 else None

    return overrides, unpaired


@dataclass
class OverrideArguments:
    """Parsed command line of a single run"""

    manifest_path: Path
    overrides: t.List[Override] = field(default_factory=list)
    unpaired: t.Optional[str] = None

    @classmethod
    def from_values(
        cls, manifest_path: t.Union[str, Path], values: t.Sequence[str]
    ) -> 'OverrideArguments':
        overrides, unpaired = pair_overrides(values)
        return cls(manifest_path=Path(manifest_path), overrides=overrides, unpaired=unpaired)


class ManifestPatcher:
    def __init__(self, path: t.Union[str, Path]) -> None:
        self.path = Path(path)
        self.manager = ManifestManager(self.path)

    def apply(self, manifest: PackageManifest, override: Override) -> None:
        notice(f'forcing {override.name} to version {override.version} in {self.path}')

        updated = manifest.force_version(override)
        if not updated:
            hint(
                f'"{override.name}" is not declared in {DEPENDENCIES_KEY} or {DEV_DEPENDENCIES_KEY}, '
                'only the resolution was recorded'
            )

    def patch(self, overrides: t.Iterable[Override]) -> PackageManifest:
        """
        Load the manifest, apply overrides in the given order and write it back.
        The file is rewritten even when there is nothing to override.
        """
        manifest = self.manager.load()

        for override in overrides:
            self.apply(manifest, override)

        self.manager.dump(manifest)

        return manifest


def patch(arguments: OverrideArguments) -> PackageManifest:
    return ManifestPatcher(arguments.manifest_path).patch(arguments.overrides)
