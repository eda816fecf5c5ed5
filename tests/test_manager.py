# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import os

import pytest

from package_override_tools.errors import ManifestReadError, ManifestWriteError
from package_override_tools.manager import ManifestManager
from package_override_tools.manifest import PackageManifest


def test_load_keeps_key_order(manifest_file):
    path = manifest_file('{"z": 1, "a": {"y": 2, "b": 3}, "m": null}')

    manifest = ManifestManager(path).load()

    assert list(manifest.tree) == ['z', 'a', 'm']
    assert list(manifest.tree['a']) == ['y', 'b']


def test_load_missing_file(tmp_path):
    with pytest.raises(ManifestReadError, match='Cannot read the manifest file'):
        ManifestManager(tmp_path / 'package.json').load()


def test_load_directory(tmp_path):
    with pytest.raises(ManifestReadError):
        ManifestManager(tmp_path).load()


@pytest.mark.parametrize('content', ['', '{', '{"a": 1,}', "{'a': 1}"])
def test_load_invalid_json(manifest_file, content):
    path = manifest_file(content)

    with pytest.raises(ManifestReadError, match='is a valid JSON file'):
        ManifestManager(path).load()


@pytest.mark.parametrize('content', ['[]', '"package"', '1', 'null'])
def test_load_non_object_root(manifest_file, content):
    path = manifest_file(content)

    with pytest.raises(ManifestReadError, match='should be a JSON object'):
        ManifestManager(path).load()


def test_load_not_utf8(tmp_path):
    path = tmp_path / 'package.json'
    path.write_bytes(b'{"name": "\xff"}')

    with pytest.raises(ManifestReadError):
        ManifestManager(path).load()


def test_dump_format(tmp_path):
    path = tmp_path / 'package.json'

    ManifestManager(path).dump(
        PackageManifest({'name': 'café', 'private': True, 'files': [], 'resolutions': {}})
    )

    assert path.read_bytes().decode('utf-8') == (
        '{\n'
        '    "name": "café",\n'
        '    "private": true,\n'
        '    "files": [],\n'
        '    "resolutions": {}\n'
        '}' + os.linesep
    )


def test_dump_to_other_path(manifest_file, tmp_path, read_manifest):
    source = manifest_file({'name': 'test'})
    target = tmp_path / 'copy.json'
    manager = ManifestManager(source)

    manager.dump(manager.load(), target)

    assert read_manifest(target) == {'name': 'test'}


def test_dump_not_writable(tmp_path):
    path = tmp_path / 'missing_dir' / 'package.json'

    with pytest.raises(ManifestWriteError, match='Cannot write the manifest file'):
        ManifestManager(path).dump(PackageManifest({}))


def test_dump_lone_surrogate_escaped(manifest_file):
    path = manifest_file('{"description": "\\ud800", "dependencies": {"left-pad": "1.0.0"}}')
    manager = ManifestManager(path)

    manager.dump(manager.load())

    content = path.read_bytes().decode('utf-8')
    assert '"description": "\\ud800"' in content
    assert manager.load().tree['description'] == '\ud800'


@pytest.mark.parametrize('content', ['{"x": NaN}', '{"x": Infinity}', '{"x": [-Infinity]}'])
def test_load_non_json_constants(manifest_file, content):
    path = manifest_file(content)

    with pytest.raises(ManifestReadError, match='is not a valid JSON value'):
        ManifestManager(path).load()


def test_dump_overflowed_number_keeps_file(manifest_file):
    path = manifest_file('{"y": 1e400}')
    manager = ManifestManager(path)

    with pytest.raises(ManifestWriteError, match='Cannot serialize the manifest'):
        manager.dump(manager.load())

    assert path.read_text(encoding='utf-8') == '{"y": 1e400}'
