# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import json
import os
import typing as t
from pathlib import Path

import pytest

from package_override_tools import HINT_LEVEL, get_logger
from package_override_tools.environment import PackageOverrideSettings


@pytest.fixture(autouse=True)
def reset_logger():
    yield

    logger = get_logger()
    logger.setLevel(HINT_LEVEL)
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture(autouse=True)
def clean_settings_environment(monkeypatch):
    prefix = PackageOverrideSettings.model_config.get('env_prefix', '')
    for name in list(os.environ):
        if name.startswith(prefix):
            monkeypatch.delenv(name)


@pytest.fixture()
def valid_manifest():
    return {
        'name': 'test-project',
        'version': '1.0.0',
        'description': 'Test project',
        'dependencies': {
            'left-pad': '^1.0.0',
            'lodash': '~4.17.0',
        },
        'devDependencies': {
            'lodash': '4.17.0',
            'mocha': '^10.0.0',
        },
        'license': 'MIT',
    }


@pytest.fixture()
def manifest_file(tmp_path):
    def file_builder(content: t.Any, name: str = 'package.json') -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding='utf-8')
        else:
            path.write_text(json.dumps(content), encoding='utf-8')
        return path

    return file_builder


@pytest.fixture()
def read_manifest():
    def reader(path: Path) -> t.Any:
        return json.loads(path.read_text(encoding='utf-8'))

    return reader
