# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0

import io
import os

import setuptools

NAME = 'override-package-version'
SHORT_DESCRIPTION = 'Force versions of packages in a package.json manifest'
LICENSE = 'Apache License 2.0'
REQUIRES = [
    'click>=8.0',
    'colorama',
    'pydantic>=2',
    'pydantic-settings>=2',
]
TEST_REQUIRES = [
    'pytest',
    'pytest-mock',
]

info = {}  # type: ignore
path = os.path.abspath(os.path.dirname(__file__))

with io.open(os.path.join(path, 'README.md'), mode='r', encoding='utf-8') as readme:
    LONG_DESCRIPTION = readme.read()

with io.open(
    os.path.join(path, 'package_override_tools', '__version__.py'), mode='r', encoding='utf-8'
) as f:
    exec(f.read(), info)  # nosec

setuptools.setup(
    name=NAME,
    description=SHORT_DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    license=LICENSE,
    version=info['__version__'],
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: Implementation :: CPython',
    ],
    packages=setuptools.find_packages(
        include=('package_override', 'package_override.*', 'package_override_tools', 'package_override_tools.*')
    ),
    scripts=[],
    install_requires=REQUIRES,
    extras_require={
        'test': TEST_REQUIRES,
    },
    python_requires='>=3.8',
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'override-package-version = package_override.cli:safe_cli',
        ],
    },
)
