# SPDX-License-Identifier: AGPL-3.0-or-later
"""Installer for the zimsuggest package."""

from setuptools import setup, find_packages

version = {}
with open('zimsuggest/version.py', encoding='utf-8') as f:
    exec(f.read(), version)  # pylint: disable=exec-used

with open('README.rst', encoding='utf-8') as f:
    long_description = f.read()

with open('requirements.txt') as f:
    requirements = [l.strip() for l in f.readlines() if l.strip()]

with open('requirements-dev.txt') as f:
    dev_requirements = [l.strip() for l in f.readlines() if l.strip()]

setup(
    name='zimsuggest',
    description="Suggestion list serializer of the archive autocompleter.",
    long_description=long_description,
    license="AGPL-3.0-or-later",
    python_requires=">=3.10",
    version=version['VERSION_TAG'],
    keywords='autocomplete suggestions search json i18n',
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    packages=find_packages(
        include=[
            'zimsuggest',
            'zimsuggest.*',
        ]
    ),
    package_data={
        'zimsuggest': [
            'settings.yml',
            'translations/**',
        ],
    },
    install_requires=requirements,
    extras_require={'test': dev_requirements},
)
