# SPDX-License-Identifier: AGPL-3.0-or-later
"""Installer for didyoumean package."""

from setuptools import setup, find_packages

VERSION_TAG = "1.0.0"

with open('README.rst', encoding='utf-8') as f:
    long_description = f.read()

with open('requirements.txt') as f:
    requirements = [l.strip() for l in f.readlines() if l.strip()]

with open('requirements-dev.txt') as f:
    dev_requirements = [l.strip() for l in f.readlines() if l.strip()]

setup(
    name='didyoumean',
    description="Did you mean? spelling suggestions above search result listings.",
    long_description=long_description,
    license="AGPL-3.0-or-later",
    python_requires=">=3.10",
    version=VERSION_TAG,
    keywords='search spellcheck suggestions solr',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    packages=find_packages(
        include=[
            'didyoumean',
            'didyoumean.*',
        ]
    ),
    package_data={
        'didyoumean': [
            'settings.yml',
        ],
    },
    install_requires=requirements,
    extras_require={'test': dev_requirements},
)
