#!/usr/bin/env python

from setuptools import find_namespace_packages, setup


VERSION = "0.1a1"

setup(
    name="sprig",
    version=VERSION,
    description="A parser for a compact subset of XML into immutable trees.",
    license="AGPL-3.0-or-later",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["sprig", "_sprig", "_sprig.*"]),
    install_requires=["httpx"],
    extras_require={
        "test": [
            "lxml",
            "pytest",
            "pytest-benchmark",
            "pytest-httpx",
        ],
    },
    entry_points={"console_scripts": ["sprig = sprig.__main__:main"]},
)
