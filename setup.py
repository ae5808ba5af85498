#!/usr/bin/env python
"""Python package description."""

from pathlib import Path

from setuptools import setup

setup(
    name="pycarwingsapi",
    version="0.1.0",
    description="Python library and CLI for communicating with the Nissan Carwings API.",
    long_description=Path("README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    include_package_data=True,
    license="MIT",
    packages=["pycarwingsapi"],
    python_requires=">=3.10",
    install_requires=["httpx<1", "pycryptodome", "rich", "tzdata"],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": ["carwings=pycarwingsapi.cli:cli"],
    },
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python",
        "Operating System :: OS Independent",
    ],
)
