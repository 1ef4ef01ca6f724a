#!/usr/bin/env python3
"""
Packaging for Livshjulet.

Supports standard pip installs, including editable installs with pip install -e .
"""

from setuptools import setup, find_packages

setup(
    name="lifewheel",
    version="1.0.0",
    description="Interactive life wheel: rate eight areas of life and export the chart as PNG",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.6.0",
    ],
    extras_require={
        "test": ["pytest>=7.4.0"],
    },
    entry_points={
        "console_scripts": [
            "lifewheel=lifewheel.main:main",
        ],
    },
)
