#!/usr/bin/env python

from setuptools import find_packages, setup

setup(
    name="pinched",
    version="0.1",
    description="Pinched supernova neutrino flux tables for event-rate calculations",
    packages=find_packages(exclude=["tests"]),
    package_data={"pinched": ["*.yaml"]},
    install_requires=["numpy", "scipy", "pyyaml"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "pinched = pinched.cli:main",
        ]
    },
)
