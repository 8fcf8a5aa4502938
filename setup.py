#! /usr/bin/env python
# -*- coding: utf-8 -*-

import os
import re
from setuptools import find_packages, setup


def load_requirements(filename):
    basedir = os.path.dirname(os.path.abspath(__file__))
    with open(os.path.join(basedir, "requirements", filename), "r") as f:
        return [
            line.rstrip("\n")
            for line in f.readlines()
            if not line.startswith(("#", "-r")) and line.rstrip("\n")
        ]


def load_version():
    basedir = os.path.dirname(os.path.abspath(__file__))
    with open(os.path.join(basedir, "src", "redefine", "_version.py"), "r") as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.M)
    return match.group(1)


install_requires = load_requirements("base.in")
test_requires = load_requirements("test.in")


trove_classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Natural Language :: English",
    "Programming Language :: Python",
    "Programming Language :: Python :: 3",
    "Topic :: Software Development :: Libraries",
    ]


setup(
    name="redefine",
    version=load_version(),
    description="Conditional in-place overrides of shared class behavior",
    long_description=open("README.rst", "r").read(),
    author="the redefine developers",
    license="GNU GPL",
    package_dir={"": "src"},
    packages=find_packages("src"),
    classifiers=trove_classifiers,
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require={
        "test": test_requires,
    },
    include_package_data=True,
)
