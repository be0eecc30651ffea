#!/usr/bin/env python

from os.path import abspath, dirname, join

from setuptools import find_packages, setup

with open(join(dirname(abspath(__file__)), "set_oplog", "version.py")) as version_file:
    exec(compile(version_file.read(), "version.py", "exec"))

setup(
    name="set_oplog",
    version=version,  # noqa
    description="Applies a log of add/remove commands to a set of integers and reports the sorted result",
    packages=find_packages(exclude=["tests"]),
    # 3.6 and up, but not Python 4
    python_requires="~=3.6",
    install_requires=[
        "attrs>=19.2.0",
        "immutablecollections>=0.12.0",
        "vistautils>=0.21.0",
    ],
    extras_require={"tests": ["pytest"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
