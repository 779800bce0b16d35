#!/usr/bin/env python3

from pathlib import Path

from setuptools import setup


def read(version_filepath: Path) -> str:
    with version_filepath.open("r") as fp:
        return fp.read()


def get_version(version_filepath: Path) -> str:
    for line in read(version_filepath).splitlines():
        if line.startswith("__version__"):
            delim = '"' if '"' in line else "'"
            return line.split(delim)[1]

    raise RuntimeError("Unable to find version string.")


# The directory containing this file
HERE = Path(__file__).parent

# The text of the README file
README = (HERE / "README.md").read_text()

# This call to setup() does all the work
setup(
    name="py-elementary-circuits",
    version=get_version(HERE / "py_elementary_circuits/__init__.py"),
    description="Find all elementary circuits of a directed graph with Johnson's algorithm",
    long_description=README,
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
    ],
    packages=["py_elementary_circuits"],
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=["graphviz", "networkx"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "py_elementary_circuits=py_elementary_circuits.__main__:main",
        ]
    },
)
