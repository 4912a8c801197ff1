"""
Setup configuration for the utf8totex package.

This script uses setuptools to package and distribute the utf8totex
library. It also reads the requirements and long description directly
from external files for ease of maintenance.
"""
from setuptools import find_packages, setup

VERSION = "0.1.0"


def read_requirements():
    """
    Read requirements from requirements.txt file.
    """
    with open("requirements.txt", encoding="UTF-8") as file:
        return [line.strip() for line in file if line.strip() and not line.startswith("#")]


def get_long_description():
    """
    Read README.md file.
    """
    with open("README.md", encoding="utf8") as file:
        return file.read()


setup(
    name="utf8totex",
    description="Translate UTF-8 text into TeX source, optionally passing existing TeX through.",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    license="Apache Licence, Version 2.0",
    version=VERSION,
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=read_requirements(),
    extras_require={
        "test": ["pytest>=7.4", "hypothesis>=6.90", "atheris>=2.3"],
    },
    entry_points={
        "console_scripts": [
            "utf8totex=utf8totex.cli:cli",
        ]
    },
    python_requires=">=3.11",
)
