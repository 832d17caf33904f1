#!/usr/bin/env python

from pathlib import Path

from setuptools import find_packages, setup

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

setup(
    name="quantumutilities",
    version="0.1.0",
    license="MIT",
    packages=find_packages("src"),
    package_dir={"": "src"},
    keywords="quantum-mechanics liouville-space lindblad partial-trace",
    python_requires=">=3.9",
    install_requires=["numpy", "scipy", "matplotlib"],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    long_description=long_description,
    long_description_content_type="text/markdown",
)

# Build with:
# python setup.py sdist
#
# Local install with:
# pip install dist/*.tar.gz --user
#
# Run the tests with:
# python -m unittest discover tests
