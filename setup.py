# !/usr/bin/env python

from setuptools import setup, find_packages

with open("README.md") as f:
    long_description = f.read()

setup(
    name="binheap",
    packages=find_packages(".", exclude=["tests", "tests.*"]),
    version="0.1.0",
    description="Binary min/max heaps",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
            "numpy",
        ],
    },
    python_requires=">=3.8",
    long_description=long_description,
    long_description_content_type="text/markdown",
)
