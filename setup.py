# setup.py
from setuptools import setup, find_packages

setup(
    name="squll",
    version="0.1.0",
    description="Declare SQLite tables as descriptors and create them on open",
    author="Swift Fox",
    packages=find_packages(
        exclude=(
            "tests",
            "tests.*",
            "docs",
            "dist",
            "build",
        )
    ),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "squll=squll.cli.squll_create:main",
        ],
    },
)
