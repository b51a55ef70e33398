"""Package metadata for linestore (pure Python, src/ layout)."""

from setuptools import find_packages, setup

setup(
    name="linestore",
    version="0.1.0",
    description="Line-oriented CRUD over a single text file",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "click>=8.1",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "linestore=linestore.cli:main",
        ],
    },
)
