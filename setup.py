"""Packaging for propline (src/ layout)."""

from setuptools import find_packages, setup

setup(
    name="propline",
    version="0.1.0",
    description="Line-preserving editor for key/value properties files",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "click>=8.1",
    ],
    extras_require={
        "test": ["pytest>=8"],
    },
    entry_points={
        "console_scripts": ["propline=propline.cli:cli"],
    },
)
