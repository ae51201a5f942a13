"""
Setup script for the wtask package.
"""
from setuptools import setup, find_packages

setup(
    name="wtask",
    version="0.1.0",
    description="Run shell commands by alias from a small config file",
    author="wtask contributors",
    author_email="user@example.com",
    url="https://github.com/username/wtask",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.2",
        "prompt_toolkit>=3.0.29",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "wtask=wtask.cli:main",
            "wsearch=wtask.cli.search:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
