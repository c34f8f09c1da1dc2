#!/usr/bin/env python3
"""
Setup script for consoleapp - command-line argument classification for console applications.

This package sorts raw console tokens into switches, parameters and values
and provides a base class that ties argument processing to running the app.
"""

from setuptools import setup, find_packages
import os


# Read the README file for long description
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "consoleapp - command-line argument classification for console applications"


setup(
    name="consoleapp",
    version="1.0.0",
    author="consoleapp Development Team",
    author_email="consoleapp-dev@example.com",
    description="Command-line argument classification for console applications",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=['*.tests', '*.tests.*', 'tests*', 'docs*']),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Application Frameworks",
        "Environment :: Console",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    install_requires=[
        "PyYAML>=6.0.1",
    ],
    extras_require={
        "dev": [
            "pytest>=8.3.4",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
            "types-PyYAML>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "consoleapp-inspect=consoleapp.cli.inspect_args:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords="command line, arguments, switches, console application, cli",
)
