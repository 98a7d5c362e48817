#!/usr/bin/env python3
"""
agent-config – setup configuration
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Configuration coercion and validation for AI agent runtimes.
"""

import re
from pathlib import Path

from setuptools import setup, find_packages

ROOT = Path(__file__).parent
README = ROOT / "README.md"

# Read version from package without importing it
_init = (ROOT / "agent_config" / "__init__.py").read_text(encoding="utf-8")
version = re.search(r'^__version__ = "([^"]+)"', _init, re.M).group(1)

# Read long description
long_description = ""
if README.exists():
    long_description = README.read_text(encoding="utf-8")

# --------------------------------------------------------------------------- #
# Production dependencies
# --------------------------------------------------------------------------- #
INSTALL_REQUIRES = [
    # Models / settings
    "pydantic>=2.6.0,<3.0.0",
    "pydantic-settings>=2.1.0,<3.0.0",

    # Logging config
    "PyYAML>=6.0,<7.0",

    # Utilities
    "python-dotenv>=1.0.0,<2.0.0",
    "rich>=13.6.0,<15.0.0",
    "typer>=0.9.0,<1.0.0",
]

# Development dependencies
DEV_REQUIRES = [
    # Testing
    "pytest>=7.4.0,<9.0.0",
    "pytest-cov>=4.1.0,<6.0.0",

    # Code Quality
    "ruff>=0.4.0,<1.0.0",
    "black>=24.3.0,<25.0.0",
    "isort>=5.13.0,<6.0.0",
    "mypy>=1.10.0,<2.0.0",
    "types-PyYAML>=6.0.0",
]

# --------------------------------------------------------------------------- #
# Setup configuration
# --------------------------------------------------------------------------- #
setup(
    name="agent-config",
    version=version,
    description="Configuration coercion and validation for AI agent runtimes",
    long_description=long_description,
    long_description_content_type="text/markdown",

    # Package configuration
    packages=find_packages(
        include=["agent_config", "agent_config.*"],
        exclude=["tests*", "docs*", "examples*", "scripts*"]
    ),
    include_package_data=True,
    package_data={
        "agent_config": ["py.typed"],
    },

    # Python version requirement
    python_requires=">=3.9",

    # Dependencies
    install_requires=INSTALL_REQUIRES,
    extras_require={
        "dev": DEV_REQUIRES,
        "test": [
            "pytest>=7.4.0,<9.0.0",
            "pytest-cov>=4.1.0,<6.0.0",
        ],
    },

    # Console scripts
    entry_points={
        "console_scripts": [
            "agent-config=agent_config.cli:main",
        ],
    },

    # Classifiers
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Framework :: Pydantic",
        "Framework :: Pytest",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Typing :: Typed",
    ],

    # Keywords
    keywords=["configuration", "validation", "agents", "llm", "pydantic"],

    # License
    license="Apache-2.0",

    # Additional metadata
    zip_safe=False,
    platforms=["any"],
)
