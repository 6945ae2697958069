"""
Setup script for the bowling-scorer package.

Installs the bowling_scorer package from src/ together with its
SQLite schema file.
"""

from setuptools import setup, find_packages

setup(
    name="bowling-scorer",
    version="1.0.0",
    description="Ten-pin bowling scoring and turn engine with SQLite persistence",
    author="Bowling Scorer Maintainers",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    package_data={
        "bowling_scorer._storage": ["schema.sql"],
    },
    entry_points={
        "console_scripts": [
            "bowling-scorer=bowling_scorer.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
