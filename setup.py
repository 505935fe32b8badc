#!/usr/bin/env python3
"""
Setup script for the localized-text package
"""

from setuptools import setup, find_packages

setup(
    name="localized-text",
    version="0.1.0",
    description="Localized strings: one literal or a language map, with JSON parsing and locale resolution",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        # 📋 Data Validation & Settings
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    package_data={
        "localized_text": ["py.typed"],
    },
)
