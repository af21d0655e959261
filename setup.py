#!/usr/bin/env python3
"""
Setup configuration for lyric-sheet
Lyrics catalog ingestion from a published spreadsheet
"""

from setuptools import setup, find_packages

# Read README for long description
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Core requirements (always installed)
core_requirements = [
    "requests>=2.31.0",
    "pyyaml>=6.0.1",
    "python-dotenv>=1.0.0",
    "rich-click>=1.7.0",
    "tqdm>=4.66.1",
]

setup(
    name="lyric-sheet",
    version="0.1.0",
    author="lyric-sheet Team",
    description="Fetch and normalize a lyrics catalog from a published spreadsheet",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["lyric_sheet", "lyric_sheet.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Text Processing",
    ],
    python_requires=">=3.10",
    install_requires=core_requirements,
    extras_require={
        "test": [
            "pytest>=7.4.3",
        ],
        "dev": [
            "pytest>=7.4.3",
            "black>=23.11.0",
            "flake8>=6.1.0",
            "mypy>=1.7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "lyric-sheet=lyric_sheet.cli:main",
        ],
    },
    keywords="lyrics spreadsheet csv catalog youtube",
)
