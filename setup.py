#!/usr/bin/env python3
"""
Setup configuration for lrcphile
Batch lyrics fetcher for local music libraries using LRCLIB
"""

from setuptools import setup, find_packages

# Read README for long description
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Core requirements (always installed)
core_requirements = [
    "mutagen>=1.47.0",
    "requests>=2.31.0",
    "click>=8.1.7",
    "rich-click>=1.7.0",
    "rich>=13.0.0",
    "tqdm>=4.66.1",
    "pyyaml>=6.0.1",
]

test_requirements = [
    "pytest>=7.4.3",
]

setup(
    name="lrcphile",
    version="0.1.0",
    author="lrcphile",
    description="Fetch synced and plain lyrics for your local music library from LRCLIB",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/khalil-cheddadi/lrcphile",
    packages=find_packages(exclude=("tests", "tests.*")),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Sound/Audio",
    ],
    python_requires=">=3.10",
    install_requires=core_requirements,
    extras_require={
        "test": test_requirements,
        "dev": test_requirements + [
            "black>=23.11.0",
            "flake8>=6.1.0",
            "mypy>=1.7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "lrcphile=lrcphile.cli:main",
        ],
    },
    keywords="lyrics lrc lrclib music synced cli",
    project_urls={
        "Bug Reports": "https://github.com/khalil-cheddadi/lrcphile/issues",
        "Source": "https://github.com/khalil-cheddadi/lrcphile",
    },
)
