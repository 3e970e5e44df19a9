"""
Packaging for mathnorm: library, `mathnorm` console script and a `test` extra.
"""

from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [
        line.strip() for line in fh if line.strip() and not line.startswith("#")
    ]

setup(
    name="mathnorm",
    version="0.1.0",
    author="Your Name",
    description="Convert ASCIIMath, UnicodeMath and escaped LaTeX strings to canonical LaTeX",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["mathnorm", "mathnorm.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.4", "httpx>=0.27"],
    },
    entry_points={
        "console_scripts": [
            "mathnorm=mathnorm.cli:cli",
        ],
    },
)
