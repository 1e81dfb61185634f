"""
Setup configuration for CLOUD_ASSEMBLY_SCHEMA package.
"""

from pathlib import Path

from setuptools import find_packages, setup

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = ""
if readme_file.exists():
    long_description = readme_file.read_text(encoding="utf-8")

setup(
    name="cloud-assembly-schema",
    version="0.1.0",
    description="Versioned cloud assembly manifest protocol",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"cloud_assembly_schema.schema": ["*.json"]},
    python_requires=">=3.10",
    install_requires=[
        "jsonschema>=4.0.0",
        "semver>=3.0.0",
        "click>=8.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "cdk-manifest=cloud_assembly_schema.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="cloud assembly manifest schema versioning",
    include_package_data=True,
)
