"""
Packaging for modelgen.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="modelgen",
    version="0.1.0",
    description="Generate Sequelize, Mongoose and MySQL code from a model description",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["modelgen", "modelgen.*"]),
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "fastapi>=0.100.0",
        "uvicorn[standard]>=0.15.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "typer>=0.9.0",
        "rich>=10.0.0",
        "httpx>=0.19.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "pytest-cov>=2.0.0",
            "black>=21.0",
            "isort>=5.0.0",
            "mypy>=0.910",
        ],
    },
    entry_points={
        "console_scripts": [
            "modelgen=modelgen.cli:app",
        ],
    },
)
