"""
Setup script for the envconfig package.
"""

from setuptools import setup, find_packages

setup(
    name="envconfig",
    version="1.0.0",
    description="Typed environment variable accessors and dataclass population from .env files",
    author="envconfig Team",
    packages=find_packages(include=["envconfig", "envconfig.*"]),
    python_requires=">=3.8",
    install_requires=[
        # .env file parsing
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
        ],
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
