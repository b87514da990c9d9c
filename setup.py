"""Setup for didpeer_fm package."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="didpeer_fm",
    version="0.1.0",
    author="Ferris Menzel",
    author_email="admin@example.com",
    description="did:peer numalgo 0 and numalgo 2 creation and resolution",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="",
    packages=find_packages(include=["didpeer_fm", "didpeer_fm.*"]),
    install_requires=[
        "pydid>=0.4.0",
        "multiformats>=0.3.0",
        "base58>=2.1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "didpeer = didpeer_fm.v1_0.cli:main"
        ]
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Security :: Cryptography",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    keywords="did peer did:peer multibase multicodec didcomm ssi",
)
