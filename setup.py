from __future__ import annotations

import os

from setuptools import setup


def read_version() -> str:
    """Read the version, preferring the PKG_VERSION environment variable."""
    env_version = os.getenv("PKG_VERSION", "").strip()
    if env_version:
        return env_version.lstrip("v")
    return "0.1.0"


setup(
    name="http-token-table",
    version=read_version(),
    description="HTTP token character lookup table generator and header key helpers.",
    long_description="HTTP token character lookup table generator and header key helpers.",
    long_description_content_type="text/plain",
    packages=["token_table"],
    python_requires=">=3.8",
    install_requires=[
        "pyahocorasick",
        "Levenshtein",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
