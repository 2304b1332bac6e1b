from __future__ import annotations

from setuptools import find_packages
from setuptools import setup

setup(
    name="devstack",
    version="0.1.0",
    packages=find_packages(include=["devstack", "devstack.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=["packaging", "python-dotenv", "pyyaml", "sentry-sdk"],
    extras_require={
        "dev": [
            "black",
            "freezegun",
            "mypy",
            "pre-commit",
            "pytest",
            "types-PyYAML",
        ],
    },
    entry_points={
        "console_scripts": [
            "devstack=devstack.main:main",
        ],
    },
)
