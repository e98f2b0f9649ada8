# setup.py
from setuptools import setup, find_packages

setup(
    name="kappa",
    version="0.1.0",
    description="A small Lisp evaluated entirely in continuation-passing style",
    packages=find_packages(include=["kappa", "kappa.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["kappa=kappa.cli:main"],
    },
    zip_safe=False,
)
