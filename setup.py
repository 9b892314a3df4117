# setup.py
from setuptools import setup, find_packages

setup(
    name="lisper",
    version="0.1.0",
    description="Evaluator core for a small Lisp: lexical scope, closures, special forms",
    packages=find_packages(include=["lisper", "lisper.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
