# setup.py
from setuptools import setup, find_packages

setup(
    name="nock",
    version="0.1.0",
    description="A Nock interpreter: nouns, tree addressing and the twelve reduction rules",
    packages=find_packages(include=["nock", "nock.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
