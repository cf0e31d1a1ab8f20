# setup.py
from setuptools import setup, find_packages

setup(
    name="egg-lang",
    version="0.1.0",
    description="A small expression language with a recursive descent reader and a tree-walking evaluator",
    python_requires=">=3.10",
    packages=find_packages(include=["egg", "egg.*"]),
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["egg = egg.__main__:main"],
    },
    zip_safe=False,
)
