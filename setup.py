# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="owo",
    version="0.1.0",
    description="A small interpreter for a parenthesized S-expression language",
    packages=find_namespace_packages(include=["owo", "owo.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["owo=owo.__main__:main"],
    },
    zip_safe=False,
)
