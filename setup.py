# setup.py
from setuptools import setup, find_packages

setup(
    name="lambic",
    version="0.1.0",
    description="A small lexically scoped Lisp interpreter",
    packages=find_packages(include=["lambic", "lambic.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lambic = lambic.cmdline:main"],
    },
    zip_safe=False,
)
