# setup.py
from setuptools import setup, find_packages

setup(
    name="crisp",
    version="0.1.0",
    description="A small Lisp: reader, environment and tree-walking evaluator",
    packages=find_packages(include=["crisp", "crisp.*"]),
    package_data={"crisp": ["prelude/std/*.crisp"]},
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
