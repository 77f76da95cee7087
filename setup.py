#!/usr/bin/env python3

from setuptools import setup

def read_requirements(file):
    with open(file) as f:
        return f.read().splitlines()

setup(
    name="wsdl2model",
    version="0.1",
    author="Tyler MacDonald",
    author_email="tyler@proofserve.com",
    description="Extract a normalized service model from a WSDL and its XSD imports",
    license="MIT License",
    python_requires=">=3.10",
    install_requires=read_requirements("requirements.txt"),
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'wsdl2model = wsdl2model.cmd:main'
        ]
    },
    packages = ["wsdl2model"]
)
