from setuptools import setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name             = "pydlydecoder",
    version          = "0.1.0",
    description      = "Python module to decode GHCN-Daily fixed-width .dly records",
    long_description = long_description,
    long_description_content_type = "text/markdown",
    packages         = [
        "pydlydecoder",
        "pydlydecoder.dly"
    ],
    python_requires  = ">=3.7",
    extras_require   = {
        "test": ["pytest"]
    },
    classifiers = [
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3"
    ]
)
