from setuptools import setup, find_packages

# Import version from the package
from mainapp.version import __version__

setup(
    name="mainapp",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    python_requires=">=3.10",
)
