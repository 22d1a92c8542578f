"""
Setup script for rangesel.
"""

from setuptools import find_packages
from setuptools import setup

LIBRARY = "rangesel"

# Read version and metadata
with open(f"{LIBRARY}/__version__.py", "r", encoding="UTF8") as v:
    exec(v.read())

with open("README.md", "r", encoding="UTF8") as f:
    long_description = f.read()

setup(
    name=LIBRARY,
    version=__version__,
    description="Histogram-based selectivity estimation for range overlap joins",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=[LIBRARY, f"{LIBRARY}.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "orjson",
        "orso",
    ],
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
