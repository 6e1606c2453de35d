from pathlib import Path

from setuptools import find_packages
from setuptools import setup


HERE = Path(__file__).resolve().parent


setup(
    name="matomo-tracker",
    version="1.0.0",
    description="Query parameter vocabulary of the Matomo tracking HTTP API",
    long_description=(HERE / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    license="BSD-3-Clause",
    packages=find_packages(exclude=["tests*", "benchmarks*", "scripts*"]),
    package_data={
        "matomo_tracker": ["py.typed"],
    },
    python_requires=">=3.8",
    install_requires=[
        "envier~=0.6",
        "debtcollector>=2.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "mock",
            "hypothesis",
        ],
    },
    zip_safe=False,
)
