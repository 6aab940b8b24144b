# setup.py
from setuptools import setup, find_packages

setup(
    name="site_export",
    version="0.1.0",
    description="Asynchronous static exporter for running websites",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "aiohttp>=3.9",
        "click>=8.1",
        "playwright>=1.40",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4,<9",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["site-export=site_export.cli:cli"],
    },
    python_requires=">=3.11",
)
