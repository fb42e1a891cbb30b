"""Setup script for the ecolive package."""

from setuptools import find_packages, setup

setup(
    name="ecolive",
    version="0.1.0",
    description="EcoLive environmental monitoring dashboard",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pyyaml",
        "python-dotenv",
        "aiohttp",
        "rich",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-asyncio",
            "black",
            "isort",
            "mypy",
        ],
    },
    entry_points={
        "console_scripts": [
            "ecolive-dashboard=ecolive.display:main",
        ],
    },
)
